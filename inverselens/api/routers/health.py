"""
Health check API endpoint.

Routes: GET /health

System role: Liveness probe
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request

from inverselens.models.health import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Basic liveness check with server time and uptime."""
    started_at = getattr(request.app.state, "started_at", time.monotonic())
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(),
        uptime=round(time.monotonic() - started_at, 3),
    )
