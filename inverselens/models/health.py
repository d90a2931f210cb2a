"""Health check response model."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness probe response."""

    status: str = Field(description="Always 'ok' while the process serves requests")
    timestamp: str = Field(description="Current server time (ISO-8601, UTC)")
    uptime: float = Field(description="Seconds since the application started")
