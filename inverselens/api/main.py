"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, inverselens.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from inverselens.api.deps import get_service_cache
from inverselens.configs import get_settings
from inverselens.observability.logger import configure_logging
from inverselens.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)
from .routers import analysis_router, health_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Selects and initializes the record store once, builds the analysis
    engine, and releases both on shutdown.
    """
    configure_logging(get_settings().log_level)
    logger = logging.getLogger("uvicorn")

    # Startup
    logger.info("Initializing record store and analysis engine...")
    cache = get_service_cache()
    await cache.record_store.initialize()
    _ = cache.analysis_engine
    logger.info("Services ready")

    yield

    # Shutdown
    await cache.record_store.close()
    cache.clear()
    logger.info("Service cache cleared")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as ``{"message": ...}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation errors as ``{"message": ...}`` with HTTP 400."""
    return JSONResponse(status_code=400, content={"message": "Invalid request"})


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="InverseLens API",
        debug=get_settings().debug,
        description="Image analysis with a mirror-universe interpretation",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.started_at = time.monotonic()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Observability middleware; correlation is outermost so request logs carry the ID
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(health_router, prefix="/api")
    app.include_router(analysis_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "inverselens.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
