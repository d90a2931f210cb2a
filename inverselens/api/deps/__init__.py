"""API-specific dependencies."""

from .dependencies import ServiceCache, get_analysis_service, get_service_cache

__all__ = [
    "ServiceCache",
    "get_analysis_service",
    "get_service_cache",
]
