"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: inverselens.configs, inverselens.application, inverselens.boundary
System role: DI container for service injection
"""

from inverselens.application.services import AnalysisRecordService
from inverselens.boundary.store import RecordStore, get_record_store
from inverselens.configs import get_settings
from inverselens.core.analysis import AnalysisEngine


class ServiceCache:
    """Container for process-wide service instances."""

    def __init__(self):
        self._record_store: RecordStore | None = None
        self._analysis_engine: AnalysisEngine | None = None

    @property
    def record_store(self) -> RecordStore:
        """Get cached record store, selected once from settings."""
        if self._record_store is None:
            self._record_store = get_record_store(get_settings())
        return self._record_store

    @property
    def analysis_engine(self) -> AnalysisEngine:
        """Get cached analysis engine with its Gemini client."""
        if self._analysis_engine is None:
            gemini = get_settings().gemini
            self._analysis_engine = AnalysisEngine.from_api_key(
                google_api_key=gemini.api_key,
                model_id=gemini.model,
                timeout_seconds=gemini.request_timeout_seconds,
            )
        return self._analysis_engine

    def clear(self) -> None:
        """Clear all cached instances."""
        self._record_store = None
        self._analysis_engine = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_analysis_service() -> AnalysisRecordService:
    """
    Get analysis record service instance.

    Returns:
        AnalysisRecordService: Service wired to the cached engine and store
    """
    cache = get_service_cache()
    return AnalysisRecordService(
        engine=cache.analysis_engine,
        store=cache.record_store,
    )
