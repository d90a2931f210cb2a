"""Service orchestrators."""

from .analysis_service import DEFAULT_RECENT_LIMIT, MAX_RECENT_LIMIT, AnalysisRecordService

__all__ = [
    "AnalysisRecordService",
    "DEFAULT_RECENT_LIMIT",
    "MAX_RECENT_LIMIT",
]
