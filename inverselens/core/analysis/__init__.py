"""
Analysis engine package.

Exports:
  - AnalysisEngine: two-phase Gemini analysis (original, then mirror)
  - AnalysisPerspective, AnalysisResult, ImageAnalysisRecord: shared schemas
"""

from inverselens.core.analysis.analysis_engine import AnalysisEngine, parse_perspective
from inverselens.core.analysis.analysis_schema import (
    AnalysisPerspective,
    AnalysisResult,
    ImageAnalysisRecord,
)

__all__ = [
    "AnalysisEngine",
    "AnalysisPerspective",
    "AnalysisResult",
    "ImageAnalysisRecord",
    "parse_perspective",
]
