"""Analysis API response models.

Defines Pydantic DTOs for API contracts. Field names are snake_case in
Python and camelCase on the wire.

Dependencies: pydantic
System role: API data models for analysis endpoints
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from inverselens.core.analysis.analysis_schema import (
    AnalysisPerspective,
    ImageAnalysisRecord,
)


class CamelModel(BaseModel):
    """Base DTO serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PerspectiveResponse(CamelModel):
    """One interpretation of the image."""

    description: str = Field(description="Free-text description")
    elements: list[str] = Field(description="Up to 4 key visual elements")
    mood: str = Field(description="Overall mood or atmosphere")

    @classmethod
    def from_perspective(cls, perspective: AnalysisPerspective) -> "PerspectiveResponse":
        return cls(
            description=perspective.description,
            elements=list(perspective.elements),
            mood=perspective.mood,
        )


class AnalyzeImageResponse(CamelModel):
    """Result of POST /analyze-image."""

    id: str = Field(description="Identifier of the stored analysis")
    original: PerspectiveResponse
    mirror: PerspectiveResponse

    @classmethod
    def from_record(cls, record: ImageAnalysisRecord) -> "AnalyzeImageResponse":
        return cls(
            id=record.id,
            original=PerspectiveResponse.from_perspective(record.original),
            mirror=PerspectiveResponse.from_perspective(record.mirror),
        )


class AnalysisDetailResponse(CamelModel):
    """Full stored analysis, without the image payload."""

    id: str
    original_filename: str
    original: PerspectiveResponse
    mirror: PerspectiveResponse
    created_at: datetime

    @classmethod
    def from_record(cls, record: ImageAnalysisRecord) -> "AnalysisDetailResponse":
        return cls(
            id=record.id,
            original_filename=record.original_filename,
            original=PerspectiveResponse.from_perspective(record.original),
            mirror=PerspectiveResponse.from_perspective(record.mirror),
            created_at=record.created_at,
        )


class RecentAnalysisItem(CamelModel):
    """Summary row for GET /recent-analyses."""

    id: str
    original_filename: str
    created_at: datetime

    @classmethod
    def from_record(cls, record: ImageAnalysisRecord) -> "RecentAnalysisItem":
        return cls(
            id=record.id,
            original_filename=record.original_filename,
            created_at=record.created_at,
        )


class ErrorResponse(BaseModel):
    """Error body returned for every non-2xx response."""

    message: str
