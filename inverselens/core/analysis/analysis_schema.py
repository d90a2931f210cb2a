"""Analysis schemas for engine results and persisted records.

This module defines:
- AnalysisPerspective: one interpretation of an image (description, elements, mood)
- AnalysisResult: the original/mirror pair produced by the engine
- ImageAnalysisRecord: the persisted unit combining upload metadata and both perspectives

Dependencies: pydantic, datetime
System role: Data schemas shared by engine, service and record stores
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AnalysisPerspective(BaseModel):
    """One structured interpretation of an image.

    Element count is only requested from the model (at most 4);
    this type does not enforce it.
    """

    model_config = ConfigDict(frozen=True)

    description: str = Field(description="Free-text description of the image")
    elements: list[str] = Field(
        default_factory=list,
        description="Key visual elements, most important first",
    )
    mood: str = Field(description="Overall mood or atmosphere")


class AnalysisResult(BaseModel):
    """Two-perspective output of a single engine run."""

    model_config = ConfigDict(frozen=True)

    original: AnalysisPerspective = Field(description="Literal interpretation")
    mirror: AnalysisPerspective = Field(
        description="Inverted interpretation generated from the original"
    )


class ImageAnalysisRecord(BaseModel):
    """Persisted analysis of one uploaded image.

    Created once per successful analysis and never updated.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Opaque unique identifier (UUID4 string)")
    original_filename: str = Field(description="Filename as supplied by the uploader")
    image_data: str = Field(description="Base64-encoded original image")
    original: AnalysisPerspective
    mirror: AnalysisPerspective
    created_at: datetime = Field(description="Creation time (UTC), recency ordering key")
