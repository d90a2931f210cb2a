"""
Image analysis API endpoints.

Routes:
- POST /analyze-image - Upload an image and run the original + mirror analysis
- GET /analysis/{analysis_id} - Retrieve a stored analysis
- GET /recent-analyses - List the most recent analyses

Dependencies: inverselens.application.services, inverselens.models
System role: Analysis HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status

from inverselens.api.deps import get_analysis_service
from inverselens.api.routers.router_utils import (
    handle_analysis_errors,
    parse_limit,
    read_image_upload,
)
from inverselens.application.services import AnalysisRecordService
from inverselens.models.analysis import (
    AnalysisDetailResponse,
    AnalyzeImageResponse,
    ErrorResponse,
    RecentAnalysisItem,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"])


@router.post(
    "/analyze-image",
    response_model=AnalyzeImageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@handle_analysis_errors
async def analyze_image(
    image: UploadFile | None = File(default=None),
    analysis_service: AnalysisRecordService = Depends(get_analysis_service),
) -> AnalyzeImageResponse:
    """
    Analyze an uploaded image and store the result.

    The image is described literally first; that description is then inverted
    into a mirror-universe interpretation.

    Args:
        image: Multipart file field ``image`` (image/*, at most 10MB)
        analysis_service: Injected AnalysisRecordService

    Returns:
        AnalyzeImageResponse: Record id with original and mirror perspectives

    Raises:
        HTTPException(400): Missing, empty, oversize or non-image upload
        HTTPException(500): Analysis or persistence failed
    """
    if image is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No image file provided")

    image_bytes = await read_image_upload(image)
    record = await analysis_service.submit(
        image_bytes,
        original_filename=image.filename or "",
        mime_type=image.content_type,
    )

    logger.info(
        "Image analyzed",
        extra={"analysis_id": record.id, "file_name": record.original_filename},
    )
    return AnalyzeImageResponse.from_record(record)


@router.get(
    "/analysis/{analysis_id}",
    response_model=AnalysisDetailResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@handle_analysis_errors
async def get_analysis(
    analysis_id: str,
    analysis_service: AnalysisRecordService = Depends(get_analysis_service),
) -> AnalysisDetailResponse:
    """
    Get a stored analysis by ID.

    Raises:
        HTTPException(404): Analysis not found
        HTTPException(500): Store unavailable
    """
    record = await analysis_service.get(analysis_id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Analysis not found")
    return AnalysisDetailResponse.from_record(record)


@router.get(
    "/recent-analyses",
    response_model=list[RecentAnalysisItem],
    responses={500: {"model": ErrorResponse}},
)
@handle_analysis_errors
async def get_recent_analyses(
    limit: str | None = Query(default=None, description="Maximum number of analyses (default 10)"),
    analysis_service: AnalysisRecordService = Depends(get_analysis_service),
) -> list[RecentAnalysisItem]:
    """
    List the most recent analyses, newest first, without their perspectives.

    An absent, unparseable or non-positive ``limit`` falls back to 10.
    """
    records = await analysis_service.list_recent(parse_limit(limit))
    return [RecentAnalysisItem.from_record(record) for record in records]
