"""
Analysis record service orchestrator.

Coordinates image analysis and record persistence: validates the upload,
runs the two-phase analysis, stores the resulting record, and serves
lookups by id and recency.

Dependencies: inverselens.core.analysis, inverselens.boundary.store
System role: Analysis use case orchestration
"""

import base64
import logging
import uuid
from datetime import datetime, timezone

from inverselens.boundary.store.record_store import RecordStore
from inverselens.core.analysis.analysis_engine import DEFAULT_MIME_TYPE, AnalysisEngine
from inverselens.core.analysis.analysis_schema import ImageAnalysisRecord
from inverselens.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_RECENT_LIMIT = 10
MAX_RECENT_LIMIT = 100


class AnalysisRecordService:
    """Analysis record service orchestrator."""

    def __init__(self, engine: AnalysisEngine, store: RecordStore) -> None:
        """
        Initialize service with its collaborators.

        Args:
            engine: Two-phase analysis engine
            store: Record store chosen at startup
        """
        self.engine = engine
        self.store = store

    async def submit(
        self,
        image_bytes: bytes,
        original_filename: str,
        mime_type: str | None = None,
    ) -> ImageAnalysisRecord:
        """
        Analyze an uploaded image and persist the result.

        Nothing is stored unless both analysis phases complete.

        Args:
            image_bytes: Raw image content
            original_filename: Filename as supplied by the uploader
            mime_type: Upload content type, forwarded to the model

        Returns:
            ImageAnalysisRecord: The stored record

        Raises:
            ValidationError: If image_bytes is empty
            AnalysisError: If the analysis engine fails
            PersistenceError: If the record cannot be stored
        """
        if not image_bytes:
            raise ValidationError("Image file is empty", field="image")

        logger.info(
            f"{__name__}:submit - START filename={original_filename}, size={len(image_bytes)}"
        )

        result = await self.engine.analyze(image_bytes, mime_type=mime_type or DEFAULT_MIME_TYPE)

        record = ImageAnalysisRecord(
            id=str(uuid.uuid4()),
            original_filename=original_filename,
            image_data=base64.b64encode(image_bytes).decode("ascii"),
            original=result.original,
            mirror=result.mirror,
            created_at=datetime.now(timezone.utc),
        )
        stored = await self.store.put(record)

        logger.info(f"{__name__}:submit - END record_id={stored.id}")
        return stored

    async def get(self, record_id: str) -> ImageAnalysisRecord | None:
        """
        Get analysis record by ID.

        Args:
            record_id: Record identifier

        Returns:
            ImageAnalysisRecord if found, None otherwise
        """
        return await self.store.get_by_id(record_id)

    async def list_recent(self, limit: int | None = None) -> list[ImageAnalysisRecord]:
        """
        Get the most recent analysis records, newest first.

        Args:
            limit: Maximum number of records; None or <= 0 means DEFAULT_RECENT_LIMIT,
                values above MAX_RECENT_LIMIT are capped

        Returns:
            list[ImageAnalysisRecord]: At most ``limit`` records
        """
        if limit is None or limit <= 0:
            limit = DEFAULT_RECENT_LIMIT
        limit = min(limit, MAX_RECENT_LIMIT)
        return await self.store.list_recent(limit)
