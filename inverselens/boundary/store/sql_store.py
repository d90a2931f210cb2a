"""
Relational record store.

Persists analysis records in the ``image_analyses`` table through
SQLAlchemy's async engine. Each operation runs in its own session and
transaction; concurrency is left to the database.

Dependencies: sqlalchemy, inverselens.boundary.db
System role: Durable RecordStore backend
"""

import logging
from datetime import timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from inverselens.boundary.db.base import Base
from inverselens.boundary.db.connection import get_async_session_factory
from inverselens.boundary.db.CRUD.image_analysis_crud import (
    ImageAnalysisCRUD,
    image_analysis_crud,
)
from inverselens.boundary.db.models.image_analysis_model import ImageAnalysisModel
from inverselens.boundary.store.elements_codec import decode_elements, encode_elements
from inverselens.boundary.store.record_store import RecordStore
from inverselens.core.analysis.analysis_schema import (
    AnalysisPerspective,
    ImageAnalysisRecord,
)
from inverselens.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)

# Driver connect failures (refused or timed out) surface as OSError
# and are not wrapped by SQLAlchemy; corrupt rows surface as ValueError.
STORE_ERRORS = (SQLAlchemyError, OSError, ValueError)


def record_to_columns(record: ImageAnalysisRecord) -> dict:
    """Flatten a record into ImageAnalysisModel column values."""
    return {
        "id": record.id,
        "original_filename": record.original_filename,
        "image_data": record.image_data,
        "original_description": record.original.description,
        "original_elements": encode_elements(record.original.elements),
        "original_mood": record.original.mood,
        "mirror_description": record.mirror.description,
        "mirror_elements": encode_elements(record.mirror.elements),
        "mirror_mood": record.mirror.mood,
        "created_at": record.created_at,
    }


def row_to_record(row: ImageAnalysisModel) -> ImageAnalysisRecord:
    """
    Rebuild a record from a table row.

    SQLite drops tzinfo on read; naive timestamps are treated as UTC.
    """
    created_at = row.created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)

    return ImageAnalysisRecord(
        id=row.id,
        original_filename=row.original_filename,
        image_data=row.image_data,
        original=AnalysisPerspective(
            description=row.original_description,
            elements=decode_elements(row.original_elements),
            mood=row.original_mood,
        ),
        mirror=AnalysisPerspective(
            description=row.mirror_description,
            elements=decode_elements(row.mirror_elements),
            mood=row.mirror_mood,
        ),
        created_at=created_at,
    )


class SQLRecordStore(RecordStore):
    """RecordStore backed by a relational table."""

    def __init__(
        self,
        engine: AsyncEngine,
        create_tables: bool = True,
        crud: ImageAnalysisCRUD = image_analysis_crud,
    ) -> None:
        """
        Initialize store on an async engine.

        Args:
            engine: Async SQLAlchemy engine (owned by the store, disposed on close)
            create_tables: Create missing tables during initialize()
            crud: CRUD helper for the image_analyses table
        """
        self._engine = engine
        self._session_factory = get_async_session_factory(engine)
        self._create_tables = create_tables
        self._crud = crud

    async def initialize(self) -> None:
        if not self._create_tables:
            return
        try:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except STORE_ERRORS as e:
            logger.exception(f"{__name__}:initialize - Table creation failed")
            raise PersistenceError(
                "Failed to initialize record store.", operation="initialize"
            ) from e
        logger.info(f"{__name__}:initialize - Tables ready")

    async def close(self) -> None:
        await self._engine.dispose()

    async def put(self, record: ImageAnalysisRecord) -> ImageAnalysisRecord:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    row = await self._crud.create(session, **record_to_columns(record))
                stored = row_to_record(row)
        except STORE_ERRORS as e:
            logger.exception(
                f"{__name__}:put - FAILED record_id={record.id} - {type(e).__name__}"
            )
            raise PersistenceError(
                "Failed to save analysis.",
                operation="put",
                details={"record_id": record.id},
            ) from e
        logger.debug(f"{__name__}:put - Stored record_id={stored.id}")
        return stored

    async def get_by_id(self, record_id: str) -> ImageAnalysisRecord | None:
        try:
            async with self._session_factory() as session:
                row = await self._crud.get_by_id(session, record_id)
                return row_to_record(row) if row is not None else None
        except STORE_ERRORS as e:
            logger.exception(
                f"{__name__}:get_by_id - FAILED record_id={record_id} - {type(e).__name__}"
            )
            raise PersistenceError(
                "Failed to fetch analysis.",
                operation="get_by_id",
                details={"record_id": record_id},
            ) from e

    async def list_recent(self, limit: int) -> list[ImageAnalysisRecord]:
        try:
            async with self._session_factory() as session:
                rows = await self._crud.get_recent(session, limit=limit)
                return [row_to_record(row) for row in rows]
        except STORE_ERRORS as e:
            logger.exception(f"{__name__}:list_recent - FAILED limit={limit} - {type(e).__name__}")
            raise PersistenceError(
                "Failed to fetch recent analyses.", operation="list_recent"
            ) from e
