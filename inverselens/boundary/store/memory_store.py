"""
In-memory record store.

Keeps records in a dict for local development. Everything is lost when the
process restarts.

Dependencies: asyncio
System role: Ephemeral RecordStore backend
"""

import asyncio
import logging

from inverselens.boundary.store.record_store import RecordStore
from inverselens.core.analysis.analysis_schema import ImageAnalysisRecord
from inverselens.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class InMemoryRecordStore(RecordStore):
    """Dict-backed RecordStore guarded by an asyncio lock."""

    def __init__(self) -> None:
        self._records: dict[str, ImageAnalysisRecord] = {}
        self._lock = asyncio.Lock()

    async def put(self, record: ImageAnalysisRecord) -> ImageAnalysisRecord:
        async with self._lock:
            if record.id in self._records:
                raise PersistenceError(
                    "Failed to save analysis.",
                    operation="put",
                    details={"record_id": record.id, "reason": "duplicate id"},
                )
            self._records[record.id] = record
        logger.debug(f"{__name__}:put - Stored record_id={record.id}")
        return record

    async def get_by_id(self, record_id: str) -> ImageAnalysisRecord | None:
        async with self._lock:
            return self._records.get(record_id)

    async def list_recent(self, limit: int) -> list[ImageAnalysisRecord]:
        async with self._lock:
            records = list(self._records.values())
        # Newest insertion first, so the stable sort breaks timestamp ties that way
        records.reverse()
        records.sort(key=lambda record: record.created_at, reverse=True)
        return records[:limit]
