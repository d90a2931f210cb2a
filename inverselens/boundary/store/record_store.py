"""
Record store contract.

Both backends implement this interface; one is chosen at process start
and injected into the analysis service.

Dependencies: abc
System role: Storage abstraction for analysis records
"""

from abc import ABC, abstractmethod

from inverselens.core.analysis.analysis_schema import ImageAnalysisRecord


class RecordStore(ABC):
    """Keyed, append-only storage for ImageAnalysisRecord.

    Implementations must tolerate concurrent put/get_by_id/list_recent calls
    from multiple in-flight requests. Callers supply id and created_at;
    ids are never reused.
    """

    async def initialize(self) -> None:
        """Prepare backing resources. Called once at startup."""

    async def close(self) -> None:
        """Release backing resources. Called once at shutdown."""

    @abstractmethod
    async def put(self, record: ImageAnalysisRecord) -> ImageAnalysisRecord:
        """
        Persist a new record.

        Args:
            record: Fully populated record

        Returns:
            ImageAnalysisRecord: The record as stored

        Raises:
            PersistenceError: If the record cannot be written
        """

    @abstractmethod
    async def get_by_id(self, record_id: str) -> ImageAnalysisRecord | None:
        """
        Look up a record by id.

        Returns:
            ImageAnalysisRecord if found, None otherwise

        Raises:
            PersistenceError: If the store cannot be read
        """

    @abstractmethod
    async def list_recent(self, limit: int) -> list[ImageAnalysisRecord]:
        """
        Return up to ``limit`` records, newest ``created_at`` first.

        Raises:
            PersistenceError: If the store cannot be read
        """
