"""
Test suite for AnalysisRecordService.

Tests submission (validation, analysis, persistence atomicity), lookup and
recency listing. Uses a mocked engine or a stub Gemini client with the
in-memory store.

System role: Verification of analysis service orchestration layer
"""

import base64
import uuid
from unittest.mock import AsyncMock

import pytest

from inverselens.application.services.analysis_service import (
    DEFAULT_RECENT_LIMIT,
    MAX_RECENT_LIMIT,
    AnalysisRecordService,
)
from inverselens.boundary.store.memory_store import InMemoryRecordStore
from inverselens.core.analysis.analysis_engine import AnalysisEngine
from inverselens.core.analysis.analysis_schema import AnalysisPerspective, AnalysisResult
from inverselens.core.exceptions import AnalysisError, PersistenceError, ValidationError

ORIGINAL = AnalysisPerspective(description="a red circle", elements=["red", "circle"], mood="calm")
MIRROR = AnalysisPerspective(description="a blue square", elements=["blue", "square"], mood="chaotic")


@pytest.fixture
def mock_engine() -> AsyncMock:
    """Provide mock AnalysisEngine returning a fixed result."""
    engine = AsyncMock(spec=AnalysisEngine)
    engine.analyze.return_value = AnalysisResult(original=ORIGINAL, mirror=MIRROR)
    return engine


@pytest.fixture
def analysis_service(mock_engine: AsyncMock, memory_store: InMemoryRecordStore) -> AnalysisRecordService:
    """Provide AnalysisRecordService with mocked engine and in-memory store."""
    return AnalysisRecordService(engine=mock_engine, store=memory_store)


class TestAnalysisServiceInit:
    """Test suite for AnalysisRecordService initialization."""

    def test_init_should_store_injected_collaborators(self, mock_engine, memory_store) -> None:
        service = AnalysisRecordService(engine=mock_engine, store=memory_store)

        assert service.engine is mock_engine
        assert service.store is memory_store


class TestAnalysisServiceSubmit:
    """Test suite for AnalysisRecordService.submit."""

    async def test_submit_should_persist_complete_record(
        self, analysis_service, memory_store, fake_image_bytes: bytes
    ) -> None:
        # Act
        record = await analysis_service.submit(fake_image_bytes, "circle.png")

        # Assert
        assert record.original == ORIGINAL
        assert record.mirror == MIRROR
        assert record.original_filename == "circle.png"
        assert base64.b64decode(record.image_data) == fake_image_bytes
        assert uuid.UUID(record.id).version == 4
        assert record.created_at.tzinfo is not None
        assert await memory_store.get_by_id(record.id) == record

    async def test_submit_should_generate_fresh_ids(self, analysis_service, fake_image_bytes) -> None:
        first = await analysis_service.submit(fake_image_bytes, "a.png")
        second = await analysis_service.submit(fake_image_bytes, "a.png")

        assert first.id != second.id

    async def test_submit_should_forward_mime_type(
        self, analysis_service, mock_engine, fake_image_bytes
    ) -> None:
        await analysis_service.submit(fake_image_bytes, "a.webp", mime_type="image/webp")

        mock_engine.analyze.assert_awaited_once_with(fake_image_bytes, mime_type="image/webp")

    async def test_submit_should_default_mime_type_to_jpeg(
        self, analysis_service, mock_engine, fake_image_bytes
    ) -> None:
        await analysis_service.submit(fake_image_bytes, "a.jpg")

        mock_engine.analyze.assert_awaited_once_with(fake_image_bytes, mime_type="image/jpeg")

    async def test_submit_should_reject_empty_bytes_before_analysis(
        self, analysis_service, mock_engine
    ) -> None:
        with pytest.raises(ValidationError):
            await analysis_service.submit(b"", "empty.png")

        mock_engine.analyze.assert_not_called()

    async def test_submit_should_persist_nothing_when_analysis_fails(
        self, analysis_service, mock_engine, memory_store, fake_image_bytes
    ) -> None:
        # Arrange
        mock_engine.analyze.side_effect = AnalysisError(phase="mirror")

        # Act & Assert
        with pytest.raises(AnalysisError):
            await analysis_service.submit(fake_image_bytes, "a.png")

        assert await memory_store.list_recent(10) == []

    async def test_submit_should_propagate_persistence_error(
        self, mock_engine, fake_image_bytes
    ) -> None:
        store = AsyncMock(spec=InMemoryRecordStore)
        store.put.side_effect = PersistenceError("Failed to save analysis.", operation="put")
        service = AnalysisRecordService(engine=mock_engine, store=store)

        with pytest.raises(PersistenceError):
            await service.submit(fake_image_bytes, "a.png")


class TestAnalysisServiceQueries:
    """Test suite for AnalysisRecordService.get and list_recent."""

    async def test_get_should_return_submitted_record(self, analysis_service, fake_image_bytes) -> None:
        record = await analysis_service.submit(fake_image_bytes, "a.png")

        assert await analysis_service.get(record.id) == record

    async def test_get_should_return_none_for_unknown_id(self, analysis_service) -> None:
        assert await analysis_service.get("nonexistent-id") is None

    async def test_list_recent_should_return_two_newest(
        self, analysis_service, memory_store, make_record
    ) -> None:
        records = [make_record(offset_seconds=seconds) for seconds in (0, 1, 2)]
        for record in records:
            await memory_store.put(record)

        recent = await analysis_service.list_recent(2)

        assert [r.id for r in recent] == [records[2].id, records[1].id]

    @pytest.mark.parametrize("limit", [None, 0, -5])
    async def test_list_recent_should_default_to_ten(
        self, analysis_service, memory_store, make_record, limit
    ) -> None:
        for seconds in range(12):
            await memory_store.put(make_record(offset_seconds=seconds))

        recent = await analysis_service.list_recent(limit)

        assert DEFAULT_RECENT_LIMIT == 10
        assert len(recent) == 10
        assert recent[0].created_at > recent[-1].created_at

    async def test_list_recent_should_cap_large_limit(self, mock_engine) -> None:
        # Arrange
        store = AsyncMock(spec=InMemoryRecordStore)
        store.list_recent.return_value = []
        service = AnalysisRecordService(engine=mock_engine, store=store)

        # Act
        await service.list_recent(2**64)

        # Assert
        store.list_recent.assert_awaited_once_with(MAX_RECENT_LIMIT)


class TestAnalysisServiceEndToEnd:
    """Service wired to the real engine with a stub Gemini client."""

    async def test_submit_should_store_stubbed_perspectives(
        self, fake_gemini_client, memory_store
    ) -> None:
        # Arrange
        client = fake_gemini_client(
            {"description": "a red circle", "elements": ["red", "circle"], "mood": "calm"},
            {"description": "a blue square", "elements": ["blue", "square"], "mood": "chaotic"},
        )
        service = AnalysisRecordService(engine=AnalysisEngine(client=client), store=memory_store)

        # Act
        record = await service.submit(b"abc", "shape.png")

        # Assert
        stored = await service.get(record.id)
        assert stored == record
        assert stored.original == ORIGINAL
        assert stored.mirror == MIRROR

    async def test_submit_should_store_defaults_for_unparsable_original(
        self, fake_gemini_client, sql_store
    ) -> None:
        client = fake_gemini_client("not json", {"description": "inverse", "elements": [], "mood": "loud"})
        service = AnalysisRecordService(engine=AnalysisEngine(client=client), store=sql_store)

        record = await service.submit(b"abc", "noise.bin")

        stored = await service.get(record.id)
        assert stored.original == AnalysisPerspective(
            description="Unable to analyze image", elements=[], mood="Unknown"
        )
        assert stored.mirror.description == "inverse"
        assert stored == record
