"""
Shared test fixtures and configuration for entire test suite.

Provides: Record factories, in-memory and SQLite-backed record stores,
stub Gemini clients, and settings cache isolation.
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import json
import uuid
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from inverselens.core.analysis.analysis_schema import (
    AnalysisPerspective,
    ImageAnalysisRecord,
)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset cached settings so env changes in one test don't leak into another."""
    from inverselens.configs import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_image_bytes() -> bytes:
    """A tiny stand-in for image content; the engine never decodes it."""
    return b"\x89PN"


@pytest.fixture
def base_time() -> datetime:
    """Fixed UTC reference time for ordering tests."""
    return datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_record(base_time):
    """
    Factory for ImageAnalysisRecord instances.

    Returns:
        Callable: make_record(offset_seconds=0, **overrides) -> ImageAnalysisRecord
    """

    def _make(offset_seconds: float = 0, **overrides) -> ImageAnalysisRecord:
        values = {
            "id": str(uuid.uuid4()),
            "original_filename": "sunset.jpg",
            "image_data": "iVBORw0KGgo=",
            "original": AnalysisPerspective(
                description="A sunset over the sea",
                elements=["sun", "sea", "horizon"],
                mood="serene",
            ),
            "mirror": AnalysisPerspective(
                description="A sunrise under a desert",
                elements=["moon", "sand", "abyss"],
                mood="restless",
            ),
            "created_at": base_time + timedelta(seconds=offset_seconds),
        }
        values.update(overrides)
        return ImageAnalysisRecord(**values)

    return _make


def gemini_response(payload) -> MagicMock:
    """Build a stub GenerateContentResponse whose .text is the given payload."""
    response = MagicMock()
    response.text = payload if isinstance(payload, str) or payload is None else json.dumps(payload)
    return response


@pytest.fixture
def fake_gemini_client():
    """
    Factory for stub Gemini clients.

    Each positional argument is the outcome of one generate_content call:
    a dict/str/None becomes the response text, an exception is raised.

    Returns:
        Callable: fake_gemini_client(*outcomes) -> MagicMock
    """

    def _make(*outcomes) -> MagicMock:
        client = MagicMock()
        client.models.generate_content.side_effect = [
            outcome if isinstance(outcome, Exception) else gemini_response(outcome)
            for outcome in outcomes
        ]
        return client

    return _make


@pytest.fixture
async def test_async_engine():
    """
    Create in-memory SQLite async engine for testing.

    Yields:
        AsyncEngine: Engine whose single connection is shared across sessions
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_async_db(test_async_engine):
    """
    Create an async session on a freshly created schema.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
    from inverselens.boundary.db.base import Base

    async with test_async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        test_async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with test_async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def sql_store(test_async_engine):
    """SQLRecordStore on in-memory SQLite with tables created."""
    from inverselens.boundary.store.sql_store import SQLRecordStore

    store = SQLRecordStore(engine=test_async_engine)
    await store.initialize()
    yield store
    await store.close()


@pytest.fixture
def memory_store():
    """Fresh InMemoryRecordStore."""
    from inverselens.boundary.store.memory_store import InMemoryRecordStore

    return InMemoryRecordStore()
