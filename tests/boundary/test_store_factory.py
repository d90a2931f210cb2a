"""
Test suite for record store selection.

System role: Verification of startup-time backend selection
"""

from unittest.mock import MagicMock, patch

import pytest

from inverselens.boundary.store.memory_store import InMemoryRecordStore
from inverselens.boundary.store.sql_store import SQLRecordStore
from inverselens.boundary.store.store_factory import get_record_store
from inverselens.configs import Settings


def test_get_record_store_should_default_to_memory(monkeypatch) -> None:
    monkeypatch.delenv("RECORD_STORE_BACKEND", raising=False)
    store = get_record_store(Settings())
    assert isinstance(store, InMemoryRecordStore)


def test_get_record_store_should_build_sql_store_for_postgres(monkeypatch) -> None:
    monkeypatch.setenv("RECORD_STORE_BACKEND", "postgres")
    settings = Settings()

    with patch("inverselens.boundary.store.store_factory.get_async_engine") as mock_engine:
        store = get_record_store(settings)

    assert isinstance(store, SQLRecordStore)
    mock_engine.assert_called_once_with(settings.database)


def test_get_record_store_should_reject_unknown_backend() -> None:
    settings = MagicMock()
    settings.record_store.backend = "dynamo"

    with pytest.raises(ValueError, match="Invalid RECORD_STORE_BACKEND"):
        get_record_store(settings)
