"""
Record store factory for selecting between in-memory (dev) and Postgres (prod).

Depends on RECORD_STORE_BACKEND environment variable. Called once by the
application entry point; the result is injected, never looked up globally.

Dependencies: inverselens.boundary, inverselens.configs
System role: Record store instantiation and selection
"""

import logging

from inverselens.boundary.db.connection import get_async_engine
from inverselens.boundary.store.memory_store import InMemoryRecordStore
from inverselens.boundary.store.record_store import RecordStore
from inverselens.boundary.store.sql_store import SQLRecordStore
from inverselens.configs import Settings

logger = logging.getLogger(__name__)


def get_record_store(settings: Settings) -> RecordStore:
    """
    Factory function to get record store based on configuration.

    Args:
        settings: Application settings

    Returns:
        InMemoryRecordStore or SQLRecordStore: Configured record store

    Raises:
        ValueError: If RECORD_STORE_BACKEND is invalid
    """
    backend = settings.record_store.backend.lower()

    if backend == "memory":
        logger.info(
            f"{__name__}:get_record_store - Creating in-memory record store (local dev mode, not persistent)"
        )
        return InMemoryRecordStore()

    elif backend == "postgres":
        logger.info(f"{__name__}:get_record_store - Creating Postgres record store (production mode)")
        return SQLRecordStore(
            engine=get_async_engine(settings.database),
            create_tables=settings.record_store.create_tables,
        )

    else:
        raise ValueError(
            f"Invalid RECORD_STORE_BACKEND: {backend}. "
            f"Must be 'memory' (dev) or 'postgres' (production)."
        )
