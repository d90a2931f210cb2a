"""
Record store package.

Exports:
  - RecordStore: storage contract
  - InMemoryRecordStore, SQLRecordStore: the two backends
  - get_record_store: startup-time backend selection
"""

from inverselens.boundary.store.memory_store import InMemoryRecordStore
from inverselens.boundary.store.record_store import RecordStore
from inverselens.boundary.store.sql_store import SQLRecordStore
from inverselens.boundary.store.store_factory import get_record_store

__all__ = [
    "InMemoryRecordStore",
    "RecordStore",
    "SQLRecordStore",
    "get_record_store",
]
