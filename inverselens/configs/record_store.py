"""
Record store configuration settings.

Selects the storage backend for analysis records at process start.

Dependencies: pydantic, pydantic_settings
System role: Storage backend selection
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from inverselens.configs.base import BaseSettings


class RecordStoreSettings(BaseSettings):
    """Record store configuration (memory for local dev, postgres for prod)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RECORD_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    backend: Literal["memory", "postgres"] = Field(
        default="memory",
        description="'memory' keeps records in-process (lost on restart), 'postgres' persists them",
    )
    create_tables: bool = Field(
        default=True,
        description="Create missing tables when the relational store starts",
    )
