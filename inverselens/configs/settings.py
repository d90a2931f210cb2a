"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from inverselens.configs.base import BaseSettings
from inverselens.configs.database import DatabaseSettings
from inverselens.configs.gemini import GeminiSettings
from inverselens.configs.record_store import RecordStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    gemini: GeminiSettings = Field(default_factory=GeminiSettings)
    record_store: RecordStoreSettings = Field(default_factory=RecordStoreSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from inverselens.configs import get_settings
        settings = get_settings()
    """
    return Settings()
