"""
Gemini configuration settings.

Credentials and model selection for the external multimodal model.

Dependencies: pydantic, pydantic_settings
System role: AI capability configuration for the analysis engine
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from inverselens.configs.base import BaseSettings


class GeminiSettings(BaseSettings):
    """Google Gemini API configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GEMINI_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    api_key: str | None = Field(
        default=None,
        validation_alias="GOOGLE_API_KEY",
        description="Gemini Developer API key (not a Vertex AI key)",
    )
    model: str = Field(
        default="gemini-2.5-pro",
        description="Gemini model ID used for both analysis phases",
    )
    request_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Upper bound for a single Gemini call",
    )
