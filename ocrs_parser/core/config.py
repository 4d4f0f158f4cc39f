"""
Centralized application settings using Pydantic.

All environment variables are read once and validated. Every variable is
prefixed with ``OCRS_`` (e.g. ``OCRS_LLM_API_KEY``).
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from ocrs_parser.core.const import DEFAULT_MAX_RETRIES


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="OCRS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    APP_NAME: str = Field(default="ocrs-parser")
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")
    LOG_JSON: bool = Field(default=True)

    # Extraction backend (OpenAI-compatible chat completions)
    LLM_BASE_URL: str = Field(default="https://api.openai.com/v1")
    LLM_API_KEY: SecretStr = Field(default=SecretStr(""))
    LLM_MODEL: str = Field(default="gpt-4o-2024-08-06")
    LLM_TEMPERATURE: float = Field(default=0.0)
    LLM_SEED: int = Field(default=42)
    LLM_MAX_TOKENS: int = Field(default=4096)
    LLM_TIMEOUT_SECONDS: float = Field(default=60.0)
    LLM_VERIFY_SSL: bool = Field(default=True)

    PIPELINE_MAX_RETRIES: int = Field(default=DEFAULT_MAX_RETRIES, ge=0)

    # Optional overrides for the packaged prompt/schema resources
    SCHEMA_PATH: Path | None = Field(default=None)
    PROMPT_PATH: Path | None = Field(default=None)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
