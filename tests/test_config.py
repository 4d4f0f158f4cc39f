from __future__ import annotations

import pytest
from pydantic import ValidationError

from ocrs_parser.application.services.factories import build_pipeline
from ocrs_parser.core.config import Settings, get_settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.PIPELINE_MAX_RETRIES == 2
    assert settings.LLM_MODEL == "gpt-4o-2024-08-06"
    assert settings.LLM_TEMPERATURE == 0.0
    assert settings.LLM_API_KEY.get_secret_value() == ""


def test_env_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OCRS_PIPELINE_MAX_RETRIES", "5")
    monkeypatch.setenv("OCRS_LLM_API_KEY", "sk-secret")
    settings = Settings(_env_file=None)
    assert settings.PIPELINE_MAX_RETRIES == 5
    assert settings.LLM_API_KEY.get_secret_value() == "sk-secret"
    assert "sk-secret" not in repr(settings)


def test_negative_retries_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OCRS_PIPELINE_MAX_RETRIES", "-1")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_build_pipeline_uses_retry_setting() -> None:
    pipeline = build_pipeline(Settings(_env_file=None, PIPELINE_MAX_RETRIES=0))
    assert pipeline.max_attempts == 1
