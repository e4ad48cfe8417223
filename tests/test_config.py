"""Tests for settings helpers."""

import pytest
from pydantic import ValidationError

from nutrition_ai.config import Settings, parse_timezone_name


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, None), ("", None), (" local ", None), ("Europe/Berlin", "Europe/Berlin")],
)
def test_parse_timezone_name(raw: str | None, expected: str | None) -> None:
    assert parse_timezone_name(raw) == expected


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_KEY", "key")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("OPENAI_MODEL", "gpt-4o")

    settings = Settings()

    assert settings.supabase_url == "https://env.supabase.co"
    assert settings.openai_model == "gpt-4o"
    assert settings.openai_timeout_seconds == 30.0
    assert settings.background_retry_attempts == 2


def test_settings_normalize_local_timezone(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUMMARY_TIMEZONE", "local")

    settings = Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="key",
        openai_api_key="sk-test",
    )

    assert settings.summary_timezone is None


def test_settings_reject_unknown_timezone() -> None:
    with pytest.raises(ValidationError, match="Unknown timezone"):
        Settings(
            supabase_url="https://example.supabase.co",
            supabase_service_key="key",
            openai_api_key="sk-test",
            summary_timezone="Europe/Atlantis",
        )
