"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from privacy_guard.config import DEFAULT_DB_FILENAME, DEFAULT_LOG_LEVEL, get_settings
from privacy_guard.data.db import get_database_url


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DB_URL", "PRIVACY_GUARD_DB_FILE", "PRIVACY_GUARD_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.db_url is None
    assert settings.db_filename == DEFAULT_DB_FILENAME
    assert settings.log_level == DEFAULT_LOG_LEVEL


def test_database_url_uses_configured_filename(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DB_URL", raising=False)
    monkeypatch.setenv("PRIVACY_GUARD_DB_FILE", "consent_test.db")

    url = get_database_url()

    assert url.startswith("sqlite:///")
    assert url.endswith("consent_test.db")


def test_database_url_defaults_to_default_filename(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DB_URL", raising=False)
    monkeypatch.delenv("PRIVACY_GUARD_DB_FILE", raising=False)

    assert get_database_url().endswith(DEFAULT_DB_FILENAME)


def test_db_url_takes_precedence_over_filename(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DB_URL", "sqlite:///:memory:")
    monkeypatch.setenv("PRIVACY_GUARD_DB_FILE", "ignored.db")

    assert get_database_url() == "sqlite:///:memory:"


def test_log_level_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PRIVACY_GUARD_LOG_LEVEL", "debug")

    assert get_settings().log_level == "DEBUG"
