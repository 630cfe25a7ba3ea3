"""Unit tests for provisioning settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from polyrepo.exceptions import RepositoryConfigurationError
from polyrepo.settings import Settings, get_settings, load_settings


def test_default_settings() -> None:
    """Test default settings are valid."""
    settings = Settings()
    assert settings.GIT_EXECUTABLE == "git"
    assert settings.DOTNET_EXECUTABLE == "dotnet"
    assert settings.NPM_EXECUTABLE == "npm"
    assert settings.DEFAULT_TARGET_PATH == "."
    assert settings.LOG_LEVEL == "INFO"


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POLYREPO_GIT_EXECUTABLE", "/opt/git/bin/git")
    monkeypatch.setenv("POLYREPO_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.GIT_EXECUTABLE == "/opt/git/bin/git"
    assert settings.LOG_LEVEL == "DEBUG"


def test_unknown_log_level_is_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        Settings(LOG_LEVEL="chatty")

    assert "LOG_LEVEL" in str(exc_info.value)


def test_get_settings_is_memoized() -> None:
    assert get_settings() is get_settings()


def test_load_settings_wraps_validation_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POLYREPO_LOG_LEVEL", "bogus")

    with pytest.raises(RepositoryConfigurationError, match="LOG_LEVEL") as exc_info:
        load_settings()

    assert isinstance(exc_info.value.__cause__, ValidationError)


def test_load_settings_returns_memoized_settings() -> None:
    assert load_settings() is get_settings()
