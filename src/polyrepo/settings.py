"""Settings for repository provisioning."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import RepositoryConfigurationError


class Settings(BaseSettings):
    """Provisioning settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_prefix="POLYREPO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # External executables
    GIT_EXECUTABLE: str = Field(default="git", description="Git executable name or path")
    DOTNET_EXECUTABLE: str = Field(
        default="dotnet", description="Executable used to build .NET projects"
    )
    NPM_EXECUTABLE: str = Field(
        default="npm", description="Executable used to install Node dependencies"
    )

    # Provisioning defaults
    DEFAULT_TARGET_PATH: str = Field(
        default=".", description="Directory that receives cloned repositories"
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Root log level used by the CLI")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize the log level and reject unknown names."""
        normalized = value.strip().upper()
        if not isinstance(logging.getLevelName(normalized), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return normalized


@lru_cache
def get_settings() -> Settings:
    """Return memoized settings."""
    return Settings()


def load_settings() -> Settings:
    """
    Return memoized settings, reporting invalid values as a configuration error.

    Raises:
        RepositoryConfigurationError: If a ``POLYREPO_`` variable or ``.env``
            entry fails validation.
    """
    try:
        return get_settings()
    except ValidationError as exc:
        raise RepositoryConfigurationError(f"Invalid polyrepo settings: {exc}") from exc
