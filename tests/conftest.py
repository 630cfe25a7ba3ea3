"""Pytest configuration helpers."""

from __future__ import annotations

from typing import Iterator
from unittest.mock import MagicMock

import pytest

from polyrepo.executor import ProcessCommandExecutor
from polyrepo.filesystem import LocalFileSystem
from polyrepo.settings import get_settings


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Iterator[None]:
    """Ensure each test observes its own environment."""
    get_settings.cache_clear()
    try:
        yield
    finally:
        get_settings.cache_clear()


@pytest.fixture
def file_system() -> MagicMock:
    return MagicMock(spec=LocalFileSystem)


@pytest.fixture
def executor() -> MagicMock:
    return MagicMock(spec=ProcessCommandExecutor)
