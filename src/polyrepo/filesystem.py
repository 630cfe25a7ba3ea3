"""Filesystem existence probes."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Protocol, Union

PathLike = Union[str, Path]


class FileSystem(Protocol):
    """Read-only view of the filesystem consulted during reconciliation."""

    def directory_exists(self, path: PathLike) -> bool:  # pragma: no cover - interface contract
        """Return True when ``path`` is an existing directory."""

    def file_exists(self, path: PathLike) -> bool:  # pragma: no cover - interface contract
        """Return True when ``path`` is an existing regular file."""

    def file_or_directory_exists(self, path: PathLike) -> bool:  # pragma: no cover - interface contract
        """Return True when ``path`` is either a file or a directory."""


class LocalFileSystem:
    """FileSystem backed by the local disk."""

    def directory_exists(self, path: PathLike) -> bool:
        return _safe_check(Path(path).is_dir)

    def file_exists(self, path: PathLike) -> bool:
        return _safe_check(Path(path).is_file)

    def file_or_directory_exists(self, path: PathLike) -> bool:
        return self.file_exists(path) or self.directory_exists(path)


def _safe_check(check: Callable[[], bool]) -> bool:
    # Permission errors and malformed paths count as "missing".
    try:
        return check()
    except (OSError, ValueError):
        return False
