"""Resolved repository configuration and its fluent builder."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .exceptions import RepositoryConfigurationError
from .executor import CommandExecutor, ProcessCommandExecutor
from .filesystem import FileSystem, LocalFileSystem
from .naming import project_name_from_git_url
from .settings import load_settings

PathLike = Union[str, Path]


def _absolute(path: PathLike) -> Path:
    """Return an absolute, normalized path without resolving symlinks."""
    return Path(os.path.abspath(os.fspath(path)))


@dataclass(frozen=True, slots=True)
class RepositoryConfig:
    """Immutable provisioning configuration for a single repository."""

    git_url: str
    repository_path: Path
    file_system: FileSystem
    executor: CommandExecutor
    branch: Optional[str] = None
    keep_up_to_date: bool = False
    worktree_path: Optional[Path] = None

    @property
    def project_name(self) -> str:
        return self.repository_path.name

    @property
    def local_path(self) -> Path:
        """Return the provisioned working directory handed to callers."""
        return self.worktree_path if self.worktree_path is not None else self.repository_path


class RepositoryConfigBuilder:
    """
    Staged configuration for :class:`RepositoryConfig`.

    Collaborators are injected through the constructor; when omitted,
    :meth:`build` falls back to the local filesystem and the process-backed
    executor.
    """

    def __init__(
        self,
        *,
        file_system: FileSystem | None = None,
        executor: CommandExecutor | None = None,
    ) -> None:
        self._file_system = file_system
        self._executor = executor
        self._git_url = ""
        self._target_path: Optional[PathLike] = None
        self._branch: Optional[str] = None
        self._keep_up_to_date = False
        self._worktree_path: Optional[PathLike] = None

    def with_git_url(self, git_url: str) -> "RepositoryConfigBuilder":
        self._git_url = git_url
        return self

    def with_target_path(self, target_path: PathLike) -> "RepositoryConfigBuilder":
        self._target_path = target_path
        return self

    def with_default_branch(self, branch: str) -> "RepositoryConfigBuilder":
        self._branch = branch
        return self

    def keep_up_to_date(self) -> "RepositoryConfigBuilder":
        """Fetch and hard-reset an existing checkout on every setup."""
        self._keep_up_to_date = True
        return self

    def with_worktree(self, worktree_path: PathLike) -> "RepositoryConfigBuilder":
        self._worktree_path = worktree_path
        return self

    def build(self) -> RepositoryConfig:
        """
        Validate the staged options and return the resolved configuration.

        Raises:
            RepositoryConfigurationError: If no git URL was provided, or if
                settings needed for a default fail validation.
        """
        git_url = (self._git_url or "").strip()
        if not git_url:
            raise RepositoryConfigurationError("A git repository URL is required")

        project_name = project_name_from_git_url(git_url)
        if not project_name:
            raise RepositoryConfigurationError(
                f"Unable to derive a project name from {git_url!r}"
            )

        target_path = self._target_path
        if target_path is None:
            target_path = load_settings().DEFAULT_TARGET_PATH

        worktree_path = (
            _absolute(self._worktree_path) if self._worktree_path else None
        )

        return RepositoryConfig(
            git_url=git_url,
            repository_path=_absolute(target_path) / project_name,
            file_system=self._file_system or LocalFileSystem(),
            executor=self._executor or ProcessCommandExecutor(),
            branch=self._branch or None,
            keep_up_to_date=self._keep_up_to_date,
            worktree_path=worktree_path,
        )
