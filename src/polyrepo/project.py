"""Resolve projects living inside provisioned repositories."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from .config import RepositoryConfig, RepositoryConfigBuilder
from .exceptions import ProjectNotFoundError
from .executor import CommandExecutor
from .filesystem import FileSystem
from .reconciler import initialize_repository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GitProject:
    """A project directory or file inside a provisioned repository."""

    name: str
    project_path: Path
    repository: RepositoryConfig

    def build(self) -> int:
        return self.repository.executor.build_project(self.project_path)

    def install_dependencies(self) -> int:
        target = self.project_path
        if self.repository.file_system.file_exists(target):
            target = target.parent
        return self.repository.executor.install_dependencies(target)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serialisable representation."""
        return {
            "name": self.name,
            "project_path": str(self.project_path),
            "local_path": str(self.repository.local_path),
            "repository_path": str(self.repository.repository_path),
            "worktree_path": (
                str(self.repository.worktree_path)
                if self.repository.worktree_path is not None
                else None
            ),
            "git_url": self.repository.git_url,
            "branch": self.repository.branch,
        }


def add_git_project(
    git_url: str,
    *,
    name: Optional[str] = None,
    target_path: Union[str, Path, None] = None,
    project_path: Union[str, Path] = ".",
    configure: Optional[Callable[[RepositoryConfigBuilder], object]] = None,
    file_system: FileSystem | None = None,
    executor: CommandExecutor | None = None,
) -> GitProject:
    """
    Provision ``git_url`` and resolve ``project_path`` inside it.

    Raises:
        ProjectNotFoundError: If the project path does not exist after provisioning.
    """

    def _configure(builder: RepositoryConfigBuilder) -> None:
        if target_path is not None:
            builder.with_target_path(target_path)
        if configure is not None:
            configure(builder)

    config = initialize_repository(
        git_url,
        _configure,
        file_system=file_system,
        executor=executor,
    )
    resolved = Path(os.path.normpath(config.local_path / project_path))

    if not config.file_system.file_or_directory_exists(resolved):
        raise ProjectNotFoundError(f"Project path {resolved} not found")

    project = GitProject(
        name=name or config.project_name,
        project_path=resolved,
        repository=config,
    )
    logger.info("Registered project %s at %s", project.name, resolved)
    return project
