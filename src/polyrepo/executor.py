"""Command executor abstraction and the git/process-backed implementation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Protocol

from . import git
from .exceptions import RepositoryPreconditionError
from .process import run_process
from .settings import Settings, load_settings

logger = logging.getLogger(__name__)


class CommandExecutor(Protocol):
    """Side-effecting operations the reconciler drives."""

    def clone_git_repository(
        self, git_url: str, repository_path: Path, branch: Optional[str] = None
    ) -> None:  # pragma: no cover - interface contract
        """Clone ``git_url`` into ``repository_path``."""

    def create_worktree(
        self, repository_path: Path, worktree_path: Path, branch: Optional[str] = None
    ) -> None:  # pragma: no cover - interface contract
        """Add a linked worktree of ``repository_path`` at ``worktree_path``."""

    def pull_and_reset_repository(self, path: Path) -> None:  # pragma: no cover - interface contract
        """Fetch the tracked remote and hard-reset ``path`` to its tip."""

    def build_project(self, project_path: Path) -> int:  # pragma: no cover - interface contract
        """Build the project located at ``project_path``."""

    def install_dependencies(self, project_path: Path) -> int:  # pragma: no cover - interface contract
        """Install package dependencies for ``project_path``."""


class ProcessCommandExecutor:
    """CommandExecutor that shells out to git, dotnet and npm."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        log: logging.Logger | None = None,
    ) -> None:
        self.settings = settings or load_settings()
        self.log = log or logger

    @property
    def git_executable(self) -> str:
        return self.settings.GIT_EXECUTABLE

    def clone_git_repository(
        self, git_url: str, repository_path: Path, branch: Optional[str] = None
    ) -> None:
        self.log.info("Cloning %s into %s", git_url, repository_path)
        repository_path.parent.mkdir(parents=True, exist_ok=True)
        run_process(
            self.git_executable,
            git.clone_arguments(git_url, repository_path, branch),
            log=self.log,
        )

    def create_worktree(
        self, repository_path: Path, worktree_path: Path, branch: Optional[str] = None
    ) -> None:
        self.log.info(
            "Creating worktree %s from %s (branch=%s)",
            worktree_path,
            repository_path,
            branch or "<default>",
        )
        worktree_path.parent.mkdir(parents=True, exist_ok=True)
        run_process(
            self.git_executable,
            git.worktree_add_arguments(repository_path, worktree_path, branch),
            log=self.log,
        )

    def pull_and_reset_repository(self, path: Path) -> None:
        branch = git.tracked_branch(path, executable=self.git_executable)
        configured = git.remotes(path, executable=self.git_executable)
        remote = configured[0] if configured else None

        if remote is None:
            raise RepositoryPreconditionError(f"Repository {path} has no configured remote")
        if branch is None:
            raise RepositoryPreconditionError(
                f"HEAD of repository {path} does not track a remote branch"
            )

        self.log.info("Fetching %s for %s", remote, path)
        git.fetch(path, remote, executable=self.git_executable)
        commit = git.rev_parse(path, branch, executable=self.git_executable)
        self.log.info("Hard-resetting %s to %s (%s)", path, branch, commit)
        git.reset_hard(path, commit, executable=self.git_executable)

    def build_project(self, project_path: Path) -> int:
        return run_process(
            self.settings.DOTNET_EXECUTABLE,
            ["build", str(project_path)],
            log=self.log,
        )

    def install_dependencies(self, project_path: Path) -> int:
        return run_process(
            self.settings.NPM_EXECUTABLE,
            ["install"],
            cwd=project_path,
            log=self.log,
        )
