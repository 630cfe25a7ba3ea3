"""
Repository-state reconciliation.

Existence of the target directory is the only signal separating first-time
provisioning from an existing checkout. A directory that exists but is not a
valid git repository is treated as provisioned.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from .config import RepositoryConfig, RepositoryConfigBuilder
from .exceptions import RepositoryConfigurationError
from .executor import CommandExecutor
from .filesystem import FileSystem

logger = logging.getLogger(__name__)


def clone_repository(config: RepositoryConfig) -> Path:
    """Clone the repository when missing, otherwise optionally refresh it."""
    path = config.repository_path
    if not config.file_system.directory_exists(path):
        logger.info("Repository %s not found; cloning %s", path, config.git_url)
        config.executor.clone_git_repository(config.git_url, path, config.branch)
        return path

    if config.keep_up_to_date:
        logger.info("Repository %s exists; pulling and resetting", path)
        config.executor.pull_and_reset_repository(path)
    else:
        logger.info("Repository %s exists; leaving as-is", path)
    return path


def setup_worktree(config: RepositoryConfig) -> Path:
    """Create the worktree when missing, otherwise optionally refresh it."""
    if config.worktree_path is None:
        raise RepositoryConfigurationError(
            "setup_worktree requires a configured worktree path"
        )

    path = config.worktree_path
    if not config.file_system.directory_exists(path):
        logger.info(
            "Worktree %s not found; creating from %s", path, config.repository_path
        )
        config.executor.create_worktree(config.repository_path, path, config.branch)
        return path

    if config.keep_up_to_date:
        logger.info("Worktree %s exists; pulling and resetting", path)
        config.executor.pull_and_reset_repository(path)
    else:
        logger.info("Worktree %s exists; leaving as-is", path)
    return path


def setup_repository(config: RepositoryConfig) -> Path:
    """Reconcile ``config`` and return the provisioned local path."""
    if config.worktree_path is not None:
        return setup_worktree(config)
    return clone_repository(config)


def initialize_repository(
    git_url: str,
    configure: Optional[Callable[[RepositoryConfigBuilder], object]] = None,
    *,
    file_system: FileSystem | None = None,
    executor: CommandExecutor | None = None,
) -> RepositoryConfig:
    """
    Build a configuration for ``git_url`` and reconcile it.

    Args:
        git_url: Remote repository URL.
        configure: Optional callback applying further builder options.
        file_system: Filesystem probe override.
        executor: Command executor override.

    Returns:
        The configuration that was reconciled.
    """
    builder = RepositoryConfigBuilder(file_system=file_system, executor=executor)
    builder.with_git_url(git_url)
    if configure is not None:
        configure(builder)
    config = builder.build()
    setup_repository(config)
    return config
