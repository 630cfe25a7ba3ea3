"""
Local git checkout provisioning for polyrepo application hosts.

This package clones repositories (or adds linked worktrees), keeps existing
checkouts in sync on request, and resolves project paths inside them.
"""

from .config import RepositoryConfig, RepositoryConfigBuilder
from .exceptions import (
    GitCommandError,
    PolyRepoError,
    ProcessExecutionError,
    ProjectNotFoundError,
    RepositoryConfigurationError,
    RepositoryPreconditionError,
)
from .executor import CommandExecutor, ProcessCommandExecutor
from .filesystem import FileSystem, LocalFileSystem
from .naming import project_name_from_git_url
from .process import run_process
from .project import GitProject, add_git_project
from .reconciler import (
    clone_repository,
    initialize_repository,
    setup_repository,
    setup_worktree,
)
from .settings import Settings, get_settings, load_settings

__version__ = "0.1.0"

__all__ = [
    "RepositoryConfig",
    "RepositoryConfigBuilder",
    "PolyRepoError",
    "RepositoryConfigurationError",
    "RepositoryPreconditionError",
    "ProcessExecutionError",
    "GitCommandError",
    "ProjectNotFoundError",
    "CommandExecutor",
    "ProcessCommandExecutor",
    "FileSystem",
    "LocalFileSystem",
    "GitProject",
    "add_git_project",
    "clone_repository",
    "setup_worktree",
    "setup_repository",
    "initialize_repository",
    "project_name_from_git_url",
    "run_process",
    "Settings",
    "get_settings",
    "load_settings",
]
