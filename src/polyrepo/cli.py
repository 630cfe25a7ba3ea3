from __future__ import annotations

import json
import pathlib
from typing import Optional

import typer

from polyrepo.config import RepositoryConfigBuilder
from polyrepo.exceptions import (
    PolyRepoError,
    ProcessExecutionError,
)
from polyrepo.logging_setup import setup_logging
from polyrepo.naming import project_name_from_git_url
from polyrepo.project import add_git_project
from polyrepo.reconciler import setup_repository
from polyrepo.settings import load_settings

app = typer.Typer(no_args_is_help=True, help="Provision and sync local git checkouts.")


def _configure_logging(level: Optional[str]) -> None:
    setup_logging(level or load_settings().LOG_LEVEL)


def _fail(exc: PolyRepoError) -> typer.Exit:
    typer.echo(f"Error: {exc}", err=True)
    if isinstance(exc, ProcessExecutionError):
        return typer.Exit(2)
    return typer.Exit(1)


def _builder(
    git_url: str,
    target_path: Optional[pathlib.Path],
    branch: Optional[str],
    worktree: Optional[pathlib.Path],
    keep_up_to_date: bool,
) -> RepositoryConfigBuilder:
    builder = RepositoryConfigBuilder().with_git_url(git_url)
    _apply(builder, target_path, branch, worktree, keep_up_to_date)
    return builder


def _apply(
    builder: RepositoryConfigBuilder,
    target_path: Optional[pathlib.Path],
    branch: Optional[str],
    worktree: Optional[pathlib.Path],
    keep_up_to_date: bool,
) -> None:
    if target_path is not None:
        builder.with_target_path(target_path)
    if branch:
        builder.with_default_branch(branch)
    if worktree is not None:
        builder.with_worktree(worktree)
    if keep_up_to_date:
        builder.keep_up_to_date()


@app.command("sync")
def sync(
    git_url: str = typer.Argument(..., help="Remote repository URL."),
    target_path: Optional[pathlib.Path] = typer.Option(
        None, "--target-path", help="Directory that receives the clone."
    ),
    branch: Optional[str] = typer.Option(None, "--branch", help="Branch to check out."),
    worktree: Optional[pathlib.Path] = typer.Option(
        None, "--worktree", help="Provision a linked worktree at this path."
    ),
    keep_up_to_date: bool = typer.Option(
        False,
        "--keep-up-to-date",
        help="Fetch and hard-reset an existing checkout (discards local changes).",
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Root log level."),
) -> None:
    """Clone or refresh a repository and print its local path."""
    try:
        _configure_logging(log_level)
        config = _builder(git_url, target_path, branch, worktree, keep_up_to_date).build()
        local_path = setup_repository(config)
    except PolyRepoError as exc:
        raise _fail(exc)
    typer.echo(str(local_path))


@app.command("project")
def project(
    git_url: str = typer.Argument(..., help="Remote repository URL."),
    name: Optional[str] = typer.Option(None, "--name", help="Project name override."),
    project_path: pathlib.Path = typer.Option(
        pathlib.Path("."),
        "--project-path",
        help="Project path relative to the repository root.",
    ),
    target_path: Optional[pathlib.Path] = typer.Option(
        None, "--target-path", help="Directory that receives the clone."
    ),
    branch: Optional[str] = typer.Option(None, "--branch", help="Branch to check out."),
    worktree: Optional[pathlib.Path] = typer.Option(
        None, "--worktree", help="Provision a linked worktree at this path."
    ),
    keep_up_to_date: bool = typer.Option(
        False, "--keep-up-to-date", help="Fetch and hard-reset an existing checkout."
    ),
    build: bool = typer.Option(False, "--build", help="Build the project after syncing."),
    install: bool = typer.Option(
        False, "--install", help="Install npm dependencies after syncing."
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Root log level."),
) -> None:
    """Provision a repository and resolve a project inside it."""
    try:
        _configure_logging(log_level)
        resolved = add_git_project(
            git_url,
            name=name,
            project_path=project_path,
            configure=lambda builder: _apply(
                builder, target_path, branch, worktree, keep_up_to_date
            ),
        )
        if install:
            resolved.install_dependencies()
        if build:
            resolved.build()
    except PolyRepoError as exc:
        raise _fail(exc)
    typer.echo(json.dumps(resolved.to_dict(), ensure_ascii=False, indent=2))


@app.command("name")
def name(git_url: str = typer.Argument(..., help="Remote repository URL.")) -> None:
    """Print the directory name derived from a repository URL."""
    typer.echo(project_name_from_git_url(git_url))


if __name__ == "__main__":
    app()
