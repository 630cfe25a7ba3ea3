"""Fixtures backed by real git repositories under ``tmp_path``."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Callable

import pytest

GitRunner = Callable[..., str]


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    if shutil.which("git") is not None:
        return
    skip = pytest.mark.skip(reason="git is not installed")
    for item in items:
        if "git" in item.keywords:
            item.add_marker(skip)


@pytest.fixture
def run_git() -> GitRunner:
    """Return a helper running git for test setup and yielding stripped stdout."""

    def _run(*args: str, cwd: Path) -> str:
        result = subprocess.run(
            ["git", *args],
            cwd=str(cwd),
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()

    return _run


@pytest.fixture
def commit_file(run_git: GitRunner) -> Callable[[Path, str, str, str], str]:
    """Return a helper that writes, stages and commits a file, yielding the SHA."""

    def _commit(repo: Path, name: str, content: str, message: str) -> str:
        (repo / name).write_text(content, encoding="utf-8")
        run_git("add", name, cwd=repo)
        run_git("commit", "-m", message, cwd=repo)
        return run_git("rev-parse", "HEAD", cwd=repo)

    return _commit


@pytest.fixture
def git_identity(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GIT_AUTHOR_NAME", "polyrepo")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "polyrepo@example.invalid")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "polyrepo")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "polyrepo@example.invalid")
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")


@pytest.fixture
def origin_repo(
    tmp_path: Path,
    git_identity: None,
    run_git: GitRunner,
    commit_file: Callable[[Path, str, str, str], str],
) -> Path:
    """Bare repository with a single commit on ``main``."""
    seed = tmp_path / "seed"
    seed.mkdir()
    run_git("init", "-b", "main", cwd=seed)
    commit_file(seed, "README.md", "v1\n", "init")

    origin = tmp_path / "origin.git"
    run_git("clone", "--bare", str(seed), str(origin), cwd=tmp_path)
    return origin


@pytest.fixture
def upstream_work(tmp_path: Path, origin_repo: Path, run_git: GitRunner) -> Path:
    """Clone of ``origin_repo`` used to push new upstream commits."""
    work = tmp_path / "work"
    run_git("clone", str(origin_repo), str(work), cwd=tmp_path)
    return work
