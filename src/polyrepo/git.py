"""Low-level Git helpers for repository provisioning."""

from __future__ import annotations

import subprocess  # nosec B404 - subprocess required for the git CLI
from pathlib import Path
from typing import Optional, Sequence

from .exceptions import GitCommandError
from .process import EXIT_NOT_FOUND

GIT_EXECUTABLE = "git"


def run(
    args: Sequence[str],
    *,
    cwd: Path,
    check: bool = True,
    executable: str = GIT_EXECUTABLE,
) -> subprocess.CompletedProcess[bytes]:
    """
    Execute a Git command returning the completed process.

    Args:
        args: Sequence of arguments that follow the `git` executable.
        cwd: Directory to execute the command from.
        check: When True, raise :class:`GitCommandError` on non-zero exit.
        executable: Git executable name or path.

    Returns:
        CompletedProcess with stdout/stderr captured as bytes.

    Raises:
        GitCommandError: If the executable cannot be started (exit code 127),
            regardless of ``check``.
    """
    command = [executable, *args]

    try:
        result = subprocess.run(  # nosec B603 - arguments built from trusted values
            command,
            cwd=str(cwd),
            capture_output=True,
            check=False,
        )
    except OSError as exc:
        failed = subprocess.CompletedProcess(
            command, EXIT_NOT_FOUND, stdout=b"", stderr=str(exc).encode()
        )
        raise GitCommandError(command, failed) from exc

    if check and result.returncode != 0:
        raise GitCommandError(command, result)

    return result


def _text(result: subprocess.CompletedProcess[bytes]) -> str:
    return (result.stdout or b"").decode("utf-8", errors="replace").strip()


def tracked_branch(path: Path, *, executable: str = GIT_EXECUTABLE) -> Optional[str]:
    """Return the remote-tracking branch of ``HEAD`` (e.g. ``origin/main``), if any."""
    result = run(
        ["rev-parse", "--abbrev-ref", "--symbolic-full-name", "@{u}"],
        cwd=path,
        check=False,
        executable=executable,
    )
    if result.returncode != 0:
        return None
    return _text(result) or None


def remotes(path: Path, *, executable: str = GIT_EXECUTABLE) -> list[str]:
    """Return configured remote names in configuration order."""
    result = run(["remote"], cwd=path, executable=executable)
    return [line.strip() for line in _text(result).splitlines() if line.strip()]


def fetch(path: Path, remote: str, *, executable: str = GIT_EXECUTABLE) -> None:
    """Fetch the configured refspecs of ``remote``."""
    run(["fetch", remote], cwd=path, executable=executable)


def rev_parse(path: Path, ref: str, *, executable: str = GIT_EXECUTABLE) -> str:
    """Resolve ``ref`` to a full commit SHA."""
    result = run(["rev-parse", "--verify", f"{ref}^{{commit}}"], cwd=path, executable=executable)
    return _text(result)


def reset_hard(path: Path, commit: str, *, executable: str = GIT_EXECUTABLE) -> None:
    """Move HEAD, index and working tree to ``commit``, discarding local changes."""
    run(["reset", "--hard", commit], cwd=path, executable=executable)


def clone_arguments(url: str, path: Path, branch: Optional[str] = None) -> list[str]:
    """Build `git clone` arguments, checking out ``branch`` when provided."""
    args = ["clone"]
    if branch:
        args.extend(["--branch", branch])
    args.extend([url, str(path)])
    return args


def worktree_add_arguments(
    repository_path: Path, worktree_path: Path, branch: Optional[str] = None
) -> list[str]:
    """Build `git worktree add` arguments run against ``repository_path``."""
    args = ["-C", str(repository_path), "worktree", "add", str(worktree_path)]
    if branch:
        args.append(branch)
    return args
