"""Naming helpers for repository directories."""

from __future__ import annotations

_GIT_SUFFIX = ".git"


def project_name_from_git_url(git_url: str) -> str:
    """
    Derive the project directory name from a git remote URL.

    Strips a trailing ``.git`` suffix and returns the final ``/``-delimited
    segment, so ``https://host/org/repo.git`` and ``https://host/org/repo``
    both map to ``repo``.
    """
    trimmed = git_url.strip().rstrip("/")
    if trimmed.endswith(_GIT_SUFFIX):
        trimmed = trimmed[: -len(_GIT_SUFFIX)]
    return trimmed.split("/")[-1]
