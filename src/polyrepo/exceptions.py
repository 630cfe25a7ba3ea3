"""Custom exceptions for repository provisioning."""

from __future__ import annotations

from subprocess import CompletedProcess
from typing import Sequence


class PolyRepoError(RuntimeError):
    """Base exception for repository provisioning failures."""


class RepositoryConfigurationError(PolyRepoError, ValueError):
    """Raised when a repository configuration cannot be built."""


class RepositoryPreconditionError(PolyRepoError):
    """Raised when a repository lacks the state required for an operation."""


class ProjectNotFoundError(PolyRepoError, FileNotFoundError):
    """Raised when a project path does not exist inside a provisioned repository."""


class ProcessExecutionError(PolyRepoError):
    """Raised when an external process exits with a non-zero code."""

    def __init__(
        self,
        program: str,
        arguments: Sequence[str],
        exit_code: int,
        stderr: str = "",
    ) -> None:
        self.program = program
        self.arguments = list(arguments)
        self.exit_code = exit_code
        self.stderr = stderr
        super().__init__(str(self))

    @property
    def command_line(self) -> str:
        """Return the command as it would be typed into a shell."""
        return " ".join([self.program, *self.arguments])

    def __str__(self) -> str:
        details = self.stderr.strip()
        suffix = f": {details}" if details else ""
        return (
            f"Process {self.command_line} failed with exit code {self.exit_code}{suffix}"
        )


class GitCommandError(ProcessExecutionError):
    """Raised when an underlying Git command fails."""

    def __init__(self, argv: Sequence[str], result: CompletedProcess[bytes]) -> None:
        self.result = result
        stderr = (result.stderr or b"").decode("utf-8", errors="replace").strip()
        stdout = (result.stdout or b"").decode("utf-8", errors="replace").strip()
        program, *arguments = argv
        super().__init__(program, arguments, result.returncode, stderr or stdout)

    def __str__(self) -> str:
        suffix = f": {self.stderr}" if self.stderr else ""
        return f"git command failed ({self.command_line}){suffix}"
