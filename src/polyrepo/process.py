"""Blocking external-process execution with line-level log forwarding."""

from __future__ import annotations

import logging
import os
import subprocess  # nosec B404 - subprocess required for git, dotnet and npm CLIs
import threading
from pathlib import Path
from typing import IO, Callable, Mapping, Optional, Sequence

from .exceptions import ProcessExecutionError

logger = logging.getLogger(__name__)

# Conventional shell exit code for "command not found".
EXIT_NOT_FOUND = 127


def _pump(stream: IO[str], sink: list[str], emit: Callable[[str], None]) -> None:
    """Forward each non-empty line from ``stream`` into ``sink`` and ``emit``."""
    with stream:
        for raw in stream:
            line = raw.rstrip("\r\n")
            if not line:
                continue
            sink.append(line)
            emit(line)


def run_process(
    program: str,
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    env: Optional[Mapping[str, str]] = None,
    log: logging.Logger | None = None,
) -> int:
    """
    Run an external process to completion, logging its output line by line.

    Args:
        program: Executable to launch.
        args: Arguments passed to the executable.
        cwd: Working directory for the process.
        env: Optional environment overrides merged over ``os.environ``.
        log: Logger receiving stdout at INFO and stderr at ERROR.

    Returns:
        The process exit code, which is always 0.

    Raises:
        ProcessExecutionError: If the process cannot be started or exits non-zero.
    """
    sink_logger = log or logger
    arguments = list(args)
    merged_env = os.environ.copy()
    if env:
        merged_env.update(env)

    try:
        process = subprocess.Popen(  # nosec B603 - program and args supplied by trusted callers
            [program, *arguments],
            cwd=str(cwd) if cwd is not None else None,
            env=merged_env,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as exc:
        raise ProcessExecutionError(program, arguments, EXIT_NOT_FOUND, str(exc)) from exc

    output: list[str] = []
    error: list[str] = []
    readers = [
        threading.Thread(
            target=_pump,
            args=(process.stdout, output, sink_logger.info),
            daemon=True,
        ),
        threading.Thread(
            target=_pump,
            args=(process.stderr, error, sink_logger.error),
            daemon=True,
        ),
    ]
    for reader in readers:
        reader.start()
    for reader in readers:
        reader.join()
    exit_code = process.wait()

    command_line = " ".join([program, *arguments])
    if exit_code == 0:
        sink_logger.info("Process %s finished successfully.", command_line)
        return exit_code

    stderr = "\n".join(error)
    sink_logger.error(
        "Process %s failed with exit code %d: %s", command_line, exit_code, stderr
    )
    raise ProcessExecutionError(program, arguments, exit_code, stderr)
