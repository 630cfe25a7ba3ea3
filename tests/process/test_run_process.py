"""Tests for line-streamed process execution."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

from polyrepo.exceptions import ProcessExecutionError
from polyrepo.process import EXIT_NOT_FOUND, run_process

SCRIPT = (
    "import sys\n"
    "print('first line')\n"
    "print()\n"
    "print('second line')\n"
    "print('warning: careful', file=sys.stderr)\n"
)


def test_run_process_forwards_lines_to_logger(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="polyrepo.process"):
        exit_code = run_process(sys.executable, ["-c", SCRIPT])

    assert exit_code == 0
    info = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
    errors = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
    assert info[:2] == ["first line", "second line"]
    assert "finished successfully" in info[-1]
    assert errors == ["warning: careful"]


def test_run_process_uses_provided_logger(caplog: pytest.LogCaptureFixture) -> None:
    custom = logging.getLogger("polyrepo.tests.custom")
    with caplog.at_level(logging.INFO, logger="polyrepo.tests.custom"):
        run_process(sys.executable, ["-c", "print('hello')"], log=custom)

    assert any(
        r.name == "polyrepo.tests.custom" and r.getMessage() == "hello" for r in caplog.records
    )


def test_run_process_respects_cwd_and_env(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    script = "import os; print(os.getcwd()); print(os.environ['POLYREPO_TEST_VALUE'])"
    with caplog.at_level(logging.INFO, logger="polyrepo.process"):
        run_process(
            sys.executable,
            ["-c", script],
            cwd=tmp_path,
            env={"POLYREPO_TEST_VALUE": "from-env"},
        )

    messages = [r.getMessage() for r in caplog.records]
    assert Path(messages[0]).resolve() == tmp_path.resolve()
    assert messages[1] == "from-env"


def test_run_process_raises_with_captured_stderr() -> None:
    script = "import sys; print('boom', file=sys.stderr); print('again', file=sys.stderr); sys.exit(3)"

    with pytest.raises(ProcessExecutionError) as exc_info:
        run_process(sys.executable, ["-c", script])

    error = exc_info.value
    assert error.program == sys.executable
    assert error.arguments == ["-c", script]
    assert error.exit_code == 3
    assert error.stderr == "boom\nagain"
    assert "failed with exit code 3" in str(error)


def test_run_process_missing_program() -> None:
    with pytest.raises(ProcessExecutionError) as exc_info:
        run_process("polyrepo-definitely-missing-binary", ["--version"])

    assert exc_info.value.exit_code == EXIT_NOT_FOUND
    assert exc_info.value.arguments == ["--version"]
