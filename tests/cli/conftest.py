# topmark:header:start
#
#   project      : PathEnv
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running PathEnv through Click's test runner.

`run_cli` invokes the ``pathenv`` group in-process. Program output goes to
stdout and diagnostics to stderr, so assertions on command output should use
``result.stdout``.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any, Sequence

import pytest
from click.testing import CliRunner, Result

from pathenv.cli.exit_codes import ExitCode
from pathenv.cli.main import cli
from pathenv.config import logging

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from pathenv.snapshot import PathEnvironmentSnapshot


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Reinstall the test-session logging after each CLI invocation.

    The CLI reconfigures the root logger with a handler bound to the runner's
    (then closed) stderr stream.
    """
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_bytes: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["show"]``.
        input_bytes (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_bytes)


def write_snapshot_toml(tmp_path: Path, snapshot: PathEnvironmentSnapshot) -> Path:
    """Write ``snapshot`` as a TOML document and return its path."""
    from pathenv.config.io import render_snapshot_toml

    path: Path = tmp_path / "snapshot.toml"
    path.write_text(render_snapshot_toml(snapshot), encoding="utf-8")
    return path


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``.

    Args:
        result (Result): The Result object returned by `run_cli`.
        code (ExitCode): The expected exit code.
    """
    assert result.exit_code == code, result.output
