# topmark:header:start
#
#   project      : PathEnv
#   file         : errors.py
#   file_relpath : src/pathenv/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the PathEnv CLI.

Usage:
    Commands raise these exceptions to signal errors with standardized messages
    and exit codes. `translate_error` maps library exceptions onto them.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from pathenv.cli.exit_codes import ExitCode
from pathenv.errors import (
    InvalidArgumentError,
    SnapshotConfigError,
    SnapshotDecodeError,
    UnsupportedModeError,
)


class PathEnvCliError(click.ClickException):
    """Base class for all PathEnv CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        obj: Any = getattr(ctx, "obj", None) if ctx is not None else None
        console = obj.get("console") if isinstance(obj, dict) else None
        if console is not None:
            console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
            return
        super().show(file)


class PathEnvUsageError(PathEnvCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class PathEnvDataError(PathEnvCliError):
    """Error for input bytes that cannot be decoded into a snapshot."""

    exit_code = ExitCode.DATA_ERROR


class PathEnvFileNotFoundError(PathEnvCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class PathEnvUnsupportedModeError(PathEnvCliError):
    """Error for snapshots whose comparison mode has no comparer."""

    exit_code = ExitCode.UNSUPPORTED_MODE


class PathEnvIOError(PathEnvCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class PathEnvConfigError(PathEnvCliError):
    """Error for invalid snapshot configuration documents."""

    exit_code = ExitCode.CONFIG_ERROR


def translate_error(exc: Exception) -> PathEnvCliError:
    """Map a library or OS exception to the matching CLI error.

    Args:
        exc (Exception): The exception raised by the library.

    Returns:
        PathEnvCliError: The CLI error carrying the matching exit code.
    """
    if isinstance(exc, SnapshotDecodeError):
        return PathEnvDataError(str(exc))
    if isinstance(exc, UnsupportedModeError):
        return PathEnvUnsupportedModeError(str(exc))
    if isinstance(exc, (SnapshotConfigError, InvalidArgumentError)):
        return PathEnvConfigError(str(exc))
    if isinstance(exc, FileNotFoundError):
        return PathEnvFileNotFoundError(f"File not found: {exc.filename}")
    if isinstance(exc, OSError):
        return PathEnvIOError(str(exc))
    return PathEnvCliError(str(exc))
