# topmark:header:start
#
#   project      : PathEnv
#   file         : cmd_common.py
#   file_relpath : src/pathenv/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the PathEnv subcommands.

- `get_console` / `get_effective_verbosity` read the state initialized by the group.
- `load_snapshot` captures the environment, optionally overlaid with a TOML document.
- `read_input_bytes` reads an encoded snapshot from a file or STDIN.
- `emit_snapshot` prints a snapshot in the requested output format.
"""

from __future__ import annotations

import json
import string
import sys
from typing import TYPE_CHECKING, Any

from pathenv.cli.errors import PathEnvDataError, translate_error
from pathenv.cli.options import OutputFormat
from pathenv.codec import encoded_size
from pathenv.config.io import load_snapshot_table, render_snapshot_toml, snapshot_from_table
from pathenv.config.logging import get_logger
from pathenv.errors import PathEnvError, SnapshotConfigError
from pathenv.snapshot import PathEnvironmentSnapshot

if TYPE_CHECKING:
    from pathlib import Path

    import click

    from pathenv.cli.console import ConsoleLike
    from pathenv.config.logging import PathEnvLogger

logger: PathEnvLogger = get_logger(__name__)

STDIN_MARKER: str = "-"


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context by the group."""
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (``-1`` quiet, ``0`` terse, ``1+`` verbose)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def load_snapshot(config_path: Path | None) -> PathEnvironmentSnapshot:
    """Capture the current environment, overlaid with ``config_path`` if given.

    Raises:
        PathEnvCliError: With the exit code matching the failure.
    """
    try:
        if config_path is None:
            return PathEnvironmentSnapshot.capture_current()
        logger.debug("Loading snapshot configuration from %s", config_path)
        return snapshot_from_table(load_snapshot_table(config_path))
    except (PathEnvError, OSError) as exc:
        raise translate_error(exc) from exc


def read_input_bytes(source: str, *, hex_input: bool) -> bytes:
    """Read an encoded snapshot from ``source`` (a path, or ``-`` for STDIN).

    Args:
        source (str): Input path or ``-``.
        hex_input (bool): Whether the input is hexadecimal text (whitespace ignored).

    Returns:
        bytes: The raw encoded snapshot.

    Raises:
        PathEnvCliError: If the input cannot be read or is not valid hex.
    """
    try:
        if source == STDIN_MARKER:
            data: bytes = sys.stdin.buffer.read()
        else:
            with open(source, "rb") as fh:
                data = fh.read()
    except OSError as exc:
        raise translate_error(exc) from exc

    if not hex_input:
        return data
    text: str = "".join(data.decode("ascii", errors="replace").split())
    try:
        return bytes.fromhex(text)
    except ValueError as exc:
        raise PathEnvDataError(f"Input is not valid hexadecimal: {exc}") from exc


def _char_label(ch: str) -> str:
    if ch in string.printable and not ch.isspace():
        return ch
    return f"U+{ord(ch):04X}"


def emit_snapshot(
    console: ConsoleLike,
    snapshot: PathEnvironmentSnapshot,
    output_format: OutputFormat,
    *,
    verbosity: int = 0,
) -> None:
    """Print ``snapshot`` in ``output_format``.

    Text output aligns ``key : value`` lines; separators that are not printable
    ASCII are shown as ``U+XXXX``. With ``verbosity > 0`` the encoded size is
    appended. JSON and TOML output contain exactly the five fields; JSON is
    ASCII-escaped so lone surrogate separators survive as ``\\uXXXX``.

    Raises:
        PathEnvDataError: If TOML output is requested for a snapshot TOML cannot hold.
    """
    if output_format == OutputFormat.JSON:
        console.print(json.dumps(snapshot.to_dict()))
        return
    if output_format == OutputFormat.TOML:
        try:
            rendered: str = render_snapshot_toml(snapshot)
        except SnapshotConfigError as exc:
            raise PathEnvDataError(str(exc)) from exc
        console.print(rendered, nl=False)
        return

    rows: list[tuple[str, Any]] = [
        ("path_comparison", snapshot.comparison_label),
        ("directory_separator", _char_label(snapshot.directory_separator)),
        ("alt_directory_separator", _char_label(snapshot.alt_directory_separator)),
        ("volume_separator", _char_label(snapshot.volume_separator)),
        ("current_directory", snapshot.current_directory),
    ]
    if verbosity > 0:
        rows.append(("encoded_size", encoded_size(snapshot)))
    width: int = max(len(key) for key, _ in rows)
    for key, value in rows:
        console.print(f"{console.styled(key.ljust(width), bold=True)} : {value}")
