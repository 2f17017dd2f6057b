# topmark:header:start
#
#   project      : PathEnv
#   file         : decode.py
#   file_relpath : src/pathenv/cli/commands/decode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PathEnv `decode` command.

Reads an encoded snapshot from a file or STDIN and prints its fields.
Decoding failures exit with ``DATA_ERROR``. Snapshots carrying a comparison
mode without a comparer are still printed, with the raw ordinal.
"""

from __future__ import annotations

import click

from pathenv.cli.cmd_common import (
    STDIN_MARKER,
    emit_snapshot,
    get_console,
    get_effective_verbosity,
    read_input_bytes,
)
from pathenv.cli.errors import translate_error
from pathenv.cli.options import OutputFormat, format_option
from pathenv.errors import SnapshotDecodeError
from pathenv.snapshot import PathEnvironmentSnapshot


@click.command(
    name="decode",
    help="Decode an encoded path environment snapshot. Reads STDIN when SOURCE is '-'.",
)
@click.argument("source", required=False, default=STDIN_MARKER)
@click.option(
    "--hex",
    "hex_input",
    is_flag=True,
    default=False,
    help="Treat the input as hexadecimal text.",
)
@format_option
def decode_command(
    *,
    source: str = STDIN_MARKER,
    hex_input: bool = False,
    output_format: OutputFormat = OutputFormat.TEXT,
) -> None:
    """Decode a snapshot and print its fields.

    Args:
        source (str): Input file, or ``-`` for STDIN.
        hex_input (bool): Whether the input is hexadecimal text.
        output_format (OutputFormat): Output format (text, json or toml).
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    data: bytes = read_input_bytes(source, hex_input=hex_input)
    try:
        snapshot = PathEnvironmentSnapshot.from_bytes(data)
    except SnapshotDecodeError as exc:
        raise translate_error(exc) from exc

    emit_snapshot(console, snapshot, output_format, verbosity=get_effective_verbosity(ctx))
