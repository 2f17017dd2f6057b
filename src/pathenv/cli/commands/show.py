# topmark:header:start
#
#   project      : PathEnv
#   file         : show.py
#   file_relpath : src/pathenv/cli/commands/show.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PathEnv `show` command.

Captures the current path environment (optionally overlaid with a TOML
snapshot document) and prints it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pathenv.cli.cmd_common import emit_snapshot, get_console, get_effective_verbosity, load_snapshot
from pathenv.cli.options import OutputFormat, config_option, format_option

if TYPE_CHECKING:
    from pathlib import Path


@click.command(
    name="show",
    help="Capture the current path environment and print it.",
)
@config_option
@format_option
def show_command(
    *,
    config_path: Path | None = None,
    output_format: OutputFormat = OutputFormat.TEXT,
) -> None:
    """Capture and print a path environment snapshot.

    Args:
        config_path (Path | None): Optional TOML document overriding captured values.
        output_format (OutputFormat): Output format (text, json or toml).
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    snapshot = load_snapshot(config_path)
    emit_snapshot(console, snapshot, output_format, verbosity=get_effective_verbosity(ctx))
