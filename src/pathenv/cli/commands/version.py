# topmark:header:start
#
#   project      : PathEnv
#   file         : version.py
#   file_relpath : src/pathenv/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PathEnv `version` command.

Prints the current PathEnv version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from pathenv.cli.cmd_common import get_console, get_effective_verbosity
from pathenv.cli.options import OutputFormat, format_option
from pathenv.constants import HEADER_SIZE, PATHENV_VERSION


@click.command(
    name="version",
    help="Show the current version of PathEnv.",
)
@format_option
def version_command(*, output_format: OutputFormat = OutputFormat.TEXT) -> None:
    """Show the current version of PathEnv.

    With ``-v`` the text output also names the snapshot header size.

    Args:
        output_format (OutputFormat): Output format (text, json or toml).
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)

    if output_format == OutputFormat.JSON:
        console.print(json.dumps({"version": PATHENV_VERSION}))
    elif output_format == OutputFormat.TOML:
        console.print(f'version = "{PATHENV_VERSION}"')
    elif vlevel > 0:
        console.print(f"PathEnv {PATHENV_VERSION} (snapshot header: {HEADER_SIZE} bytes)")
    else:
        console.print(PATHENV_VERSION)
