# topmark:header:start
#
#   project      : PathEnv
#   file         : main.py
#   file_relpath : src/pathenv/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PathEnv command-line interface.

Key ideas:
- Group-level options are initialized once and placed into ``ctx.obj``.
- Internal logging is configured from ``PATHENV_LOG_LEVEL``; program output
  goes through the console stored in ``ctx.obj["console"]``.
- Subcommands reuse the helpers in `pathenv.cli.cmd_common`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pathenv.cli.commands.compare import compare_command
from pathenv.cli.commands.decode import decode_command
from pathenv.cli.commands.encode import encode_command
from pathenv.cli.commands.show import show_command
from pathenv.cli.commands.version import version_command
from pathenv.cli.console import ClickConsole
from pathenv.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from pathenv.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from pathenv.cli.console import ConsoleLike
    from pathenv.config.logging import PathEnvLogger

logger: PathEnvLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags (0..2).
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_cli = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("CLI state: verbosity=%d color=%s", level_cli, enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Capture, encode and decode path environment snapshots.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the PathEnv CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'pathenv show' to print the current path environment.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(show_command)

cli.add_command(encode_command)

cli.add_command(decode_command)

cli.add_command(compare_command)

if __name__ == "__main__":
    cli()
