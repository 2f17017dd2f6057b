# topmark:header:start
#
#   project      : PathEnv
#   file         : compare.py
#   file_relpath : src/pathenv/cli/commands/compare.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PathEnv `compare` command.

Resolves two paths against the snapshot's current directory and compares
them with the snapshot's comparer. Exits ``0`` when the paths are equal and
``1`` when they differ.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pathenv.cli.cmd_common import get_console, get_effective_verbosity, load_snapshot
from pathenv.cli.errors import translate_error
from pathenv.cli.exit_codes import ExitCode
from pathenv.cli.options import config_option
from pathenv.errors import UnsupportedModeError
from pathenv.paths import SnapshotPathOperations

if TYPE_CHECKING:
    from pathlib import Path


@click.command(
    name="compare",
    help="Compare two paths the way the captured environment would.",
)
@click.argument("path_a")
@click.argument("path_b")
@config_option
def compare_command(
    *,
    path_a: str,
    path_b: str,
    config_path: Path | None = None,
) -> None:
    """Compare ``path_a`` and ``path_b`` under the snapshot's comparer.

    Prints ``equal`` or ``different``; with ``-v`` also the full paths and
    their ordering (``<``, ``=`` or ``>``).

    Args:
        path_a (str): First path.
        path_b (str): Second path.
        config_path (Path | None): Optional TOML document overriding captured values.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)

    snapshot = load_snapshot(config_path)
    ops = SnapshotPathOperations(snapshot)
    try:
        order: int = ops.compare_paths(path_a, path_b)
    except UnsupportedModeError as exc:
        raise translate_error(exc) from exc

    if vlevel > 0:
        sign: str = "<" if order < 0 else (">" if order > 0 else "=")
        console.print(f"{ops.get_full_path(path_a)} {sign} {ops.get_full_path(path_b)}")
        console.print(f"comparison : {snapshot.comparison_label}")
    if vlevel >= 0:
        console.print("equal" if order == 0 else "different")

    if order != 0:
        ctx.exit(ExitCode.FAILURE)
