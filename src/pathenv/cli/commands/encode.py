# topmark:header:start
#
#   project      : PathEnv
#   file         : encode.py
#   file_relpath : src/pathenv/cli/commands/encode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PathEnv `encode` command.

Captures the path environment and writes its binary encoding. Without
``--output`` the bytes are printed to stdout as lowercase hex; with
``--output FILE`` raw bytes are written, unless ``--hex`` is given.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pathenv.cli.cmd_common import get_console, get_effective_verbosity, load_snapshot
from pathenv.cli.errors import translate_error
from pathenv.cli.options import config_option
from pathenv.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from pathenv.config.logging import PathEnvLogger

logger: PathEnvLogger = get_logger(__name__)


@click.command(
    name="encode",
    help="Encode the captured path environment.",
)
@config_option
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the encoding to FILE instead of printing hex to stdout.",
)
@click.option(
    "--hex",
    "hex_output",
    is_flag=True,
    default=False,
    help="Write hexadecimal text to --output instead of raw bytes.",
)
def encode_command(
    *,
    config_path: Path | None = None,
    output_path: str | None = None,
    hex_output: bool = False,
) -> None:
    """Encode a snapshot of the path environment.

    Args:
        config_path (Path | None): Optional TOML document overriding captured values.
        output_path (str | None): Destination file; stdout (hex) when ``None``.
        hex_output (bool): Write hex text to ``output_path`` instead of raw bytes.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)

    snapshot = load_snapshot(config_path)
    data: bytes = snapshot.to_bytes()

    if output_path is None:
        console.print(data.hex())
        return

    try:
        if hex_output:
            with open(output_path, "w", encoding="ascii") as fh:
                fh.write(data.hex() + "\n")
        else:
            with open(output_path, "wb") as fh:
                fh.write(data)
    except OSError as exc:
        raise translate_error(exc) from exc

    logger.debug("Wrote %d bytes to %s", len(data), output_path)
    if vlevel > 0:
        console.print(f"Wrote {len(data)} bytes to {output_path}")
