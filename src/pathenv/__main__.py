# topmark:header:start
#
#   project      : PathEnv
#   file         : __main__.py
#   file_relpath : src/pathenv/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running PathEnv via ``python -m pathenv``.

Delegates to :func:`pathenv.cli.main.cli`, the same entry point as the
``pathenv`` console script.
"""

from __future__ import annotations

from pathenv.cli.main import cli

if __name__ == "__main__":
    cli()
