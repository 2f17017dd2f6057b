# topmark:header:start
#
#   project      : PathEnv
#   file         : __init__.py
#   file_relpath : src/pathenv/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PathEnv CLI package.

This package groups the Click command definitions and supporting utilities
for the ``pathenv`` command-line tool.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        pathenv = "pathenv.cli.main:cli"

All subcommands live in [`pathenv.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
