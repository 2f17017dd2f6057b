# topmark:header:start
#
#   project      : PathEnv
#   file         : __init__.py
#   file_relpath : src/pathenv/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``pathenv`` CLI."""
