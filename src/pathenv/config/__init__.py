# topmark:header:start
#
#   project      : PathEnv
#   file         : __init__.py
#   file_relpath : src/pathenv/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ambient configuration for PathEnv.

Submodules:
    - `pathenv.config.logging`: TRACE-aware logger and colored formatter.
    - `pathenv.config.io`: TOML snapshot documents.

The core modules import `pathenv.config.logging`, so this package must not
import `pathenv.config.io` (which depends on the core) at import time.
"""

from __future__ import annotations

__all__: list[str] = []
