# topmark:header:start
#
#   project      : PathEnv
#   file         : constants.py
#   file_relpath : src/pathenv/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PathEnv Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

PATHENV_VERSION: str = get_version("pathenv")

# Wire layout (all integers little-endian).
COMPARISON_SIZE: Final[int] = 4  # signed 32-bit comparison ordinal
CHAR_SIZE: Final[int] = 2  # one UTF-16 code unit
SEPARATOR_COUNT: Final[int] = 3
LENGTH_SIZE: Final[int] = 4  # unsigned 32-bit UTF-8 byte count

HEADER_SIZE: Final[int] = COMPARISON_SIZE + SEPARATOR_COUNT * CHAR_SIZE + LENGTH_SIZE

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1
MAX_CHAR_CODE: Final[int] = 0xFFFF
MAX_DIRECTORY_BYTES: Final[int] = 2**32 - 1

# Table names used by TOML snapshot documents.
SNAPSHOT_TABLE: Final[str] = "snapshot"
PYPROJECT_SNAPSHOT_TABLE: Final[str] = "tool.pathenv.snapshot"
