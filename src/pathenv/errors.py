# topmark:header:start
#
#   project      : PathEnv
#   file         : errors.py
#   file_relpath : src/pathenv/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by PathEnv.

Hierarchy:
    - `PathEnvError`: base class for every PathEnv failure.
        - `InvalidArgumentError`: missing or ill-typed construction input.
        - `SnapshotDecodeError`: a byte buffer cannot be decoded.
            - `SnapshotTooShortError`: shorter than the fixed header.
            - `SnapshotTruncatedError`: shorter than header + declared string length.
            - `InvalidEncodingError`: trailing bytes are not valid UTF-8.
        - `UnsupportedModeError`: comparison value outside the closed enum set.
        - `SnapshotConfigError`: malformed TOML snapshot document.

All concrete errors also derive from `ValueError` so callers that only know the
standard library taxonomy can still catch them.
"""

from __future__ import annotations


class PathEnvError(Exception):
    """Base class for all PathEnv errors."""


class InvalidArgumentError(PathEnvError, ValueError):
    """A required construction input is missing or has the wrong shape."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(f"{name}: {message}")
        self.name: str = name


class SnapshotDecodeError(PathEnvError, ValueError):
    """Base class for byte buffers that cannot be decoded into a snapshot.

    Attributes:
        expected (int): Minimum number of bytes required.
        actual (int): Number of bytes provided.
    """

    def __init__(self, message: str, *, expected: int = 0, actual: int = 0) -> None:
        super().__init__(message)
        self.expected: int = expected
        self.actual: int = actual


class SnapshotTooShortError(SnapshotDecodeError):
    """The buffer is shorter than the fixed header."""


class SnapshotTruncatedError(SnapshotDecodeError):
    """The buffer is shorter than the header plus the declared string length."""


class InvalidEncodingError(SnapshotDecodeError):
    """The tail-anchored directory bytes are not valid UTF-8."""


class UnsupportedModeError(PathEnvError, ValueError):
    """A comparison value does not name one of the defined comparison modes."""

    def __init__(self, value: int) -> None:
        super().__init__(f"Unsupported path comparison mode: {value!r}")
        self.value: int = value


class SnapshotConfigError(PathEnvError, ValueError):
    """A TOML snapshot document is malformed or holds values of the wrong type."""
