# topmark:header:start
#
#   project      : PathEnv
#   file         : codec.py
#   file_relpath : src/pathenv/codec.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Binary codec for `PathEnvironmentSnapshot`.

Layout (little-endian, no version marker):

| Offset | Size | Field                                           |
|--------|------|-------------------------------------------------|
| 0      | 4    | comparison ordinal (signed 32-bit)              |
| 4      | 2    | directory separator (UTF-16 code unit)          |
| 6      | 2    | alternate directory separator (UTF-16 code unit)|
| 8      | 2    | volume separator (UTF-16 code unit)             |
| 10     | 4    | N = UTF-8 byte length of the directory (uint32) |
| end-N  | N    | UTF-8 bytes of the current directory            |

The directory bytes are anchored to the *end* of the buffer: a decoder reads
the last N bytes whatever the total length is, so bytes sitting between the
header and the string are ignored. Encoding always emits them right after the
header, which makes the encoded form canonical.

The comparison ordinal is written and read as-is. Range checks happen when a
comparer is requested (see `pathenv.comparison.resolve_comparer`).
"""

from __future__ import annotations

import struct
from typing import TYPE_CHECKING, Final

from pathenv.config.logging import get_logger
from pathenv.constants import HEADER_SIZE
from pathenv.errors import (
    InvalidArgumentError,
    InvalidEncodingError,
    SnapshotTooShortError,
    SnapshotTruncatedError,
)
from pathenv.snapshot import PathEnvironmentSnapshot

if TYPE_CHECKING:
    from pathenv.config.logging import PathEnvLogger

logger: PathEnvLogger = get_logger(__name__)

_HEADER: Final[struct.Struct] = struct.Struct("<iHHHI")


def encoded_size(snapshot: PathEnvironmentSnapshot) -> int:
    """Return the number of bytes `encode_snapshot` produces for ``snapshot``."""
    return HEADER_SIZE + len(snapshot.current_directory.encode("utf-8"))


def encode_snapshot(snapshot: PathEnvironmentSnapshot) -> bytes:
    """Serialize ``snapshot`` to its wire form.

    Args:
        snapshot (PathEnvironmentSnapshot): The snapshot to serialize.

    Returns:
        bytes: ``HEADER_SIZE + N`` bytes, N being the UTF-8 length of the directory.
    """
    payload: bytes = snapshot.current_directory.encode("utf-8")
    header: bytes = _HEADER.pack(
        int(snapshot.path_comparison),
        ord(snapshot.directory_separator),
        ord(snapshot.alt_directory_separator),
        ord(snapshot.volume_separator),
        len(payload),
    )
    logger.trace(
        "Encoded snapshot: comparison=%r, directory bytes=%d, total=%d",
        snapshot.path_comparison,
        len(payload),
        HEADER_SIZE + len(payload),
    )
    return header + payload


def decode_snapshot(data: bytes | bytearray | memoryview) -> PathEnvironmentSnapshot:
    """Deserialize a snapshot from its wire form.

    Args:
        data (bytes | bytearray | memoryview): The encoded snapshot.

    Returns:
        PathEnvironmentSnapshot: The decoded snapshot.

    Raises:
        InvalidArgumentError: If ``data`` is ``None``.
        SnapshotTooShortError: If ``data`` is shorter than the fixed header.
        SnapshotTruncatedError: If ``data`` is shorter than the header plus the
            declared directory length.
        InvalidEncodingError: If the trailing directory bytes are not valid UTF-8.
    """
    if data is None:
        raise InvalidArgumentError("data", "must not be None")

    buf: bytes = bytes(data)
    size: int = len(buf)
    if size < HEADER_SIZE:
        logger.debug("Rejecting %d-byte buffer: header needs %d bytes", size, HEADER_SIZE)
        raise SnapshotTooShortError(
            f"Byte array must be at least {HEADER_SIZE} bytes long (got {size}).",
            expected=HEADER_SIZE,
            actual=size,
        )

    comparison, sep, alt_sep, vol_sep, count = _HEADER.unpack_from(buf, 0)

    expected: int = HEADER_SIZE + count
    if size < expected:
        logger.debug(
            "Rejecting %d-byte buffer: header declares %d directory bytes", size, count
        )
        raise SnapshotTruncatedError(
            f"Byte array must be at least {expected} bytes long (got {size}).",
            expected=expected,
            actual=size,
        )

    tail: bytes = buf[size - count :]
    try:
        current_directory: str = tail.decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.debug("Rejecting buffer: directory bytes are not UTF-8 (%s)", exc)
        raise InvalidEncodingError(
            f"Current directory is not valid UTF-8: {exc.reason}",
            expected=expected,
            actual=size,
        ) from exc

    logger.trace("Decoded snapshot: comparison=%r, directory bytes=%d", comparison, count)
    return PathEnvironmentSnapshot(
        comparison,
        chr(sep),
        chr(alt_sep),
        chr(vol_sep),
        current_directory,
    )
