# topmark:header:start
#
#   project      : PathEnv
#   file         : __init__.py
#   file_relpath : src/pathenv/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PathEnv package.

PathEnv captures how a runtime environment handles paths (comparison rules,
directory/volume separators, working directory) as an immutable snapshot, and
encodes it into a compact binary form so another process or a reloaded module
can interpret paths exactly like its host.

Typical usage:
    ```python
    from pathenv import PathEnvironmentSnapshot

    data = PathEnvironmentSnapshot.capture_current().to_bytes()
    # ... ship `data` across the boundary ...
    snapshot = PathEnvironmentSnapshot.from_bytes(data)
    snapshot.comparer.equals("/a/B", "/a/b")
    ```
"""

from __future__ import annotations

from pathenv.codec import decode_snapshot, encode_snapshot, encoded_size
from pathenv.comparison import PathComparer, PathComparison, resolve_comparer
from pathenv.constants import HEADER_SIZE
from pathenv.errors import (
    InvalidArgumentError,
    InvalidEncodingError,
    PathEnvError,
    SnapshotConfigError,
    SnapshotDecodeError,
    SnapshotTooShortError,
    SnapshotTruncatedError,
    UnsupportedModeError,
)
from pathenv.paths import SnapshotPathOperations
from pathenv.provider import (
    EnvironmentInfoProvider,
    StaticEnvironmentProvider,
    SystemEnvironmentProvider,
)
from pathenv.snapshot import PathEnvironmentSnapshot

__all__ = [
    "HEADER_SIZE",
    "EnvironmentInfoProvider",
    "InvalidArgumentError",
    "InvalidEncodingError",
    "PathComparer",
    "PathComparison",
    "PathEnvError",
    "PathEnvironmentSnapshot",
    "SnapshotConfigError",
    "SnapshotDecodeError",
    "SnapshotPathOperations",
    "SnapshotTooShortError",
    "SnapshotTruncatedError",
    "StaticEnvironmentProvider",
    "SystemEnvironmentProvider",
    "UnsupportedModeError",
    "decode_snapshot",
    "encode_snapshot",
    "encoded_size",
    "resolve_comparer",
]
