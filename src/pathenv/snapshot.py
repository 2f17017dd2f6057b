# topmark:header:start
#
#   project      : PathEnv
#   file         : snapshot.py
#   file_relpath : src/pathenv/snapshot.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable snapshot of a runtime environment's path-handling semantics.

A `PathEnvironmentSnapshot` records how a host compares paths, which
characters separate directory levels and volumes, and the working directory.
A component that receives the snapshot (usually as bytes, see
`pathenv.codec`) can then interpret paths exactly like the host does.

Construction:
    - Explicit: `PathEnvironmentSnapshot.create(...)` or the constructor.
    - Ambient: `PathEnvironmentSnapshot.capture_current(provider)` reads the
      values from an `EnvironmentInfoProvider`. Each call is an independent
      read; nothing is cached.

Validation is type-level only. The comparison value must be a signed 32-bit
integer, but an ordinal outside `PathComparison` is stored as a plain ``int``
and only fails once `comparer` is requested.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pathenv.comparison import PathComparer, PathComparison, resolve_comparer
from pathenv.config.logging import get_logger
from pathenv.constants import INT32_MAX, INT32_MIN, MAX_CHAR_CODE, MAX_DIRECTORY_BYTES
from pathenv.errors import InvalidArgumentError
from pathenv.provider import SystemEnvironmentProvider

if TYPE_CHECKING:
    from pathenv.config.logging import PathEnvLogger
    from pathenv.provider import EnvironmentInfoProvider

logger: PathEnvLogger = get_logger(__name__)


def coerce_comparison(value: object) -> PathComparison | int:
    """Normalize a comparison value to a member when possible.

    Args:
        value (object): Candidate comparison value.

    Returns:
        PathComparison | int: The member named by ``value``, or ``value`` itself
        as a plain ``int`` when it is outside the defined modes.

    Raises:
        InvalidArgumentError: If ``value`` is not an integer or does not fit in
            a signed 32-bit integer.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            "path_comparison", f"expected an integer, got {type(value).__name__}"
        )
    if not INT32_MIN <= value <= INT32_MAX:
        raise InvalidArgumentError("path_comparison", f"{value} does not fit in 32 bits")
    try:
        return PathComparison(value)
    except ValueError:
        return int(value)


def _check_separator(name: str, value: object) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise InvalidArgumentError(name, f"expected a single character, got {value!r}")
    if ord(value) > MAX_CHAR_CODE:
        raise InvalidArgumentError(name, f"{value!r} is not a single UTF-16 code unit")


def _check_directory(value: object) -> None:
    if value is None:
        raise InvalidArgumentError("current_directory", "must not be None")
    if not isinstance(value, str):
        raise InvalidArgumentError(
            "current_directory", f"expected a str, got {type(value).__name__}"
        )
    try:
        size: int = len(value.encode("utf-8"))
    except UnicodeEncodeError as exc:
        raise InvalidArgumentError("current_directory", f"not UTF-8 encodable: {exc.reason}") from exc
    if size > MAX_DIRECTORY_BYTES:
        raise InvalidArgumentError("current_directory", f"{size} bytes exceeds the 32-bit limit")


@dataclass(frozen=True, slots=True)
class PathEnvironmentSnapshot:
    """Path-handling semantics of an environment at one point in time.

    Attributes:
        path_comparison (PathComparison | int): Strategy used to compare paths.
            Unknown wire ordinals are kept as plain ``int``.
        directory_separator (str): Primary directory separator.
        alt_directory_separator (str): Alternate directory separator.
        volume_separator (str): Volume (drive) separator.
        current_directory (str): The working directory.
    """

    path_comparison: PathComparison | int
    directory_separator: str
    alt_directory_separator: str
    volume_separator: str
    current_directory: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "path_comparison", coerce_comparison(self.path_comparison))
        _check_separator("directory_separator", self.directory_separator)
        _check_separator("alt_directory_separator", self.alt_directory_separator)
        _check_separator("volume_separator", self.volume_separator)
        _check_directory(self.current_directory)

    @classmethod
    def create(
        cls,
        path_comparison: PathComparison | int,
        directory_separator: str,
        alt_directory_separator: str,
        volume_separator: str,
        current_directory: str,
    ) -> PathEnvironmentSnapshot:
        """Build a snapshot from explicit field values.

        Raises:
            InvalidArgumentError: If ``current_directory`` is ``None`` or a field
                has the wrong shape.
        """
        return cls(
            path_comparison,
            directory_separator,
            alt_directory_separator,
            volume_separator,
            current_directory,
        )

    @classmethod
    def capture_current(
        cls, provider: EnvironmentInfoProvider | None = None
    ) -> PathEnvironmentSnapshot:
        """Capture the snapshot of the active environment.

        Args:
            provider (EnvironmentInfoProvider | None): Source of the environment
                values. Defaults to a fresh `SystemEnvironmentProvider`.

        Returns:
            PathEnvironmentSnapshot: A new snapshot; nothing is cached.
        """
        source: EnvironmentInfoProvider = provider or SystemEnvironmentProvider()
        comparison: PathComparison | int = source.path_comparison()
        sep, alt_sep, vol_sep = source.separators()
        current_directory: str = source.current_directory()
        snapshot = cls(comparison, sep, alt_sep, vol_sep, current_directory)
        logger.debug("Captured %r", snapshot)
        return snapshot

    @property
    def comparer(self) -> PathComparer:
        """Comparer implementing `path_comparison`.

        Raises:
            UnsupportedModeError: If `path_comparison` is not a defined mode.
        """
        return resolve_comparer(self.path_comparison)

    @property
    def comparison_label(self) -> str:
        """Machine key of the comparison mode, or ``"<ordinal> (unsupported)"``."""
        if isinstance(self.path_comparison, PathComparison):
            return self.path_comparison.key
        return f"{self.path_comparison} (unsupported)"

    def to_bytes(self) -> bytes:
        """Encode this snapshot (see `pathenv.codec.encode_snapshot`)."""
        from pathenv.codec import encode_snapshot

        return encode_snapshot(self)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> PathEnvironmentSnapshot:
        """Decode a snapshot (see `pathenv.codec.decode_snapshot`)."""
        from pathenv.codec import decode_snapshot

        return decode_snapshot(data)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON/TOML-friendly mapping of the five fields.

        Known comparison modes are exported by key, unknown ones as integers.
        """
        comparison: str | int = (
            self.path_comparison.key
            if isinstance(self.path_comparison, PathComparison)
            else self.path_comparison
        )
        return {
            "path_comparison": comparison,
            "directory_separator": self.directory_separator,
            "alt_directory_separator": self.alt_directory_separator,
            "volume_separator": self.volume_separator,
            "current_directory": self.current_directory,
        }
