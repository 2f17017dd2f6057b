# topmark:header:start
#
#   project      : PathEnv
#   file         : comparison.py
#   file_relpath : src/pathenv/comparison.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Path comparison modes and the comparers derived from them.

`PathComparison` is the closed set of comparison strategies a snapshot can
carry. Its integer values are the wire ordinals and must never be renumbered.

`resolve_comparer` maps a comparison value to a `PathComparer`. The mapping is
exhaustive over the six members; anything else raises `UnsupportedModeError`.

Strategies:
    - Ordinal: UTF-16 code unit order (the order used by the hosts that
      exchange snapshots), optionally after a per-character simple uppercase
      mapping.
    - Current culture: `locale.strxfrm` under the active ``LC_COLLATE``,
      resolved at comparison time, on NFC-normalized text.
    - Invariant culture: a locale-independent three-level key (base letters,
      then marks, then case) on NFD text, so canonically equivalent strings
      compare equal.
"""

from __future__ import annotations

import locale
import unicodedata
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Final

from pathenv.errors import UnsupportedModeError

if TYPE_CHECKING:
    from collections.abc import Callable


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string to match keys and aliases."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class PathComparison(IntEnum):
    """Closed set of path comparison strategies.

    Attributes:
        CURRENT_CULTURE: Culture-sensitive, case-sensitive.
        CURRENT_CULTURE_IGNORE_CASE: Culture-sensitive, case-insensitive.
        INVARIANT_CULTURE: Locale-independent linguistic, case-sensitive.
        INVARIANT_CULTURE_IGNORE_CASE: Locale-independent linguistic, case-insensitive.
        ORDINAL: Code unit comparison.
        ORDINAL_IGNORE_CASE: Code unit comparison after simple uppercasing.
    """

    CURRENT_CULTURE = 0
    CURRENT_CULTURE_IGNORE_CASE = 1
    INVARIANT_CULTURE = 2
    INVARIANT_CULTURE_IGNORE_CASE = 3
    ORDINAL = 4
    ORDINAL_IGNORE_CASE = 5

    @property
    def key(self) -> str:
        """Stable machine key (lower snake case of the member name)."""
        return self.name.lower()

    @property
    def ignore_case(self) -> bool:
        """Whether the strategy treats upper and lower case as equal."""
        return self.name.endswith("_IGNORE_CASE")

    @classmethod
    def parse(cls, raw: str | None) -> PathComparison | None:
        """Parse a token into a member.

        Matches the key, the member name, and the aliases in `_ALIASES`.
        Matching is case-insensitive and normalizes '-' and ' ' to '_'.

        Args:
            raw (str | None): Token to parse.

        Returns:
            PathComparison | None: The matching member, or ``None`` on a miss.
        """
        if raw is None:
            return None
        token: str = _norm_token(raw)
        for member in cls:
            if token == member.key:
                return member
        return _ALIASES.get(token)


_ALIASES: Final[dict[str, PathComparison]] = {
    "culture": PathComparison.CURRENT_CULTURE,
    "culture_ignore_case": PathComparison.CURRENT_CULTURE_IGNORE_CASE,
    "culture_ic": PathComparison.CURRENT_CULTURE_IGNORE_CASE,
    "invariant": PathComparison.INVARIANT_CULTURE,
    "invariant_ignore_case": PathComparison.INVARIANT_CULTURE_IGNORE_CASE,
    "invariant_ic": PathComparison.INVARIANT_CULTURE_IGNORE_CASE,
    "ordinal_ic": PathComparison.ORDINAL_IGNORE_CASE,
}


class PathComparer:
    """String comparer bound to one `PathComparison` strategy.

    All operations go through a single key function, so `equals`, `compare`
    and `hash` always agree with each other.
    """

    __slots__ = ("_key", "comparison")

    comparison: PathComparison

    def __init__(self, comparison: PathComparison, key: Callable[[str], Any]) -> None:
        self.comparison = comparison
        self._key = key

    def sort_key(self, value: str) -> Any:
        """Return a key suitable for ``sorted(..., key=comparer.sort_key)``."""
        return self._key(value)

    def compare(self, x: str, y: str) -> int:
        """Return a negative, zero or positive number as ``x`` sorts before, with or after ``y``."""
        kx: Any = self._key(x)
        ky: Any = self._key(y)
        return (kx > ky) - (kx < ky)

    def equals(self, x: str, y: str) -> bool:
        """Return whether ``x`` and ``y`` are equal under this strategy."""
        return self._key(x) == self._key(y)

    def hash(self, value: str) -> int:
        """Return a hash consistent with `equals`."""
        return hash(self._key(value))

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"PathComparer({self.comparison.name})"


def _ordinal_key(value: str) -> bytes:
    # Big-endian UTF-16 bytes order exactly like the code unit sequence.
    return value.encode("utf-16-be", "surrogatepass")


def _simple_upper(ch: str) -> str:
    upper: str = ch.upper()
    return upper if len(upper) == 1 else ch


def _ordinal_ignore_case_key(value: str) -> bytes:
    return _ordinal_key("".join(_simple_upper(ch) for ch in value))


def _collate(value: str) -> tuple[str, ...]:
    # strxfrm rejects embedded NULs; NUL sorts first, so it splits the key
    parts: list[str] = unicodedata.normalize("NFC", value).split("\x00")
    return tuple(locale.strxfrm(part) for part in parts)


def _culture_key(value: str) -> tuple[str, ...]:
    return _collate(value)


def _culture_ignore_case_key(value: str) -> tuple[str, ...]:
    return _collate(value.casefold())


def _invariant_levels(value: str) -> tuple[str, str, str]:
    decomposed: str = unicodedata.normalize("NFD", value)
    base: str = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    # swapcase() puts lowercase before uppercase on the tertiary level
    return base.casefold(), decomposed.casefold(), decomposed.swapcase()


def _invariant_key(value: str) -> tuple[str, str, str]:
    return _invariant_levels(value)


def _invariant_ignore_case_key(value: str) -> tuple[str, str]:
    primary, secondary, _ = _invariant_levels(value)
    return primary, secondary


CURRENT_CULTURE: Final[PathComparer] = PathComparer(
    PathComparison.CURRENT_CULTURE, _culture_key
)
CURRENT_CULTURE_IGNORE_CASE: Final[PathComparer] = PathComparer(
    PathComparison.CURRENT_CULTURE_IGNORE_CASE, _culture_ignore_case_key
)
INVARIANT_CULTURE: Final[PathComparer] = PathComparer(
    PathComparison.INVARIANT_CULTURE, _invariant_key
)
INVARIANT_CULTURE_IGNORE_CASE: Final[PathComparer] = PathComparer(
    PathComparison.INVARIANT_CULTURE_IGNORE_CASE, _invariant_ignore_case_key
)
ORDINAL: Final[PathComparer] = PathComparer(PathComparison.ORDINAL, _ordinal_key)
ORDINAL_IGNORE_CASE: Final[PathComparer] = PathComparer(
    PathComparison.ORDINAL_IGNORE_CASE, _ordinal_ignore_case_key
)


def resolve_comparer(comparison: PathComparison | int) -> PathComparer:
    """Return the comparer implementing ``comparison``.

    Args:
        comparison (PathComparison | int): A comparison member or a raw wire ordinal.

    Returns:
        PathComparer: The comparer for that strategy.

    Raises:
        UnsupportedModeError: If ``comparison`` is not one of the six defined modes.
    """
    if isinstance(comparison, bool):
        raise UnsupportedModeError(comparison)
    match comparison:
        case PathComparison.CURRENT_CULTURE:
            return CURRENT_CULTURE
        case PathComparison.CURRENT_CULTURE_IGNORE_CASE:
            return CURRENT_CULTURE_IGNORE_CASE
        case PathComparison.INVARIANT_CULTURE:
            return INVARIANT_CULTURE
        case PathComparison.INVARIANT_CULTURE_IGNORE_CASE:
            return INVARIANT_CULTURE_IGNORE_CASE
        case PathComparison.ORDINAL:
            return ORDINAL
        case PathComparison.ORDINAL_IGNORE_CASE:
            return ORDINAL_IGNORE_CASE
        case _:
            raise UnsupportedModeError(comparison)
