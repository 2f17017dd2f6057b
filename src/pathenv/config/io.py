# topmark:header:start
#
#   project      : PathEnv
#   file         : io.py
#   file_relpath : src/pathenv/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML snapshot documents.

A snapshot can be pinned in TOML, either in a standalone file:

```toml
[snapshot]
path_comparison = "ordinal"
directory_separator = "/"
alt_directory_separator = "/"
volume_separator = ":"
current_directory = "/home/user"
```

or under ``[tool.pathenv.snapshot]`` in ``pyproject.toml``.

Every key is optional. Missing keys fall through to a base provider (the
running system by default), which lets a document override only the parts of
the environment it cares about. ``path_comparison`` accepts a mode key
(see `PathComparison.parse`) or a raw integer ordinal.

Parsing is done with `tomlkit`; documents are rendered back with `tomlkit`
so round-tripped files stay readable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from pathenv.comparison import PathComparison
from pathenv.config.logging import get_logger
from pathenv.constants import PYPROJECT_SNAPSHOT_TABLE, SNAPSHOT_TABLE
from pathenv.errors import SnapshotConfigError
from pathenv.provider import SystemEnvironmentProvider
from pathenv.snapshot import PathEnvironmentSnapshot

if TYPE_CHECKING:
    from pathlib import Path

    from pathenv.config.logging import PathEnvLogger
    from pathenv.provider import EnvironmentInfoProvider

logger: PathEnvLogger = get_logger(__name__)

TomlTable = dict[str, Any]

_SURROGATE_MIN: Final[int] = 0xD800
_SURROGATE_MAX: Final[int] = 0xDFFF

KEY_PATH_COMPARISON: Final[str] = "path_comparison"
KEY_DIRECTORY_SEPARATOR: Final[str] = "directory_separator"
KEY_ALT_DIRECTORY_SEPARATOR: Final[str] = "alt_directory_separator"
KEY_VOLUME_SEPARATOR: Final[str] = "volume_separator"
KEY_CURRENT_DIRECTORY: Final[str] = "current_directory"

KNOWN_KEYS: Final[frozenset[str]] = frozenset(
    {
        KEY_PATH_COMPARISON,
        KEY_DIRECTORY_SEPARATOR,
        KEY_ALT_DIRECTORY_SEPARATOR,
        KEY_VOLUME_SEPARATOR,
        KEY_CURRENT_DIRECTORY,
    }
)


def parse_toml_text(text: str, *, source: str = "<string>") -> TomlTable:
    """Parse TOML text into a plain ``dict``.

    Raises:
        SnapshotConfigError: If ``text`` is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise SnapshotConfigError(f"Invalid TOML in {source}: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def find_snapshot_table(doc: TomlTable, *, source: str = "<string>") -> TomlTable:
    """Return the snapshot table of a parsed document.

    Looks for ``[snapshot]`` first, then ``[tool.pathenv.snapshot]``.

    Raises:
        SnapshotConfigError: If neither table exists or it is not a table.
    """
    for dotted in (SNAPSHOT_TABLE, PYPROJECT_SNAPSHOT_TABLE):
        node: Any = doc
        for part in dotted.split("."):
            node = node.get(part) if isinstance(node, dict) else None
        if node is None:
            continue
        if not isinstance(node, dict):
            raise SnapshotConfigError(f"[{dotted}] in {source} must be a table")
        table: TomlTable = cast("TomlTable", node)
        unknown: set[str] = set(table) - KNOWN_KEYS
        if unknown:
            logger.warning("Ignoring unknown keys in [%s]: %s", dotted, ", ".join(sorted(unknown)))
        logger.debug("Using [%s] from %s", dotted, source)
        return table
    raise SnapshotConfigError(
        f"No [{SNAPSHOT_TABLE}] or [{PYPROJECT_SNAPSHOT_TABLE}] table in {source}"
    )


def load_snapshot_table(path: Path) -> TomlTable:
    """Read ``path`` and return its snapshot table.

    Raises:
        OSError: If the file cannot be read.
        SnapshotConfigError: If the document is invalid or has no snapshot table.
    """
    text: str = path.read_text(encoding="utf-8")
    return find_snapshot_table(parse_toml_text(text, source=str(path)), source=str(path))


def _get_comparison(table: TomlTable) -> PathComparison | int | None:
    raw: Any = table.get(KEY_PATH_COMPARISON)
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise SnapshotConfigError(f"'{KEY_PATH_COMPARISON}' must be a string or an integer")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        parsed: PathComparison | None = PathComparison.parse(raw)
        if parsed is None:
            choices: str = ", ".join(m.key for m in PathComparison)
            raise SnapshotConfigError(
                f"Unknown {KEY_PATH_COMPARISON} {raw!r}; expected one of: {choices}"
            )
        return parsed
    raise SnapshotConfigError(f"'{KEY_PATH_COMPARISON}' must be a string or an integer")


def _get_str(table: TomlTable, key: str) -> str | None:
    raw: Any = table.get(key)
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise SnapshotConfigError(f"'{key}' must be a string, got {type(raw).__name__}")
    return raw


class ConfiguredEnvironmentProvider:
    """Provider overlaying a snapshot table on top of a base provider.

    Args:
        table (TomlTable): A snapshot table (see `find_snapshot_table`).
        base (EnvironmentInfoProvider | None): Provider for keys the table does
            not set. Defaults to `SystemEnvironmentProvider`.

    Raises:
        SnapshotConfigError: If a configured value has the wrong type.
    """

    def __init__(self, table: TomlTable, base: EnvironmentInfoProvider | None = None) -> None:
        self._base: EnvironmentInfoProvider = base or SystemEnvironmentProvider()
        self._comparison: PathComparison | int | None = _get_comparison(table)
        self._dir: str | None = _get_str(table, KEY_DIRECTORY_SEPARATOR)
        self._alt: str | None = _get_str(table, KEY_ALT_DIRECTORY_SEPARATOR)
        self._vol: str | None = _get_str(table, KEY_VOLUME_SEPARATOR)
        self._cwd: str | None = _get_str(table, KEY_CURRENT_DIRECTORY)

    def path_comparison(self) -> PathComparison | int:
        """Configured comparison, else the base provider's."""
        if self._comparison is not None:
            return self._comparison
        return self._base.path_comparison()

    def separators(self) -> tuple[str, str, str]:
        """Configured separators, each falling back to the base provider's."""
        if self._dir is not None and self._alt is not None and self._vol is not None:
            return self._dir, self._alt, self._vol
        base_dir, base_alt, base_vol = self._base.separators()
        return (
            base_dir if self._dir is None else self._dir,
            base_alt if self._alt is None else self._alt,
            base_vol if self._vol is None else self._vol,
        )

    def current_directory(self) -> str:
        """Configured working directory, else the base provider's."""
        if self._cwd is not None:
            return self._cwd
        return self._base.current_directory()


def snapshot_from_table(
    table: TomlTable, base: EnvironmentInfoProvider | None = None
) -> PathEnvironmentSnapshot:
    """Capture a snapshot from a snapshot table overlaid on ``base``.

    Raises:
        SnapshotConfigError: If a configured value has the wrong type or shape.
    """
    provider = ConfiguredEnvironmentProvider(table, base)
    try:
        return PathEnvironmentSnapshot.capture_current(provider)
    except ValueError as exc:
        raise SnapshotConfigError(f"Invalid snapshot configuration: {exc}") from exc


def snapshot_to_table(snapshot: PathEnvironmentSnapshot) -> TomlTable:
    """Return ``{"snapshot": {...}}`` for ``snapshot``."""
    return {SNAPSHOT_TABLE: snapshot.to_dict()}


def render_snapshot_toml(snapshot: PathEnvironmentSnapshot) -> str:
    """Render ``snapshot`` as a standalone TOML document.

    Raises:
        SnapshotConfigError: If a separator is a lone surrogate, which TOML
            strings cannot hold (not even escaped).
    """
    doc: tomlkit.TOMLDocument = tomlkit.document()
    doc.add(tomlkit.comment("PathEnv snapshot"))
    table = tomlkit.table()
    for key, value in snapshot.to_dict().items():
        if isinstance(value, str):
            for ch in value:
                if _SURROGATE_MIN <= ord(ch) <= _SURROGATE_MAX:
                    raise SnapshotConfigError(
                        f"Cannot render {key} as TOML: lone surrogate U+{ord(ch):04X}"
                    )
        table.add(key, value)
    doc.add(SNAPSHOT_TABLE, table)
    return tomlkit.dumps(doc)
