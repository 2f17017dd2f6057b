# topmark:header:start
#
#   project      : PathEnv
#   file         : test_io.py
#   file_relpath : tests/config/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML snapshot documents in `pathenv.config.io`."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import pytest
import tomlkit

from pathenv.comparison import PathComparison
from pathenv.config.io import (
    ConfiguredEnvironmentProvider,
    find_snapshot_table,
    load_snapshot_table,
    parse_toml_text,
    render_snapshot_toml,
    snapshot_from_table,
    snapshot_to_table,
)
from pathenv.errors import SnapshotConfigError
from pathenv.provider import StaticEnvironmentProvider
from tests.conftest import make_snapshot, make_windows_snapshot, parametrize

if TYPE_CHECKING:
    from pathlib import Path

BASE = StaticEnvironmentProvider(PathComparison.CURRENT_CULTURE, "/", "/", "/", "/base")

WINDOWS_DOC = """\
[snapshot]
path_comparison = "ordinal_ignore_case"
directory_separator = "\\\\"
alt_directory_separator = "/"
volume_separator = ":"
current_directory = "C:\\\\work"
"""


def test_full_table_builds_snapshot() -> None:
    """A complete table fully determines the snapshot."""
    table = find_snapshot_table(parse_toml_text(WINDOWS_DOC))

    snapshot = snapshot_from_table(table, BASE)

    assert snapshot == make_windows_snapshot(current_directory="C:\\work")


def test_missing_keys_fall_through_to_base() -> None:
    """Keys a table omits come from the base provider."""
    provider = ConfiguredEnvironmentProvider({"volume_separator": ":"}, BASE)

    assert provider.path_comparison() is PathComparison.CURRENT_CULTURE
    assert provider.separators() == ("/", "/", ":")
    assert provider.current_directory() == "/base"


def test_integer_mode_is_kept_raw() -> None:
    """Integer ordinals are accepted, including unknown ones."""
    snapshot = snapshot_from_table({"path_comparison": 99}, BASE)

    assert snapshot.path_comparison == 99


def test_pyproject_table_is_found(tmp_path: Path) -> None:
    """`[tool.pathenv.snapshot]` is used when there is no `[snapshot]` table."""
    path = tmp_path / "pyproject.toml"
    path.write_text(
        '[project]\nname = "demo"\n\n[tool.pathenv.snapshot]\npath_comparison = "ordinal"\n',
        encoding="utf-8",
    )

    table = load_snapshot_table(path)

    assert table == {"path_comparison": "ordinal"}


def test_load_missing_file_raises_os_error(tmp_path: Path) -> None:
    """Read errors are not converted."""
    with pytest.raises(FileNotFoundError):
        load_snapshot_table(tmp_path / "absent.toml")


@parametrize(
    "text, fragment",
    [
        ("[snapshot\n", "Invalid TOML"),
        ('[other]\nkey = "v"\n', "No [snapshot]"),
        ("snapshot = 3\n", "must be a table"),
    ],
)
def test_malformed_documents(text: str, fragment: str) -> None:
    """Syntax errors, missing tables and non-tables are configuration errors."""
    with pytest.raises(SnapshotConfigError) as excinfo:
        find_snapshot_table(parse_toml_text(text, source="doc.toml"), source="doc.toml")

    assert fragment in str(excinfo.value)


@parametrize(
    "table",
    [
        {"path_comparison": "sideways"},
        {"path_comparison": True},
        {"path_comparison": 1.5},
        {"path_comparison": 2**40},
        {"directory_separator": 1},
        {"directory_separator": "ab"},
        {"current_directory": ["a"]},
    ],
)
def test_invalid_values_are_configuration_errors(table: dict[str, Any]) -> None:
    """Wrong types and shapes raise `SnapshotConfigError`."""
    with pytest.raises(SnapshotConfigError):
        snapshot_from_table(table, BASE)


def test_unknown_keys_are_warned_about(caplog: pytest.LogCaptureFixture) -> None:
    """Unknown keys are ignored with a warning."""
    with caplog.at_level(logging.WARNING):
        table = find_snapshot_table({"snapshot": {"colour": "blue"}})

    assert table == {"colour": "blue"}
    assert "colour" in caplog.text


def test_rendered_document_reads_back() -> None:
    """Rendered TOML parses back to the same snapshot."""
    snapshot = make_snapshot(PathComparison.INVARIANT_CULTURE, current_directory="/srv/data")

    text: str = render_snapshot_toml(snapshot)

    assert text.startswith("# PathEnv snapshot")
    assert tomlkit.parse(text)["snapshot"]["path_comparison"] == "invariant_culture"
    table = find_snapshot_table(parse_toml_text(text))
    assert snapshot_from_table(table, BASE) == snapshot


def test_snapshot_to_table_nests_fields() -> None:
    """The exported mapping is keyed by the snapshot table name."""
    assert snapshot_to_table(make_snapshot(13)) == {"snapshot": make_snapshot(13).to_dict()}


def test_render_rejects_lone_surrogate_separator() -> None:
    """TOML strings cannot hold a lone surrogate, even escaped."""
    snapshot = make_snapshot(PathComparison.ORDINAL, "\ud800", "/", ":", "/srv")

    with pytest.raises(SnapshotConfigError, match="U\\+D800"):
        render_snapshot_toml(snapshot)
