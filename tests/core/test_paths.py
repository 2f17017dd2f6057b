# topmark:header:start
#
#   project      : PathEnv
#   file         : test_paths.py
#   file_relpath : tests/core/test_paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for snapshot-bound path operations (`pathenv.paths`)."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pathenv.comparison import PathComparison
from pathenv.errors import UnsupportedModeError
from pathenv.paths import SnapshotPathOperations
from tests.conftest import make_snapshot, make_windows_snapshot, parametrize
from tests.strategies_pathenv import s_segment

POSIX = SnapshotPathOperations(make_snapshot(PathComparison.ORDINAL))
WINDOWS = SnapshotPathOperations(make_windows_snapshot())


@parametrize(
    "path, expected",
    [
        ("", 0),
        ("a/b", 0),
        ("/a", 1),
        ("C:\\a", 0),
    ],
)
def test_posix_root_length(path: str, expected: int) -> None:
    """With identical separators only a leading separator is a root."""
    assert POSIX.root_length(path) == expected


@parametrize(
    "path, expected",
    [
        ("", 0),
        ("a", 0),
        ("\\a", 1),
        ("/a", 1),
        ("C:", 2),
        ("C:a", 2),
        ("C:\\a", 3),
        ("c:/a", 3),
        ("1:\\a", 0),
    ],
)
def test_windows_root_length(path: str, expected: int) -> None:
    """Drive letters followed by the volume separator form a root."""
    assert WINDOWS.root_length(path) == expected


def test_rooted_and_trailing_separator_checks() -> None:
    """Rooted and trailing-separator predicates follow the separators."""
    assert POSIX.is_path_rooted("/x")
    assert not POSIX.is_path_rooted("x")
    assert not POSIX.is_path_rooted(None)
    assert WINDOWS.is_path_rooted("D:")
    assert POSIX.ends_in_directory_separator("/a/")
    assert WINDOWS.ends_in_directory_separator("a/")
    assert not WINDOWS.ends_in_directory_separator("")


@parametrize(
    "parts, expected",
    [
        (("/a", "b"), "/a/b"),
        (("/a/", "b"), "/a/b"),
        (("/a", "/b"), "/b"),
        (("a", "", "b"), "a/b"),
        (("/a", "b", "/c", "d"), "/c/d"),
        ((), ""),
    ],
)
def test_posix_combine(parts: tuple[str, ...], expected: str) -> None:
    """Rooted segments reset the result; separators are not doubled."""
    assert POSIX.combine(*parts) == expected


def test_windows_combine_uses_primary_separator() -> None:
    """Joins insert the primary separator; a drive-relative segment is rooted."""
    assert WINDOWS.combine("C:\\a", "b") == "C:\\a\\b"
    assert WINDOWS.combine("C:\\a/", "b") == "C:\\a/b"
    assert WINDOWS.combine("C:\\a", "D:x") == "D:x"


@parametrize(
    "path, expected",
    [
        ("", "/home/user"),
        ("docs", "/home/user/docs"),
        ("docs/./a/../b", "/home/user/docs/b"),
        ("./", "/home/user/"),
        ("..", "/home"),
        ("../../../x", "/x"),
        ("/a/b/..", "/a"),
        ("/a/..", "/"),
        ("/..", "/"),
        ("/a/.", "/a"),
        ("//a///b", "/a/b"),
    ],
)
def test_posix_get_full_path(path: str, expected: str) -> None:
    """Relative paths resolve against the snapshot's directory and are normalized."""
    assert POSIX.get_full_path(path) == expected


@parametrize(
    "path, expected",
    [
        ("x", "C:\\work\\repo\\x"),
        ("..\\other", "C:\\work\\other"),
        ("C:/a/b", "C:\\a\\b"),
        ("C:\\..", "C:\\"),
        ("/x", "\\x"),
    ],
)
def test_windows_get_full_path(path: str, expected: str) -> None:
    """Alternate separators are flipped and ``..`` stops at the drive root."""
    assert WINDOWS.get_full_path(path) == expected


def test_get_full_path_rejects_none() -> None:
    """``None`` is not a path."""
    with pytest.raises(TypeError):
        POSIX.get_full_path(None)  # type: ignore[arg-type]


@parametrize(
    "path, expected",
    [
        (None, None),
        ("", None),
        ("/", ""),
        ("a", ""),
        ("a/b", "a"),
        ("/a", "/"),
        ("/a/b/c", "/a/b"),
        ("/a//b", "/a"),
    ],
)
def test_posix_get_directory_name(path: str | None, expected: str | None) -> None:
    """The parent directory drops the last segment and trailing separators."""
    assert POSIX.get_directory_name(path) == expected


def test_windows_get_directory_name_keeps_drive_root() -> None:
    """The parent of a top-level entry is the drive root."""
    assert WINDOWS.get_directory_name("C:\\a\\b") == "C:\\a"
    assert WINDOWS.get_directory_name("C:\\a") == "C:\\"


@parametrize(
    "ops, path, expected",
    [
        (POSIX, "/a/b.txt", "b.txt"),
        (POSIX, "b.txt", "b.txt"),
        (POSIX, "/a/", ""),
        (POSIX, None, None),
        (WINDOWS, "C:file.txt", "file.txt"),
        (WINDOWS, "C:\\a/b", "b"),
    ],
)
def test_get_file_name(ops: SnapshotPathOperations, path: str | None, expected: str | None) -> None:
    """The file name is the text after the last separator or root."""
    assert ops.get_file_name(path) == expected


def test_paths_equal_uses_the_snapshot_comparer() -> None:
    """Equality is decided on full paths with the snapshot's comparer."""
    assert WINDOWS.paths_equal("x", "C:\\Work\\Repo\\X")
    assert WINDOWS.paths_equal("c:/work/repo/x", "x")
    assert POSIX.paths_equal("/a/./b", "/a/b")
    assert not POSIX.paths_equal("/A", "/a")
    assert POSIX.compare_paths("/A", "/a") < 0


def test_path_key_groups_equal_paths() -> None:
    """`path_key` identifies equal paths in a mapping."""
    seen: dict[object, str] = {}
    for path in ("x", "C:\\WORK\\repo\\x", "C:/work/repo/y"):
        seen.setdefault(WINDOWS.path_key(path), path)

    assert sorted(seen.values()) == ["C:/work/repo/y", "x"]


def test_comparisons_fail_for_unsupported_modes() -> None:
    """Path comparison surfaces the comparer error for unknown modes."""
    ops = SnapshotPathOperations(make_snapshot(99))

    assert ops.get_full_path("a") == "/home/user/a"
    with pytest.raises(UnsupportedModeError):
        ops.paths_equal("a", "a")


@given(segments=st.lists(s_segment, max_size=8), rooted=st.booleans())
def test_get_full_path_is_idempotent(segments: list[str], rooted: bool) -> None:
    """A full path is rooted, free of repeated separators, and stable."""
    path: str = ("/" if rooted else "") + "/".join(segments)

    full: str = POSIX.get_full_path(path)

    assert POSIX.is_path_rooted(full)
    assert "//" not in full
    assert POSIX.get_full_path(full) == full
