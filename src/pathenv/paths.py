# topmark:header:start
#
#   project      : PathEnv
#   file         : paths.py
#   file_relpath : src/pathenv/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Path operations interpreted under a snapshot's rules.

A component that received a `PathEnvironmentSnapshot` from its host cannot rely
on ``os.path``: the host may run on another platform or in another working
directory. `SnapshotPathOperations` reimplements the handful of operations a
guest needs (root detection, joining, full-path resolution, splitting, and
comparison) using only the snapshot's separators, comparer and working
directory.

Root rules:
    - A leading directory separator (primary or alternate) is a 1-char root.
    - When the primary and alternate separators differ (drive-letter
      platforms), ``<letter><volume separator>`` is a 2-char root and
      ``<letter><volume separator><separator>`` a 3-char root.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pathenv.config.logging import get_logger

if TYPE_CHECKING:
    from pathenv.comparison import PathComparer
    from pathenv.config.logging import PathEnvLogger
    from pathenv.snapshot import PathEnvironmentSnapshot

logger: PathEnvLogger = get_logger(__name__)


class SnapshotPathOperations:
    """Path helpers bound to one snapshot.

    Args:
        snapshot (PathEnvironmentSnapshot): The environment whose rules apply.
    """

    def __init__(self, snapshot: PathEnvironmentSnapshot) -> None:
        self.snapshot: PathEnvironmentSnapshot = snapshot
        self._dir: str = snapshot.directory_separator
        self._alt: str = snapshot.alt_directory_separator
        self._vol: str = snapshot.volume_separator

    def is_directory_separator(self, ch: str) -> bool:
        """Return whether ``ch`` is the primary or the alternate separator."""
        return ch == self._dir or ch == self._alt

    def root_length(self, path: str | None) -> int:
        """Return the length of the root part of ``path`` (0 when relative)."""
        if not path:
            return 0
        if self.is_directory_separator(path[0]):
            return 1
        if (
            self._dir != self._alt
            and len(path) > 1
            and path[1] == self._vol
            and path[0].isalpha()
        ):
            return 3 if len(path) > 2 and self.is_directory_separator(path[2]) else 2
        return 0

    def is_path_rooted(self, path: str | None) -> bool:
        """Return whether ``path`` starts with a root."""
        return self.root_length(path) > 0

    def ends_in_directory_separator(self, path: str | None) -> bool:
        """Return whether ``path`` ends with a directory separator."""
        if not path:
            return False
        return self.is_directory_separator(path[-1])

    def combine(self, *paths: str) -> str:
        """Join path segments.

        A rooted segment discards everything before it. The primary separator
        is inserted only when neither side of a join already has one.
        """
        result: str = ""
        for path in paths:
            result = self._combine_pair(result, path)
        return result

    def _combine_pair(self, left: str, right: str) -> str:
        if not left:
            return right
        if not right:
            return left
        if self.root_length(right) != 0:
            return right
        if self.is_directory_separator(left[-1]) or self.is_directory_separator(right[0]):
            return f"{left}{right}"
        return f"{left}{self._dir}{right}"

    def get_full_path(self, path: str) -> str:
        """Resolve ``path`` against the snapshot's working directory.

        Relative segments (``.``, ``..``) and repeated separators are removed
        and alternate separators are replaced by the primary one.

        Raises:
            TypeError: If ``path`` is ``None``.
        """
        if path is None:
            raise TypeError("path must not be None")
        if self.root_length(path) == 0:
            path = self.combine(self.snapshot.current_directory, path)
        result: str = self._remove_relative_segments(path)
        logger.trace("Full path of %r: %r", path, result)
        return result or self._dir

    def _remove_relative_segments(self, path: str) -> str:
        root_length: int = self.root_length(path)
        skip: int = root_length
        if skip > 0 and self.is_directory_separator(path[skip - 1]):
            skip -= 1

        out: list[str] = list(path[:skip])
        flipped: bool = False
        n: int = len(path)
        i: int = skip
        while i < n:
            c: str = path[i]
            if self.is_directory_separator(c) and i + 1 < n:
                # Collapse repeated separators
                if self.is_directory_separator(path[i + 1]):
                    i += 1
                    continue
                # "./" or trailing "."
                if path[i + 1] == "." and (i + 2 == n or self.is_directory_separator(path[i + 2])):
                    i += 2
                    continue
                # "../" or trailing ".."
                if (
                    i + 2 < n
                    and path[i + 1] == "."
                    and path[i + 2] == "."
                    and (i + 3 == n or self.is_directory_separator(path[i + 3]))
                ):
                    s: int = len(out) - 1
                    while s >= skip:
                        if self.is_directory_separator(out[s]):
                            del out[s + 1 if (i + 3 >= n and s == skip) else s :]
                            break
                        s -= 1
                    if s < skip:
                        del out[skip:]
                    i += 3
                    continue

            if c != self._dir and c == self._alt:
                c = self._dir
                flipped = True
            out.append(c)
            i += 1

        if not flipped and len(out) == n:
            return path
        if skip != root_length and len(out) < root_length:
            out.append(path[root_length - 1])
        return "".join(out)

    def get_directory_name(self, path: str | None) -> str | None:
        """Return the parent directory of ``path``.

        Returns ``None`` for ``None`` or empty input and ``""`` when ``path``
        is only a root.
        """
        if not path:
            return None
        root_length: int = self.root_length(path)
        end: int = len(path)
        if end <= root_length:
            return ""
        while end > root_length:
            end -= 1
            if self.is_directory_separator(path[end]):
                break
        while end > root_length and self.is_directory_separator(path[end - 1]):
            end -= 1
        return path[:end]

    def get_file_name(self, path: str | None) -> str | None:
        """Return the last segment of ``path`` (``None`` for ``None``)."""
        if path is None:
            return None
        root: int = self.root_length(path)
        i: int = max(path.rfind(self._dir), path.rfind(self._alt))
        return path[root if i < root else i + 1 :]

    @property
    def comparer(self) -> PathComparer:
        """The snapshot's comparer."""
        return self.snapshot.comparer

    def path_key(self, path: str) -> Any:
        """Return a dictionary/sort key identifying the full path of ``path``."""
        return self.comparer.sort_key(self.get_full_path(path))

    def paths_equal(self, a: str, b: str) -> bool:
        """Return whether ``a`` and ``b`` name the same full path under the snapshot's comparer."""
        return self.comparer.equals(self.get_full_path(a), self.get_full_path(b))

    def compare_paths(self, a: str, b: str) -> int:
        """Order two paths by their full paths under the snapshot's comparer."""
        return self.comparer.compare(self.get_full_path(a), self.get_full_path(b))
