# topmark:header:start
#
#   project      : PathEnv
#   file         : provider.py
#   file_relpath : src/pathenv/provider.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Environment information providers.

`PathEnvironmentSnapshot.capture_current` never reads process state itself;
it asks an `EnvironmentInfoProvider`. Providers are read-only: querying them
must not change anything, and each query reflects the environment at call time.
"""

from __future__ import annotations

import ntpath
import os
import posixpath
from typing import TYPE_CHECKING, Final, Protocol

from pathenv.comparison import PathComparison
from pathenv.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import ModuleType

    from pathenv.config.logging import PathEnvLogger

logger: PathEnvLogger = get_logger(__name__)

# Platform (``os.name``) -> path module used to read the separators.
_PATH_MODULES: Final[dict[str, ModuleType]] = {
    "nt": ntpath,
    "posix": posixpath,
}

# Platforms whose file systems compare paths without regard to case.
CASE_INSENSITIVE_PLATFORMS: Final[frozenset[str]] = frozenset({"nt"})

_VOLUME_SEPARATORS: Final[dict[str, str]] = {"nt": ":"}


class EnvironmentInfoProvider(Protocol):
    """Read-only source of the values a snapshot captures."""

    def path_comparison(self) -> PathComparison | int:
        """Return the platform's default path comparison policy."""
        ...

    def separators(self) -> tuple[str, str, str]:
        """Return the primary, alternate and volume separators."""
        ...

    def current_directory(self) -> str:
        """Return the current working directory."""
        ...


class SystemEnvironmentProvider:
    """Provider backed by the running interpreter.

    Args:
        platform_name (str): Platform identifier in ``os.name`` terms
            (``"nt"``, ``"posix"``). Unknown names behave like ``"posix"``.
        getcwd (Callable[[], str]): Function returning the working directory.
        case_insensitive (bool | None): Overrides the platform's case policy when set.
    """

    def __init__(
        self,
        *,
        platform_name: str = os.name,
        getcwd: Callable[[], str] = os.getcwd,
        case_insensitive: bool | None = None,
    ) -> None:
        self.platform_name: str = platform_name
        self._getcwd: Callable[[], str] = getcwd
        if case_insensitive is None:
            case_insensitive = platform_name in CASE_INSENSITIVE_PLATFORMS
        self.case_insensitive: bool = case_insensitive

    def path_comparison(self) -> PathComparison:
        """Culture-sensitive comparison, ignoring case on case-insensitive platforms."""
        if self.case_insensitive:
            return PathComparison.CURRENT_CULTURE_IGNORE_CASE
        return PathComparison.CURRENT_CULTURE

    def separators(self) -> tuple[str, str, str]:
        """Separators of the platform's path module."""
        pathmod: ModuleType = _PATH_MODULES.get(self.platform_name, posixpath)
        sep: str = pathmod.sep
        alt_sep: str = pathmod.altsep or sep
        vol_sep: str = _VOLUME_SEPARATORS.get(self.platform_name, sep)
        return sep, alt_sep, vol_sep

    def current_directory(self) -> str:
        """The working directory at call time."""
        cwd: str = self._getcwd()
        logger.debug("Current directory on %s: %s", self.platform_name, cwd)
        return cwd

    def __repr__(self) -> str:
        """Return a string representation."""
        return (
            f"SystemEnvironmentProvider(platform_name={self.platform_name!r}, "
            f"case_insensitive={self.case_insensitive!r})"
        )


class StaticEnvironmentProvider:
    """Provider returning fixed values.

    Useful in tests and for environments pinned by configuration.
    """

    def __init__(
        self,
        path_comparison: PathComparison | int,
        directory_separator: str,
        alt_directory_separator: str,
        volume_separator: str,
        current_directory: str,
    ) -> None:
        self._path_comparison: PathComparison | int = path_comparison
        self._separators: tuple[str, str, str] = (
            directory_separator,
            alt_directory_separator,
            volume_separator,
        )
        self._current_directory: str = current_directory

    def path_comparison(self) -> PathComparison | int:
        """Return the configured comparison value."""
        return self._path_comparison

    def separators(self) -> tuple[str, str, str]:
        """Return the configured separators."""
        return self._separators

    def current_directory(self) -> str:
        """Return the configured working directory."""
        return self._current_directory
