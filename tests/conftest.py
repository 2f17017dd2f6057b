# topmark:header:start
#
#   project      : PathEnv
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the PathEnv test suite.

This file sets up global fixtures and typed wrappers around pytest decorators,
and configures TRACE logging for the test session.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from pathenv.comparison import PathComparison
from pathenv.config import logging
from pathenv.snapshot import PathEnvironmentSnapshot

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_pathenv_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure PathEnv's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_snapshot(
    path_comparison: PathComparison | int = PathComparison.ORDINAL,
    directory_separator: str = "/",
    alt_directory_separator: str = "/",
    volume_separator: str = "/",
    current_directory: str = "/home/user",
) -> PathEnvironmentSnapshot:
    """Return a snapshot with POSIX-like defaults and the given overrides."""
    return PathEnvironmentSnapshot.create(
        path_comparison,
        directory_separator,
        alt_directory_separator,
        volume_separator,
        current_directory,
    )


def make_windows_snapshot(
    path_comparison: PathComparison | int = PathComparison.ORDINAL_IGNORE_CASE,
    current_directory: str = "C:\\work\\repo",
) -> PathEnvironmentSnapshot:
    """Return a snapshot with Windows-like separators."""
    return PathEnvironmentSnapshot.create(path_comparison, "\\", "/", ":", current_directory)
