# topmark:header:start
#
#   project      : PathEnv
#   file         : test_provider.py
#   file_relpath : tests/core/test_provider.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for environment providers (`pathenv.provider`)."""

from __future__ import annotations

import os

from pathenv.comparison import PathComparison
from pathenv.provider import (
    EnvironmentInfoProvider,
    StaticEnvironmentProvider,
    SystemEnvironmentProvider,
)
from pathenv.snapshot import PathEnvironmentSnapshot
from tests.conftest import parametrize


def test_windows_platform_values() -> None:
    """On ``nt`` the separators are ``\\``, ``/`` and ``:`` and case is ignored."""
    provider = SystemEnvironmentProvider(platform_name="nt", getcwd=lambda: "C:\\work")

    assert provider.separators() == ("\\", "/", ":")
    assert provider.path_comparison() is PathComparison.CURRENT_CULTURE_IGNORE_CASE
    assert provider.current_directory() == "C:\\work"


@parametrize("platform_name", ["posix", "java", "something-else"])
def test_posix_like_platform_values(platform_name: str) -> None:
    """Other platforms use ``/`` for every separator and compare case-sensitively."""
    provider = SystemEnvironmentProvider(platform_name=platform_name, getcwd=lambda: "/srv")

    assert provider.separators() == ("/", "/", "/")
    assert provider.path_comparison() is PathComparison.CURRENT_CULTURE


def test_case_policy_override() -> None:
    """``case_insensitive`` overrides the platform default (e.g. macOS volumes)."""
    provider = SystemEnvironmentProvider(platform_name="posix", case_insensitive=True)

    assert provider.path_comparison() is PathComparison.CURRENT_CULTURE_IGNORE_CASE
    assert "case_insensitive=True" in repr(provider)


def test_default_provider_reads_the_interpreter() -> None:
    """The default provider reports ``os.name`` conventions and ``os.getcwd()``."""
    provider = SystemEnvironmentProvider()

    assert provider.platform_name == os.name
    assert provider.separators()[0] == os.sep
    assert provider.current_directory() == os.getcwd()


def test_static_provider_returns_given_values() -> None:
    """The static provider returns its constructor arguments."""
    provider = StaticEnvironmentProvider(7, "|", "!", "@", "vol@|dir")

    assert provider.path_comparison() == 7
    assert provider.separators() == ("|", "!", "@")
    assert provider.current_directory() == "vol@|dir"


def test_providers_satisfy_the_protocol() -> None:
    """Both providers can drive `capture_current`."""
    providers: list[EnvironmentInfoProvider] = [
        SystemEnvironmentProvider(platform_name="nt", getcwd=lambda: "D:\\"),
        StaticEnvironmentProvider(PathComparison.ORDINAL, "/", "/", "/", "/"),
    ]

    snapshots = [PathEnvironmentSnapshot.capture_current(p) for p in providers]

    assert snapshots[0].volume_separator == ":"
    assert snapshots[1].path_comparison is PathComparison.ORDINAL
