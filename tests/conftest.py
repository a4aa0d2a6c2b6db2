"""Shared test fixtures for cmdlang.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Keep domain-specific fixtures and record
types close to the tests that use them.
"""
from __future__ import annotations

import pytest


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "cmdlang"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def demo_table():
    """Return the media-library command table shipped with the package."""
    from cmdlang.demo import COMMANDS

    return COMMANDS
