"""
Shared pytest fixtures for the simple_version test suite.

This module provides fixtures that are automatically available to all test files:
- Configuration isolation (no SIMPLE_VERSION_* variables, no INI file)
- Small version factories used by the ordering and formatting tests

Every test starts from built-in configuration defaults, regardless of the
developer's environment or a local config/simple_version.ini.
"""

from collections.abc import Generator
from pathlib import Path

import pytest

from simple_version.config import reload_config
from simple_version.version import Version

_ENV_VARS = (
    "SIMPLE_VERSION_CONFIG",
    "SIMPLE_VERSION_NUMERIC_TYPE",
    "SIMPLE_VERSION_LOG_LEVEL",
    "SIMPLE_VERSION_LOG_FORMAT",
)

# ============================================================================
# CONFIGURATION FIXTURES
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Run each test against default configuration.

    Clears every SIMPLE_VERSION_* variable and points SIMPLE_VERSION_CONFIG at
    a file that does not exist, so neither the environment nor a config file
    in the checkout leaks into the test. The singleton is reloaded before and
    after the test.
    """
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SIMPLE_VERSION_CONFIG", str(tmp_path / "missing.ini"))
    reload_config()
    yield
    monkeypatch.undo()
    reload_config()


# ============================================================================
# VERSION FIXTURES
# ============================================================================


@pytest.fixture
def tagged_ladder() -> list[Version]:
    """
    One version per ordering rule, in strictly ascending order.

    Covers the numeric triple, every qualifier stage and number, and build
    presence on both untagged and tagged versions.
    """
    return [
        Version(0, 0, 0),
        Version(0, 0, 1).alpha(),
        Version(0, 0, 1).alpha(1),
        Version(0, 0, 1).alpha(2),
        Version(0, 0, 1).beta(),
        Version(0, 0, 1).beta(1),
        Version(0, 0, 1).release(),
        Version(0, 0, 1).release().with_build(0),
        Version(0, 0, 1).release().with_build(7),
        Version(0, 1, 0).alpha(9),
        Version(0, 1, 0),
        Version(1, 0, 0).beta(4),
        Version(1, 0, 0).beta(4).with_build(1),
        Version(1, 0, 0),
        Version(1, 0, 0).with_build(1),
        Version(1, 0, 0).with_build(2),
        Version(1, 999, 0),
        Version(2, 0, 0),
    ]
