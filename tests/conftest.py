"""Shared test fixtures for the hooklog test suite."""

import builtins
import os
from unittest.mock import patch

import pytest

from hooklog import LogRegistry, LogStore
from hooklog import registry as _registry_mod


# ---------------------------------------------------------------------------
# Registry fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def store():
    """A fresh, empty LogStore."""
    return LogStore()


@pytest.fixture
def log():
    """A registry with the default levels and default config."""
    return LogRegistry()


@pytest.fixture
def collected():
    """A list plus a hook that appends every entry to it."""
    entries = []
    return entries, entries.append


# ---------------------------------------------------------------------------
# Global state fixtures
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_singleton():
    """Reset the module-level registry between tests."""
    old = _registry_mod._registry
    yield
    _registry_mod._registry = old


@pytest.fixture(autouse=True)
def _restore_builtins_log():
    """Undo any builtins.Log binding made by a test."""
    had = hasattr(builtins, "Log")
    old = getattr(builtins, "Log", None)
    yield
    if had:
        builtins.Log = old
    elif hasattr(builtins, "Log"):
        del builtins.Log


@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.hooklog/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home
