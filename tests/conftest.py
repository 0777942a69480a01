"""Shared pytest fixtures."""

import io
import os
import tempfile
from pathlib import Path

import pytest
from rich.console import Console

from blspc_installer.utils.debug import reload_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop BLSPC_* overrides from the developer's shell."""
    for key in list(os.environ):
        if key.startswith("BLSPC_"):
            monkeypatch.delenv(key)
    reload_config()
    yield
    reload_config()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def mock_installer_dir(temp_dir, monkeypatch):
    """Set up a mock ~/.config/blspc-installer directory."""
    installer_dir = temp_dir / ".blspc-installer"
    installer_dir.mkdir()
    monkeypatch.setenv("BLSPC_INSTALLER_DIR", str(installer_dir))
    reload_config()
    return installer_dir


@pytest.fixture
def install_dirs(temp_dir, monkeypatch):
    """Point cache and bin dirs at a temp tree, no pauses."""
    dirs = {
        "cache": temp_dir / "cache",
        "bin": temp_dir / "bin",
        "system_bin": temp_dir / "usr-bin",
    }
    dirs["system_bin"].mkdir()
    monkeypatch.setenv("BLSPC_CACHE_DIR", str(dirs["cache"]))
    monkeypatch.setenv("BLSPC_BIN_DIR", str(dirs["bin"]))
    monkeypatch.setenv("BLSPC_SYSTEM_BIN_DIR", str(dirs["system_bin"]))
    monkeypatch.setenv("BLSPC_UNINSTALL_PAUSE", "0")
    return dirs


@pytest.fixture
def term_console(monkeypatch):
    """Console that renders ANSI into a buffer."""
    monkeypatch.setenv("TERM", "xterm-256color")
    monkeypatch.delenv("NO_COLOR", raising=False)
    return Console(
        file=io.StringIO(),
        force_terminal=True,
        color_system="standard",
        width=80,
    )
