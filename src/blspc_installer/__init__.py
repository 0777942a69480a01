"""blspc-installer - Interactive terminal installer for the blspc compiler."""

from importlib.metadata import version

__version__ = version("blspc-installer")

from blspc_installer.cli.ui.menu import run_menu
from blspc_installer.cli.ui.session import TerminalSession

__all__ = [
    "run_menu",
    "TerminalSession",
]
