"""UI components for the interactive installer."""

from blspc_installer.cli.ui.base import MenuUI, Session
from blspc_installer.cli.ui.keys import (
    KeyDecoder,
    KeySource,
    RawKeyEvent,
    TerminalKeySource,
)
from blspc_installer.cli.ui.menu import ArrowMenu, MenuState, render_menu, run_menu
from blspc_installer.cli.ui.panels import clear_screen, console
from blspc_installer.cli.ui.session import TerminalSession, begin_session, end_session

__all__ = [
    "MenuUI",
    "Session",
    "KeyDecoder",
    "KeySource",
    "RawKeyEvent",
    "TerminalKeySource",
    "ArrowMenu",
    "MenuState",
    "render_menu",
    "run_menu",
    "clear_screen",
    "console",
    "TerminalSession",
    "begin_session",
    "end_session",
]
