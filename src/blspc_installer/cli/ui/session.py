"""Terminal session lifecycle.

The session brackets the whole interactive run: it enters the alternate
screen and hides the cursor, and guarantees both are undone on every exit
path, including Ctrl+C.
"""

import signal
import sys
from typing import Callable, Optional

from rich.console import Console

from blspc_installer.cli.ui.panels import console, enter_alt_screen, leave_alt_screen
from blspc_installer.utils.constants import Messages
from blspc_installer.utils.debug import debug_session


class TerminalSession:
    """Owns the alternate-screen/hidden-cursor state for one process run.

    Teardown is one-shot: the SIGINT handler and the normal exit path both
    call end(), and only the first call restores the terminal and prints
    the farewell.
    """

    def __init__(
        self,
        target: Optional[Console] = None,
        exit_func: Callable[[int], object] = sys.exit,
    ):
        self._console = target or console
        self._exit = exit_func
        self._active = False
        self._torn_down = False
        self._farewell_printed = False
        self._previous_handler = None

    @property
    def active(self) -> bool:
        """True while the terminal is in alternate mode."""
        return self._active

    def begin(self) -> None:
        """Enter the alternate screen, hide the cursor, trap SIGINT."""
        if self._active or self._torn_down:
            return
        self._previous_handler = signal.signal(signal.SIGINT, self._on_interrupt)
        enter_alt_screen(self._console)
        self._active = True
        debug_session("Session started")

    def restore(self) -> bool:
        """Put the terminal back to normal.

        Returns:
            True if this call did the restoration, False if there was
            nothing to restore
        """
        if not self._active or self._torn_down:
            return False
        self._torn_down = True
        # Ctrl+C must not cut the restore short
        signal.signal(signal.SIGINT, signal.SIG_IGN)
        try:
            leave_alt_screen(self._console)
            self._active = False
        finally:
            previous = self._previous_handler
            self._previous_handler = None
            signal.signal(
                signal.SIGINT, previous if previous is not None else signal.SIG_DFL
            )
        debug_session("Terminal restored")
        return True

    def end(self, farewell_message: Optional[str] = None) -> None:
        """Restore the terminal, print the farewell and exit with status 0."""
        self.restore()
        if not self._farewell_printed:
            self._farewell_printed = True
            self._console.print(
                farewell_message or Messages.GOODBYE, markup=False, highlight=False
            )
        self._exit(0)

    def _on_interrupt(self, signum, frame) -> None:
        debug_session("Interrupted", signum=signum)
        self.end()

    def __enter__(self) -> "TerminalSession":
        self.begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()


_session: Optional[TerminalSession] = None


def begin_session() -> TerminalSession:
    """Start the process-wide session."""
    global _session
    if _session is None:
        _session = TerminalSession()
    _session.begin()
    return _session


def end_session(farewell_message: Optional[str] = None) -> None:
    """End the process-wide session (safe to call more than once)."""
    global _session
    if _session is None:
        _session = TerminalSession()
    _session.end(farewell_message)
