"""Arrow-key selection menu."""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from rich.console import Console

from blspc_installer.cli.ui.keys import (
    KeyDecoder,
    KeySource,
    RawKeyEvent,
    TerminalKeySource,
)
from blspc_installer.cli.ui.panels import clear_screen, console, format_option
from blspc_installer.utils.constants import DEFAULT_ESCAPE_TIMEOUT
from blspc_installer.utils.debug import debug_menu
from blspc_installer.utils.exceptions import InvalidArgumentError


@dataclass
class MenuState:
    """Selection state owned by a single menu invocation."""

    options: Sequence[str]
    selected_index: int = 0

    def __post_init__(self):
        self.options = tuple(self.options)
        if not self.options:
            raise InvalidArgumentError("menu needs at least one option")
        if not 0 <= self.selected_index < len(self.options):
            raise InvalidArgumentError(
                f"initial index {self.selected_index} out of range "
                f"for {len(self.options)} options"
            )

    def move_up(self) -> bool:
        """Move selection up; stays put at the top."""
        if self.selected_index >= 1:
            self.selected_index -= 1
            return True
        return False

    def move_down(self) -> bool:
        """Move selection down; stays put at the bottom."""
        if self.selected_index < len(self.options) - 1:
            self.selected_index += 1
            return True
        return False

    def apply(self, event: RawKeyEvent) -> bool:
        """Apply a navigation event, return True if the selection changed."""
        if event is RawKeyEvent.UP:
            return self.move_up()
        if event is RawKeyEvent.DOWN:
            return self.move_down()
        return False


def render_menu(
    target: Console, state: MenuState, title: Optional[str] = None
) -> None:
    """Clear the screen and draw every option.

    The frame is buffered and written in one go.
    """
    with target:
        clear_screen(target)
        if title:
            target.print(title)
        for index, label in enumerate(state.options):
            target.print(format_option(label, index == state.selected_index))


def run_menu(
    initial_index: int,
    options: Sequence[str],
    *,
    source: Optional[KeySource] = None,
    target: Optional[Console] = None,
    title: Optional[str] = None,
    escape_timeout: float = DEFAULT_ESCAPE_TIMEOUT,
) -> int:
    """Show a menu and block until the user confirms a choice.

    Args:
        initial_index: Option selected when the menu opens
        options: Labels in display order
        source: Raw input (defaults to stdin in cbreak mode)
        target: Console to draw on (defaults to the shared console)
        title: Optional line shown above the options
        escape_timeout: Seconds to wait for the rest of an escape sequence

    Returns:
        Index of the chosen option

    Raises:
        InvalidArgumentError: Empty options or initial_index out of range;
            raised before the terminal is touched
    """
    state = MenuState(options, initial_index)
    target = target or console
    source = source or TerminalKeySource()

    with source:
        decoder = KeyDecoder(source, escape_timeout)
        render_menu(target, state, title)
        while True:
            event = decoder.next_event()
            if event is RawKeyEvent.CONFIRM:
                debug_menu("Confirmed", index=state.selected_index)
                return state.selected_index
            if state.apply(event):
                render_menu(target, state, title)


class ArrowMenu:
    """MenuUI implementation backed by run_menu."""

    def __init__(
        self,
        source_factory: Callable[[], KeySource] = TerminalKeySource,
        target: Optional[Console] = None,
        escape_timeout: float = DEFAULT_ESCAPE_TIMEOUT,
    ):
        self._source_factory = source_factory
        self._target = target
        self._escape_timeout = escape_timeout

    def select(
        self,
        options: list[str],
        title: str = "",
        cursor_index: int = 0,
    ) -> int:
        """Show selection menu.

        Args:
            options: List of option strings
            title: Optional title shown above menu
            cursor_index: Starting cursor position

        Returns:
            Selected index
        """
        return run_menu(
            cursor_index,
            options,
            source=self._source_factory(),
            target=self._target,
            title=title or None,
            escape_timeout=self._escape_timeout,
        )
