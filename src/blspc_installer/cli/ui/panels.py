"""Shared console and screen helpers."""

from rich.console import Console
from rich.text import Text

console = Console()

# Selected row: bold marker, bold yellow label
MARKER = ">"
MARKER_STYLE = "bold"
SELECTED_STYLE = "bold yellow"


def format_option(label: str, selected: bool) -> Text:
    """Format one menu row."""
    if selected:
        return Text.assemble((MARKER, MARKER_STYLE), " ", (label, SELECTED_STYLE))
    return Text.assemble("  ", label)


def clear_screen(target: Console = console) -> None:
    """Clear terminal screen and move the cursor home."""
    target.clear()


def enter_alt_screen(target: Console = console) -> None:
    """Switch to the alternate screen buffer and hide the cursor.

    The user's scrollback is kept intact in the normal buffer.
    """
    target.set_alt_screen(True)
    target.show_cursor(False)


def leave_alt_screen(target: Console = console) -> None:
    """Return to the normal screen buffer and show the cursor."""
    target.set_alt_screen(False)
    target.show_cursor(True)
