"""Base protocols for menu UI and session control."""

from typing import Optional, Protocol


class MenuUI(Protocol):
    """Protocol for menu implementations.

    Allows swapping menu backends (and fakes in tests).
    """

    def select(
        self,
        options: list[str],
        title: str = "",
        cursor_index: int = 0,
    ) -> int:
        """Show selection menu, return the confirmed index."""
        ...


class Session(Protocol):
    """Protocol for the terminal session the dispatcher finishes through."""

    def __enter__(self) -> "Session":
        ...

    def __exit__(self, exc_type, exc, tb) -> None:
        ...

    def end(self, farewell_message: Optional[str] = None) -> None:
        """Restore the terminal, print the farewell and exit."""
        ...
