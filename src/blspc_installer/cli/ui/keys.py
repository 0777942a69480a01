"""Raw key input and arrow-key decoding.

Input arrives one unit (byte) at a time. Arrow keys are three-unit escape
sequences (ESC [ A / ESC [ B), so the decoder tracks where it is inside a
sequence and only waits a short, bounded time for the rest of one.
"""

import os
import select
import sys
import termios
import time
import tty
from enum import Enum, auto
from typing import Optional, TextIO

from readchar import key

from blspc_installer.utils.constants import DEFAULT_ESCAPE_TIMEOUT, FLUSH_MAX_UNITS
from blspc_installer.utils.debug import debug_menu

ESCAPE = key.ESC
BRACKET = key.UP[1]
ENTER_KEYS = frozenset({key.ENTER, key.CR, key.LF})


class RawKeyEvent(Enum):
    """Decoded navigation signal."""

    UP = auto()
    DOWN = auto()
    CONFIRM = auto()
    OTHER = auto()


# Final unit of an ESC [ sequence -> navigation event
_ARROW_FINALS = {key.UP[-1]: RawKeyEvent.UP, key.DOWN[-1]: RawKeyEvent.DOWN}


class DecoderState(Enum):
    IDLE = auto()
    ESCAPE_SEEN = auto()
    BRACKET_SEEN = auto()


class KeySource:
    """Source of raw input units.

    Used as a context manager for the lifetime of one menu; subclasses
    switch terminal modes there.
    """

    def __enter__(self) -> "KeySource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        return None

    def read(self, timeout: Optional[float] = None) -> Optional[str]:
        """Read one unit.

        Args:
            timeout: Seconds to wait, or None to block

        Returns:
            The unit, or None if nothing arrived within the timeout

        Raises:
            EOFError: Input is exhausted
        """
        raise NotImplementedError


class TerminalKeySource(KeySource):
    """Reads single bytes from a terminal in cbreak mode.

    Cbreak turns off line buffering and echo but keeps signal keys, so
    Ctrl+C still raises SIGINT. Non-tty input (pipes) is read as-is.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream or sys.stdin
        self._fd: Optional[int] = None
        self._saved_attrs: Optional[list] = None

    def __enter__(self) -> "TerminalKeySource":
        self._fd = self._stream.fileno()
        if os.isatty(self._fd):
            self._saved_attrs = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._saved_attrs is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_attrs)
            self._saved_attrs = None

    def read(self, timeout: Optional[float] = None) -> Optional[str]:
        if self._fd is None:
            self._fd = self._stream.fileno()
        if timeout is not None:
            ready, _, _ = select.select([self._fd], [], [], timeout)
            if not ready:
                return None
        data = os.read(self._fd, 1)
        if not data:
            raise EOFError("input closed")
        return data.decode("latin-1")


class KeyDecoder:
    """Turns raw units into RawKeyEvents.

    States: IDLE -> ESCAPE_SEEN (after ESC) -> BRACKET_SEEN (after '[').
    A sequence that stops short within the timeout decodes to OTHER.
    """

    def __init__(
        self,
        source: KeySource,
        escape_timeout: float = DEFAULT_ESCAPE_TIMEOUT,
    ):
        self._source = source
        self._escape_timeout = escape_timeout
        self.state = DecoderState.IDLE

    def next_event(self) -> RawKeyEvent:
        """Block until one event is decoded."""
        self.state = DecoderState.IDLE
        while True:
            if self.state is DecoderState.IDLE:
                unit = self._source.read()
                if unit == ESCAPE:
                    self.state = DecoderState.ESCAPE_SEEN
                    continue
                if unit in ENTER_KEYS:
                    return RawKeyEvent.CONFIRM
                return RawKeyEvent.OTHER

            unit = self._source.read(self._escape_timeout)

            if self.state is DecoderState.ESCAPE_SEEN:
                if unit == BRACKET:
                    self.state = DecoderState.BRACKET_SEEN
                    continue
                debug_menu("Lone escape", next_unit=repr(unit))
                return self._finish_sequence(RawKeyEvent.OTHER)

            event = _ARROW_FINALS.get(unit, RawKeyEvent.OTHER)
            return self._finish_sequence(event)

    def _finish_sequence(self, event: RawKeyEvent) -> RawKeyEvent:
        self.flush()
        self.state = DecoderState.IDLE
        return event

    def flush(self) -> int:
        """Discard pending units (rest of an unknown sequence).

        Returns:
            Number of units discarded
        """
        deadline = time.monotonic() + self._escape_timeout
        discarded = 0
        while discarded < FLUSH_MAX_UNITS:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                break
            if self._source.read(remaining) is None:
                break
            discarded += 1
        return discarded
