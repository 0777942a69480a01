"""Tests for raw key decoding."""

import os

import pytest

from blspc_installer.cli.ui.keys import (
    DecoderState,
    KeyDecoder,
    RawKeyEvent,
    TerminalKeySource,
)
from tests.helpers.fake_terminal import DOWN, ENTER, ESC, UP, ScriptedKeySource


def decode_all(keys, timeout=0.1):
    """Decode every event in a script until it runs out."""
    source = ScriptedKeySource(keys)
    decoder = KeyDecoder(source, escape_timeout=timeout)
    events = []
    with pytest.raises(EOFError):
        while True:
            events.append(decoder.next_event())
    return events


class TestKeyDecoder:
    """Tests for the Idle/EscapeSeen/BracketSeen decoder."""

    def test_arrow_keys(self):
        """ESC [ A and ESC [ B decode to Up and Down."""
        assert decode_all([UP, DOWN]) == [RawKeyEvent.UP, RawKeyEvent.DOWN]

    def test_newline_confirms(self):
        assert decode_all([ENTER]) == [RawKeyEvent.CONFIRM]

    def test_carriage_return_confirms(self):
        assert decode_all(["\r"]) == [RawKeyEvent.CONFIRM]

    def test_plain_keys_are_other(self):
        """Ordinary characters are discarded as Other."""
        assert decode_all(["x", "k"]) == [RawKeyEvent.OTHER, RawKeyEvent.OTHER]

    def test_lone_escape_is_other(self):
        """An Escape with nothing after it times out into a no-op."""
        assert decode_all([ESC, ENTER]) == [RawKeyEvent.OTHER, RawKeyEvent.CONFIRM]

    def test_escape_then_non_bracket_is_other(self):
        """ESC followed by something other than '[' is a lone Escape."""
        assert decode_all([ESC + "O", ENTER]) == [
            RawKeyEvent.OTHER,
            RawKeyEvent.CONFIRM,
        ]

    def test_escape_bracket_timeout_is_other(self):
        """ESC [ with no final unit is a no-op."""
        assert decode_all([ESC + "[", DOWN]) == [RawKeyEvent.OTHER, RawKeyEvent.DOWN]

    def test_unknown_sequence_is_other(self):
        """Right arrow (ESC [ C) is not a navigation key."""
        assert decode_all([ESC + "[C", UP]) == [RawKeyEvent.OTHER, RawKeyEvent.UP]

    def test_rest_of_long_sequence_is_flushed(self):
        """Trailing units of an unknown sequence don't leak as keypresses."""
        # Shift+Up: ESC [ 1 ; 2 A
        source = ScriptedKeySource([ESC + "[1;2A", ENTER])
        decoder = KeyDecoder(source)

        assert decoder.next_event() == RawKeyEvent.OTHER
        assert decoder.next_event() == RawKeyEvent.CONFIRM

    def test_flush_is_bounded(self):
        """At most five pending units are discarded per sequence."""
        source = ScriptedKeySource([ESC + "[Z" + "1234567"])
        decoder = KeyDecoder(source)

        assert decoder.next_event() == RawKeyEvent.OTHER
        assert source.remaining == 2

    def test_sequence_waits_use_escape_timeout(self):
        """Only bytes inside an escape sequence are read with a timeout."""
        source = ScriptedKeySource(["a", UP])
        decoder = KeyDecoder(source, escape_timeout=0.05)

        decoder.next_event()
        assert source.timed_reads == []

        decoder.next_event()
        assert source.timed_reads
        assert all(0 < t <= 0.05 for t in source.timed_reads)

    def test_decoder_returns_to_idle(self):
        source = ScriptedKeySource([DOWN])
        decoder = KeyDecoder(source)

        decoder.next_event()

        assert decoder.state is DecoderState.IDLE


class TestTerminalKeySource:
    """Tests for reading units from a file descriptor."""

    @pytest.fixture
    def pipe(self):
        read_fd, write_fd = os.pipe()
        reader = os.fdopen(read_fd, "rb", buffering=0)
        yield reader, write_fd
        reader.close()
        try:
            os.close(write_fd)
        except OSError:
            pass

    def test_reads_one_unit_at_a_time(self, pipe):
        reader, write_fd = pipe
        os.write(write_fd, UP.encode())

        with TerminalKeySource(reader) as source:
            assert source.read() == ESC
            assert source.read(0.1) == "["
            assert source.read(0.1) == "A"

    def test_timed_read_returns_none_when_idle(self, pipe):
        reader, _ = pipe

        with TerminalKeySource(reader) as source:
            assert source.read(0.01) is None

    def test_closed_input_raises_eof(self, pipe):
        reader, write_fd = pipe
        os.close(write_fd)

        with TerminalKeySource(reader) as source:
            with pytest.raises(EOFError):
                source.read()

    def test_decodes_arrows_from_pipe(self, pipe):
        reader, write_fd = pipe
        os.write(write_fd, DOWN.encode())

        with TerminalKeySource(reader) as source:
            assert KeyDecoder(source).next_event() == RawKeyEvent.DOWN
