"""
Diagnostic tap over the raw input stream.

Every byte handed to the tokenizer is mirrored into a side buffer so that
the exact bytes of the message being parsed can be dumped if it turns out
to be corrupt. Peeking never touches the buffer.
"""

from contextlib import contextmanager


class TappedStream:
    def __init__(self, source):
        self.source = source
        self._pending = None  # one byte of look-ahead, or b"" once EOF is seen
        self._buffer = bytearray()
        self._mirroring = True
        self.consumed = 0

    def _fill(self):
        if self._pending is None:
            self._pending = self.source.read(1)
        return self._pending

    def peek_byte(self) -> bytes:
        """Look at the next byte without consuming it. b"" at end of input."""
        return self._fill()

    def read_byte(self) -> bytes:
        """Consume one byte, copying it into the diagnostic buffer."""
        byte = self._fill()
        if not byte:
            return byte
        self._pending = None
        self.consumed += 1
        if self._mirroring:
            self._buffer += byte
        return byte

    @contextmanager
    def muted(self):
        """Consume without mirroring for the duration of the block."""
        previous = self._mirroring
        self._mirroring = False
        try:
            yield self
        finally:
            self._mirroring = previous

    def clear(self):
        """Rewind the diagnostic buffer to empty."""
        del self._buffer[:]

    def drain_diagnostics(self) -> bytes:
        """Return everything mirrored since the last rewind, then rewind."""
        raw = bytes(self._buffer)
        self.clear()
        return raw
