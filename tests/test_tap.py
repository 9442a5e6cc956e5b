"""Tests for the diagnostic tap."""

import io

from py_fix_report.fix_tap import TappedStream


class TestTappedStream:
    def test_read_mirrors_bytes(self):
        stream = TappedStream(io.BytesIO(b"1=A|"))
        assert stream.read_byte() == b"1"
        assert stream.read_byte() == b"="
        assert stream.drain_diagnostics() == b"1="
        assert stream.consumed == 2

    def test_peek_does_not_mirror(self):
        stream = TappedStream(io.BytesIO(b"\n1"))
        assert stream.peek_byte() == b"\n"
        assert stream.peek_byte() == b"\n"
        assert stream.drain_diagnostics() == b""
        assert stream.read_byte() == b"\n"
        assert stream.drain_diagnostics() == b"\n"

    def test_eof_returns_empty(self):
        stream = TappedStream(io.BytesIO(b"x"))
        assert stream.read_byte() == b"x"
        assert stream.peek_byte() == b""
        assert stream.read_byte() == b""
        assert stream.consumed == 1

    def test_clear_rewinds_buffer(self):
        stream = TappedStream(io.BytesIO(b"abc"))
        stream.read_byte()
        stream.clear()
        stream.read_byte()
        assert stream.drain_diagnostics() == b"b"

    def test_drain_empties_buffer(self):
        stream = TappedStream(io.BytesIO(b"ab"))
        stream.read_byte()
        assert stream.drain_diagnostics() == b"a"
        assert stream.drain_diagnostics() == b""

    def test_muted_reads_are_not_mirrored(self):
        stream = TappedStream(io.BytesIO(b"abcd"))
        stream.read_byte()
        with stream.muted():
            stream.read_byte()
            stream.read_byte()
        stream.read_byte()
        assert stream.drain_diagnostics() == b"ad"
        assert stream.consumed == 4

    def test_nested_muted_restores_outer_state(self):
        stream = TappedStream(io.BytesIO(b"abc"))
        with stream.muted():
            with stream.muted():
                stream.read_byte()
            stream.read_byte()
        stream.read_byte()
        assert stream.drain_diagnostics() == b"c"
