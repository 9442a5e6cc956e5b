"""Shared test fixtures."""

import io

import pytest

from py_fix_report.fix_parser import FieldTokenizer
from py_fix_report.fix_processor import TagValueProcessor
from py_fix_report.fix_tap import TappedStream


@pytest.fixture
def make_stream():
    """Build a TappedStream over raw bytes."""
    def _make(data: bytes) -> TappedStream:
        return TappedStream(io.BytesIO(data))
    return _make


@pytest.fixture
def make_processor(make_stream):
    """Build (stream, tokenizer, processor) over raw bytes."""
    def _make(data: bytes):
        stream = make_stream(data)
        tokenizer = FieldTokenizer(stream)
        return stream, tokenizer, TagValueProcessor(tokenizer, stream)
    return _make
