"""
FIX tagvalue tokenizer.

Responsibility: Purely structural reading of `tag=value|tag=value\\n` records.
'|' and '=' are treated as whitespace, so a record is just a run of tokens
where tags and values alternate.
"""

import re
import string
from decimal import Decimal

FIELD_SEPARATOR = b"|"
TAG_VALUE_SEPARATOR = b"="
MESSAGE_TERMINATOR = b"\n"

# Digits with an optional sign, fraction and exponent.
DECIMAL_PATTERN = re.compile(rb"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def derive_boundaries(base=string.whitespace):
    """Build the set of token-boundary bytes from a base whitespace table.

    The result is the base table plus the field separator and the
    tag/value separator.
    """
    table = {ch.encode("ascii") if isinstance(ch, str) else bytes([ch]) for ch in base}
    table.add(FIELD_SEPARATOR)
    table.add(TAG_VALUE_SEPARATOR)
    return frozenset(table)


FIX_BOUNDARIES = derive_boundaries()


class MalformedField(ValueError):
    """A tag or value could not be read as the expected type."""


class RawField:
    """A tag whose value is still sitting unread on the stream.

    Exactly one of read_as_text() / read_as_decimal() / skip() should be
    called before the tokenizer is asked for the next field.
    """

    def __init__(self, tag: int, tokenizer: "FieldTokenizer"):
        self.tag = tag
        self._tokenizer = tokenizer

    def read_as_text(self) -> str:
        token = self._tokenizer.read_value_token()
        # Lossless: undecodable bytes become lone surrogates.
        return token.decode("utf-8", errors="surrogateescape")

    def read_as_decimal(self) -> Decimal:
        token = self._tokenizer.read_value_token()
        if not DECIMAL_PATTERN.fullmatch(token):
            raise MalformedField(f"Tag {self.tag}: {token!r} is not a decimal")
        return Decimal(token.decode("ascii"))

    def skip(self):
        self._tokenizer.skip_field()

    def __repr__(self):
        return f"RawField(tag={self.tag})"


class FieldTokenizer:
    def __init__(self, stream, boundaries=FIX_BOUNDARIES):
        self.stream = stream
        self.boundaries = boundaries

    def _is_boundary(self, byte):
        return byte in self.boundaries

    def _read_token(self) -> bytes:
        token = bytearray()
        while True:
            byte = self.stream.peek_byte()
            if not byte or self._is_boundary(byte):
                return bytes(token)
            token += self.stream.read_byte()

    def next_field(self):
        """Read the next tag. Returns None at a clean end of input.

        Boundary bytes ahead of the tag (blank lines between messages) are
        consumed without being mirrored into the diagnostic buffer.
        """
        with self.stream.muted():
            while True:
                byte = self.stream.peek_byte()
                if not byte:
                    return None
                if not self._is_boundary(byte):
                    break
                self.stream.read_byte()

        token = self._read_token()
        if not token.isdigit():
            raise MalformedField(f"Tag {token!r} is not a non-negative integer")
        return RawField(int(token), self)

    def read_value_token(self) -> bytes:
        """Read the token following a tag. Never crosses a message boundary."""
        while True:
            byte = self.stream.peek_byte()
            if not byte:
                raise MalformedField("Input ended before a field value")
            if byte == MESSAGE_TERMINATOR:
                raise MalformedField("Message ended before a field value")
            if not self._is_boundary(byte):
                break
            self.stream.read_byte()
        return self._read_token()

    def skip_value(self):
        """Discard the rest of the current field, leaving '|' or newline unread."""
        while True:
            byte = self.stream.peek_byte()
            if not byte or byte in (FIELD_SEPARATOR, MESSAGE_TERMINATOR):
                return
            self.stream.read_byte()

    def skip_field(self):
        """Discard up to and including the next '|', stopping before a newline."""
        self.skip_value()
        if self.stream.peek_byte() == FIELD_SEPARATOR:
            self.stream.read_byte()

    def skip_line(self) -> bool:
        """Discard up to and including the next newline.

        Returns False if the input ended before a newline was found.
        """
        while True:
            byte = self.stream.read_byte()
            if not byte:
                return False
            if byte == MESSAGE_TERMINATOR:
                return True

    def at_message_end(self) -> bool:
        """Consume a pending newline if one follows the current field.

        Trailing separators, carriage returns and spaces before the newline
        are consumed too; they would be skipped by next_field() anyway.
        """
        while True:
            byte = self.stream.peek_byte()
            if byte == MESSAGE_TERMINATOR:
                self.stream.read_byte()
                return True
            if not byte or not self._is_boundary(byte):
                return False
            self.stream.read_byte()

    def __iter__(self):
        while True:
            field = self.next_field()
            if field is None:
                return
            yield field
