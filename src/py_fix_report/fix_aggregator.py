"""
High/low aggregation over a stream of FIX tagvalue messages.

aggregate() wires the whole pipeline together:
raw bytes -> TappedStream -> FieldTokenizer -> TagValueProcessor -> HighLowAggregator
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from py_fix_report.fix_message import ERROR, PURGE, Order
from py_fix_report.fix_parser import FieldTokenizer
from py_fix_report.fix_processor import TagValueProcessor
from py_fix_report.fix_tap import TappedStream

logger = logging.getLogger(__name__)


@dataclass
class AccountStat:
    high: Decimal | None = None
    low: Decimal | None = None

    def update(self, price: Decimal):
        # A single order is both the high and the low.
        if self.high is None or price > self.high:
            self.high = price
        if self.low is None or price < self.low:
            self.low = price


class TruncatedMessage(Exception):
    """Input ended part way through a message."""

    def __init__(self, aggregator: "HighLowAggregator"):
        super().__init__("Input ended in the middle of a message")
        self.aggregator = aggregator


class HighLowAggregator:
    def __init__(self, stream: TappedStream, diagnostics):
        self.stream = stream
        self.diagnostics = diagnostics
        self.accounts: dict[str, AccountStat] = {}
        self.orders = 0
        self.purged = 0
        self.errors = 0

    def apply(self, outcome):
        if outcome is None:
            return
        if outcome is ERROR:
            self.errors += 1
            raw = self.stream.drain_diagnostics()
            # One dump per line on the diagnostic sink.
            if not raw.endswith(b"\n"):
                raw += b"\n"
            self.diagnostics.write(raw)
            return
        if outcome is PURGE:
            self.purged += 1
        elif isinstance(outcome, Order):
            self.orders += 1
            self.accounts.setdefault(outcome.account, AccountStat()).update(outcome.price)
        else:
            raise TypeError(f"Unknown outcome: {outcome!r}")
        self.stream.clear()

    def high_low(self) -> dict[str, tuple[Decimal, Decimal]]:
        """Return {account: (high, low)} ordered by account."""
        return {
            account: (stat.high, stat.low)
            for account, stat in sorted(self.accounts.items())
        }


def aggregate(source, diagnostics) -> HighLowAggregator:
    """Read every message from a binary source and fold orders per account.

    Raises MalformedField on unreadable token syntax and TruncatedMessage if
    the input stops mid-message.
    """
    stream = TappedStream(source)
    tokenizer = FieldTokenizer(stream)
    processor = TagValueProcessor(tokenizer, stream)
    aggregator = HighLowAggregator(stream, diagnostics)

    for field in tokenizer:
        aggregator.apply(processor.step(field))

    logger.info(
        "Read %d bytes: %d orders, %d purged, %d rejected, %d accounts",
        stream.consumed, aggregator.orders, aggregator.purged,
        aggregator.errors, len(aggregator.accounts),
    )
    if processor.in_message:
        raise TruncatedMessage(aggregator)
    return aggregator
