"""
Docstring for fix_message

Responsibility: To hold the data gathered from a single message while it is
being read, and the outcome produced when the message ends.

Outcomes of TagValueProcessor.step():
    None    - message still being read
    Order   - a complete New Order Single (account, price)
    PURGE   - message ended without a usable order
    ERROR   - duplicate tag, rest of the message discarded
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Order:
    account: str
    price: Decimal


class _Marker:
    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return self.name


PURGE = _Marker("PURGE")
ERROR = _Marker("ERROR")


class MessageState:

    def __init__(self):
        self.discovered_tags = set()
        self.account: str | None = None
        self.price: Decimal | None = None
        self.is_new_order_single = False

    def discover(self, tag: int) -> bool:
        """Record a tag. Returns False if it was already seen in this message."""
        if tag in self.discovered_tags:
            return False
        self.discovered_tags.add(tag)
        return True

    @property
    def is_empty(self) -> bool:
        return not self.discovered_tags

    def to_order(self) -> Order | None:
        if self.is_new_order_single and self.account is not None and self.price is not None:
            return Order(self.account, self.price)
        return None

    def reset(self):
        self.discovered_tags.clear()
        self.account = None
        self.price = None
        self.is_new_order_single = False
