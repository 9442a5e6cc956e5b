import logging

from py_fix_report.fix_message import ERROR, PURGE, MessageState
from py_fix_report.fix_parser import FieldTokenizer, RawField
from py_fix_report.fix_tags import FixMsgType, FixTag

logger = logging.getLogger(__name__)


class TagValueProcessor:
    """Per-message state machine fed one field at a time.

    step() returns None while a message is still being read and one of
    Order / PURGE / ERROR when the message ends.
    """

    def __init__(self, tokenizer: FieldTokenizer, stream):
        self.tokenizer = tokenizer
        self.stream = stream
        self.state = MessageState()
        self.unterminated = False

    @property
    def in_message(self) -> bool:
        """True once a field of a not-yet-terminated message has been read."""
        return self.unterminated or not self.state.is_empty

    def step(self, field: RawField):
        if not self.state.discover(field.tag):
            return self._reject_duplicate(field)

        if field.tag == FixTag.ACCOUNT:
            self.state.account = field.read_as_text()
        elif field.tag == FixTag.MSG_TYPE:
            if field.read_as_text() == FixMsgType.NEW_ORDER_SINGLE:
                self.state.is_new_order_single = True
        elif field.tag == FixTag.PRICE:
            self.state.price = field.read_as_decimal()
        else:
            field.skip()

        if not self.tokenizer.at_message_end():
            return None

        order = self.state.to_order()
        if order is None:
            logger.debug("Purged message with tags %s", sorted(self.state.discovered_tags))
        self.state.reset()
        return order if order is not None else PURGE

    def _reject_duplicate(self, field: RawField):
        logger.debug("Duplicate tag %s, dropping message", FixTag.name_of(field.tag))
        # The dump ends with the duplicate field itself; the tail is dropped unseen.
        self.tokenizer.skip_value()
        with self.stream.muted():
            if not self.tokenizer.skip_line():
                self.unterminated = True
        self.state.reset()
        return ERROR
