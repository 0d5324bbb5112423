"""Completion state of a task."""

from __future__ import annotations

from enum import Enum
from functools import total_ordering

from ..errors import InvalidStateError, UnexpectedEndError
from .span import ByteSpan

DONE_MARKER = "x"


@total_ordering
class State(Enum):
    """Open or done; ``OPEN < DONE``."""

    OPEN = "open"
    DONE = "done"

    def is_done(self) -> bool:
        return self is State.DONE

    def is_open(self) -> bool:
        return self is State.OPEN

    def __lt__(self, other):
        if not isinstance(other, State):
            return NotImplemented
        return self is State.OPEN and other is State.DONE

    def __str__(self) -> str:
        return DONE_MARKER if self is State.DONE else ""

    @classmethod
    def parse(cls, text: str, offset: int = 0) -> State:
        """
        Parse a done marker.

        Only a lone lowercase ``x`` is accepted. The task parser treats a
        failure here as an open task rather than an error.

        Raises:
            UnexpectedEndError: ``text`` is empty
            InvalidStateError: ``text`` is anything other than ``x``
        """
        span = ByteSpan.of(text, offset)
        if not text:
            raise UnexpectedEndError("expected done marker 'x'", span)
        if text != DONE_MARKER:
            raise InvalidStateError(f"expected done marker 'x', found {text!r}", span)
        return cls.DONE
