"""
Parse errors.

Every error carries the kind of failure and the ByteSpan of the offending
text, so callers can point at the exact columns. Errors derive from
ValueError and can be matched either by class or by ``kind``.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .models.span import ByteSpan


class ErrorKind(Enum):
    INVALID_PRIORITY = "invalid priority"
    INVALID_DATE = "invalid date"
    INVALID_STATE = "invalid state"
    UNEXPECTED_END = "unexpected end of input"
    INVALID_LINE = "invalid line"


class ParseError(ValueError):
    """Base class for all todo.txt parse failures."""

    kind: ErrorKind

    def __init__(self, message: str, span: ByteSpan, line_number: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.span = span
        # Set by the multi-line helpers; None for single line parses.
        self.line_number = line_number

    def __str__(self) -> str:
        location = f"{self.span}"
        if self.line_number is not None:
            location = f"line {self.line_number}, {location}"
        return f"{self.message} ({location})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, span={self.span})"

    def highlight(self, line: str) -> str:
        """
        Render ``line`` with a caret underline below the error span.

        Columns are counted in characters, so the carets line up for non-ASCII
        text in a terminal.

        Args:
            line: The line that produced this error

        Returns:
            Two lines: the source line and the underline
        """
        data = line.encode("utf-8")
        prefix = data[: self.span.start].decode("utf-8", errors="replace")
        covered = data[self.span.start : self.span.end].decode("utf-8", errors="replace")
        underline = " " * len(prefix) + "^" * max(len(covered), 1)
        return f"{line}\n{underline}"


class InvalidPriorityError(ParseError):
    kind = ErrorKind.INVALID_PRIORITY


class InvalidDateError(ParseError):
    kind = ErrorKind.INVALID_DATE


class InvalidStateError(ParseError):
    kind = ErrorKind.INVALID_STATE


class UnexpectedEndError(ParseError):
    kind = ErrorKind.UNEXPECTED_END


class InvalidLineError(ParseError):
    kind = ErrorKind.INVALID_LINE
