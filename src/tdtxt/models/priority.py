"""Task priority, ``(A)`` through ``(Z)``."""

from __future__ import annotations

from enum import Enum
from functools import total_ordering

from ..errors import InvalidPriorityError, UnexpectedEndError
from .span import ByteSpan


@total_ordering
class Priority(Enum):
    """
    Single-letter priority.

    Ordering follows the alphabet, so ``Priority.A < Priority.Z`` and sorting
    puts the most urgent priority first.
    """

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    O = "O"
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"

    def __lt__(self, other):
        if not isinstance(other, Priority):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return f"({self.value})"

    @classmethod
    def from_char(cls, char: str) -> Priority:
        """Look up a priority by its letter; raises ValueError otherwise."""
        if len(char) != 1 or not ("A" <= char <= "Z"):
            raise ValueError(f"priority must be a single letter A-Z, got {char!r}")
        return cls(char)

    @classmethod
    def parse(cls, text: str, offset: int = 0) -> Priority:
        """
        Parse ``(X)`` where X is an uppercase ASCII letter.

        Args:
            text: The whole token, nothing else
            offset: Byte offset of ``text`` in the line, used for error spans

        Raises:
            UnexpectedEndError: ``text`` stops before the closing ``)``
            InvalidPriorityError: ``text`` does not have the ``(X)`` shape
        """
        span = ByteSpan.of(text, offset)
        expected = ("(", "A-Z", ")")
        for position, label in enumerate(expected):
            if position >= len(text):
                raise UnexpectedEndError(f"priority ended early, expected {label!r}", span)
            char = text[position]
            ok = "A" <= char <= "Z" if label == "A-Z" else char == label
            if not ok:
                raise InvalidPriorityError(
                    f"invalid priority {text!r}, expected {label!r} at position {position}", span
                )
        if len(text) > len(expected):
            raise InvalidPriorityError(f"unexpected text after priority in {text!r}", span)
        return cls(text[1])
