"""
Byte offset ranges into a source line.

Spans are measured in UTF-8 bytes, not characters, so they stay stable for
callers that hold the encoded line. Use ByteSpan.slice() to recover the
covered text from a ``str``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class ByteSpan:
    """Half-open byte range ``[start, end)``."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"span start must not be negative, got {self.start}")
        if self.start > self.end:
            raise ValueError(f"span start {self.start} is past its end {self.end}")

    @classmethod
    def of(cls, text: str, offset: int = 0) -> ByteSpan:
        """Span covering ``text`` when it starts at byte ``offset``."""
        return cls(offset, offset + len(text.encode("utf-8")))

    def __len__(self) -> int:
        return self.end - self.start

    def offset(self, amount: int) -> ByteSpan:
        """Shift both ends by ``amount`` bytes."""
        return ByteSpan(self.start + amount, self.end + amount)

    def union(self, other: ByteSpan) -> ByteSpan:
        """Smallest span covering both spans."""
        return ByteSpan(min(self.start, other.start), max(self.end, other.end))

    def slice(self, text: str) -> str:
        """Return the part of ``text`` covered by this span."""
        return text.encode("utf-8")[self.start:self.end].decode("utf-8")

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"
