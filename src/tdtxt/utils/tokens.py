"""
Low-level tokenizer shared by the task and description parsers.

A line is walked as UTF-8 bytes and split on ASCII whitespace. Multi-byte
UTF-8 sequences never contain ASCII bytes, so a split can never land inside
a character and every word decodes cleanly.
"""

from __future__ import annotations

from typing import Iterator, List, NamedTuple, Optional, Tuple

from ..models.span import ByteSpan

# WHATWG ASCII whitespace; vertical tab is not included.
ASCII_WHITESPACE = frozenset(b" \t\n\r\x0c")

LINE_BREAKS = frozenset(b"\n\r")


def is_space(byte: int) -> bool:
    return byte in ASCII_WHITESPACE


def strip_spaces(text: str) -> str:
    """Strip ASCII whitespace only; unicode spaces are description text."""
    return text.strip(" \t\n\r\x0c")


class Word(NamedTuple):
    """A whitespace-delimited word and where it sits in the input."""

    text: str
    span: ByteSpan


class Cursor:
    """
    Forward cursor over the bytes of a single line.

    The cursor hands out words one at a time. Callers that need to look ahead
    use peek_words(), and callers that need to back out of a speculative parse
    use mark() / reset().
    """

    def __init__(self, data: bytes, start: int = 0, end: Optional[int] = None):
        self.data = data
        self.end = len(data) if end is None else end
        self.index = start

    def mark(self) -> int:
        return self.index

    def reset(self, mark: int) -> None:
        self.index = mark

    def is_eof(self) -> bool:
        return self.index >= self.end

    def skip_whitespace(self) -> None:
        while self.index < self.end and is_space(self.data[self.index]):
            self.index += 1

    def _word_at(self, index: int) -> Optional[Word]:
        while index < self.end and is_space(self.data[index]):
            index += 1
        if index >= self.end:
            return None
        start = index
        while index < self.end and not is_space(self.data[index]):
            index += 1
        return Word(self.data[start:index].decode("utf-8"), ByteSpan(start, index))

    def peek_word(self) -> Optional[Word]:
        return self._word_at(self.index)

    def peek_words(self, count: int) -> List[Word]:
        """Return up to ``count`` upcoming words without consuming them."""
        words: List[Word] = []
        index = self.index
        while len(words) < count:
            word = self._word_at(index)
            if word is None:
                break
            words.append(word)
            index = word.span.end
        return words

    def next_word(self) -> Optional[Word]:
        word = self.peek_word()
        if word is not None:
            self.index = word.span.end
        return word

    def advance_past(self, word: Word) -> None:
        self.index = word.span.end

    def rest(self) -> str:
        """Everything from the cursor to the end bound, verbatim."""
        return self.data[self.index:self.end].decode("utf-8")

    def __iter__(self) -> Iterator[Word]:
        while True:
            word = self.next_word()
            if word is None:
                return
            yield word


def iter_words(text: str) -> Iterator[Word]:
    """Yield the words of ``text`` with spans relative to its first byte."""
    return iter(Cursor(text.encode("utf-8")))


def iter_lines(content: str) -> Iterator[Tuple[int, str]]:
    """
    Split a document into numbered lines.

    Only LF ends a line, and a CR right before it is dropped. Other
    separators that str.splitlines() honours (VT, FF, NEL, U+2028, ...) stay
    inside the line, where the task parser reads them as description text.

    Yields:
        (line_number, line) tuples, 1-based
    """
    for line_number, line in enumerate(content.split("\n"), start=1):
        if line.endswith("\r"):
            line = line[:-1]
        yield line_number, line
