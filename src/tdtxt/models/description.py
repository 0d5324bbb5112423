"""
Free-text description of a task and its inline tags.

The description keeps its text verbatim. Tags are found on demand by
splitting on ASCII whitespace and classifying each word:

    +project      -> PROJECT   (name after the '+')
    @context      -> CONTEXT   (name after the '@')
    key:value     -> CUSTOM    (exactly one ':', both sides non-empty)
    anything else -> PLAIN_WORD

Every view re-tokenizes the text, so each call yields a fresh sequence.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple

from ..utils.tokens import LINE_BREAKS, iter_words, strip_spaces
from .span import ByteSpan

PROJECT_MARKER = "+"
CONTEXT_MARKER = "@"
CUSTOM_SEPARATOR = ":"


class ComponentKind(Enum):
    PROJECT = "project"
    CONTEXT = "context"
    CUSTOM = "custom"
    PLAIN_WORD = "plain"


@dataclass(frozen=True)
class Component:
    """One word of a description, classified."""

    kind: ComponentKind
    text: str
    span: ByteSpan

    @property
    def name(self) -> Optional[str]:
        """Project or context name without its marker."""
        if self.kind in (ComponentKind.PROJECT, ComponentKind.CONTEXT):
            return self.text[1:]
        return None

    @property
    def key(self) -> Optional[str]:
        if self.kind is ComponentKind.CUSTOM:
            return self.text.split(CUSTOM_SEPARATOR)[0]
        return None

    @property
    def value(self) -> Optional[str]:
        if self.kind is ComponentKind.CUSTOM:
            return self.text.split(CUSTOM_SEPARATOR)[1]
        return None


def classify_word(word: str) -> ComponentKind:
    """Decide what kind of tag a single whitespace-free word is."""
    if len(word) > 1 and word[0] == PROJECT_MARKER:
        return ComponentKind.PROJECT
    if len(word) > 1 and word[0] == CONTEXT_MARKER:
        return ComponentKind.CONTEXT
    parts = word.split(CUSTOM_SEPARATOR)
    if len(parts) == 2 and parts[0] and parts[1]:
        return ComponentKind.CUSTOM
    return ComponentKind.PLAIN_WORD


class Description:
    """
    The text after the task header, stored verbatim.

    The text must be a non-empty single line without surrounding whitespace;
    that is exactly what the task parser produces and what the formatter can
    write back unchanged.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str):
        if not text:
            raise ValueError("description must not be empty")
        if strip_spaces(text) != text:
            raise ValueError(f"description must not start or end with whitespace: {text!r}")
        if any(byte in LINE_BREAKS for byte in text.encode("utf-8")):
            raise ValueError(f"description must be a single line: {text!r}")
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def description(self) -> str:
        """The original text, byte for byte."""
        return self._text

    def components(self) -> Iterator[Component]:
        """Yield every word with its kind and its span within the description."""
        for word in iter_words(self._text):
            yield Component(classify_word(word.text), word.text, word.span)

    def projects(self) -> Iterator[str]:
        for component in self.components():
            if component.kind is ComponentKind.PROJECT:
                yield component.name

    def contexts(self) -> Iterator[str]:
        for component in self.components():
            if component.kind is ComponentKind.CONTEXT:
                yield component.name

    def custom(self) -> Iterator[Tuple[str, str]]:
        for component in self.components():
            if component.kind is ComponentKind.CUSTOM:
                yield component.key, component.value

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Description({self._text!r})"

    def __eq__(self, other):
        if isinstance(other, Description):
            return self._text == other._text
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)
