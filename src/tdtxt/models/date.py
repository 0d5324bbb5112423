"""
Dates attached to a task.

SimpleDate is a validated ``YYYY-MM-DD`` calendar date. DateCompound is the
zero/one/two date header of a task line:

    2016-04-30 ...               -> Created(created=2016-04-30)
    2016-05-20 2016-04-30 ...    -> Completed(completed=2016-05-20, created=2016-04-30)

The first date printed is always the completion date. Whether it is later
than the creation date is not checked.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from functools import total_ordering
from typing import Optional, Tuple

from ..errors import InvalidDateError, UnexpectedEndError
from ..utils.tokens import iter_words
from .span import ByteSpan

# d = ASCII digit, anything else must match literally
DATE_SHAPE = "dddd-dd-dd"
DIGITS = frozenset("0123456789")

MAX_YEAR = 9999


def days_in_month(year: int, month: int) -> int:
    """Number of days in ``month`` of ``year`` (Gregorian leap years)."""
    if month == 2:
        return 29 if calendar.isleap(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def _check_ymd(year: int, month: int, day: int) -> Optional[str]:
    """Return a description of what is wrong with the date, or None."""
    if not 0 <= year <= MAX_YEAR:
        return f"year {year} is outside 0-{MAX_YEAR}"
    if not 1 <= month <= 12:
        return f"month {month} is outside 1-12"
    last = days_in_month(year, month)
    if not 1 <= day <= last:
        return f"day {day} is outside 1-{last} for {year:04}-{month:02}"
    return None


def is_date_shaped(text: str) -> bool:
    """True if ``text`` looks like ``DDDD-DD-DD``, regardless of range."""
    if len(text) != len(DATE_SHAPE):
        return False
    return all(
        (char in DIGITS) if expected == "d" else char == expected
        for char, expected in zip(text, DATE_SHAPE)
    )


@dataclass(frozen=True, order=True)
class SimpleDate:
    """A calendar date; invalid dates cannot be constructed."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        problem = _check_ymd(self.year, self.month, self.day)
        if problem:
            raise ValueError(f"invalid date: {problem}")

    def __str__(self) -> str:
        return f"{self.year:04}-{self.month:02}-{self.day:02}"

    @classmethod
    def parse(cls, text: str, offset: int = 0) -> SimpleDate:
        """
        Parse exactly ``YYYY-MM-DD``.

        Args:
            text: The whole token, nothing else
            offset: Byte offset of ``text`` in the line, used for error spans

        Raises:
            UnexpectedEndError: ``text`` is a truncated date
            InvalidDateError: wrong characters, trailing text, or a month/day
                that does not exist
        """
        span = ByteSpan.of(text, offset)
        for position, expected in enumerate(DATE_SHAPE):
            if position >= len(text):
                raise UnexpectedEndError(f"date {text!r} ended early, expected YYYY-MM-DD", span)
            char = text[position]
            ok = char in DIGITS if expected == "d" else char == expected
            if not ok:
                raise InvalidDateError(
                    f"invalid date {text!r}, unexpected {char!r} at position {position}", span
                )
        if len(text) > len(DATE_SHAPE):
            raise InvalidDateError(f"unexpected text after date in {text!r}", span)

        year, month, day = int(text[0:4]), int(text[5:7]), int(text[8:10])
        problem = _check_ymd(year, month, day)
        if problem:
            raise InvalidDateError(f"invalid date {text!r}: {problem}", span)
        return cls(year, month, day)


@total_ordering
class DateCompound:
    """
    Shared interface of the Created and Completed variants.

    Variants order as ``Created < Completed``; within a variant the created
    date is compared first, then the completed date.
    """

    _rank = 0
    created: SimpleDate
    completed: Optional[SimpleDate]

    def has_created(self) -> bool:
        return True

    def has_completed(self) -> bool:
        return self.completed is not None

    def sort_key(self) -> Tuple:
        return (self._rank, self.created, self.completed or self.created)

    def __lt__(self, other):
        if not isinstance(other, DateCompound):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    @classmethod
    def parse(cls, text: str, offset: int = 0) -> DateCompound:
        """
        Parse one date (``Created``) or two dates (``Completed``).

        Unlike the task parser, which stops quietly at a bad second date, this
        requires every word of ``text`` to be a valid date.
        """
        words = list(iter_words(text))
        if not words:
            raise UnexpectedEndError("expected a date", ByteSpan.of(text, offset))
        if len(words) > 2:
            raise InvalidDateError(
                f"unexpected text after dates: {words[2].text!r}", words[2].span.offset(offset)
            )
        dates = [SimpleDate.parse(word.text, word.span.start + offset) for word in words]
        if len(dates) == 1:
            return Created(created=dates[0])
        return Completed(completed=dates[0], created=dates[1])


@dataclass(frozen=True)
class Created(DateCompound):
    """Only a creation date."""

    created: SimpleDate

    @property
    def completed(self) -> Optional[SimpleDate]:
        return None

    def __str__(self) -> str:
        return str(self.created)


@dataclass(frozen=True)
class Completed(DateCompound):
    """Completion date followed by creation date."""

    _rank = 1

    completed: SimpleDate
    created: SimpleDate

    def __str__(self) -> str:
        return f"{self.completed} {self.created}"


def date_compound_sort_key(compound: Optional[DateCompound]) -> Tuple:
    """Sort key that places a missing compound before both variants."""
    if compound is None:
        return (-1,)
    return compound.sort_key()
