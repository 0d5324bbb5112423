"""
Bridge between SimpleDate and the standard library's datetime.date.

Adapted from the vault date helpers: pure functions, no external
dependencies.
"""

from datetime import date, timedelta
from typing import Optional

from ..errors import ParseError
from ..models.date import SimpleDate

_RELATIVE_DAYS = {
    "yesterday": -1,
    "today": 0,
    "tomorrow": 1,
}


def to_date(simple: SimpleDate) -> date:
    """
    Convert to ``datetime.date``.

    Raises:
        ValueError: year 0, which datetime cannot represent
    """
    return date(simple.year, simple.month, simple.day)


def from_date(value: date) -> SimpleDate:
    return SimpleDate(value.year, value.month, value.day)


def today() -> SimpleDate:
    return from_date(date.today())


def parse_date(date_str: str) -> Optional[SimpleDate]:
    """
    Parse a user-supplied date.

    Supports:
    - ISO 8601: "2026-02-15"
    - Relative words: "yesterday", "today", "tomorrow"

    Returns:
        SimpleDate or None if unparseable
    """
    if not date_str:
        return None

    date_str = date_str.strip()
    offset = _RELATIVE_DAYS.get(date_str.lower())
    if offset is not None:
        return from_date(date.today() + timedelta(days=offset))

    try:
        return SimpleDate.parse(date_str)
    except ParseError:
        return None
