"""
Parser for todo.txt task lines.

Main API:
    parse_task(line)        -> Task
    parse_fields(line)      -> dict of raw fields
    parse_content(content)  -> List[Task]
    iter_content(content)   -> Iterator[(line_number, Task)]
    parse_file(path)        -> List[Task]

A line is read left to right in a single pass:

    [x ][(P) ][date [date] ]description

Header fields are only taken from words that have more text after them, so
the last word of a line always belongs to the description. A field that is
not present is skipped and its text falls through to the description. Two
shapes are clearly meant as fields but broken, and are errors instead:

- an unterminated priority such as ``(A`` in the priority position
- a ``YYYY-MM-DD`` word in the first date position that is not a real date

A broken second date never fails the parse; the task keeps the first date
and the broken word starts the description.
"""

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from ..errors import InvalidDateError, InvalidLineError, InvalidPriorityError, ParseError, UnexpectedEndError
from ..models.date import Completed, Created, DateCompound, SimpleDate, is_date_shaped
from ..models.description import Description
from ..models.priority import Priority
from ..models.span import ByteSpan
from ..models.state import State
from ..models.task import Task
from ..utils.tokens import ASCII_WHITESPACE, Cursor, Word, iter_lines, strip_spaces

log = logging.getLogger(__name__)

_STRIP_BYTES = bytes(sorted(ASCII_WHITESPACE))


# ---------------------------------------------------------------------------
# Header fields
# ---------------------------------------------------------------------------

def _header_word(cursor: Cursor) -> Optional[Word]:
    """Peek the next word, unless it is the last word of the line."""
    words = cursor.peek_words(2)
    if len(words) < 2:
        return None
    return words[0]


def _is_unterminated_priority(text: str) -> bool:
    return len(text) == 2 and text[0] == "(" and "A" <= text[1] <= "Z"


def parse_state(cursor: Cursor) -> State:
    """Consume a leading ``x``; anything else is an open task."""
    word = _header_word(cursor)
    if word is None:
        return State.OPEN
    try:
        state = State.parse(word.text, word.span.start)
    except ParseError:
        return State.OPEN
    cursor.advance_past(word)
    return state


def parse_priority(cursor: Cursor) -> Optional[Priority]:
    """
    Consume a ``(X)`` priority if one is next.

    Raises:
        InvalidPriorityError: the next word is an unterminated priority
    """
    word = _header_word(cursor)
    if word is None:
        return None
    if _is_unterminated_priority(word.text):
        raise InvalidPriorityError(
            f"unterminated priority {word.text!r}, expected '{word.text})'", word.span
        )
    try:
        priority = Priority.parse(word.text, word.span.start)
    except ParseError:
        return None
    cursor.advance_past(word)
    return priority


def parse_date_compound(cursor: Cursor) -> Optional[DateCompound]:
    """
    Consume up to two dates, greedily.

    Raises:
        InvalidDateError: the first date is date-shaped but does not exist
    """
    word = _header_word(cursor)
    if word is None or not is_date_shaped(word.text):
        return None
    first = SimpleDate.parse(word.text, word.span.start)
    cursor.advance_past(word)

    word = _header_word(cursor)
    if word is None or not is_date_shaped(word.text):
        return Created(created=first)
    try:
        second = SimpleDate.parse(word.text, word.span.start)
    except InvalidDateError as e:
        log.debug("Keeping %r as description text: %s", word.text, e.message)
        return Created(created=first)
    cursor.advance_past(word)
    return Completed(completed=first, created=second)


# ---------------------------------------------------------------------------
# Single line
# ---------------------------------------------------------------------------

def _line_cursor(line: str) -> Cursor:
    """Cursor over the line with surrounding whitespace trimmed off."""
    try:
        data = line.encode("utf-8")
    except UnicodeEncodeError as e:
        offset = len(line[: e.start].encode("utf-8"))
        raise InvalidLineError(
            f"line is not valid unicode: {e.reason}", ByteSpan(offset, offset)
        ) from e
    start = len(data) - len(data.lstrip(_STRIP_BYTES))
    end = len(data.rstrip(_STRIP_BYTES))
    if start >= end:
        raise UnexpectedEndError("empty task line", ByteSpan(len(data), len(data)))

    for brk in (b"\n", b"\r"):
        index = data.find(brk, start, end)
        if index != -1:
            raise InvalidLineError("line break inside a task line", ByteSpan(index, index + 1))

    return Cursor(data, start, end)


def parse_fields(line: str) -> dict:
    """
    Split a line into its raw fields without building a Task.

    Returns:
        dict with state, priority, date_compound and the description text

    Raises:
        ParseError: as parse_task
    """
    cursor = _line_cursor(line)

    state = parse_state(cursor)
    priority = parse_priority(cursor)
    date_compound = parse_date_compound(cursor)

    cursor.skip_whitespace()
    return {
        "description": cursor.rest(),
        "state": state,
        "priority": priority,
        "date_compound": date_compound,
    }


def parse_task(line: str) -> Task:
    """
    Parse a single todo.txt line.

    Args:
        line: One line, with or without its trailing newline

    Returns:
        The parsed Task

    Raises:
        ParseError: the first problem found, with the byte span of the
            offending text within ``line``
    """
    fields = parse_fields(line)
    fields["description"] = Description(fields["description"])
    return Task(**fields)


# ---------------------------------------------------------------------------
# Multi-line content
# ---------------------------------------------------------------------------

def iter_content(content: str) -> Iterator[Tuple[int, Task]]:
    """
    Lazily parse a todo.txt document.

    Lines are split as utils.tokens.iter_lines does and blank lines are
    skipped. A parse failure is re-raised with its ``line_number`` (1-based)
    set.

    Yields:
        (line_number, Task) tuples
    """
    for line_number, line in iter_lines(content):
        if not strip_spaces(line):
            continue
        try:
            task = parse_task(line)
        except ParseError as e:
            e.line_number = line_number
            raise
        yield line_number, task


def parse_content(content: str) -> List[Task]:
    """Parse every task of a todo.txt document."""
    return [task for _, task in iter_content(content)]


def parse_file(file_path: Path) -> List[Task]:
    """Parse a todo.txt file."""
    log.debug("Parsing %s", file_path)
    with open(file_path, encoding="utf-8", newline="") as f:
        return parse_content(f.read())
