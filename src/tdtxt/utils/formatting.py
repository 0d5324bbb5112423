"""
Canonical todo.txt formatting.

This module is the single source of truth for how a task is written back
to text:

    [x ][(P) ][completed ][created ]description

Fields are separated by exactly one space and absent fields leave no gap.
format_task(parse_task(line)) == line for every line this module produced.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    from ..models.date import DateCompound
    from ..models.priority import Priority
    from ..models.state import State
    from ..models.task import Task

FIELD_SEPARATOR = " "
LINE_SEPARATOR = "\n"


def format_state(state: State) -> str:
    """``x`` for done tasks, empty for open ones."""
    return str(state)


def format_priority(priority: Optional[Priority]) -> str:
    return str(priority) if priority is not None else ""


def format_date_compound(compound: Optional[DateCompound]) -> str:
    """One date for Created, ``completed created`` for Completed."""
    return str(compound) if compound is not None else ""


def format_task(task: Task) -> str:
    """
    Render a task as its canonical todo.txt line.

    Args:
        task: Task to format

    Returns:
        Single line without a trailing newline
    """
    fields = [
        format_state(task.state),
        format_priority(task.priority),
        format_date_compound(task.date_compound),
        task.description.text,
    ]
    return FIELD_SEPARATOR.join(f for f in fields if f)


def format_content(tasks: Iterable[Task]) -> str:
    """Render tasks one per line, without a trailing newline."""
    return LINE_SEPARATOR.join(format_task(task) for task in tasks)
