"""
Core task data model.

The Task model captures everything needed to reconstruct a todo.txt line via
utils.formatting. No raw line is stored: the model IS the source of truth,
and formatting.py defines the canonical rendering.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union

from ..errors import ParseError
from ..utils.formatting import format_task
from .date import Completed, Created, DateCompound, SimpleDate
from .description import Component, Description
from .priority import Priority
from .state import State


@dataclass(frozen=True)
class Task:
    """
    A single todo.txt task.

    Tasks are immutable; build a new one (``dataclasses.replace`` works) to
    change a field. ``state`` and ``priority`` also accept their string forms
    (``"done"``, ``"A"``).

    Construction checks that the canonical line parses back to an equal
    task, so ``parse_task(str(task)) == task`` always holds.
    """

    description: Description
    state: State = State.OPEN
    priority: Optional[Priority] = None
    date_compound: Optional[DateCompound] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.description, str):
            object.__setattr__(self, "description", Description(self.description))
        if isinstance(self.state, str):
            object.__setattr__(self, "state", State(self.state))
        if isinstance(self.priority, str):
            object.__setattr__(self, "priority", Priority.from_char(self.priority))

        if not isinstance(self.description, Description):
            raise TypeError(f"description must be a Description or str, got {self.description!r}")
        if not isinstance(self.state, State):
            raise TypeError(f"state must be a State, got {self.state!r}")
        if self.priority is not None and not isinstance(self.priority, Priority):
            raise TypeError(f"priority must be a Priority, got {self.priority!r}")
        if self.date_compound is not None and not isinstance(self.date_compound, DateCompound):
            raise TypeError(f"date_compound must be a DateCompound, got {self.date_compound!r}")

        self._check_round_trip()

    def _check_round_trip(self) -> None:
        """
        Raise ValueError unless the canonical line parses back to this task.

        Catches descriptions that would be read as header fields, such as
        ``"(B) foo"`` on a task without a priority or ``"2021-02-30 note"``.
        """
        from ..parsers.task_parser import parse_fields

        line = format_task(self)
        try:
            fields = parse_fields(line)
        except ParseError as e:
            raise ValueError(f"task {line!r} does not parse back: {e.message}") from e
        expected = {
            "description": self.description.text,
            "state": self.state,
            "priority": self.priority,
            "date_compound": self.date_compound,
        }
        if fields != expected:
            raise ValueError(f"task {line!r} parses back as a different task")

    @classmethod
    def parse(cls, line: str) -> Task:
        """Parse a single todo.txt line; see parsers.task_parser.parse_task."""
        from ..parsers.task_parser import parse_task

        return parse_task(line)

    @staticmethod
    def build() -> TaskBuilder:
        return TaskBuilder()

    @property
    def is_done(self) -> bool:
        return self.state.is_done()

    @property
    def created(self) -> Optional[SimpleDate]:
        return self.date_compound.created if self.date_compound else None

    @property
    def completed(self) -> Optional[SimpleDate]:
        return self.date_compound.completed if self.date_compound else None

    def components(self) -> Iterator[Component]:
        return self.description.components()

    def projects(self) -> List[str]:
        return list(self.description.projects())

    def contexts(self) -> List[str]:
        return list(self.description.contexts())

    def custom(self) -> List[Tuple[str, str]]:
        return list(self.description.custom())

    def __str__(self) -> str:
        return format_task(self)


DateLike = Union[SimpleDate, str]


def _as_date(value: DateLike) -> SimpleDate:
    if isinstance(value, SimpleDate):
        return value
    return SimpleDate.parse(value)


class TaskBuilder:
    """
    Fluent construction of tasks.

        Task.build().done().priority("A").created("2016-04-30").build("measure space")

    build() raises ValueError for the same inconsistencies Task does.
    """

    def __init__(self):
        self._state = State.OPEN
        self._priority: Optional[Priority] = None
        self._created: Optional[SimpleDate] = None
        self._completed: Optional[SimpleDate] = None

    def state(self, state: State) -> TaskBuilder:
        self._state = state
        return self

    def done(self) -> TaskBuilder:
        return self.state(State.DONE)

    def priority(self, priority: Union[Priority, str, None]) -> TaskBuilder:
        if isinstance(priority, str):
            priority = Priority.from_char(priority)
        self._priority = priority
        return self

    def created(self, date: DateLike) -> TaskBuilder:
        self._created = _as_date(date)
        return self

    def completed(self, date: DateLike) -> TaskBuilder:
        self._completed = _as_date(date)
        return self

    def date_compound(self, compound: Optional[DateCompound]) -> TaskBuilder:
        self._created = compound.created if compound else None
        self._completed = compound.completed if compound else None
        return self

    def _compound(self) -> Optional[DateCompound]:
        if self._completed is not None:
            if self._created is None:
                raise ValueError("a completion date requires a creation date")
            return Completed(completed=self._completed, created=self._created)
        if self._created is not None:
            return Created(created=self._created)
        return None

    def build(self, description: Union[Description, str]) -> Task:
        """
        Create the task.

        Raises:
            ValueError: the fields are inconsistent, or the description would
                be read back as header fields (e.g. ``"(B ..."`` with no
                priority) so the task cannot round-trip
        """
        return Task(
            description=description,
            state=self._state,
            priority=self._priority,
            date_compound=self._compound(),
        )
