"""
Structured record view of a task, for JSON and other interchange formats.

Field order is fixed: state, priority, created, completed, description.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from ..errors import ParseError
from .date import SimpleDate
from .description import Description
from .priority import Priority
from .state import State
from .task import Task


class TaskRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    state: Literal["open", "done"] = "open"
    priority: Optional[str] = None
    created: Optional[str] = None
    completed: Optional[str] = None
    description: str

    @field_validator("priority")
    @classmethod
    def _check_priority(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            Priority.from_char(value)
        return value

    @field_validator("created", "completed")
    @classmethod
    def _check_date(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            try:
                SimpleDate.parse(value)
            except ParseError as e:
                raise ValueError(e.message) from e
        return value

    @field_validator("description")
    @classmethod
    def _check_description(cls, value: str) -> str:
        Description(value)
        return value

    @model_validator(mode="after")
    def _completed_needs_created(self) -> TaskRecord:
        if self.completed is not None and self.created is None:
            raise ValueError("completed requires created")
        return self


def to_record(task: Task) -> TaskRecord:
    """Flatten a Task into a TaskRecord."""
    return TaskRecord(
        state=task.state.value,
        priority=task.priority.value if task.priority else None,
        created=str(task.created) if task.created else None,
        completed=str(task.completed) if task.completed else None,
        description=task.description.text,
    )


def from_record(record: TaskRecord) -> Task:
    """
    Rebuild a Task from a validated TaskRecord.

    Raises:
        ValueError: the record would not read back as the same task, e.g. a
            description starting with "(A) " and no priority
    """
    builder = Task.build().state(State(record.state)).priority(record.priority)
    if record.created is not None:
        builder.created(record.created)
    if record.completed is not None:
        builder.completed(record.completed)
    return builder.build(record.description)
