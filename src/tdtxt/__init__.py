"""
tdtxt - parse and write single lines of the todo.txt format.

Main API:
    from tdtxt import parse_task, format_task

    task = parse_task("x (A) 2016-05-20 2016-04-30 measure space for +chapelShelving")
    task.state             # State.DONE
    task.priority          # Priority.A
    task.projects()        # ["chapelShelving"]
    format_task(task)      # canonical line
"""

from .errors import (
    ErrorKind,
    InvalidDateError,
    InvalidLineError,
    InvalidPriorityError,
    InvalidStateError,
    ParseError,
    UnexpectedEndError,
)
from .models import (
    ByteSpan,
    Completed,
    Component,
    ComponentKind,
    Created,
    DateCompound,
    Description,
    Priority,
    SimpleDate,
    State,
    Task,
    TaskBuilder,
    date_compound_sort_key,
)
from .models.record import TaskRecord, from_record, to_record
from .parsers import iter_content, parse_content, parse_file, parse_task
from .utils.formatting import format_content, format_task

__version__ = "0.3.0"

__all__ = [
    # Models
    "ByteSpan",
    "Priority",
    "State",
    "SimpleDate",
    "DateCompound",
    "Created",
    "Completed",
    "Description",
    "Component",
    "ComponentKind",
    "Task",
    "TaskBuilder",
    "date_compound_sort_key",
    # Main API
    "parse_task",
    "format_task",
    # Errors
    "ErrorKind",
    "ParseError",
    "InvalidPriorityError",
    "InvalidDateError",
    "InvalidStateError",
    "UnexpectedEndError",
    "InvalidLineError",
    # Records
    "TaskRecord",
    "to_record",
    "from_record",
    # Utilities
    "parse_content",
    "iter_content",
    "parse_file",
    "format_content",
]
