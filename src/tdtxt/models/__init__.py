from .span import ByteSpan
from .priority import Priority
from .state import State
from .date import Completed, Created, DateCompound, SimpleDate, date_compound_sort_key
from .description import Component, ComponentKind, Description
from .task import Task, TaskBuilder

__all__ = [
    "ByteSpan",
    "Priority",
    "State",
    "SimpleDate",
    "DateCompound",
    "Created",
    "Completed",
    "date_compound_sort_key",
    "Component",
    "ComponentKind",
    "Description",
    "Task",
    "TaskBuilder",
]
