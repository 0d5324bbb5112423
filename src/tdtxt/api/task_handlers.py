"""Task handler functions behind the REST routes and the CLI."""

import logging

from ..errors import ParseError
from ..models.record import TaskRecord, from_record, to_record
from ..models.task import Task
from ..parsers.task_parser import parse_task

log = logging.getLogger(__name__)


def _error_to_dict(error: ParseError) -> dict:
    return {
        "kind": error.kind.name,
        "message": error.message,
        "span": [error.span.start, error.span.end],
    }


def _component_to_dict(component) -> dict:
    return {
        "kind": component.kind.value,
        "text": component.text,
        "span": [component.span.start, component.span.end],
    }


def task_to_dict(task: Task) -> dict:
    """Record, description components and canonical line of a task."""
    return {
        "record": to_record(task).model_dump(),
        "components": [_component_to_dict(c) for c in task.components()],
        "line": str(task),
    }


def handle_task_parse(*, line: str) -> dict:
    """Parse a line into its record and description components."""
    try:
        task = parse_task(line)
    except ParseError as e:
        log.info("Rejected line %r: %s", line, e)
        return {"error": _error_to_dict(e)}
    return task_to_dict(task)


def handle_task_format(record: TaskRecord) -> dict:
    """Render a record as its canonical line."""
    try:
        task = from_record(record)
    except ValueError as e:
        log.info("Rejected record %r: %s", record, e)
        return {"error": {"kind": "INVALID_TASK", "message": str(e)}}
    return {"line": str(task)}
