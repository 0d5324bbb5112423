from .task_parser import (
    iter_content,
    parse_content,
    parse_date_compound,
    parse_fields,
    parse_file,
    parse_priority,
    parse_state,
    parse_task,
)

__all__ = [
    "parse_task",
    "parse_fields",
    "parse_content",
    "iter_content",
    "parse_file",
    "parse_state",
    "parse_priority",
    "parse_date_compound",
]
