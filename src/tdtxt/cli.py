#!/usr/bin/env python3
"""
tdtxt - command line front end for todo.txt lines

Usage:
    tdtxt check <file> [<file> ...]
    tdtxt format <file>
    tdtxt show <line>
    tdtxt new <description> [options]
    tdtxt serve [--host HOST] [--port PORT]

Examples:
    tdtxt check todo.txt
    tdtxt format todo.txt > todo.canonical.txt
    tdtxt show "x (A) 2016-05-20 2016-04-30 measure space for +chapelShelving"
    tdtxt new "Call mum @phone" --priority B --created today

Environment:
    TDTXT_LOG_LEVEL   logging level (default: WARNING)
    TDTXT_API_HOST    host for `serve` (default: 127.0.0.1)
    TDTXT_API_PORT    port for `serve` (default: 9400)
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from textwrap import indent

from .api.task_handlers import task_to_dict
from .errors import ParseError
from .models.task import Task
from .parsers.task_parser import parse_content, parse_task
from .utils.dates import parse_date
from .utils.formatting import format_content
from .utils.tokens import iter_lines, strip_spaces

log = logging.getLogger(__name__)


def _read(path: Path) -> str:
    if not path.is_file():
        print(f"Error: File not found: {path}")
        sys.exit(1)
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


# --- check ---

def check_files(args) -> int:
    """Parse every line of every file and report the failures."""
    failures = 0
    for path in args.files:
        content = _read(path)
        for line_number, line in iter_lines(content):
            if not strip_spaces(line):
                continue
            try:
                parse_task(line)
            except ParseError as e:
                failures += 1
                print(f"{path}:{line_number}: {e.kind.name}: {e.message} ({e.span})")
                print(indent(e.highlight(line), "    "))

    if failures:
        print(f"{failures} invalid line(s).")
        return 1
    print("All lines valid.")
    return 0


# --- format ---

def format_file(args) -> int:
    """Print the canonical form of every task in a file."""
    content = _read(args.file)
    try:
        tasks = parse_content(content)
    except ParseError as e:
        print(f"Error: {args.file}: {e}")
        return 1
    log.info("Formatted %d task(s) from %s", len(tasks), args.file)
    print(format_content(tasks))
    return 0


# --- show ---

def show_line(args) -> int:
    """Dump the structure of a single line as JSON."""
    try:
        task = parse_task(args.line)
    except ParseError as e:
        print(f"Error: {e.kind.name}: {e.message}")
        print(indent(e.highlight(args.line), "    "))
        return 1
    print(json.dumps(task_to_dict(task), indent=2, ensure_ascii=False))
    return 0


# --- new ---

def new_task(args) -> int:
    """Build a task from options and print its canonical line."""
    builder = Task.build()
    if args.done:
        builder.done()
    for option in ("created", "completed"):
        raw = getattr(args, option)
        if raw is None:
            continue
        parsed = parse_date(raw)
        if parsed is None:
            print(f"Error: Could not parse {option} date '{raw}'.")
            return 1
        getattr(builder, option)(parsed)

    try:
        if args.priority:
            builder.priority(args.priority)
        task = builder.build(args.description)
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    print(task)
    return 0


# --- serve ---

def serve(args) -> int:
    """Run the REST API with uvicorn."""
    import uvicorn

    from .api.app import create_app

    app = create_app()
    log.info("Starting REST API on %s:%d", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_level="warning")
    return 0


# --- main ---

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tdtxt",
        description="Parse, check and format todo.txt lines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--log-level", default=os.environ.get("TDTXT_LOG_LEVEL", "WARNING"),
                        help="Logging level (default: $TDTXT_LOG_LEVEL or WARNING)")
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    check_p = subparsers.add_parser("check", help="Report lines that do not parse")
    check_p.add_argument("files", nargs="+", type=Path, help="todo.txt files")
    check_p.set_defaults(func=check_files)

    format_p = subparsers.add_parser("format", help="Print tasks in canonical form")
    format_p.add_argument("file", type=Path, help="todo.txt file")
    format_p.set_defaults(func=format_file)

    show_p = subparsers.add_parser("show", help="Show the structure of one line")
    show_p.add_argument("line", help="A single todo.txt line")
    show_p.set_defaults(func=show_line)

    new_p = subparsers.add_parser("new", help="Build a task line")
    new_p.add_argument("description", help="Task description")
    new_p.add_argument("--done", action="store_true", help="Mark as done")
    new_p.add_argument("--priority", help="Priority letter A-Z")
    new_p.add_argument("--created", help="Creation date (YYYY-MM-DD, today, yesterday, tomorrow)")
    new_p.add_argument("--completed", help="Completion date (requires --created)")
    new_p.set_defaults(func=new_task)

    serve_p = subparsers.add_parser("serve", help="Run the REST API")
    serve_p.add_argument("--host", default=os.environ.get("TDTXT_API_HOST", "127.0.0.1"))
    serve_p.add_argument("--port", type=int, default=os.environ.get("TDTXT_API_PORT", "9400"))
    serve_p.set_defaults(func=serve)

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return 1
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
