"""
Tests for parsers/task_parser.py.

Covers:
- full lines with every header field
- fields that fall through to the description
- hard errors and their spans
- whitespace handling
- multi-line content and files
"""

import sys
from pathlib import Path

# Add src to path so imports work without installation
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from tdtxt.errors import (
    ErrorKind,
    InvalidDateError,
    InvalidLineError,
    InvalidPriorityError,
    ParseError,
    UnexpectedEndError,
)
from tdtxt.models.date import Completed, Created, SimpleDate
from tdtxt.models.priority import Priority
from tdtxt.models.span import ByteSpan
from tdtxt.models.state import State
from tdtxt.models.task import Task
from tdtxt.parsers.task_parser import iter_content, parse_content, parse_file, parse_task


# ---------------------------------------------------------------------------
# Full lines
# ---------------------------------------------------------------------------

class TestFullLines:
    def test_everything(self):
        task = parse_task("x (A) 2016-05-20 2016-04-30 measure space for +chapelShelving @chapel due:2016-05-30")
        assert task.state is State.DONE
        assert task.priority is Priority.A
        assert task.date_compound == Completed(
            completed=SimpleDate(2016, 5, 20), created=SimpleDate(2016, 4, 30)
        )
        assert task.description.text == "measure space for +chapelShelving @chapel due:2016-05-30"
        assert task.projects() == ["chapelShelving"]
        assert task.contexts() == ["chapel"]
        assert task.custom() == [("due", "2016-05-30")]

    def test_priority_and_created(self):
        task = parse_task("(A) 2016-05-20 call mum")
        assert task.state is State.OPEN
        assert task.priority is Priority.A
        assert task.date_compound == Created(created=SimpleDate(2016, 5, 20))
        assert task.created == SimpleDate(2016, 5, 20)
        assert task.completed is None
        assert task.description.text == "call mum"

    def test_description_only(self):
        task = parse_task("call mum")
        assert task == Task(description="call mum")
        assert task.priority is None
        assert task.date_compound is None

    def test_done_without_dates(self):
        task = parse_task("x call mum")
        assert task.is_done
        assert task.description.text == "call mum"

    def test_created_only(self):
        task = parse_task("2011-03-02 Document +TodoTxt task format")
        assert task.created == SimpleDate(2011, 3, 2)
        assert task.projects() == ["TodoTxt"]

    def test_classmethod_parse(self):
        assert Task.parse("x foo") == parse_task("x foo")


# ---------------------------------------------------------------------------
# Fall-through to the description
# ---------------------------------------------------------------------------

class TestFallThrough:
    @pytest.mark.parametrize(
        "line",
        [
            "X call mum",
            "xylophone lesson",
            "(a) lowercase priority",
            "(B)->Submit TPS report",
            "(AB) two letters",
            "Really gotta call Mom (A) @phone",
            "2021-1-01 not a date",
            "call mum x (A) 2020-01-01",
        ],
    )
    def test_whole_line_is_description(self, line):
        task = parse_task(line)
        assert task.state is State.OPEN
        assert task.priority is None
        assert task.date_compound is None
        assert task.description.text == line

    def test_done_marker_after_priority_is_text(self):
        task = parse_task("(A) x foo")
        assert task.priority is Priority.A
        assert task.state is State.OPEN
        assert task.description.text == "x foo"

    def test_dates_before_priority_are_text(self):
        task = parse_task("2020-01-01 (A) foo")
        assert task.priority is None
        assert task.created == SimpleDate(2020, 1, 1)
        assert task.description.text == "(A) foo"

    def test_bad_second_date_starts_description(self):
        task = parse_task("2020-01-01 2020-13-40 rest")
        assert task.date_compound == Created(created=SimpleDate(2020, 1, 1))
        assert task.description.text == "2020-13-40 rest"

    def test_third_date_is_text(self):
        task = parse_task("2020-01-03 2020-01-02 2020-01-01 foo")
        assert task.date_compound == Completed(
            completed=SimpleDate(2020, 1, 3), created=SimpleDate(2020, 1, 2)
        )
        assert task.description.text == "2020-01-01 foo"

    @pytest.mark.parametrize("line", ["x", "(A)", "2020-01-01", "(A", "2021-02-30"])
    def test_last_word_is_always_description(self, line):
        task = parse_task(line)
        assert task.description.text == line
        assert task.state is State.OPEN
        assert task.priority is None
        assert task.date_compound is None

    def test_last_word_after_fields(self):
        task = parse_task("x (A) 2020-01-01")
        assert task.is_done
        assert task.priority is Priority.A
        assert task.date_compound is None
        assert task.description.text == "2020-01-01"

    def test_leap_day(self):
        assert parse_task("2020-02-29 leap").created == SimpleDate(2020, 2, 29)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class TestErrors:
    def test_unterminated_priority(self):
        with pytest.raises(InvalidPriorityError) as exc:
            parse_task("(A buy milk")
        assert exc.value.kind is ErrorKind.INVALID_PRIORITY
        assert exc.value.span == ByteSpan(0, 2)

    def test_unterminated_priority_after_done(self):
        with pytest.raises(InvalidPriorityError) as exc:
            parse_task("x (B buy milk")
        assert exc.value.span == ByteSpan(2, 4)

    def test_impossible_date(self):
        with pytest.raises(InvalidDateError) as exc:
            parse_task("2021-02-30 note")
        assert exc.value.kind is ErrorKind.INVALID_DATE
        assert exc.value.span == ByteSpan(0, 10)

    def test_not_a_leap_year(self):
        with pytest.raises(InvalidDateError):
            parse_task("2021-02-29 note")

    def test_impossible_date_span_is_within_line(self):
        with pytest.raises(InvalidDateError) as exc:
            parse_task("  x (C) 2021-13-01 note")
        assert exc.value.span == ByteSpan(8, 18)

    @pytest.mark.parametrize("line", ["", "   ", "\t\n"])
    def test_empty_line(self, line):
        with pytest.raises(UnexpectedEndError) as exc:
            parse_task(line)
        size = len(line.encode("utf-8"))
        assert exc.value.span == ByteSpan(size, size)

    def test_line_break_inside(self):
        with pytest.raises(InvalidLineError) as exc:
            parse_task("call mum\nbuy milk")
        assert exc.value.kind is ErrorKind.INVALID_LINE
        assert exc.value.span == ByteSpan(8, 9)

    def test_lone_surrogate(self):
        with pytest.raises(InvalidLineError) as exc:
            parse_task("call \ud800 mum")
        assert exc.value.span == ByteSpan(5, 5)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_task("")

    def test_highlight(self):
        line = "2021-02-30 note"
        with pytest.raises(ParseError) as exc:
            parse_task(line)
        assert exc.value.highlight(line) == f"{line}\n^^^^^^^^^^"


# ---------------------------------------------------------------------------
# Whitespace
# ---------------------------------------------------------------------------

class TestWhitespace:
    def test_trailing_newline_is_trimmed(self):
        assert parse_task("x foo\n") == parse_task("x foo")
        assert parse_task("x foo\r\n") == parse_task("x foo")

    def test_separator_runs_collapse(self):
        task = parse_task("x  (A)\t2020-01-01   foo  bar")
        assert task.is_done
        assert task.priority is Priority.A
        assert task.created == SimpleDate(2020, 1, 1)
        assert task.description.text == "foo  bar"

    def test_leading_whitespace(self):
        task = parse_task("   x foo")
        assert task.is_done
        assert task.description.text == "foo"

    def test_non_ascii_space_is_not_a_separator(self):
        task = parse_task("x\u00a0foo bar")
        assert task.state is State.OPEN
        assert task.description.text == "x\u00a0foo bar"


# ---------------------------------------------------------------------------
# Content and files
# ---------------------------------------------------------------------------

class TestContent:
    def test_parse_content_skips_blank_lines(self):
        content = "x done thing\n\n   \n(B) open thing\n"
        tasks = parse_content(content)
        assert [t.description.text for t in tasks] == ["done thing", "open thing"]

    def test_iter_content_line_numbers(self):
        content = "first\n\nsecond\n"
        assert [n for n, _ in iter_content(content)] == [1, 3]

    def test_error_carries_line_number(self):
        content = "ok task\n\n(A broken\n"
        with pytest.raises(InvalidPriorityError) as exc:
            parse_content(content)
        assert exc.value.line_number == 3
        assert "line 3" in str(exc.value)

    def test_iter_content_is_lazy(self):
        tasks = iter_content("good one\n2021-02-30 bad\n")
        assert next(tasks)[1].description.text == "good one"
        with pytest.raises(InvalidDateError):
            next(tasks)

    @pytest.mark.parametrize("separator", ["\x85", "\x0b", "\x0c", "\x1c", "\u2028", "\u2029"])
    def test_only_newline_ends_a_line(self, separator):
        tasks = parse_content(f"call mum{separator}now\nsecond")
        assert [t.description.text for t in tasks] == [f"call mum{separator}now", "second"]
        assert parse_content(f"call{separator}mum") == [parse_task(f"call{separator}mum")]

    def test_crlf_line_endings(self):
        assert [n for n, _ in iter_content("a\r\nb\r\n")] == [1, 2]
        assert parse_content("a\r\nb\r\n") == parse_content("a\nb\n")

    def test_lone_carriage_return_is_an_error(self):
        with pytest.raises(InvalidLineError) as exc:
            parse_content("ok\nab\rcd\n")
        assert exc.value.line_number == 2

    def test_parse_file_keeps_unicode_separators(self, tmp_path):
        path = tmp_path / "todo.txt"
        path.write_bytes("call\x85mum\r\nnext\n".encode("utf-8"))
        assert [t.description.text for t in parse_file(path)] == ["call\x85mum", "next"]

    def test_parse_file(self, tmp_path):
        path = tmp_path / "todo.txt"
        path.write_text("(A) 2020-01-01 café +home\nx later\n", encoding="utf-8")
        tasks = parse_file(path)
        assert len(tasks) == 2
        assert tasks[0].projects() == ["home"]
        assert tasks[1].is_done
