"""Tests for core task logic."""

from dataclasses import FrozenInstanceError

import pytest

from weeny.core.errors import ParseError
from weeny.core.tasks import (
    Deadline,
    Event,
    ToDo,
    deserialize_string,
    display_string,
    serialize_string,
)


class TestTask:
    def test_new_task_is_not_done(self):
        assert ToDo("read book").is_done is False

    def test_mark_done_returns_done_copy(self):
        task = Deadline("submit report", "Sunday")
        done = task.mark_done()
        assert done.is_done is True
        assert done.description == "submit report"
        assert done.by == "Sunday"
        assert task.is_done is False

    def test_mark_not_done(self):
        task = ToDo("read book", done=True)
        assert task.mark_not_done().is_done is False

    def test_mark_done_keeps_type(self):
        task = Event("sync", "Mon 2pm", "Mon 3pm")
        assert isinstance(task.mark_done(), Event)

    def test_descriptive_fields_are_immutable(self):
        task = ToDo("read book")
        with pytest.raises(FrozenInstanceError):
            task.description = "other"

    def test_type_markers(self):
        assert ToDo("a").type_marker == "T"
        assert Deadline("a", "b").type_marker == "D"
        assert Event("a", "b", "c").type_marker == "E"


class TestDisplayString:
    def test_todo(self):
        assert display_string(ToDo("read book")) == "[T][ ] read book"

    def test_todo_done(self):
        assert display_string(ToDo("read book", done=True)) == "[T][X] read book"

    def test_deadline(self):
        task = Deadline("submit report", "Sunday")
        assert display_string(task) == "[D][ ] submit report (by: Sunday)"

    def test_event(self):
        task = Event("team sync", "Mon 2pm", "Mon 3pm")
        assert display_string(task) == "[E][ ] team sync (from: Mon 2pm to: Mon 3pm)"


class TestSerialization:
    def test_todo_layout(self):
        assert serialize_string(ToDo("read book")) == "T | 0 | read book"

    def test_deadline_layout(self):
        task = Deadline("submit report", "Sunday", done=True)
        assert serialize_string(task) == "D | 1 | submit report | Sunday"

    def test_event_layout(self):
        task = Event("team sync", "Mon 2pm", "Mon 3pm")
        assert serialize_string(task) == "E | 0 | team sync | Mon 2pm | Mon 3pm"

    @pytest.mark.parametrize(
        "task",
        [
            ToDo("read book"),
            ToDo("read book", done=True),
            Deadline("submit report", "Sunday 5pm"),
            Event("team sync", "Mon 2pm", "Mon 3pm", done=True),
        ],
    )
    def test_round_trip(self, task):
        assert deserialize_string(serialize_string(task)) == task

    def test_separator_in_text_is_escaped(self):
        task = Deadline("pipe | tricky", "a|b")
        line = serialize_string(task)
        assert line == "D | 0 | pipe \\| tricky | a\\|b"
        assert deserialize_string(line) == task

    def test_backslash_in_text_round_trips(self):
        task = Event("path C:\\temp\\", "x\\|y", "end")
        assert deserialize_string(serialize_string(task)) == task

    @pytest.mark.parametrize("sep", ["\n", "\r", "\x0b", "\x0c", "\x1e", "\x85", "\u2028", "\u2029"])
    def test_line_breaks_in_text_stay_on_one_line(self, sep):
        task = Event(f"read{sep}book", f"Mon{sep}2pm", "Mon 3pm")
        line = serialize_string(task)
        assert len(line.splitlines()) == 1
        assert deserialize_string(line) == task

    def test_newline_escape_layout(self):
        assert serialize_string(ToDo("a\nb\rc\u2028d")) == "T | 0 | a\\nb\\rc\\u2028d"

    def test_deserialize_ignores_trailing_newline(self):
        assert deserialize_string("T | 1 | read book\n") == ToDo("read book", done=True)

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "T | 0",
            "X | 0 | mystery",
            "T | 2 | bad flag",
            "D | 0 | no due marker",
            "E | 0 | sync | only start",
            "T | 0 | too | many",
            "T | 0 | bad \\uZZ escape",
        ],
    )
    def test_deserialize_rejects_malformed(self, line):
        with pytest.raises(ParseError):
            deserialize_string(line)
