"""Field extraction from raw command lines - no I/O dependencies.

Markers (``/by``, ``/from``, ``/to``) are only recognised as whole
whitespace-delimited tokens, so text such as ``/tomorrow`` inside a
description is left alone. Every failure raises ParseError.
"""

import re
from dataclasses import dataclass

from .errors import ParseError

BY_MARKER = "/by"
FROM_MARKER = "/from"
TO_MARKER = "/to"


def _marker_pattern(marker: str) -> re.Pattern[str]:
    return re.compile(rf"(?<!\S){re.escape(marker)}(?!\S)")


_BY = _marker_pattern(BY_MARKER)
_FROM = _marker_pattern(FROM_MARKER)
_TO = _marker_pattern(TO_MARKER)
_INTEGER = re.compile(r"-?[0-9]+")


@dataclass(frozen=True)
class DeadlineFields:
    """Fields of a deadline command."""

    description: str
    by: str


@dataclass(frozen=True)
class EventFields:
    """Fields of an event command."""

    description: str
    start: str
    end: str


def first_word(line: str) -> str:
    """The command word. Empty string for a blank line."""
    parts = line.split(maxsplit=1)
    return parts[0] if parts else ""


def arguments(line: str) -> str:
    """Everything after the command word, trimmed."""
    parts = line.split(maxsplit=1)
    return parts[1].strip() if len(parts) > 1 else ""


def trailing_integer(line: str) -> int:
    """Parse the last token of the line as a plain decimal integer."""
    tokens = line.split()
    if len(tokens) < 2:
        raise ParseError("Missing task number.")
    # int() alone would also take "1_0", "+1" and non-ASCII digits
    if not _INTEGER.fullmatch(tokens[-1]):
        raise ParseError(f"'{tokens[-1]}' is not a valid task number.")
    return int(tokens[-1])


def search_term(line: str) -> str:
    """The raw text after ``find `` (may be empty, not trimmed)."""
    return line[len(first_word(line)) + 1 :]


def parse_todo(line: str) -> str:
    """Description of a todo command."""
    description = arguments(line)
    if not description:
        raise ParseError("To-Do description is too short.")
    return description


def parse_deadline(line: str) -> DeadlineFields:
    """Split ``deadline <description> /by <when>``."""
    description, by = _split_at(arguments(line), _BY, BY_MARKER, "Deadline")
    return DeadlineFields(
        description=_require(description, "Deadline", "description"),
        by=_require(by, "Deadline", "/by time"),
    )


def parse_event(line: str) -> EventFields:
    """Split ``event <description> /from <start> /to <end>``."""
    description, times = _split_at(arguments(line), _FROM, FROM_MARKER, "Event")
    if _TO.search(description):
        raise ParseError("Event details are incomplete: /to must come after /from.")
    start, end = _split_at(times, _TO, TO_MARKER, "Event")
    return EventFields(
        description=_require(description, "Event", "description"),
        start=_require(start, "Event", "/from time"),
        end=_require(end, "Event", "/to time"),
    )


def deadline_name(line: str) -> str:
    return parse_deadline(line).description


def deadline_time(line: str) -> str:
    return parse_deadline(line).by


def event_name(line: str) -> str:
    return parse_event(line).description


def event_times(line: str) -> tuple[str, str]:
    """The (start, end) pair of an event command."""
    fields = parse_event(line)
    return fields.start, fields.end


def _split_at(text: str, pattern: re.Pattern[str], marker: str, kind: str) -> tuple[str, str]:
    match = pattern.search(text)
    if match is None:
        raise ParseError(f"{kind} details are incomplete: missing {marker}.")
    return text[: match.start()].strip(), text[match.end() :].strip()


def _require(value: str, kind: str, what: str) -> str:
    if not value:
        raise ParseError(f"{kind} details are incomplete: {what} is empty.")
    return value
