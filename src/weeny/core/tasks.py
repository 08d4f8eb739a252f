"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass, field, replace
from itertools import islice
from typing import ClassVar

from .errors import ParseError

FIELD_SEPARATOR = " | "
DONE_MARKER = "X"
# Everything str.splitlines() treats as a line boundary
LINE_BREAKS = "\n\r\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029"


@dataclass(frozen=True)
class _TaskBase:
    """Fields and completion handling shared by every task kind."""

    description: str
    done: bool = field(default=False, kw_only=True)

    type_marker: ClassVar[str] = "?"

    @property
    def is_done(self) -> bool:
        return self.done

    def mark_done(self):
        """Return a copy of this task marked as done."""
        return replace(self, done=True)

    def mark_not_done(self):
        """Return a copy of this task marked as not done."""
        return replace(self, done=False)


@dataclass(frozen=True)
class ToDo(_TaskBase):
    """A task with only a description."""

    type_marker: ClassVar[str] = "T"


@dataclass(frozen=True)
class Deadline(_TaskBase):
    """A task that must be done by a free-form due marker."""

    by: str

    type_marker: ClassVar[str] = "D"


@dataclass(frozen=True)
class Event(_TaskBase):
    """A task spanning a free-form start and end marker."""

    start: str
    end: str

    type_marker: ClassVar[str] = "E"


Task = ToDo | Deadline | Event


def display_string(task: Task) -> str:
    """
    Format a task as a one-line status string.

    Pure function - no I/O.
    """
    status = DONE_MARKER if task.done else " "
    head = f"[{task.type_marker}][{status}] {task.description}"

    match task:
        case ToDo():
            return head
        case Deadline(by=by):
            return f"{head} (by: {by})"
        case Event(start=start, end=end):
            return f"{head} (from: {start} to: {end})"
    raise TypeError(f"Unknown task type: {type(task).__name__}")


def serialize_string(task: Task) -> str:
    """
    Encode a task as a single storage line.

    Layout: ``<type> | <0|1> | <description>[ | <extra fields>]``.
    Backslashes, pipes and line breaks inside free text are backslash-escaped,
    so the record always stays on one physical line.
    """
    match task:
        case ToDo():
            extra: list[str] = []
        case Deadline(by=by):
            extra = [by]
        case Event(start=start, end=end):
            extra = [start, end]
        case _:
            raise TypeError(f"Unknown task type: {type(task).__name__}")

    fields = [task.type_marker, "1" if task.done else "0", task.description, *extra]
    return FIELD_SEPARATOR.join(_escape(f) for f in fields)


def deserialize_string(line: str) -> Task:
    """Decode a storage line produced by serialize_string."""
    fields = _split_fields(line.strip())
    if len(fields) < 3:
        raise ParseError(f"Too few fields in task record: {line!r}")

    marker, flag, *rest = fields
    if flag not in ("0", "1"):
        raise ParseError(f"Bad completion flag {flag!r} in task record: {line!r}")
    done = flag == "1"

    match (marker, rest):
        case ("T", [description]):
            return ToDo(description, done=done)
        case ("D", [description, by]):
            return Deadline(description, by, done=done)
        case ("E", [description, start, end]):
            return Event(description, start, end, done=done)
    raise ParseError(f"Unrecognised task record: {line!r}")


def _escape(value: str) -> str:
    out = []
    for ch in value:
        if ch in ("\\", "|"):
            out.append(f"\\{ch}")
        elif ch == "\n":
            out.append("\\n")
        elif ch == "\r":
            out.append("\\r")
        elif ch in LINE_BREAKS:
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
    return "".join(out)


def _unescape(raw: str) -> str:
    out = []
    chars = iter(raw)
    for ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        escaped = next(chars, "\\")
        if escaped == "n":
            out.append("\n")
        elif escaped == "r":
            out.append("\r")
        elif escaped == "u":
            code = "".join(islice(chars, 4))
            try:
                out.append(chr(int(code, 16)))
            except ValueError:
                raise ParseError(f"Bad escape \\u{code!r} in task record") from None
        else:
            out.append(escaped)
    return "".join(out)


def _split_fields(line: str) -> list[str]:
    """Split on unescaped pipes, then undo the escapes in each field."""
    fields = []
    current: list[str] = []
    chars = iter(line)
    for ch in chars:
        if ch == "\\":
            current.append(ch + next(chars, "\\"))
        elif ch == "|":
            fields.append(_unescape("".join(current).strip()))
            current = []
        else:
            current.append(ch)
    fields.append(_unescape("".join(current).strip()))
    return fields
