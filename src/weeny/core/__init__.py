"""Functional core - pure business logic with no I/O."""

from .errors import (
    WeenyError,
    InvalidArgumentError,
    ParseError,
    IndexOutOfRangeError,
    UnsupportedOperationError,
    StorageError,
)
from .tasks import Task, ToDo, Deadline, Event, display_string, serialize_string, deserialize_string
from .task_list import TaskList
from .parser import DeadlineFields, EventFields

__all__ = [
    # Errors
    "WeenyError",
    "InvalidArgumentError",
    "ParseError",
    "IndexOutOfRangeError",
    "UnsupportedOperationError",
    "StorageError",
    # Tasks
    "Task",
    "ToDo",
    "Deadline",
    "Event",
    "display_string",
    "serialize_string",
    "deserialize_string",
    # Task list
    "TaskList",
    # Parser
    "DeadlineFields",
    "EventFields",
]
