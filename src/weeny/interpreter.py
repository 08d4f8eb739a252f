"""Command interpreter - one input line in, one response string out.

The interpreter owns the session's TaskList. It dispatches on the command
word, lets the parser and task list validate before anything is mutated,
and turns user errors into an error response instead of raising.
"""

import logging
from enum import Enum, auto
from pathlib import Path

from .core import parser, responses
from .core.errors import (
    IndexOutOfRangeError,
    InvalidArgumentError,
    StorageError,
    UnsupportedOperationError,
)
from .core.task_list import TaskList
from .core.tasks import Deadline, Event, ToDo
from .ports.task_storage import TaskStorage

logger = logging.getLogger(__name__)

MUTATING_COMMANDS = frozenset({"mark", "unmark", "todo", "event", "deadline", "delete"})


class SessionState(Enum):
    """Lifecycle of an interpreter session."""

    RUNNING = auto()
    TERMINATED = auto()


class Interpreter:
    """Processes task commands against one task list."""

    def __init__(
        self,
        task_list: TaskList,
        storage: TaskStorage,
        data_path: Path,
        autosave: bool = True,
    ):
        self.task_list = task_list
        self.storage = storage
        self.data_path = Path(data_path)
        self.autosave = autosave
        self.state = SessionState.RUNNING

    @property
    def is_running(self) -> bool:
        return self.state is SessionState.RUNNING

    def process(self, line: str) -> str:
        """Handle one line of user input and return the response text."""
        if not self.is_running:
            return responses.error("This session has ended.")

        line = line.strip()
        command = parser.first_word(line)
        logger.debug(f"Dispatching command {command!r}")

        try:
            response = self._dispatch(command, line)
        except (InvalidArgumentError, IndexOutOfRangeError, UnsupportedOperationError) as e:
            logger.info(f"Rejected {command!r}: {type(e).__name__}: {e}")
            return responses.error(str(e))

        if self.autosave and command in MUTATING_COMMANDS:
            response = self._with_save(response)
        return response

    def save(self) -> None:
        """Write the task list to the session's data file."""
        self.storage.save(self.data_path, self.task_list.tasks())

    def _dispatch(self, command: str, line: str) -> str:
        match command:
            case "list":
                return responses.task_list(self.task_list.tasks())
            case "bye":
                self.state = SessionState.TERMINATED
                return self._with_save(responses.goodbye())
            case "mark":
                task = self.task_list.mark_done(parser.trailing_integer(line) - 1)
                return responses.marked(task)
            case "unmark":
                task = self.task_list.mark_not_done(parser.trailing_integer(line) - 1)
                return responses.unmarked(task)
            case "todo":
                return self._add(ToDo(parser.parse_todo(line)))
            case "event":
                fields = parser.parse_event(line)
                return self._add(Event(fields.description, fields.start, fields.end))
            case "deadline":
                fields = parser.parse_deadline(line)
                return self._add(Deadline(fields.description, fields.by))
            case "delete":
                task = self.task_list.delete(parser.trailing_integer(line) - 1)
                return responses.deleted(task, self.task_list.size())
            case "find":
                return responses.search_results(self.task_list.search(parser.search_term(line)))
            case _:
                raise UnsupportedOperationError("Unknown command")

    def _add(self, task) -> str:
        self.task_list.add(task)
        return responses.added(task, self.task_list.size())

    def _with_save(self, response: str) -> str:
        """Save, appending a warning to the response if the write fails."""
        try:
            self.save()
        except StorageError as e:
            logger.warning(f"Save failed, keeping tasks in memory: {e}")
            return f"{response}\n{responses.save_warning(str(e))}"
        return response
