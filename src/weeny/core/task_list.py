"""Ordered, index-addressed collection of tasks for one session."""

from collections.abc import Iterable, Iterator

from .errors import IndexOutOfRangeError
from .tasks import Task


class TaskList:
    """
    Mutable task list.

    Indices are 0-based here; the interpreter converts from the 1-based
    numbering users see. Every index operation validates its index before
    touching the list, so a failed call never mutates anything.
    """

    def __init__(self, tasks: Iterable[Task] = ()):
        self._tasks: list[Task] = list(tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def size(self) -> int:
        return len(self._tasks)

    def tasks(self) -> list[Task]:
        """Snapshot of the tasks in display order."""
        return list(self._tasks)

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def get(self, index: int) -> Task:
        self._check_index(index, "get")
        return self._tasks[index]

    def delete(self, index: int) -> Task:
        """Remove and return the task at index."""
        self._check_index(index, "delete")
        return self._tasks.pop(index)

    def mark_done(self, index: int) -> Task:
        self._check_index(index, "mark")
        self._tasks[index] = self._tasks[index].mark_done()
        return self._tasks[index]

    def mark_not_done(self, index: int) -> Task:
        self._check_index(index, "unmark")
        self._tasks[index] = self._tasks[index].mark_not_done()
        return self._tasks[index]

    def search(self, substring: str) -> list[Task]:
        """Tasks whose description contains substring (case-sensitive), in order."""
        return [t for t in self._tasks if substring in t.description]

    def _check_index(self, index: int, action: str) -> None:
        # Negative indices would silently wrap on a plain list.
        if index < 0 or index >= len(self._tasks):
            raise IndexOutOfRangeError(f"Invalid index for {action} action.")
