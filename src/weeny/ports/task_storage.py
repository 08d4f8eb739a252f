"""Task storage interface."""

from pathlib import Path
from typing import Protocol

from weeny.core.tasks import Task


class TaskStorage(Protocol):
    """Interface for persisting the task list between sessions."""

    def ensure_file_exists(self, directory: Path | str, filename: str) -> Path:
        """Create the directory and an empty file if missing. Returns the file path."""
        ...

    def load(self, path: Path) -> list[Task]:
        """Read all tasks. A missing or empty file yields an empty list."""
        ...

    def save(self, path: Path, tasks: list[Task]) -> None:
        """Overwrite the file with the given tasks."""
        ...
