"""Flat-file task storage adapter."""

import logging
from pathlib import Path

from weeny.core.errors import ParseError, StorageError
from weeny.core.tasks import Task, deserialize_string, serialize_string

logger = logging.getLogger(__name__)


class FileTaskStorage:
    """
    Line-oriented task file storage.

    Implements TaskStorage protocol. One serialized task per line; the whole
    file is rewritten on every save.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def ensure_file_exists(self, directory: Path | str, filename: str) -> Path:
        """Create the directory and an empty file if missing. Returns the file path."""
        path = Path(directory).expanduser() / filename
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch(exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create task file {path}: {e}") from e
        return path

    def load(self, path: Path) -> list[Task]:
        """Read all tasks. A missing or empty file yields an empty list."""
        path = Path(path)
        if not path.exists():
            return []
        try:
            content = path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read task file {path}: {e}") from e

        tasks = []
        # Records never contain a raw "\n"; other line-break characters are data.
        for lineno, line in enumerate(content.split("\n"), start=1):
            if not line.strip():
                continue
            try:
                tasks.append(deserialize_string(line))
            except ParseError as e:
                raise StorageError(f"{path}:{lineno}: {e}") from e

        logger.debug(f"Loaded {len(tasks)} tasks from {path}")
        return tasks

    def save(self, path: Path, tasks: list[Task]) -> None:
        """Overwrite the file with the given tasks."""
        path = Path(path)
        content = "".join(f"{serialize_string(t)}\n" for t in tasks)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding=self.encoding)
        except OSError as e:
            logger.error(f"Failed to save tasks to {path}: {e}")
            raise StorageError(f"Cannot write task file {path}: {e}") from e
        logger.debug(f"Saved {len(tasks)} tasks to {path}")
