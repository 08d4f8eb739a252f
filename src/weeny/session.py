"""Session wiring shared by the CLI commands.

Resolves the data file from config, makes sure it exists, loads the saved
tasks, and hands back an Interpreter bound to that same file.
"""

import logging

from .adapters.file_storage import FileTaskStorage
from .config import Config, load_config
from .core.task_list import TaskList
from .interpreter import Interpreter
from .ports.task_storage import TaskStorage

logger = logging.getLogger(__name__)


def open_session(config: Config | None = None, storage: TaskStorage | None = None) -> Interpreter:
    """
    Build an interpreter over the saved task list.

    Raises StorageError if the data file cannot be created or read; the
    caller should treat that as fatal.
    """
    config = config or load_config()
    storage = storage or FileTaskStorage()

    path = storage.ensure_file_exists(config.data_path.parent, config.data_path.name)
    tasks = storage.load(path)
    logger.info(f"Opened session with {len(tasks)} tasks from {path}")

    return Interpreter(TaskList(tasks), storage, path, autosave=config.autosave)
