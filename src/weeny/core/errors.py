"""Error types raised by the task core."""


class WeenyError(Exception):
    """Base class for all Weeny errors."""

    pass


class InvalidArgumentError(WeenyError, ValueError):
    """Raised when a command is missing a required field or has a malformed one."""

    pass


class ParseError(InvalidArgumentError):
    """Raised when a field cannot be extracted from raw input text."""

    pass


class IndexOutOfRangeError(WeenyError, IndexError):
    """Raised when a task index falls outside the task list."""

    pass


class UnsupportedOperationError(WeenyError):
    """Raised when the command word is not a known command."""

    pass


class StorageError(WeenyError):
    """Raised when the task file cannot be read or written."""

    pass
