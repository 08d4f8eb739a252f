"""Adapters - I/O implementations of ports."""

from .file_storage import FileTaskStorage

__all__ = [
    "FileTaskStorage",
]
