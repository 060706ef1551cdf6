"""Shared utilities: file creation, first-line reads, whole-file writes."""

from mbutil.util.errors import EmptyFileError, FileError, FileIOError, FileOpenError
from mbutil.util.file import (
    CREATE_MODE,
    NEWLINE,
    create_empty_file,
    file_first_line,
    file_write_data,
)

__all__ = [
    "CREATE_MODE",
    "EmptyFileError",
    "FileError",
    "FileIOError",
    "FileOpenError",
    "NEWLINE",
    "create_empty_file",
    "file_first_line",
    "file_write_data",
]
