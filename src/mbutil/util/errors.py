"""Exceptions raised by the file helpers. Each carries the OS errno of the failed call."""

from __future__ import annotations

import os


class FileError(OSError):
    """Base class for file helper failures."""

    @classmethod
    def from_os_error(cls, exc: OSError, path: str | bytes | os.PathLike) -> FileError:
        """Wrap exc, keeping its errno and strerror. Falls back to path when exc has no filename."""
        filename = exc.filename if exc.filename is not None else path
        strerror = exc.strerror if exc.errno is not None else str(exc)
        return cls(exc.errno, strerror, filename)


class FileOpenError(FileError):
    """The path could not be opened with the requested flags."""


class FileIOError(FileError):
    """A read or write on an open file failed."""


class EmptyFileError(FileIOError):
    """A read found no data at all. errno is None."""

    def __init__(self, path: str | bytes | os.PathLike) -> None:
        super().__init__(None, "No data to read", path)
