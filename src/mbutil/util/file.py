"""
File helpers for the patcher: create an empty file, read a file's first line,
replace a file's contents.

All three are synchronous and close every descriptor they open before returning,
including on failure. Failures raise FileOpenError (the open call failed) or
FileIOError (a read/write failed); both keep the errno of the underlying call.
"""

from __future__ import annotations

import errno
import logging
import os
from typing import BinaryIO

from mbutil.util.errors import EmptyFileError, FileIOError, FileOpenError

logger = logging.getLogger(__name__)

# rw for owner, group and other; the process umask still applies
CREATE_MODE = 0o666
NEWLINE = b"\n"


def create_empty_file(path: str | bytes | os.PathLike, mode: int = CREATE_MODE) -> None:
    """
    Make sure a regular file exists at path, creating it with mode (default 0666) if absent.

    An existing file is opened and closed again without truncation, so its contents are kept.
    Raises FileOpenError if the open fails (missing parent directory, permission denied, ...).
    """
    try:
        fd = os.open(path, os.O_RDWR | os.O_CREAT, mode)
    except OSError as e:
        raise FileOpenError.from_os_error(e, path) from e
    os.close(fd)
    logger.debug("Ensured file exists: %s", os.fsdecode(path))


def file_first_line(path: str | bytes | os.PathLike) -> bytes:
    """
    Return the first line of path as raw bytes, without its trailing newline.

    Reads up to and including the first b"\\n" (or to EOF if there is none). Only that one
    newline byte is dropped; a preceding b"\\r" or other whitespace is returned as-is.
    Raises FileOpenError if the file can't be opened, FileIOError if the read fails and
    EmptyFileError (a FileIOError) if the file holds no bytes.
    """
    try:
        f = open(path, "rb")
    except OSError as e:
        raise FileOpenError.from_os_error(e, path) from e
    with f:
        try:
            line = f.readline()
        except OSError as e:
            raise FileIOError.from_os_error(e, path) from e
    if not line:
        raise EmptyFileError(path)
    if line.endswith(NEWLINE):
        line = line[:-1]
    return line


def _write_all(f: BinaryIO, view: memoryview) -> int:
    """Write every byte of view to an unbuffered file, resuming after short writes. Returns bytes written."""
    total = len(view)
    offset = 0
    while offset < total:
        n = f.write(view[offset:])
        if not n:
            raise OSError(errno.EIO, "Write accepted no bytes")
        offset += n
    return offset


def file_write_data(
    path: str | bytes | os.PathLike,
    data: bytes | bytearray | memoryview,
    sync: bool = False,
) -> None:
    """
    Replace the contents of path with exactly data, creating the file if needed.

    The file is truncated on open, so empty data leaves an empty file. There is no
    rollback: if a write fails part way the file stays truncated or partially written.
    With sync=True the data is fsync'ed before the file is closed.
    Raises FileOpenError if the open fails and FileIOError if a write fails.
    """
    view = memoryview(data).cast("B")
    try:
        f = open(path, "wb", buffering=0)
    except OSError as e:
        raise FileOpenError.from_os_error(e, path) from e
    try:
        with f:
            written = _write_all(f, view)
            if sync:
                os.fsync(f.fileno())
    except OSError as e:
        raise FileIOError.from_os_error(e, path) from e
    logger.debug("Wrote %d bytes to %s", written, os.fsdecode(path))
