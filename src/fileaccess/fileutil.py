"""File utilities for fileaccess.

Provides the FileAccess operations: open a file for reading, open or create
a file for writing or appending, write or append string contents with a
flush before returning, and create/truncate a file.

Handles are binary and buffered. Strings are encoded as UTF-8 on the way out.
Nothing here locks or coordinates access to the same path; concurrent
writers must serialize themselves.
"""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass
from io import BufferedReader, BufferedWriter
from pathlib import Path

from .conventions import TEXT_ENCODING
from .schema import FileAccessConfig

logger = logging.getLogger(__name__)

StrPath = str | os.PathLike[str]


class ReadErrorKind(enum.Enum):
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    IS_A_DIRECTORY = "is_a_directory"
    OTHER = "other"


@dataclass
class ReadResult:
    path: str
    handle: BufferedReader | None = None
    error: ReadErrorKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.handle is not None


def _classify(exc: OSError) -> ReadErrorKind:
    if isinstance(exc, FileNotFoundError):
        return ReadErrorKind.NOT_FOUND
    if isinstance(exc, PermissionError):
        return ReadErrorKind.PERMISSION_DENIED
    if isinstance(exc, IsADirectoryError):
        return ReadErrorKind.IS_A_DIRECTORY
    return ReadErrorKind.OTHER


class FileAccess:
    """Synchronous, best-effort access to single named files.

    Every handle an instance hands out is buffered with
    ``config.buffer_size`` bytes. Handles belong to the caller, who should
    close them (they are context managers).
    """

    def __init__(self, config: FileAccessConfig | None = None) -> None:
        self.config = config if config is not None else FileAccessConfig()

    @classmethod
    def from_config(cls, path: Path | None = None) -> FileAccess:
        """Build an instance from the config file (defaults if absent)."""
        from .config import load_config

        return cls(load_config(path))

    # -- reading -----------------------------------------------------------

    def try_open_for_reading(self, path: StrPath) -> ReadResult:
        """Open *path* for buffered sequential reading from offset 0.

        Never raises for OS failures. The result carries either the handle
        or the kind of failure plus the OS message.
        """
        name = os.fspath(path)
        try:
            handle = open(name, "rb", buffering=self.config.buffer_size)  # noqa: SIM115
        except OSError as exc:
            kind = _classify(exc)
            logger.debug("Cannot open %s for reading (%s): %s", name, kind.value, exc)
            return ReadResult(path=name, error=kind, message=str(exc))
        return ReadResult(path=name, handle=handle)

    def open_for_reading(self, path: StrPath) -> BufferedReader | None:
        """Return a read handle for *path*, or None if it cannot be opened.

        Missing file, permission denied and directory all look the same
        here. Use try_open_for_reading() to tell them apart.
        """
        return self.try_open_for_reading(path).handle

    # -- writing -----------------------------------------------------------

    def open_writer(self, path: StrPath, truncate: bool) -> BufferedWriter:
        """Open *path* for writing, creating it if it does not exist.

        With *truncate* the existing content is discarded on open. Without
        it the file is opened in place: writes overwrite from offset 0 and
        bytes past the written range survive.

        Raises:
            OSError: the file could not be created or opened.
        """
        flags = os.O_WRONLY | os.O_CREAT | getattr(os, "O_BINARY", 0)
        if truncate:
            flags |= os.O_TRUNC
        fd = os.open(os.fspath(path), flags, 0o666)
        try:
            return os.fdopen(fd, "wb", buffering=self.config.buffer_size)
        except BaseException:
            os.close(fd)
            raise

    def open_appender(self, path: StrPath) -> BufferedWriter:
        """Open *path* for appending, creating it if it does not exist.

        Every write lands at the current end of file, whatever the caller
        seeks to.

        Raises:
            OSError: the file could not be created or opened.
        """
        return open(os.fspath(path), "ab", buffering=self.config.buffer_size)  # noqa: SIM115

    def write(self, path: StrPath, truncate: bool, contents: str) -> None:
        """Write *contents* to *path* and flush before returning.

        No newline is added. Truncation follows open_writer(). A failure
        after some bytes reached the OS is raised as-is; nothing is rolled
        back. Contents that cannot be encoded leave the file untouched.
        """
        data = contents.encode(TEXT_ENCODING)
        with self.open_writer(path, truncate) as f:
            f.write(data)
            f.flush()

    def append(self, path: StrPath, contents: str) -> None:
        """Append *contents* plus one line terminator to *path*, then flush.

        Each call is its own open/write/flush/close cycle. For many lines,
        write them through open_appender() instead.
        """
        data = (contents + self.config.line_terminator).encode(TEXT_ENCODING)
        with self.open_appender(path) as f:
            f.write(data)
            f.flush()

    def create(self, path: StrPath, truncate: bool) -> None:
        """Create an empty file at *path*.

        An existing file is left untouched unless *truncate* is set, in
        which case it is cut to zero length.
        """
        name = os.fspath(path)
        if not truncate and os.path.exists(name):
            logger.debug("Not creating %s: already exists", name)
            return
        with open(name, "wb"):
            pass


_default = FileAccess()


def try_open_for_reading(path: StrPath) -> ReadResult:
    """Open *path* for reading with the default FileAccess, keeping the cause."""
    return _default.try_open_for_reading(path)


def open_for_reading(path: StrPath) -> BufferedReader | None:
    """Open *path* for reading with the default FileAccess."""
    return _default.open_for_reading(path)


def open_writer(path: StrPath, truncate: bool) -> BufferedWriter:
    """Open *path* for writing with the default FileAccess."""
    return _default.open_writer(path, truncate)


def open_appender(path: StrPath) -> BufferedWriter:
    """Open *path* for appending with the default FileAccess."""
    return _default.open_appender(path)


def write(path: StrPath, truncate: bool, contents: str) -> None:
    """Write *contents* to *path* with the default FileAccess."""
    _default.write(path, truncate, contents)


def append(path: StrPath, contents: str) -> None:
    """Append one line to *path* with the default FileAccess."""
    _default.append(path, contents)


def create(path: StrPath, truncate: bool) -> None:
    """Create or truncate *path* with the default FileAccess."""
    _default.create(path, truncate)
