"""fileaccess - small synchronous helpers for reading, writing and appending files."""

from .fileutil import (
    FileAccess,
    ReadErrorKind,
    ReadResult,
    append,
    create,
    open_appender,
    open_for_reading,
    open_writer,
    try_open_for_reading,
    write,
)
from .schema import FileAccessConfig

__all__ = [
    "FileAccess",
    "FileAccessConfig",
    "ReadErrorKind",
    "ReadResult",
    "append",
    "create",
    "open_appender",
    "open_for_reading",
    "open_writer",
    "try_open_for_reading",
    "write",
]
