"""Opt-in logging configuration for applications using fileaccess.

The library itself only emits records through module loggers. Call
setup_logging() from an application entry point to see them:
human-readable lines on the console and, when a log file is given,
one JSON object per record in a rotating file.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

from . import conventions


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured file logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a JSON string."""
        entry: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def setup_logging(log_file: Path | None = None, level: int = logging.INFO) -> None:
    """Configure root logging: console always, JSON file when *log_file* is set.

    Handlers already attached by an earlier call are reused, so calling
    this twice does not duplicate output.

    Args:
        log_file: Path for the JSON log file. Parent directories are created.
        level: Logging level for the root logger.
    """
    root = logging.getLogger()
    root.setLevel(level)

    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        root.addHandler(console_handler)

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    target = os.path.abspath(log_file)
    for h in root.handlers:
        if isinstance(h, RotatingFileHandler) and h.baseFilename == target:
            return

    file_handler = RotatingFileHandler(
        str(log_file),
        maxBytes=conventions.LOG_MAX_BYTES,
        backupCount=conventions.LOG_BACKUP_COUNT,
        encoding=conventions.TEXT_ENCODING,
    )
    file_handler.setFormatter(JSONFormatter())
    root.addHandler(file_handler)
