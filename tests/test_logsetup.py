"""Tests for opt-in logging setup."""

from __future__ import annotations

import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from fileaccess.logsetup import JSONFormatter, setup_logging


def _console_handlers(root: logging.Logger) -> list[logging.Handler]:
    # pytest attaches its own StreamHandler subclasses to the root logger
    return [h for h in root.handlers if type(h) is logging.StreamHandler]


def _file_handlers(root: logging.Logger) -> list[logging.Handler]:
    return [h for h in root.handlers if isinstance(h, RotatingFileHandler)]


@pytest.fixture
def clean_root():
    """Restore root logger handlers and level after the test."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    root.handlers.clear()
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        if h not in saved_handlers:
            h.close()
    root.handlers.extend(saved_handlers)
    root.setLevel(saved_level)


class TestSetupLogging:
    """Verify setup_logging() attaches the right handlers once."""

    def test_console_only_without_log_file(self, clean_root: logging.Logger) -> None:
        setup_logging()
        assert len(_console_handlers(clean_root)) == 1
        assert _file_handlers(clean_root) == []

    def test_creates_log_file_handler(
        self, clean_root: logging.Logger, tmp_path: Path
    ) -> None:
        log_file = tmp_path / "logs" / "fileaccess.log"
        setup_logging(log_file=log_file)
        file_handlers = _file_handlers(clean_root)
        assert len(file_handlers) == 1
        assert Path(file_handlers[0].baseFilename) == log_file
        assert log_file.parent.is_dir()

    def test_sets_level(self, clean_root: logging.Logger) -> None:
        setup_logging(level=logging.DEBUG)
        assert clean_root.level == logging.DEBUG

    def test_second_call_does_not_duplicate(
        self, clean_root: logging.Logger, tmp_path: Path
    ) -> None:
        log_file = tmp_path / "fileaccess.log"
        setup_logging(log_file=log_file)
        setup_logging(log_file=log_file)
        assert len(_console_handlers(clean_root)) == 1
        assert len(_file_handlers(clean_root)) == 1

    def test_library_records_reach_file_as_json(
        self, clean_root: logging.Logger, tmp_path: Path
    ) -> None:
        from fileaccess import try_open_for_reading

        log_file = tmp_path / "fileaccess.log"
        setup_logging(log_file=log_file, level=logging.DEBUG)
        try_open_for_reading(tmp_path / "missing.txt")
        for h in clean_root.handlers:
            h.flush()
        entries = [json.loads(line) for line in log_file.read_text().splitlines()]
        assert any(
            e["logger"] == "fileaccess.fileutil" and "not_found" in e["message"]
            for e in entries
        )


class TestJSONFormatter:
    def test_produces_valid_json(self) -> None:
        formatter = JSONFormatter()
        record = logging.LogRecord(
            name="test",
            level=logging.INFO,
            pathname="test.py",
            lineno=1,
            msg="hello %s",
            args=("world",),
            exc_info=None,
        )
        data = json.loads(formatter.format(record))
        assert data["level"] == "INFO"
        assert data["logger"] == "test"
        assert data["message"] == "hello world"
        assert "timestamp" in data

    def test_includes_exception(self) -> None:
        formatter = JSONFormatter()
        try:
            raise OSError("disk full")
        except OSError:
            exc_info = sys.exc_info()

        record = logging.LogRecord(
            name="test",
            level=logging.ERROR,
            pathname="test.py",
            lineno=1,
            msg="write failed",
            args=(),
            exc_info=exc_info,
        )
        data = json.loads(formatter.format(record))
        assert "exception" in data
        assert "OSError" in data["exception"]
