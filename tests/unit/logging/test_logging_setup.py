"""Tests for logging configuration utilities."""

import json
import logging
import sys
from pathlib import Path

import pytest

from filekit import File, FileKit, Folder, LoggingConfig
from filekit.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    configure_logging_from,
    get_logger,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Remove handlers installed by a test and restore the root level."""
    root = logging.getLogger()
    before, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        # Exact types: pytest's capture handlers subclass StreamHandler.
        if handler not in before and type(handler) in (logging.FileHandler, logging.StreamHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestStructuredJSONFormatter:
    """Tests for JSON log formatting."""

    def test_formats_record_as_json(self):
        """Test records become JSON objects with context."""
        record = logging.LogRecord(
            "filekit.core.service", logging.DEBUG, __file__, 10, "Saved %s", ("x",), None
        )
        record.location = "/tmp/x"

        entry = json.loads(StructuredJSONFormatter().format(record))

        assert entry["level"] == "DEBUG"
        assert entry["message"] == "Saved x"
        assert entry["context"]["logger_name"] == "filekit.core.service"
        assert entry["context"]["location"] == "/tmp/x"
        assert "timestamp" in entry

    def test_includes_exception(self):
        """Test exception details are added to context."""
        try:
            raise OSError("disk full")
        except OSError:
            record = logging.LogRecord(
                "filekit", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )

        entry = json.loads(StructuredJSONFormatter().format(record))

        assert entry["context"]["error_type"] == "OSError"
        assert entry["context"]["error_message"] == "disk full"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_level(self):
        """Test root logger level is applied."""
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_writes_structured_file(self, tmp_path: Path, kit: FileKit):
        """Test service logs reach a JSON log file."""
        log_file = tmp_path / "filekit.jsonl"
        configure_logging(level="DEBUG", filename=str(log_file), structured=True)

        kit.create(Folder(location=tmp_path / "logged"))
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = [json.loads(line) for line in log_file.read_text().splitlines()]
        assert any(
            line["context"]["logger_name"] == "filekit.core.service"
            and "Created folder" in line["message"]
            for line in lines
        )

    def test_configure_from_config(self, tmp_path: Path):
        """Test a LoggingConfig drives configuration."""
        log_file = tmp_path / "plain.log"
        configure_logging_from(
            LoggingConfig(level="debug", filename=str(log_file), format="%(levelname)s|%(message)s")
        )

        FileKit().load(File(name="missing.txt", folder=Folder(location=tmp_path)))
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "DEBUG|failed_to_load" in log_file.read_text()


class TestGetLogger:
    """Tests for get_logger."""

    def test_plain_logger(self):
        """Test a Logger is returned without context."""
        assert isinstance(get_logger("filekit.test"), logging.Logger)

    def test_adapter_with_context(self):
        """Test a LoggerAdapter carries context."""
        adapter = get_logger("filekit.test", operation="save")

        assert isinstance(adapter, logging.LoggerAdapter)
        assert adapter.extra == {"operation": "save"}
