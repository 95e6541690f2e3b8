"""Unit tests for logging configuration."""

import json
import logging

import pytest

from fastaf.logging_config import (
    RUN_ID,
    StructuredFormatter,
    log_git_operation,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestStructuredFormatter:
    """Tests for StructuredFormatter."""

    def _record(self, **extra):
        record = logging.LogRecord(
            "fastaf.test", logging.INFO, __file__, 1, "hello %s", ("world",), None
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_formats_as_json(self):
        entry = json.loads(StructuredFormatter().format(self._record()))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "fastaf.test"
        assert entry["message"] == "hello world"
        assert entry["run_id"] == RUN_ID
        assert "timestamp" in entry

    def test_includes_extra_fields(self):
        entry = json.loads(StructuredFormatter().format(self._record(stage="push")))

        assert entry["stage"] == "push"


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_sets_level_and_single_handler(self):
        setup_logging(log_level="DEBUG")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_json_formatter(self):
        setup_logging(use_json=True)

        assert isinstance(logging.getLogger().handlers[0].formatter, StructuredFormatter)

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "fastaf.log"

        setup_logging(log_level="INFO", log_file=str(log_file))
        logging.getLogger("fastaf.test").info("written")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "written" in log_file.read_text()


class TestLogGitOperation:
    """Tests for log_git_operation."""

    def test_success_logged_at_info(self, caplog):
        with caplog.at_level(logging.INFO, logger="fastaf.git_operations"):
            log_git_operation("commit", "/repo", True, 0.1234, details={"commit_hash": "abc"})

        record = caplog.records[-1]
        assert record.levelno == logging.INFO
        assert record.operation == "commit"
        assert record.duration_seconds == 0.123
        assert record.commit_hash == "abc"

    def test_failure_logged_at_warning(self, caplog):
        with caplog.at_level(logging.INFO, logger="fastaf.git_operations"):
            log_git_operation("push", "/repo", False, 1.0, error="rejected")

        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert record.error == "rejected"
