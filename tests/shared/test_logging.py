"""Tests for sceneparse structured logging helpers."""

from __future__ import annotations

import json
import logging

import pytest
from rich.logging import RichHandler

from sceneparse.config.models import LoggingSettings, Settings
from sceneparse.shared.constants import Logging
from sceneparse.shared.errors import create_parsing_error
from sceneparse.shared.logging import (
    StructuredFormatter,
    configure_logging,
    log_operation_error,
    log_operation_start,
    log_operation_success,
    setup_structured_logger,
)


@pytest.fixture
def scratch_logger():
    """Logger used by setup tests, emptied afterwards."""
    name = "sceneparse_tests.setup"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.propagate = True


def _record(message: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord("sceneparse.test", logging.INFO, __file__, 1, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    """Test cases for the JSON formatter."""

    def test_basic_fields(self):
        entry = json.loads(StructuredFormatter().format(_record()))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "sceneparse.test"
        assert entry["message"] == "hello"
        assert "timestamp" in entry

    def test_extra_fields(self):
        record = _record(operation="parse", error_code="RELEASE_PARSE_FAILED", context={"kind": "tv"})
        entry = json.loads(StructuredFormatter().format(record))

        assert entry["operation"] == "parse"
        assert entry["error_code"] == "RELEASE_PARSE_FAILED"
        assert entry["context"] == {"kind": "tv"}
        assert "duration_ms" not in entry

    def test_non_ascii_message(self):
        line = StructuredFormatter().format(_record("日本語"))
        assert "日本語" in line


class TestSetupStructuredLogger:
    """Test cases for handler setup."""

    def test_json_console_and_file(self, scratch_logger, tmp_path):
        log_file = tmp_path / "sceneparse.log"
        logger = setup_structured_logger(
            scratch_logger,
            level="debug",
            log_file=str(log_file),
            use_rich_console=False,
        )
        logger.debug("written")
        for handler in logger.handlers:
            handler.flush()

        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert len(logger.handlers) == 2
        assert json.loads(log_file.read_text(encoding="utf-8").splitlines()[0])["message"] == "written"

    def test_rich_console(self, scratch_logger):
        logger = setup_structured_logger(scratch_logger)
        assert isinstance(logger.handlers[0], RichHandler)

    def test_reconfiguring_does_not_duplicate_handlers(self, scratch_logger):
        setup_structured_logger(scratch_logger, use_rich_console=False)
        logger = setup_structured_logger(scratch_logger, use_rich_console=False)
        assert len(logger.handlers) == 1

    def test_configure_logging_from_settings(self, package_logger):
        logger = configure_logging(Settings(logging=LoggingSettings(level="warning", use_rich_console=False)))

        assert logger is package_logger
        assert logger.name == Logging.ROOT_LOGGER
        assert logger.level == logging.WARNING
        assert not isinstance(logger.handlers[0], RichHandler)

    def test_configure_logging_from_section(self, package_logger):
        logger = configure_logging(LoggingSettings(level="ERROR"))

        assert logger.level == logging.ERROR
        assert isinstance(logger.handlers[0], RichHandler)


class TestOperationHelpers:
    """Test cases for log_operation_* helpers."""

    def test_log_operation_error(self, caplog):
        logger = logging.getLogger("sceneparse_tests.helpers")
        error = create_parsing_error(
            "Failed to parse",
            release="Show.S01E01",
            operation="parse",
            original_error=RuntimeError("boom"),
        )

        with caplog.at_level(logging.ERROR, logger="sceneparse_tests.helpers"):
            log_operation_error(logger, error, additional_context={"kind": "tv"})

        record = caplog.records[-1]
        assert record.getMessage() == "Failed to parse"
        assert record.error_code == "RELEASE_PARSE_FAILED"
        assert record.operation == "parse"
        assert record.context["release"] == "Show.S01E01"
        assert record.context["kind"] == "tv"
        assert record.exc_info is not None

    def test_log_operation_start_and_success(self, caplog):
        logger = logging.getLogger("sceneparse_tests.helpers")

        with caplog.at_level(logging.DEBUG, logger="sceneparse_tests.helpers"):
            log_operation_start(logger, "parse_path", {"path": "a/b.mkv"})
            log_operation_success(logger, "parse_path", 1.5, result_info={"season": 1})

        start, success = caplog.records[-2:]
        assert start.getMessage() == "Starting operation 'parse_path'"
        assert start.context == {"path": "a/b.mkv"}
        assert success.duration_ms == 1.5
        assert success.result_info == {"season": 1}
