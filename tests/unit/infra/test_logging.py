"""Unit tests for structured logging module."""

import json
import logging
import os
from unittest.mock import MagicMock, patch

from scatterspec.infra.logging import StructuredFormatter, StructuredLogger, get_logger


class TestStructuredLogger:
    """Tests for StructuredLogger class."""

    def test_log_methods_exist(self) -> None:
        """Test that all log methods forward to the underlying logger."""
        mock_logger = MagicMock(spec=logging.Logger)
        logger = StructuredLogger(mock_logger)

        logger.debug("debug message")
        logger.info("info message")
        logger.warning("warning message")
        logger.error("error message")

        assert mock_logger.log.call_count == 4

    def test_extra_fields_passed(self) -> None:
        """Test that keyword arguments become extra fields."""
        mock_logger = MagicMock(spec=logging.Logger)
        logger = StructuredLogger(mock_logger)

        logger.debug("Built XY spec", rows=3, layout_mode="single")

        call_args = mock_logger.log.call_args
        assert call_args[0] == (logging.DEBUG, "Built XY spec")
        assert call_args[1]["extra"] == {"rows": 3, "layout_mode": "single"}


class TestGetLogger:
    """Tests for get_logger function."""

    def test_returns_structured_logger(self) -> None:
        """Test that get_logger returns a StructuredLogger instance."""
        logger = get_logger("test.module")
        assert isinstance(logger, StructuredLogger)
        assert logger.name == "test.module"

    @patch.dict(os.environ, {"SCATTERSPEC_LOG_LEVEL": "DEBUG"})
    def test_log_level_from_env(self) -> None:
        """Test that log level is set from environment variable."""
        logging.getLogger("test.env.logger").handlers.clear()

        get_logger("test.env.logger")

        assert logging.getLogger("test.env.logger").level == logging.DEBUG

    @patch.dict(os.environ, {}, clear=True)
    def test_default_log_level(self) -> None:
        """Test that default log level is INFO when env var not set."""
        logging.getLogger("test.default.logger").handlers.clear()

        get_logger("test.default.logger")

        assert logging.getLogger("test.default.logger").level == logging.INFO

    @patch.dict(os.environ, {"SCATTERSPEC_LOG_LEVEL": "NOPE"})
    def test_unknown_level_falls_back(self) -> None:
        """Test that an unknown level name falls back to INFO."""
        logging.getLogger("test.bad.logger").handlers.clear()

        get_logger("test.bad.logger")

        assert logging.getLogger("test.bad.logger").level == logging.INFO

    def test_handler_added_once(self) -> None:
        """Test that repeated calls do not stack handlers."""
        logging.getLogger("test.once.logger").handlers.clear()

        get_logger("test.once.logger")
        get_logger("test.once.logger")

        assert len(logging.getLogger("test.once.logger").handlers) == 1


class TestStructuredFormatter:
    """Tests for StructuredFormatter class."""

    def test_json_output(self) -> None:
        """Test that records are rendered as JSON with extra fields."""
        record = logging.LogRecord(
            name="scatterspec.test",
            level=logging.WARNING,
            pathname=__file__,
            lineno=1,
            msg="Rejected %s",
            args=("params",),
            exc_info=None,
        )
        record.fields = ["columns"]

        entry = json.loads(StructuredFormatter().format(record))

        assert entry["level"] == "WARNING"
        assert entry["logger"] == "scatterspec.test"
        assert entry["message"] == "Rejected params"
        assert entry["fields"] == ["columns"]
        assert "ts" in entry
        assert "lineno" not in entry
