"""
Tests for logging_manager module.

Tests the SonderLogger file output, the safe_logger function and the
NullLogger class that provide null-safe logging throughout the codebase.
"""
import click
import pytest
from unittest.mock import MagicMock

from sonder.core.exceptions import ValidationError
from sonder.core.logging_manager import (
    NullLogger,
    SonderLogger,
    handle_cli_error,
    safe_logger,
)


class TestNullLogger:
    """Tests for NullLogger class."""

    def test_null_logger_methods_no_op(self):
        """NullLogger methods should do nothing."""
        logger = NullLogger()
        logger.log_operation("op", {"key": "value"})
        logger.log_error(ValueError("boom"), {"context": "test"})
        logger.log_debug("debug")
        logger.log_info("info")
        logger.log_warning("warning")

    def test_null_logger_log_cli_error_returns_formatted(self):
        """NullLogger.log_cli_error should return formatted error string."""
        result = NullLogger().log_cli_error(ValueError("test error"))
        assert "ValueError" in result
        assert "test error" in result


class TestSafeLogger:
    """Tests for safe_logger function."""

    def test_returns_logger_when_provided(self):
        mock_logger = MagicMock(spec=SonderLogger)
        assert safe_logger(mock_logger) is mock_logger

    def test_returns_null_logger_when_none(self):
        assert isinstance(safe_logger(None), NullLogger)

    def test_null_logger_is_singleton(self):
        assert safe_logger(None) is safe_logger(None)


class TestSonderLogger:
    """Tests for SonderLogger file output."""

    @pytest.fixture
    def logger(self, log_dir):
        logger = SonderLogger(log_dir, "test")
        yield logger
        logger.close()

    def test_operation_written_to_component_log(self, logger, log_dir):
        logger.log_operation("load_snapshot", {"logs": 3})
        for handler in logger.main_logger.handlers:
            handler.flush()

        content = (log_dir / "test.log").read_text(encoding="utf-8")
        assert "OPERATION - load_snapshot" in content
        assert '"logs": 3' in content

    def test_errors_written_to_error_log(self, logger, log_dir):
        logger.log_error(ValidationError("bad trip"), {"trip": "t-1"})
        for handler in logger.error_logger.handlers:
            handler.flush()

        content = (log_dir / "errors.log").read_text(encoding="utf-8")
        assert "ValidationError: bad trip" in content
        assert "trip=t-1" in content

    def test_debug_info_and_warning_written(self, logger, log_dir):
        logger.log_debug("Sections kept as-is", {"sections": ["users"]})
        logger.log_info("Logs with a missing trip")
        logger.log_warning("Stops left out", {"logs": ["b"]})

        content = (log_dir / "test.log").read_text(encoding="utf-8")
        assert 'DEBUG - Sections kept as-is: {"sections": ["users"]}' in content
        assert "INFO - Logs with a missing trip" in content
        assert 'WARNING - Stops left out: {"logs": ["b"]}' in content

    def test_cli_error_message(self, logger):
        message = logger.log_cli_error(ValidationError("bad trip"))
        assert message == "❌ ValidationError: bad trip"


class TestHandleCliError:
    """Tests for handle_cli_error function."""

    def test_exits_with_code_and_echoes(self, capsys):
        ctx = click.Context(click.Command("demo"), obj={"logger": None, "verbose": False})

        with pytest.raises(SystemExit) as exc_info:
            handle_cli_error(ctx, ValidationError("nope"), "demo", exit_code=3)

        assert exc_info.value.code == 3
        assert "ValidationError: nope" in capsys.readouterr().err

    def test_logs_with_context(self):
        mock_logger = MagicMock(spec=SonderLogger)
        mock_logger.log_cli_error.return_value = "❌ ValidationError: nope"
        ctx = click.Context(click.Command("demo"), obj={"logger": mock_logger})

        with pytest.raises(SystemExit):
            handle_cli_error(ctx, ValidationError("nope"), "demo", {"trip": "t"})

        args, kwargs = mock_logger.log_cli_error.call_args
        assert args[1] == {"operation": "demo", "trip": "t"}
        assert kwargs["show_traceback"] is False
