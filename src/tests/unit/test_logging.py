"""Unit tests for core/logging.py"""

import pytest

import rd_utils.config.settings as settings_module
from rd_utils.config.settings import RdUtilsSettings
from rd_utils.core.logging import get_logger, log_operation, setup_logging


def test_setup_logging(reset_logging):
    """Test that setup_logging initializes logging."""
    # Should not raise
    setup_logging()


def test_setup_logging_level_override(reset_logging):
    setup_logging("DEBUG")


def test_get_logger():
    """Test that get_logger returns a logger."""
    test_logger = get_logger(__name__)
    assert test_logger is not None


def test_logger_has_loguru_methods():
    """Test that returned logger has Loguru methods."""
    test_logger = get_logger(__name__)

    assert hasattr(test_logger, "debug")
    assert hasattr(test_logger, "info")
    assert hasattr(test_logger, "warning")
    assert hasattr(test_logger, "error")
    assert hasattr(test_logger, "critical")


def test_logging_to_file(tmp_path, monkeypatch, reset_logging):
    """Test that file logging creates the logs directory and a log file."""
    logs_dir = tmp_path / "logs"
    monkeypatch.setattr(
        settings_module,
        "settings",
        RdUtilsSettings(log_to_file=True, logs_dir=logs_dir),
    )

    setup_logging()
    get_logger(__name__).warning("written to file")

    assert logs_dir.exists()
    assert list(logs_dir.glob("rd-utils_*.log"))


def test_library_logs_disabled_by_default():
    """Importing rd_utils must not emit records of its own."""
    from loguru import logger

    from rd_utils import is_valid_identity_number

    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    try:
        is_valid_identity_number("")
    finally:
        logger.remove(handler_id)

    assert messages == []


class TestLogOperation:
    def test_logs_completion(self, captured_logs):
        with log_operation("Formatting value", kind="rnc"):
            pass

        assert any("starting" in message for message in captured_logs)
        assert any(
            "Formatting value [kind=rnc] completed" in message
            for message in captured_logs
        )

    def test_logs_failure_and_reraises(self, captured_logs):
        with pytest.raises(ValueError):
            with log_operation("Formatting value"):
                raise ValueError("boom")

        assert any(
            "failed" in message and "boom" in message for message in captured_logs
        )
