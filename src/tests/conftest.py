"""Shared fixtures for rd-utils tests."""

import pytest
from loguru import logger


@pytest.fixture
def captured_logs():
    """Enable library logging and collect formatted messages."""
    messages = []
    logger.enable("rd_utils")
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("rd_utils")


@pytest.fixture
def reset_logging():
    """Drop handlers installed by setup_logging() after the test."""
    yield
    logger.remove()
    logger.disable("rd_utils")
