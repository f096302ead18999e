"""Unit tests for logging helpers."""
import logging

import pytest

from recoverable_sig.logger import CONSOLE_HANDLER_NAME, PACKAGE_LOGGER_NAME, configure_logging, get_logger


@pytest.fixture
def package_logger():
    """Restore the package logger after the test."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


def test_get_logger_namespacing():
    """Test that loggers live under the package logger."""
    assert get_logger("recoverable_sig.recovery").name == "recoverable_sig.recovery"
    assert get_logger("recovery").name == "recoverable_sig.recovery"
    assert get_logger(PACKAGE_LOGGER_NAME).name == PACKAGE_LOGGER_NAME


def test_package_logger_has_null_handler():
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    assert any(isinstance(handler, logging.NullHandler) for handler in logger.handlers)


def test_configure_logging_is_idempotent(package_logger):
    """Test that repeated configuration adds a single console handler."""
    configure_logging("DEBUG")
    configure_logging(logging.INFO)

    console_handlers = [h for h in package_logger.handlers if h.get_name() == CONSOLE_HANDLER_NAME]
    assert len(console_handlers) == 1
    assert package_logger.level == logging.INFO
