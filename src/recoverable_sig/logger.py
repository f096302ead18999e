"""Logging helpers for the package."""

import logging

PACKAGE_LOGGER_NAME = "recoverable_sig"
CONSOLE_HANDLER_NAME = "recoverable_sig.console"
LOG_FORMAT = "%(asctime)s | %(levelname)8s | %(name)s | %(message)s"

# a library never configures the root logger on its own
logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under the package logger."""
    if name != PACKAGE_LOGGER_NAME and not name.startswith(PACKAGE_LOGGER_NAME + "."):
        name = f"{PACKAGE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Meant for scripts and examples; library code only ever calls `get_logger`.
    Calling it again only changes the level.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level

    Returns:
        logging.Logger: The package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    if not any(handler.get_name() == CONSOLE_HANDLER_NAME for handler in package_logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(CONSOLE_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    return package_logger
