"""
Logging configuration module.

slidedeck only configures its own ``slidedeck`` logger: the level
comes from settings, and handlers are added only for LOG_FILE or
LOG_TO_STDOUT. Records still propagate to whatever the host
application configured on the root logger.
"""

import logging
import sys

from slidedeck.core.config import settings

LOGGER_NAMESPACE = "slidedeck"

_configured = False


def setup_logging() -> None:
    """
    Configure the ``slidedeck`` logger from settings.

    Safe to call again: handlers added by a previous call are replaced.
    """
    global _configured

    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper()))

    # Remove handlers from a previous setup
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(settings.LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    if settings.LOG_TO_STDOUT:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if settings.LOG_FILE:
        file_handler = logging.FileHandler(settings.LOG_FILE)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    The ``slidedeck`` logger is configured on first use.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance configured for the module
    """
    if not _configured:
        setup_logging()
    return logging.getLogger(name)
