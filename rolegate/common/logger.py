"""Logging for the rolegate logger hierarchy.

Every module logs under ``rolegate.*``. On import the library only attaches
a ``NullHandler`` to the ``rolegate`` logger, so nothing is emitted unless
the host application configures logging itself or calls
:func:`configure_logging` with a :class:`~rolegate.common.config.LoggingConfig`.
"""

import logging
import logging.handlers
import os
from typing import List

from .config import LoggingConfig


ROOT_LOGGER_NAME = "rolegate"

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"  # ISO 8601

# Set on handlers installed by configure_logging so a later call replaces them
_OWNED_ATTR = "_rolegate_owned"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def parse_level(level: str) -> int:
    """Convert a level name to its numeric value.

    Raises:
        ValueError: If the name is not a standard logging level
    """
    value = getattr(logging, level.upper(), None)
    if not isinstance(value, int):
        raise ValueError(
            f"Invalid log level: {level}. "
            f"Must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )
    return value


def build_handlers(config: LoggingConfig) -> List[logging.Handler]:
    """Create the handlers a LoggingConfig asks for.

    Args:
        config: Parsed logging configuration

    Returns:
        Handlers sharing one formatter; empty if both outputs are disabled
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = []

    if config.file_logging:
        os.makedirs(config.log_dir, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                os.path.join(config.log_dir, f"{ROOT_LOGGER_NAME}.log"),
                maxBytes=10 * 1024 * 1024,
                backupCount=5,
            )
        )

    if config.console_logging:
        handlers.append(logging.StreamHandler())

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _OWNED_ATTR, True)
    return handlers


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Apply a LoggingConfig to the rolegate logger.

    Handlers from an earlier call are closed and replaced. Handlers added by
    the host application are left alone.

    Args:
        config: Parsed logging configuration

    Returns:
        The configured ``rolegate`` logger

    Raises:
        ValueError: If the configured level is unknown
    """
    level = parse_level(config.level)
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in list(logger.handlers):
        if getattr(handler, _OWNED_ATTR, False):
            logger.removeHandler(handler)
            handler.close()

    logger.setLevel(level)
    for handler in build_handlers(config):
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger by name."""
    return logging.getLogger(name)
