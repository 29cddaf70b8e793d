"""Common utilities for rolegate."""

from .logger import get_logger, configure_logging
from .config import (
    AccessControlConfig,
    LoggingConfig,
    RoleGateConfig,
    load_config,
    load_typed_config,
)

__all__ = [
    "AccessControlConfig",
    "LoggingConfig",
    "RoleGateConfig",
    "configure_logging",
    "get_logger",
    "load_config",
    "load_typed_config",
]
