"""rolegate: in-memory role-based access control."""

from .common import (
    AccessControlConfig,
    LoggingConfig,
    RoleGateConfig,
    configure_logging,
    get_logger,
    load_config,
    load_typed_config,
)
from .rbac import (
    AccessControl,
    InvalidArgumentError,
    RbacError,
    Resource,
    ResourceNotFoundError,
    ResourceState,
    Role,
    RoleNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    "AccessControl",
    "AccessControlConfig",
    "InvalidArgumentError",
    "LoggingConfig",
    "RbacError",
    "Resource",
    "ResourceNotFoundError",
    "ResourceState",
    "Role",
    "RoleGateConfig",
    "RoleNotFoundError",
    "configure_logging",
    "get_logger",
    "load_config",
    "load_typed_config",
]
