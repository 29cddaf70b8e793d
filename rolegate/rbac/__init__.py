"""RBAC (Role-Based Access Control) module for rolegate.

This module defines the in-memory permission model: an AccessControl
registry of roles, roles owning resources, and resources carrying
allow-lists of permission strings.
"""

from .errors import (
    RbacError,
    InvalidArgumentError,
    ResourceNotFoundError,
    RoleNotFoundError,
)
from .resource import Resource, ResourceState, PermissionTypes
from .policy import RolePolicy, StandardPolicy, AdministratorPolicy
from .role import Role
from .access_control import AccessControl

__all__ = [
    "AccessControl",
    "AdministratorPolicy",
    "InvalidArgumentError",
    "PermissionTypes",
    "RbacError",
    "Resource",
    "ResourceNotFoundError",
    "ResourceState",
    "Role",
    "RoleNotFoundError",
    "RolePolicy",
    "StandardPolicy",
]
