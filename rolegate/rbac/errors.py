"""Exceptions raised by the RBAC model."""

from typing import Any


class RbacError(Exception):
    """Base class for all rolegate access-control errors."""


class InvalidArgumentError(RbacError, ValueError):
    """Raised when an identifier or permission argument is malformed."""

    def __init__(self, message: str, argument: str, value: Any = None):
        super().__init__(message)
        self.argument = argument
        self.value = value


class ResourceNotFoundError(RbacError, LookupError):
    """Raised when denying permissions on a resource the role does not track."""

    def __init__(self, role_id: str, resource_id: str):
        super().__init__(
            f'Cannot deny permission on missing resource "{resource_id}" '
            f'for role "{role_id}"'
        )
        self.role_id = role_id
        self.resource_id = resource_id


class RoleNotFoundError(RbacError, LookupError):
    """Raised by strict access control when a role is not registered."""

    def __init__(self, role_id: str):
        super().__init__(f'Unknown role "{role_id}"')
        self.role_id = role_id


def is_valid_identifier(value: Any) -> bool:
    """Check that a value is a non-empty string."""
    return isinstance(value, str) and value != ""


def require_identifier(value: Any, argument: str, message: str) -> str:
    """Return ``value`` unchanged or raise InvalidArgumentError."""
    if not is_valid_identifier(value):
        raise InvalidArgumentError(message, argument, value)
    return value
