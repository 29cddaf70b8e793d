"""Resource permission sets.

A resource holds the allow-list of permission strings one role has on one
protected entity. An empty allow-list means the resource is *open*: every
permission check against it succeeds. Once any permission is allowed the
resource is *restricted* and only listed permissions pass.
"""

from enum import Enum
from typing import FrozenSet, Sequence, Set, Union

from .errors import InvalidArgumentError, is_valid_identifier, require_identifier

# A single permission string or a sequence of them
PermissionTypes = Union[str, Sequence[str]]


class ResourceState(str, Enum):
    """State of a resource identifier within one role.

    State Machine:

        ABSENT ──allow──► RESTRICTED ──deny (last permission)──► ABSENT
           │                  │
           └──allow_all──► OPEN ◄──allow_all──┘

        OPEN | RESTRICTED ──deny (wholesale)──► ABSENT
    """

    ABSENT = "absent"            # Unknown to the role, checks fail
    OPEN = "open"                # Tracked with no permissions, checks pass
    RESTRICTED = "restricted"    # Only allowed permissions pass


def is_permission_list(permissions: PermissionTypes) -> bool:
    """Check whether a permission argument is a batch rather than a single string."""
    return isinstance(permissions, (list, tuple, set, frozenset))


class Resource:
    """Allow-list of permissions for a single resource identifier."""

    def __init__(self, resource_id: str):
        self._id = require_identifier(
            resource_id, "resource_id", "Cannot create resource with invalid identifier"
        )
        self._allowed: Set[str] = set()

    @property
    def id(self) -> str:
        return self._id

    @property
    def permissions(self) -> FrozenSet[str]:
        """Snapshot of the allowed permissions."""
        return frozenset(self._allowed)

    @property
    def is_open(self) -> bool:
        """True when no permission has been allowed, so every check passes."""
        return not self._allowed

    def size(self) -> int:
        """Number of permissions currently allowed on this resource."""
        return len(self._allowed)

    def __len__(self) -> int:
        return len(self._allowed)

    def __contains__(self, permission: object) -> bool:
        return permission in self._allowed

    def __repr__(self) -> str:
        return f"Resource(id={self._id!r}, allowed={sorted(self._allowed)!r})"

    def allow(self, permissions: PermissionTypes) -> None:
        """Add one or more permissions to the allow-list.

        Args:
            permissions: A permission string or a sequence of them

        Raises:
            InvalidArgumentError: If nothing is supplied or a permission is
                not a non-empty string. Elements of a sequence that precede
                the invalid one remain allowed.
        """
        if permissions is None or (is_permission_list(permissions) and not permissions):
            raise InvalidArgumentError(
                "No allowable permissions were specified", "permissions", permissions
            )

        if is_permission_list(permissions):
            for permission in permissions:
                self._allowed.add(
                    require_identifier(
                        permission, "permissions", "Cannot allow invalid permission"
                    )
                )
        else:
            self._allowed.add(
                require_identifier(
                    permissions, "permissions", "Cannot allow invalid permission"
                )
            )

    def deny(self, permission: str) -> None:
        """Remove a permission from the allow-list if present."""
        require_identifier(permission, "permission", "Cannot deny invalid permission")
        self._allowed.discard(permission)

    def check(self, permission: str) -> bool:
        """Check whether a permission is granted on this resource.

        Args:
            permission: Permission to check

        Returns:
            True if the resource is open or the permission is allowed
        """
        if not is_valid_identifier(permission):
            raise InvalidArgumentError(
                "Cannot check invalid permission", "permission", permission
            )
        return not self._allowed or permission in self._allowed
