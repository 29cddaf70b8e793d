"""Top-level role registry and permission checks."""

from typing import Dict, Iterator, List, Optional

from ..common.config import AccessControlConfig, RoleGateConfig
from ..common.logger import get_logger
from .errors import RoleNotFoundError, require_identifier
from .resource import PermissionTypes
from .role import Role

logger = get_logger("rolegate.rbac.access_control")


class AccessControl:
    """Registry of roles, keyed by identifier.

    Roles are kept in insertion order. The instance is owned by the caller;
    nothing is shared between instances and no locking is performed.
    """

    def __init__(self, config: Optional[AccessControlConfig] = None):
        self.config = config or AccessControlConfig()
        self._roles: Dict[str, Role] = {}

    @classmethod
    def from_config(cls, config: RoleGateConfig) -> "AccessControl":
        """Build an AccessControl from the top-level configuration."""
        return cls(config.access_control)

    def __len__(self) -> int:
        return len(self._roles)

    def __contains__(self, role_id: object) -> bool:
        return role_id in self._roles

    def __iter__(self) -> Iterator[Role]:
        return iter(list(self._roles.values()))

    def count(self) -> int:
        """Number of roles currently registered."""
        return len(self._roles)

    def list_roles(self) -> List[str]:
        """List registered role identifiers in creation order."""
        return list(self._roles.keys())

    def create_role(self, role_id: str) -> Role:
        """Create a role, or return the existing one with the same identifier.

        Args:
            role_id: Identifier of the role

        Returns:
            The role associated with the identifier

        Raises:
            InvalidArgumentError: If the identifier is not a non-empty string
        """
        require_identifier(role_id, "role_id", "Cannot create role with invalid name")

        role = self._roles.get(role_id)
        if role is None:
            role = Role(role_id)
            self._roles[role_id] = role
            logger.debug(f"Registered role: {role_id}")
        return role

    def create_admin_role(self, role_id: str) -> Role:
        """Create an administrator role, or return the existing one.

        An existing standard role with the same identifier is returned
        unchanged; administrator status is never granted after construction.
        """
        require_identifier(role_id, "role_id", "Cannot create role with invalid name")

        role = self._roles.get(role_id)
        if role is None:
            role = Role.create_admin(role_id)
            self._roles[role_id] = role
            logger.debug(f"Registered administrator role: {role_id}")
        elif not role.is_admin:
            logger.warning(
                f"Role '{role_id}' already exists and is not an administrator"
            )
        return role

    def get(self, role_id: str) -> Optional[Role]:
        """Get a role by identifier.

        Returns:
            The role, or None if not registered
        """
        return self._roles.get(role_id)

    def delete(self, role_id: str) -> None:
        """Remove a role. Unknown identifiers are ignored."""
        if self._roles.pop(role_id, None) is not None:
            logger.debug(f"Deleted role: {role_id}")

    def clear(self) -> None:
        """Remove all roles."""
        self._roles.clear()
        logger.debug("Cleared all roles")

    def check_permission(
        self, role_id: str, resource_id: str, permission: PermissionTypes
    ) -> bool:
        """Check whether a role allows permissions on a resource.

        Unknown roles are denied. With ``strict_roles`` configured they raise
        RoleNotFoundError instead.

        Args:
            role_id: Identifier of the role
            resource_id: Identifier of the resource
            permission: A permission string or a sequence of them

        Returns:
            True if the role grants every requested permission
        """
        role = self.get(role_id)
        if role is None:
            if self.config.strict_roles:
                raise RoleNotFoundError(role_id)
            logger.debug(f"Permission check against unknown role '{role_id}' denied")
            return False
        return role.check(resource_id, permission)
