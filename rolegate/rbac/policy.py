"""Permission evaluation strategies for roles.

Every role delegates its allow/deny/check operations to one of two
policies sharing the :class:`RolePolicy` interface:

- :class:`StandardPolicy` evaluates the role's own resource mapping.
- :class:`AdministratorPolicy` grants everything and never touches the
  mapping. This is the only place the unconditional-grant path lives.

Identifier validation happens in :class:`~rolegate.rbac.role.Role` before a
policy is invoked, so both policies reject the same malformed identifiers.
Permission strings are only validated by :class:`StandardPolicy`.
"""

from abc import ABC, abstractmethod
from typing import MutableMapping, Optional

from ..common.logger import get_logger
from .errors import ResourceNotFoundError, require_identifier
from .resource import PermissionTypes, Resource, ResourceState, is_permission_list

logger = get_logger("rolegate.rbac.policy")

ResourceMap = MutableMapping[str, Resource]


class RolePolicy(ABC):
    """Abstract strategy deciding how a role evaluates permissions."""

    @property
    @abstractmethod
    def is_admin(self) -> bool:
        """Whether this policy grants every permission unconditionally."""
        pass

    @abstractmethod
    def allow(
        self, role_id: str, resources: ResourceMap, resource_id: str, permissions: PermissionTypes
    ) -> None:
        """Grant permissions on a resource.

        Args:
            role_id: Identifier of the owning role, used for logging
            resources: The role's resource mapping
            resource_id: Identifier of the resource
            permissions: A permission string or a sequence of them
        """
        pass

    @abstractmethod
    def allow_all(self, role_id: str, resources: ResourceMap, resource_id: str) -> None:
        """Grant unrestricted access to a single resource.

        Args:
            role_id: Identifier of the owning role, used for logging
            resources: The role's resource mapping
            resource_id: Identifier of the resource
        """
        pass

    @abstractmethod
    def deny(
        self,
        role_id: str,
        resources: ResourceMap,
        resource_id: str,
        permissions: Optional[PermissionTypes],
    ) -> None:
        """Remove permissions, or the whole resource when none are given.

        Args:
            role_id: Identifier of the owning role
            resources: The role's resource mapping
            resource_id: Identifier of the resource
            permissions: Permissions to deny, or None for the whole resource

        Raises:
            ResourceNotFoundError: If the resource is not tracked
        """
        pass

    @abstractmethod
    def check(self, resources: ResourceMap, resource_id: str, permissions: PermissionTypes) -> bool:
        """Check permissions on a resource.

        Args:
            resources: The role's resource mapping
            resource_id: Identifier of the resource
            permissions: A permission string or a sequence of them

        Returns:
            True if every requested permission is granted
        """
        pass

    @abstractmethod
    def resource_state(self, resources: ResourceMap, resource_id: str) -> ResourceState:
        """Report the state of a resource identifier.

        Args:
            resources: The role's resource mapping
            resource_id: Identifier of the resource

        Returns:
            ResourceState for the identifier
        """
        pass


class StandardPolicy(RolePolicy):
    """Evaluates permissions against the role's resource mapping.

    Open resources (tracked with an empty allow-list) act as administrator
    grants over that single resource:

    - ``allow`` on an open resource is ignored, so a blanket grant can never
      be narrowed by accident. Use ``allow_all`` / wholesale ``deny`` to
      change it.
    - ``deny`` of specific permissions on an open resource is ignored, there
      is nothing to remove. Only wholesale deny applies.

    A restricted resource whose last permission is denied is dropped from
    the mapping rather than left open.
    """

    @property
    def is_admin(self) -> bool:
        return False

    def allow(
        self, role_id: str, resources: ResourceMap, resource_id: str, permissions: PermissionTypes
    ) -> None:
        if not is_permission_list(permissions):
            require_identifier(permissions, "permissions", "Cannot allow invalid permission")

        resource = resources.get(resource_id)
        if resource is None:
            # Registered before permissions are applied; a bad element in a
            # batch leaves the resource open.
            resource = Resource(resource_id)
            resources[resource_id] = resource
            logger.debug(f"Role '{role_id}' now tracks resource '{resource_id}'")
        elif resource.is_open:
            logger.debug(
                f"Ignoring allow on open resource '{resource_id}' for role '{role_id}'"
            )
            return

        resource.allow(permissions)

    def allow_all(self, role_id: str, resources: ResourceMap, resource_id: str) -> None:
        resources[resource_id] = Resource(resource_id)
        logger.debug(f"Role '{role_id}' has unrestricted access to '{resource_id}'")

    def deny(
        self,
        role_id: str,
        resources: ResourceMap,
        resource_id: str,
        permissions: Optional[PermissionTypes],
    ) -> None:
        resource = resources.get(resource_id)
        if resource is None:
            raise ResourceNotFoundError(role_id, resource_id)

        if permissions is None:
            del resources[resource_id]
            logger.debug(f"Role '{role_id}' no longer tracks resource '{resource_id}'")
            return

        if resource.is_open:
            return

        try:
            if is_permission_list(permissions):
                for permission in permissions:
                    resource.deny(permission)
            else:
                resource.deny(permissions)
        finally:
            # A batch that fails partway may still have emptied the resource,
            # which must not be left behind as an open grant.
            if resource.is_open:
                del resources[resource_id]
                logger.debug(
                    f"Last permission denied, role '{role_id}' no longer tracks '{resource_id}'"
                )

    def check(self, resources: ResourceMap, resource_id: str, permissions: PermissionTypes) -> bool:
        resource = resources.get(resource_id)
        if resource is None:
            return False

        if not is_permission_list(permissions):
            return resource.check(permissions)

        if not permissions:
            return False
        return all(resource.check(permission) for permission in permissions)

    def resource_state(self, resources: ResourceMap, resource_id: str) -> ResourceState:
        resource = resources.get(resource_id)
        if resource is None:
            return ResourceState.ABSENT
        if resource.is_open:
            return ResourceState.OPEN
        return ResourceState.RESTRICTED


class AdministratorPolicy(RolePolicy):
    """Grants every permission; the resource mapping is never read or written."""

    @property
    def is_admin(self) -> bool:
        return True

    def allow(
        self, role_id: str, resources: ResourceMap, resource_id: str, permissions: PermissionTypes
    ) -> None:
        pass

    def allow_all(self, role_id: str, resources: ResourceMap, resource_id: str) -> None:
        pass

    def deny(
        self,
        role_id: str,
        resources: ResourceMap,
        resource_id: str,
        permissions: Optional[PermissionTypes],
    ) -> None:
        pass

    def check(self, resources: ResourceMap, resource_id: str, permissions: PermissionTypes) -> bool:
        return True

    def resource_state(self, resources: ResourceMap, resource_id: str) -> ResourceState:
        return ResourceState.OPEN


STANDARD = StandardPolicy()
ADMINISTRATOR = AdministratorPolicy()
