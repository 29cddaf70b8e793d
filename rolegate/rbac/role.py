"""Roles and their per-resource permission grants."""

from typing import Dict, List, Optional

from .errors import InvalidArgumentError, require_identifier
from .policy import ADMINISTRATOR, STANDARD, RolePolicy
from .resource import PermissionTypes, Resource, ResourceState, is_permission_list


class Role:
    """A named principal holding permission grants across resources.

    Standard roles evaluate their own resource mapping. Administrator roles,
    built with :meth:`create_admin`, pass every check and ignore allow/deny;
    the flag is fixed at construction.

    Note the open-resource rule: a resource tracked with zero permissions is
    unrestricted for this role. ``allow`` will not narrow it and ``deny`` of
    individual permissions leaves it untouched; only ``allow_all`` and a
    wholesale ``deny(resource_id)`` change it.
    """

    def __init__(self, role_id: str, *, _policy: RolePolicy = STANDARD):
        self._id = require_identifier(
            role_id, "role_id", "Cannot create role with invalid identifier"
        )
        self._policy = _policy
        self._resources: Dict[str, Resource] = {}

    @classmethod
    def create_admin(cls, role_id: str) -> "Role":
        """Create a role for which every permission check succeeds."""
        return cls(role_id, _policy=ADMINISTRATOR)

    @property
    def id(self) -> str:
        return self._id

    @property
    def is_admin(self) -> bool:
        """Whether the role is an administrator."""
        return self._policy.is_admin

    def __repr__(self) -> str:
        return f"Role(id={self._id!r}, is_admin={self.is_admin})"

    def has_resource(self, resource_id: str) -> bool:
        """Check whether the role tracks the specified resource."""
        return resource_id in self._resources

    def get_resource(self, resource_id: str) -> Optional[Resource]:
        """Get the tracked resource or None."""
        return self._resources.get(resource_id)

    def list_resources(self) -> List[str]:
        """List identifiers of tracked resources."""
        return list(self._resources.keys())

    def resource_state(self, resource_id: str) -> ResourceState:
        """Get the state of a resource identifier within this role."""
        return self._policy.resource_state(self._resources, resource_id)

    def allow(self, resource_id: str, permissions: PermissionTypes) -> None:
        """Grant permissions on a resource.

        The resource is created on first use. If it already exists and is
        open, the call is ignored so an unrestricted grant is not narrowed.

        Args:
            resource_id: Identifier of the resource
            permissions: A permission string or a sequence of them

        Raises:
            InvalidArgumentError: If the identifier is invalid or no
                permissions are supplied
        """
        require_identifier(
            resource_id, "resource_id", "Cannot allow resource with invalid identifier"
        )
        if permissions is None or (is_permission_list(permissions) and not permissions):
            raise InvalidArgumentError("No permissions specified", "permissions", permissions)

        self._policy.allow(self._id, self._resources, resource_id, permissions)

    def allow_all(self, resource_id: str) -> "Role":
        """Grant unrestricted access to a single resource.

        Any permissions already allowed on the resource are discarded.

        Returns:
            The role, to allow call chaining
        """
        require_identifier(
            resource_id, "resource_id", "Cannot allow resource with invalid identifier"
        )
        self._policy.allow_all(self._id, self._resources, resource_id)
        return self

    def deny(self, resource_id: str, permissions: Optional[PermissionTypes] = None) -> "Role":
        """Remove permissions for a resource.

        Without ``permissions`` the resource is removed entirely. When the
        last permission of a restricted resource is denied the resource is
        removed as well. Denying individual permissions on an open resource
        does nothing.

        Args:
            resource_id: Identifier of the resource
            permissions: Permissions to deny, or None for the whole resource

        Returns:
            The role, to allow call chaining

        Raises:
            InvalidArgumentError: If the identifier is invalid
            ResourceNotFoundError: If a standard role does not track the resource
        """
        require_identifier(
            resource_id, "resource_id", "Cannot deny resource with invalid identifier"
        )
        self._policy.deny(self._id, self._resources, resource_id, permissions)
        return self

    def check(self, resource_id: str, permissions: PermissionTypes) -> bool:
        """Check whether the role has been granted permissions on a resource.

        A sequence of permissions passes only if every one of them passes;
        an empty sequence does not.

        Raises:
            InvalidArgumentError: If the identifier is invalid
        """
        require_identifier(
            resource_id, "resource_id", "Cannot check permission with invalid resource id"
        )
        return self._policy.check(self._resources, resource_id, permissions)
