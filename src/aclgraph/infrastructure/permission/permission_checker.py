"""Permission checker implementation - active role plus effective permissions."""

from collections.abc import Iterable

from aclgraph.application.services.effective_permissions import EffectivePermissionComputer
from aclgraph.application.services.references import PermissionRef, RoleRef
from aclgraph.application.services.role_assignments import RoleAssignmentResolver
from aclgraph.domain.value_objects import ModelRef


class AclPermissionChecker:
    """Checks a subject's active role on a resource against its effective permissions."""

    def __init__(
        self,
        assignments: RoleAssignmentResolver,
        permissions: EffectivePermissionComputer,
    ) -> None:
        self._assignments = assignments
        self._permissions = permissions

    async def check(
        self,
        subject: ModelRef,
        permission: PermissionRef,
        resource: ModelRef | None = None,
    ) -> bool:
        """Check if subject's active role on resource can use permission."""
        role = await self._assignments.active_role(subject, resource)
        if not role:
            return False
        return await self._permissions.can(role, permission)

    async def check_role(
        self,
        subject: ModelRef,
        roles: Iterable[RoleRef],
        resource: ModelRef | None = None,
    ) -> bool:
        return await self._assignments.has_any_role(subject, roles, resource)

    async def check_role_or_permission(
        self,
        subject: ModelRef,
        items: Iterable[str],
        resource: ModelRef | None = None,
    ) -> bool:
        """True when any item names the active role or a permission it can use."""
        role = await self._assignments.active_role(subject, resource)
        if not role:
            return False
        for item in (i.strip() for i in items):
            if not item:
                continue
            if item == role.name or await self._permissions.can(role, item):
                return True
        return False
