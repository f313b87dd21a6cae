"""Revoke grant use case."""

from aclgraph.application.services.invalidation import InvalidationCoordinator
from aclgraph.application.services.references import (
    PermissionRef,
    RoleRef,
    resolve_permission,
    resolve_role,
)
from aclgraph.domain.exceptions import NotFound


class RevokeGrantUseCase:
    """Remove a role's direct grant (ALLOW or DENY) on a permission."""

    def __init__(
        self,
        unit_of_work_factory: type,
        invalidation: InvalidationCoordinator,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._invalidation = invalidation

    async def execute(
        self,
        role: RoleRef,
        permission: PermissionRef,
        resource_type: str | None = None,
    ) -> bool:
        async with self._uow_factory() as uow:
            current = await resolve_role(uow, role, resource_type)
            if not current:
                raise NotFound("Role", role)
            perm = await resolve_permission(uow, permission)
            if not perm:
                raise NotFound("Permission", permission)
            changes = await uow.grants.remove(current.id, perm.id)

        await self._invalidation.apply(changes)
        return bool(changes)
