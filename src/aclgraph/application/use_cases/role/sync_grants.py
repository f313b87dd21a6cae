"""Sync grants use case."""

from collections.abc import Mapping

from aclgraph.application.services.invalidation import InvalidationCoordinator
from aclgraph.application.services.references import (
    PermissionRef,
    RoleRef,
    resolve_permission,
    resolve_role,
)
from aclgraph.application.use_cases.role.set_grant import parse_effect
from aclgraph.domain.exceptions import NotFound
from aclgraph.domain.value_objects import Effect


class SyncGrantsUseCase:
    """Replace all direct grants of a role with the given permission -> effect map."""

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
        grants: Mapping[PermissionRef, Effect | str],
        resource_type: str | None = None,
    ) -> None:
        async with self._uow_factory() as uow:
            current = await resolve_role(uow, role, resource_type)
            if not current:
                raise NotFound("Role", role)
            effects: dict[int, Effect] = {}
            for permission, effect in grants.items():
                perm = await resolve_permission(uow, permission)
                if not perm:
                    raise NotFound("Permission", permission)
                effects[perm.id] = parse_effect(effect)
            changes = await uow.grants.sync(current.id, effects)

        await self._invalidation.apply(changes)
