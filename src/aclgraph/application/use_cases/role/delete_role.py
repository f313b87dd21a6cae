"""Delete role use case."""

from aclgraph.application.services.invalidation import InvalidationCoordinator
from aclgraph.application.services.references import RoleRef, resolve_role
from aclgraph.domain.exceptions import NotFound, RoleInUse


class DeleteRoleUseCase:
    """Delete a role and its grants. Refused while any assignment references it."""

    def __init__(
        self,
        unit_of_work_factory: type,
        invalidation: InvalidationCoordinator,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._invalidation = invalidation

    async def execute(self, role: RoleRef, resource_type: str | None = None) -> None:
        async with self._uow_factory() as uow:
            current = await resolve_role(uow, role, resource_type)
            if not current:
                raise NotFound("Role", role)
            if await uow.assignments.exists_for_role(current.id):
                raise RoleInUse(f"Role {current.name!r} is still assigned")
            changes = await uow.roles.delete(current.id)

        await self._invalidation.apply(changes)
