"""Delete permission use case."""

from aclgraph.application.services.invalidation import InvalidationCoordinator
from aclgraph.application.services.references import PermissionRef, resolve_permission
from aclgraph.domain.exceptions import NotFound


class DeletePermissionUseCase:
    """Delete a permission; its implication edges and grants go with it."""

    def __init__(
        self,
        unit_of_work_factory: type,
        invalidation: InvalidationCoordinator,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._invalidation = invalidation

    async def execute(self, permission: PermissionRef) -> None:
        async with self._uow_factory() as uow:
            current = await resolve_permission(uow, permission)
            if not current:
                raise NotFound("Permission", permission)
            changes = await uow.permissions.delete(current.id)

        await self._invalidation.apply(changes)
