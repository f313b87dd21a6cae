"""Link implication use case."""

from aclgraph.application.services.invalidation import InvalidationCoordinator
from aclgraph.application.services.references import PermissionRef, resolve_permission
from aclgraph.domain.exceptions import NotFound


class LinkImplicationUseCase:
    """Make parent imply child. Cycles are allowed."""

    def __init__(
        self,
        unit_of_work_factory: type,
        invalidation: InvalidationCoordinator,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._invalidation = invalidation

    async def execute(self, parent: PermissionRef, child: PermissionRef) -> bool:
        """Returns False when the edge already existed."""
        async with self._uow_factory() as uow:
            parent_perm = await resolve_permission(uow, parent)
            if not parent_perm:
                raise NotFound("Permission", parent)
            child_perm = await resolve_permission(uow, child)
            if not child_perm:
                raise NotFound("Permission", child)
            changes = await uow.implications.add(parent_perm.id, child_perm.id)

        await self._invalidation.apply(changes)
        return bool(changes)
