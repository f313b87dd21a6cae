"""Update permission use case."""

from dataclasses import replace

from aclgraph.application.services.invalidation import InvalidationCoordinator
from aclgraph.application.services.references import PermissionRef, resolve_permission
from aclgraph.domain.entities import Permission
from aclgraph.domain.exceptions import NotFound, ValidationError

UNSET = object()


class UpdatePermissionUseCase:
    """Rename a permission or change its resource type."""

    def __init__(
        self,
        unit_of_work_factory: type,
        invalidation: InvalidationCoordinator,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._invalidation = invalidation

    async def execute(
        self,
        permission: PermissionRef,
        name: str | None = None,
        resource_type: str | None | object = UNSET,
    ) -> Permission:
        async with self._uow_factory() as uow:
            current = await resolve_permission(uow, permission)
            if not current:
                raise NotFound("Permission", permission)

            updated = current
            if name is not None and name != current.name:
                if not name.strip():
                    raise ValidationError("Permission name must not be empty")
                if await uow.permissions.get_by_name(name):
                    raise ValidationError(f"Permission {name!r} already exists")
                updated = replace(updated, name=name)
            if resource_type is not UNSET:
                updated = replace(updated, resource_type=resource_type)
            if updated == current:
                return current
            changes = await uow.permissions.update(updated)

        await self._invalidation.apply(changes)
        return updated
