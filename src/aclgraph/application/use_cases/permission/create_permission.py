"""Create permission use case."""

from aclgraph.application.dto.permission_dto import CreatePermissionResult
from aclgraph.application.services.invalidation import InvalidationCoordinator
from aclgraph.domain.exceptions import NotFound, ValidationError
from aclgraph.domain.value_objects import ChangeSet


class CreatePermissionUseCase:
    """Create a permission or reuse an existing one, then attach implied permissions.

    Implied permissions are found or created by name. The resource type only
    applies when the permission is created.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        invalidation: InvalidationCoordinator,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._invalidation = invalidation

    async def execute(
        self,
        permission: int | str,
        resource_type: str | None = None,
        implied: list[str] | None = None,
    ) -> CreatePermissionResult:
        changes = ChangeSet()
        async with self._uow_factory() as uow:
            if isinstance(permission, int) or permission.strip().isdigit():
                existing = await uow.permissions.get_by_id(int(permission))
                if not existing:
                    raise NotFound("Permission", permission)
            else:
                name = permission.strip()
                if not name:
                    raise ValidationError("Permission name must not be empty")
                existing = await uow.permissions.get_by_name(name)

            if existing:
                result = CreatePermissionResult(permission=existing, created=False)
            else:
                created = await uow.permissions.create(name, resource_type or None)
                result = CreatePermissionResult(permission=created, created=True)

            parent = result.permission
            children = set(await uow.implications.list_children(parent.id))
            for child_name in dict.fromkeys(n.strip() for n in implied or []):
                if not child_name:
                    continue
                child = await uow.permissions.get_by_name(child_name)
                if not child:
                    child = await uow.permissions.create(child_name)
                    result.created_children.append(child)
                if child.id in children:
                    result.already_attached.append(child)
                    continue
                changes |= await uow.implications.add(parent.id, child.id)
                children.add(child.id)
                result.attached_children.append(child)

        await self._invalidation.apply(changes)
        return result
