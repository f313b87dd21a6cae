"""Create role use case."""

from aclgraph.application.services.invalidation import InvalidationCoordinator
from aclgraph.domain.entities import Role
from aclgraph.domain.exceptions import ValidationError
from aclgraph.domain.value_objects import ChangeSet


class CreateRoleUseCase:
    """Create a global role, or one scoped to a resource type."""

    def __init__(
        self,
        unit_of_work_factory: type,
        invalidation: InvalidationCoordinator,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._invalidation = invalidation

    async def execute(
        self,
        name: str,
        resource_type: str | None = None,
        description: str | None = None,
    ) -> Role:
        name = name.strip()
        if not name:
            raise ValidationError("Role name must not be empty")
        if name.isdigit():
            raise ValidationError("Role name must not be numeric")
        resource_type = resource_type or None

        async with self._uow_factory() as uow:
            if await uow.roles.get_by_name(name, resource_type):
                raise ValidationError(
                    f"Role {name!r} already exists for {resource_type or 'global'}"
                )
            role = await uow.roles.create(name, resource_type, description)

        await self._invalidation.apply(ChangeSet.of(role_ids=[role.id]))
        return role
