"""Update role use case."""

from dataclasses import replace

from aclgraph.application.services.invalidation import InvalidationCoordinator
from aclgraph.application.services.references import RoleRef, resolve_role
from aclgraph.domain.entities import Role
from aclgraph.domain.exceptions import NotFound, ValidationError

UNSET = object()


class UpdateRoleUseCase:
    """Edit role name, description or resource type.

    A role given by name is looked up with current_resource_type, since role
    names are only unique per resource type.
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
        role: RoleRef,
        name: str | None = None,
        description: str | None | object = UNSET,
        resource_type: str | None | object = UNSET,
        current_resource_type: str | None = None,
    ) -> Role:
        async with self._uow_factory() as uow:
            current = await resolve_role(uow, role, current_resource_type)
            if not current:
                raise NotFound("Role", role)

            updated = replace(current)
            if name is not None:
                updated.name = name.strip()
            if description is not UNSET:
                updated.description = description
            if resource_type is not UNSET:
                updated.resource_type = resource_type or None
            if updated == current:
                return current

            if not updated.name or updated.name.isdigit():
                raise ValidationError("Role name must be a non-numeric string")
            if (updated.name, updated.resource_type) != (current.name, current.resource_type):
                if await uow.roles.get_by_name(updated.name, updated.resource_type):
                    raise ValidationError(
                        f"Role {updated.name!r} already exists for "
                        f"{updated.resource_type or 'global'}"
                    )
            if updated.resource_type != current.resource_type:
                if await uow.assignments.exists_for_role(current.id):
                    raise ValidationError(
                        f"Cannot change resource type of role {current.name!r} while it is assigned"
                    )
            changes = await uow.roles.update(updated)

        await self._invalidation.apply(changes)
        return updated
