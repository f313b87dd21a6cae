"""Set grant use case."""

from aclgraph.application.services.invalidation import InvalidationCoordinator
from aclgraph.application.services.references import (
    PermissionRef,
    RoleRef,
    resolve_permission,
    resolve_role,
)
from aclgraph.domain.exceptions import NotFound, ValidationError
from aclgraph.domain.value_objects import Effect


def parse_effect(value: Effect | str) -> Effect:
    try:
        return Effect(value.upper() if isinstance(value, str) else value)
    except ValueError:
        raise ValidationError(f"Effect must be ALLOW or DENY, got {value!r}") from None


class SetGrantUseCase:
    """Grant a permission to a role with ALLOW or DENY, replacing any previous effect."""

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
        effect: Effect | str = Effect.ALLOW,
        resource_type: str | None = None,
    ) -> None:
        effect = parse_effect(effect)
        async with self._uow_factory() as uow:
            current = await resolve_role(uow, role, resource_type)
            if not current:
                raise NotFound("Role", role)
            perm = await resolve_permission(uow, permission)
            if not perm:
                raise NotFound("Permission", permission)
            changes = await uow.grants.put(current.id, perm.id, effect)

        await self._invalidation.apply(changes)
