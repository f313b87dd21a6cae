"""Effective-permission computer - ALLOW closure minus explicit DENY."""

from aclgraph.application.services.cache_layer import CacheLayer, role_permissions_key
from aclgraph.application.services.implication_resolver import ImplicationResolver
from aclgraph.application.services.references import (
    PermissionRef,
    permission_matches,
    role_id_of,
)
from aclgraph.domain.entities import Permission, Role
from aclgraph.domain.exceptions import NotFound
from aclgraph.domain.value_objects import Effect


class EffectivePermissionComputer:
    """Resolves the permission set a role confers.

    ALLOW grants seed the implication closure. DENY is an id-level override
    applied after the closure: a denied id is removed even when reached from
    another ALLOW seed, while its own descendants stay reachable through those
    other seeds.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        resolver: ImplicationResolver,
        cache: CacheLayer,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._resolver = resolver
        self._cache = cache

    async def effective_permissions(self, role: Role | int) -> set[Permission]:
        """Allowed permissions of a role, cached under role:{id}:permissions.

        Raises NotFound for an unknown role id.
        """
        role_id = role_id_of(role)

        async def compute() -> list[dict]:
            async with self._uow_factory() as uow:
                permissions = await self._compute(uow, role_id)
            return [p.to_dict() for p in sorted(permissions, key=lambda p: p.id)]

        items = await self._cache.remember(role_permissions_key(role_id), compute)
        return {Permission.from_dict(item) for item in items}

    async def _compute(self, uow, role_id: int) -> list[Permission]:
        if not await uow.roles.get_by_id(role_id):
            raise NotFound("Role", role_id)
        grants = await uow.grants.list_for_role(role_id)
        denied = {g.permission_id for g in grants if g.effect == Effect.DENY}
        seeds = [g.permission_id for g in grants if g.effect == Effect.ALLOW]

        allowed: set[int] = set()
        closures = await self._resolver.descendants_many(uow, seeds)
        for closure in closures.values():
            allowed |= closure
        allowed -= denied
        if not allowed:
            return []
        return await uow.permissions.list_by_ids(allowed)

    async def denied_permissions(self, role: Role | int) -> set[Permission]:
        """Direct DENY grants only."""
        role_id = role_id_of(role)
        async with self._uow_factory() as uow:
            grants = await uow.grants.list_for_role(role_id)
            denied = [g.permission_id for g in grants if g.effect == Effect.DENY]
            if not denied:
                return set()
            return set(await uow.permissions.list_by_ids(denied))

    async def has_permission(self, role: Role | int, permission: PermissionRef) -> bool:
        permissions = await self.effective_permissions(role)
        return any(permission_matches(p, permission) for p in permissions)

    async def has_denied_permission(self, role: Role | int, permission: PermissionRef) -> bool:
        denied = await self.denied_permissions(role)
        return any(permission_matches(p, permission) for p in denied)

    async def can(self, role: Role | int, permission: PermissionRef) -> bool:
        """False when explicitly denied, else membership in the effective set."""
        if await self.has_denied_permission(role, permission):
            return False
        return await self.has_permission(role, permission)
