"""Invalidation coordinator - forgets cache entries a write may have staled."""

import logging

from aclgraph.application.services.cache_layer import (
    CacheLayer,
    implied_key,
    role_permissions_key,
)
from aclgraph.application.services.implication_resolver import ImplicationResolver
from aclgraph.domain.value_objects import ChangeSet

logger = logging.getLogger(__name__)


class InvalidationCoordinator:
    """Consumes the ChangeSet returned by graph store writes.

    Must run after the writing unit of work has committed, so that the
    ancestor walk and any concurrent recomputation see the new state.
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

    async def apply(self, changes: ChangeSet) -> None:
        """Forget implied keys of touched permissions and their ancestors,
        and permission keys of touched roles and of roles granting any of them.
        """
        if not changes:
            return

        permission_ids: set[int] = set()
        role_ids = set(changes.role_ids)
        async with self._uow_factory() as uow:
            if changes.permission_ids:
                graph = await self._resolver.load_graph(uow)
                for permission_id in changes.permission_ids:
                    permission_ids |= graph.ancestors(permission_id)
                role_ids |= await uow.grants.list_role_ids_for_permissions(permission_ids)

        for permission_id in sorted(permission_ids):
            await self._cache.forget(implied_key(permission_id))
        for role_id in sorted(role_ids):
            await self._cache.forget(role_permissions_key(role_id))
        logger.debug(
            "Invalidated implied closures %s and role permissions %s",
            sorted(permission_ids),
            sorted(role_ids),
        )

    async def reset(self) -> None:
        """Forget every role and permission entry."""
        async with self._uow_factory() as uow:
            roles = await uow.roles.list_all()
            permissions = await uow.permissions.list_all()
        for role in roles:
            await self._cache.forget(role_permissions_key(role.id))
        for permission in permissions:
            await self._cache.forget(implied_key(permission.id))
        logger.info(
            "Cleared cache for %d roles and %d permissions", len(roles), len(permissions)
        )
