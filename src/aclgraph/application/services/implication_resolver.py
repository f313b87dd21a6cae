"""Implication resolver - transitive closure over permission edges."""

from collections.abc import Iterable

from aclgraph.application.ports import UnitOfWork
from aclgraph.application.services.cache_layer import CacheLayer, implied_key
from aclgraph.domain.value_objects import ImplicationGraph


class ImplicationResolver:
    """Computes descendant closures (cached) and ancestor closures (fresh)."""

    def __init__(self, cache: CacheLayer) -> None:
        self._cache = cache

    async def load_graph(self, uow: UnitOfWork) -> ImplicationGraph:
        """Snapshot every implication edge from the graph store."""
        edges = await uow.implications.list_all()
        return ImplicationGraph.from_edges((e.parent_id, e.child_id) for e in edges)

    async def descendants(self, uow: UnitOfWork, permission_id: int) -> set[int]:
        """Permission id plus all ids it transitively implies."""
        closures = await self.descendants_many(uow, [permission_id])
        return closures[permission_id]

    async def descendants_many(
        self, uow: UnitOfWork, permission_ids: Iterable[int]
    ) -> dict[int, set[int]]:
        """Closures for several permissions; the graph is loaded at most once."""
        closures: dict[int, set[int]] = {}
        missing: list[int] = []
        for permission_id in dict.fromkeys(permission_ids):
            cached = await self._cache.get(implied_key(permission_id))
            if cached is None:
                missing.append(permission_id)
            else:
                closures[permission_id] = set(cached)

        if missing:
            graph = await self.load_graph(uow)
            for permission_id in missing:
                closure = graph.descendants(permission_id)
                await self._cache.put(implied_key(permission_id), sorted(closure))
                closures[permission_id] = closure
        return closures

    async def ancestors(self, uow: UnitOfWork, permission_id: int) -> set[int]:
        """Permission id plus all ids that transitively imply it. Never cached."""
        graph = await self.load_graph(uow)
        return graph.ancestors(permission_id)
