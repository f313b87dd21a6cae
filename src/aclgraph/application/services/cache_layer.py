"""Cache layer - memoizes resolver output under a single TTL."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from aclgraph.application.ports import Cache
from aclgraph.domain.exceptions import CacheUnavailable

logger = logging.getLogger(__name__)

DEFAULT_TTL = 86400


def implied_key(permission_id: int) -> str:
    """Key holding the descendant closure of a permission."""
    return f"permission:{permission_id}:implied"


def role_permissions_key(role_id: int) -> str:
    """Key holding the effective permission set of a role."""
    return f"role:{role_id}:permissions"


class CacheLayer:
    """Wraps a Cache backend; never the source of truth.

    A missing backend, or one raising CacheUnavailable, degrades reads to
    recomputation. A failed forget leaves the entry to expire on TTL.
    """

    def __init__(self, cache: Cache | None, ttl: int = DEFAULT_TTL) -> None:
        self._cache = cache
        self._ttl = ttl

    @property
    def ttl(self) -> int:
        return self._ttl

    async def get(self, key: str) -> Any | None:
        if self._cache is None:
            return None
        try:
            return await self._cache.get(key)
        except CacheUnavailable as e:
            logger.warning("Cache read failed for %s, recomputing: %s", key, e)
            return None

    async def put(self, key: str, value: Any) -> None:
        if self._cache is None:
            return
        try:
            await self._cache.set(key, value, self._ttl)
        except CacheUnavailable as e:
            logger.warning("Cache write failed for %s: %s", key, e)

    async def forget(self, key: str) -> None:
        if self._cache is None:
            return
        try:
            await self._cache.forget(key)
        except CacheUnavailable as e:
            logger.warning("Cache forget failed for %s, entry expires in %ss: %s", key, self._ttl, e)

    async def remember(self, key: str, compute: Callable[[], Awaitable[Any]]) -> Any:
        """Return the cached value for key, computing and storing it on a miss."""
        cached = await self.get(key)
        if cached is not None:
            return cached
        value = await compute()
        await self.put(key, value)
        return value
