"""Lifespan middleware - opens the pool on startup, closes pool and cache on shutdown."""

from typing import Any

from psycopg_pool import AsyncConnectionPool

from aclgraph.application.ports import Cache


class LifespanMiddleware:
    """Middleware that manages the connection pool and cache backend."""

    def __init__(self, pool: AsyncConnectionPool | None, cache: Cache | None = None) -> None:
        self._pool = pool
        self._cache = cache

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Open pool when ASGI server starts."""
        if self._pool is not None:
            await self._pool.open()

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close pool and cache when ASGI server shuts down."""
        if self._pool is not None:
            await self._pool.close()
        if self._cache is not None:
            await self._cache.close()
