"""PostgreSQL async connection pool for the graph store."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import psycopg
from psycopg_pool import AsyncConnectionPool, PoolTimeout

logger = logging.getLogger(__name__)


def create_pool(conninfo: str, min_size: int = 2, max_size: int = 10) -> AsyncConnectionPool:
    """Create the graph store pool, unopened.

    LifespanMiddleware or the CLI runner opens it with ``await pool.open()``.
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        open=False,
    )


@asynccontextmanager
async def get_connection(pool: AsyncConnectionPool) -> AsyncIterator[psycopg.AsyncConnection]:
    async with pool.connection() as conn:
        yield conn


async def ping(pool: AsyncConnectionPool, timeout: float = 2.0) -> bool:
    """True when a pooled connection answers ``SELECT 1`` within timeout."""
    try:
        async with pool.connection(timeout=timeout) as conn:
            await conn.execute("SELECT 1")
        return True
    except (psycopg.Error, PoolTimeout) as e:
        logger.warning("Graph store ping failed: %s", e)
        return False
