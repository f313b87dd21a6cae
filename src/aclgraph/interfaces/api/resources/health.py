"""Health check endpoints."""

import falcon.asgi
from psycopg_pool import AsyncConnectionPool

from aclgraph.infrastructure.persistence.postgres.connection import ping


class HealthResource:
    """Liveness, plus readiness against the graph store when a pool is wired."""

    def __init__(self, pool: AsyncConnectionPool | None = None) -> None:
        self._pool = pool

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - 503 while the graph store is unreachable."""
        if self._pool is not None and not await ping(self._pool):
            resp.media = {"status": "unavailable", "storage": "down"}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
