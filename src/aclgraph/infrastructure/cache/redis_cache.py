"""Redis-backed cache."""

import json
from typing import Any

from redis.asyncio import Redis
from redis.exceptions import RedisError

from aclgraph.domain.exceptions import CacheUnavailable


class RedisCache:
    """Cache storing JSON values in Redis with per-key expiry."""

    def __init__(
        self,
        redis_url: str,
        *,
        prefix: str = "",
        socket_timeout: float = 5,
        client: Redis | None = None,
    ) -> None:
        self._prefix = f"{prefix}:" if prefix else ""
        self._redis = client or Redis.from_url(
            redis_url,
            decode_responses=True,
            encoding="utf-8",
            socket_connect_timeout=socket_timeout,
            socket_timeout=socket_timeout,
        )

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def get(self, key: str) -> Any | None:
        try:
            raw = await self._redis.get(self._key(key))
        except RedisError as e:
            raise CacheUnavailable(str(e)) from e
        if raw is None:
            return None
        return json.loads(raw)

    async def set(self, key: str, value: Any, ttl: int) -> None:
        try:
            await self._redis.set(self._key(key), json.dumps(value), ex=ttl)
        except RedisError as e:
            raise CacheUnavailable(str(e)) from e

    async def forget(self, key: str) -> None:
        try:
            await self._redis.delete(self._key(key))
        except RedisError as e:
            raise CacheUnavailable(str(e)) from e

    async def close(self) -> None:
        await self._redis.aclose()
