"""Cache port - TTL key/value store used as a memoization layer."""

from typing import Any, Protocol


class Cache(Protocol):
    """Port for a process-wide or networked cache.

    Values are JSON-compatible (lists, dicts, ints, strings). Backends raise
    CacheUnavailable when they cannot be reached.
    """

    async def get(self, key: str) -> Any | None: ...

    async def set(self, key: str, value: Any, ttl: int) -> None: ...

    async def forget(self, key: str) -> None: ...

    async def close(self) -> None: ...
