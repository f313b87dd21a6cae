"""In-process TTL cache."""

import time
from collections.abc import Callable
from typing import Any


class MemoryCache:
    """Process-wide dict of key -> (deadline, value). Expired entries are dropped on read."""

    def __init__(self, timer: Callable[[], float] = time.monotonic) -> None:
        self._timer = timer
        self._entries: dict[str, tuple[float, Any]] = {}

    async def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        deadline, value = entry
        if deadline <= self._timer():
            self._entries.pop(key, None)
            return None
        return value

    async def set(self, key: str, value: Any, ttl: int) -> None:
        self._entries[key] = (self._timer() + ttl, value)

    async def forget(self, key: str) -> None:
        self._entries.pop(key, None)

    async def close(self) -> None:
        self._entries.clear()

    def __contains__(self, key: str) -> bool:
        entry = self._entries.get(key)
        return entry is not None and entry[0] > self._timer()

    def __len__(self) -> int:
        return len(self._entries)
