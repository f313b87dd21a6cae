"""Cache backends."""

from aclgraph.infrastructure.cache.memory_cache import MemoryCache
from aclgraph.infrastructure.cache.redis_cache import RedisCache

__all__ = ["MemoryCache", "RedisCache"]
