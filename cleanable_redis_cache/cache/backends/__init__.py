"""
Cleanable Redis Cache - Cache Backends

Exports the cache variants. All of them implement KeyValueCache.
"""

from .noop import NoOpCache
from .plain_object import PlainObjectCache
from .redis import CleanableRedisCache, disconnected_cleanable_redis_cache

__all__ = [
    "CleanableRedisCache",
    "NoOpCache",
    "PlainObjectCache",
    "disconnected_cleanable_redis_cache",
]
