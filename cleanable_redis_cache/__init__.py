"""
Cleanable Redis Cache

Namespaced key-value cache on top of Redis. Every key is written under a
root prefix, so any caller can invalidate exactly the entries it owns by
deleting all keys sharing a prefix.
"""

__version__ = "1.0.0"

from .cache import (
    CacheSetOptions,
    CleanableRedisCache,
    KeyValueCache,
    NoOpCache,
    PlainObjectCache,
    client_main_cache_prefix,
    create_cache,
    disconnected_cleanable_redis_cache,
    redis_del_by_pattern,
)

__all__ = [
    "CacheSetOptions",
    "CleanableRedisCache",
    "KeyValueCache",
    "NoOpCache",
    "PlainObjectCache",
    "client_main_cache_prefix",
    "create_cache",
    "disconnected_cleanable_redis_cache",
    "redis_del_by_pattern",
]
