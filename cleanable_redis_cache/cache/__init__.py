"""
Cleanable Redis Cache - Cache Module

Namespaced Redis cache whose entries can be invalidated in bulk by prefix.

- interface.py: KeyValueCache capability set and per-write options
- keys.py: key namespace helpers
- deletion.py: standard delete-by-pattern strategy
- backends/: CleanableRedisCache, PlainObjectCache, NoOpCache
- factory.py: builds configured instances

Usage:
    from cleanable_redis_cache.cache import CleanableRedisCache, PlainObjectCache

    cache = CleanableRedisCache(redis=client, key_prefix="app:", default_ttl_seconds=300)
    objects = PlainObjectCache(cache)
    await objects.set("ck-acme|summary", {"total": 3})
    await cache.clear_client("acme")
"""

from .backends import (
    CleanableRedisCache,
    NoOpCache,
    PlainObjectCache,
    disconnected_cleanable_redis_cache,
)
from .deletion import DeleteByPattern, DeletionMethod, redis_del_by_pattern
from .factory import (
    close_all_caches,
    create_cache,
    get_cache,
    list_cache_instances,
    reset_cache_factory,
)
from .interface import CacheSetOptions, KeyValueCache
from .keys import RESPONSE_CACHE_PREFIX, client_main_cache_prefix

__all__ = [
    # Interface
    "KeyValueCache",
    "CacheSetOptions",
    # Backends
    "CleanableRedisCache",
    "PlainObjectCache",
    "NoOpCache",
    "disconnected_cleanable_redis_cache",
    # Keys
    "client_main_cache_prefix",
    "RESPONSE_CACHE_PREFIX",
    # Deletion strategy
    "DeleteByPattern",
    "DeletionMethod",
    "redis_del_by_pattern",
    # Factory
    "create_cache",
    "get_cache",
    "close_all_caches",
    "list_cache_instances",
    "reset_cache_factory",
]
