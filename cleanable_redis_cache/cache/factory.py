"""
Cleanable Redis Cache - Cache Factory

Builds cache instances from configuration and keeps a registry of named
instances so the process shares one client per name.

Backend selection:
- CACHE_BACKEND=redis (or REDIS_URL set): CleanableRedisCache, wrapped in
  PlainObjectCache when CACHE_PLAIN_OBJECTS=true
- CACHE_BACKEND=noop: NoOpCache (caching disabled)

Examples:
    from cleanable_redis_cache.cache.factory import create_cache

    cache = create_cache()

    from cleanable_redis_cache.config import CacheBackend, CacheConfig
    cfg = CacheConfig(backend=CacheBackend.REDIS, redis_url="redis://localhost:6379/0", key_prefix="app:")
    redis_cache = create_cache(cfg, name="app")
"""

from __future__ import annotations

import logging
from typing import Any

from redis.asyncio import Redis

from ..config import CacheBackend, CacheConfig, get_config
from ..errors import ConfigurationError
from .backends.noop import NoOpCache
from .backends.plain_object import PlainObjectCache
from .backends.redis import CleanableRedisCache
from .interface import KeyValueCache

logger = logging.getLogger(__name__)

_cache_instances: dict[str, KeyValueCache[Any]] = {}


def _create_redis_cache(config: CacheConfig) -> KeyValueCache[Any]:
    """Internal helper to construct a redis-backed cache."""
    if not config.redis_url:
        raise ConfigurationError(
            "REDIS_URL must be set when CACHE_BACKEND=redis",
            details={"env": "REDIS_URL", "backend": "redis"},
        )

    # Lazy connection; connects on first command
    client = Redis.from_url(
        config.redis_url,
        decode_responses=True,
        max_connections=config.redis_max_connections,
        socket_timeout=config.redis_socket_timeout,
    )
    cache = CleanableRedisCache(
        redis=client,
        key_prefix=config.key_prefix,
        default_ttl_seconds=config.default_ttl_seconds,
        enable_log=config.enable_log,
    )
    if config.plain_objects:
        return PlainObjectCache(cache)
    return cache


def _redis_cache_of(cache: KeyValueCache[Any]) -> CleanableRedisCache | None:
    if isinstance(cache, PlainObjectCache):
        cache = cache.cache
    return cache if isinstance(cache, CleanableRedisCache) else None


def create_cache(
    config: CacheConfig | None = None,
    name: str = "default",
) -> KeyValueCache[Any]:
    """
    Create a cache instance based on configuration.

    Args:
        config: Cache configuration (uses global config if not provided)
        name: Cache instance name (for multiple cache instances)

    Returns:
        Configured cache instance; the registered one if ``name`` is known

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    if name in _cache_instances:
        logger.debug("Returning existing cache instance: %s", name)
        return _cache_instances[name]

    if config is None:
        config = get_config().cache

    logger.info(
        "Creating cache instance '%s' with backend: %s",
        name,
        config.backend,
        extra={"cache_name": name, "backend": str(config.backend), "key_prefix": config.key_prefix},
    )

    if config.backend == CacheBackend.NOOP:
        cache: KeyValueCache[Any] = NoOpCache()
    elif config.backend == CacheBackend.REDIS:
        try:
            cache = _create_redis_cache(config)
        except ConfigurationError:
            raise
        except Exception as e:
            logger.error(
                "Unexpected error creating cache instance '%s': %s",
                name,
                e,
                extra={"cache_name": name, "backend": "redis", "error": str(e)},
                exc_info=True,
            )
            raise ConfigurationError(
                f"Failed to create cache instance '{name}': {e}",
                details={"cache_name": name, "backend": "redis", "error": str(e)},
            ) from e
    else:
        raise ConfigurationError(
            f"Unknown cache backend: {config.backend}",
            details={"backend": str(config.backend), "supported": ["redis", "noop"]},
        )

    _cache_instances[name] = cache
    return cache


def get_cache(name: str = "default") -> KeyValueCache[Any]:
    """
    Get an existing cache instance by name, creating it from the global
    configuration if it does not exist yet.
    """
    if name not in _cache_instances:
        logger.debug("Cache instance '%s' not found, creating new instance", name)
        return create_cache(name=name)

    return _cache_instances[name]


async def close_all_caches() -> None:
    """
    Disconnect every registered Redis-backed cache and empty the registry.

    Errors from one instance are logged and do not stop the others from
    being closed.
    """
    if not _cache_instances:
        logger.debug("No cache instances to close")
        return

    logger.info("Closing %d cache instance(s)...", len(_cache_instances))

    for name, cache in list(_cache_instances.items()):
        redis_cache = _redis_cache_of(cache)
        if redis_cache is None:
            continue
        try:
            await redis_cache.disconnect()
            logger.info("Closed cache instance: %s", name)
        except Exception as e:
            logger.error(
                "Error closing cache instance '%s': %s",
                name,
                e,
                extra={"cache_name": name, "error": str(e)},
                exc_info=True,
            )

    _cache_instances.clear()


def reset_cache_factory() -> None:
    """
    Forget all registered instances without disconnecting them.

    Only for tests; use close_all_caches() for a proper shutdown.
    """
    count = len(_cache_instances)
    _cache_instances.clear()
    logger.debug("Reset cache factory, cleared %d instance reference(s)", count)


def list_cache_instances() -> list[str]:
    """List all registered cache instance names."""
    return list(_cache_instances.keys())
