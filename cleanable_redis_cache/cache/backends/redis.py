"""
Cleanable Redis Cache - Redis Backend

String cache on top of an asyncio Redis client, with:
- A mandatory root prefix prepended to every key
- A TTL on every write (Redis SET ... PX milliseconds)
- Group invalidation by logical prefix through an injectable
  delete-by-pattern strategy

Physical keys are ``key_prefix + key`` with no separator inserted, so
"every entry under logical prefix P" is exactly the Redis pattern
``key_prefix + P + "*"``.

Group invalidation is best-effort. See ``cache.deletion`` for the race
with concurrent writers.

Example:
    cache = CleanableRedisCache(redis=Redis.from_url(url), key_prefix="app:", default_ttl_seconds=300)
    await cache.set("ck-acme|report", payload)
    await cache.clear_client("acme")
"""

from __future__ import annotations

import logging

from redis.asyncio import Redis

from ..deletion import DeleteByPattern, DeletionMethod, redis_del_by_pattern
from ..interface import CacheSetOptions, KeyValueCache
from ..keys import RESPONSE_CACHE_PREFIX, client_main_cache_prefix

logger = logging.getLogger(__name__)


class CleanableRedisCache(KeyValueCache[str]):
    """
    Redis string cache that can be cleaned by key prefix.

    Holds no state beyond its configuration; all entries live in Redis.
    Redis errors are not caught here and propagate to the caller.
    """

    def __init__(
        self,
        redis: Redis,
        key_prefix: str,
        default_ttl_seconds: float,
        enable_log: bool = False,
        del_fn: DeleteByPattern | None = None,
    ) -> None:
        """
        Initialize the cache.

        Args:
            redis: Open asyncio Redis client
            key_prefix: Mandatory prefix for all keys written by this cache
            default_ttl_seconds: TTL applied when a write gives none (0 = expire immediately).
                Redis rejects SET with PX 0, so a TTL of 0, or one under 1 ms, makes
                every write raise ResponseError against a live server.
            enable_log: Forwarded to ``del_fn`` when cleaning
            del_fn: Delete-by-pattern strategy (default: ``redis_del_by_pattern``)
        """
        if default_ttl_seconds < 0:
            raise ValueError("default_ttl_seconds must be >= 0")
        if not key_prefix:
            logger.warning(
                "CleanableRedisCache created with an empty key_prefix; clear_all() will match every key",
                extra={"key_prefix": key_prefix},
            )

        self.redis = redis
        self.key_prefix = key_prefix
        self.default_ttl_seconds = default_ttl_seconds
        self.enable_log = enable_log
        self.del_fn: DeleteByPattern = del_fn or redis_del_by_pattern

    async def disconnect(self) -> None:
        """
        Close the Redis client.

        There is no reconnect: build a new instance with a fresh client instead.
        Operations after this point are handled (or rejected) by the client.
        """
        await self.redis.aclose()
        logger.debug("Disconnected Redis cache '%s'", self.key_prefix, extra={"key_prefix": self.key_prefix})

    async def get(self, key: str) -> str | None:
        """Load the value stored under ``key``, or None if missing or expired."""
        value = await self.redis.get(self._final_key_for(key))
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str | None, options: CacheSetOptions | None = None) -> None:
        """
        Store ``value`` under ``key`` using SET with PX.

        A None value is ignored: nothing is written and no error is raised,
        so callers can pass through the result of a lookup that may have
        found nothing.

        The TTL is sent as whole milliseconds (truncated). A result of 0 is
        sent as PX 0, which Redis rejects with ResponseError; the error
        propagates.

        Args:
            key: Logical cache key
            value: String to store
            options: ``options.ttl`` overrides the default TTL (seconds)
        """
        if value is None:
            return

        ttl_seconds = self.default_ttl_seconds
        if options is not None and options.ttl is not None:
            ttl_seconds = options.ttl

        await self.redis.set(self._final_key_for(key), value, px=int(ttl_seconds * 1000))

    async def delete(self, key: str) -> bool:
        """Remove ``key`` with UNLINK. Safe on missing keys."""
        removed = await self.redis.unlink(self._final_key_for(key))
        return removed > 0

    async def clear_all(self) -> int:
        """Delete every entry of this cache."""
        return await self._clean("")

    async def clear_response_cache(self) -> int:
        """Delete the entries written by the response-caching layer (``fqc:*``)."""
        return await self._clean(RESPONSE_CACHE_PREFIX)

    async def clear_client(self, client_key: str) -> int:
        """
        Delete every entry stored for one client.

        Args:
            client_key: Client identifier, see ``client_main_cache_prefix``

        Returns:
            Number of entries removed
        """
        return await self._clean(client_main_cache_prefix(client_key))

    async def clear_prefix(self, prefix: str) -> int:
        """Delete every entry whose logical key starts with ``prefix``."""
        return await self._clean(prefix)

    async def _clean(self, prefix: str) -> int:
        return await self.del_fn(
            pattern=f"{self._final_key_for(prefix)}*",
            redis=self.redis,
            deletion_method=DeletionMethod.UNLINK,
            with_pipeline=True,
            enable_log=self.enable_log,
        )

    def _final_key_for(self, key: str) -> str:
        return f"{self.key_prefix}{key}"


async def disconnected_cleanable_redis_cache(
    redis: Redis,
    del_fn: DeleteByPattern | None = None,
) -> CleanableRedisCache:
    """
    Build a CleanableRedisCache and disconnect it straight away.

    Uses key prefix ``"<test>"``, a default TTL of 0 and logging disabled.
    Intended for tests that stub the client's commands.
    """
    cache = CleanableRedisCache(
        redis=redis,
        key_prefix="<test>",
        default_ttl_seconds=0,
        enable_log=False,
        del_fn=del_fn,
    )
    await cache.disconnect()
    return cache
