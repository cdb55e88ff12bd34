"""
Cleanable Redis Cache — End-to-end Tests

CleanableRedisCache and PlainObjectCache against fakeredis (always) and a
real Redis server (skipped when none is reachable).
"""

from collections.abc import AsyncGenerator

import fakeredis
import pytest
import pytest_asyncio
from redis.asyncio import Redis
from redis.exceptions import RedisError, ResponseError

from cleanable_redis_cache.cache import CacheSetOptions, CleanableRedisCache, PlainObjectCache


@pytest_asyncio.fixture(params=["fake", "real"])
async def store(request: pytest.FixtureRequest, test_redis_url: str) -> AsyncGenerator[Redis, None]:
    """fakeredis always; a real server (database 15) when one is reachable."""
    if request.param == "fake":
        client: Redis = fakeredis.aioredis.FakeRedis(decode_responses=True)
    else:
        client = Redis.from_url(test_redis_url, decode_responses=True)
        try:
            await client.ping()
        except RedisError as e:
            await client.aclose()
            pytest.skip(f"Redis not available for testing: {e}")

    await client.flushdb()
    yield client
    try:
        await client.flushdb()
    finally:
        await client.aclose()


@pytest.fixture
def cache(store: Redis) -> CleanableRedisCache:
    return CleanableRedisCache(redis=store, key_prefix="app:", default_ttl_seconds=60)


class TestCleanableRedisCache:
    """End-to-end behaviour of a namespaced cache."""

    async def test_set_and_get(self, cache: CleanableRedisCache, store: Redis) -> None:
        await cache.set("key1", "value1")

        assert await cache.get("key1") == "value1"
        assert await store.get("app:key1") == "value1"

    async def test_every_write_has_an_expiry(self, cache: CleanableRedisCache, store: Redis) -> None:
        await cache.set("default", "v")
        await cache.set("custom", "v", CacheSetOptions(ttl=10))

        assert 0 < await store.pttl("app:default") <= 60_000
        assert 0 < await store.pttl("app:custom") <= 10_000

    async def test_zero_ttl_is_rejected_by_the_store(self, cache: CleanableRedisCache) -> None:
        with pytest.raises(ResponseError):
            await cache.set("key", "value", CacheSetOptions(ttl=0))

        with pytest.raises(ResponseError):
            await cache.set("key", "value", CacheSetOptions(ttl=0.0004))

        assert await cache.get("key") is None

    async def test_get_missing(self, cache: CleanableRedisCache) -> None:
        assert await cache.get("nonexistent") is None

    async def test_delete(self, cache: CleanableRedisCache) -> None:
        await cache.set("key1", "value1")

        assert await cache.delete("key1") is True
        assert await cache.get("key1") is None
        assert await cache.delete("key1") is False

    async def test_clear_client_only_removes_that_client(self, cache: CleanableRedisCache, store: Redis) -> None:
        await cache.set("ck-acme|a", "1")
        await cache.set("ck-acme|b", "2")
        await cache.set("ck-other|a", "3")
        await cache.set("fqc:page", "4")

        assert await cache.clear_client("acme") == 2
        assert await cache.get("ck-acme|a") is None
        assert await cache.get("ck-other|a") == "3"
        assert await cache.get("fqc:page") == "4"

    async def test_clear_response_cache(self, cache: CleanableRedisCache) -> None:
        await cache.set("fqc:page1", "1")
        await cache.set("fqc:page2", "2")
        await cache.set("ck-acme|a", "3")

        assert await cache.clear_response_cache() == 2
        assert await cache.get("ck-acme|a") == "3"

    async def test_clear_prefix(self, cache: CleanableRedisCache) -> None:
        await cache.set("report:1", "1")
        await cache.set("report:2", "2")
        await cache.set("reporting", "3")
        await cache.set("other", "4")

        assert await cache.clear_prefix("report:") == 2
        assert await cache.get("reporting") == "3"

    async def test_clear_all_keeps_other_namespaces(self, cache: CleanableRedisCache, store: Redis) -> None:
        other = CleanableRedisCache(redis=store, key_prefix="other:", default_ttl_seconds=60)
        for i in range(5):
            await cache.set(f"key{i}", f"value{i}")
        await other.set("key0", "kept")

        assert await cache.clear_all() == 5
        assert await cache.get("key0") is None
        assert await other.get("key0") == "kept"

    async def test_plain_object_round_trip(self, cache: CleanableRedisCache) -> None:
        objects = PlainObjectCache(cache)
        value = {"greeting": "Hello 世界 🌍", "items": [{"id": 1}, {"id": 2}], "score": 95.5}

        await objects.set("ck-acme|summary", value)

        assert await objects.get("ck-acme|summary") == value
        assert await objects.get("ck-acme|missing") is None
        assert await cache.clear_client("acme") == 1
        assert await objects.get("ck-acme|summary") is None
