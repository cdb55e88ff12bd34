"""
Cleanable Redis Cache — Test Configuration and Shared Fixtures

Provides pytest configuration and shared fixtures for unit and integration tests.
"""

import os
from collections.abc import AsyncGenerator, Generator
from unittest.mock import AsyncMock, MagicMock

import fakeredis
import pytest
import pytest_asyncio
from redis.asyncio import Redis

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "DEBUG"


@pytest.fixture
def test_redis_url() -> str:
    """Get Redis URL for testing (database 15 for isolation)."""
    return os.environ.get("TEST_REDIS_URL", "redis://localhost:6379/15")


@pytest.fixture
def stub_redis() -> MagicMock:
    """
    Redis client double whose commands fail unless a test configures them.

    Tests set ``return_value`` on the command they expect; any other command
    raises, which catches unexpected writes or reads.
    """
    redis = MagicMock(spec=Redis)
    for command in ("get", "set", "unlink"):
        setattr(redis, command, AsyncMock(side_effect=AssertionError(f"{command} should not be called")))
    redis.aclose = AsyncMock(return_value=None)
    return redis


@pytest_asyncio.fixture
async def fake_redis() -> AsyncGenerator[Redis, None]:
    """In-process Redis (fakeredis) with string responses."""
    client = fakeredis.aioredis.FakeRedis(decode_responses=True)
    yield client
    await client.flushall()
    await client.aclose()


@pytest.fixture
def mock_env_redis(monkeypatch: pytest.MonkeyPatch, test_redis_url: str) -> None:
    """Set environment variables for the Redis backend."""
    monkeypatch.setenv("REDIS_URL", test_redis_url)
    monkeypatch.setenv("CACHE_KEY_PREFIX", "test:")
    monkeypatch.setenv("CACHE_DEFAULT_TTL_SECONDS", "60")
    monkeypatch.setenv("CACHE_ENABLE_LOG", "true")


@pytest.fixture
def mock_env_noop(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set environment variables for a disabled cache."""
    monkeypatch.delenv("REDIS_URL", raising=False)
    monkeypatch.delenv("CACHE_BACKEND", raising=False)


@pytest.fixture(autouse=True)
def reset_cache_factory() -> Generator[None, None, None]:
    """Reset cache factory and loaded config after each test to prevent state leakage."""
    yield
    from cleanable_redis_cache.cache import factory
    from cleanable_redis_cache.config import loader

    factory.reset_cache_factory()
    loader._config_instance = None
