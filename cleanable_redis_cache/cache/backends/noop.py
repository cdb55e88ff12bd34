"""
Cleanable Redis Cache - No-op Backend

Cache that stores nothing. Used when caching is disabled, or in tests that
must not touch Redis.
"""

from __future__ import annotations

from typing import Any

from ..interface import CacheSetOptions, KeyValueCache


class NoOpCache(KeyValueCache[Any]):
    """Every read misses, every write is dropped, every delete reports False."""

    async def get(self, key: str) -> Any | None:
        return None

    async def set(self, key: str, value: Any, options: CacheSetOptions | None = None) -> None:
        return None

    async def delete(self, key: str) -> bool:
        return False
