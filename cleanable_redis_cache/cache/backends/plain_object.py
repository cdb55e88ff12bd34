"""
Cleanable Redis Cache - Plain Object Adapter

Presents any string cache as a cache of JSON-serializable objects.
"""

from __future__ import annotations

import json
from typing import Any

from ..interface import CacheSetOptions, KeyValueCache


class PlainObjectCache(KeyValueCache[Any]):
    """
    Wraps a ``KeyValueCache[str]``: values are JSON-encoded on write and
    decoded on read.

    A stored entry that is not valid JSON raises ``json.JSONDecodeError``
    from ``get``; corrupt entries are never reported as misses.
    """

    def __init__(self, cache: KeyValueCache[str]) -> None:
        self.cache = cache

    async def get(self, key: str) -> Any | None:
        """Decode the stored JSON, or None on a miss (or an empty entry)."""
        value = await self.cache.get(key)
        if not value:
            return None
        return json.loads(value)

    async def set(self, key: str, value: Any, options: CacheSetOptions | None = None) -> None:
        """
        Encode ``value`` as JSON and store it; ``options`` pass through untouched.

        None is an absent value, not JSON null: nothing is written.
        """
        if value is None:
            return
        await self.cache.set(key, json.dumps(value, ensure_ascii=False, separators=(",", ":")), options)

    async def delete(self, key: str) -> bool:
        return await self.cache.delete(key)
