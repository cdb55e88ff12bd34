"""
Cleanable Redis Cache - Cache Interface

Defines the capability set shared by every cache variant: the Redis-backed
string cache, the JSON object adapter and the no-op cache.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

V = TypeVar("V")


@dataclass(frozen=True)
class CacheSetOptions:
    """
    Per-write options.

    Attributes:
        ttl: Time-to-live in seconds for this entry. None uses the cache's
            default TTL. 0 means expire immediately, never "no expiry".
    """

    ttl: float | None = None


class KeyValueCache(ABC, Generic[V]):
    """
    Abstract base class for key-value caches.

    Implementations are composed by wrapping (see PlainObjectCache), not by
    extending one another.
    """

    @abstractmethod
    async def get(self, key: str) -> V | None:
        """
        Retrieve a value from the cache.

        Args:
            key: Logical cache key

        Returns:
            Cached value, or None when missing or expired
        """

    @abstractmethod
    async def set(self, key: str, value: V, options: CacheSetOptions | None = None) -> None:
        """
        Store a value in the cache.

        Args:
            key: Logical cache key
            value: Value to cache
            options: Per-write options (TTL override)
        """

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """
        Delete a key from the cache.

        Args:
            key: Logical cache key

        Returns:
            True if an entry was removed, False otherwise
        """
