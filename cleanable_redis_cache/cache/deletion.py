"""
Cleanable Redis Cache - Delete by Pattern

The standard deletion strategy used for group invalidation. Any async
callable matching ``DeleteByPattern`` can be injected into
CleanableRedisCache instead, e.g. a test double.

Deletion is NOT atomic: keys are matched with SCAN and removed batch by
batch. A key written after its batch was scanned survives; a key written
between the scan and the removal of its batch may or may not survive.
The returned count is whatever the store reported as removed in this pass.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol

from redis.asyncio import Redis

logger = logging.getLogger(__name__)

SCAN_BATCH_SIZE = 100


class DeletionMethod(str, Enum):
    """Redis command used to remove matched keys."""

    UNLINK = "unlink"  # Non-blocking, memory reclaimed in the background
    DEL = "del"


class DeleteByPattern(Protocol):
    """Async callable removing every key that matches a glob pattern."""

    async def __call__(
        self,
        *,
        pattern: str,
        redis: Redis,
        deletion_method: DeletionMethod,
        with_pipeline: bool,
        enable_log: bool,
    ) -> int: ...


async def _remove_batch(
    redis: Redis,
    keys: list[str | bytes],
    deletion_method: DeletionMethod,
    with_pipeline: bool,
) -> int:
    if with_pipeline:
        pipe = redis.pipeline(transaction=False)
        for key in keys:
            if deletion_method == DeletionMethod.UNLINK:
                pipe.unlink(key)
            else:
                pipe.delete(key)
        results = await pipe.execute()
        return sum(int(r) for r in results)

    if deletion_method == DeletionMethod.UNLINK:
        return int(await redis.unlink(*keys))
    return int(await redis.delete(*keys))


async def redis_del_by_pattern(
    *,
    pattern: str,
    redis: Redis,
    deletion_method: DeletionMethod = DeletionMethod.UNLINK,
    with_pipeline: bool = False,
    enable_log: bool = False,
) -> int:
    """
    Delete all keys matching a Redis glob pattern.

    Args:
        pattern: Glob pattern, e.g. ``"prefix:ck-acme|*"``
        redis: Async Redis client
        deletion_method: UNLINK or DEL
        with_pipeline: Send each scanned batch as one pipelined round trip
        enable_log: Log each batch and the final count

    Returns:
        Number of keys the store reported as removed
    """
    total_deleted = 0
    cursor = 0

    while True:
        cursor, keys = await redis.scan(cursor=cursor, match=pattern, count=SCAN_BATCH_SIZE)
        if keys:
            deleted = await _remove_batch(redis, keys, deletion_method, with_pipeline)
            total_deleted += deleted
            if enable_log:
                logger.info(
                    "Deleted %d of %d matched keys for pattern '%s'",
                    deleted,
                    len(keys),
                    pattern,
                    extra={"pattern": pattern, "matched": len(keys), "deleted": deleted},
                )
        if cursor == 0:
            break

    if enable_log:
        logger.info(
            "Deleted %d keys for pattern '%s'",
            total_deleted,
            pattern,
            extra={
                "pattern": pattern,
                "deleted": total_deleted,
                "deletion_method": deletion_method.value,
                "with_pipeline": with_pipeline,
            },
        )

    return total_deleted
