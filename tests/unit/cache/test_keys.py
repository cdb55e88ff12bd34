"""
Cleanable Redis Cache — Key Namespace Tests
"""

from cleanable_redis_cache.cache import RESPONSE_CACHE_PREFIX, client_main_cache_prefix


def test_client_main_cache_prefix() -> None:
    assert client_main_cache_prefix("plandek") == "ck-plandek|"


def test_client_main_cache_prefix_accepts_empty_key() -> None:
    assert client_main_cache_prefix("") == "ck-|"


def test_response_prefix_does_not_collide_with_client_prefix() -> None:
    assert not client_main_cache_prefix("x").startswith(RESPONSE_CACHE_PREFIX)
    assert RESPONSE_CACHE_PREFIX == "fqc:"
