"""Key namespace helpers."""

# Written by the external response-caching layer under the cache's root prefix
RESPONSE_CACHE_PREFIX = "fqc:"


def client_main_cache_prefix(client_key: str) -> str:
    """
    Prefix under which all entries for one client are stored.

    Args:
        client_key: Client identifier (any string, including empty)

    Returns:
        ``ck-{client_key}|``
    """
    return f"ck-{client_key}|"
