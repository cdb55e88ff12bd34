"""
Cleanable Redis Cache - Observability Module

Logging setup for the package logger.

Usage:
    from cleanable_redis_cache.observability import setup_logging

    setup_logging("DEBUG", fmt="text")

    # or from LOG_LEVEL / LOG_FORMAT
    setup_logging_from_config()
"""

from .logging_config import JSONFormatter, setup_logging, setup_logging_from_config

__all__ = [
    "JSONFormatter",
    "setup_logging",
    "setup_logging_from_config",
]
