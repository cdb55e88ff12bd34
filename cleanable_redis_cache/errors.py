"""
Cleanable Redis Cache - Core Error Types

Defines the exception hierarchy raised by the configuration and factory layers.

The cache classes themselves never translate store failures: redis-py
transport errors and JSON decode errors reach the caller unchanged.
"""

from typing import Any


class CleanableCacheError(Exception):
    """Base exception for all cleanable cache errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured logs."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(CleanableCacheError):
    """Raised when configuration is invalid or missing."""

    pass
