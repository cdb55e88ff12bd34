"""
Cleanable Redis Cache - Logging Setup

Structured logging for the package logger. Modules log through
``logging.getLogger(__name__)`` and pass structured fields with ``extra=``;
the JSON formatter emits those fields alongside the standard record data.
"""

import json
import logging
from datetime import UTC, datetime

from ..config import CleanableCacheConfig, get_config
from ..config.schemas import LogFormat, LogLevel

PACKAGE_LOGGER = "cleanable_redis_cache"

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Attributes every LogRecord carries; anything else came from `extra=`
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys() | {"message", "asctime", "taskName"}
)


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for key, value in record.__dict__.items():
            if key not in log_data and key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def setup_logging(
    level: LogLevel | str = LogLevel.INFO,
    fmt: LogFormat | str = LogFormat.JSON,
) -> logging.Logger:
    """
    Configure the package logger with a single stream handler.

    Calling it again replaces the previous handler, so repeated setup never
    duplicates output.

    Args:
        level: Log level name
        fmt: "json" for structured output, "text" for human-readable lines

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()

    handler = logging.StreamHandler()
    if LogFormat(fmt) == LogFormat.JSON:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(LogLevel(level).value)
    return logger


def setup_logging_from_config(config: CleanableCacheConfig | None = None) -> logging.Logger:
    """
    Configure the package logger from ``LOG_LEVEL`` / ``LOG_FORMAT``.

    Meant to be called once at process startup, before the first cache is
    created.

    Args:
        config: Loaded configuration (uses global config if not provided)

    Returns:
        The configured package logger
    """
    if config is None:
        config = get_config()

    logger = setup_logging(config.log_level, config.log_format)
    logger.debug(
        "Logging configured for environment '%s'",
        config.environment,
        extra={"environment": config.environment, "log_level": config.log_level, "log_format": config.log_format},
    )
    return logger
