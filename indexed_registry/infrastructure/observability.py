"""Structured Logging — JSON formatter and setup for registry observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (view_name, operation, record_count, error_code) surfaced when present
    - JSON format by default, human-readable "text" format for development

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging is opt-in: a library never configures the root logger on import
"""

import logging
import json
from datetime import datetime, timezone

from indexed_registry.config import get_settings

_EXTRA_FIELDS: tuple[str, ...] = (
    "view_name", "operation", "record_count", "error_code",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str | None = None, fmt: str | None = None) -> logging.Handler:
    """Attach a handler to the indexed_registry logger. Defaults come from Settings."""
    settings = get_settings()
    level = level or settings.log_level
    fmt = fmt or settings.log_format

    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    logger = logging.getLogger("indexed_registry")
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
