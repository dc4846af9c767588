"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Domain extras (user_id, connected_user_id, invite_id, operation, attempt,
      error_code, path) surfaced when present; UUIDs rendered as strings
    - A logged Pollen8Error contributes its code and category automatically
    - setup_logging is idempotent: re-running the lifespan never doubles output

Design Decisions:
    - setup_logging called once on startup via lifespan
    - SQLAlchemy engine logger pinned to WARNING so request logs stay readable
"""

import logging
import json
from datetime import datetime, timezone

from pollen8.core.errors import Pollen8Error

_EXTRA_FIELDS = (
    "user_id", "connected_user_id", "invite_id", "error_code",
    "path", "operation", "attempt",
)
_HANDLER_NAME = "pollen8"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

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
                log[key] = val if isinstance(val, (int, float)) else str(val)
        if record.exc_info:
            exc = record.exc_info[1]
            if isinstance(exc, Pollen8Error):
                log.setdefault("error_code", exc.code)
                log["error_category"] = exc.category.value
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the Pollen8 root handler, replacing one installed earlier."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    return handler
