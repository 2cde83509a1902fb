"""Structured Logging — JSON formatter and setup for applications embedding cherry_time.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Calendar fields (zone, week, year, month, start_date, end_date, error_code) surfaced when present
    - JSON format in production, human-readable in development

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging is never called by the library itself; the embedding application opts in
    - setup_logging is idempotent: a repeated call swaps its own handler, never stacks another
    - Level and format default to CHERRY_TIME_LOG_LEVEL / CHERRY_TIME_LOG_FORMAT
"""

import json
import logging
from datetime import datetime, timezone

from cherry_time.config import get_settings

HANDLER_NAME = "cherry_time"

EXTRA_FIELDS = (
    "zone", "week", "year", "month", "start_date", "end_date", "error_code",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str | None = None, fmt: str | None = None) -> logging.Handler:
    """Configure root logging. Returns the installed handler.

    Omitted arguments fall back to the log_level / log_format settings.
    """
    settings = get_settings()
    level = level or settings.log_level
    fmt = fmt or settings.log_format
    for existing in [h for h in logging.root.handlers if h.get_name() == HANDLER_NAME]:
        logging.root.removeHandler(existing)
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
