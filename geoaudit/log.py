"""Logging setup for the API process.

Audit log calls pass `extra={"url": ..., "duration_ms": ...}`; the JSON
formatter lifts those into top-level fields so audits can be filtered by
page.
"""

import json
import logging
import sys
from datetime import datetime, timezone

from . import config

AUDIT_FIELDS = ("url", "duration_ms", "seo_score", "geo_score", "visibility_score")
QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


class JSONFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in AUDIT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                entry[field] = value
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def _plain_formatter() -> logging.Formatter:
    return logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def setup_logging(level: str | None = None, json_lines: bool | None = None) -> logging.Handler:
    """Route all logs to stdout; returns the installed handler."""
    log_level = getattr(logging, (level or config.LOG_LEVEL).upper(), logging.INFO)
    use_json = config.LOG_JSON if json_lines is None else json_lines

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(JSONFormatter() if use_json else _plain_formatter())

    root = logging.getLogger()
    root.setLevel(log_level)
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)

    logging.getLogger("geoaudit").setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return handler
