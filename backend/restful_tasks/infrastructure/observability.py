"""Structured Logging — one JSON object per line for the task router's request log.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Failed task requests carry method, raw path, task_id, operation and error_code
    - error_code is the TasksApiError code, or INTERNAL_ERROR for foreign exceptions
    - JSON format in production, human-readable in development

Design Decisions:
    - JSONFormatter on stdlib logging: platform log drains ingest one JSON object per line
    - request_failure_extra builds the extras in one place so the router's single
      error log and the formatter agree on field names
    - setup_logging called once on startup via lifespan
"""

import logging
import json
from datetime import datetime, timezone

from restful_tasks.core.errors import error_code

_EXTRA_FIELDS = (
    "method", "path", "task_id", "operation", "error_code", "store_status",
)


def request_failure_extra(
    method: str, path: str, task_id: str | None, operation: str, exc: Exception,
) -> dict:
    """Log extras for one failed task request."""
    return {
        "method": method,
        "path": path,
        "task_id": task_id,
        "operation": operation,
        "error_code": error_code(exc),
        "store_status": getattr(exc, "status_code", None),
    }


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
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging for the application. Returns the installed handler."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
