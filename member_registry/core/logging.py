# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Logger factory for the member service.
Records go to stdout as JSON objects tagged with the service and logger name.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from member_registry.core.config import settings


class JSONFormatter(logging.Formatter):
    """Render a record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "service": settings.SERVICE_NAME,
            "logger": record.name,
            "message": record.getMessage(),
        }
        request_id = getattr(record, "request_id", None)
        if request_id is not None:
            payload["request_id"] = request_id
        if record.exc_info and record.exc_info[1]:
            exc = record.exc_info[1]
            payload["error"] = str(exc)
            payload["error_type"] = type(exc).__name__
        return json.dumps(payload)


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger writing JSON to stdout at LOG_LEVEL; handlers attach once."""
    logger = logging.getLogger(name or settings.SERVICE_NAME)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, settings.LOG_LEVEL, logging.INFO))
    logger.propagate = False
    return logger
