r"""productivity/core/observability.py

Structured logging for the dashboard services.

Every record is rendered as a single JSON object so that request latency and
fallback reasons can be grepped out of the Streamlit server log.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

# Attributes present on every ``LogRecord``; anything else was passed via
# ``extra=`` and is copied into the payload.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime"}

_HANDLER_NAME = "productivity-json"


class JsonLogFormatter(logging.Formatter):
    """Format log records as one-line JSON payloads."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Install the JSON handler on the root logger (idempotent)."""

    root = logging.getLogger()
    root.setLevel(level if isinstance(level, int) else level.upper())
    if not any(getattr(h, "name", None) == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.name = _HANDLER_NAME
        handler.setFormatter(JsonLogFormatter())
        root.addHandler(handler)
    return root
