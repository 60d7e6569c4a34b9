"""Structured JSON logging configuration.

Emits one JSON object per record with timestamp, level, logger and message.
Request fields (path, method) and outcome fields (status_code,
exception_type) are included when passed through ``extra``.

SECURITY: values that look like credentials are redacted from messages and
tracebacks.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone

_SENSITIVE_PATTERNS = re.compile(
    r"(api.key|secret|password|token|credential|authorization)"
    r"[\s]*[=:]\s*\S+",
    re.IGNORECASE,
)

_EXTRA_FIELDS = ("path", "method", "status_code", "exception_type")


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON with structured fields."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": self._sanitize(record.getMessage()),
        }

        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                entry[name] = getattr(record, name)

        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self._sanitize(self.formatException(record.exc_info))

        return json.dumps(entry, default=str)

    @staticmethod
    def _sanitize(text: str) -> str:
        """Remove sensitive values from log text."""
        return _SENSITIVE_PATTERNS.sub("[REDACTED]", text)


def configure_logging(level: str = "INFO") -> logging.Handler:
    """Route root logging through a single JSON handler.

    Handlers previously installed by this function are replaced, so calling
    it again (e.g. once per app) does not duplicate output. Other handlers
    are left in place.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for existing in list(root.handlers):
        if isinstance(existing.formatter, JsonFormatter):
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)
    return handler
