"""Structured logging utilities with JSON output."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

DEFAULT_FIELDS = {"component", "operation", "kind", "n", "df", "duration_ms", "error"}


class JSONFormatter(logging.Formatter):
    """JSON formatter adding common contextual fields when present."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "message": record.getMessage(),
        }
        for field in DEFAULT_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(component: Optional[str] = None, level: int | str = logging.INFO) -> None:
    """Configure root logger with structured JSON output.

    Log lines go to stderr so that command output on stdout stays valid JSON.
    """

    class ContextFilter(logging.Filter):
        def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
            if component and not hasattr(record, "component"):
                record.component = component
            return True

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper() if isinstance(level, str) else level)
    handler.addFilter(ContextFilter())
    root.addHandler(handler)


def get_logger(name: str, component: Optional[str] = None) -> logging.Logger:
    """Convenience helper to fetch a logger with an optional component default."""

    logger = logging.getLogger(name)
    if component:
        f = logging.Filter()

        def _filter(record: logging.LogRecord) -> bool:  # type: ignore[override]
            if not hasattr(record, "component"):
                record.component = component
            return True

        f.filter = _filter  # type: ignore[assignment]
        logger.addFilter(f)
    return logger
