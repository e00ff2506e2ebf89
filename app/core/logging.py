"""Centralized logging configuration."""

import json
import logging
import sys
from datetime import datetime, timezone

from app.core.config import settings

# Attributes passed through ``extra=`` that are copied into JSON records
_EXTRA_FIELDS = ("request_id", "engine", "elapsed_ms")

_TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


class JSONFormatter(logging.Formatter):
    """Structured JSON log formatter for production."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in _EXTRA_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                log_data[name] = value
        if record.exc_info and record.exc_info[1]:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, ensure_ascii=False)


def _build_formatter(as_json: bool) -> logging.Formatter:
    if as_json:
        return JSONFormatter()
    return logging.Formatter(_TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def setup_logging(level_name: str | None = None) -> None:
    """Install a single stdout handler on the root logger.

    ``level_name`` overrides ``LOG_LEVEL`` (used by tests and scripts).
    """
    level = getattr(logging, (level_name or settings.log_level).upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(_build_formatter(settings.log_json))
    root.addHandler(handler)

    # Suppress noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(level if settings.app_debug else logging.WARNING)
