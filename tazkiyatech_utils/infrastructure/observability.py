"""Structured Logging: JSON formatter and setup for applications embedding the library.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (operation, error_code, density) surfaced when present
    - JSON format by default, human-readable "text" format on request

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging is opt-in: the library never configures the root logger on import
    - Repeated setup_logging calls swap the library handler, so records are never duplicated
"""

import logging
import json
from datetime import datetime, timezone

from tazkiyatech_utils.config import Settings, get_settings


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in ("operation", "error_code", "density"):
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

# Handler installed by the last setup_logging() call; replaced, not stacked
_installed_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the library's root handler, replacing one from an earlier call.

    Handlers added by the host application are left untouched. Returns the
    installed handler.
    """
    global _installed_handler

    formatter = JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT)
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    if _installed_handler is not None:
        logging.root.removeHandler(_installed_handler)
    logging.root.addHandler(handler)
    _installed_handler = handler

    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


def setup_logging_from_settings(settings: Settings | None = None) -> logging.Handler:
    """Configure logging from TAZKIYATECH_LOG_LEVEL / TAZKIYATECH_LOG_FORMAT."""
    settings = settings or get_settings()
    return setup_logging(settings.log_level, settings.log_format)
