"""Logging setup for the application layer."""

import json
import logging
from datetime import datetime, timezone
from typing import Optional

from .config import LoggingSettings, get_settings

_HANDLER_NAME = "promptforge"


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def configure_logging(settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """
    Install a stream handler on the ``promptforge`` logger.

    Safe to call repeatedly; the previous handler is replaced.

    Args:
        settings: Logging settings (defaults to the cached global settings)

    Returns:
        The configured package logger
    """
    settings = settings or get_settings().logging
    logger = logging.getLogger("promptforge")

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if settings.format.lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    logger.addHandler(handler)
    logger.setLevel(settings.level.upper())
    return logger
