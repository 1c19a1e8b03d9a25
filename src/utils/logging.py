"""Structured JSON logging configuration."""

import json
import logging
from datetime import datetime, timezone
from typing import Any

# LogRecord attributes that are not user-supplied ``extra`` fields
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord('', 0, '', 0, '', (), None))) | {'message', 'asctime'}


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    def __init__(self, service: str | None = None):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat().replace('+00:00', 'Z'),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if self.service:
            log_data["service"] = self.service

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # logger.info("User created", extra={"userId": 3}) sets record.userId
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not callable(value):
                log_data[key] = value

        return json.dumps(log_data, default=str)


def setup_structured_logging(level: str | int = logging.INFO, service: str | None = None) -> logging.Handler:
    """Configure structured JSON logging for the application.

    Replaces the root handlers and routes uvicorn's access log through the
    same handler at WARNING, so only failed requests show up there.
    An unknown level name falls back to INFO with a warning.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter(service=service))

    resolved = logging.getLevelNamesMapping().get(level.upper()) if isinstance(level, str) else level

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO if resolved is None else resolved)
    root_logger.handlers = [handler]

    if resolved is None:
        logging.getLogger(__name__).warning(
            "Unknown log level, falling back to INFO", extra={"requestedLevel": level}
        )

    uvicorn_access = logging.getLogger("uvicorn.access")
    uvicorn_access.handlers = [handler]
    uvicorn_access.propagate = False
    uvicorn_access.setLevel(logging.WARNING)
    return handler
