"""Structured logging for design-bot.

Every record is written as one JSON line tagged with the service name.
Values passed through ``extra=`` are kept as structured fields, except those
whose key names a credential (``github_token``, ``api_key``, ...), which are
masked before serialization.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, TextIO

SERVICE_NAME = "design-bot"
REDACTED = "***"

# Attributes every LogRecord carries; anything else on a record came from `extra=`.
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}

_SECRET_MARKERS = ("token", "secret", "password", "authorization", "api_key", "function_key")

# Client libraries that log request details at DEBUG.
_CLIENT_LOGGERS = ("github", "urllib3", "httpx", "openai")


def is_secret_field(name: str) -> bool:
    lowered = name.lower()
    return any(marker in lowered for marker in _SECRET_MARKERS)


def _structured_fields(record: logging.LogRecord) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for key, value in record.__dict__.items():
        if key in _STANDARD_ATTRS or key.startswith("_"):
            continue
        fields[key] = REDACTED if is_secret_field(key) else value
    return fields


class JsonFormatter(logging.Formatter):
    """One JSON object per record: service, timestamp, level, logger, message."""

    def __init__(self, service: str = SERVICE_NAME) -> None:
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 (record)
        payload: dict[str, Any] = {
            "service": self.service,
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        fields = _structured_fields(record)
        if fields:
            payload["extra"] = fields

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(level: str, *, stream: TextIO | None = None) -> None:
    """Send all records to ``stream`` (stdout by default) as JSON lines.

    Calling it again replaces the previous handler. The GitHub, HTTP and OpenAI
    client loggers never go below INFO, so request bodies and auth headers they
    emit at DEBUG stay out of the output.
    """

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)

    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)
    root.setLevel(level.upper())

    for name in _CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(max(root.level, logging.INFO))
