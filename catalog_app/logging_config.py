"""Structured JSON logging with correlation ids for the catalog server."""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import uuid
from typing import Any, Dict, Iterator
from urllib.parse import urlsplit, urlunsplit

CORRELATION_ID = contextvars.ContextVar("correlation_id", default=None)
# Attributes every LogRecord carries; anything else on a record came in via ``extra``.
_RECORD_ATTRIBUTES = frozenset(logging.makeLogRecord({}).__dict__) | {"message"}
_REDACT_KEYS = {"authorization", "cookie", "token", "password"}
MAX_STRING_LENGTH = 120
REDACTED = "[redacted]"


class JsonFormatter(logging.Formatter):
    """Emit one JSON object per record, carrying the request correlation id."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        record_message = super().format(record)
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record_message,
            "event": getattr(record, "event", record_message),
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        for key, value in record.__dict__.items():
            if key in _RECORD_ATTRIBUTES or key in payload:
                continue
            payload[key] = redact_for_log(value)
        return json.dumps(payload)


def configure_logging(level: int | str | None = None) -> None:
    """Configure root logging with JSON output."""

    desired_level = level or os.getenv("LOG_LEVEL", "INFO")
    logging.root.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=desired_level, handlers=[handler])


def _scrub_string(value: str) -> str:
    # Deployment URLs may carry credentials in the query string or userinfo.
    if value.startswith(("http://", "https://")):
        parts = urlsplit(value)
        netloc = parts.netloc.rpartition("@")[2]
        value = urlunsplit((parts.scheme, netloc, parts.path, "", ""))
    if len(value) > MAX_STRING_LENGTH:
        return f"{value[:MAX_STRING_LENGTH]}...[{len(value) - MAX_STRING_LENGTH} more]"
    return value


def redact_for_log(payload: Any) -> Any:
    """Make a value safe to log.

    Credential-named keys are masked, URLs lose their query string and
    userinfo, and long strings such as fetched page bodies are truncated.
    """

    if payload is None or isinstance(payload, (bool, int, float)):
        return payload
    if isinstance(payload, str):
        return _scrub_string(payload)
    if isinstance(payload, (list, tuple)):
        return [redact_for_log(item) for item in payload]
    if isinstance(payload, dict):
        return {
            key: REDACTED if str(key).lower() in _REDACT_KEYS else redact_for_log(value)
            for key, value in payload.items()
        }
    return _scrub_string(str(payload))


def get_logger(name: str) -> logging.Logger:
    """Return a module logger ensuring configuration is applied."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


def ensure_correlation_id(correlation_id: str | None = None) -> str:
    """Return the current correlation id, assigning one if none is set."""

    if correlation_id:
        CORRELATION_ID.set(correlation_id)
        return correlation_id
    current = CORRELATION_ID.get()
    if current:
        return current
    new_id = uuid.uuid4().hex
    CORRELATION_ID.set(new_id)
    return new_id


@contextlib.contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    """Scope a correlation id to one HTTP request."""

    token = CORRELATION_ID.set(correlation_id or uuid.uuid4().hex)
    try:
        yield CORRELATION_ID.get()
    finally:
        CORRELATION_ID.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    correlation_id = ensure_correlation_id(fields.pop("correlation_id", None))
    exc_info = fields.pop("exc_info", None)
    logger.log(
        level,
        event,
        exc_info=exc_info,
        extra={"event": event, "correlation_id": correlation_id, **redact_for_log(fields)},
    )


__all__ = [
    "JsonFormatter",
    "configure_logging",
    "correlation_context",
    "ensure_correlation_id",
    "get_logger",
    "log_event",
    "redact_for_log",
]
