"""Single-line JSON logging with a per-request correlation id."""

from __future__ import annotations

import json
import logging
import sys
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import TYPE_CHECKING, TextIO, cast, override

if TYPE_CHECKING:
    from collections.abc import Iterator

    from shelfmark.config.settings import LogLevel

correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)

_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    },
)


class JSONFormatter(logging.Formatter):
    """Render each record as one JSON object per line.

    Values passed through ``extra=`` become top-level keys; a key that
    collides with a built-in field is emitted as ``extra_<key>`` instead.
    """

    @override
    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as a JSON string."""
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "correlation_id": correlation_id.get(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack_trace"] = self.formatStack(record.stack_info)

        reserved = frozenset(payload)
        record_dict = cast("dict[str, object]", record.__dict__)
        for key, value in record_dict.items():
            if key in _RECORD_ATTRS or key.startswith("_"):
                continue
            payload[f"extra_{key}" if key in reserved else key] = value

        return json.dumps(payload, default=str)


def init_logging(level: LogLevel, *, stream: TextIO | None = None) -> None:
    """Route root logging through one JSON handler at the given level."""
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JSONFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # pytest's caplog handler must survive re-initialization.
    for existing in root_logger.handlers[:]:
        if type(existing).__name__ != "LogCaptureHandler":
            root_logger.removeHandler(existing)

    root_logger.addHandler(handler)


@contextmanager
def correlation_scope(value: str | None = None) -> Iterator[str]:
    """Bind a correlation id for the enclosed block, generating one if absent."""
    resolved = value or uuid.uuid4().hex
    token = correlation_id.set(resolved)
    try:
        yield resolved
    finally:
        correlation_id.reset(token)
