"""Structured logging configuration.

Uses standard library logging with a JSON formatter.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, TextIO

from stepchain.config import StepchainSettings

_RESERVED_LOG_RECORD_ATTRS: set[str] = {
    "args",
    "asctime",
    "created",
    "exc_info",
    "exc_text",
    "filename",
    "funcName",
    "levelname",
    "levelno",
    "lineno",
    "module",
    "msecs",
    "message",
    "msg",
    "name",
    "pathname",
    "process",
    "processName",
    "relativeCreated",
    "stack_info",
    "taskName",
    "thread",
    "threadName",
}

PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JsonFormatter(logging.Formatter):
    """A minimal JSON formatter for logging records."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 (record)
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_LOG_RECORD_ATTRS and not key.startswith("_")
        }
        if extra:
            payload["extra"] = extra

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=repr)


def configure_logging(
    level: str, *, fmt: str = "json", trace_steps: bool = False, stream: TextIO | None = None
) -> None:
    """Configure root logging.

    With `trace_steps`, the `stepchain` loggers emit step entry, failure and
    short-circuit records at DEBUG regardless of the root level.
    """

    root = logging.getLogger()

    # Remove any existing handlers to avoid duplicate logs when re-configuring.
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream=stream or sys.stdout)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root.addHandler(handler)
    root.setLevel(level.upper())

    library = logging.getLogger("stepchain")
    library.setLevel(logging.DEBUG if trace_steps else logging.NOTSET)
    # Keep asyncio reasonably quiet unless explicitly configured.
    logging.getLogger("asyncio").setLevel(max(root.level, logging.WARNING))


def configure_from_settings(settings: StepchainSettings | None = None) -> StepchainSettings:
    """Load settings (if not given) and apply them to logging."""

    settings = settings or StepchainSettings()
    configure_logging(
        settings.log_level, fmt=settings.log_format, trace_steps=settings.trace_steps
    )
    return settings
