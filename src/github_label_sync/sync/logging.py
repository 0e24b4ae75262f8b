"""Structured logging configuration.

Uses standard library logging with a JSON formatter. Logs go to stderr so that
stdout only carries the sync report. Every record written by the handler can be
stamped with the run's fixed context (target repository, dry-run flag).
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any, TextIO

# Attributes every LogRecord has; anything else on a record came in via `extra`.
_RESERVED_LOG_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None))
) | {"message", "asctime"}


class SyncContextFilter(logging.Filter):
    """Add fixed fields to records that do not already carry them."""

    def __init__(self, context: Mapping[str, Any]) -> None:
        super().__init__()
        self.context = dict(context)

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003 (record)
        for key, value in self.context.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


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

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(
    level: str,
    stream: TextIO | None = None,
    context: Mapping[str, Any] | None = None,
) -> None:
    """Configure root logging with structured JSON output.

    `context` holds fields stamped on every record the handler emits, unless
    the record was logged with its own value for that field.
    """

    root = logging.getLogger()

    # Remove any existing handlers to avoid duplicate logs when re-configuring.
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream=stream or sys.stderr)
    handler.setFormatter(JsonFormatter())
    if context:
        handler.addFilter(SyncContextFilter(context))

    root.addHandler(handler)
    root.setLevel(level.upper())

    # Keep HTTP library loggers quiet unless explicitly configured.
    for name in ("urllib3", "requests"):
        logging.getLogger(name).setLevel(max(root.level, logging.INFO))
