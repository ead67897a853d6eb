from __future__ import annotations

import contextvars
import json
import logging
import os
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterator

designer_var: contextvars.ContextVar[str] = contextvars.ContextVar("designer", default="-")

# Attributes every LogRecord carries; anything else on a record came in through `extra`.
_RECORD_ATTRIBUTES = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime", "event", "designer"}


@contextmanager
def designer_context(designer: str) -> Iterator[None]:
    """Tag library events emitted inside the block with the linking class."""
    token = designer_var.set(designer)
    try:
        yield
    finally:
        designer_var.reset(token)


def log_event(logger: logging.Logger, event: str, level: int = logging.INFO, **fields: Any) -> None:
    logger.log(level, event, extra={"event": event, "designer": designer_var.get(), **fields})


class StructuredFormatter(logging.Formatter):
    def __init__(self, json_output: bool) -> None:
        super().__init__()
        self.json_output = json_output

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": getattr(record, "event", record.getMessage()),
            "designer": getattr(record, "designer", "-"),
        }
        payload.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRIBUTES and not key.startswith("_")
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        if self.json_output:
            return json.dumps(payload, default=str)
        return " ".join(f"{key}={value}" for key, value in payload.items())


def configure_logging() -> None:
    """Send structured records to stdout; LOG_LEVEL and LOG_FORMAT (text|json) pick level and layout."""
    root = logging.getLogger()
    if getattr(root, "_scorecore_logging_configured", False):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter(json_output=os.getenv("LOG_FORMAT", "text").lower() == "json"))
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
    root._scorecore_logging_configured = True  # type: ignore[attr-defined]
