"""JSON Lines logging for parse runs.

Every record becomes one JSON object. Parse events carry the input string,
the quantity kind and either the matched format with its rendered result or
the error that stopped the parse, so a log file can be replayed line by line.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional
from uuid import uuid4

__all__ = [
    "LOGGER_NAME",
    "PARSE_FIELDS",
    "JsonLogFormatter",
    "configure_json_logger",
    "flush_handlers",
    "generate_trace_id",
    "log_event",
    "log_parse_outcome",
]

LOGGER_NAME = "composite_units"

# Emitted first and in this order when a record carries them.
PARSE_FIELDS = ("trace_id", "event", "line", "input", "kind", "format", "result", "error", "error_type")


class JsonLogFormatter(logging.Formatter):
    """Render records as ``{"ts", "level", "logger", "message", ...}`` objects."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "ts": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        fields = getattr(record, "parse_fields", None) or {}
        for name in PARSE_FIELDS:
            if fields.get(name) is not None:
                payload[name] = fields[name]
        for name, value in fields.items():
            if name not in PARSE_FIELDS:
                payload[name] = value
        if record.exc_info and record.exc_info[0] is not None:
            payload.setdefault("error_type", record.exc_info[0].__name__)
        return json.dumps(payload, ensure_ascii=False)


def configure_json_logger(log_path: Path | None, level: int = logging.INFO) -> logging.Logger:
    """Attach a JSONL file handler to the ``composite_units`` logger.

    Parser modules log through child loggers, so ``DEBUG`` level also
    records which format matched each input. ``log_path=None`` installs a
    ``NullHandler`` and detaches any previous file.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for previous in list(logger.handlers):
        logger.removeHandler(previous)
        previous.close()

    handler: logging.Handler
    if log_path is None:
        handler = logging.NullHandler()
    else:
        path = Path(log_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(JsonLogFormatter())
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger


def flush_handlers(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        handler.flush()


def generate_trace_id() -> str:
    """Identifier shared by all events of one CLI invocation."""

    return uuid4().hex[:16]


def log_event(
    logger: logging.Logger,
    event: str,
    *,
    trace_id: Optional[str] = None,
    level: int = logging.INFO,
    **fields: Any,
) -> str:
    """Log ``event`` with ``fields`` and return the trace id it was tagged with."""

    trace_id = trace_id or generate_trace_id()
    logger.log(level, event, extra={"parse_fields": {"trace_id": trace_id, "event": event, **fields}})
    return trace_id


def log_parse_outcome(
    logger: logging.Logger,
    text: str,
    kind: str,
    *,
    trace_id: str,
    format_name: Optional[str] = None,
    result: Optional[str] = None,
    error: Optional[BaseException] = None,
    **fields: Any,
) -> str:
    """Log ``parse.completed`` for a result or ``parse.failed`` for ``error``."""

    if error is not None:
        return log_event(
            logger,
            "parse.failed",
            trace_id=trace_id,
            level=logging.WARNING,
            input=text,
            kind=kind,
            error=str(error),
            error_type=type(error).__name__,
            **fields,
        )
    return log_event(
        logger,
        "parse.completed",
        trace_id=trace_id,
        input=text,
        kind=kind,
        format=format_name,
        result=result,
        **fields,
    )
