"""Shared helpers for the command line and library entry points."""

from .logging import (
    JsonLogFormatter,
    configure_json_logger,
    flush_handlers,
    generate_trace_id,
    log_event,
    log_parse_outcome,
)

__all__ = [
    "JsonLogFormatter",
    "configure_json_logger",
    "flush_handlers",
    "generate_trace_id",
    "log_event",
    "log_parse_outcome",
]
