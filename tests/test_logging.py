import json
import logging
from pathlib import Path

from composite_units import parse
from composite_units.errors import ParseError
from composite_units.utils.logging import configure_json_logger, flush_handlers, log_event, log_parse_outcome


def _read(log_file: Path) -> list[dict]:
    return [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines() if line.strip()]


def test_structured_logger_emits_jsonl(tmp_path: Path) -> None:
    log_file = tmp_path / "events.jsonl"
    logger = configure_json_logger(log_file)
    try:
        trace_id = log_event(logger, "batch.start", input="lines.txt")
        log_event(logger, "batch.completed", trace_id=trace_id, records=2)
        flush_handlers(logger)
    finally:
        configure_json_logger(None)

    lines = _read(log_file)
    assert len(lines) == 2
    assert all(line["trace_id"] == trace_id for line in lines)
    assert {line["event"] for line in lines} == {"batch.start", "batch.completed"}
    assert lines[0]["input"] == "lines.txt"
    assert lines[1]["records"] == 2


def test_parser_debug_records_reach_the_json_log(tmp_path: Path) -> None:
    log_file = tmp_path / "debug.jsonl"
    logger = configure_json_logger(log_file, level=logging.DEBUG)
    try:
        parse("5 ft 6 in", "length")
        flush_handlers(logger)
    finally:
        configure_json_logger(None)

    lines = _read(log_file)
    assert any("foot_inch" in line["message"] for line in lines)
    assert all(line["level"] == "debug" for line in lines)
    assert lines[0]["logger"].startswith("composite_units.parsers")


def test_parse_outcomes_carry_input_kind_and_result(tmp_path: Path) -> None:
    log_file = tmp_path / "outcomes.jsonl"
    logger = configure_json_logger(log_file)
    try:
        log_parse_outcome(logger, "5 ft 6 in", "length", trace_id="abc", format_name="foot_inch", result="5.5 ft")
        log_parse_outcome(logger, "5 feets", "length", trace_id="abc", error=ParseError("5 feets"), line=3)
        flush_handlers(logger)
    finally:
        configure_json_logger(None)

    completed, failed = _read(log_file)
    assert completed["event"] == "parse.completed"
    assert completed["level"] == "info"
    assert (completed["input"], completed["kind"], completed["format"], completed["result"]) == (
        "5 ft 6 in",
        "length",
        "foot_inch",
        "5.5 ft",
    )
    assert "error" not in completed

    assert failed["event"] == "parse.failed"
    assert failed["level"] == "warning"
    assert failed["line"] == 3
    assert failed["error_type"] == "ParseError"
    assert "5 feets" in failed["error"]
    assert "format" not in failed
    assert list(failed)[:6] == ["ts", "level", "logger", "message", "trace_id", "event"]
