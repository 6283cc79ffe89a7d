"""Typer application exposing the composite measurement parsers."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

import typer

from .._version import __version__
from ..config import Settings, get_settings
from ..errors import CompositeUnitsError
from ..measurement import Measurement
from ..parsers import QuantityKind, formats_for, match, parse
from ..schemas import BatchRecord, FormatInfo, ParseOutcome
from ..utils.logging import configure_json_logger, flush_handlers, generate_trace_id, log_event, log_parse_outcome
from .config import app as config_app

__all__ = ["app", "run"]


app = typer.Typer(help="Parse composite measurements such as '5 ft 6 in' or '12:60:3600'.", add_completion=False)
app.add_typer(config_app, name="config")


@app.callback(invoke_without_command=True)
def version_callback(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show composite-units version and exit", is_eager=True),
) -> None:
    """Handle global options before any sub-command executes."""

    if version:
        typer.echo(f"composite-units {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _resolve_kind(kind: Optional[str], settings: Settings) -> QuantityKind:
    if kind is None:
        return settings.default_kind
    try:
        return QuantityKind.coerce(kind)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--kind") from exc


def _load_settings() -> Settings:
    try:
        return get_settings()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _open_logger(log_file: Optional[Path], settings: Settings) -> logging.Logger:
    return configure_json_logger(log_file or settings.log_path, level=settings.log_level)


def _parse_with_format(text: str, kind: QuantityKind) -> Tuple[str, Measurement]:
    attempt = match(text, kind)
    if attempt is not None:
        return attempt.format.name, attempt.combine()
    return "duration", parse(text, kind)


def _outcome(text: str, kind: QuantityKind) -> ParseOutcome:
    format_name, result = _parse_with_format(text, kind)
    return ParseOutcome.from_measurement(text, kind.value, format_name, result)


@app.command("parse")
def parse_command(
    text: str = typer.Argument(..., help="Composite measurement, e.g. '5 ft 6 in'"),
    kind: Optional[str] = typer.Option(
        None, "--kind", "-k", help="Quantity kind: length, weight, time or volume (default from settings)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON payload instead of the rendered value"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", dir_okay=False, help="JSONL file receiving events"),
) -> None:
    """Parse a single composite measurement."""

    settings = _load_settings()
    quantity = _resolve_kind(kind, settings)
    logger = _open_logger(log_file, settings)
    trace_id = generate_trace_id()

    try:
        outcome = _outcome(text, quantity)
    except CompositeUnitsError as exc:
        log_parse_outcome(logger, text, quantity.value, trace_id=trace_id, error=exc)
        flush_handlers(logger)
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    log_parse_outcome(
        logger, text, quantity.value, trace_id=trace_id, format_name=outcome.format, result=outcome.rendered
    )
    flush_handlers(logger)

    if as_json:
        typer.echo(json.dumps(outcome.model_dump(), indent=2, ensure_ascii=False))
    else:
        typer.echo(outcome.rendered)


def _iter_lines(path: Path) -> Iterator[Tuple[int, str]]:
    with path.open("r", encoding="utf-8") as handle:
        for number, line in enumerate(handle, start=1):
            stripped = line.strip()
            if stripped:
                yield number, stripped


@app.command("batch")
def batch_command(
    input_path: Path = typer.Option(..., "--input", exists=True, dir_okay=False, help="Text file, one input per line"),
    output_path: Optional[Path] = typer.Option(
        None, "--output", dir_okay=False, help="JSONL destination (defaults to standard output)"
    ),
    kind: Optional[str] = typer.Option(None, "--kind", "-k", help="Quantity kind applied to every line"),
    fail_fast: bool = typer.Option(False, "--fail-fast", help="Stop at the first line that cannot be parsed"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", dir_okay=False, help="JSONL file receiving events"),
) -> None:
    """Parse every non-empty line of a file and emit one JSON record per line."""

    settings = _load_settings()
    quantity = _resolve_kind(kind, settings)
    logger = _open_logger(log_file, settings)
    trace_id = generate_trace_id()
    log_event(logger, "batch.start", trace_id=trace_id, input=str(input_path), kind=quantity.value)

    records: List[BatchRecord] = []
    failed = 0
    for number, text in _iter_lines(input_path):
        try:
            outcome = _outcome(text, quantity)
        except CompositeUnitsError as exc:
            failed += 1
            log_parse_outcome(logger, text, quantity.value, trace_id=trace_id, error=exc, line=number)
            records.append(
                BatchRecord(line=number, input=text, status="error", error=str(exc), error_type=type(exc).__name__)
            )
            if fail_fast:
                break
            continue
        log_parse_outcome(
            logger,
            text,
            quantity.value,
            trace_id=trace_id,
            format_name=outcome.format,
            result=outcome.rendered,
            line=number,
        )
        records.append(BatchRecord(line=number, input=text, status="ok", result=outcome))

    lines = [json.dumps(record.model_dump(exclude_none=True), ensure_ascii=False) for record in records]
    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        typer.echo(
            json.dumps({"output": str(output_path), "records": len(records), "failed": failed}, ensure_ascii=False)
        )
    else:
        for line in lines:
            typer.echo(line)

    log_event(logger, "batch.completed", trace_id=trace_id, records=len(records), failed=failed)
    flush_handlers(logger)

    if fail_fast and failed:
        raise typer.Exit(code=1)


@app.command("formats")
def formats_command(
    kind: Optional[str] = typer.Option(None, "--kind", "-k", help="Restrict the listing to one quantity kind"),
) -> None:
    """List the registered composite formats and their unit aliases."""

    if kind is None:
        kinds = list(QuantityKind)
    else:
        try:
            kinds = [QuantityKind.coerce(kind)]
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--kind") from exc

    payload = [FormatInfo.from_format(fmt).model_dump() for item in kinds for fmt in formats_for(item)]
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def run() -> None:
    """Entry point used by the ``composite-units`` console script."""

    app()


if __name__ == "__main__":  # pragma: no cover - manual execution
    run()
