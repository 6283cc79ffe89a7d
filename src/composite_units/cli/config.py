"""Commands to inspect the resolved composite_units settings."""
from __future__ import annotations

import json
from pathlib import Path

import typer

from ..config import get_settings

__all__ = ["app"]

app = typer.Typer(help="Inspect the resolved configuration.", add_completion=False)


@app.command("show")
def show_settings(
    config_file: Path = typer.Option(
        None,
        "--config-file",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Alternative TOML/YAML configuration to use instead of COMPOSITE_UNITS_CONFIG_FILE.",
    ),
    refresh: bool = typer.Option(
        False,
        "--refresh",
        help="Ignore the cache and rebuild the settings from the environment.",
    ),
) -> None:
    """Print the resolved settings as JSON."""

    try:
        settings = get_settings(refresh=refresh, config_file=config_file)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    payload = {
        "config_source": str(config_file) if config_file else "environment",
        "settings": settings.as_dict(),
    }
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
