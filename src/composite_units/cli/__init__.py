"""Command line interface for composite_units."""

from .main import app, run

__all__ = ["app", "run"]
