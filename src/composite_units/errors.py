"""Exception hierarchy raised by the composite measurement parsers."""
from __future__ import annotations

__all__ = [
    "CompositeUnitsError",
    "InvalidDurationError",
    "MeasurementError",
    "NumberFormatError",
    "ParseError",
    "UnknownUnitError",
]


class CompositeUnitsError(Exception):
    """Base class for every error raised by ``composite_units``."""


class ParseError(CompositeUnitsError, ValueError):
    """Raised when a string matches none of the formats registered for a kind."""

    def __init__(self, string: object):
        self.string = string
        super().__init__(f"Unable to parse: {string!r}")


class InvalidDurationError(CompositeUnitsError, ValueError):
    """Raised when a duration skeleton matched but every field is empty."""

    def __init__(self, string: str):
        self.string = string
        super().__init__(f"Invalid duration: {string!r}")


class NumberFormatError(CompositeUnitsError, ValueError):
    """Raised when a literal is not a real, rational, scientific or complex number."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Not a numeric literal: {text!r}")


class UnknownUnitError(CompositeUnitsError, KeyError):
    """Raised when an alias table has no entry for the requested kind or unit."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class MeasurementError(CompositeUnitsError, ValueError):
    """Raised when a measurement cannot be constructed or combined."""
