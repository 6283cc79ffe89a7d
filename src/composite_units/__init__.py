"""composite_units – parse "5 ft 6 in" style composite measurements."""

from ._version import __version__
from .errors import (
    CompositeUnitsError,
    InvalidDurationError,
    MeasurementError,
    NumberFormatError,
    ParseError,
    UnknownUnitError,
)
from .measurement import Measurement
from .parsers import Length, QuantityKind, Time, Volume, Weight, parse

__all__ = [
    "__version__",
    "CompositeUnitsError",
    "InvalidDurationError",
    "Length",
    "Measurement",
    "MeasurementError",
    "NumberFormatError",
    "ParseError",
    "QuantityKind",
    "Time",
    "UnknownUnitError",
    "Volume",
    "Weight",
    "parse",
]
