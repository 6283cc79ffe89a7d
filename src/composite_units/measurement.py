"""Minimal measurement values used to combine the parts of a composite string.

Magnitudes are kept exact as :class:`fractions.Fraction` whenever the literal
allows it, complex literals fall back to :class:`complex`. Conversion ratios
only cover the units that appear in the composite and duration formats.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Dict, Tuple, Union

from .errors import MeasurementError

__all__ = [
    "MAX_EXPONENT",
    "Magnitude",
    "Measurement",
    "add",
    "construct",
    "format_magnitude",
    "parse_magnitude",
    "render",
    "unit_group",
]

Magnitude = Union[Fraction, complex]

_POUND = Fraction(45359237, 100_000_000)
_DAY = Fraction(86400)

# unit symbol -> (group, size expressed in the group's base unit)
_UNITS: Dict[str, Tuple[str, Fraction]] = {
    "m": ("length", Fraction(1)),
    "cm": ("length", Fraction(1, 100)),
    "km": ("length", Fraction(1000)),
    "in": ("length", Fraction(254, 10_000)),
    "ft": ("length", Fraction(3048, 10_000)),
    "yd": ("length", Fraction(9144, 10_000)),
    "mi": ("length", Fraction(1_609_344, 1000)),
    "kg": ("weight", Fraction(1)),
    "g": ("weight", Fraction(1, 1000)),
    "t": ("weight", Fraction(1000)),
    "lb": ("weight", _POUND),
    "oz": ("weight", _POUND / 16),
    "st": ("weight", _POUND * 14),
    "l": ("volume", Fraction(1)),
    "ml": ("volume", Fraction(1, 1000)),
    "s": ("time", Fraction(1)),
    "μs": ("time", Fraction(1, 1_000_000)),
    "min": ("time", Fraction(60)),
    "h": ("time", Fraction(3600)),
    "d": ("time", _DAY),
    "wk": ("time", _DAY * 7),
    # One twelfth of a mean Gregorian year.
    "mo": ("time", _DAY * Fraction(3_652_425, 120_000)),
}

_MIXED_RE = re.compile(r"(?P<sign>[+-]?)(?P<whole>\d+)\s+(?P<numerator>\d+)/(?P<denominator>\d+)")
_EXPONENT_RE = re.compile(r"[Ee][+-]?0*(?P<digits>\d+)")

# Larger exponents would make Fraction() expand the literal into huge integers.
MAX_EXPONENT = 1000


def _check_exponents(text: str) -> None:
    for found in _EXPONENT_RE.finditer(text):
        digits = found.group("digits")
        if len(digits) > len(str(MAX_EXPONENT)) or int(digits) > MAX_EXPONENT:
            raise MeasurementError(f"Exponent out of range in {text!r} (limit is {MAX_EXPONENT})")


def _check_range(magnitude: Magnitude, unit: str) -> None:
    try:
        parts = (magnitude.real, magnitude.imag) if isinstance(magnitude, complex) else (float(magnitude),)
    except OverflowError:
        parts = (math.inf,)
    if not all(math.isfinite(part) for part in parts):
        raise MeasurementError(f"Magnitude of {unit!r} measurement is outside the float range")


def _lookup(unit: str) -> Tuple[str, Fraction]:
    try:
        return _UNITS[unit]
    except KeyError:
        raise MeasurementError(f"Unsupported unit: {unit!r}") from None


def unit_group(unit: str) -> str:
    """Return the dimension (``length``, ``weight``...) ``unit`` belongs to."""

    return _lookup(unit)[0]


def parse_magnitude(value: Union[str, int, float, Decimal, Fraction, complex]) -> Magnitude:
    """Turn a literal (or an already numeric value) into an exact magnitude."""

    if isinstance(value, complex):
        return value
    if isinstance(value, (int, float, Decimal, Fraction)):
        try:
            return Fraction(value)
        except (OverflowError, ValueError) as exc:
            raise MeasurementError(f"Invalid magnitude {value!r}: {exc}") from exc
    if not isinstance(value, str):
        raise MeasurementError(f"Unsupported magnitude type: {type(value).__name__}")

    text = value.strip()
    if not text:
        raise MeasurementError("Empty magnitude")
    _check_exponents(text)
    try:
        if text.endswith("i"):
            return complex(text[:-1] + "j")
        mixed = _MIXED_RE.fullmatch(text)
        if mixed is not None:
            amount = int(mixed.group("whole")) + Fraction(
                int(mixed.group("numerator")), int(mixed.group("denominator"))
            )
            return -amount if mixed.group("sign") == "-" else amount
        return Fraction(text)
    except (ValueError, ZeroDivisionError) as exc:
        raise MeasurementError(f"Invalid magnitude {value!r}: {exc}") from exc


def _format_real(number: float) -> str:
    return repr(float(number))


@dataclass(frozen=True)
class Measurement:
    """A magnitude paired with a unit symbol."""

    magnitude: Magnitude
    unit: str

    def __post_init__(self) -> None:
        _lookup(self.unit)
        _check_range(self.magnitude, self.unit)

    def convert_to(self, unit: str) -> "Measurement":
        source_group, source_size = _lookup(self.unit)
        target_group, target_size = _lookup(unit)
        if source_group != target_group:
            raise MeasurementError(
                f"Cannot convert {self.unit!r} ({source_group}) to {unit!r} ({target_group})"
            )
        ratio = source_size / target_size
        if isinstance(self.magnitude, complex):
            return Measurement(self.magnitude * float(ratio), unit)
        return Measurement(self.magnitude * ratio, unit)

    def __add__(self, other: object) -> "Measurement":
        if not isinstance(other, Measurement):
            return NotImplemented
        return add(self, other)

    def __str__(self) -> str:
        return render(self)


def construct(magnitude: Union[str, int, float, Decimal, Fraction, complex], unit: str) -> Measurement:
    """Build a :class:`Measurement` from a raw literal and a unit symbol."""

    return Measurement(parse_magnitude(magnitude), unit)


def add(first: Measurement, second: Measurement) -> Measurement:
    """Sum two measurements, expressed in the unit of ``first``."""

    converted = second.convert_to(first.unit)
    return Measurement(first.magnitude + converted.magnitude, first.unit)


def format_magnitude(magnitude: Magnitude) -> str:
    """Render a magnitude as a float literal, complex ones in the ``a+bi`` form."""

    if isinstance(magnitude, complex):
        sign = "-" if magnitude.imag < 0 else "+"
        return f"{_format_real(magnitude.real)}{sign}{_format_real(abs(magnitude.imag))}i"
    return _format_real(magnitude)


def render(measurement: Measurement) -> str:
    """Render ``"<magnitude> <unit>"``."""

    return f"{format_magnitude(measurement.magnitude)} {measurement.unit}"
