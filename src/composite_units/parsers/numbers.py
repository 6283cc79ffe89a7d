"""Numeric literal grammar shared by every composite format."""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..errors import NumberFormatError

__all__ = [
    "COMPLEX_PATTERN",
    "NUMBER_PATTERN",
    "RATIONAL_PATTERN",
    "REAL_PATTERN",
    "SCIENTIFIC_PATTERN",
    "NumberKind",
    "NumberLiteral",
    "classify_number",
    "is_number",
]

_EXPONENT = r"(?:[Ee][+-]?\d+)"
_UNSIGNED_SCIENTIFIC = rf"\d*\.?\d+{_EXPONENT}?"

SCIENTIFIC_PATTERN = rf"[+-]?{_UNSIGNED_SCIENTIFIC}"
# The imaginary part needs its sign, it is what separates it from the real part.
COMPLEX_PATTERN = rf"{SCIENTIFIC_PATTERN}[+-]{_UNSIGNED_SCIENTIFIC}i"
RATIONAL_PATTERN = r"(?:[+-]?\d+\s+)?\d+/\d+"
REAL_PATTERN = r"[+-]?\d+"

# Alternation order is the precedence order.
NUMBER_PATTERN = rf"(?:{SCIENTIFIC_PATTERN}|{COMPLEX_PATTERN}|{RATIONAL_PATTERN}|{REAL_PATTERN})"


class NumberKind(str, Enum):
    """Literal shapes recognised by the grammar, in precedence order."""

    SCIENTIFIC = "scientific"
    COMPLEX = "complex"
    RATIONAL = "rational"
    REAL = "real"


@dataclass(frozen=True)
class NumberLiteral:
    """Structural view of a numeric literal. The value is never evaluated here."""

    kind: NumberKind
    raw: str
    sign: Optional[str] = None
    integer: Optional[str] = None
    fraction: Optional[str] = None
    exponent: Optional[str] = None
    real: Optional[str] = None
    imaginary: Optional[str] = None
    whole: Optional[str] = None
    numerator: Optional[str] = None
    denominator: Optional[str] = None

    @property
    def is_mixed(self) -> bool:
        return self.kind is NumberKind.RATIONAL and self.whole is not None


_SCIENTIFIC_RE = re.compile(
    r"(?P<sign>[+-])?(?P<mantissa>\d*\.?\d+)(?:[Ee](?P<exponent>[+-]?\d+))?"
)
_COMPLEX_RE = re.compile(rf"(?P<real>{SCIENTIFIC_PATTERN})(?P<imaginary>[+-]{_UNSIGNED_SCIENTIFIC})i")
_RATIONAL_RE = re.compile(r"(?:(?P<whole>[+-]?\d+)\s+)?(?P<numerator>\d+)/(?P<denominator>\d+)")
_REAL_RE = re.compile(r"(?P<sign>[+-])?(?P<digits>\d+)")


def _split_mantissa(mantissa: str) -> Tuple[Optional[str], Optional[str]]:
    if "." in mantissa:
        integer, fraction = mantissa.split(".", 1)
        return integer or None, fraction
    return mantissa, None


def _scientific(raw: str, match: re.Match[str]) -> NumberLiteral:
    integer, fraction = _split_mantissa(match.group("mantissa"))
    return NumberLiteral(
        kind=NumberKind.SCIENTIFIC,
        raw=raw,
        sign=match.group("sign"),
        integer=integer,
        fraction=fraction,
        exponent=match.group("exponent"),
    )


def _complex(raw: str, match: re.Match[str]) -> NumberLiteral:
    real = match.group("real")
    return NumberLiteral(
        kind=NumberKind.COMPLEX,
        raw=raw,
        sign=real[0] if real[0] in "+-" else None,
        real=real,
        imaginary=match.group("imaginary"),
    )


def _rational(raw: str, match: re.Match[str]) -> NumberLiteral:
    whole = match.group("whole")
    return NumberLiteral(
        kind=NumberKind.RATIONAL,
        raw=raw,
        sign=whole[0] if whole and whole[0] in "+-" else None,
        whole=whole,
        numerator=match.group("numerator"),
        denominator=match.group("denominator"),
    )


def _real(raw: str, match: re.Match[str]) -> NumberLiteral:
    return NumberLiteral(
        kind=NumberKind.REAL,
        raw=raw,
        sign=match.group("sign"),
        integer=match.group("digits"),
    )


_CLASSIFIERS = (
    (_SCIENTIFIC_RE, _scientific),
    (_COMPLEX_RE, _complex),
    (_RATIONAL_RE, _rational),
    (_REAL_RE, _real),
)


def classify_number(text: str) -> NumberLiteral:
    """Return the first literal shape that matches the whole of ``text``."""

    for pattern, build in _CLASSIFIERS:
        match = pattern.fullmatch(text)
        if match is not None:
            return build(text, match)
    raise NumberFormatError(text)


def is_number(text: str) -> bool:
    """Return ``True`` when ``text`` is exactly one numeric literal."""

    try:
        classify_number(text)
    except NumberFormatError:
        return False
    return True
