"""Select the composite format matching a string and combine its two parts."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .. import measurement
from ..errors import ParseError
from ..measurement import Measurement
from .duration import parse_duration
from .formats import CompositeFormat, formats_for
from .numbers import NumberLiteral, classify_number
from .units import QuantityKind

__all__ = [
    "Length",
    "ParseAttempt",
    "Time",
    "Volume",
    "Weight",
    "match",
    "parse",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseAttempt:
    """Segmentation of a string by the first composite format that matched."""

    format: CompositeFormat
    major: Tuple[NumberLiteral, str]
    minor: Tuple[NumberLiteral, str]

    def combine(self) -> Measurement:
        (major_literal, major_unit), (minor_literal, minor_unit) = self.major, self.minor
        return measurement.add(
            measurement.construct(major_literal.raw, major_unit),
            measurement.construct(minor_literal.raw, minor_unit),
        )


def _check_input(text: object) -> str:
    if not isinstance(text, str):
        raise TypeError(f"Expected a string, got {type(text).__name__}")
    return text


def match(text: str, kind: Union[QuantityKind, str]) -> Optional[ParseAttempt]:
    """Return how the first matching composite format splits ``text``."""

    text = _check_input(text)
    for fmt in formats_for(kind):
        literals = fmt.match(text)
        if literals is None:
            continue
        major_raw, minor_raw = literals
        logger.debug("%r matched format %s", text, fmt.name)
        return ParseAttempt(
            format=fmt,
            major=(classify_number(major_raw), fmt.major_unit),
            minor=(classify_number(minor_raw), fmt.minor_unit),
        )
    return None


def parse(text: str, kind: Union[QuantityKind, str]) -> Measurement:
    """Parse ``text`` as a composite measurement of ``kind``.

    Raises
    ------
    ParseError
        When no composite format (nor the duration format for time) matches.
    InvalidDurationError
        When a time string has the duration skeleton but no field.
    MeasurementError
        When a literal cannot be turned into a magnitude.
    """

    kind = QuantityKind.coerce(kind)
    attempt = match(text, kind)
    if attempt is not None:
        return attempt.combine()

    if kind is QuantityKind.TIME:
        duration = parse_duration(text)
        if duration is not None:
            return duration

    logger.debug("No %s format matched %r", kind.value, text)
    raise ParseError(text)


class _KindParser:
    kind: QuantityKind

    @classmethod
    def parse(cls, text: str) -> Measurement:
        return parse(text, cls.kind)

    @classmethod
    def formats(cls) -> Tuple[CompositeFormat, ...]:
        return formats_for(cls.kind)


class Length(_KindParser):
    """Parser for ``foot-inch``, ``kilometre-metre``, ``metre-centimetre`` and ``mile-yard``.

    >>> str(Length.parse("5 ft 6 in"))
    '5.5 ft'
    """

    kind = QuantityKind.LENGTH


class Weight(_KindParser):
    """Parser for ``pound-ounce``, ``stone-pound``, ``kilogramme-gramme`` and ``tonne-kilogramme``."""

    kind = QuantityKind.WEIGHT


class Time(_KindParser):
    """Parser for ``hour-minute``, ``minute-second``, ``week-day``, ``month-day`` and durations.

    >>> str(Time.parse("12:60:3600,360000000"))
    '14.1 h'
    """

    kind = QuantityKind.TIME


class Volume(_KindParser):
    """Parser for ``litre-millilitre``."""

    kind = QuantityKind.VOLUME
