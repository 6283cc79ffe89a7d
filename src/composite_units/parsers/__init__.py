"""Parser primitives for composite measurement strings."""

from .dispatcher import Length, ParseAttempt, Time, Volume, Weight, match, parse
from .duration import DurationFields, match_duration, parse_duration
from .formats import CompositeFormat, build_format, formats_for
from .numbers import NUMBER_PATTERN, NumberKind, NumberLiteral, classify_number, is_number
from .units import QuantityKind, alias_pattern, aliases_for, canonical_unit

__all__ = [
    "CompositeFormat",
    "DurationFields",
    "Length",
    "NUMBER_PATTERN",
    "NumberKind",
    "NumberLiteral",
    "ParseAttempt",
    "QuantityKind",
    "Time",
    "Volume",
    "Weight",
    "alias_pattern",
    "aliases_for",
    "build_format",
    "canonical_unit",
    "classify_number",
    "formats_for",
    "is_number",
    "match",
    "match_duration",
    "parse",
    "parse_duration",
]
