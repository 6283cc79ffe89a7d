"""Accepted spellings of the units used by composite measurements."""
from __future__ import annotations

import re
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional, Union

from ..errors import UnknownUnitError

__all__ = [
    "QuantityKind",
    "UNIT_ALIASES",
    "alias_pattern",
    "aliases_for",
    "canonical_unit",
]


class QuantityKind(str, Enum):
    """Physical dimension a composite measurement belongs to."""

    LENGTH = "length"
    WEIGHT = "weight"
    TIME = "time"
    VOLUME = "volume"

    @classmethod
    def coerce(cls, value: Union["QuantityKind", str]) -> "QuantityKind":
        """Accept an enum member or a case-insensitive kind name."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        choices = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown quantity kind {value!r}; expected one of: {choices}")


# Spellings are matched exactly as written here, plurals included.
_CANONICAL_UNITS: Dict[QuantityKind, Dict[str, FrozenSet[str]]] = {
    QuantityKind.LENGTH: {
        "ft": frozenset({"'", "ft", "foot", "feet"}),
        "in": frozenset({'"', "in", "inch", "inches"}),
        "m": frozenset({"m", "meter", "meters", "metre", "metres"}),
        "cm": frozenset({"cm", "centimeter", "centimeters", "centimetre", "centimetres"}),
        "km": frozenset({"km", "kilometer", "kilometers", "kilometre", "kilometres"}),
        "mi": frozenset({"mi", "mile", "miles"}),
        "yd": frozenset({"yd", "yard", "yards"}),
    },
    QuantityKind.WEIGHT: {
        "lb": frozenset({"#", "lb", "lbs", "lbm", "pound-mass", "pound", "pounds"}),
        "oz": frozenset({"oz", "ounce", "ounces"}),
        "st": frozenset({"st", "stone", "stones"}),
        "g": frozenset({"g", "gram", "grams", "gramme", "grammes"}),
        "kg": frozenset({"kg", "kilogram", "kilograms", "kilogramme", "kilogrammes"}),
        "t": frozenset({"t", "tonne", "tonnes", "metric tonne", "metric tonnes"}),
    },
    QuantityKind.VOLUME: {
        "l": frozenset({"l", "L", "liter", "liters", "litre", "litres"}),
        "ml": frozenset({"ml", "mL", "milliliter", "milliliters", "millilitre", "millilitres"}),
    },
    QuantityKind.TIME: {
        "h": frozenset({"h", "hr", "hour", "hours"}),
        "min": frozenset({"min", "minute", "minutes"}),
        "s": frozenset({"s", "sec", "second", "seconds"}),
        "wk": frozenset({"wk", "week", "weeks"}),
        "d": frozenset({"d", "day", "days"}),
        "mo": frozenset({"mo", "month", "months"}),
    },
}

UNIT_ALIASES: Mapping[QuantityKind, Mapping[str, FrozenSet[str]]] = MappingProxyType(
    {kind: MappingProxyType(units) for kind, units in _CANONICAL_UNITS.items()}
)

_SPELLING_INDEX: Dict[QuantityKind, Dict[str, str]] = {
    kind: {spelling: unit for unit, spellings in units.items() for spelling in spellings}
    for kind, units in _CANONICAL_UNITS.items()
}


def aliases_for(kind: Union[QuantityKind, str], unit: str) -> FrozenSet[str]:
    """Return every spelling accepted for ``unit`` within ``kind``."""

    kind = QuantityKind.coerce(kind)
    try:
        return UNIT_ALIASES[kind][unit]
    except KeyError:
        raise UnknownUnitError(f"No aliases declared for unit {unit!r} ({kind.value})") from None


def canonical_unit(kind: Union[QuantityKind, str], spelling: str) -> Optional[str]:
    """Return the canonical symbol of ``spelling`` or ``None`` when unknown."""

    return _SPELLING_INDEX[QuantityKind.coerce(kind)].get(spelling)


def alias_pattern(kind: Union[QuantityKind, str], unit: str) -> str:
    """Build a non-capturing alternation of the spellings of ``unit``.

    Longer spellings come first so that ``kilometres`` is never shadowed by
    ``kilometre``; ties are sorted alphabetically to keep the output stable.
    """

    spellings = sorted(aliases_for(kind, unit), key=lambda item: (-len(item), item))
    return "(?:" + "|".join(re.escape(spelling) for spelling in spellings) + ")"
