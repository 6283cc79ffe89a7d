"""Registry of the two-unit composite formats accepted for each quantity kind."""
from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Optional, Sequence, Tuple, Union

from .numbers import NUMBER_PATTERN, is_number
from .units import QuantityKind, alias_pattern

__all__ = ["CompositeFormat", "build_format", "formats_for"]


@dataclass(frozen=True)
class CompositeFormat:
    """A ``<number> <major unit> <number> <minor unit>`` format."""

    name: str
    kind: QuantityKind
    major_unit: str
    minor_unit: str
    pattern: re.Pattern[str]
    leading_space: bool = False

    def match(self, text: str) -> Optional[Tuple[str, str]]:
        """Return the raw major and minor literals when ``text`` fully matches."""

        found = self.pattern.fullmatch(text)
        if found is None:
            return None
        major, minor = found.group("major"), found.group("minor")
        if not (is_number(major) and is_number(minor)):
            return None
        return major, minor


@dataclass(frozen=True)
class _Declaration:
    name: str
    major_unit: str
    minor_unit: str
    leading_space: bool = False


# Order matters: the dispatcher returns the first format that matches.
_DECLARATIONS: Dict[QuantityKind, Sequence[_Declaration]] = {
    QuantityKind.LENGTH: (
        _Declaration("foot_inch", "ft", "in"),
        _Declaration("kilometre_metre", "km", "m"),
        _Declaration("metre_centimetre", "m", "cm"),
        _Declaration("mile_yard", "mi", "yd"),
    ),
    QuantityKind.WEIGHT: (
        _Declaration("pound_ounce", "lb", "oz"),
        _Declaration("stone_pound", "st", "lb"),
        _Declaration("kilogramme_gramme", "kg", "g"),
        _Declaration("tonne_kilogramme", "t", "kg"),
    ),
    QuantityKind.VOLUME: (
        _Declaration("litre_millilitre", "l", "ml"),
    ),
    QuantityKind.TIME: (
        _Declaration("hour_minute", "h", "min"),
        _Declaration("minute_second", "min", "s"),
        _Declaration("week_day", "wk", "d"),
        _Declaration("month_day", "mo", "d", leading_space=True),
    ),
}


def build_format(
    kind: Union[QuantityKind, str],
    name: str,
    major_unit: str,
    minor_unit: str,
    *,
    leading_space: bool = False,
) -> CompositeFormat:
    """Compile a composite format from the alias tables of ``kind``."""

    kind = QuantityKind.coerce(kind)
    major_gap = r"\s+" if leading_space else r"\s*"
    source = (
        rf"(?P<major>{NUMBER_PATTERN}){major_gap}{alias_pattern(kind, major_unit)}"
        rf"\s*(?P<minor>{NUMBER_PATTERN})\s*{alias_pattern(kind, minor_unit)}"
    )
    return CompositeFormat(
        name=name,
        kind=kind,
        major_unit=major_unit,
        minor_unit=minor_unit,
        pattern=re.compile(source),
        leading_space=leading_space,
    )


@lru_cache(maxsize=None)
def _compile(kind: QuantityKind) -> Tuple[CompositeFormat, ...]:
    return tuple(
        build_format(
            kind,
            item.name,
            item.major_unit,
            item.minor_unit,
            leading_space=item.leading_space,
        )
        for item in _DECLARATIONS[kind]
    )


def formats_for(kind: Union[QuantityKind, str]) -> Tuple[CompositeFormat, ...]:
    """Return the formats registered for ``kind`` in declaration order."""

    return _compile(QuantityKind.coerce(kind))
