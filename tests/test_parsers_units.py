import re

import pytest

from composite_units.errors import UnknownUnitError
from composite_units.parsers.units import (
    UNIT_ALIASES,
    QuantityKind,
    alias_pattern,
    aliases_for,
    canonical_unit,
)


@pytest.mark.parametrize(
    "kind, spelling, expected",
    [
        (QuantityKind.LENGTH, "'", "ft"),
        (QuantityKind.LENGTH, "feet", "ft"),
        (QuantityKind.LENGTH, '"', "in"),
        (QuantityKind.LENGTH, "metres", "m"),
        (QuantityKind.WEIGHT, "#", "lb"),
        (QuantityKind.WEIGHT, "pound-mass", "lb"),
        (QuantityKind.WEIGHT, "metric tonnes", "t"),
        (QuantityKind.VOLUME, "L", "l"),
        (QuantityKind.VOLUME, "mL", "ml"),
        (QuantityKind.TIME, "hr", "h"),
        (QuantityKind.TIME, "months", "mo"),
        ("time", "sec", "s"),
        (QuantityKind.LENGTH, "FT", None),
        (QuantityKind.LENGTH, "feets", None),
        (QuantityKind.TIME, "mins", None),
        (QuantityKind.VOLUME, "LITRE", None),
    ],
)
def test_canonical_unit(kind, spelling, expected) -> None:
    assert canonical_unit(kind, spelling) == expected


def test_aliases_for_returns_declared_spellings() -> None:
    assert aliases_for(QuantityKind.LENGTH, "ft") == frozenset({"'", "ft", "foot", "feet"})
    assert "pounds" in aliases_for("weight", "lb")


def test_aliases_for_unknown_unit() -> None:
    with pytest.raises(UnknownUnitError):
        aliases_for(QuantityKind.LENGTH, "furlong")
    with pytest.raises(KeyError):
        aliases_for(QuantityKind.VOLUME, "gal")


def test_alias_pattern_prefers_longest_spelling() -> None:
    pattern = alias_pattern(QuantityKind.LENGTH, "km")
    assert pattern == "(?:kilometers|kilometres|kilometer|kilometre|km)"
    for spelling in aliases_for(QuantityKind.LENGTH, "km"):
        assert re.fullmatch(pattern, spelling)


def test_alias_pattern_escapes_symbols() -> None:
    pattern = alias_pattern(QuantityKind.WEIGHT, "lb")
    assert re.fullmatch(pattern, "#")
    assert re.fullmatch(pattern, "pound-mass")
    assert not re.fullmatch(pattern, "pound mass")


def test_every_spelling_belongs_to_one_unit_per_kind() -> None:
    for kind, units in UNIT_ALIASES.items():
        seen = set()
        for spellings in units.values():
            assert spellings, f"{kind} declares a unit without spellings"
            assert seen.isdisjoint(spellings)
            seen.update(spellings)


def test_alias_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        UNIT_ALIASES[QuantityKind.LENGTH]["ft"] = frozenset({"foot"})  # type: ignore[index]


@pytest.mark.parametrize("value, expected", [("Length", QuantityKind.LENGTH), (" time ", QuantityKind.TIME)])
def test_quantity_kind_coerce(value, expected) -> None:
    assert QuantityKind.coerce(value) is expected
    assert QuantityKind.coerce(expected) is expected


def test_quantity_kind_coerce_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        QuantityKind.coerce("area")
