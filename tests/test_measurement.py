from fractions import Fraction

import pytest

from composite_units.errors import MeasurementError
from composite_units.measurement import (
    MAX_EXPONENT,
    Measurement,
    add,
    construct,
    format_magnitude,
    parse_magnitude,
    render,
    unit_group,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12", Fraction(12)),
        ("+12", Fraction(12)),
        ("-0.5", Fraction(-1, 2)),
        (".25", Fraction(1, 4)),
        ("1e1", Fraction(10)),
        ("1E+01", Fraction(10)),
        ("5e-1", Fraction(1, 2)),
        ("3/4", Fraction(3, 4)),
        ("1 1/2", Fraction(3, 2)),
        ("-1 1/2", Fraction(-3, 2)),
        ("1+1i", complex(1, 1)),
        ("-1-1i", complex(-1, -1)),
        (7, Fraction(7)),
        (Fraction(1, 3), Fraction(1, 3)),
    ],
)
def test_parse_magnitude(raw, expected) -> None:
    assert parse_magnitude(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", "abc", "1/0", "1 1/0", "1+i+i"])
def test_parse_magnitude_rejects(raw: str) -> None:
    with pytest.raises(MeasurementError):
        parse_magnitude(raw)


def test_parse_magnitude_rejects_unsupported_types() -> None:
    with pytest.raises(MeasurementError):
        parse_magnitude([1, 2])  # type: ignore[arg-type]


def test_add_converts_into_first_unit() -> None:
    total = add(construct("1", "ft"), construct("12", "in"))
    assert total == Measurement(Fraction(2), "ft")
    assert construct("1", "h") + construct("30", "min") == Measurement(Fraction(3, 2), "h")


def test_add_rejects_incompatible_units() -> None:
    with pytest.raises(MeasurementError):
        add(construct("1", "ft"), construct("1", "kg"))


def test_unknown_unit() -> None:
    with pytest.raises(MeasurementError):
        construct("1", "furlong")


def test_convert_to() -> None:
    assert construct("1", "mi").convert_to("yd") == Measurement(Fraction(1760), "yd")
    assert construct("1", "st").convert_to("lb") == Measurement(Fraction(14), "lb")
    assert unit_group("μs") == "time"


@pytest.mark.parametrize(
    "measurement, expected",
    [
        (Measurement(Fraction(11, 2), "ft"), "5.5 ft"),
        (Measurement(Fraction(3), "ft"), "3.0 ft"),
        (Measurement(Fraction(-1, 2), "h"), "-0.5 h"),
        (Measurement(complex(1.5, 2), "m"), "1.5+2.0i m"),
        (Measurement(complex(1, -2), "m"), "1.0-2.0i m"),
    ],
)
def test_render(measurement: Measurement, expected: str) -> None:
    assert render(measurement) == expected
    assert str(measurement) == expected


def test_format_magnitude() -> None:
    assert format_magnitude(Fraction(141, 10)) == "14.1"


def test_magnitude_beyond_float_range_is_rejected() -> None:
    with pytest.raises(MeasurementError, match="outside the float range"):
        construct("1e400", "ft")
    with pytest.raises(MeasurementError):
        construct("1e400+1i", "ft")
    with pytest.raises(MeasurementError):
        construct(float("inf"), "ft")
    assert str(construct("1e300", "ft")) == "1e+300 ft"
    assert str(construct("1e-400", "ft")) == "0.0 ft"


def test_oversized_exponent_is_rejected_before_expansion() -> None:
    with pytest.raises(MeasurementError, match="Exponent out of range"):
        parse_magnitude("1e3000000")
    with pytest.raises(MeasurementError, match="Exponent out of range"):
        parse_magnitude("1e-3000000")
    with pytest.raises(MeasurementError, match="Exponent out of range"):
        parse_magnitude("1e" + "9" * 5000)
    assert parse_magnitude(f"1e{MAX_EXPONENT}") == Fraction(10**MAX_EXPONENT)
    assert parse_magnitude("1e0001") == Fraction(10)
