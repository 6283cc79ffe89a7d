import pytest

from composite_units.errors import InvalidDurationError
from composite_units.parsers.duration import DurationFields, match_duration, parse_duration


def test_match_duration_fields() -> None:
    assert match_duration("12:60:3600,360000000") == DurationFields("12", "60", "3600", "360000000")
    assert match_duration("12:60:") == DurationFields("12", "60", None, None)
    assert match_duration(":30:") == DurationFields(None, "30", None, None)
    assert match_duration("::,5") == DurationFields(None, None, None, "5")


@pytest.mark.parametrize(
    "text",
    ["12:60", "12:60,3600:360000000", "12:60,3600,360000000", "1/2:30:", "1.5:30:", "12:60:3600,", "a:b:c"],
)
def test_match_duration_rejects(text: str) -> None:
    assert match_duration(text) is None
    assert parse_duration(text) is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("12:60:3600,360000000", "14.1 h"),
        ("12:60:3600", "14.0 h"),
        ("12:60:", "13.0 h"),
        (":90:", "1.5 h"),
        ("::5400", "1.5 h"),
        ("-1:30:", "-0.5 h"),
    ],
)
def test_parse_duration(text: str, expected: str) -> None:
    assert str(parse_duration(text)) == expected


def test_empty_duration_is_invalid() -> None:
    with pytest.raises(InvalidDurationError) as excinfo:
        parse_duration("::")
    assert excinfo.value.string == "::"
