"""Colon separated ``hour:minute:second,fraction`` durations."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from .. import measurement
from ..errors import InvalidDurationError
from ..measurement import Measurement
from .numbers import REAL_PATTERN

__all__ = ["DURATION_UNITS", "DurationFields", "match_duration", "parse_duration"]

logger = logging.getLogger(__name__)

DURATION_UNITS = ("h", "min", "s", "μs")

# The second colon is part of the skeleton even when the seconds are omitted.
_DURATION_RE = re.compile(
    rf"(?P<hour>{REAL_PATTERN})?:(?P<minute>{REAL_PATTERN})?:(?P<second>{REAL_PATTERN})?"
    rf"(?:,(?P<fraction>{REAL_PATTERN}))?"
)


@dataclass(frozen=True)
class DurationFields:
    """Raw fields of a duration; ``None`` marks an omitted field."""

    hour: Optional[str]
    minute: Optional[str]
    second: Optional[str]
    fraction: Optional[str]

    def as_tuple(self) -> tuple[Optional[str], ...]:
        return (self.hour, self.minute, self.second, self.fraction)

    @property
    def is_empty(self) -> bool:
        return all(field is None for field in self.as_tuple())


def match_duration(text: str) -> Optional[DurationFields]:
    """Return the duration fields when ``text`` has the duration skeleton."""

    found = _DURATION_RE.fullmatch(text)
    if found is None:
        return None
    return DurationFields(
        hour=found.group("hour"),
        minute=found.group("minute"),
        second=found.group("second"),
        fraction=found.group("fraction"),
    )


def parse_duration(text: str) -> Optional[Measurement]:
    """Sum the four duration fields into hours.

    Returns ``None`` when ``text`` is not shaped like a duration and raises
    :class:`InvalidDurationError` when the skeleton matched without any field.
    """

    fields = match_duration(text)
    if fields is None:
        return None
    if fields.is_empty:
        raise InvalidDurationError(text)

    parts = [
        measurement.construct(raw if raw is not None else "0", unit)
        for raw, unit in zip(fields.as_tuple(), DURATION_UNITS)
    ]
    total = parts[0]
    for part in parts[1:]:
        total = measurement.add(total, part)
    logger.debug("Parsed duration %r as %s", text, total)
    return total
