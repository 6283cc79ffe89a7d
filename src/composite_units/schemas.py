"""Pydantic models describing parse results and registered formats."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .measurement import Measurement, format_magnitude
from .parsers.formats import CompositeFormat
from .parsers.units import aliases_for

__all__ = ["BatchRecord", "FormatInfo", "ParseOutcome"]


class ParseOutcome(BaseModel):
    """Serialisable view of one successful parse."""

    input: str = Field(..., description="String that was parsed")
    kind: str = Field(..., description="Quantity kind the string was parsed as")
    format: str = Field(..., description="Name of the composite format, or 'duration'")
    magnitude: str = Field(..., description="Magnitude rendered as a float or a+bi literal")
    unit: str = Field(..., description="Unit symbol of the combined measurement")
    rendered: str = Field(..., description="'<magnitude> <unit>' rendering")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_measurement(cls, text: str, kind: str, format_name: str, result: Measurement) -> "ParseOutcome":
        return cls(
            input=text,
            kind=kind,
            format=format_name,
            magnitude=format_magnitude(result.magnitude),
            unit=result.unit,
            rendered=str(result),
        )


class BatchRecord(BaseModel):
    """One line of batch output."""

    line: int
    input: str
    status: str = Field(..., description="'ok' or 'error'")
    result: Optional[ParseOutcome] = None
    error: Optional[str] = None
    error_type: Optional[str] = None


class FormatInfo(BaseModel):
    """Description of a registered composite format."""

    name: str
    kind: str
    major_unit: str
    minor_unit: str
    major_aliases: List[str] = Field(default_factory=list)
    minor_aliases: List[str] = Field(default_factory=list)
    pattern: str

    @classmethod
    def from_format(cls, fmt: CompositeFormat) -> "FormatInfo":
        return cls(
            name=fmt.name,
            kind=fmt.kind.value,
            major_unit=fmt.major_unit,
            minor_unit=fmt.minor_unit,
            major_aliases=sorted(aliases_for(fmt.kind, fmt.major_unit)),
            minor_aliases=sorted(aliases_for(fmt.kind, fmt.minor_unit)),
            pattern=fmt.pattern.pattern,
        )
