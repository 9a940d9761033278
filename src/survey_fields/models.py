"""Pydantic input models for boundary, roster and survey data (degrees)."""

import re

from pydantic import BaseModel, Field, field_validator

from survey_fields.core.models import AngularPoint, ReferenceLine


class Coordinate(BaseModel):
    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)

    def to_angular(self) -> AngularPoint:
        return AngularPoint.from_degrees(self.lon, self.lat)


class Team(BaseModel):
    name: str = Field(min_length=1)
    abbr: str = ""
    color: str = "#FFFFFF"

    @field_validator("color", mode="before")
    @classmethod
    def validate_and_normalize_hex(cls, v: str) -> str:
        if not isinstance(v, str):
            raise ValueError("Color must be a string")
        v = v.strip()
        if not v.startswith("#"):
            v = f"#{v}"
        if not re.match(r'^#[0-9A-Fa-f]{6}$', v):
            raise ValueError(f"Invalid hex color '{v}'. Must be #RRGGBB format.")
        return f"#{v[1:].upper()}"


class Survey(BaseModel):
    """A team's surveyed line, its field point and the label bearing."""
    team: str = Field(min_length=1)
    start: Coordinate
    end: Coordinate
    field: Coordinate
    bearing: float = Field(default=0.0, ge=-360, le=360)

    def to_reference_line(self) -> ReferenceLine:
        return ReferenceLine(
            start=self.start.to_angular(),
            end=self.end.to_angular(),
            field=self.field.to_angular(),
            bearing=self.bearing,
        )
