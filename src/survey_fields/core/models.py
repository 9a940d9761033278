"""Pydantic value types for the planar geometry engine."""

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AngularPoint(BaseModel):
    """Longitude/latitude pair, stored in radians.

    Latitude is not range checked. Values at or beyond the poles are accepted
    and turn into infinite or NaN planar coordinates on projection.
    """
    model_config = ConfigDict(frozen=True)

    lon: float
    lat: float

    @classmethod
    def from_degrees(cls, lon: float, lat: float) -> "AngularPoint":
        return cls(lon=math.radians(lon), lat=math.radians(lat))

    @property
    def lon_deg(self) -> float:
        return math.degrees(self.lon)

    @property
    def lat_deg(self) -> float:
        return math.degrees(self.lat)

    def as_degrees(self) -> tuple[float, float]:
        """Return (lon, lat) in degrees."""
        return (self.lon_deg, self.lat_deg)


class PlanarPoint(BaseModel):
    """Point in unit web-Mercator space (x = lon radians, y = asinh(tan(lat)))."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def __add__(self, other: "PlanarPoint") -> "PlanarPoint":
        return PlanarPoint(x=self.x + other.x, y=self.y + other.y)

    def __radd__(self, other) -> "PlanarPoint":
        # sum() starts from the integer 0
        if other == 0:
            return self
        return self.__add__(other)

    def __sub__(self, other: "PlanarPoint") -> "PlanarPoint":
        return PlanarPoint(x=self.x - other.x, y=self.y - other.y)

    def __mul__(self, k: float) -> "PlanarPoint":
        return PlanarPoint(x=self.x * k, y=self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> "PlanarPoint":
        return PlanarPoint(x=self.x / k, y=self.y / k)

    def distance(self, other: "PlanarPoint") -> float:
        diff = other - self
        return math.hypot(diff.x, diff.y)

    def slope(self, other: "PlanarPoint") -> float:
        """Return dy/dx towards ``other``.

        A vertical pair gives signed infinity, a coincident pair gives NaN.
        """
        diff = other - self
        if diff.x == 0:
            if diff.y == 0:
                return math.nan
            return math.copysign(math.inf, diff.y) * math.copysign(1.0, diff.x)
        return diff.y / diff.x


class ReferenceLine(BaseModel):
    """A surveyed line plus the interior field point that disambiguates crossings."""
    model_config = ConfigDict(frozen=True)

    start: AngularPoint
    end: AngularPoint
    field: AngularPoint
    bearing: float = 0.0


class BoundedLine(BaseModel):
    """Boundary-clipped line. ``west`` always precedes ``east``."""
    model_config = ConfigDict(frozen=True)

    west: AngularPoint
    east: AngularPoint

    def midpoint(self) -> AngularPoint:
        """Average of the two endpoints, taken in degrees."""
        return AngularPoint.from_degrees(
            (self.west.lon_deg + self.east.lon_deg) / 2,
            (self.west.lat_deg + self.east.lat_deg) / 2,
        )


class LatLonBox(BaseModel):
    """Axis-aligned box in degrees, as consumed by map overlays."""
    model_config = ConfigDict(frozen=True)

    north: float
    south: float
    east: float
    west: float


class FieldLayout(BaseModel):
    """Everything the renderer needs to draw one team's field."""
    team: str
    abbr: str = ""
    color: str = "#FFFFFF"
    line: BoundedLine
    field_box: LatLonBox
    field_bearing: float
    field_length_m: float = Field(ge=0)
    tessellation: list[AngularPoint] = Field(min_length=1)
    label_box: LatLonBox
    label_bearing: float
    label_region: LatLonBox
    center: Optional[AngularPoint] = None

    def summary(self) -> dict:
        return {
            "team": self.team,
            "west": list(self.line.west.as_degrees()),
            "east": list(self.line.east.as_degrees()),
            "field_length_m": round(self.field_length_m, 1),
            "field_bearing": round(self.field_bearing, 2),
            "label_bearing": self.label_bearing,
            "points": len(self.tessellation),
        }
