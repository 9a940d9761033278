"""Infinite lines and bounded segments in planar (Mercator) space.

Absence of a result is expressed as ``None``: parallel or near-parallel
lines, crossings outside a segment's span.
"""

import math
import sys
from typing import Optional

import numpy as np
from pydantic import BaseModel, ConfigDict

from .models import AngularPoint, PlanarPoint
from .projection import to_angular_array

# Planar step along a tessellated segment, before slope compensation.
TESSELLATION_STEP = 0.0005


class InfiniteLine(BaseModel):
    """Line y = slope * x + y_intercept.

    Vertical lines have an infinite slope; their y_intercept is meaningless
    and x_intercept holds the abscissa instead.
    """
    model_config = ConfigDict(frozen=True)

    slope: float
    y_intercept: float
    x_intercept: Optional[float] = None

    @classmethod
    def from_points(cls, start: PlanarPoint, end: PlanarPoint) -> "InfiniteLine":
        return cls.from_slope(start.slope(end), start)

    @classmethod
    def from_slope(cls, slope: float, point: PlanarPoint) -> "InfiniteLine":
        if math.isinf(slope):
            return cls(slope=slope, y_intercept=math.nan, x_intercept=point.x)
        return cls(slope=slope, y_intercept=point.y - slope * point.x)

    @property
    def is_vertical(self) -> bool:
        return math.isinf(self.slope)

    def y_at(self, x: float) -> float:
        return self.slope * x + self.y_intercept

    def intersection(self, other: "InfiniteLine") -> Optional[PlanarPoint]:
        """Crossing point of two infinite lines, or None when (nearly) parallel."""
        if self.is_vertical or other.is_vertical:
            if self.is_vertical and other.is_vertical:
                return None
            vertical, sloped = (self, other) if self.is_vertical else (other, self)
            x = vertical.x_intercept
            return PlanarPoint(x=x, y=sloped.y_at(x))

        diff = self.slope - other.slope
        threshold = sys.float_info.epsilon * max(abs(self.slope), abs(other.slope))
        if diff == 0 or abs(diff) < threshold:
            return None
        x = (other.y_intercept - self.y_intercept) / diff
        return PlanarPoint(x=x, y=self.y_at(x))


class Segment(BaseModel):
    """Bounded piece of a line between ``a`` and ``b`` (in no particular x order)."""
    model_config = ConfigDict(frozen=True)

    a: PlanarPoint
    b: PlanarPoint

    def as_line(self) -> InfiniteLine:
        return InfiniteLine.from_points(self.a, self.b)

    def intersection(self, line: InfiniteLine) -> Optional[PlanarPoint]:
        """Crossing of ``line`` with this segment, restricted to the segment's span."""
        crossing = self.as_line().intersection(line)
        if crossing is None:
            return None
        if not min(self.a.x, self.b.x) <= crossing.x <= max(self.a.x, self.b.x):
            return None
        # The x span of a vertical segment is a single value; bound it by y.
        if self.a.x == self.b.x and not (
            min(self.a.y, self.b.y) <= crossing.y <= max(self.a.y, self.b.y)
        ):
            return None
        return crossing

    def sample(self) -> list[PlanarPoint]:
        """Walk the segment from its low-x end to its high-x end.

        Steps are ``0.0005 / sqrt(slope**2 + 1)`` in x so that they stay
        roughly even in combined x/y size. Every sample lies exactly on the
        segment's line, and the high-x end is always the final sample.
        """
        if self.a == self.b:
            return [self.a]

        line = self.as_line()
        if line.is_vertical:
            return self._sample_vertical()

        d_x = TESSELLATION_STEP / math.sqrt(line.slope ** 2 + 1.0)
        x = min(self.a.x, self.b.x)
        end = max(self.a.x, self.b.x)
        points = []
        while x < end:
            points.append(PlanarPoint(x=x, y=line.y_at(x)))
            x += d_x
        points.append(PlanarPoint(x=end, y=line.y_at(end)))
        return points

    def _sample_vertical(self) -> list[PlanarPoint]:
        x = self.a.x
        y = min(self.a.y, self.b.y)
        end = max(self.a.y, self.b.y)
        points = []
        while y < end:
            points.append(PlanarPoint(x=x, y=y))
            y += TESSELLATION_STEP
        points.append(PlanarPoint(x=x, y=end))
        return points

    def tessellate(self) -> list[AngularPoint]:
        """Sampled polyline converted back to angular coordinates."""
        samples = self.sample()
        lons, lats = to_angular_array(
            np.array([p.x for p in samples]),
            np.array([p.y for p in samples]),
        )
        return [AngularPoint(lon=float(lon), lat=float(lat)) for lon, lat in zip(lons, lats)]
