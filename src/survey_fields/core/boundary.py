"""Boundary polygon loading and reference-line clipping."""

import logging
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict

from .geodesy import haversine_distance_m
from .lines import Segment
from .models import AngularPoint, BoundedLine, PlanarPoint, ReferenceLine
from .projection import to_angular, to_planar

logger = logging.getLogger(__name__)


def parse_boundary_line(line: str) -> Optional[AngularPoint]:
    """Parse one ``lon,lat[,...]`` row (degrees).

    Comment rows (leading ``#``) and rows whose first two fields are not both
    numbers return None.
    """
    if line.startswith("#"):
        return None
    fields = line.strip().split(",", 2)[:2]
    if len(fields) != 2:
        return None
    try:
        lon, lat = float(fields[0]), float(fields[1])
    except ValueError:
        return None
    return AngularPoint.from_degrees(lon, lat)


class BoundaryRing(BaseModel):
    """Ordered boundary vertices.

    Edges join consecutive vertices only. The ring is not closed
    automatically: a source that wants a closing edge repeats its first
    vertex at the end.
    """
    model_config = ConfigDict(frozen=True)

    points: tuple[AngularPoint, ...] = ()

    @classmethod
    def load(cls, lines: Iterable[str]) -> "BoundaryRing":
        points = []
        dropped = 0
        for line in lines:
            point = parse_boundary_line(line.rstrip("\r\n"))
            if point is None:
                dropped += 1
                continue
            points.append(point)
        logger.debug("Boundary loaded: %d vertices, %d rows skipped", len(points), dropped)
        return cls(points=tuple(points))

    @classmethod
    def from_file(cls, file_path: str) -> "BoundaryRing":
        with open(file_path, "r") as f:
            return cls.load(f)

    def edges(self) -> list[Segment]:
        planar = [to_planar(p) for p in self.points]
        return [Segment(a=a, b=b) for a, b in zip(planar, planar[1:])]

    def __len__(self) -> int:
        return len(self.points)


def clip_to_boundary(ring: BoundaryRing, reference: ReferenceLine) -> Optional[BoundedLine]:
    """Clip a reference line to the two boundary crossings around its field point.

    Crossings west of the field point (smaller planar x) and the rest are
    searched separately; on each side the one closest to the field point by
    great-circle distance wins. Returns None unless both sides have one.
    """
    line = Segment(a=to_planar(reference.start), b=to_planar(reference.end)).as_line()
    field = to_planar(reference.field)

    west: list[PlanarPoint] = []
    east: list[PlanarPoint] = []
    for edge in ring.edges():
        crossing = edge.intersection(line)
        if crossing is None:
            continue
        if crossing.x < field.x:
            west.append(crossing)
        else:
            east.append(crossing)

    if not west or not east:
        logger.debug(
            "Boundary does not bracket reference line (%d west, %d east crossings)",
            len(west), len(east),
        )
        return None

    def nearest(crossings: list[PlanarPoint]) -> AngularPoint:
        candidates = [to_angular(c) for c in crossings]
        return min(candidates, key=lambda p: haversine_distance_m(reference.field, p))

    return BoundedLine(west=nearest(west), east=nearest(east))
