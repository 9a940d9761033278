"""Spherical-Earth helpers: distances, destinations and bearings.

Distances are in meters, bearings in degrees clockwise from north, and all
points are AngularPoints (radians). The sphere uses the mean Earth radius.
"""

from math import asin, atan, atan2, cos, degrees, radians, sin, sqrt
from typing import Sequence

from .models import AngularPoint

# Mean Earth radius (IUGG), meters
EARTH_RADIUS_M = 6_371_008.8


def haversine_distance_m(a: AngularPoint, b: AngularPoint) -> float:
    """Great-circle distance between two points."""
    dlat = b.lat - a.lat
    dlon = b.lon - a.lon
    h = sin(dlat / 2) ** 2 + cos(a.lat) * cos(b.lat) * sin(dlon / 2) ** 2
    h = min(h, 1.0)
    return EARTH_RADIUS_M * 2 * atan2(sqrt(h), sqrt(1 - h))


def destination(start: AngularPoint, bearing_deg: float, distance_m: float) -> AngularPoint:
    """Point reached by travelling ``distance_m`` from ``start`` on a bearing."""
    brng = radians(bearing_deg)
    d_r = distance_m / EARTH_RADIUS_M
    lat2 = asin(sin(start.lat) * cos(d_r) + cos(start.lat) * sin(d_r) * cos(brng))
    lon2 = start.lon + atan2(
        sin(brng) * sin(d_r) * cos(start.lat),
        cos(d_r) - sin(start.lat) * sin(lat2),
    )
    return AngularPoint(lon=lon2, lat=lat2)


def bearing_from_slope(slope: float) -> float:
    """Compass bearing of the eastward direction (1, slope) in Mercator space.

    Mercator is conformal, so the planar angle is the true local bearing.
    The result lies in [0, 180]: 90 is due east, 0 and 180 are north/south.
    """
    return 90.0 - degrees(atan(slope))


def path_length_m(points: Sequence[AngularPoint]) -> float:
    """Sum of haversine legs along a polyline."""
    total = 0.0
    for start, end in zip(points, points[1:]):
        total += haversine_distance_m(start, end)
    return total
