"""Angular (lon/lat) to unit web-Mercator transforms.

x = longitude in radians, y = asinh(tan(latitude)). The poles are singular:
tan diverges there and the planar y comes out huge, infinite or NaN. Inputs
are not validated; keeping latitude inside (-pi/2, pi/2) is the caller's job.
"""

import math

import numpy as np

from .models import AngularPoint, PlanarPoint


def to_planar(point: AngularPoint) -> PlanarPoint:
    """Project an angular point onto the plane."""
    return PlanarPoint(x=point.lon, y=math.asinh(math.tan(point.lat)))


def to_angular(point: PlanarPoint) -> AngularPoint:
    """Inverse of :func:`to_planar`."""
    try:
        lat = math.atan(math.sinh(point.y))
    except OverflowError:
        # sinh overflows past |y| ~ 710, where atan has long since saturated
        lat = math.copysign(math.pi / 2, point.y)
    return AngularPoint(lon=point.x, lat=lat)


def to_planar_array(
    lons: np.ndarray, lats: np.ndarray
) -> tuple[np.ndarray, np.ndarray]:
    """Project arrays of lon/lat (radians) to planar x, y."""
    lons = np.asarray(lons, dtype=float)
    lats = np.asarray(lats, dtype=float)
    with np.errstate(over="ignore", invalid="ignore"):
        return lons.copy(), np.arcsinh(np.tan(lats))


def to_angular_array(
    xs: np.ndarray, ys: np.ndarray
) -> tuple[np.ndarray, np.ndarray]:
    """Convert arrays of planar x, y back to lon/lat (radians)."""
    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)
    with np.errstate(over="ignore", invalid="ignore"):
        return xs.copy(), np.arctan(np.sinh(ys))
