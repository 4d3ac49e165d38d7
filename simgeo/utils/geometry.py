"""
Geometric utilities on a spherical Earth.

Provides:
- Haversine great-circle distance for quick range estimates

The spherical model uses a fixed mean radius and is independent of the
reference ellipsoid used by the coordinate transforms.
"""

import numpy as np
from typing import Union


# Mean Earth radius for the spherical approximation (meters)
EARTH_MEAN_RADIUS = 6371000.0


def great_circle_distance(
    lat_a: Union[float, np.ndarray],
    lon_a: Union[float, np.ndarray],
    lat_b: Union[float, np.ndarray],
    lon_b: Union[float, np.ndarray],
    radius: float = EARTH_MEAN_RADIUS
) -> Union[float, np.ndarray]:
    """
    Compute the great-circle distance between two points.

    Uses the haversine formula:
        a = sin²(Δlat/2) + cos(lat_a)·cos(lat_b)·sin²(Δlon/2)
        c = 2·atan2(√a, √(1−a))
        d = R·c

    Args:
        lat_a: Latitude of point A in radians
        lon_a: Longitude of point A in radians
        lat_b: Latitude of point B in radians
        lon_b: Longitude of point B in radians
        radius: Sphere radius in meters (default: 6371 km mean Earth radius)

    Returns:
        Distance along the sphere surface in meters (array if inputs are arrays)

    Example:
        >>> # One degree of latitude at the equator
        >>> d = great_circle_distance(0.0, 0.0, np.deg2rad(1.0), 0.0)
        >>> round(d)
        111195
    """
    d_lat = np.asarray(lat_b) - np.asarray(lat_a)
    d_lon = np.asarray(lon_b) - np.asarray(lon_a)

    a = (np.sin(d_lat / 2.0) ** 2
         + np.sin(d_lon / 2.0) ** 2 * np.cos(lat_a) * np.cos(lat_b))

    c = 2.0 * np.arctan2(np.sqrt(a), np.sqrt(1.0 - a))
    d = radius * c

    if np.ndim(d) == 0:
        return float(d)
    return d
