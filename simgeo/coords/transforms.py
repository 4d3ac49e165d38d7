"""Coordinate transformations between geodetic, ECEF, ENU and heading frames.

This module implements the building blocks of the spherical coordinates
engine as plain functions:
- geodetic (latitude, longitude, height) <-> ECEF on a reference ellipsoid
- ECEF <-> ENU rotation matrices at a reference point
- heading rotations between the ENU (GLOBAL) frame and the simulator frames
- the transformation cache derived from a reference point and heading

Conventions:
- Angles are in radians, distances in meters.
- Heading is the angle from East to the simulator x-axis. Positive heading
  has always meant a CLOCKWISE rotation from GLOBAL to LOCAL, so the cached
  sine/cosine are taken of the negated heading to express it as a
  right-handed (anticlockwise) rotation.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from simgeo.coords.ellipsoid import WGS84, EllipsoidParameters


def llh_to_ecef(
    lat: float,
    lon: float,
    height: float,
    ellipsoid: EllipsoidParameters = WGS84,
) -> NDArray[np.float64]:
    """Convert geodetic coordinates (LLH) to ECEF Cartesian coordinates.

    Args:
        lat: Latitude in radians (positive north).
        lon: Longitude in radians (positive east).
        height: Height above the ellipsoid in meters.
        ellipsoid: Reference ellipsoid (default WGS84).

    Returns:
        ECEF coordinates as numpy array [x, y, z] in meters.

    Example:
        >>> xyz = llh_to_ecef(0.0, 0.0, 0.0)
        >>> print(f"ECEF: {xyz}")
    """
    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)

    # Radius of curvature in the prime vertical
    N = ellipsoid.a / np.sqrt(1.0 - ellipsoid.e**2 * sin_lat**2)

    x = (height + N) * cos_lat * np.cos(lon)
    y = (height + N) * cos_lat * np.sin(lon)
    z = ((ellipsoid.b**2 / ellipsoid.a**2) * N + height) * sin_lat

    return np.array([x, y, z], dtype=np.float64)


def ecef_to_llh(
    x: float,
    y: float,
    z: float,
    ellipsoid: EllipsoidParameters = WGS84,
) -> NDArray[np.float64]:
    """Convert ECEF Cartesian coordinates to geodetic coordinates (LLH).

    Uses Bowring's closed-form approximation (single step, no iteration).
    Points on the polar axis are not special-cased: the height there comes
    out of a division by cos(lat) and is not finite.

    Args:
        x: ECEF x-coordinate in meters.
        y: ECEF y-coordinate in meters.
        z: ECEF z-coordinate in meters.
        ellipsoid: Reference ellipsoid (default WGS84).

    Returns:
        Geodetic coordinates as numpy array [lat, lon, height] where
        lat and lon are in radians, height is in meters.

    Example:
        >>> llh = ecef_to_llh(6378137.0, 0.0, 0.0)
        >>> print(f"LLH: {llh}")
    """
    a = ellipsoid.a
    b = ellipsoid.b
    x = np.float64(x)
    y = np.float64(y)
    z = np.float64(z)

    # Distance from z-axis
    p = np.sqrt(x**2 + y**2)
    theta = np.arctan((z * a) / (p * b))

    lat = np.arctan(
        (z + ellipsoid.p**2 * b * np.sin(theta) ** 3)
        / (p - ellipsoid.e**2 * a * np.cos(theta) ** 3)
    )
    lon = np.arctan2(y, x)

    # Curvature at the recovered latitude
    N = a / np.sqrt(1.0 - ellipsoid.e**2 * np.sin(lat) ** 2)
    height = p / np.cos(lat) - N

    return np.array([lat, lon, height], dtype=np.float64)


def ecef_to_enu_matrix(lat_ref: float, lon_ref: float) -> NDArray[np.float64]:
    """Rotation matrix taking ECEF vectors into the ENU frame at a reference.

    Args:
        lat_ref: Reference latitude in radians.
        lon_ref: Reference longitude in radians.

    Returns:
        3x3 rotation matrix R_ENU_ECEF.
    """
    sin_lat = np.sin(lat_ref)
    cos_lat = np.cos(lat_ref)
    sin_lon = np.sin(lon_ref)
    cos_lon = np.cos(lon_ref)

    return np.array(
        [
            [-sin_lon, cos_lon, 0.0],
            [-cos_lon * sin_lat, -sin_lon * sin_lat, cos_lat],
            [cos_lon * cos_lat, sin_lon * cos_lat, sin_lat],
        ],
        dtype=np.float64,
    )


def enu_to_ecef_matrix(lat_ref: float, lon_ref: float) -> NDArray[np.float64]:
    """Rotation matrix taking ENU vectors at a reference into ECEF.

    Assembled from the same terms as ``ecef_to_enu_matrix`` (its transpose).

    Args:
        lat_ref: Reference latitude in radians.
        lon_ref: Reference longitude in radians.

    Returns:
        3x3 rotation matrix R_ECEF_ENU.
    """
    sin_lat = np.sin(lat_ref)
    cos_lat = np.cos(lat_ref)
    sin_lon = np.sin(lon_ref)
    cos_lon = np.cos(lon_ref)

    return np.array(
        [
            [-sin_lon, -cos_lon * sin_lat, cos_lon * cos_lat],
            [cos_lon, -sin_lon * sin_lat, sin_lon * cos_lat],
            [0.0, cos_lat, sin_lat],
        ],
        dtype=np.float64,
    )


def enu_to_heading_frame(
    enu: NDArray[np.float64],
    cos_heading: float,
    sin_heading: float,
) -> NDArray[np.float64]:
    """Rotate an ENU vector into the LOCAL / LOCAL2 frame.

    Both simulator frames share this outbound rotation.
    """
    x, y, z = enu
    return np.array(
        [
            x * cos_heading - y * sin_heading,
            x * sin_heading + y * cos_heading,
            z,
        ],
        dtype=np.float64,
    )


def local_to_enu(
    local: NDArray[np.float64],
    cos_heading: float,
    sin_heading: float,
) -> NDArray[np.float64]:
    """Rotate a LOCAL vector into ENU.

    This is the negated outbound rotation, not its inverse, so LOCAL does
    not round-trip through other frames. Kept for compatibility.
    """
    x, y, z = local
    return np.array(
        [
            -x * cos_heading + y * sin_heading,
            -x * sin_heading - y * cos_heading,
            z,
        ],
        dtype=np.float64,
    )


def local2_to_enu(
    local: NDArray[np.float64],
    cos_heading: float,
    sin_heading: float,
) -> NDArray[np.float64]:
    """Rotate a LOCAL2 vector into ENU (inverse of ``enu_to_heading_frame``)."""
    x, y, z = local
    return np.array(
        [
            x * cos_heading + y * sin_heading,
            -x * sin_heading + y * cos_heading,
            z,
        ],
        dtype=np.float64,
    )


@dataclass(frozen=True)
class TransformCache:
    """Values derived from a reference point and heading.

    Attributes:
        rot_ecef_to_global: 3x3 rotation from ECEF to GLOBAL (ENU).
        rot_global_to_ecef: 3x3 rotation from GLOBAL (ENU) to ECEF.
        cos_heading: Cosine of the negated heading offset.
        sin_heading: Sine of the negated heading offset.
        origin_ecef: ECEF position of the reference point (m).
    """

    rot_ecef_to_global: NDArray[np.float64]
    rot_global_to_ecef: NDArray[np.float64]
    cos_heading: float
    sin_heading: float
    origin_ecef: NDArray[np.float64]


def build_transform_cache(
    latitude: float,
    longitude: float,
    elevation: float,
    heading: float,
    ellipsoid: EllipsoidParameters = WGS84,
) -> TransformCache:
    """Compute the rotation matrices, heading terms and origin for a reference.

    Args:
        latitude: Reference latitude in radians.
        longitude: Reference longitude in radians.
        elevation: Reference height above the ellipsoid in meters.
        heading: Heading offset in radians (East to simulator x-axis).
        ellipsoid: Reference ellipsoid.

    Returns:
        TransformCache consistent with the given reference.
    """
    rot_ecef_to_global = ecef_to_enu_matrix(latitude, longitude)
    rot_global_to_ecef = enu_to_ecef_matrix(latitude, longitude)

    # Negated for the clockwise heading convention
    cos_heading = float(np.cos(-heading))
    sin_heading = float(np.sin(-heading))

    origin_ecef = llh_to_ecef(latitude, longitude, elevation, ellipsoid)

    for matrix in (rot_ecef_to_global, rot_global_to_ecef, origin_ecef):
        matrix.setflags(write=False)

    return TransformCache(
        rot_ecef_to_global=rot_ecef_to_global,
        rot_global_to_ecef=rot_global_to_ecef,
        cos_heading=cos_heading,
        sin_heading=sin_heading,
        origin_ecef=origin_ecef,
    )
