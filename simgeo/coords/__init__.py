"""Coordinate systems and transformations for simulation frames.

This module provides functions and classes for working with the frames a
simulator shares with the real world:
- SPHERICAL geodetic coordinates (latitude, longitude, height)
- ECEF (Earth-Centered Earth-Fixed) Cartesian coordinates
- GLOBAL ENU (East-North-Up) tangent plane coordinates
- LOCAL / LOCAL2 heading-rotated simulator coordinates
"""

from simgeo.coords.ellipsoid import (
    SURFACE_ELLIPSOIDS,
    WGS84,
    EllipsoidParameters,
    ellipsoid_for_surface,
)
from simgeo.coords.frames import (
    FRAMES,
    CoordinateType,
    Frame,
    SurfaceType,
    as_coordinate_type,
    surface_type_from_string,
    surface_type_to_string,
)
from simgeo.coords.spherical import SphericalCoordinates
from simgeo.coords.transforms import (
    TransformCache,
    build_transform_cache,
    ecef_to_enu_matrix,
    ecef_to_llh,
    enu_to_ecef_matrix,
    llh_to_ecef,
)

__all__ = [
    # Frames
    "CoordinateType",
    "SurfaceType",
    "Frame",
    "FRAMES",
    "as_coordinate_type",
    "surface_type_from_string",
    "surface_type_to_string",
    # Ellipsoid
    "EllipsoidParameters",
    "WGS84",
    "SURFACE_ELLIPSOIDS",
    "ellipsoid_for_surface",
    # Transforms
    "llh_to_ecef",
    "ecef_to_llh",
    "ecef_to_enu_matrix",
    "enu_to_ecef_matrix",
    "TransformCache",
    "build_transform_cache",
    # Reference frame
    "SphericalCoordinates",
]
