"""Coordinate frame and surface definitions for simulation geodesy.

This module defines the coordinate frames the spherical coordinates engine
converts between:
- SPHERICAL: Geodetic latitude, longitude (radians) and ellipsoidal height
- ECEF (Earth-Centered Earth-Fixed): Global Cartesian frame
- GLOBAL: East-North-Up tangent plane at the reference point
- LOCAL: GLOBAL rotated by the simulator heading offset
- LOCAL2: LOCAL with the mirrored axis convention on input

It also defines the reference surfaces and their string names.
"""

import numbers
import warnings
from enum import Enum
from typing import NamedTuple, Optional, Union


class CoordinateType(Enum):
    """Enumeration of coordinate frame types.

    Values match the integer identifiers used by simulator configuration
    files, so frames may also be given as ``int`` or by name.

    Attributes:
        SPHERICAL: Latitude, longitude (radians) and height (m).
        ECEF: Earth-Centered Earth-Fixed Cartesian frame (m).
        GLOBAL: East-North-Up frame anchored at the reference point (m).
        LOCAL: Heading-rotated GLOBAL frame (m).
        LOCAL2: Heading-rotated GLOBAL frame, mirrored input convention (m).
    """

    SPHERICAL = 1
    ECEF = 2
    GLOBAL = 3
    LOCAL = 4
    LOCAL2 = 5


class SurfaceType(Enum):
    """Enumeration of reference surfaces.

    Attributes:
        EARTH_WGS84: Earth modeled by the WGS84 ellipsoid.
    """

    EARTH_WGS84 = 1


class Frame(NamedTuple):
    """Representation of a coordinate frame.

    Attributes:
        frame_type: Type of coordinate frame.
        description: Human-readable description of the frame.
    """

    frame_type: CoordinateType
    description: str

    def __repr__(self) -> str:
        """Return string representation of frame."""
        return f"Frame({self.frame_type.name}: {self.description})"


# Common frame definitions
FRAME_SPHERICAL = Frame(
    CoordinateType.SPHERICAL,
    "Geodetic coordinates (x=latitude rad, y=longitude rad, z=height m)",
)

FRAME_ECEF = Frame(
    CoordinateType.ECEF,
    "Earth-Centered Earth-Fixed (x=0°E 0°N, y=90°E 0°N, z=North Pole)",
)

FRAME_GLOBAL = Frame(
    CoordinateType.GLOBAL,
    "East-North-Up tangent plane at the reference point (x=East, y=North, z=Up)",
)

FRAME_LOCAL = Frame(
    CoordinateType.LOCAL,
    "Simulator frame, GLOBAL rotated by the heading offset",
)

FRAME_LOCAL2 = Frame(
    CoordinateType.LOCAL2,
    "Simulator frame with mirrored heading rotation on input",
)

FRAMES = {
    frame.frame_type: frame
    for frame in (FRAME_SPHERICAL, FRAME_ECEF, FRAME_GLOBAL, FRAME_LOCAL, FRAME_LOCAL2)
}


def as_coordinate_type(
    value: Union[CoordinateType, int, str],
) -> Optional[CoordinateType]:
    """Interpret a frame identifier.

    Args:
        value: A CoordinateType member, its integer value (Python or numpy
            integer), or its name (case-insensitive).

    Returns:
        The matching CoordinateType, or None if the value names no frame.

    Example:
        >>> as_coordinate_type("local2")
        <CoordinateType.LOCAL2: 5>
        >>> as_coordinate_type(42) is None
        True
    """
    if isinstance(value, CoordinateType):
        return value
    if isinstance(value, str):
        return CoordinateType.__members__.get(value.strip().upper())
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        try:
            return CoordinateType(int(value))
        except ValueError:
            return None
    return None


def surface_type_from_string(name: str) -> SurfaceType:
    """Convert a surface name to a SurfaceType.

    Unrecognized names fall back to EARTH_WGS84 with a warning.

    Args:
        name: Surface name, e.g. "EARTH_WGS84".

    Returns:
        The matching SurfaceType.
    """
    if name == "EARTH_WGS84":
        return SurfaceType.EARTH_WGS84

    warnings.warn(
        f"SurfaceType string [{name}] not recognized, "
        "EARTH_WGS84 returned by default",
        RuntimeWarning,
    )
    return SurfaceType.EARTH_WGS84


def surface_type_to_string(surface: SurfaceType) -> str:
    """Convert a SurfaceType to its canonical name.

    Unrecognized values fall back to "EARTH_WGS84" with a warning.

    Args:
        surface: Surface type.

    Returns:
        Canonical surface name.
    """
    if surface == SurfaceType.EARTH_WGS84:
        return "EARTH_WGS84"

    warnings.warn(
        f"SurfaceType [{surface}] not recognized, EARTH_WGS84 returned by default",
        RuntimeWarning,
    )
    return "EARTH_WGS84"
