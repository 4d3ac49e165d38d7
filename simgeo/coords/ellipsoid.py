"""Reference ellipsoid parameters.

WGS84 ellipsoid parameters:
- Semi-major axis (a): 6378137.0 m
- Semi-minor axis (b): 6356752.314245 m
- Flattening (f): 1/298.257223563
- First eccentricity (e): sqrt(1 - b^2/a^2)
- Second eccentricity (p): sqrt(a^2/b^2 - 1)

Surfaces are looked up through ``SURFACE_ELLIPSOIDS``; replacing an entry
swaps the constant set used by every engine configured with that surface.
"""

from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from simgeo.coords.frames import SurfaceType

# WGS84 ellipsoid parameters
WGS84_A = 6378137.0  # Semi-major axis, equatorial radius (m)
WGS84_B = 6356752.314245  # Semi-minor axis, polar radius (m)
WGS84_F = 1.0 / 298.257223563  # Flattening


@dataclass(frozen=True)
class EllipsoidParameters:
    """Shape of a reference ellipsoid.

    Attributes:
        a: Semi-major axis in meters.
        b: Semi-minor axis in meters.
        f: Flattening (dimensionless).
        e: First eccentricity (dimensionless).
        p: Second eccentricity (dimensionless).
    """

    a: float
    b: float
    f: float
    e: float
    p: float

    @classmethod
    def from_axes(cls, a: float, b: float, f: float) -> "EllipsoidParameters":
        """Build parameters from the axes, deriving both eccentricities.

        Args:
            a: Semi-major axis in meters.
            b: Semi-minor axis in meters.
            f: Flattening.

        Returns:
            EllipsoidParameters with e and p computed from a and b.

        Example:
            >>> ell = EllipsoidParameters.from_axes(6378137.0, 6356752.314245, 1 / 298.257223563)
            >>> round(ell.e ** 2, 8)
            0.00669438
        """
        e = float(np.sqrt(1.0 - b**2 / a**2))
        p = float(np.sqrt(a**2 / b**2 - 1.0))
        return cls(a=float(a), b=float(b), f=float(f), e=e, p=p)


WGS84 = EllipsoidParameters.from_axes(WGS84_A, WGS84_B, WGS84_F)

SURFACE_ELLIPSOIDS: Dict[SurfaceType, EllipsoidParameters] = {
    SurfaceType.EARTH_WGS84: WGS84,
}


def ellipsoid_for_surface(surface: SurfaceType) -> Optional[EllipsoidParameters]:
    """Return the ellipsoid for a surface, or None if it is not supported."""
    try:
        return SURFACE_ELLIPSOIDS.get(surface)
    except TypeError:
        # unhashable surface values are simply unsupported
        return None
