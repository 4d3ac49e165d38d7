"""Spherical coordinates engine for simulation and navigation.

This package converts positions and velocities between the frames used to
place simulated objects on a modeled Earth:
- coords: Frame definitions, ellipsoid parameters, transforms and the
  SphericalCoordinates reference frame
- utils: Angle comparisons and spherical-Earth geometry
"""

__version__ = "0.1.0"
