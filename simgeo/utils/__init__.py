"""
Utility functions for the coordinate engine.

This module provides angle comparison helpers and spherical-Earth geometry.
"""

from .angles import angles_equal, values_equal, degrees_to_radians, radians_to_degrees
from .geometry import great_circle_distance, EARTH_MEAN_RADIUS

__all__ = [
    'angles_equal',
    'values_equal',
    'degrees_to_radians',
    'radians_to_degrees',
    'great_circle_distance',
    'EARTH_MEAN_RADIUS',
]
