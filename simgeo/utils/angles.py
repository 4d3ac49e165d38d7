"""
Angle comparison and conversion utilities.

Provides the tolerant comparisons used when deciding whether two
reference frame configurations are the same, plus degree/radian helpers
for the public geodetic entry points.
"""

import numpy as np
from typing import Union


# Comparison tolerances
ANGLE_TOLERANCE = 1e-3  # radians
VALUE_TOLERANCE = 1e-6


def values_equal(value1: float, value2: float,
                 tolerance: float = VALUE_TOLERANCE) -> bool:
    """
    Check whether two scalars agree within an absolute tolerance.

    Args:
        value1: First value
        value2: Second value
        tolerance: Maximum absolute difference (default: 1e-6)

    Returns:
        True if |value1 - value2| <= tolerance

    Example:
        >>> values_equal(100.0, 100.0 + 1e-9)
        True
        >>> values_equal(100.0, 100.001)
        False
    """
    return bool(abs(value1 - value2) <= tolerance)


def angles_equal(angle1: float, angle2: float,
                 tolerance: float = ANGLE_TOLERANCE) -> bool:
    """
    Check whether two angles agree within an angular tolerance.

    No wrapping is applied: 0 and 2π are different angles here, matching
    how reference headings are stored.

    Args:
        angle1: First angle in radians
        angle2: Second angle in radians
        tolerance: Maximum absolute difference in radians (default: 1e-3)

    Returns:
        True if the angles are equal within tolerance
    """
    return values_equal(angle1, angle2, tolerance)


def degrees_to_radians(degrees: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """Convert degrees to radians."""
    return np.deg2rad(degrees)


def radians_to_degrees(radians: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """Convert radians to degrees."""
    return np.rad2deg(radians)
