"""
Angle conversion helpers.

Converts between sexagesimal degrees and radians, and from the azimuth
convention (0 at north, clockwise) to the trigonometric convention used for
photogrammetric kappa (0 along the easting axis, counter-clockwise).

All functions accept scalars or numpy arrays.
"""

from typing import Union
import numpy as np

Angle = Union[float, np.ndarray]


def sexagesimal_to_radian(deg: Angle) -> Angle:
    """Convert degrees to radians."""
    return np.radians(deg)


def radian_to_sexagesimal(rad: Angle) -> Angle:
    """Convert radians to degrees."""
    return np.degrees(rad)


def azimuth_to_trigonometric(angle_rad: Angle) -> Angle:
    """
    Convert a compass bearing into a counter-clockwise planar angle.

    The result is not wrapped into any canonical range: a bearing of 270
    degrees maps to -180 degrees, not 180.

    Args:
        angle_rad: Bearing in radians, 0 at north, increasing clockwise

    Returns:
        Angle in radians, 0 at east, increasing counter-clockwise
    """
    return np.pi / 2 - angle_rad


def heading_to_kappa(heading_deg: Angle) -> Angle:
    """Convert a heading in degrees (azimuth) to kappa in degrees."""
    return radian_to_sexagesimal(azimuth_to_trigonometric(sexagesimal_to_radian(heading_deg)))
