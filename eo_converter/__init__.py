"""
EO Converter - Projects photogrammetric exterior orientation logs into UTM.

This package reads IGI CCNS4 exterior orientation logs (camera positions in
geographic WGS84 plus heading, one line per frame), chooses a single WGS84 /
UTM coordinate system for the flight and writes an orientation file with
projected camera positions and kappa angles.
"""

__version__ = "1.0.0"
__author__ = "EO Converter Team"

from .config import ConversionConfig
from .pipeline import OrientationConverter
from .records import OrientationRecord

__all__ = ["ConversionConfig", "OrientationConverter", "OrientationRecord"]
