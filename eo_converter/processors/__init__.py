"""
Processing components for orientation log conversion.

This module contains:
- Target coordinate system selection
"""

from .crs_selector import CoordinateSystemSelector

__all__ = ["CoordinateSystemSelector"]
