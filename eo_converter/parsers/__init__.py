"""
Orientation log parsers.

This module contains parsers for:
- EO files (IGI CCNS4 exterior orientation logs)
"""

from .base import BaseOrientationParser
from .ccns_parser import CCNSParser

__all__ = ["BaseOrientationParser", "CCNSParser"]
