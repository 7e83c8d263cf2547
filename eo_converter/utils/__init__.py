"""
Utility functions and helpers for orientation log conversion.

This module contains:
- Angle conversions
- Coordinate reference system lookups and transforms
- Error types and step handling
- File I/O utilities
"""

from .coordinates import CoordinateConverter, ProjectionTransform, lookup_name, build_transform
from .io_utils import FileHandler
from .error_handling import (
    ConversionError, UsageError, FormatError, TransformConstructionError,
    ProjectionError, SelectionAbortedError, SelectionInputError, ConversionErrorHandler
)

__all__ = [
    "CoordinateConverter", "ProjectionTransform", "lookup_name", "build_transform",
    "FileHandler", "ConversionError", "UsageError", "FormatError",
    "TransformConstructionError", "ProjectionError", "SelectionAbortedError",
    "SelectionInputError", "ConversionErrorHandler"
]
