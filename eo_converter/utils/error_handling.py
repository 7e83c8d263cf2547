"""
Error handling utilities for orientation log conversion.

Provides the exception hierarchy used across the converter and a small
handler that logs each pipeline step and keeps a record of failures.
"""

from typing import Dict, Any, List
from contextlib import contextmanager
import logging
import traceback

logger = logging.getLogger(__name__)


class ConversionError(Exception):
    """Base exception for conversion errors."""
    exit_code = 1


class UsageError(ConversionError):
    """Exception raised when the command is invoked without an input path."""
    exit_code = 2


class FormatError(ConversionError):
    """Exception raised when a file is not a recognized orientation log."""
    exit_code = 3


class TransformConstructionError(ConversionError):
    """Exception raised when a coordinate transform cannot be built."""
    exit_code = 4


class ProjectionError(ConversionError):
    """Exception raised when projected coordinates are not finite."""
    exit_code = 5


class SelectionAbortedError(ConversionError):
    """Exception raised when the selection prompt loses its input stream."""
    exit_code = 6


class SelectionInputError(ConversionError):
    """
    Exception raised for a malformed coordinate system selection.

    Recovered locally by re-prompting; never escapes the selector.
    """
    pass


class ConversionErrorHandler:
    """Logs pipeline steps and records the errors that abort them."""

    def __init__(self):
        self.error_log: List[Dict[str, Any]] = []

    @contextmanager
    def step(self, operation_name: str):
        """
        Context manager wrapping one pipeline step.

        Every failure is fatal: the error is recorded and re-raised unchanged
        so callers can map it to an exit status.

        Args:
            operation_name: Name of the step being performed
        """
        try:
            logger.debug(f"Starting step: {operation_name}")
            yield
            logger.debug(f"Completed step: {operation_name}")
        except Exception as e:
            self.error_log.append({
                'operation': operation_name,
                'error_type': type(e).__name__,
                'error_message': str(e),
                'traceback': traceback.format_exc()
            })
            logger.debug(f"Step {operation_name} failed: {e}")
            raise

    def get_error_summary(self) -> Dict[str, Any]:
        """
        Summarize the errors recorded so far.

        Returns:
            Dictionary with the error count and the failed operations
        """
        return {
            'total_errors': len(self.error_log),
            'operations': [entry['operation'] for entry in self.error_log],
            'error_types': sorted({entry['error_type'] for entry in self.error_log})
        }
