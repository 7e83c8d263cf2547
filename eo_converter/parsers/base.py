"""
Base class for orientation log parsers.

Defines the common interface that all orientation log parsers must implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, List
from pathlib import Path

from ..records import OrientationRecord
from ..utils.io_utils import FileHandler


class BaseOrientationParser(ABC):
    """Abstract base class for orientation log parsers."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the parser with optional configuration.

        Args:
            config: Optional configuration dictionary for parser settings
        """
        self.config = config or {}
        self._supported_extensions = set()
        self.file_handler = FileHandler(self.config)

    @property
    def supported_extensions(self) -> set:
        """Return set of supported file extensions."""
        return self._supported_extensions

    @abstractmethod
    def parse(self, raw_text: str) -> List[OrientationRecord]:
        """
        Parse the text of an orientation log.

        Args:
            raw_text: Whole contents of the log

        Returns:
            Records in the order their lines appear

        Raises:
            FormatError: If the text is not a recognized orientation log
        """
        pass

    def parse_file(self, file_path: str) -> List[OrientationRecord]:
        """
        Read and parse an orientation log file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            FormatError: If the file is not a recognized orientation log
        """
        return self.parse(self.file_handler.read_text(file_path))

    def validate_file(self, file_path: str) -> bool:
        """
        Validate that the file exists and has a supported extension.

        Args:
            file_path: Path to the file to validate

        Returns:
            True if file is valid, False otherwise
        """
        path = Path(file_path)
        return (path.exists() and
                path.is_file() and
                path.suffix.lower() in self._supported_extensions)
