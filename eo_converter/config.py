"""
Configuration management for orientation log conversion.

Provides centralized configuration handling with validation and defaults.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional
import json
from pathlib import Path


@dataclass
class ConversionConfig:
    """Configuration class for the orientation conversion pipeline."""

    # Coordinate system settings
    source_epsg: int = 4326  # Geographic WGS84, the system of the log positions
    target_epsg: Optional[int] = None  # Forces the target system and skips selection

    # Input settings
    input_extension: str = ".eo"  # Appended to the input path to find the log
    sentinel: str = "#Parameter"  # First token of the line ending the log header
    encoding: str = "utf-8"

    # Processing settings
    verbose: bool = False  # Enable verbose logging

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_config()

    def _validate_config(self):
        """Validate configuration parameters."""
        if self.source_epsg <= 0:
            raise ValueError("source_epsg must be positive")

        if self.target_epsg is not None and self.target_epsg <= 0:
            raise ValueError("target_epsg must be positive")

        if not self.input_extension.startswith('.'):
            raise ValueError("input_extension must start with '.'")

        if not self.sentinel or ' ' in self.sentinel:
            raise ValueError("sentinel must be a single non-empty token")

    @classmethod
    def from_file(cls, config_path: str) -> 'ConversionConfig':
        """
        Load configuration from JSON file.

        Args:
            config_path: Path to JSON configuration file

        Returns:
            ConversionConfig instance
        """
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(path, 'r') as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def to_file(self, config_path: str):
        """
        Save configuration to JSON file.

        Args:
            config_path: Path where to save the configuration
        """
        path = Path(config_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> Dict[str, Any]:
        """Configuration fields as a plain dictionary."""
        return {key: value for key, value in self.__dict__.items()
                if not key.startswith('_')}

    def copy(self) -> 'ConversionConfig':
        """Create a copy of the configuration."""
        return ConversionConfig(
            source_epsg=self.source_epsg,
            target_epsg=self.target_epsg,
            input_extension=self.input_extension,
            sentinel=self.sentinel,
            encoding=self.encoding,
            verbose=self.verbose
        )
