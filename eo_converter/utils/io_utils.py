"""
File I/O utilities.

This module provides common file handling operations.
"""

import pandas as pd
from pathlib import Path
from typing import Optional


class FileHandler:
    """Handles file I/O operations for the converter."""

    def __init__(self, config=None):
        """Initialize file handler."""
        self.config = config or {}

    def read_text(self, file_path: str, encoding: Optional[str] = None) -> str:
        """
        Read a whole text file.

        Args:
            file_path: Path to the file
            encoding: Text encoding (defaults to the configured one, then utf-8)

        Returns:
            File contents

        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"Input file not found: {file_path}")

        encoding = encoding or self.config.get('encoding', 'utf-8')
        with open(path, 'r', encoding=encoding, errors='replace') as f:
            return f.read()

    def save_table(self, data: pd.DataFrame, file_path: str):
        """
        Save a DataFrame as a space-separated table without header or index.

        Numbers are written with '.' as decimal separator regardless of locale.

        Args:
            data: DataFrame to save
            file_path: Path where to save the file
        """
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data.to_csv(path, sep=' ', header=False, index=False, lineterminator='\n')
