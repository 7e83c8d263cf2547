"""
Main entry point for EO Converter when run as a module.

This allows running the converter with: python -m eo_converter
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
