"""
Main pipeline orchestrator for orientation log conversion.

Reads a CCNS4 exterior orientation log, chooses the projected coordinate
system, projects every camera position and writes the orientation file
used by photogrammetric processing.
"""

from typing import List, Dict, Any, Optional, Sequence
from collections import Counter
import pandas as pd
import logging

from .config import ConversionConfig
from .parsers import CCNSParser
from .processors import CoordinateSystemSelector
from .records import OrientationRecord
from .utils import CoordinateConverter, FileHandler, ConversionErrorHandler, FormatError, UsageError

OUTPUT_COLUMNS = ['id', 'x', 'y', 'altitude', 'omega', 'phi', 'kappa', 'seconds', 'flag_a', 'flag_b']


class OrientationConverter:
    """Converts geographic orientation logs into projected orientation files."""

    def __init__(self, config: Optional[ConversionConfig] = None,
                 selector: Optional[CoordinateSystemSelector] = None,
                 coordinate_converter: Optional[CoordinateConverter] = None):
        """
        Initialize the converter.

        Args:
            config: Conversion configuration. If None, uses default config.
            selector: Target system selector. If None, prompts on the console.
            coordinate_converter: Transform factory. If None, uses pyproj directly.
        """
        self.config = config or ConversionConfig()
        self.logger = logging.getLogger(__name__)

        self.parser = CCNSParser(self.config.to_dict())
        self.coordinate_converter = coordinate_converter or CoordinateConverter(self.config.to_dict())
        self.selector = selector or CoordinateSystemSelector(
            name_lookup=self.coordinate_converter.lookup_name)
        self.file_handler = FileHandler(self.config.to_dict())
        self.error_handler = ConversionErrorHandler()

    def run(self, input_path: str, output_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Convert one orientation log.

        Args:
            input_path: Log path without extension; the log is read from
                ``input_path`` plus the configured extension
            output_path: Output file. Defaults to ``input_path`` itself.

        Returns:
            Dictionary with the output file and conversion statistics
        """
        if not input_path:
            raise UsageError("No orientation log path given")

        output_path = output_path or input_path

        records = self.load_records(input_path)

        with self.error_handler.step("select coordinate system"):
            epsg_code = self.select_coordinate_system(records)

        with self.error_handler.step("project records"):
            table = self.project(records, epsg_code)

        with self.error_handler.step("write output"):
            self.file_handler.save_table(table, output_path)

        self.logger.info(f"Wrote {len(table)} records to {output_path}")

        return {
            'input_file': input_path + self.config.input_extension,
            'output_file': output_path,
            'epsg_code': epsg_code,
            'crs_name': self.coordinate_converter.lookup_name(epsg_code),
            'record_count': len(records),
            'zones': self.selector.summarize(records).to_dict()
        }

    def load_records(self, input_path: str) -> List[OrientationRecord]:
        """
        Read and parse the orientation log for ``input_path``.

        Raises:
            FileNotFoundError: If the log doesn't exist
            FormatError: If the log is malformed or holds no records
        """
        log_path = input_path + self.config.input_extension
        self.logger.info(f"Reading orientation log: {log_path}")

        with self.error_handler.step("parse orientation log"):
            records = self.parser.parse_file(log_path)
            if not records:
                raise FormatError(f"No orientation records found in {log_path}")

        self._check_identifiers(records)
        return records

    def select_coordinate_system(self, records: Sequence[OrientationRecord]) -> int:
        """Configured target EPSG code, or the selector's choice."""
        if self.config.target_epsg is not None:
            self.logger.info(f"Using configured target EPSG:{self.config.target_epsg}")
            return self.config.target_epsg

        return self.selector.select(records)

    def project(self, records: Sequence[OrientationRecord], epsg_code: int) -> pd.DataFrame:
        """
        Project every record into ``epsg_code`` and build the output table.

        Positions are always taken from the records' geographic coordinates.

        Raises:
            TransformConstructionError: If the transform cannot be built
            ProjectionError: If any position cannot be projected
        """
        transform = self.coordinate_converter.build_transform(self.config.source_epsg, epsg_code)

        data = pd.DataFrame({
            'latitude': [record.latitude_deg for record in records],
            'longitude': [record.longitude_deg for record in records],
        }, dtype='float64')

        x, y = transform.forward(data['latitude'].to_numpy(), data['longitude'].to_numpy())

        table = pd.DataFrame({
            'id': pd.Series([record.packed_id for record in records], dtype='int64'),
            'x': x,
            'y': y,
            'altitude': pd.Series([record.altitude for record in records], dtype='float64'),
            'omega': 0.0,
            'phi': 0.0,
            'kappa': pd.Series([record.kappa_deg for record in records], dtype='float64'),
            'seconds': pd.Series([record.elapsed_seconds for record in records], dtype='float64'),
            'flag_a': 1,
            'flag_b': 1,
        }, columns=OUTPUT_COLUMNS)

        self.logger.debug(f"Projected {len(table)} records into EPSG:{epsg_code}")
        return table

    def _check_identifiers(self, records: Sequence[OrientationRecord]):
        """Warn about records whose packed output identifiers are not unique."""
        oversized = [record.record_key for record in records if not record.fits_packed_id]
        if oversized:
            self.logger.warning(
                f"{len(oversized)} records exceed the packed identifier digit budget, "
                f"first (track, pass, frame): {oversized[0]}")

        duplicates = [packed for packed, count in
                      Counter(record.packed_id for record in records).items() if count > 1]
        if duplicates:
            self.logger.warning(f"{len(duplicates)} output identifiers are shared by several records")
