"""
Parser for IGI CCNS4 exterior orientation logs.

A CCNS4 ``.eo`` file starts with a free-form header that ends at a line
whose first token is ``#Parameter``. Every following non-blank line holds
one frame, with space-separated fields at fixed positions:

    1   frame number
    3   time of day, HHMMSS
    6   pass (line) number
    7   track number
    9   latitude, hemisphere letter + degrees, e.g. N40.4123
    10  longitude, hemisphere letter + degrees, e.g. W003.7021
    11  altitude in meters
    13  heading in degrees, clockwise from north

Other columns are ignored.
"""

from typing import List, Iterator, Tuple
from datetime import time, timedelta
import logging
import math

from .base import BaseOrientationParser
from ..records import OrientationRecord
from ..utils.error_handling import FormatError

DEFAULT_SENTINEL = '#Parameter'

FRAME_FIELD = 1
TIME_FIELD = 3
PASS_FIELD = 6
TRACK_FIELD = 7
LATITUDE_FIELD = 9
LONGITUDE_FIELD = 10
ALTITUDE_FIELD = 11
HEADING_FIELD = 13


def split_fields(line: str) -> List[str]:
    """Split a line on spaces, dropping the empty tokens between runs of spaces."""
    return [token for token in line.split(' ') if token]


def parse_decimal(token: str) -> float:
    """
    Parse a finite decimal number with '.' as separator.

    Raises:
        ValueError: If the token is not a number, or is nan or infinite
    """
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {token!r}")
    return value


def parse_signed_coordinate(token: str, positive_prefix: str) -> float:
    """
    Parse a hemisphere-prefixed coordinate such as ``N40.5`` or ``W3.25``.

    Any first character other than ``positive_prefix`` makes the value negative.

    Raises:
        ValueError: If the token is empty or the magnitude is not a number
    """
    if not token:
        raise ValueError("empty coordinate")

    magnitude = parse_decimal(token[1:])
    return magnitude if token[0] == positive_prefix else -magnitude


def parse_time_of_day(token: str) -> float:
    """
    Convert an ``HHMMSS`` token to seconds since midnight.

    Raises:
        ValueError: If the token is too short or not a valid clock time
    """
    if len(token) < 6:
        raise ValueError(f"time of day must be HHMMSS: {token!r}")

    clock = time(int(token[0:2]), int(token[2:4]), int(token[4:6]))
    elapsed = timedelta(hours=clock.hour, minutes=clock.minute, seconds=clock.second)
    return elapsed.total_seconds()


class CCNSParser(BaseOrientationParser):
    """Parser for CCNS4 ``.eo`` files."""

    def __init__(self, config=None):
        super().__init__(config)
        self._supported_extensions = {'.eo'}
        self.sentinel = self.config.get('sentinel', DEFAULT_SENTINEL)
        self.logger = logging.getLogger(__name__)

    def parse(self, raw_text: str) -> List[OrientationRecord]:
        """
        Parse the text of a CCNS4 orientation log.

        Args:
            raw_text: Whole contents of the log

        Returns:
            Records in file order

        Raises:
            FormatError: If the sentinel line is missing or a record line is malformed
        """
        lines = enumerate(raw_text.splitlines(), 1)

        sentinel_line = self._locate_records(lines)
        self.logger.debug(f"Found {self.sentinel} header on line {sentinel_line}")

        records = []
        for line_num, line in lines:
            fields = split_fields(line)
            if not fields:
                continue
            records.append(self._parse_record(fields, line_num))

        self.logger.info(f"Parsed {len(records)} orientation records")
        return records

    def _locate_records(self, lines: Iterator[Tuple[int, str]]) -> int:
        """Consume lines up to and including the sentinel; return its line number."""
        for line_num, line in lines:
            fields = split_fields(line)
            if fields and fields[0] == self.sentinel:
                return line_num

        raise FormatError(
            f"No {self.sentinel} line found: not a recognized CCNS4 orientation log")

    def _parse_record(self, fields: List[str], line_num: int) -> OrientationRecord:
        """Build a record from the fields of one data line."""
        try:
            return OrientationRecord(
                frame_number=int(fields[FRAME_FIELD]),
                pass_number=int(fields[PASS_FIELD]),
                track_number=int(fields[TRACK_FIELD]),
                latitude_deg=parse_signed_coordinate(fields[LATITUDE_FIELD], 'N'),
                longitude_deg=parse_signed_coordinate(fields[LONGITUDE_FIELD], 'E'),
                altitude=parse_decimal(fields[ALTITUDE_FIELD]),
                heading_deg=parse_decimal(fields[HEADING_FIELD]),
                elapsed_seconds=parse_time_of_day(fields[TIME_FIELD])
            )
        except IndexError:
            raise FormatError(
                f"Line {line_num}: expected at least {HEADING_FIELD + 1} fields, found {len(fields)}")
        except ValueError as e:
            raise FormatError(f"Line {line_num}: {e}") from e
