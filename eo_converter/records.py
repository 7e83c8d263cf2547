"""
Orientation record data model.

One record per captured frame, as read from an exterior orientation log,
plus the geodetic attributes derived from it.
"""

from dataclasses import dataclass
from typing import Tuple
import math

from .utils.angles import heading_to_kappa

# Digit budget of the packed output identifier
TRACK_MULTIPLIER = 10_000_000
PASS_MULTIPLIER = 10_000


@dataclass(frozen=True)
class OrientationRecord:
    """Camera position and heading for a single frame."""
    frame_number: int
    pass_number: int
    track_number: int
    latitude_deg: float  # WGS84, signed degrees
    longitude_deg: float  # WGS84, signed degrees
    altitude: float  # meters
    heading_deg: float  # azimuth, 0 = north, clockwise
    elapsed_seconds: float  # seconds since local midnight

    def __post_init__(self):
        if not -90.0 <= self.latitude_deg <= 90.0:
            raise ValueError(f"latitude out of range: {self.latitude_deg}")
        if not -180.0 <= self.longitude_deg <= 180.0:
            raise ValueError(f"longitude out of range: {self.longitude_deg}")

    @property
    def utm_zone(self) -> int:
        """UTM zone number; longitude 180 folds into zone 60."""
        return min(math.floor(self.longitude_deg / 6) + 31, 60)

    @property
    def epsg_code(self) -> int:
        """WGS84 / UTM EPSG code for the record's zone and hemisphere."""
        return (32600 if self.latitude_deg > 0 else 32700) + self.utm_zone

    @property
    def geographic_pair(self) -> Tuple[float, float]:
        return self.latitude_deg, self.longitude_deg

    @property
    def kappa_deg(self) -> float:
        """Heading in the trigonometric convention, in degrees."""
        return float(heading_to_kappa(self.heading_deg))

    @property
    def record_key(self) -> Tuple[int, int, int]:
        return self.track_number, self.pass_number, self.frame_number

    @property
    def packed_id(self) -> int:
        """
        Numeric identifier written to the output file.

        Only unique while ``fits_packed_id`` holds; use ``record_key`` to
        identify records inside the program.
        """
        return (self.track_number * TRACK_MULTIPLIER +
                self.pass_number * PASS_MULTIPLIER +
                self.frame_number)

    @property
    def fits_packed_id(self) -> bool:
        return (0 <= self.track_number < 1000 and
                0 <= self.pass_number < 1000 and
                0 <= self.frame_number < 10000)
