"""
Coordinate reference system utilities.

Wraps pyproj to look up coordinate system names and to build forward
transforms between systems identified by EPSG code.
"""

from typing import Tuple, Union, Dict
import numpy as np
import logging

from pyproj import CRS, Transformer
from pyproj.exceptions import CRSError, ProjError

from .error_handling import TransformConstructionError, ProjectionError

logger = logging.getLogger(__name__)

WGS84_EPSG = 4326


class ProjectionTransform:
    """Forward transform from a geographic system into a projected one."""

    def __init__(self, transformer: Transformer, source_epsg: int, target_epsg: int):
        self._transformer = transformer
        self.source_epsg = source_epsg
        self.target_epsg = target_epsg

    def forward(self, lat: Union[float, np.ndarray],
                lon: Union[float, np.ndarray]) -> Tuple[np.ndarray, np.ndarray]:
        """
        Project geographic coordinates.

        Args:
            lat: Latitude in degrees (scalar or array)
            lon: Longitude in degrees (scalar or array)

        Returns:
            Tuple of (x, y) in target units, easting/northing for UTM

        Raises:
            ProjectionError: If any coordinate cannot be projected
        """
        lat = np.asarray(lat, dtype=float)
        lon = np.asarray(lon, dtype=float)

        try:
            x, y = self._transformer.transform(lat, lon, errcheck=True)
        except ProjError as e:
            raise ProjectionError(
                f"Cannot project coordinates to EPSG:{self.target_epsg}: {e}") from e

        x = np.asarray(x)
        y = np.asarray(y)
        if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
            raise ProjectionError(
                f"Projection to EPSG:{self.target_epsg} produced non-finite coordinates")

        return x, y


class CoordinateConverter:
    """Builds and caches coordinate transforms."""

    def __init__(self, config=None):
        """
        Initialize coordinate converter.

        Args:
            config: Configuration dictionary with conversion parameters
        """
        self.config = config or {}
        self.logger = logging.getLogger(__name__)

        # Cache for transformers to avoid recreation
        self._transformer_cache: Dict[Tuple[int, int], ProjectionTransform] = {}

    def lookup_name(self, epsg_code: int) -> str:
        """
        Get the human-readable name of a coordinate reference system.

        Unknown codes fall back to ``EPSG:<code>``.
        """
        try:
            return CRS.from_epsg(epsg_code).name
        except CRSError as e:
            self.logger.warning(f"No coordinate system name for EPSG:{epsg_code}: {e}")
            return f"EPSG:{epsg_code}"

    def build_transform(self, source_epsg: int, target_epsg: int) -> ProjectionTransform:
        """
        Build a forward transform between two EPSG-coded systems.

        Input axis order follows the source system's authority definition,
        so EPSG:4326 takes (latitude, longitude).

        Args:
            source_epsg: EPSG code of the source system
            target_epsg: EPSG code of the target system

        Returns:
            ProjectionTransform instance

        Raises:
            TransformConstructionError: If pyproj rejects either code
        """
        key = (source_epsg, target_epsg)
        if key not in self._transformer_cache:
            try:
                transformer = Transformer.from_crs(
                    CRS.from_epsg(source_epsg),
                    CRS.from_epsg(target_epsg)
                )
            except (CRSError, ProjError) as e:
                raise TransformConstructionError(
                    f"Cannot build transform EPSG:{source_epsg} -> EPSG:{target_epsg}: {e}") from e

            self.logger.info(f"Built transform EPSG:{source_epsg} -> EPSG:{target_epsg}")
            self._transformer_cache[key] = ProjectionTransform(transformer, source_epsg, target_epsg)

        return self._transformer_cache[key]


_default_converter = CoordinateConverter()


def lookup_name(epsg_code: int) -> str:
    """Name of the coordinate system identified by ``epsg_code``."""
    return _default_converter.lookup_name(epsg_code)


def build_transform(source_epsg: int, target_epsg: int) -> ProjectionTransform:
    """Forward transform from ``source_epsg`` to ``target_epsg``."""
    return _default_converter.build_transform(source_epsg, target_epsg)
