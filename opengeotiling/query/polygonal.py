"""
Polygonal TileArea builder

Rasterizes a closed polygon into tiles using scanlines, based on the
public-domain polygon fill algorithm by Darel Rex Finley (2007):
http://alienryderflex.com/polygon_fill/
"""

import logging
from typing import Optional, Sequence, Tuple

import numpy as np

from opengeotiling._internal import codecs
from opengeotiling.area.merging import MergingTileArea
from opengeotiling.core.config import MAX_SUBTILES_PER_TILE, TilingConfig
from opengeotiling.core.tile import OpenGeoTile
from opengeotiling.core.tile_size import TileSize

logger = logging.getLogger(__name__)


class TileAreaPolygonalBuilder:
    """
    Fluent builder turning a polygon into a MergingTileArea

    Examples:
        >>> area = (TileAreaPolygonalBuilder()
        ...     .set_precision(TileSize.DISTRICT)
        ...     .set_maximum_tile_size(TileSize.REGION)
        ...     .set_coordinates_list([(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)])
        ...     .build())
        >>> area.contains_lat_lng(0.5, 0.5)
        True
    """

    # Valid latitude/longitude ranges in degrees
    LATITUDE_MIN = -90.0
    LATITUDE_MAX = 90.0
    LONGITUDE_MIN = -180.0
    LONGITUDE_MAX = 180.0

    def __init__(self):
        self._precision: Optional[TileSize] = TileSize.DISTRICT
        self._max_tile_size: TileSize = TileSize.GLOBAL
        self._subtiles_per_tile: int = MAX_SUBTILES_PER_TILE
        # polygon vertices as rows of (latitude, longitude)
        self._coordinates: Optional[np.ndarray] = None

    def set_precision(self, precision: Optional[TileSize]) -> "TileAreaPolygonalBuilder":
        """Set the size of the smallest tiles of the resulting area"""
        self._precision = precision
        return self

    def set_maximum_tile_size(self, max_tile_size: TileSize) -> "TileAreaPolygonalBuilder":
        """Set the largest tile size the resulting area may merge tiles into"""
        self._max_tile_size = max_tile_size
        return self

    def set_subtiles_per_tile(self, subtiles_per_tile: int) -> "TileAreaPolygonalBuilder":
        """Set how many sibling tiles are merged into their parent"""
        self._subtiles_per_tile = subtiles_per_tile
        return self

    def set_config(self, config: TilingConfig) -> "TileAreaPolygonalBuilder":
        """Apply precision and merge settings from a TilingConfig"""
        self._precision = config.precision
        self._max_tile_size = config.max_tile_size
        self._subtiles_per_tile = config.subtiles_per_tile
        return self

    def set_coordinates_list(
        self, coordinates: Sequence[Tuple[float, float]]
    ) -> "TileAreaPolygonalBuilder":
        """
        Set the vertices of a closed polygon

        Args:
            coordinates: (latitude, longitude) pairs. Pairs outside the valid
                         latitude/longitude ranges are dropped; at least three
                         must remain for a valid polygon. Self-intersection is
                         not checked.
        """
        vertices = np.asarray(coordinates, dtype=float).reshape(-1, 2)
        lats = vertices[:, 0]
        lngs = vertices[:, 1]
        valid = (
            (lats >= self.LATITUDE_MIN)
            & (lats <= self.LATITUDE_MAX)
            & (lngs >= self.LONGITUDE_MIN)
            & (lngs <= self.LONGITUDE_MAX)
        )

        dropped = int(len(vertices) - np.count_nonzero(valid))
        if dropped:
            logger.warning("Dropped %d invalid polygon vertices", dropped)

        self._coordinates = vertices[valid]
        return self

    def is_valid(self) -> bool:
        """True if build() would return an area"""
        if self._coordinates is None or self._precision is None:
            return False
        return len(self._coordinates) > 2

    def build(self) -> Optional[MergingTileArea]:
        """
        Rasterize the polygon

        Returns:
            MergingTileArea covering the polygon at the configured precision,
            or None if the builder is not valid
        """
        if not self.is_valid():
            return None

        precision = self._precision
        increment = precision.coordinate_increment
        area = MergingTileArea(
            subtiles_per_tile=self._subtiles_per_tile, max_tile_size=self._max_tile_size
        )

        lats = self._coordinates[:, 0]
        lngs = self._coordinates[:, 1]
        # vertex j precedes vertex i, wrapping from the first to the last vertex
        prev_lats = np.roll(lats, 1)
        prev_lngs = np.roll(lngs, 1)

        # Pad the bounding box by one increment around the centers of its corner
        # tiles so border tiles are not lost to tile center vs. edge offsets
        min_tile = OpenGeoTile.build_from_latitude_and_longitude(
            float(lats.min()), float(lngs.min()), precision
        )
        # the codec wraps longitude 180 around to -180
        max_tile = OpenGeoTile.build_from_latitude_and_longitude(
            float(lats.max()),
            min(float(lngs.max()), self.LONGITUDE_MAX - increment / 2),
            precision,
        )
        min_center = codecs.decode(min_tile.tile_code())
        max_center = codecs.decode(max_tile.tile_code())
        min_latitude = min_center.latitudeCenter - increment
        max_latitude = max_center.latitudeCenter + increment
        min_longitude = min_center.longitudeCenter - increment
        max_longitude = max_center.longitudeCenter + increment

        logger.debug(
            "Rasterizing %d vertices at %s, latitudes %.6f to %.6f",
            len(lats),
            precision.name,
            min_latitude,
            max_latitude,
        )

        scanline = 0
        latitude = min_latitude
        while latitude < max_latitude:
            crossings = self._scanline_crossings(latitude, lats, lngs, prev_lats, prev_lngs)

            # pairs of crossings delimit the inside of the polygon; an unpaired
            # last crossing is ignored
            for start, end in zip(crossings[0::2], crossings[1::2]):
                if start >= max_longitude:
                    break
                if end <= min_longitude:
                    continue

                start = max(float(start), min_longitude)
                end = min(float(end), max_longitude)
                self._add_span(area, latitude, start, end, precision)

            scanline += 1
            latitude = min_latitude + scanline * increment

        logger.info(
            "Rasterized polygon into %d tiles over %d scanlines", len(area), scanline
        )
        return area

    @staticmethod
    def _add_span(
        area: MergingTileArea, latitude: float, start: float, end: float, precision: TileSize
    ) -> None:
        """Add the tiles hit by stepping from start towards end by one increment"""
        if start >= end:
            return
        increment = precision.coordinate_increment
        first = OpenGeoTile.build_from_latitude_and_longitude(latitude, start, precision)
        area.add_tile(first)

        # later tiles are encoded from their centers, away from tile edges
        center = codecs.decode(first.tile_code()).longitudeCenter
        step = 1
        while start + step * increment < end:
            area.add_tile(
                OpenGeoTile.build_from_latitude_and_longitude(
                    latitude, center + step * increment, precision
                )
            )
            step += 1

    @staticmethod
    def _scanline_crossings(
        latitude: float,
        lats: np.ndarray,
        lngs: np.ndarray,
        prev_lats: np.ndarray,
        prev_lngs: np.ndarray,
    ) -> np.ndarray:
        """Sorted longitudes where polygon edges cross a latitude"""
        crossing = ((lats < latitude) & (prev_lats > latitude)) | (
            (lats > latitude) & (prev_lats < latitude)
        )
        lat_i = lats[crossing]
        lng_i = lngs[crossing]
        longitudes = lng_i + (latitude - lat_i) / (prev_lats[crossing] - lat_i) * (
            prev_lngs[crossing] - lng_i
        )
        return np.sort(longitudes)
