"""
OpenGeoTiling - Hierarchical tiles on the Plus Code grid

Tiles of five fixed sizes, their address algebra (containment, adjacency,
distance, direction) and polygon rasterization into merged tile areas.

Quick Start:
    >>> import opengeotiling as ogt
    >>>
    >>> # Tiles from addresses or locations
    >>> tile = ogt.OpenGeoTile.build_from_tile_address("8CRW2X")
    >>> other = ogt.OpenGeoTile.build_from_latitude_and_longitude(47.47, -0.55, ogt.TileSize.DISTRICT)
    >>> tile.is_neighbor(other)
    >>>
    >>> # Polygon to tile area
    >>> area = (ogt.TileAreaPolygonalBuilder()
    ...     .set_precision(ogt.TileSize.DISTRICT)
    ...     .set_coordinates_list([(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)])
    ...     .build())
    >>> area.contains_lat_lng(0.5, 0.5)
"""

from opengeotiling.area import MergingTileArea, SimpleTileArea, TileArea
from opengeotiling.core import (
    ConfigurationError,
    InvalidArgumentError,
    OpenGeoTile,
    OpenGeoTilingError,
    TileSize,
    TilingConfig,
)
from opengeotiling.query import (
    TileAreaPolygonalBuilder,
    tile_area_from_geometry,
    tile_area_to_geometry,
    tile_to_polygon,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "InvalidArgumentError",
    "MergingTileArea",
    "OpenGeoTile",
    "OpenGeoTilingError",
    "SimpleTileArea",
    "TileArea",
    "TileAreaPolygonalBuilder",
    "TileSize",
    "TilingConfig",
    "__version__",
    "tile_area_from_geometry",
    "tile_area_to_geometry",
    "tile_to_polygon",
]
