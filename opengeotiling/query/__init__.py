"""
OpenGeoTiling Query Module

Polygon rasterization and geometry conversion.
"""

from opengeotiling.query.polygonal import TileAreaPolygonalBuilder
from opengeotiling.query.spatial import (
    tile_area_from_geometry,
    tile_area_to_geometry,
    tile_to_polygon,
)

__all__ = [
    "TileAreaPolygonalBuilder",
    "tile_area_from_geometry",
    "tile_area_to_geometry",
    "tile_to_polygon",
]
