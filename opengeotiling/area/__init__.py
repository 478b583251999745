"""
OpenGeoTiling Area Module

Areas defined by sets of tiles.
"""

from opengeotiling.area.base import TileArea
from opengeotiling.area.merging import MergingTileArea
from opengeotiling.area.simple import SimpleTileArea

__all__ = [
    "MergingTileArea",
    "SimpleTileArea",
    "TileArea",
]
