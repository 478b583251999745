"""
OpenGeoTiling Core Module

Tile sizes, tiles, configuration and exceptions.
"""

from opengeotiling.core.config import TilingConfig
from opengeotiling.core.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    OpenGeoTilingError,
)
from opengeotiling.core.tile import OpenGeoTile
from opengeotiling.core.tile_size import TileSize

__all__ = [
    # Classes
    "OpenGeoTile",
    "TileSize",
    "TilingConfig",
    # Exceptions
    "OpenGeoTilingError",
    "InvalidArgumentError",
    "ConfigurationError",
]
