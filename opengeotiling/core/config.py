"""
Tiling configuration

Settings shared by the polygon builder and the merging tile area.
"""

import logging
from dataclasses import dataclass
from typing import Any

from opengeotiling.core.exceptions import ConfigurationError, InvalidArgumentError
from opengeotiling.core.tile_size import TileSize

logger = logging.getLogger(__name__)

MIN_SUBTILES_PER_TILE = 2  # 0 or 1 would snowball every addition into a GLOBAL tile
MAX_SUBTILES_PER_TILE = 400  # 20 * 20


@dataclass(frozen=True)
class TilingConfig:
    """
    Settings for rasterizing an area into tiles.

    Attributes:
        precision: Size of the tiles the area is rasterized into
        max_tile_size: Largest tile size merging may produce (GLOBAL = no cap)
        subtiles_per_tile: Number of sibling tiles that get merged into their
                           parent; clamped to [2, 400]

    Examples:
        >>> TilingConfig(precision=TileSize.PINPOINT, max_tile_size=TileSize.NEIGHBORHOOD)
        >>> TilingConfig.from_dict({"precision": "district", "max_tile_size": "region"})
    """

    precision: TileSize = TileSize.DISTRICT
    max_tile_size: TileSize = TileSize.GLOBAL
    subtiles_per_tile: int = MAX_SUBTILES_PER_TILE

    def __post_init__(self):
        if not isinstance(self.precision, TileSize) or not isinstance(self.max_tile_size, TileSize):
            raise ConfigurationError("precision and max_tile_size must be TileSize members")
        if self.max_tile_size.is_finer_than(self.precision):
            raise ConfigurationError(
                f"max_tile_size {self.max_tile_size.name} is finer than precision {self.precision.name}"
            )
        clamped = clamp_subtiles_per_tile(self.subtiles_per_tile)
        if clamped != self.subtiles_per_tile:
            object.__setattr__(self, "subtiles_per_tile", clamped)

    def to_dict(self) -> dict[str, Any]:
        return {
            "precision": self.precision.name,
            "max_tile_size": self.max_tile_size.name,
            "subtiles_per_tile": self.subtiles_per_tile,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TilingConfig":
        try:
            return cls(
                precision=TileSize.from_name(data.get("precision", TileSize.DISTRICT.name)),
                max_tile_size=TileSize.from_name(data.get("max_tile_size", TileSize.GLOBAL.name)),
                subtiles_per_tile=int(data.get("subtiles_per_tile", MAX_SUBTILES_PER_TILE)),
            )
        except InvalidArgumentError as e:
            raise ConfigurationError(str(e)) from e


def clamp_subtiles_per_tile(subtiles_per_tile: int) -> int:
    """Clamp a subtiles-per-tile value into the supported [2, 400] range"""
    clamped = max(MIN_SUBTILES_PER_TILE, min(MAX_SUBTILES_PER_TILE, subtiles_per_tile))
    if clamped != subtiles_per_tile:
        logger.debug("Clamped subtiles_per_tile %s to %s", subtiles_per_tile, clamped)
    return clamped
