"""
SimpleTileArea Implementation

Append-only tile area without any merging.
"""

from typing import Iterable, List, Optional

from opengeotiling.area.base import TileArea
from opengeotiling.core.tile import OpenGeoTile
from opengeotiling.core.tile_size import TileSize


class SimpleTileArea(TileArea):
    """
    Tile area keeping every non-contained tile as added

    Examples:
        >>> area = SimpleTileArea()
        >>> area.add_tile(OpenGeoTile.build_from_tile_address("8CFF"))
        >>> area.contains(OpenGeoTile.build_from_tile_address("8CFFXX"))
        True
    """

    def __init__(self, tiles: Optional[Iterable[OpenGeoTile]] = None):
        self._tiles: List[OpenGeoTile] = []
        self._smallest_tile_size = TileSize.GLOBAL
        super().__init__(tiles)

    @property
    def smallest_tile_size(self) -> TileSize:
        return self._smallest_tile_size

    def contains(self, tile: OpenGeoTile) -> bool:
        return any(member.contains(tile) for member in self._tiles)

    def covering_tiles(self) -> List[OpenGeoTile]:
        return list(self._tiles)

    def _add_non_contained_tile(self, tile: OpenGeoTile) -> None:
        self._tiles.append(tile)
        if tile.tile_size.is_finer_than(self._smallest_tile_size):
            self._smallest_tile_size = tile.tile_size
