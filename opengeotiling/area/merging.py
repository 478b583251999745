"""
MergingTileArea Implementation

Tile area that replaces complete groups of sibling tiles with their parent.
"""

import logging
from typing import Dict, Iterable, List, Optional

from opengeotiling.area.base import TileArea
from opengeotiling.core.config import MAX_SUBTILES_PER_TILE, TilingConfig, clamp_subtiles_per_tile
from opengeotiling.core.tile import OpenGeoTile
from opengeotiling.core.tile_size import TileSize

logger = logging.getLogger(__name__)


class MergingTileArea(TileArea):
    """
    Tile area merging sibling tiles into bigger tiles

    Tiles are grouped by address prefix. Once ``subtiles_per_tile`` siblings
    of the same parent have been added, the group is replaced by the parent
    tile, which may in turn complete a group one level up. Merging stops at
    ``max_tile_size``.

    With the default of 400 subtiles per tile, only a complete 20x20 group
    is merged, so the area covers exactly the union of the added tiles.
    Smaller values merge incomplete groups and trade exactness for fewer
    tiles.

    Examples:
        >>> area = MergingTileArea()
        >>> for lat in range(-10, 10):
        ...     for lng in range(20):
        ...         area.add_tile(OpenGeoTile.build_from_latitude_and_longitude(
        ...             lat + 0.5, lng + 0.5, TileSize.REGION))
        >>> area.covering_tiles()
        [OpenGeoTile('6F', GLOBAL)]
    """

    # Key for GLOBAL tiles, which have an empty address prefix
    GLOBAL_KEY = "0"

    def __init__(
        self,
        subtiles_per_tile: int = MAX_SUBTILES_PER_TILE,
        max_tile_size: TileSize = TileSize.GLOBAL,
        tiles: Optional[Iterable[OpenGeoTile]] = None,
    ):
        """
        Initialize an empty merging area

        Args:
            subtiles_per_tile: Siblings needed to merge into the parent tile,
                               clamped to [2, 400]
            max_tile_size: Largest tile size merging may produce
            tiles: Optional tiles to add right away
        """
        self._subtiles_per_tile = clamp_subtiles_per_tile(subtiles_per_tile)
        self._max_tile_size = max_tile_size
        self._smallest_tile_size = TileSize.GLOBAL
        # address prefix -> sibling tiles by address, in insertion order
        self._groups: Dict[str, Dict[str, OpenGeoTile]] = {}
        super().__init__(tiles)

    @classmethod
    def from_config(cls, config: TilingConfig) -> "MergingTileArea":
        """Create an empty area using the merge settings of a TilingConfig"""
        return cls(subtiles_per_tile=config.subtiles_per_tile, max_tile_size=config.max_tile_size)

    @property
    def subtiles_per_tile(self) -> int:
        return self._subtiles_per_tile

    @property
    def max_tile_size(self) -> TileSize:
        return self._max_tile_size

    @property
    def smallest_tile_size(self) -> TileSize:
        return self._smallest_tile_size

    def contains(self, tile: OpenGeoTile) -> bool:
        address = tile.address

        # check all address prefixes of the tile, most specific first
        for prefix_length in range(len(address) - 2, -1, -2):
            key = address[:prefix_length] or self.GLOBAL_KEY
            group = self._groups.get(key)
            # members of a group all have addresses of length prefix_length + 2
            if group is not None and address[: prefix_length + 2] in group:
                return True
        return False

    def covering_tiles(self) -> List[OpenGeoTile]:
        return [tile for group in self._groups.values() for tile in group.values()]

    def tiles_for_precision(self, tile_size: TileSize) -> List[OpenGeoTile]:
        """Covering tiles of exactly the given size"""
        return [tile for tile in self.covering_tiles() if tile.tile_size is tile_size]

    def _add_non_contained_tile(self, tile: OpenGeoTile) -> None:
        while True:
            key = tile.address_prefix or self.GLOBAL_KEY
            group = self._groups.get(key)

            if group is None or not self._completes_group(key, group, tile):
                self._groups.setdefault(key, {})[tile.address] = tile
                if tile.tile_size.is_finer_than(self._smallest_tile_size):
                    self._smallest_tile_size = tile.tile_size
                return

            # The tile completes its group: drop the group and add the parent
            # instead. The parent cannot be contained yet, otherwise the
            # original tile would have been contained as well.
            del self._groups[key]
            tile = OpenGeoTile.build_from_tile_address(tile.address_prefix)
            logger.debug("Merged %d tiles into %s (%s)", len(group) + 1, tile.address, tile.tile_size.name)

    def _completes_group(self, key: str, group: Dict[str, OpenGeoTile], tile: OpenGeoTile) -> bool:
        if len(group) < self._subtiles_per_tile - 1:
            return False
        if key == self.GLOBAL_KEY:
            return False
        return len(tile.address) > self._max_tile_size.code_length
