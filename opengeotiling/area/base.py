"""
Tile Area Contract

An area defined by one or more OpenGeoTile tiles.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Optional

from opengeotiling.core.tile import OpenGeoTile
from opengeotiling.core.tile_size import TileSize


class TileArea(ABC):
    """
    Area covered by a set of tiles

    Subclasses decide how tiles are stored; adding tiles, adding whole areas
    and location lookups are shared. Once a tile has been added,
    ``contains`` stays true for its address and every longer address.
    """

    def __init__(self, tiles: Optional[Iterable[OpenGeoTile]] = None):
        if tiles is not None:
            for tile in tiles:
                self.add_tile(tile)

    @abstractmethod
    def covering_tiles(self) -> List[OpenGeoTile]:
        """
        Tiles that fully cover this area as currently defined

        This is not necessarily the list of tiles that were added; merged
        areas can contain bigger tiles that never were added themselves.
        """
        ...

    @abstractmethod
    def contains(self, tile: OpenGeoTile) -> bool:
        """True if the whole area of tile lies inside this area"""
        ...

    @property
    @abstractmethod
    def smallest_tile_size(self) -> TileSize:
        """Size of the smallest tile (longest address) used by this area"""
        ...

    @abstractmethod
    def _add_non_contained_tile(self, tile: OpenGeoTile) -> None:
        """Add a tile that has already been checked to NOT be contained yet"""
        ...

    def add_tile(self, tile: OpenGeoTile) -> None:
        """
        Add the area of tile to this area

        Subsequent calls to ``contains`` return true for the tile's address
        (e.g. "C9C9") and for every longer address (e.g. "C9C9XXXX").
        """
        if not self.contains(tile):
            self._add_non_contained_tile(tile)

    def add_tile_area(self, other: "TileArea") -> None:
        """Add every covering tile of another area to this one"""
        for tile in other.covering_tiles():
            self.add_tile(tile)

    def contains_plus_code(self, code: str) -> bool:
        """True if the area of a full Plus Code lies inside this area"""
        return self.contains(OpenGeoTile(code))

    def contains_lat_lng(self, latitude: float, longitude: float) -> bool:
        """True if a location lies inside this area"""
        tile = OpenGeoTile.build_from_latitude_and_longitude(
            latitude, longitude, self.smallest_tile_size
        )
        return self.contains(tile)

    def __contains__(self, tile: OpenGeoTile) -> bool:
        return self.contains(tile)

    def __iter__(self) -> Iterator[OpenGeoTile]:
        return iter(self.covering_tiles())

    def __len__(self) -> int:
        return len(self.covering_tiles())
