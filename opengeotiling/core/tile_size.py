"""
Tile sizes

The five fixed granularities of the tiling scheme. Every step is a 20x
refinement in both latitude and longitude, i.e. one more digit pair of the
tile address.
"""

from enum import Enum

from opengeotiling.core.exceptions import InvalidArgumentError


class TileSize(Enum):
    """
    Granularity of an OpenGeoTile

    Each member carries the tile address length and the side length of the
    tile in degrees:

    - GLOBAL: 20° x 20°, up to ~2200km, 2-character addresses
    - REGION: 1° x 1°, up to ~110km, 4-character addresses
    - DISTRICT: 0.05° x 0.05°, up to ~5.5km, 6-character addresses
    - NEIGHBORHOOD: 0.0025° x 0.0025°, up to ~275m, 8-character addresses
    - PINPOINT: 0.000125° x 0.000125°, up to ~14m, 10-character addresses

    Examples:
        >>> TileSize.DISTRICT.code_length
        6
        >>> TileSize.from_code_length(4)
        <TileSize.REGION: (4, 1.0)>
    """

    GLOBAL = (2, 20.0)
    REGION = (4, 1.0)
    DISTRICT = (6, 0.05)
    NEIGHBORHOOD = (8, 0.0025)
    PINPOINT = (10, 0.000125)

    def __init__(self, code_length: int, coordinate_increment: float):
        self.code_length = code_length
        self.coordinate_increment = coordinate_increment

    @classmethod
    def from_code_length(cls, code_length: int) -> "TileSize":
        """
        Look up the tile size for an address length

        Raises:
            InvalidArgumentError: If no tile size uses this length
        """
        for size in cls:
            if size.code_length == code_length:
                return size
        raise InvalidArgumentError(f"No tile size with code length {code_length}")

    @classmethod
    def from_name(cls, name: str) -> "TileSize":
        """Look up a tile size by its (case insensitive) name"""
        try:
            return cls[name.upper()]
        except KeyError:
            raise InvalidArgumentError(f"Unknown tile size: {name}") from None

    def is_finer_than(self, other: "TileSize") -> bool:
        """True if tiles of this size are smaller than tiles of other"""
        return self.code_length > other.code_length
