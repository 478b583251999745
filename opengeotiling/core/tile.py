"""
OpenGeoTile Implementation

A tile is a rectangular cell of the Plus Code grid at one of the fixed
TileSize granularities, identified by its address: the Plus Code without
separator, truncated to the tile's code length.
"""

import math
from typing import List, Optional, Tuple

from opengeotiling._internal import codecs
from opengeotiling.core.exceptions import InvalidArgumentError
from opengeotiling.core.tile_size import TileSize

# Offsets (in tile steps) for the NW, N, NE, E, SE, S, SW, W neighbors
_NEIGHBOR_LATITUDE_OFFSETS = (+1, +1, +1, 0, -1, -1, -1, 0)
_NEIGHBOR_LONGITUDE_OFFSETS = (-1, 0, +1, +1, +1, 0, -1, -1)

# Number of alphabet characters used by the first longitude digit (360° / 20°)
_FIRST_LONGITUDE_DIGIT_RANGE = 18


class OpenGeoTile:
    """
    A tile of the Plus Code grid

    Wraps a full Plus Code together with a TileSize. The wrapped code may be
    more precise than the tile; only its first ``tile_size.code_length``
    digits matter for the tile's identity.

    Examples:
        >>> tile = OpenGeoTile("CCXWXWXW+XW", TileSize.DISTRICT)
        >>> tile.address
        'CCXWXW'
        >>> OpenGeoTile.build_from_tile_address("C9").tile_code()
        'C9000000+'
        >>> big = OpenGeoTile.build_from_tile_address("8CFF")
        >>> big.contains(OpenGeoTile.build_from_tile_address("8CFFXXHH"))
        True
    """

    def __init__(self, code: str, tile_size: Optional[TileSize] = None):
        """
        Create a tile from a full Plus Code

        Args:
            code: Full Plus Code, possibly padded (e.g. "8FVC0000+")
            tile_size: Size of the tile; inferred from the code's significant
                       length if omitted

        Raises:
            InvalidArgumentError: If code is not a full Plus Code, if tile_size
                is finer than the code's significant digits allow, or if no
                tile size matches the inferred length
        """
        if not isinstance(code, str) or not codecs.is_full(code):
            raise InvalidArgumentError(f"Only full Plus Codes are supported, got {code!r}")
        code = code.upper()

        if tile_size is None:
            tile_size = TileSize.from_code_length(codecs.significant_length(code))
        elif codecs.significant_length(code) < tile_size.code_length:
            raise InvalidArgumentError(
                f"Plus Code {code} is not precise enough for {tile_size.name} tiles"
            )

        self._code = code
        self._tile_size = tile_size
        self._address = codecs.strip_separator(code)[: tile_size.code_length]

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def build_from_plus_code(cls, code: str, tile_size: Optional[TileSize] = None) -> "OpenGeoTile":
        """Create a tile from a Plus Code string"""
        return cls(code, tile_size)

    @classmethod
    def build_from_latitude_and_longitude(
        cls, latitude: float, longitude: float, tile_size: TileSize
    ) -> "OpenGeoTile":
        """
        Create the tile of the given size containing a location

        Args:
            latitude: Latitude in decimal degrees (clipped to [-90, 90])
            longitude: Longitude in decimal degrees (normalized to [-180, 180))
            tile_size: Size of the tile to create

        Returns:
            OpenGeoTile wrapping the location encoded at maximum tile precision
        """
        code = codecs.encode(latitude, longitude, codecs.MAX_TILE_CODE_LENGTH)
        return cls(code, tile_size)

    @classmethod
    def build_from_tile_address(cls, tile_address: str) -> "OpenGeoTile":
        """
        Create a tile from its address

        Args:
            tile_address: Address of 2, 4, 6, 8 or 10 characters (e.g. "8CRW2X")

        Returns:
            OpenGeoTile of the size matching the address length

        Raises:
            InvalidArgumentError: If the address length is not supported or
                the address is not part of a valid full Plus Code
        """
        length = len(tile_address)
        if length == TileSize.PINPOINT.code_length:
            code = (
                tile_address[: codecs.SEPARATOR_POSITION]
                + codecs.SEPARATOR
                + tile_address[codecs.SEPARATOR_POSITION :]
            )
        elif length in (2, 4, 6, 8):
            padding = codecs.PADDING_CHARACTER * (codecs.SEPARATOR_POSITION - length)
            code = tile_address + padding + codecs.SEPARATOR
        else:
            raise InvalidArgumentError(f"Invalid tile address length {length}: {tile_address!r}")

        return cls(code, TileSize.from_code_length(length))

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def tile_size(self) -> TileSize:
        return self._tile_size

    @property
    def wrapped_code(self) -> str:
        """The Plus Code this tile was created from, possibly more precise"""
        return self._code

    @property
    def address(self) -> str:
        """Tile address, e.g. "8CRW2X" for a DISTRICT tile"""
        return self._address

    @property
    def address_prefix(self) -> str:
        """Address of the parent tile; empty for GLOBAL tiles"""
        return self._address[:-2]

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """
        Geographic bounds of the tile

        Returns:
            Bounding box as (min_lng, min_lat, max_lng, max_lat) in degrees
        """
        area = codecs.decode(self.tile_code())
        return (area.longitudeLo, area.latitudeLo, area.longitudeHi, area.latitudeHi)

    def tile_code(self) -> str:
        """Padded Plus Code of the whole tile (e.g. "C9000000+" for "C9")"""
        return OpenGeoTile.build_from_tile_address(self._address).wrapped_code

    # -------------------------------------------------------------------------
    # Containment and adjacency
    # -------------------------------------------------------------------------

    def contains(self, other: "OpenGeoTile") -> bool:
        """True if the area of other lies completely within this tile"""
        return other.address.startswith(self._address)

    def is_same_tile(self, other: "OpenGeoTile") -> bool:
        """True if other has the same size and address"""
        return self._tile_size is other.tile_size and self._address == other.address

    def neighbors(self) -> List["OpenGeoTile"]:
        """
        Same-size tiles surrounding this one

        Returns:
            Up to 8 tiles in NW, N, NE, E, SE, S, SW, W order. Offsets that
            fall back onto this tile or onto an earlier neighbor (near the
            poles) are dropped.
        """
        delta = self._tile_size.coordinate_increment
        area = codecs.decode(self._code)

        neighbors = []
        seen = {self._address}
        for lat_offset, lng_offset in zip(_NEIGHBOR_LATITUDE_OFFSETS, _NEIGHBOR_LONGITUDE_OFFSETS):
            neighbor = OpenGeoTile.build_from_latitude_and_longitude(
                area.latitudeCenter + delta * lat_offset,
                area.longitudeCenter + delta * lng_offset,
                self._tile_size,
            )
            if neighbor.address not in seen:
                seen.add(neighbor.address)
                neighbors.append(neighbor)
        return neighbors

    def is_neighbor(self, other: "OpenGeoTile") -> bool:
        """
        Check whether other touches this tile

        Tiles of different sizes are neighbors if they share an edge or a
        corner; a tile containing the other is never its neighbor.
        """
        if other.tile_size is self._tile_size:
            if self.is_same_tile(other):
                return False
            return any(other.is_same_tile(n) for n in self.neighbors())

        if other.tile_size.is_finer_than(self._tile_size):
            smaller, bigger = other, self
        else:
            smaller, bigger = self, other

        if bigger.contains(smaller):
            return False
        return any(bigger.contains(n) for n in smaller.neighbors())

    # -------------------------------------------------------------------------
    # Distance and direction
    # -------------------------------------------------------------------------

    def manhattan_distance(self, other: "OpenGeoTile") -> int:
        """Number of tile steps between two same-size tiles along both axes"""
        return abs(self._latitudinal_distance(other)) + abs(self._longitudinal_distance(other))

    def chebyshev_distance(self, other: "OpenGeoTile") -> int:
        """Number of tile steps between two same-size tiles, diagonals counting as one"""
        return max(abs(self._latitudinal_distance(other)), abs(self._longitudinal_distance(other)))

    def direction(self, other: "OpenGeoTile") -> float:
        """
        Approximate direction between two same-size tiles

        Computed on the tile grid, not geodesically.

        Returns:
            Angle in radians; 0 is east, +-pi is west
        """
        return math.atan2(self._latitudinal_distance(other), self._longitudinal_distance(other))

    bearing = direction

    def _latitudinal_distance(self, other: "OpenGeoTile") -> int:
        self._check_same_size(other)
        distance = 0
        for i in range(0, self._tile_size.code_length, 2):
            distance = distance * 20 + _digit_difference(self._address[i], other.address[i])
        return distance

    def _longitudinal_distance(self, other: "OpenGeoTile") -> int:
        self._check_same_size(other)
        distance = 0
        for i in range(1, self._tile_size.code_length, 2):
            diff = _digit_difference(self._address[i], other.address[i])
            if i == 1 and abs(diff) > _FIRST_LONGITUDE_DIGIT_RANGE // 2:
                # shorter way around the antimeridian
                diff += -_FIRST_LONGITUDE_DIGIT_RANGE if diff > 0 else _FIRST_LONGITUDE_DIGIT_RANGE
            distance = distance * 20 + diff
        return distance

    def _check_same_size(self, other: "OpenGeoTile") -> None:
        if other.tile_size is not self._tile_size:
            raise InvalidArgumentError("Tile sizes don't match")

    # -------------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, OpenGeoTile):
            return NotImplemented
        return self.is_same_tile(other)

    def __hash__(self):
        return hash((self._tile_size, self._address))

    def __repr__(self):
        return f"OpenGeoTile({self._address!r}, {self._tile_size.name})"


def _digit_difference(char1: str, char2: str) -> int:
    try:
        return codecs.character_index(char1) - codecs.character_index(char2)
    except ValueError as e:
        raise InvalidArgumentError(str(e)) from e
