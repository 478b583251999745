"""
Plus Code codec adapter.

Thin layer over the ``openlocationcode`` reference implementation. The rest
of the package only talks to the codec through this module, so encoding,
decoding and validity checks have one entry point each.
"""

from openlocationcode import openlocationcode as olc

CODE_ALPHABET = "23456789CFGHJMPQRVWX"
SEPARATOR = "+"
SEPARATOR_POSITION = 8
PADDING_CHARACTER = "0"

# Maximum number of significant digits a tile can make use of
MAX_TILE_CODE_LENGTH = 10

CodeArea = olc.CodeArea


def encode(latitude: float, longitude: float, code_length: int = MAX_TILE_CODE_LENGTH) -> str:
    """
    Encode a location into a full Plus Code

    Out-of-range latitudes are clipped and longitudes normalized by the codec.

    Args:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
        code_length: Number of significant digits (2, 4, 6, 8, 10 or more)

    Returns:
        Full Plus Code, padded with "0" for lengths below 8 (e.g. "C9000000+")
    """
    return olc.encode(latitude, longitude, code_length)


def decode(code: str) -> CodeArea:
    """
    Decode a full Plus Code into its area

    Returns:
        CodeArea with latitudeLo/Hi, longitudeLo/Hi and
        latitudeCenter/longitudeCenter attributes
    """
    return olc.decode(code)


def is_full(code: str) -> bool:
    """Check whether code is a valid full (not shortened) Plus Code"""
    return olc.isFull(code)


def is_padded(code: str) -> bool:
    """Check whether code carries padding characters"""
    return PADDING_CHARACTER in code


def significant_length(code: str) -> int:
    """
    Number of significant digits encoded by a full code

    Padded codes end at the first padding character; unpadded codes count
    every digit up to the tile limit.
    """
    if is_padded(code):
        return code.index(PADDING_CHARACTER)
    return min(len(code) - 1, MAX_TILE_CODE_LENGTH)


def strip_separator(code: str) -> str:
    """Remove the separator from a code"""
    return code.replace(SEPARATOR, "")


def character_index(char: str) -> int:
    """
    Position of char in the Plus Code alphabet (case insensitive)

    Raises:
        ValueError: If char is not part of the alphabet
    """
    index = CODE_ALPHABET.find(char.upper()) if len(char) == 1 else -1
    if index < 0:
        raise ValueError(f"Character does not exist in alphabet: {char!r}")
    return index
