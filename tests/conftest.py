"""
OpenGeoTiling Test Configuration

Shared pytest fixtures for all tests.
"""

import pytest

from opengeotiling.core.tile import OpenGeoTile


@pytest.fixture
def sample_plus_code():
    """Full, unpadded Plus Code near the north pole"""
    return "CCXWXWXW+XW"


@pytest.fixture
def district_block():
    """DISTRICT tile used by the adjacency tests"""
    return OpenGeoTile.build_from_tile_address("8CRW2X")


@pytest.fixture
def square_coordinates():
    """Vertices of the 1° x 1° square with corners (0, 0) and (1, 1), as (lat, lng)"""
    return [(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)]


@pytest.fixture
def sibling_addresses():
    """Factory for all 400 child addresses of a tile address"""
    alphabet = "23456789CFGHJMPQRVWX"

    def _siblings(prefix: str) -> list[str]:
        return [prefix + lat + lng for lat in alphabet for lng in alphabet]

    return _siblings
