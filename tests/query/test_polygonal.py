"""
Tests for TileAreaPolygonalBuilder
"""

import logging

import pytest

from opengeotiling.area.merging import MergingTileArea
from opengeotiling.core.config import TilingConfig
from opengeotiling.core.tile import OpenGeoTile
from opengeotiling.core.tile_size import TileSize
from opengeotiling.query.polygonal import TileAreaPolygonalBuilder


class TestBuilderValidity:
    """Test builder state checks"""

    def test_null_polygon(self):
        """Test not setting a polygon results in no area"""
        builder = TileAreaPolygonalBuilder().set_precision(TileSize.NEIGHBORHOOD)
        assert not builder.is_valid()
        assert builder.build() is None

    def test_invalid_polygon(self, caplog):
        """Test only two valid vertices result in no area"""
        coords = [(0.0, 0.0), (1.0, 1.0), (500.0, 500.0)]  # last one is dropped

        with caplog.at_level(logging.WARNING, logger="opengeotiling.query.polygonal"):
            builder = (
                TileAreaPolygonalBuilder()
                .set_precision(TileSize.NEIGHBORHOOD)
                .set_coordinates_list(coords)
            )

        assert not builder.is_valid()
        assert builder.build() is None
        assert "Dropped 1 invalid polygon vertices" in caplog.text

    def test_missing_precision(self, square_coordinates):
        """Test a builder without precision is not valid"""
        builder = (
            TileAreaPolygonalBuilder().set_coordinates_list(square_coordinates).set_precision(None)
        )
        assert not builder.is_valid()
        assert builder.build() is None

    def test_empty_coordinates(self):
        builder = TileAreaPolygonalBuilder().set_coordinates_list([])
        assert not builder.is_valid()

    def test_valid(self, square_coordinates):
        builder = TileAreaPolygonalBuilder().set_coordinates_list(square_coordinates)
        assert builder.is_valid()


class TestRasterization:
    """Test polygon scanline fill"""

    def test_valid_polygon_square(self, square_coordinates):
        """Test locations within an axis-aligned square are contained, even near the edges"""
        corners = [
            OpenGeoTile.build_from_latitude_and_longitude(0.01, 0.01, TileSize.NEIGHBORHOOD),
            OpenGeoTile.build_from_latitude_and_longitude(0.01, 0.95, TileSize.NEIGHBORHOOD),
            OpenGeoTile.build_from_latitude_and_longitude(0.99, 0.95, TileSize.NEIGHBORHOOD),
            OpenGeoTile.build_from_latitude_and_longitude(0.99, 0.01, TileSize.NEIGHBORHOOD),
        ]
        center = OpenGeoTile.build_from_latitude_and_longitude(0.5, 0.5, TileSize.NEIGHBORHOOD)

        area = (
            TileAreaPolygonalBuilder()
            .set_precision(TileSize.DISTRICT)
            .set_coordinates_list(square_coordinates)
            .build()
        )

        assert isinstance(area, MergingTileArea)
        for i, corner in enumerate(corners, start=1):
            assert area.contains(corner), f"Does not contain area near corner {i}"
        assert area.contains(center)
        assert not area.contains_lat_lng(1.5, 1.5)
        assert not area.contains_lat_lng(-0.5, 0.5)

    def test_square_tile_count(self, square_coordinates):
        """Test a 1° square at DISTRICT precision with no merging"""
        area = (
            TileAreaPolygonalBuilder()
            .set_precision(TileSize.DISTRICT)
            .set_maximum_tile_size(TileSize.DISTRICT)
            .set_coordinates_list(square_coordinates)
            .build()
        )
        inside = [t for t in area.covering_tiles() if t.address.startswith("6FG2")]
        assert len(inside) == 400
        assert area.smallest_tile_size is TileSize.DISTRICT

    def test_valid_large_polygon(self):
        """Test a 10° x 10° area is merged into 100 REGION tiles"""
        coords = [(0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0)]

        area = (
            TileAreaPolygonalBuilder()
            .set_precision(TileSize.DISTRICT)
            .set_coordinates_list(coords)
            .build()
        )

        assert area is not None
        assert len(area.tiles_for_precision(TileSize.REGION)) == 100
        assert area.contains_lat_lng(5.0, 5.0)

    def test_triangle(self):
        """Test edges that are not axis-aligned"""
        coords = [(0.25, 0.25), (0.25, 0.75), (0.75, 0.5)]
        tile = OpenGeoTile.build_from_latitude_and_longitude(0.5, 0.5, TileSize.NEIGHBORHOOD)

        area = (
            TileAreaPolygonalBuilder()
            .set_precision(TileSize.DISTRICT)
            .set_coordinates_list(coords)
            .build()
        )

        assert area is not None
        assert area.contains(tile)
        assert not area.contains_lat_lng(0.7, 0.3)
        assert not area.contains_lat_lng(0.7, 0.7)

    def test_concave_polygon(self):
        """Test the notch of a U-shaped polygon stays outside"""
        coords = [
            (0.0, 0.0),
            (0.0, 3.0),
            (3.0, 3.0),
            (3.0, 2.0),
            (1.0, 2.0),
            (1.0, 1.0),
            (3.0, 1.0),
            (3.0, 0.0),
        ]

        area = (
            TileAreaPolygonalBuilder()
            .set_precision(TileSize.REGION)
            .set_coordinates_list(coords)
            .build()
        )

        assert area.contains_lat_lng(0.5, 1.5)
        assert area.contains_lat_lng(2.5, 0.5)
        assert area.contains_lat_lng(2.5, 2.5)
        assert not area.contains_lat_lng(2.5, 1.5)

    def test_maximum_merge(self):
        """Test merge caps on an area holding one full REGION but no full GLOBAL tile"""
        coords = [(0.9, 0.9), (0.9, 2.1), (2.1, 2.1), (2.1, 0.9)]

        def build(max_tile_size=None):
            builder = TileAreaPolygonalBuilder().set_precision(TileSize.DISTRICT)
            if max_tile_size is not None:
                builder.set_maximum_tile_size(max_tile_size)
            return builder.set_coordinates_list(coords).build()

        num_tiles_global = len(build().covering_tiles())
        num_tiles_region = len(build(TileSize.REGION).covering_tiles())
        num_tiles_district = len(build(TileSize.DISTRICT).covering_tiles())

        # -1 + 400 = +399 for the one full REGION tile
        assert num_tiles_global == num_tiles_region
        assert num_tiles_region + 399 == num_tiles_district

    def test_subtiles_per_tile(self):
        """Test fewer subtiles per tile merges incomplete groups"""
        coords = [(0.1, 0.1), (0.1, 0.19), (0.19, 0.19), (0.19, 0.1)]
        exact = (
            TileAreaPolygonalBuilder()
            .set_precision(TileSize.NEIGHBORHOOD)
            .set_coordinates_list(coords)
            .build()
        )
        loose = (
            TileAreaPolygonalBuilder()
            .set_precision(TileSize.NEIGHBORHOOD)
            .set_subtiles_per_tile(100)
            .set_coordinates_list(coords)
            .build()
        )
        assert loose.subtiles_per_tile == 100
        assert len(loose) < len(exact)
        assert exact.contains_lat_lng(0.12, 0.12)
        assert loose.contains_lat_lng(0.12, 0.12)
        # partially covered districts are only merged in the loose area
        assert not exact.contains_lat_lng(0.195, 0.12)
        assert loose.contains_lat_lng(0.195, 0.12)

    def test_set_config(self, square_coordinates):
        """Test settings taken from a TilingConfig"""
        config = TilingConfig(precision=TileSize.DISTRICT, max_tile_size=TileSize.DISTRICT)
        area = (
            TileAreaPolygonalBuilder()
            .set_config(config)
            .set_coordinates_list(square_coordinates)
            .build()
        )
        assert area.max_tile_size is TileSize.DISTRICT
        assert area.tiles_for_precision(TileSize.REGION) == []

    def test_vertex_order_irrelevant(self, square_coordinates):
        """Test clockwise and counter-clockwise vertices give the same area"""
        forward = (
            TileAreaPolygonalBuilder()
            .set_precision(TileSize.DISTRICT)
            .set_coordinates_list(square_coordinates)
            .build()
        )
        backward = (
            TileAreaPolygonalBuilder()
            .set_precision(TileSize.DISTRICT)
            .set_coordinates_list(list(reversed(square_coordinates)))
            .build()
        )
        assert set(forward.covering_tiles()) == set(backward.covering_tiles())

    @pytest.mark.parametrize("tile_size", [TileSize.REGION, TileSize.DISTRICT])
    def test_precision_sets_smallest_tile_size(self, square_coordinates, tile_size):
        area = (
            TileAreaPolygonalBuilder()
            .set_precision(tile_size)
            .set_maximum_tile_size(tile_size)
            .set_coordinates_list(square_coordinates)
            .build()
        )
        assert area.smallest_tile_size is tile_size

    def test_polygon_at_antimeridian(self):
        """Test a polygon with vertices on longitude 180 is rasterized up to the antimeridian"""
        coords = [(0.0, 179.0), (0.0, 180.0), (1.0, 180.0), (1.0, 179.0)]

        area = (
            TileAreaPolygonalBuilder()
            .set_precision(TileSize.DISTRICT)
            .set_maximum_tile_size(TileSize.DISTRICT)
            .set_coordinates_list(coords)
            .build()
        )

        assert area.contains_lat_lng(0.5, 179.5)
        assert area.contains_lat_lng(0.5, 179.99)
        assert not area.contains_lat_lng(0.5, -179.99)
        inside = [t for t in area.covering_tiles() if t.address.startswith("6VGX")]
        assert len(inside) == 400
