"""
Spatial utilities for GeoJSON-based tiling

Supports:
- GeoJSON polygon/multipolygon input (dicts, files)
- Shapely geometry input and output
- Tile and tile area to geometry conversion
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from shapely.geometry import MultiPolygon, Polygon, box, shape
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from opengeotiling.area.base import TileArea
from opengeotiling.area.merging import MergingTileArea
from opengeotiling.core.tile import OpenGeoTile
from opengeotiling.core.tile_size import TileSize
from opengeotiling.query.polygonal import TileAreaPolygonalBuilder

logger = logging.getLogger(__name__)


def tile_area_from_geometry(
    geometry: Union[dict, BaseGeometry, str, Path],
    precision: TileSize = TileSize.DISTRICT,
    max_tile_size: Optional[TileSize] = None,
) -> Optional[MergingTileArea]:
    """
    Rasterize a polygon geometry into a tile area

    Only exterior rings are used; holes are not subtracted.

    Args:
        geometry: GeoJSON dict, Shapely geometry, or path to GeoJSON file.
                  Coordinates are (longitude, latitude) as in GeoJSON.
        precision: Size of the smallest tiles
        max_tile_size: Largest tile size merging may produce (default: no cap)

    Returns:
        MergingTileArea covering the geometry, or None if no polygon part
        has at least three valid vertices

    Examples:
        >>> geojson = {
        ...     "type": "Polygon",
        ...     "coordinates": [[[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0], [0.0, 0.0]]]
        ... }
        >>> area = tile_area_from_geometry(geojson, precision=TileSize.DISTRICT)
        >>> area.contains_lat_lng(0.5, 0.5)
        True
    """
    geom = _parse_geometry(geometry)

    if isinstance(geom, Polygon):
        polygons = [geom]
    elif isinstance(geom, MultiPolygon):
        polygons = list(geom.geoms)
    else:
        raise TypeError(f"Unsupported geometry type: {geom.geom_type}")

    result: Optional[MergingTileArea] = None
    for polygon in polygons:
        builder = TileAreaPolygonalBuilder().set_precision(precision)
        if max_tile_size is not None:
            builder.set_maximum_tile_size(max_tile_size)
        # exterior ring repeats its first point; the builder closes polygons itself
        ring = list(polygon.exterior.coords)[:-1]
        area = builder.set_coordinates_list([(lat, lng) for lng, lat, *_ in ring]).build()

        if area is None:
            logger.warning("Skipping polygon with fewer than three valid vertices")
            continue
        if result is None:
            result = area
        else:
            result.add_tile_area(area)

    return result


def tile_to_polygon(tile: OpenGeoTile) -> Polygon:
    """
    Get the outline of a tile as a Shapely polygon

    Examples:
        >>> tile_to_polygon(OpenGeoTile.build_from_tile_address("6F")).bounds
        (0.0, -10.0, 20.0, 10.0)
    """
    return box(*tile.bounds)


def tile_area_to_geometry(area: TileArea) -> BaseGeometry:
    """Union of the outlines of all covering tiles of an area"""
    return unary_union([tile_to_polygon(tile) for tile in area.covering_tiles()])


def _parse_geometry(
    geometry: Union[dict, BaseGeometry, str, Path],
) -> BaseGeometry:
    """
    Parse geometry from various input formats

    Args:
        geometry: GeoJSON dict, Shapely geometry, or path to GeoJSON file

    Returns:
        Shapely geometry object
    """
    # Already a Shapely geometry
    if isinstance(geometry, BaseGeometry):
        return geometry

    # Path to GeoJSON file
    if isinstance(geometry, (str, Path)):
        path = Path(geometry)
        if not path.exists():
            raise FileNotFoundError(f"GeoJSON file not found: {geometry}")
        with open(path) as f:
            geojson = json.load(f)
        return _geojson_to_geometry(geojson)

    # GeoJSON dict
    if isinstance(geometry, dict):
        return _geojson_to_geometry(geometry)

    raise TypeError(f"Unsupported geometry type: {type(geometry)}")


def _geojson_to_geometry(geojson: dict) -> BaseGeometry:
    """
    Convert GeoJSON dict to Shapely geometry

    Handles FeatureCollection, Feature and raw geometry types.
    """
    if geojson.get("type") == "FeatureCollection":
        features = geojson.get("features", [])
        if not features:
            raise ValueError("Empty FeatureCollection")
        if len(features) == 1:
            return shape(features[0]["geometry"])
        return unary_union([shape(f["geometry"]) for f in features])

    if geojson.get("type") == "Feature":
        return shape(geojson["geometry"])

    return shape(geojson)
