"""
OpenGeoTiling Geofence Demo

Rasterize a GeoJSON polygon into Plus Code tiles and look up locations

Usage:
    python examples/demo_geofence.py --geojson ./area.geojson --precision DISTRICT
    python examples/demo_geofence.py --geojson ./area.geojson --point 47.37,8.54
"""

import argparse
import logging
import sys

from opengeotiling import TileSize, tile_area_from_geometry


def parse_args():
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="OpenGeoTiling Geofence Demo"
    )
    parser.add_argument(
        "--geojson",
        type=str,
        required=True,
        help="GeoJSON file with a Polygon or MultiPolygon"
    )
    parser.add_argument(
        "--precision",
        type=str,
        default="DISTRICT",
        choices=[size.name for size in TileSize],
        help="Size of the smallest tiles (default: DISTRICT)"
    )
    parser.add_argument(
        "--max-tile-size",
        type=str,
        default=None,
        choices=[size.name for size in TileSize],
        help="Largest tile size to merge into (default: no limit)"
    )
    parser.add_argument(
        "--point",
        type=str,
        action="append",
        default=[],
        help="Location to look up as 'lat,lng' (repeatable)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args()


def parse_point(point_str: str):
    """
    Parse a location string

    Example: "47.37,8.54" → (47.37, 8.54)
    """
    lat_str, lng_str = point_str.split(',')
    return float(lat_str), float(lng_str)


def main():
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    precision = TileSize.from_name(args.precision)
    max_tile_size = TileSize.from_name(args.max_tile_size) if args.max_tile_size else None

    area = tile_area_from_geometry(args.geojson, precision=precision, max_tile_size=max_tile_size)
    if area is None:
        print("No valid polygon found")
        return 1

    print("=" * 60)
    print(f"Tiles:         {len(area)}")
    print(f"Smallest size: {area.smallest_tile_size.name}")
    print("-" * 60)
    for size in TileSize:
        tiles = area.tiles_for_precision(size)
        if tiles:
            print(f"  {size.name:<13} {len(tiles)}")

    for point_str in args.point:
        lat, lng = parse_point(point_str)
        inside = area.contains_lat_lng(lat, lng)
        print(f"  ({lat}, {lng}) inside: {inside}")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
