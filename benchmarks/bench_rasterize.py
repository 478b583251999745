"""Benchmark script for polygon rasterization and merging"""
import time

from opengeotiling import MergingTileArea, OpenGeoTile, TileAreaPolygonalBuilder, TileSize


def benchmark_rasterize(coordinates, precision, iterations=10):
    """Benchmark TileAreaPolygonalBuilder.build() performance"""
    builder = (
        TileAreaPolygonalBuilder()
        .set_precision(precision)
        .set_coordinates_list(coordinates)
    )

    start = time.perf_counter()
    for _ in range(iterations):
        area = builder.build()
    elapsed = time.perf_counter() - start

    return elapsed / iterations, area


def benchmark_contains(area, iterations=10000):
    """Benchmark MergingTileArea.contains() performance"""
    tile = OpenGeoTile.build_from_latitude_and_longitude(5.5, 5.5, TileSize.NEIGHBORHOOD)

    start = time.perf_counter()
    for _ in range(iterations):
        area.contains(tile)
    elapsed = time.perf_counter() - start

    return elapsed / iterations


if __name__ == '__main__':
    # Test case: 10x10 degree square at DISTRICT precision (40000 tiles merged into 100)
    square = [(0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0)]

    print("=" * 60)
    print("Rasterization Performance Benchmark")
    print("=" * 60)
    print(f"Polygon:      {square}")
    print(f"Precision:    {TileSize.DISTRICT.name}")
    print(f"Iterations:   10")
    print("-" * 60)

    build_time, area = benchmark_rasterize(square, TileSize.DISTRICT)
    print(f"build():      {build_time*1000:.2f} ms")
    print(f"Tiles:        {len(area)}")

    assert isinstance(area, MergingTileArea)
    contains_time = benchmark_contains(area)
    print(f"contains():   {contains_time*1e6:.2f} us")
    print("=" * 60)
