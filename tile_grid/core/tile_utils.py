"""XYZ tile pyramid helpers in Web Mercator.

Tile (0, 0) at every zoom is the northwest corner of the square Web
Mercator world; x grows east, y grows south. Zoom z has 2^z tiles per side.
"""

from __future__ import annotations

import logging
from math import floor, log2
from typing import Iterator

from tile_grid.constants import ProjectionConfig, TileConfig
from tile_grid.model.bounds import Bounds
from tile_grid.model.point import Point

logger = logging.getLogger(__name__)

WORLD_WIDTH_M = 2 * ProjectionConfig.WEB_MERCATOR_HALF_WORLD_WIDTH


class TileUtils:
    """Static helpers for tile coordinates, tile bounds and zoom levels."""

    @staticmethod
    def tiles_per_side(zoom: int) -> int:
        """Number of tiles along one side of the world at zoom."""
        TileUtils._validate_zoom(zoom)
        return 2**zoom

    @staticmethod
    def tile_width_m(zoom: int) -> float:
        """Width (and height) of a tile at zoom in Web Mercator meters."""
        return WORLD_WIDTH_M / TileUtils.tiles_per_side(zoom)

    @staticmethod
    def get_bounds(x: int, y: int, zoom: int) -> Bounds:
        """Bounds in meters of the tile at XYZ coordinates.

        Raises:
            ValueError: If zoom or the tile coordinates are out of range.
        """
        count = TileUtils.tiles_per_side(zoom)
        if not (0 <= x < count and 0 <= y < count):
            raise ValueError(f"Tile ({x}, {y}) out of range for zoom {zoom} ({count} tiles per side)")
        size = TileUtils.tile_width_m(zoom)
        half = ProjectionConfig.WEB_MERCATOR_HALF_WORLD_WIDTH
        return Bounds.meters(
            min_longitude=-half + x * size,
            min_latitude=half - (y + 1) * size,
            max_longitude=-half + (x + 1) * size,
            max_latitude=half - y * size,
        )

    @staticmethod
    def get_tile_xy(point: Point, zoom: int) -> tuple[int, int]:
        """XYZ coordinates of the tile containing the point.

        Points outside the Web Mercator world are clamped to the edge tiles.
        """
        meters = point.to_meters()
        count = TileUtils.tiles_per_side(zoom)
        size = TileUtils.tile_width_m(zoom)
        half = ProjectionConfig.WEB_MERCATOR_HALF_WORLD_WIDTH
        x = floor((meters.x + half) / size)
        y = floor((half - meters.y) / size)
        return min(max(x, 0), count - 1), min(max(y, 0), count - 1)

    @staticmethod
    def get_tiles(bounds: Bounds, zoom: int) -> Iterator[tuple[int, int]]:
        """XYZ coordinates of all tiles overlapping or touching bounds, row by row."""
        meters = bounds.to_meters()
        min_x, min_y = TileUtils.get_tile_xy(meters.northwest, zoom)
        max_x, max_y = TileUtils.get_tile_xy(meters.southeast, zoom)
        logger.debug(f"Bounds cover tiles x={min_x}..{max_x}, y={min_y}..{max_y} at zoom {zoom}")
        for y in range(min_y, max_y + 1):
            for x in range(min_x, max_x + 1):
                yield x, y

    @staticmethod
    def get_zoom_level(bounds: Bounds) -> int:
        """Highest zoom whose tile width still covers the bounds width.

        Result is clamped to [TileConfig.MIN_ZOOM, TileConfig.MAX_ZOOM].
        """
        width = bounds.to_meters().width
        if width <= 0:
            return TileConfig.MAX_ZOOM
        zoom = floor(log2(WORLD_WIDTH_M / width))
        return min(max(zoom, TileConfig.MIN_ZOOM), TileConfig.MAX_ZOOM)

    @staticmethod
    def tolerance_distance(zoom: int, tile_size_px: int = TileConfig.TILE_SIZE_PX) -> float:
        """Ground distance in meters covered by one pixel at zoom."""
        if tile_size_px <= 0:
            raise ValueError(f"Tile size must be positive, got {tile_size_px}")
        return TileUtils.tile_width_m(zoom) / tile_size_px

    @staticmethod
    def _validate_zoom(zoom: int) -> None:
        if not TileConfig.MIN_ZOOM <= zoom <= TileConfig.MAX_ZOOM:
            raise ValueError(f"Zoom {zoom} out of range [{TileConfig.MIN_ZOOM}, {TileConfig.MAX_ZOOM}]")
