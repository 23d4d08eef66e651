"""GridTile - Raster tile a grid is drawn onto.

A tile knows its pixel size and, once placed, the bounds it covers.
Tiles built from XYZ coordinates carry Web Mercator (meter) bounds and
their zoom level, which BaseGrid uses for zoom gating.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tile_grid.constants import TileConfig
from tile_grid.model.bounds import Bounds
from tile_grid.model.unit import Unit


@dataclass
class GridTile:
    """A width x height pixel tile covering bounds.

    Attributes:
        width: Tile width in pixels
        height: Tile height in pixels
        bounds: Covered extent, None until the tile is placed
        zoom: Zoom level of the tile, None when not part of a tile pyramid
    """

    width: int = TileConfig.TILE_SIZE_PX
    height: int = TileConfig.TILE_SIZE_PX
    bounds: Optional[Bounds] = None
    zoom: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"GridTile size must be positive, got {self.width}x{self.height}")

    @classmethod
    def from_xyz(
        cls,
        x: int,
        y: int,
        zoom: int,
        width: int = TileConfig.TILE_SIZE_PX,
        height: int = TileConfig.TILE_SIZE_PX,
        unit: Unit = Unit.METER,
    ) -> GridTile:
        """Create the tile at XYZ coordinates with bounds in `unit`."""
        from tile_grid.core.tile_utils import TileUtils

        bounds = TileUtils.get_bounds(x=x, y=y, zoom=zoom).to_unit(unit)
        return cls(width=width, height=height, bounds=bounds, zoom=zoom)

    def has_bounds(self) -> bool:
        return self.bounds is not None

    def __repr__(self) -> str:
        return f"GridTile({self.width}x{self.height}, zoom={self.zoom}, bounds={self.bounds})"
