"""Core transforms and planning for tile grids.

- GridUtils: Unit conversion, pixel projection, intersection, clipping
- TileUtils: XYZ tile bounds, tile coordinates and zoom levels
- GridPlanner: Per-tile decision of which grids to draw and where
"""

from tile_grid.core.grid_planner import GridDrawing, GridPlanner, PixelSegment
from tile_grid.core.grid_utils import GridUtils
from tile_grid.core.tile_utils import TileUtils

__all__ = [
    # Grid utils
    "GridUtils",
    # Tile utils
    "TileUtils",
    # Grid planner
    "GridPlanner",
    "GridDrawing",
    "PixelSegment",
]
