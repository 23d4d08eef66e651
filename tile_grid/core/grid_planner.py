"""GridPlanner - Decide which grids to draw on a tile and where.

For each configured grid the planner:
1. Picks the render mode for the tile's zoom (full grid, lines only, none)
2. Generates the grid's lines for the tile bounds with the mode's spacing
3. Clips every line to the tile bounds
4. Projects the clipped endpoints into tile pixel space

The planner produces drawing instructions only; drawing them is up to
the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from tile_grid.core.grid_utils import GridUtils
from tile_grid.exceptions import BoundsNotSetError
from tile_grid.model.base_grid import GridRenderMode
from tile_grid.model.graticule import Graticule
from tile_grid.model.grid_style import GridStyle
from tile_grid.model.grid_tile import GridTile
from tile_grid.model.line import Line
from tile_grid.model.pixel import Pixel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PixelSegment:
    """A grid line clipped to a tile, in tile pixel space."""

    start: Pixel
    end: Pixel


@dataclass
class GridDrawing:
    """Everything needed to draw one grid on one tile.

    Attributes:
        grid: Grid being drawn
        mode: Render mode at the tile's zoom (never NONE)
        lines: Clipped lines in the grid's unit
        segments: The same lines projected into tile pixels
    """

    grid: Graticule
    mode: GridRenderMode
    lines: list[Line] = field(default_factory=list)
    segments: list[PixelSegment] = field(default_factory=list)

    @property
    def style(self) -> Optional[GridStyle]:
        return self.grid.style


class GridPlanner:
    """Plans grid drawings for tiles from a set of grids.

    Example:
        planner = GridPlanner([Graticule(spacing=10.0, max_zoom=5)])
        drawings = planner.plan(GridTile.from_xyz(x=0, y=0, zoom=1))
    """

    def __init__(self, grids: Iterable[Graticule] = ()) -> None:
        self.grids: list[Graticule] = list(grids)

    def add_grid(self, grid: Graticule) -> None:
        self.grids.append(grid)

    def render_modes(self, zoom: int) -> list[tuple[Graticule, GridRenderMode]]:
        """Render mode of every grid at the zoom level."""
        return [(grid, grid.render_mode(zoom)) for grid in self.grids]

    def has_grids(self, zoom: int) -> bool:
        """Check if any grid is drawn at the zoom level."""
        return any(mode is not GridRenderMode.NONE for _, mode in self.render_modes(zoom))

    def plan(self, tile: GridTile, zoom: Optional[int] = None) -> list[GridDrawing]:
        """Drawings for every grid visible on the tile.

        Args:
            tile: Tile to draw on (must have bounds)
            zoom: Zoom level, defaults to the tile's zoom

        Returns:
            One GridDrawing per grid whose render mode is not NONE,
            in grid order.

        Raises:
            BoundsNotSetError: If the tile has no bounds.
            ValueError: If no zoom is given and the tile has none.
        """
        if tile.bounds is None:
            raise BoundsNotSetError()
        if zoom is None:
            zoom = tile.zoom
        if zoom is None:
            raise ValueError("Zoom level required: tile has no zoom")

        drawings = []
        for grid, mode in self.render_modes(zoom):
            if mode is GridRenderMode.NONE:
                logger.debug(f"Zoom {zoom}: skipping {grid}")
                continue
            drawing = self._plan_grid(grid=grid, mode=mode, tile=tile)
            logger.debug(f"Zoom {zoom}: {mode.value} {grid} -> {len(drawing.segments)} segments")
            drawings.append(drawing)
        return drawings

    @staticmethod
    def _plan_grid(grid: Graticule, mode: GridRenderMode, tile: GridTile) -> GridDrawing:
        assert tile.bounds is not None
        bounds = tile.bounds.to_unit(grid.unit)
        drawing = GridDrawing(grid=grid, mode=mode)
        for line in grid.lines(bounds, mode):
            clipped = GridUtils.clip_line(line, bounds)
            if clipped is None:
                continue
            drawing.lines.append(clipped)
            drawing.segments.append(
                PixelSegment(
                    start=clipped.point1.get_pixel_from_tile(tile),
                    end=clipped.point2.get_pixel_from_tile(tile),
                )
            )
        return drawing
