"""Graticule - Evenly spaced meridian/parallel grid in one unit.

A Graticule is a BaseGrid that also knows how to produce its lines:
vertical lines at multiples of the spacing along x, horizontal lines at
multiples of the spacing along y. The lines variant uses its own (usually
coarser) spacing so fewer lines are drawn at zoom levels where only the
lines range applies.
"""

from __future__ import annotations

import logging
from math import ceil, floor
from typing import Optional

from tile_grid.constants import GridConfig
from tile_grid.model.base_grid import BaseGrid, GridRenderMode
from tile_grid.model.bounds import Bounds
from tile_grid.model.grid_style import GridStyle
from tile_grid.model.line import Line
from tile_grid.model.point import Point
from tile_grid.model.unit import Unit

logger = logging.getLogger(__name__)


class Graticule(BaseGrid):
    """Regular grid of lines every `spacing` units.

    Properties:
        unit: Unit the spacing and the generated lines are in
        spacing: Line interval for the full grid
        lines_spacing: Line interval for the lines variant, falls back to spacing

    Example:
        grid = Graticule(unit=Unit.DEGREE, spacing=1.0, lines_spacing=10.0, max_zoom=8)
        lines = grid.lines(tile.bounds, grid.render_mode(tile.zoom))
    """

    def __init__(
        self,
        unit: Unit = Unit.DEGREE,
        spacing: Optional[float] = None,
        lines_spacing: Optional[float] = None,
        min_zoom: int = GridConfig.DEFAULT_MIN_ZOOM,
        max_zoom: Optional[int] = GridConfig.DEFAULT_MAX_ZOOM,
        lines_min_zoom: Optional[int] = None,
        lines_max_zoom: Optional[int] = None,
        style: Optional[GridStyle] = None,
    ) -> None:
        super().__init__(
            min_zoom=min_zoom,
            max_zoom=max_zoom,
            lines_min_zoom=lines_min_zoom,
            lines_max_zoom=lines_max_zoom,
            style=style,
        )
        if spacing is None:
            spacing = GridConfig.DEFAULT_DEGREE_SPACING if unit is Unit.DEGREE else GridConfig.DEFAULT_METER_SPACING
        self.unit = unit
        self.spacing = spacing
        self.lines_spacing = lines_spacing

    @property
    def spacing(self) -> float:
        return self._spacing

    @spacing.setter
    def spacing(self, spacing: float) -> None:
        _validate_spacing(spacing)
        self._spacing = spacing

    @property
    def lines_spacing(self) -> float:
        """Lines variant spacing, spacing when not set."""
        return self._lines_spacing if self._lines_spacing is not None else self.spacing

    @lines_spacing.setter
    def lines_spacing(self, lines_spacing: Optional[float]) -> None:
        if lines_spacing is not None:
            _validate_spacing(lines_spacing)
        self._lines_spacing = lines_spacing

    def spacing_for(self, mode: GridRenderMode) -> Optional[float]:
        """Spacing used for the render mode, None when nothing is drawn."""
        if mode is GridRenderMode.FULL:
            return self.spacing
        if mode is GridRenderMode.LINES:
            return self.lines_spacing
        return None

    def lines(self, bounds: Bounds, mode: GridRenderMode = GridRenderMode.FULL) -> list[Line]:
        """Grid lines spanning the bounds for the render mode.

        Args:
            bounds: Extent to cover, converted to the grid's unit
            mode: Render mode deciding the spacing

        Returns:
            Vertical lines (south to north) followed by horizontal lines
            (west to east), all in the grid's unit. Empty for
            GridRenderMode.NONE or when the spacing would produce more than
            GridConfig.MAX_LINES_PER_DIRECTION lines in a direction.
        """
        spacing = self.spacing_for(mode)
        if spacing is None:
            return []

        bounds = bounds.to_unit(self.unit)
        x_steps = _steps(bounds.min_longitude, bounds.max_longitude, spacing)
        y_steps = _steps(bounds.min_latitude, bounds.max_latitude, spacing)
        if max(len(x_steps), len(y_steps)) > GridConfig.MAX_LINES_PER_DIRECTION:
            logger.warning(
                f"Spacing {spacing} {self.unit.value} too fine for bounds "
                f"({len(x_steps)} x {len(y_steps)} lines), skipping grid"
            )
            return []
        xs = [k * spacing for k in x_steps]
        ys = [k * spacing for k in y_steps]

        lines = [
            Line.line(
                Point(x=x, y=bounds.min_latitude, unit=self.unit),
                Point(x=x, y=bounds.max_latitude, unit=self.unit),
            )
            for x in xs
        ]
        lines.extend(
            Line.line(
                Point(x=bounds.min_longitude, y=y, unit=self.unit),
                Point(x=bounds.max_longitude, y=y, unit=self.unit),
            )
            for y in ys
        )
        return lines

    def __repr__(self) -> str:
        return (
            f"Graticule({self.unit.value}, spacing={self.spacing}, lines_spacing={self.lines_spacing}, "
            f"zoom={self.min_zoom}-{self.max_zoom}, lines_zoom={self.lines_min_zoom}-{self.lines_max_zoom})"
        )


def _validate_spacing(spacing: float) -> None:
    if spacing <= 0:
        raise ValueError(f"Grid spacing must be positive, got {spacing}")


def _steps(start: float, end: float, spacing: float) -> range:
    """Integer multipliers k with start <= k * spacing <= end."""
    return range(ceil(start / spacing), floor(end / spacing) + 1)
