"""BaseGrid - Zoom-gated grid configuration.

Each grid carries two independent zoom ranges:
- the full grid range [min_zoom, max_zoom]
- the lines range [lines_min_zoom, lines_max_zoom], a reduced variant
  drawn where only the lines range applies

A zoom level can satisfy one, both, or neither range. The ranges are
never intersected automatically.

Style policy: a fresh grid starts with GridStyle.default(). Setting the
style to None stores None (explicit absence is allowed).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from tile_grid.constants import GridConfig
from tile_grid.model.grid_style import GridStyle

logger = logging.getLogger(__name__)


class GridRenderMode(Enum):
    """What to draw for a grid at one zoom level."""

    FULL = "full"  # Zoom within the full grid range
    LINES = "lines"  # Zoom only within the lines range
    NONE = "none"  # Grid not drawn


class BaseGrid:
    """Zoom applicability and style of one grid.

    Properties:
        min_zoom: Minimum zoom of the full grid (default 0)
        max_zoom: Maximum zoom of the full grid, None = unbounded
        lines_min_zoom: Minimum zoom of the lines variant, falls back to min_zoom
        lines_max_zoom: Maximum zoom of the lines variant, None = unbounded
        style: Grid style

    Example:
        grid = BaseGrid()
        grid.max_zoom = 2
        grid.is_within(3)  # False
    """

    def __init__(
        self,
        min_zoom: int = GridConfig.DEFAULT_MIN_ZOOM,
        max_zoom: Optional[int] = GridConfig.DEFAULT_MAX_ZOOM,
        lines_min_zoom: Optional[int] = None,
        lines_max_zoom: Optional[int] = None,
        style: Optional[GridStyle] = None,
    ) -> None:
        self._min_zoom = min_zoom
        self._max_zoom = max_zoom
        self._lines_min_zoom = lines_min_zoom
        self._lines_max_zoom = lines_max_zoom
        self._style: Optional[GridStyle] = style if style is not None else GridStyle.default()

    # =========================================================================
    # Full grid range
    # =========================================================================

    @property
    def min_zoom(self) -> int:
        return self._min_zoom

    @min_zoom.setter
    def min_zoom(self, min_zoom: int) -> None:
        logger.debug(f"Grid min zoom {self._min_zoom} -> {min_zoom}")
        self._min_zoom = min_zoom

    @property
    def max_zoom(self) -> Optional[int]:
        return self._max_zoom

    @max_zoom.setter
    def max_zoom(self, max_zoom: Optional[int]) -> None:
        logger.debug(f"Grid max zoom {self._max_zoom} -> {max_zoom}")
        self._max_zoom = max_zoom

    def has_max_zoom(self) -> bool:
        return self._max_zoom is not None

    def is_within(self, zoom: int) -> bool:
        """Check if the zoom level is within the full grid range."""
        return zoom >= self.min_zoom and (self.max_zoom is None or zoom <= self.max_zoom)

    # =========================================================================
    # Lines range
    # =========================================================================

    @property
    def lines_min_zoom(self) -> int:
        """Lines minimum zoom, min_zoom when not set."""
        return self._lines_min_zoom if self._lines_min_zoom is not None else self.min_zoom

    @lines_min_zoom.setter
    def lines_min_zoom(self, lines_min_zoom: Optional[int]) -> None:
        logger.debug(f"Grid lines min zoom {self._lines_min_zoom} -> {lines_min_zoom}")
        self._lines_min_zoom = lines_min_zoom

    def has_lines_min_zoom(self) -> bool:
        return self._lines_min_zoom is not None

    @property
    def lines_max_zoom(self) -> Optional[int]:
        return self._lines_max_zoom

    @lines_max_zoom.setter
    def lines_max_zoom(self, lines_max_zoom: Optional[int]) -> None:
        logger.debug(f"Grid lines max zoom {self._lines_max_zoom} -> {lines_max_zoom}")
        self._lines_max_zoom = lines_max_zoom

    def has_lines_max_zoom(self) -> bool:
        return self._lines_max_zoom is not None

    def is_lines_within(self, zoom: int) -> bool:
        """Check if the zoom level is within the lines range."""
        return zoom >= self.lines_min_zoom and (self.lines_max_zoom is None or zoom <= self.lines_max_zoom)

    def render_mode(self, zoom: int) -> GridRenderMode:
        """Decide what to draw at the zoom level.

        The full grid wins when both ranges apply.
        """
        if self.is_within(zoom):
            return GridRenderMode.FULL
        if self.is_lines_within(zoom):
            return GridRenderMode.LINES
        return GridRenderMode.NONE

    # =========================================================================
    # Style
    # =========================================================================

    @property
    def style(self) -> Optional[GridStyle]:
        return self._style

    @style.setter
    def style(self, style: Optional[GridStyle]) -> None:
        self._style = style

    def __repr__(self) -> str:
        return (
            f"BaseGrid(zoom={self.min_zoom}-{self.max_zoom}, "
            f"lines_zoom={self.lines_min_zoom}-{self.lines_max_zoom})"
        )
