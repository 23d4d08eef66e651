"""Shared pytest fixtures for tile_grid tests.

Provides reusable points, lines, bounds, tiles and grids.
All fixtures use explicit values with documented rationale.

COORDINATE SYSTEM:
    Intersection and clipping fixtures use small integer coordinates in
    degrees so the expected results are exact. Projection fixtures use the
    zoom 0 world tile, whose pixel center is the (0, 0) coordinate.
"""

import pytest

from tile_grid.constants import ProjectionConfig
from tile_grid.model.base_grid import BaseGrid
from tile_grid.model.bounds import Bounds
from tile_grid.model.graticule import Graticule
from tile_grid.model.grid_tile import GridTile
from tile_grid.model.line import Line
from tile_grid.model.point import Point
from tile_grid.model.unit import Unit

HALF_WORLD_M = ProjectionConfig.WEB_MERCATOR_HALF_WORLD_WIDTH


# =============================================================================
# POINTS AND LINES
# =============================================================================


@pytest.fixture
def diagonal_up() -> Line:
    """(0,0) -> (2,2) in degrees, crosses diagonal_down at (1,1)."""
    return Line.line(Point.degrees(0, 0), Point.degrees(2, 2))


@pytest.fixture
def diagonal_down() -> Line:
    """(0,2) -> (2,0) in degrees."""
    return Line.line(Point.degrees(0, 2), Point.degrees(2, 0))


@pytest.fixture
def unitless_point() -> Point:
    """Point copied without a unit - invalid conversion operand."""
    return Point.point_from_point(Point.degrees(10.0, 20.0))


# =============================================================================
# BOUNDS AND TILES
# =============================================================================


@pytest.fixture
def square_bounds() -> Bounds:
    """0..10 degrees in both directions, for clipping."""
    return Bounds.degrees(0, 0, 10, 10)


@pytest.fixture
def world_tile() -> GridTile:
    """Zoom 0 tile covering the whole Web Mercator world in meters."""
    return GridTile.from_xyz(x=0, y=0, zoom=0)


@pytest.fixture
def world_bounds_m() -> Bounds:
    """Whole Web Mercator world."""
    return Bounds.meters(-HALF_WORLD_M, -HALF_WORLD_M, HALF_WORLD_M, HALF_WORLD_M)


# =============================================================================
# GRIDS
# =============================================================================


@pytest.fixture
def fresh_grid() -> BaseGrid:
    """BaseGrid with all defaults."""
    return BaseGrid()


@pytest.fixture
def degree_graticule() -> Graticule:
    """50° full grid up to zoom 0, 90° lines-only grid up to zoom 2."""
    return Graticule(
        unit=Unit.DEGREE,
        spacing=50.0,
        lines_spacing=90.0,
        max_zoom=0,
        lines_max_zoom=2,
    )
