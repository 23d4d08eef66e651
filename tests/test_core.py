"""Tests for tile_grid core functionality.

Tests: GridUtils, TileUtils, GridPlanner
Focus: Unit conversion accuracy, pixel axis convention, intersection edge cases,
clipping, per-zoom grid decisions

Tolerances: unit round trips must hold within 1e-9 (absolute for degrees,
relative for meters).

Note: Fixtures are defined in conftest.py (lines, bounds, tiles, grids).
"""

import numpy as np
import pytest
from hypothesis import given, settings, strategies as st

from tile_grid.constants import ProjectionConfig
from tile_grid.core.grid_planner import GridPlanner
from tile_grid.core.grid_utils import GridUtils
from tile_grid.core.tile_utils import TileUtils
from tile_grid.exceptions import BoundsNotSetError, UnitMismatchError
from tile_grid.model.base_grid import GridRenderMode
from tile_grid.model.bounds import Bounds
from tile_grid.model.graticule import Graticule
from tile_grid.model.grid_tile import GridTile
from tile_grid.model.line import Line
from tile_grid.model.point import Point
from tile_grid.model.unit import Unit

HALF_WORLD_M = ProjectionConfig.WEB_MERCATOR_HALF_WORLD_WIDTH
ROUNDTRIP_TOLERANCE = 1e-9


# =============================================================================
# TESTS FOR UNIT CONVERSION
# =============================================================================


class TestUnitConversion:
    """GridUtils.to_unit - Web Mercator forward and inverse."""

    def test_known_values(self) -> None:
        """Antimeridian and Mercator latitude limit land on the world edge."""
        edge = GridUtils.to_unit(Unit.DEGREE, 180.0, 0.0, Unit.METER)
        assert edge.is_meters()
        assert edge.x == pytest.approx(HALF_WORLD_M, rel=1e-12)
        top = GridUtils.to_unit(Unit.DEGREE, 0.0, ProjectionConfig.WEB_MERCATOR_MAX_LAT, Unit.METER)
        assert top.y == pytest.approx(HALF_WORLD_M, rel=1e-9)

    def test_one_degree_longitude_at_equator(self) -> None:
        """1° of longitude is ~111.32 km in Web Mercator."""
        point = GridUtils.to_unit(Unit.DEGREE, 1.0, 0.0, Unit.METER)
        assert point.x == pytest.approx(111319.49079327357, rel=1e-9)

    def test_same_unit_returns_copy(self) -> None:
        """Same-unit conversion is a plain new point."""
        point = GridUtils.to_unit(Unit.METER, 5.0, 6.0, Unit.METER)
        assert point == Point.meters(5.0, 6.0)

    def test_z_and_m_carried_over(self) -> None:
        """Only x and y are projected; z and m pass through."""
        same = GridUtils.to_unit(Unit.METER, 5.0, 6.0, Unit.METER, z=3.0, m=4.0)
        assert (same.z, same.m) == (3.0, 4.0)
        projected = GridUtils.to_unit(Unit.DEGREE, 10.0, 20.0, Unit.METER, z=3.0, m=4.0)
        assert (projected.z, projected.m) == (3.0, 4.0)

    def test_to_unit_opposite(self) -> None:
        """Source unit is inferred as the one that is not the target."""
        assert GridUtils.to_unit_opposite(10.0, 20.0, Unit.METER) == GridUtils.to_unit(
            Unit.DEGREE, 10.0, 20.0, Unit.METER
        )
        assert GridUtils.to_unit_opposite(1000.0, 2000.0, Unit.DEGREE) == GridUtils.to_unit(
            Unit.METER, 1000.0, 2000.0, Unit.DEGREE
        )

    @settings(max_examples=200, deadline=None)
    @given(
        lon=st.floats(min_value=-180.0, max_value=180.0),
        lat=st.floats(min_value=-85.0, max_value=85.0),
    )
    def test_degree_roundtrip(self, lon: float, lat: float) -> None:
        """Degree -> Meter -> Degree restores the coordinate."""
        point = Point.degrees(lon, lat)
        back = point.to_meters().to_degrees()
        assert back.is_degrees()
        assert back.x == pytest.approx(lon, abs=ROUNDTRIP_TOLERANCE)
        assert back.y == pytest.approx(lat, abs=ROUNDTRIP_TOLERANCE)

    @settings(max_examples=200, deadline=None)
    @given(
        x=st.floats(min_value=-HALF_WORLD_M, max_value=HALF_WORLD_M),
        y=st.floats(min_value=-HALF_WORLD_M, max_value=HALF_WORLD_M),
    )
    def test_meter_roundtrip(self, x: float, y: float) -> None:
        """Meter -> Degree -> Meter restores the coordinate."""
        point = Point.meters(x, y)
        back = point.to_degrees().to_meters()
        assert back.is_meters()
        assert back.x == pytest.approx(x, rel=ROUNDTRIP_TOLERANCE, abs=1e-6)
        assert back.y == pytest.approx(y, rel=ROUNDTRIP_TOLERANCE, abs=1e-6)

    def test_array_conversion_matches_scalar(self) -> None:
        """to_unit_array agrees with per-point conversion."""
        lons = np.array([-120.0, 0.0, 45.5])
        lats = np.array([-60.0, 0.0, 30.25])
        xs, ys = GridUtils.to_unit_array(Unit.DEGREE, lons, lats, Unit.METER)
        for lon, lat, x, y in zip(lons, lats, xs, ys):
            expected = Point.degrees(lon, lat).to_meters()
            assert x == pytest.approx(expected.x)
            assert y == pytest.approx(expected.y)

    def test_array_shape_mismatch(self) -> None:
        with pytest.raises(ValueError, match="shape"):
            GridUtils.to_unit_array(Unit.DEGREE, np.zeros(2), np.zeros(3), Unit.METER)


# =============================================================================
# TESTS FOR PIXEL PROJECTION
# =============================================================================


class TestPixelProjection:
    """GridUtils.get_pixel - north-up raster convention."""

    @pytest.mark.parametrize(
        "corner, expected",
        [
            ("northwest", (0.0, 0.0)),
            ("northeast", (256.0, 0.0)),
            ("southwest", (0.0, 512.0)),
            ("southeast", (256.0, 512.0)),
        ],
    )
    def test_corners(self, corner: str, expected: tuple[float, float]) -> None:
        """Every bounds corner maps to the matching raster corner."""
        bounds = Bounds.degrees(-10, -20, 30, 40)
        pixel = getattr(bounds, corner).get_pixel(width=256, height=512, bounds=bounds)
        assert pixel.x == pytest.approx(expected[0], abs=1e-9)
        assert pixel.y == pytest.approx(expected[1], abs=1e-9)

    def test_meter_bounds_degree_point(self, world_bounds_m: Bounds) -> None:
        """Point and bounds units are normalized before projecting."""
        pixel = GridUtils.get_pixel(width=512, height=512, bounds=world_bounds_m, point=Point.degrees(90.0, 0.0))
        assert pixel.x == pytest.approx(384.0)
        assert pixel.y == pytest.approx(256.0)

    def test_latitude_grows_upward(self, world_tile: GridTile) -> None:
        """Northern points have smaller pixel rows."""
        north = Point.degrees(0, 45).get_pixel_from_tile(world_tile)
        south = Point.degrees(0, -45).get_pixel_from_tile(world_tile)
        assert north.y < 128 < south.y
        assert north.y == pytest.approx(256 - south.y)

    def test_outside_bounds_extrapolates(self) -> None:
        """Points outside the bounds give pixels outside the raster."""
        bounds = Bounds.meters(0, 0, 100, 100)
        pixel = GridUtils.get_pixel(width=100, height=100, bounds=bounds, point=Point.meters(150, -50))
        assert pixel.x == pytest.approx(150.0)
        assert pixel.y == pytest.approx(150.0)

    @pytest.mark.parametrize(
        "bounds",
        [
            Bounds.from_points([Point.meters(5, 5)]),
            Bounds.meters(0, 0, 0, 100),
            Bounds.meters(0, 0, 100, 0),
        ],
    )
    def test_zero_area_bounds_rejected(self, bounds: Bounds) -> None:
        """Bounds without area cannot be projected into."""
        assert bounds.is_empty
        with pytest.raises(ValueError, match="without area"):
            GridUtils.get_pixel(width=256, height=256, bounds=bounds, point=Point.meters(5, 5))

    def test_touching_overlap_rejected(self) -> None:
        """The overlap of bounds sharing only an edge has no area."""
        overlap = Bounds.meters(0, 0, 10, 10).overlap(Bounds.meters(10, 0, 20, 10))
        assert overlap is not None and overlap.is_empty
        with pytest.raises(ValueError):
            Point.meters(10, 5).get_pixel(width=256, height=256, bounds=overlap)


# =============================================================================
# TESTS FOR INTERSECTION AND CLIPPING
# =============================================================================


class TestLineIntersection:
    """GridUtils.line_intersection - determinant method on segments."""

    def test_crossing_diagonals(self, diagonal_up: Line, diagonal_down: Line) -> None:
        """(0,0)-(2,2) and (0,2)-(2,0) meet at (1,1)."""
        crossing = GridUtils.line_intersection(diagonal_up, diagonal_down)
        assert crossing is not None
        assert crossing.x == pytest.approx(1.0)
        assert crossing.y == pytest.approx(1.0)
        assert crossing.unit is Unit.DEGREE

    def test_parallel(self) -> None:
        """Parallel segments never intersect."""
        line1 = Line.line(Point.degrees(0, 0), Point.degrees(2, 0))
        line2 = Line.line(Point.degrees(0, 1), Point.degrees(2, 1))
        assert GridUtils.line_intersection(line1, line2) is None

    def test_shared_endpoint(self) -> None:
        """Segments touching at an endpoint return that endpoint."""
        line1 = Line.line(Point.degrees(0, 0), Point.degrees(1, 1))
        line2 = Line.line(Point.degrees(1, 1), Point.degrees(2, 0))
        assert GridUtils.line_intersection(line1, line2) == Point.degrees(1, 1)

    def test_collinear_overlap(self) -> None:
        """Overlapping collinear segments have no single intersection."""
        line1 = Line.line(Point.degrees(0, 0), Point.degrees(2, 0))
        line2 = Line.line(Point.degrees(1, 0), Point.degrees(3, 0))
        assert GridUtils.line_intersection(line1, line2) is None

    def test_zero_length_segment(self, diagonal_up: Line) -> None:
        """A degenerate segment never intersects, even lying on the other line."""
        point_line = Line.line(Point.degrees(1, 1), Point.degrees(1, 1))
        assert GridUtils.line_intersection(diagonal_up, point_line) is None

    def test_crossing_outside_segment(self) -> None:
        """Infinite lines cross, but beyond the segment ends."""
        line1 = Line.line(Point.degrees(0, 0), Point.degrees(1, 1))
        line2 = Line.line(Point.degrees(3, 0), Point.degrees(2, 1))
        assert GridUtils.line_intersection(line1, line2) is None

    def test_meter_lines(self) -> None:
        """Meter lines intersect in meters."""
        line1 = Line.line(Point.meters(-1000, 0), Point.meters(1000, 0))
        line2 = Line.line(Point.meters(500, -1000), Point.meters(500, 1000))
        assert GridUtils.line_intersection(line1, line2) == Point.meters(500.0, 0.0)

    def test_unit_mismatch(self, diagonal_up: Line) -> None:
        """Lines in different units must be normalized by the caller."""
        meter_line = Line.line(Point.meters(0, 2), Point.meters(2, 0))
        with pytest.raises(UnitMismatchError):
            GridUtils.line_intersection(diagonal_up, meter_line)


class TestClipLine:
    """GridUtils.clip_line - grid lines against tile bounds."""

    def test_horizontal_through_bounds(self, square_bounds: Bounds) -> None:
        """A line crossing the bounds is cut at the west and east edges."""
        clipped = GridUtils.clip_line(Line.line(Point.degrees(-5, 5), Point.degrees(15, 5)), square_bounds)
        assert clipped is not None
        assert clipped.point1 == Point.degrees(0, 5)
        assert clipped.point2 == Point.degrees(10, 5)

    def test_direction_preserved(self, square_bounds: Bounds) -> None:
        clipped = GridUtils.clip_line(Line.line(Point.degrees(15, 5), Point.degrees(-5, 5)), square_bounds)
        assert clipped is not None
        assert clipped.point1 == Point.degrees(10, 5)
        assert clipped.point2 == Point.degrees(0, 5)

    def test_diagonal_through_corners(self, square_bounds: Bounds) -> None:
        clipped = GridUtils.clip_line(Line.line(Point.degrees(-5, -5), Point.degrees(15, 15)), square_bounds)
        assert clipped is not None
        assert clipped.point1.lon_lat == pytest.approx((0.0, 0.0))
        assert clipped.point2.lon_lat == pytest.approx((10.0, 10.0))

    def test_inside_line_unchanged(self, square_bounds: Bounds) -> None:
        line = Line.line(Point.degrees(2, 2), Point.degrees(8, 3))
        assert GridUtils.clip_line(line, square_bounds) == line

    def test_line_on_edge(self, square_bounds: Bounds) -> None:
        """A line running along the north edge is kept between the corners."""
        clipped = GridUtils.clip_line(Line.line(Point.degrees(-5, 10), Point.degrees(15, 10)), square_bounds)
        assert clipped is not None
        assert clipped.point1 == Point.degrees(0, 10)
        assert clipped.point2 == Point.degrees(10, 10)

    def test_outside_line(self, square_bounds: Bounds) -> None:
        assert GridUtils.clip_line(Line.line(Point.degrees(20, 20), Point.degrees(30, 30)), square_bounds) is None

    def test_bounds_converted_to_line_unit(self, square_bounds: Bounds) -> None:
        """Meter lines are clipped against the meter form of degree bounds."""
        line = Line.line(Point.degrees(-5, 5), Point.degrees(15, 5)).to_meters()
        clipped = GridUtils.clip_line(line, square_bounds)
        assert clipped is not None and clipped.is_meters()
        west = clipped.point1.to_degrees()
        assert west.x == pytest.approx(0.0, abs=1e-9)


# =============================================================================
# TESTS FOR TILES
# =============================================================================


class TestTileUtils:
    """TileUtils - XYZ pyramid in Web Mercator."""

    def test_tiles_per_side(self) -> None:
        assert TileUtils.tiles_per_side(0) == 1
        assert TileUtils.tiles_per_side(3) == 8

    def test_tile_bounds(self) -> None:
        """Tile (1, 0) at zoom 1 is the northeast quarter."""
        bounds = TileUtils.get_bounds(x=1, y=0, zoom=1)
        assert bounds == Bounds.meters(0.0, 0.0, HALF_WORLD_M, HALF_WORLD_M)

    @pytest.mark.parametrize("x, y, zoom", [(2, 0, 1), (0, -1, 1), (0, 0, -1), (0, 0, 31)])
    def test_out_of_range(self, x: int, y: int, zoom: int) -> None:
        with pytest.raises(ValueError):
            TileUtils.get_bounds(x=x, y=y, zoom=zoom)

    def test_tile_xy(self) -> None:
        """Quadrants at zoom 1; y grows south."""
        assert TileUtils.get_tile_xy(Point.degrees(0.1, 0.1), zoom=1) == (1, 0)
        assert TileUtils.get_tile_xy(Point.degrees(-0.1, -0.1), zoom=1) == (0, 1)
        assert TileUtils.get_tile_xy(Point.degrees(0, 89.9), zoom=2) == (2, 0)  # Clamped to top row

    def test_get_tiles(self) -> None:
        """Bounds around the origin touch all four zoom 1 tiles."""
        tiles = list(TileUtils.get_tiles(Bounds.degrees(-10, -10, 10, 10), zoom=1))
        assert tiles == [(0, 0), (1, 0), (0, 1), (1, 1)]

    def test_zoom_level(self) -> None:
        """A 1/32 world wide bounds matches zoom 5."""
        width = 2 * HALF_WORLD_M / 32
        assert TileUtils.get_zoom_level(Bounds.meters(0, 0, width, width)) == 5
        assert TileUtils.get_zoom_level(Bounds.meters(0, 0, 0, 0)) == 30

    def test_tolerance_distance(self) -> None:
        """Zoom 0 pixel covers ~156 km."""
        assert TileUtils.tolerance_distance(0) == pytest.approx(156543.03392804097)
        assert TileUtils.tolerance_distance(1) == pytest.approx(TileUtils.tolerance_distance(0) / 2)


# =============================================================================
# TESTS FOR GRID PLANNING
# =============================================================================


class TestGridPlanner:
    """GridPlanner - per-tile render decisions and pixel segments."""

    def test_render_modes_per_zoom(self, degree_graticule: Graticule) -> None:
        """Full at zoom 0, lines at 1-2, nothing beyond."""
        planner = GridPlanner([degree_graticule])
        assert planner.render_modes(0) == [(degree_graticule, GridRenderMode.FULL)]
        assert planner.render_modes(2) == [(degree_graticule, GridRenderMode.LINES)]
        assert planner.has_grids(2)
        assert not planner.has_grids(3)

    def test_full_grid_on_world_tile(self, degree_graticule: Graticule, world_tile: GridTile) -> None:
        """50° spacing over the world: 7 meridians and 3 parallels."""
        drawings = GridPlanner([degree_graticule]).plan(world_tile)
        assert len(drawings) == 1
        drawing = drawings[0]
        assert drawing.mode is GridRenderMode.FULL
        assert drawing.style is degree_graticule.style
        assert len(drawing.segments) == 10
        assert all(line.is_degrees() for line in drawing.lines)

        # Prime meridian: vertical through the tile center, bottom to top
        prime = drawing.segments[3]
        assert prime.start.x == pytest.approx(128.0, abs=1e-6)
        assert prime.end.x == pytest.approx(128.0, abs=1e-6)
        assert prime.start.y == pytest.approx(256.0, abs=1e-6)
        assert prime.end.y == pytest.approx(0.0, abs=1e-6)

        # Equator: horizontal through the tile center, west to east
        equator = drawing.segments[8]
        assert equator.start.y == pytest.approx(128.0, abs=1e-6)
        assert equator.start.x == pytest.approx(0.0, abs=1e-6)
        assert equator.end.x == pytest.approx(256.0, abs=1e-6)

    def test_lines_grid_on_zoomed_tile(self, degree_graticule: Graticule) -> None:
        """Zoom 1 uses the 90° lines spacing."""
        tile = GridTile.from_xyz(x=1, y=0, zoom=1)  # lon 0..180, lat 0..85
        drawings = GridPlanner([degree_graticule]).plan(tile)
        assert len(drawings) == 1
        assert drawings[0].mode is GridRenderMode.LINES
        meridians = sorted(line.point1.x for line in drawings[0].lines if line.point1.x == line.point2.x)
        assert meridians[:2] == pytest.approx([0.0, 90.0])

    def test_nothing_beyond_lines_range(self, degree_graticule: Graticule) -> None:
        tile = GridTile.from_xyz(x=0, y=0, zoom=3)
        assert GridPlanner([degree_graticule]).plan(tile) == []

    def test_explicit_zoom_overrides_tile(self, degree_graticule: Graticule) -> None:
        """A tile without zoom needs one passed in."""
        tile = GridTile(bounds=Bounds.degrees(-60, -60, 60, 60))
        with pytest.raises(ValueError, match="Zoom"):
            GridPlanner([degree_graticule]).plan(tile)
        drawings = GridPlanner([degree_graticule]).plan(tile, zoom=0)
        assert drawings[0].mode is GridRenderMode.FULL

    def test_tile_without_bounds(self, degree_graticule: Graticule) -> None:
        with pytest.raises(BoundsNotSetError):
            GridPlanner([degree_graticule]).plan(GridTile(zoom=0))

    def test_multiple_grids_in_order(self, degree_graticule: Graticule, world_tile: GridTile) -> None:
        """Each visible grid yields one drawing, hidden grids are skipped."""
        meter_grid = Graticule(unit=Unit.METER, spacing=5_000_000.0, max_zoom=0)
        hidden = Graticule(unit=Unit.DEGREE, spacing=1.0, min_zoom=10, lines_min_zoom=10)
        planner = GridPlanner([degree_graticule, hidden])
        planner.add_grid(meter_grid)
        drawings = planner.plan(world_tile)
        assert [d.grid for d in drawings] == [degree_graticule, meter_grid]
        assert all(line.is_meters() for line in drawings[1].lines)
