"""Line - Segment between two points that share one unit.

Both endpoints must carry the same unit after every mutation. The check runs
synchronously in set_points(), and the single-endpoint setters rebuild the
pair through set_points() so they are validated too.

Reference: GridUtils.line_intersection for the intersection algorithm.
"""

from __future__ import annotations

from typing import Optional

import shapely.geometry

from tile_grid.exceptions import UnitMismatchError
from tile_grid.model.point import Point
from tile_grid.model.unit import Unit


class Line:
    """Line between two points.

    Properties:
        point1: First point
        point2: Second point
        unit: Unit of the line (the unit of point1, equal to point2's)

    Example:
        line = Line.line(Point.degrees(0, 0), Point.degrees(2, 2))
        crossing = line.intersection(Line.line(Point.degrees(0, 2), Point.degrees(2, 0)))
    """

    def __init__(self) -> None:
        self._points: list[Point] = []

    @classmethod
    def create(cls) -> Line:
        """Create an empty line without points."""
        return cls()

    @classmethod
    def line(cls, point1: Point, point2: Point) -> Line:
        """Create a line.

        Raises:
            UnitMismatchError: If the points are in different units.
        """
        line = cls.create()
        line.set_points(point1, point2)
        return line

    @classmethod
    def from_shapely(cls, line_string: shapely.geometry.LineString, unit: Optional[Unit] = Unit.DEGREE) -> Line:
        """Create a line from the first and last coordinate of a shapely LineString."""
        if len(line_string.coords) < 2:
            raise ValueError(f"LineString needs at least 2 coordinates, got {len(line_string.coords)}")
        start = shapely.geometry.Point(line_string.coords[0])
        end = shapely.geometry.Point(line_string.coords[-1])
        return cls.line(
            Point.point_from_point(start, unit=unit),
            Point.point_from_point(end, unit=unit),
        )

    # =========================================================================
    # Points
    # =========================================================================

    @property
    def points(self) -> list[Point]:
        """Copy of the point list (empty for a line from create())."""
        return list(self._points)

    @property
    def is_empty(self) -> bool:
        return not self._points

    @property
    def point1(self) -> Point:
        """First point."""
        return self._endpoint(0)

    @point1.setter
    def point1(self, point1: Point) -> None:
        self.set_point1(point1)

    @property
    def point2(self) -> Point:
        """Second point."""
        return self._endpoint(1)

    @point2.setter
    def point2(self, point2: Point) -> None:
        self.set_point2(point2)

    def set_point1(self, point1: Point) -> None:
        """Replace the first point, re-validating units."""
        self.set_points(point1, self.point2)

    def set_point2(self, point2: Point) -> None:
        """Replace the second point, re-validating units."""
        self.set_points(self.point1, point2)

    def set_points(self, point1: Point, point2: Point) -> None:
        """Replace both points after validating they share a unit.

        The line is left unchanged when validation fails.

        Raises:
            UnitMismatchError: If the points are in different units.
        """
        self._validate_units(point1, point2)
        self._points = [point1, point2]

    # =========================================================================
    # Units
    # =========================================================================

    @property
    def unit(self) -> Optional[Unit]:
        """Unit of the line, None if unset or empty."""
        if self.is_empty:
            return None
        return self.point1.unit

    def is_unit(self, unit: Optional[Unit]) -> bool:
        return not self.is_empty and self.point1.is_unit(unit)

    def is_degrees(self) -> bool:
        return self.is_unit(Unit.DEGREE)

    def is_meters(self) -> bool:
        return self.is_unit(Unit.METER)

    def to_unit(self, unit: Unit) -> Line:
        """Convert to the unit.

        Returns:
            This same line if already in `unit`, otherwise a converted copy.

        Raises:
            UnitNotSetError: If the line's points have no unit.
        """
        if self.is_unit(unit):
            return self
        line = self.copy()
        line.set_points(self.point1.to_unit(unit), self.point2.to_unit(unit))
        return line

    def to_degrees(self) -> Line:
        return self.to_unit(Unit.DEGREE)

    def to_meters(self) -> Line:
        return self.to_unit(Unit.METER)

    # =========================================================================
    # Geometry
    # =========================================================================

    def intersection(self, line: Line) -> Optional[Point]:
        """Get the intersection between this line and the provided line.

        The other line is converted to this line's unit first, so the result
        is in this line's unit.

        Returns:
            Intersection point, or None when the segments don't cross.
        """
        from tile_grid.core.grid_utils import GridUtils

        other = line.to_unit(self.unit) if self.unit is not None and line.unit is not None else line
        return GridUtils.line_intersection(self, other)

    def copy(self) -> Line:
        line = Line.create()
        if not self.is_empty:
            line.set_points(self.point1.copy(), self.point2.copy())
        return line

    def to_shapely(self) -> shapely.geometry.LineString:
        return shapely.geometry.LineString([p.to_shapely() for p in self._points])

    @property
    def wkt(self) -> str:
        return self.to_shapely().wkt

    def _endpoint(self, index: int) -> Point:
        if len(self._points) < 2:
            raise ValueError("Line has no points set")
        return self._points[index]

    @staticmethod
    def _validate_units(point1: Point, point2: Point) -> None:
        """Validate units are the same."""
        if not point1.is_unit(point2.unit):
            raise UnitMismatchError(point1.unit, point2.unit)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self._points == other._points

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.is_empty:
            return "Line(empty)"
        return f"Line({self.point1!r} -> {self.point2!r})"
