"""Bounds - Unit-tagged axis-aligned extent.

Bounds is the geographic extent a tile (or any raster) covers. Pixel
projection interpolates linearly inside it, grid lines are clipped
against its four edges.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

import shapely.geometry
from shapely.geometry.base import BaseGeometry

from tile_grid.exceptions import UnitMismatchError, UnitNotSetError
from tile_grid.model.line import Line
from tile_grid.model.point import Point
from tile_grid.model.unit import Unit


@dataclass
class Bounds:
    """Extent from (min_longitude, min_latitude) to (max_longitude, max_latitude).

    Equality compares the four edges AND unit.

    Attributes:
        min_longitude: West edge
        min_latitude: South edge
        max_longitude: East edge
        max_latitude: North edge
        unit: Unit of the edges
    """

    min_longitude: float
    min_latitude: float
    max_longitude: float
    max_latitude: float
    unit: Optional[Unit] = Unit.DEGREE

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        if self.min_longitude > self.max_longitude or self.min_latitude > self.max_latitude:
            raise ValueError(
                f"Bounds minimum exceeds maximum: ({self.min_longitude}, {self.min_latitude}, "
                f"{self.max_longitude}, {self.max_latitude})"
            )

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def bounds(
        cls,
        min_longitude: float,
        min_latitude: float,
        max_longitude: float,
        max_latitude: float,
        unit: Optional[Unit] = None,
    ) -> Bounds:
        """Create bounds, in degrees when no unit is given."""
        return cls(
            min_longitude=min_longitude,
            min_latitude=min_latitude,
            max_longitude=max_longitude,
            max_latitude=max_latitude,
            unit=unit if unit is not None else Unit.DEGREE,
        )

    @classmethod
    def degrees(cls, min_longitude: float, min_latitude: float, max_longitude: float, max_latitude: float) -> Bounds:
        return cls.bounds(min_longitude, min_latitude, max_longitude, max_latitude, Unit.DEGREE)

    @classmethod
    def meters(cls, min_longitude: float, min_latitude: float, max_longitude: float, max_latitude: float) -> Bounds:
        return cls.bounds(min_longitude, min_latitude, max_longitude, max_latitude, Unit.METER)

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> Bounds:
        """Smallest bounds containing all points.

        Raises:
            ValueError: If no points are given.
            UnitMismatchError: If the points are in different units.
        """
        points = list(points)
        if not points:
            raise ValueError("Bounds need at least one point")
        unit = points[0].unit
        for point in points[1:]:
            if not point.is_unit(unit):
                raise UnitMismatchError(unit, point.unit)
        return cls(
            min_longitude=min(p.x for p in points),
            min_latitude=min(p.y for p in points),
            max_longitude=max(p.x for p in points),
            max_latitude=max(p.y for p in points),
            unit=unit,
        )

    @classmethod
    def from_shapely(cls, geometry: BaseGeometry, unit: Optional[Unit] = Unit.DEGREE) -> Bounds:
        """Bounds of a shapely geometry's envelope."""
        if geometry.is_empty:
            raise ValueError("Cannot build bounds from an empty geometry")
        min_x, min_y, max_x, max_y = geometry.bounds
        return cls(min_x, min_y, max_x, max_y, unit=unit)

    # =========================================================================
    # Dimensions
    # =========================================================================

    @property
    def width(self) -> float:
        """Longitude span."""
        return self.max_longitude - self.min_longitude

    @property
    def height(self) -> float:
        """Latitude span."""
        return self.max_latitude - self.min_latitude

    @property
    def is_empty(self) -> bool:
        """True when the bounds have no area."""
        return self.width <= 0 or self.height <= 0

    @property
    def centroid(self) -> Point:
        """Center point in the bounds' unit.

        For degree bounds the center latitude is taken in meters so that
        the centroid matches the visual center of a Web Mercator tile.
        """
        if self.is_degrees():
            return self.to_meters().centroid.to_degrees()
        return Point(
            x=(self.min_longitude + self.max_longitude) / 2,
            y=(self.min_latitude + self.max_latitude) / 2,
            unit=self.unit,
        )

    @property
    def southwest(self) -> Point:
        return Point(x=self.min_longitude, y=self.min_latitude, unit=self.unit)

    @property
    def northwest(self) -> Point:
        return Point(x=self.min_longitude, y=self.max_latitude, unit=self.unit)

    @property
    def northeast(self) -> Point:
        return Point(x=self.max_longitude, y=self.max_latitude, unit=self.unit)

    @property
    def southeast(self) -> Point:
        return Point(x=self.max_longitude, y=self.min_latitude, unit=self.unit)

    def lines(self) -> list[Line]:
        """The four edges, clockwise starting with the west edge.

        Returns:
            [west, north, east, south] lines, each in the bounds' unit.
        """
        southwest, northwest = self.southwest, self.northwest
        northeast, southeast = self.northeast, self.southeast
        return [
            Line.line(southwest, northwest),
            Line.line(northwest, northeast),
            Line.line(northeast, southeast),
            Line.line(southeast, southwest),
        ]

    # =========================================================================
    # Units
    # =========================================================================

    def is_unit(self, unit: Optional[Unit]) -> bool:
        return self.unit == unit

    def is_degrees(self) -> bool:
        return self.is_unit(Unit.DEGREE)

    def is_meters(self) -> bool:
        return self.is_unit(Unit.METER)

    def to_unit(self, unit: Unit) -> Bounds:
        """Convert to the unit.

        Returns:
            These same bounds if already in `unit`, otherwise new bounds.

        Raises:
            UnitNotSetError: If the bounds have no unit.
        """
        if self.is_unit(unit):
            return self
        if self.unit is None:
            raise UnitNotSetError()
        lower = self.southwest.to_unit(unit)
        upper = self.northeast.to_unit(unit)
        return Bounds(lower.x, lower.y, upper.x, upper.y, unit=unit)

    def to_degrees(self) -> Bounds:
        return self.to_unit(Unit.DEGREE)

    def to_meters(self) -> Bounds:
        return self.to_unit(Unit.METER)

    # =========================================================================
    # Set operations
    # =========================================================================

    def contains(self, point: Point) -> bool:
        """Check if the point lies inside or on the edge of the bounds.

        The point is converted to the bounds' unit first.
        """
        if self.unit is not None:
            point = point.to_unit(self.unit)
        return (
            self.min_longitude <= point.x <= self.max_longitude and self.min_latitude <= point.y <= self.max_latitude
        )

    def overlap(self, bounds: Bounds) -> Optional[Bounds]:
        """Overlapping bounds in this unit, None when the bounds don't touch."""
        other = self._in_this_unit(bounds)
        min_longitude = max(self.min_longitude, other.min_longitude)
        min_latitude = max(self.min_latitude, other.min_latitude)
        max_longitude = min(self.max_longitude, other.max_longitude)
        max_latitude = min(self.max_latitude, other.max_latitude)
        if min_longitude > max_longitude or min_latitude > max_latitude:
            return None
        return Bounds(min_longitude, min_latitude, max_longitude, max_latitude, unit=self.unit)

    def union(self, bounds: Bounds) -> Bounds:
        """Smallest bounds in this unit containing both bounds."""
        other = self._in_this_unit(bounds)
        return Bounds(
            min(self.min_longitude, other.min_longitude),
            min(self.min_latitude, other.min_latitude),
            max(self.max_longitude, other.max_longitude),
            max(self.max_latitude, other.max_latitude),
            unit=self.unit,
        )

    def to_shapely(self) -> shapely.geometry.Polygon:
        return shapely.geometry.box(self.min_longitude, self.min_latitude, self.max_longitude, self.max_latitude)

    @property
    def wkt(self) -> str:
        return self.to_shapely().wkt

    def _in_this_unit(self, bounds: Bounds) -> Bounds:
        if self.unit is None or bounds.unit is None:
            if not self.is_unit(bounds.unit):
                raise UnitMismatchError(self.unit, bounds.unit, context="Bounds")
            return bounds
        return bounds.to_unit(self.unit)
