"""Coordinate transforms and segment intersection for grid rendering.

Provides the arithmetic every grid operation relies on:
- Unit conversion between Degree (EPSG:4326) and Meter (EPSG:3857)
- Pixel projection of a point into a raster covering bounds
- Segment/segment intersection (determinant method)
- Clipping a grid line to bounds

Pixel axis convention: x grows east, y grows south (north-up raster).
The northwest corner of the bounds maps to pixel (0, 0), the southeast
corner to (width, height).
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

import numpy as np
import pyproj

from tile_grid.constants import ToleranceConfig
from tile_grid.exceptions import UnitMismatchError
from tile_grid.model.bounds import Bounds
from tile_grid.model.line import Line
from tile_grid.model.pixel import Pixel
from tile_grid.model.point import Point
from tile_grid.model.unit import Unit


@lru_cache(maxsize=None)
def _transformer(from_unit: Unit, to_unit: Unit) -> pyproj.Transformer:
    """Cached lon/lat ordered transformer between two units."""
    return pyproj.Transformer.from_crs(pyproj.CRS(from_unit.crs), pyproj.CRS(to_unit.crs), always_xy=True)


class GridUtils:
    """Static helpers for unit conversion, pixel projection and intersection."""

    # =========================================================================
    # Unit conversion
    # =========================================================================

    @staticmethod
    def to_unit(
        from_unit: Unit,
        x: float,
        y: float,
        to_unit: Unit,
        z: Optional[float] = None,
        m: Optional[float] = None,
    ) -> Point:
        """Convert a coordinate between units.

        Degree to Meter is the spherical Web Mercator forward projection,
        Meter to Degree its inverse. Converting A -> B -> A returns the
        original coordinate within floating point tolerance.

        Args:
            from_unit: Unit of x and y
            x: Longitude or easting
            y: Latitude or northing
            to_unit: Desired unit
            z: Optional elevation, carried over unchanged
            m: Optional measure, carried over unchanged

        Returns:
            New point in to_unit (a plain copy when the units are equal).
        """
        if from_unit == to_unit:
            return Point(x=x, y=y, z=z, m=m, unit=to_unit)
        new_x, new_y = _transformer(from_unit, to_unit).transform(x, y)
        return Point(x=float(new_x), y=float(new_y), z=z, m=m, unit=to_unit)

    @staticmethod
    def to_unit_opposite(x: float, y: float, unit: Unit) -> Point:
        """Convert a coordinate given in the unit that is not `unit` into `unit`."""
        return GridUtils.to_unit(from_unit=unit.opposite, x=x, y=y, to_unit=unit)

    @staticmethod
    def to_unit_array(
        from_unit: Unit,
        xs: np.ndarray,
        ys: np.ndarray,
        to_unit: Unit,
    ) -> tuple[np.ndarray, np.ndarray]:
        """Vectorized to_unit() for coordinate arrays.

        Returns:
            Tuple (xs, ys) of float arrays in to_unit.
        """
        xs = np.asarray(xs, dtype=float)
        ys = np.asarray(ys, dtype=float)
        if xs.shape != ys.shape:
            raise ValueError(f"Coordinate arrays differ in shape: {xs.shape} vs {ys.shape}")
        if from_unit == to_unit:
            return xs.copy(), ys.copy()
        new_xs, new_ys = _transformer(from_unit, to_unit).transform(xs, ys)
        return np.asarray(new_xs, dtype=float), np.asarray(new_ys, dtype=float)

    # =========================================================================
    # Pixel projection
    # =========================================================================

    @staticmethod
    def get_pixel(width: float, height: float, bounds: Bounds, point: Point) -> Pixel:
        """Project a point into a width x height raster covering bounds.

        Point and bounds are both normalized to meters first so the mapping
        is linear in Web Mercator space.

        Args:
            width: Raster width in pixels
            height: Raster height in pixels
            bounds: Extent the raster covers
            point: Point to project

        Returns:
            Pixel, possibly fractional or outside the raster.

        Raises:
            ValueError: If the bounds have no area.
        """
        point = point.to_meters()
        bounds = bounds.to_meters()
        if bounds.is_empty:
            raise ValueError(f"Cannot project into bounds without area: {bounds.width} x {bounds.height}")
        x = GridUtils.get_x_pixel(width=width, bounds=bounds, longitude=point.longitude)
        y = GridUtils.get_y_pixel(height=height, bounds=bounds, latitude=point.latitude)
        return Pixel(x=x, y=y)

    @staticmethod
    def get_x_pixel(width: float, bounds: Bounds, longitude: float) -> float:
        """Pixel column of a longitude, measured from the west edge."""
        offset = longitude - bounds.min_longitude
        return offset / bounds.width * width

    @staticmethod
    def get_y_pixel(height: float, bounds: Bounds, latitude: float) -> float:
        """Pixel row of a latitude, measured from the north edge."""
        offset = bounds.max_latitude - latitude
        return offset / bounds.height * height

    # =========================================================================
    # Intersection
    # =========================================================================

    @staticmethod
    def line_intersection(line1: Line, line2: Line) -> Optional[Point]:
        """Intersection point of two same-unit segments.

        Returns:
            Point in the lines' unit, or None for parallel, collinear,
            zero-length or non-touching segments.

        Raises:
            UnitMismatchError: If the lines are in different units.
        """
        if line1.unit != line2.unit:
            raise UnitMismatchError(line1.unit, line2.unit, context="Lines")
        return GridUtils.intersection(line1.point1, line1.point2, line2.point1, line2.point2)

    @staticmethod
    def intersection(
        line1_point1: Point,
        line1_point2: Point,
        line2_point1: Point,
        line2_point2: Point,
    ) -> Optional[Point]:
        """Intersection of segment (line1_point1, line1_point2) with (line2_point1, line2_point2).

        Solves p1 + t * (p2 - p1) = p3 + u * (p4 - p3) with the determinant
        of the two direction vectors. An intersection exists when the
        determinant is non-zero and both t and u lie in [0, 1].
        """
        x1, y1 = line1_point1.x, line1_point1.y
        x2, y2 = line1_point2.x, line1_point2.y
        x3, y3 = line2_point1.x, line2_point1.y
        x4, y4 = line2_point2.x, line2_point2.y

        determinant = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
        # Scale by segment lengths so the parallel test is independent of unit magnitude
        scale = np.hypot(x2 - x1, y2 - y1) * np.hypot(x4 - x3, y4 - y3)
        if abs(determinant) <= ToleranceConfig.PARALLEL_EPSILON * scale:
            return None

        t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / determinant
        u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / determinant

        eps = ToleranceConfig.SEGMENT_PARAM_EPSILON
        if not (-eps <= t <= 1 + eps and -eps <= u <= 1 + eps):
            return None

        t = min(max(t, 0.0), 1.0)
        if t == 0.0:
            x, y = x1, y1
        elif t == 1.0:
            x, y = x2, y2
        else:
            x = x1 + t * (x2 - x1)
            y = y1 + t * (y2 - y1)
        return Point(x=float(x), y=float(y), unit=line1_point1.unit)

    # =========================================================================
    # Clipping
    # =========================================================================

    @staticmethod
    def clip_line(line: Line, bounds: Bounds) -> Optional[Line]:
        """Clip a line to bounds by intersecting it with the four bounds edges.

        Args:
            line: Line to clip
            bounds: Bounds, converted to the line's unit

        Returns:
            The part of the line inside the bounds (same direction, line's
            unit), or None if less than a segment remains.
        """
        if line.unit is not None:
            bounds = bounds.to_unit(line.unit)

        start, end = line.point1, line.point2
        dx, dy = end.x - start.x, end.y - start.y
        length_sq = dx * dx + dy * dy
        if length_sq == 0:
            return None

        candidates = [p for p in (start, end) if bounds.contains(p)]
        for edge in bounds.lines():
            crossing = GridUtils.line_intersection(line, edge)
            if crossing is not None:
                candidates.append(crossing)
        if len(candidates) < 2:
            return None

        # Order the candidates along the line direction
        def param(p: Point) -> float:
            return ((p.x - start.x) * dx + (p.y - start.y) * dy) / length_sq

        first = min(candidates, key=param)
        last = max(candidates, key=param)
        if param(last) - param(first) <= ToleranceConfig.SEGMENT_PARAM_EPSILON:
            return None
        return Line.line(
            Point(x=first.x, y=first.y, unit=line.unit),
            Point(x=last.x, y=last.y, unit=line.unit),
        )
