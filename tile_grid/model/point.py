"""Point - Unit-tagged coordinate, the geometry atom of the grid model.

A Point stores x (longitude-equivalent) and y (latitude-equivalent) plus
optional z and m values, and the Unit those coordinates are expressed in.
The unit decides how every consumer interprets x and y, so mixing degree
and meter coordinates in downstream arithmetic is never silent.

Used by:
- Line (two points sharing one unit)
- Bounds (corner points)
- GridUtils (unit conversion, pixel projection, intersection results)

Storage is composed over shapely: to_shapely() and point_from_point()
move between this model and shapely's simple-features Point.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

import numpy as np
import shapely.geometry

from tile_grid.exceptions import BoundsNotSetError, UnitNotSetError
from tile_grid.model.unit import Unit

if TYPE_CHECKING:
    from tile_grid.model.bounds import Bounds
    from tile_grid.model.grid_tile import GridTile
    from tile_grid.model.pixel import Pixel


@dataclass
class Point:
    """A 2D (optionally 3D/4D) coordinate tagged with a unit.

    Equality compares x, y, z, m AND unit: identical coordinates in
    different units are different points.

    Attributes:
        x: Longitude in degrees, or easting in meters
        y: Latitude in degrees, or northing in meters
        z: Optional elevation
        m: Optional measure
        unit: Unit of x and y; None means unset and blocks conversion

    Example:
        point = Point.degrees(longitude=10.3, latitude=46.98)
        meters = point.to_meters()
    """

    x: float
    y: float
    z: Optional[float] = None
    m: Optional[float] = None
    unit: Optional[Unit] = Unit.DEGREE

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        if np.isnan(self.x) or np.isnan(self.y):
            raise ValueError(f"Point cannot have NaN coordinates: ({self.x}, {self.y})")

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def point(cls, longitude: float, latitude: float, unit: Optional[Unit] = None) -> Point:
        """Create a point.

        Args:
            longitude: Longitude (x)
            latitude: Latitude (y)
            unit: Coordinate unit; Unit.DEGREE when omitted

        Returns:
            New point.
        """
        return cls(x=longitude, y=latitude, unit=unit if unit is not None else Unit.DEGREE)

    @classmethod
    def degrees(cls, longitude: float, latitude: float) -> Point:
        """Create a point in degrees."""
        return cls.point(longitude=longitude, latitude=latitude, unit=Unit.DEGREE)

    @classmethod
    def meters(cls, longitude: float, latitude: float) -> Point:
        """Create a point in meters."""
        return cls.point(longitude=longitude, latitude=latitude, unit=Unit.METER)

    @staticmethod
    def from_unit(from_unit: Unit, longitude: float, latitude: float, to_unit: Unit) -> Point:
        """Create a point from a coordinate in one unit, converted to another.

        Args:
            from_unit: Unit of the provided coordinate
            longitude: Longitude in from_unit
            latitude: Latitude in from_unit
            to_unit: Desired unit

        Returns:
            Point in to_unit.
        """
        from tile_grid.core.grid_utils import GridUtils

        return GridUtils.to_unit(from_unit=from_unit, x=longitude, y=latitude, to_unit=to_unit)

    @staticmethod
    def from_opposite_unit(longitude: float, latitude: float, unit: Unit) -> Point:
        """Create a point from a coordinate given in the unit opposite to `unit`."""
        from tile_grid.core.grid_utils import GridUtils

        return GridUtils.to_unit_opposite(x=longitude, y=latitude, unit=unit)

    @classmethod
    def degrees_to_meters(cls, longitude: float, latitude: float) -> Point:
        """Create a meter point from a degree coordinate."""
        return cls.from_unit(Unit.DEGREE, longitude, latitude, Unit.METER)

    @classmethod
    def meters_to_degrees(cls, longitude: float, latitude: float) -> Point:
        """Create a degree point from a meter coordinate."""
        return cls.from_unit(Unit.METER, longitude, latitude, Unit.DEGREE)

    @classmethod
    def point_from_point(
        cls,
        point: Union[Point, shapely.geometry.Point],
        unit: Optional[Unit] = None,
    ) -> Point:
        """Create a point copying the coordinates of another point.

        The unit is taken from `unit` only, never from the source, so
        passing no unit yields a point whose unit is unset.

        Args:
            point: Point or shapely Point to copy x, y, z, m from
            unit: Unit of the new point (None = unset)

        Returns:
            New point.
        """
        if isinstance(point, Point):
            return cls(x=point.x, y=point.y, z=point.z, m=point.m, unit=unit)
        z = point.z if point.has_z else None
        m = point.m if point.has_m else None
        return cls(x=point.x, y=point.y, z=z, m=m, unit=unit)

    # =========================================================================
    # Coordinates
    # =========================================================================

    @property
    def longitude(self) -> float:
        """Longitude (x)."""
        return self.x

    @longitude.setter
    def longitude(self, longitude: float) -> None:
        self.x = longitude

    @property
    def latitude(self) -> float:
        """Latitude (y)."""
        return self.y

    @latitude.setter
    def latitude(self, latitude: float) -> None:
        self.y = latitude

    @property
    def has_z(self) -> bool:
        return self.z is not None

    @property
    def has_m(self) -> bool:
        return self.m is not None

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (x, y) tuple - GeoJSON order."""
        return (self.x, self.y)

    # =========================================================================
    # Units
    # =========================================================================

    def is_unit(self, unit: Optional[Unit]) -> bool:
        """Check if this point is in the provided unit."""
        return self.unit == unit

    def is_degrees(self) -> bool:
        return self.is_unit(Unit.DEGREE)

    def is_meters(self) -> bool:
        return self.is_unit(Unit.METER)

    def to_unit(self, unit: Unit) -> Point:
        """Convert to the unit.

        Args:
            unit: Target unit

        Returns:
            This same point object if already in `unit`, otherwise a new
            point with z and m carried over.

        Raises:
            UnitNotSetError: If this point has no unit.
        """
        if self.is_unit(unit):
            return self
        if self.unit is None:
            raise UnitNotSetError()

        from tile_grid.core.grid_utils import GridUtils

        return GridUtils.to_unit(from_unit=self.unit, x=self.x, y=self.y, to_unit=unit, z=self.z, m=self.m)

    def to_degrees(self) -> Point:
        """Convert to degrees, same point if already in degrees."""
        return self.to_unit(Unit.DEGREE)

    def to_meters(self) -> Point:
        """Convert to meters, same point if already in meters."""
        return self.to_unit(Unit.METER)

    # =========================================================================
    # Pixel projection
    # =========================================================================

    def get_pixel_from_tile(self, tile: GridTile) -> Pixel:
        """Get the pixel where the point fits into the tile.

        Raises:
            BoundsNotSetError: If the tile has no bounds.
        """
        bounds = tile.bounds
        if bounds is None:
            raise BoundsNotSetError()
        return self.get_pixel(width=tile.width, height=tile.height, bounds=bounds)

    def get_pixel(self, width: float, height: float, bounds: Bounds) -> Pixel:
        """Get the pixel where the point fits into a width x height raster covering bounds."""
        from tile_grid.core.grid_utils import GridUtils

        return GridUtils.get_pixel(width=width, height=height, bounds=bounds, point=self)

    # =========================================================================
    # Interop
    # =========================================================================

    def copy(self) -> Point:
        return Point(x=self.x, y=self.y, z=self.z, m=self.m, unit=self.unit)

    def to_shapely(self) -> shapely.geometry.Point:
        """Shapely Point with this point's coordinates (the unit is dropped)."""
        if self.has_z:
            return shapely.geometry.Point(self.x, self.y, self.z)
        return shapely.geometry.Point(self.x, self.y)

    @property
    def wkt(self) -> str:
        return self.to_shapely().wkt

    def __repr__(self) -> str:
        unit = self.unit.value if self.unit is not None else "unset"
        return f"Point(x={self.x:.6f}, y={self.y:.6f}, unit={unit})"
