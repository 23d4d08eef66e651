"""Unit - Coordinate units supported by the grid geometry model."""

from enum import Enum

from tile_grid.constants import ProjectionConfig


class Unit(Enum):
    """Unit of a coordinate pair. Compared by value."""

    DEGREE = "degree"  # WGS84 longitude / latitude
    METER = "meter"  # Web Mercator easting / northing

    @property
    def crs(self) -> str:
        """Coordinate reference system the unit's coordinates live in."""
        if self is Unit.DEGREE:
            return ProjectionConfig.DEGREE_CRS
        return ProjectionConfig.METER_CRS

    @property
    def opposite(self) -> "Unit":
        """The other supported unit."""
        return Unit.METER if self is Unit.DEGREE else Unit.DEGREE
