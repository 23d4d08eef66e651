"""Configuration constants for Tile Grid.

All configurable parameters are centralized here for easy tuning.

Classes:
    ProjectionConfig: Coordinate reference systems and Web Mercator extent
    TileConfig: XYZ tile pyramid parameters
    GridConfig: Default zoom ranges for grids
    StyleConfig: Default grid line styling
    ToleranceConfig: Floating point tolerances for geometry comparisons
"""

from math import atan, degrees, pi, sinh


class ProjectionConfig:
    """Coordinate reference systems and Web Mercator extent."""

    # WGS84 geographic coordinates (Unit.DEGREE)
    DEGREE_CRS = "EPSG:4326"
    # Spherical Web Mercator projected coordinates (Unit.METER)
    METER_CRS = "EPSG:3857"

    # Half of the world width in Web Mercator meters (pi * 6,378,137 m)
    WEB_MERCATOR_HALF_WORLD_WIDTH = 20037508.342789244

    # Latitude where the square Web Mercator world ends (~85.0511°)
    WEB_MERCATOR_MAX_LAT = degrees(atan(sinh(pi)))
    WEB_MERCATOR_MIN_LAT = -WEB_MERCATOR_MAX_LAT

    MAX_LON = 180.0
    MIN_LON = -180.0


class TileConfig:
    """XYZ tile pyramid parameters."""

    TILE_SIZE_PX = 256  # Standard slippy map tile width and height
    MIN_ZOOM = 0
    MAX_ZOOM = 30  # Beyond this tile counts overflow 32-bit indices


class GridConfig:
    """Default zoom applicability for grids."""

    # Grids are drawn from world view upwards unless configured otherwise
    DEFAULT_MIN_ZOOM = 0
    # None = unbounded
    DEFAULT_MAX_ZOOM = None

    # Graticule spacing when none is given (in the grid's unit)
    DEFAULT_DEGREE_SPACING = 10.0
    DEFAULT_METER_SPACING = 100_000.0

    # Safety cap on generated lines per direction per tile (spacing too fine for the tile)
    MAX_LINES_PER_DIRECTION = 512


class StyleConfig:
    """Default grid line styling."""

    DEFAULT_COLOR = "#000000"
    DEFAULT_WIDTH_PX = 1.0
    MIN_WIDTH_PX = 0.0


class ToleranceConfig:
    """Floating point tolerances for geometry comparisons."""

    # Determinant magnitude below which two segments are treated as parallel
    PARALLEL_EPSILON = 1e-12
    # Slack on the [0, 1] segment parameter so shared endpoints still intersect
    SEGMENT_PARAM_EPSILON = 1e-12
