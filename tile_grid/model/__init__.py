"""Data model classes for unit-aware grid geometry.

- Unit: Degree or Meter coordinate unit
- Point: Unit-tagged coordinate (geometry atom)
- Line: Segment between two points of the same unit
- Bounds: Unit-tagged extent of a tile or raster
- Pixel: Raster coordinate inside a tile
- GridTile: Pixel size, bounds and zoom of a tile
- GridStyle / Color: Grid line styling
- BaseGrid: Zoom-gated grid configuration
- Graticule: BaseGrid producing evenly spaced lines

Model modules never import tile_grid.core at module level; conversions
import GridUtils inside the method that needs it.
"""

from tile_grid.model.base_grid import BaseGrid, GridRenderMode
from tile_grid.model.bounds import Bounds
from tile_grid.model.grid_style import Color, GridStyle
from tile_grid.model.grid_tile import GridTile
from tile_grid.model.graticule import Graticule
from tile_grid.model.line import Line
from tile_grid.model.pixel import Pixel
from tile_grid.model.point import Point
from tile_grid.model.unit import Unit

__all__ = [
    "Unit",
    "Point",
    "Line",
    "Bounds",
    "Pixel",
    "GridTile",
    "Color",
    "GridStyle",
    "BaseGrid",
    "GridRenderMode",
    "Graticule",
]
