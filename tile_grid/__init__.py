"""Tile Grid - Coordinate reference grids over map tiles.

Renders degree and meter graticules onto XYZ map tiles across zoom levels:
- Unit-aware Point/Line geometry that never mixes degrees and meters
- Zoom gating per grid (full grid, reduced lines-only grid, or nothing)
- Web Mercator transforms, pixel projection and line intersection

Modules:
    core: Transforms and planning (GridUtils, TileUtils, GridPlanner)
    model: Data structures (Unit, Point, Line, Bounds, GridTile, BaseGrid, Graticule)

Example:
    from tile_grid.core import GridPlanner
    from tile_grid.model import Graticule, GridTile
"""
