"""Pixel - Raster coordinate produced by projecting a point into a tile."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Pixel:
    """A position in tile raster space.

    x grows to the east (right), y grows to the south (down).
    Values may be fractional and may fall outside the tile for points
    outside its bounds.

    Attributes:
        x: Horizontal pixel offset from the tile's left edge
        y: Vertical pixel offset from the tile's top edge
    """

    x: float
    y: float

    def __repr__(self) -> str:
        return f"Pixel(x={self.x:.2f}, y={self.y:.2f})"
