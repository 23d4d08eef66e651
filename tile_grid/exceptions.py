"""Errors raised by the grid geometry model.

All errors are immediate and synchronous. No intersection between two lines
is NOT an error: GridUtils.line_intersection returns None in that case.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from tile_grid.model.unit import Unit


class GridError(Exception):
    """Base class for tile grid errors."""


class UnitMismatchError(GridError, ValueError):
    """Two geometries that must share a unit carry different units.

    Attributes:
        unit1: Unit of the first geometry
        unit2: Unit of the second geometry
    """

    def __init__(self, unit1: Optional["Unit"], unit2: Optional["Unit"], context: str = "Points") -> None:
        self.unit1 = unit1
        self.unit2 = unit2
        super().__init__(f"{context} are in different units. unit1: {_unit_name(unit1)}, unit2: {_unit_name(unit2)}")


class UnitNotSetError(GridError, ValueError):
    """A unit conversion was requested on a geometry without a unit."""

    def __init__(self, message: str = "Unit is not set") -> None:
        super().__init__(message)


class BoundsNotSetError(GridError, ValueError):
    """Pixel projection was requested from a tile without bounds."""

    def __init__(self, message: str = "Bounds is not set") -> None:
        super().__init__(message)


def _unit_name(unit: Optional["Unit"]) -> str:
    return unit.value if unit is not None else "unset"
