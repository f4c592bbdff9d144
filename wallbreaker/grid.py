"""
Battlefield grid.
NO UI DEPENDENCIES.

Cells hold references to units and level objects; glyphs are only resolved
by the render module.
"""
from dataclasses import dataclass
from typing import Optional, Dict, Tuple, Iterator

from .models import Unit, LevelObject, Terrain


@dataclass
class Cell:
    """A single cell of the battlefield."""
    x: int
    y: int
    terrain: Terrain = Terrain.FLOOR
    unit: Optional[Unit] = None
    item: Optional[LevelObject] = None

    @property
    def is_wall(self) -> bool:
        return self.terrain == Terrain.WALL

    def is_empty(self) -> bool:
        """Plain floor with nothing on it."""
        return self.terrain == Terrain.FLOOR and self.unit is None and self.item is None

    def is_open(self) -> bool:
        """A unit may step here: floor, no unit. Level objects don't block."""
        return self.terrain == Terrain.FLOOR and self.unit is None


class Battlefield:
    """
    The rows x cols battle grid.

    Coordinate system:
    - (0, 0) is top-left
    - x increases to the right (columns)
    - y increases downward (rows); the last row is the wall

    The grid is the single source of truth for occupancy. Units are only
    moved through it, which keeps unit.x / unit.y in step with the cells.
    """

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self._cells: Dict[Tuple[int, int], Cell] = {}

        for y in range(rows):
            for x in range(cols):
                self._cells[(x, y)] = Cell(x, y)

    @property
    def wall_row(self) -> int:
        return self.rows - 1

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if coordinates are within grid bounds."""
        return 0 <= x < self.cols and 0 <= y < self.rows

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at coordinates, or None if out of bounds."""
        if not self.in_bounds(x, y):
            return None
        return self._cells[(x, y)]

    def unit_at(self, x: int, y: int) -> Optional[Unit]:
        cell = self.get_cell(x, y)
        if cell is None:
            return None
        return cell.unit

    def object_at(self, x: int, y: int) -> Optional[LevelObject]:
        cell = self.get_cell(x, y)
        if cell is None:
            return None
        return cell.item

    def is_wall(self, x: int, y: int) -> bool:
        cell = self.get_cell(x, y)
        return cell is not None and cell.is_wall

    def is_open(self, x: int, y: int) -> bool:
        """In bounds and enterable (empty or holding a level object)."""
        cell = self.get_cell(x, y)
        return cell is not None and cell.is_open()

    # =========================================================================
    # TERRAIN
    # =========================================================================

    def build_wall(self) -> None:
        """Turn the whole bottom row into wall."""
        for x in range(self.cols):
            self._cells[(x, self.wall_row)].terrain = Terrain.WALL

    # =========================================================================
    # UNITS
    # =========================================================================

    def place_unit(self, unit: Unit, x: int, y: int) -> bool:
        """
        Put a unit on a cell, replacing whatever unit reference was there.
        Returns False if out of bounds.
        """
        cell = self.get_cell(x, y)
        if cell is None:
            return False

        cell.unit = unit
        unit.x = x
        unit.y = y
        return True

    def remove_unit(self, unit: Unit) -> bool:
        """Clear the unit's cell. Returns False if the unit wasn't there."""
        cell = self.get_cell(unit.x, unit.y)
        if cell is None or cell.unit is not unit:
            return False

        cell.unit = None
        return True

    def move_unit(self, unit: Unit, x: int, y: int) -> bool:
        """
        Move a unit to an open cell. Any level object still lying there is
        destroyed; callers that want its effect must take it first.
        """
        target = self.get_cell(x, y)
        if target is None or not target.is_open():
            return False

        self.remove_unit(unit)
        target.item = None
        target.unit = unit
        unit.x = x
        unit.y = y
        return True

    def iter_units(self) -> Iterator[Unit]:
        """Iterate over all units on the grid, row by row."""
        for y in range(self.rows):
            for x in range(self.cols):
                unit = self._cells[(x, y)].unit
                if unit is not None:
                    yield unit

    # =========================================================================
    # LEVEL OBJECTS
    # =========================================================================

    def place_object(self, obj: LevelObject) -> bool:
        """
        Place a level object on an empty, in-bounds, non-wall cell.
        Returns False (and places nothing) otherwise.
        """
        cell = self.get_cell(obj.x, obj.y)
        if cell is None or obj.y >= self.wall_row or not cell.is_empty():
            return False

        cell.item = obj
        return True

    def take_object(self, x: int, y: int) -> Optional[LevelObject]:
        """Remove and return the level object at coordinates, if any."""
        cell = self.get_cell(x, y)
        if cell is None or cell.item is None:
            return None

        obj = cell.item
        cell.item = None
        return obj

    def iter_objects(self) -> Iterator[LevelObject]:
        for cell in self._cells.values():
            if cell.item is not None:
                yield cell.item

    def __repr__(self) -> str:
        return f"Battlefield({self.rows}x{self.cols})"
