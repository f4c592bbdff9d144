"""
Presentation queries - turns simulator state into glyphs.

Read-only: nothing here mutates the simulator. A renderer polls
board_view() (or render_text()) whenever it wants to redraw.
"""
from dataclasses import dataclass, field
from typing import List

from .constants import EMPTY_GLYPH, WALL_GLYPH
from .simulator import BattleSimulator


@dataclass
class CellView:
    """What a renderer needs to draw one cell."""
    x: int
    y: int
    glyph: str
    classes: List[str] = field(default_factory=list)


def glyph_at(sim: BattleSimulator, x: int, y: int) -> str:
    """
    The glyph for a cell. The wall row shows wall except where a wall-type
    enemy stands in it.
    """
    cell = sim.grid.get_cell(x, y)
    if cell is None:
        raise IndexError(f"({x},{y}) is outside the battlefield")

    unit = cell.unit
    if cell.is_wall and (unit is None or not unit.is_wall):
        return WALL_GLYPH
    if unit is not None:
        return unit.symbol
    if cell.item is not None:
        return cell.item.symbol
    return EMPTY_GLYPH


def cell_view(sim: BattleSimulator, x: int, y: int) -> CellView:
    cell = sim.grid.get_cell(x, y)
    view = CellView(x, y, glyph_at(sim, x, y))

    if cell.unit is None and cell.item is not None:
        view.classes.append("level-object")
        if cell.item.is_vittle:
            view.classes.append("vittle")

    if cell.unit is not None and not cell.unit.is_hero:
        view.classes.append("enemy")

    if sim.active_position == (x, y):
        view.classes.append("attack-mode" if sim.awaiting_attack_direction else "active")

    return view


def board_view(sim: BattleSimulator) -> List[List[CellView]]:
    """All cells, row by row."""
    return [[cell_view(sim, x, y) for x in range(sim.cols)] for y in range(sim.rows)]


def render_text(sim: BattleSimulator) -> str:
    """Plain-text board, one line per row."""
    return "\n".join(
        "".join(glyph_at(sim, x, y) for x in range(sim.cols))
        for y in range(sim.rows)
    )
