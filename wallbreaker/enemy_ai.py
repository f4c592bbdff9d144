"""
Enemy behaviour: chase the nearest hero, then hit whoever is adjacent.
NO UI DEPENDENCIES.
"""
import logging
import random
from typing import List, Optional, Sequence, Tuple

from .constants import ORTHOGONAL_OFFSETS
from .grid import Battlefield
from .models import Unit

logger = logging.getLogger(__name__)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def manhattan(a: Unit, b: Unit) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def find_closest_hero(enemy: Unit, party: Sequence[Unit]) -> Optional[Unit]:
    """Nearest hero by Manhattan distance; ties go to the earlier hero."""
    closest = None
    for hero in party:
        if closest is None or manhattan(hero, enemy) < manhattan(closest, enemy):
            closest = hero
    return closest


def next_step(enemy: Unit, target: Unit, grid: Battlefield) -> Optional[Tuple[int, int]]:
    """
    Pick one orthogonal step toward the target.

    The axis with the larger gap goes first (x wins ties). If that cell is
    blocked, try stepping along the other axis instead. None means stay put.
    """
    dx = target.x - enemy.x
    dy = target.y - enemy.y

    step_x, step_y = 0, 0
    if abs(dx) >= abs(dy):
        step_x = _sign(dx)
    else:
        step_y = _sign(dy)

    if (step_x or step_y) and grid.is_open(enemy.x + step_x, enemy.y + step_y):
        return (enemy.x + step_x, enemy.y + step_y)

    if step_x != 0 and dy != 0 and grid.is_open(enemy.x, enemy.y + _sign(dy)):
        return (enemy.x, enemy.y + _sign(dy))
    if step_y != 0 and dx != 0 and grid.is_open(enemy.x + _sign(dx), enemy.y):
        return (enemy.x + _sign(dx), enemy.y)

    return None


def move_enemy(enemy: Unit, party: Sequence[Unit], grid: Battlefield) -> bool:
    """Take a single step toward the nearest hero. Returns True if it moved."""
    target = find_closest_hero(enemy, party)
    if target is None:
        return False

    step = next_step(enemy, target, grid)
    if step is None:
        return False

    from_pos = enemy.position
    grid.move_unit(enemy, *step)
    logger.debug(f"{enemy.name} moves {from_pos} -> {step} toward {target.name}")
    return True


def adjacent_heroes(enemy: Unit, grid: Battlefield) -> List[Unit]:
    """Heroes directly above, below, left and right of the enemy, in that order."""
    heroes = []
    for dx, dy in ORTHOGONAL_OFFSETS:
        unit = grid.unit_at(enemy.x + dx, enemy.y + dy)
        if unit is not None and unit.is_hero:
            heroes.append(unit)
    return heroes


def pick_dialogue(enemy: Unit, rng: random.Random) -> Optional[str]:
    if not enemy.dialogue:
        return None
    return rng.choice(enemy.dialogue)
