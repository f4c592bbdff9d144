"""
Knockback ("yeet") resolution.
NO UI DEPENDENCIES.
"""
from typing import Callable, Optional

from .grid import Battlefield
from .models import Unit
from .status import Emit


def apply_knockback(
    target: Unit,
    dx: int,
    dy: int,
    power: int,
    damage: int,
    grid: Battlefield,
    emit: Emit,
    in_bounds: Optional[Callable[[int, int], bool]] = None,
) -> int:
    """
    Push a struck unit up to `power` cells along (dx, dy).

    The push stops early at another unit. Running into the wall row or the
    edge of the battlefield stops it too, and the target takes `damage`.
    Removing a target killed this way is left to the caller.

    Returns the number of cells the target actually travelled.
    """
    if power <= 0 or not target.is_alive:
        return 0

    in_bounds = in_bounds or grid.in_bounds
    start_x, start_y = target.x, target.y
    moved = 0
    obstacle = None

    for _ in range(power):
        nx, ny = target.x + dx, target.y + dy
        if not in_bounds(nx, ny):
            obstacle = "the edge of the battlefield"
            break
        if grid.is_wall(nx, ny):
            obstacle = "the wall"
            break
        if not grid.is_open(nx, ny):
            break
        grid.move_unit(target, nx, ny)
        moved += 1

    if moved:
        emit("knockback",
             f"{target.name} is yeeted {moved} space(s) to ({target.x},{target.y})!",
             target=target, from_x=start_x, from_y=start_y,
             to_x=target.x, to_y=target.y)

    if obstacle is not None:
        target.hp -= damage
        emit("damage",
             f"{target.name} slams into {obstacle} and takes {damage} damage! "
             f"(HP left: {target.hp})",
             target=target, amount=damage, new_hp=target.hp, cause="knockback")

    return moved
