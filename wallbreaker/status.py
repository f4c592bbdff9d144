"""
Status effect rules: applying burn and sluj, and resolving one tick.
NO UI DEPENDENCIES.
"""
import logging
from typing import Callable, Iterable, List

from .constants import BURN_DURATION, SLUJ_DURATION, SLUJ_TABLE, SLUJ_MAX_DAMAGE
from .grid import Battlefield
from .models import Unit, Burn, Sluj

logger = logging.getLogger(__name__)

# emit(event_type, message, **data)
Emit = Callable[..., None]


def apply_burn(target: Unit, damage: int) -> Burn:
    """Set (or refresh) a burn on the target."""
    target.status.burn = Burn(damage=damage, duration=BURN_DURATION)
    return target.status.burn


def apply_sluj(target: Unit, level: int) -> Sluj:
    """
    Afflict the target with sluj. A second application stacks onto the
    existing level and resets the duration.
    """
    sluj = target.status.sluj
    if sluj is None:
        sluj = Sluj(level=level, duration=SLUJ_DURATION, counter=0)
        target.status.sluj = sluj
    else:
        sluj.level += level
        sluj.duration = SLUJ_DURATION
    return sluj


def sluj_damage(level: int, counter: int) -> int:
    """Damage sluj deals on the given tick (0 when it doesn't trigger)."""
    if level <= 0:
        return 0
    if level in SLUJ_TABLE:
        every, damage = SLUJ_TABLE[level]
        return damage if counter % every == 0 else 0
    return SLUJ_MAX_DAMAGE


def _tick_burn(unit: Unit, emit: Emit) -> None:
    burn = unit.status.burn
    if burn is None or burn.duration <= 0:
        return

    emit("status", f"{unit.name} is burned and takes {burn.damage} damage!",
         target=unit, effect="burn", amount=burn.damage)
    unit.hp -= burn.damage
    burn.duration -= 1
    if burn.duration <= 0:
        unit.status.burn = None

    if not unit.is_alive:
        emit("defeat", f"{unit.name} was defeated by burn damage!",
             target=unit, cause="burn")


def _tick_sluj(unit: Unit, emit: Emit) -> None:
    sluj = unit.status.sluj
    if sluj is None or sluj.duration <= 0:
        return

    sluj.counter += 1
    damage = sluj_damage(sluj.level, sluj.counter)
    if damage:
        emit("status", f"{unit.name} takes {damage} slüj damage!",
             target=unit, effect="sluj", amount=damage, level=sluj.level)
        unit.hp -= damage
    sluj.duration -= 1

    if not unit.is_alive:
        emit("defeat", f"{unit.name} is defeated by slüj damage!",
             target=unit, cause="sluj")


def tick_units(units: Iterable[Unit], grid: Battlefield, emit: Emit) -> List[Unit]:
    """
    Resolve one status tick for every unit, burn before sluj.

    Units that drop to 0 HP leave the grid immediately. They are returned
    so the caller can drop them from its collections once the whole pass
    is done.
    """
    dead: List[Unit] = []
    for unit in units:
        if not unit.is_alive:
            continue

        _tick_burn(unit, emit)
        if unit.is_alive:
            _tick_sluj(unit, emit)

        if not unit.is_alive:
            grid.remove_unit(unit)
            dead.append(unit)

    if dead:
        logger.debug(f"Status tick removed {len(dead)} unit(s)")
    return dead
