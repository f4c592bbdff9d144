"""
Mode up - the end-of-level stat buff.
NO UI DEPENDENCIES.

The player picks one hero after a level; that hero's buff, scaled by the
level number, is added to every member of the party.
"""
import logging
from typing import Callable, Dict, Optional, Sequence

from .models import Unit

logger = logging.getLogger(__name__)

StatDelta = Dict[str, int]

# Per-level increments by hero name. Each entry is multiplied by the level.
MODE_UP_TABLE: Dict[str, StatDelta] = {
    "Knight": {"attack": 1, "hp": 2},
    "Archer": {"range": 1},
    "Berserker": {"attack": 3},
    "Rogue": {"agility": 2},
    "Torcher": {"burn": 1},
    "Slüjier": {"sluj": 1},
    "Cleric": {"heal": 2},
    "Sycophant": {
        "attack": 1, "hp": 1, "range": 1, "agility": 1,
        "burn": 1, "sluj": 1, "heal": 1, "ghis": 1,
    },
    "Yeetrian": {"yeet": 1},
    "Mellitron": {"swarm": 1},
    "Gastronomer": {"spicy": 1},
    "Palisade": {"armor": 1},
    "Mycelian": {"spore": 1},
    "Wizard": {"chain": 1},
}
FALLBACK_BUFF: StatDelta = {"ghis": 1}

# Summary order and display names.
STAT_LABELS = [
    ("hp", "HP"),
    ("attack", "Attack"),
    ("range", "Range"),
    ("agility", "Agility"),
    ("burn", "Burn"),
    ("sluj", "Slüj"),
    ("heal", "Heal"),
    ("ghis", "Ghïs"),
    ("yeet", "Yeet"),
    ("swarm", "Swarm"),
    ("spicy", "Spicy"),
    ("armor", "Armor"),
    ("spore", "Spore"),
    ("chain", "Chain"),
]


def get_mode_up_buff(hero_name: str, level: int) -> StatDelta:
    """The stat bundle the chosen hero grants at this level."""
    base = MODE_UP_TABLE.get(hero_name, FALLBACK_BUFF)
    return {stat: amount * level for stat, amount in base.items()}


def describe_buff(hero_name: str, buff: StatDelta) -> str:
    parts = [f"+{buff[stat]} {label}" for stat, label in STAT_LABELS if buff.get(stat)]
    if not parts:
        return f"{hero_name} tries to mode up but nothing happens..."
    return f"{hero_name} empowers the party with {', '.join(parts)}!"


def apply_mode_up(
    chosen_hero: Unit,
    level: int,
    party: Sequence[Unit],
    log_callback: Optional[Callable[[str], None]] = None,
) -> str:
    """
    Add the chosen hero's buff to every party member and return the summary.

    HP only goes to members that are still alive; every other stat is added
    to everyone in the party list.
    """
    buff = get_mode_up_buff(chosen_hero.name, level)
    message = describe_buff(chosen_hero.name, buff)

    for hero in party:
        for stat, amount in buff.items():
            if stat == "hp" and not hero.is_alive:
                continue
            hero.add_stat(stat, amount)

    logger.info(message)
    if log_callback is not None:
        log_callback(message)
    return message
