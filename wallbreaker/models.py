"""Core data structures for the battle system."""

from dataclasses import dataclass, field, fields
from typing import List, Optional, Dict, Any, Set
from enum import Enum, auto

from .constants import VITTLE, VITTLE_GLYPH, UNKNOWN_OBJECT_GLYPH


class Side(Enum):
    """Which side of the battle a unit belongs to."""
    HERO = auto()
    ENEMY = auto()


class Terrain(Enum):
    """What a cell is made of, independent of what stands on it."""
    FLOOR = auto()
    WALL = auto()


class TurnOutcome(Enum):
    """What the caller should do after the turn machine advanced."""
    CONTINUE = auto()
    LEVEL_COMPLETE = auto()   # Wall collapsed, battle is frozen
    GAME_OVER = auto()        # Party wiped


class BattlePhase(Enum):
    """Current phase of the battle."""
    HERO_TURN = auto()
    VICTORY_PENDING = auto()  # Wall down, waiting on level completion
    DEFEAT = auto()


# Stats every unit has.
CORE_STATS = ("hp", "attack", "range", "agility")


@dataclass
class Abilities:
    """
    Optional ability stats. Zero means the ability is absent.

    heal:   restores an ally's HP when the unit attacks it
    burn:   damage per tick of the burn it inflicts
    sluj:   levels of sluj it inflicts
    yeet:   knockback distance
    swarm:  damage to every adjacent enemy at each status tick
    The rest are carried and buffed by mode up but have no battle rule.
    """
    heal: int = 0
    burn: int = 0
    sluj: int = 0
    yeet: int = 0
    swarm: int = 0
    armor: int = 0
    chain: int = 0
    spicy: int = 0
    spore: int = 0
    ghis: int = 0
    fate: int = 0
    caprice: int = 0

    @classmethod
    def names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def has(self, name: str) -> bool:
        """True if the ability is present and nonzero."""
        return getattr(self, name, 0) > 0

    def as_dict(self) -> Dict[str, int]:
        """Only the abilities that are present."""
        return {name: getattr(self, name) for name in self.names() if self.has(name)}


@dataclass
class Burn:
    """Flat damage every tick until duration runs out."""
    damage: int
    duration: int


@dataclass
class Sluj:
    """Escalating affliction; the level decides how often it bites."""
    level: int
    duration: int
    counter: int = 0


@dataclass
class StatusEffects:
    """Status effects on one unit. Each kind is independently present or absent."""
    burn: Optional[Burn] = None
    sluj: Optional[Sluj] = None

    @property
    def is_empty(self) -> bool:
        return self.burn is None and self.sluj is None

    def clear(self) -> None:
        self.burn = None
        self.sluj = None


@dataclass(eq=False)
class Unit:
    """
    A hero or enemy on the battlefield.

    Units compare by identity: two goblins with identical stats are still
    two goblins.
    """
    name: str
    symbol: str
    hp: int
    attack: int
    range: int
    agility: int
    side: Side = Side.HERO
    x: int = 0
    y: int = 0
    abilities: Abilities = field(default_factory=Abilities)
    status: StatusEffects = field(default_factory=StatusEffects)
    traits: Set[str] = field(default_factory=set)
    dialogue: List[str] = field(default_factory=list)
    is_wall: bool = False     # Wall-type enemy drawn over the wall row
    description: str = ""

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    @property
    def is_hero(self) -> bool:
        return self.side == Side.HERO

    @property
    def position(self) -> tuple:
        return (self.x, self.y)

    def get_stat(self, stat: str) -> int:
        if stat in CORE_STATS:
            return getattr(self, stat)
        if stat in Abilities.names():
            return getattr(self.abilities, stat)
        raise ValueError(f"Unknown stat: {stat}")

    def add_stat(self, stat: str, amount: int) -> int:
        """Add to a core or ability stat. Returns the new value."""
        if stat in CORE_STATS:
            setattr(self, stat, getattr(self, stat) + amount)
            return getattr(self, stat)
        if stat in Abilities.names():
            setattr(self.abilities, stat, getattr(self.abilities, stat) + amount)
            return getattr(self.abilities, stat)
        raise ValueError(f"Unknown stat: {stat}")


@dataclass(eq=False)
class LevelObject:
    """A consumable object lying on the battlefield."""
    object_type: str
    x: int
    y: int
    symbol: Optional[str] = None

    def __post_init__(self):
        if self.symbol is None:
            self.symbol = VITTLE_GLYPH if self.object_type == VITTLE else UNKNOWN_OBJECT_GLYPH

    @property
    def is_vittle(self) -> bool:
        return self.object_type == VITTLE


@dataclass
class TurnState:
    """Whose turn it is and what they may still do."""
    current_unit: int = 0
    move_points: int = 0
    awaiting_attack_direction: bool = False
    transitioning_level: bool = False


@dataclass
class BattleEvent:
    """An event that occurred during battle, in canonical order."""
    event_type: str
    message: str
    data: Dict[str, Any] = field(default_factory=dict)

    # Event types:
    # "move"      - data: {unit, from_x, from_y, to_x, to_y}
    # "consume"   - data: {unit, object_type, amount, new_hp}
    # "attack"    - data: {unit, dx, dy}
    # "heal"      - data: {unit, target, amount, new_hp}
    # "damage"    - data: {unit, target, amount, new_hp}
    # "status"    - data: {target, effect, ...}
    # "knockback" - data: {target, from_x, from_y, to_x, to_y}
    # "defeat"    - data: {target, cause}
    # "wall"      - data: {unit, amount, wall_hp}
    # "collapse"  - data: {}
    # "miss"      - data: {unit}
    # "dialogue"  - data: {unit, line}
    # "phase"     - data: {phase}
    # "turn"      - data: {unit}
    # "game_over" - data: {}


@dataclass
class ActionResult:
    """Result of attempting an action."""
    success: bool
    events: List[BattleEvent] = field(default_factory=list)
    outcome: Optional[TurnOutcome] = None
    error_message: Optional[str] = None

    @property
    def messages(self) -> List[str]:
        return [event.message for event in self.events]

    @staticmethod
    def failure(message: str) -> 'ActionResult':
        return ActionResult(success=False, error_message=message)

    @staticmethod
    def ok(events: List[BattleEvent] = None,
           outcome: Optional[TurnOutcome] = None) -> 'ActionResult':
        return ActionResult(success=True, events=events or [], outcome=outcome)
