"""
Level definitions - battlefield size, wall, enemies and level objects.
NO UI DEPENDENCIES.
"""
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import VITTLE, WALL_UNIT_GLYPH
from .models import Unit, LevelObject, Side
from .roster import UnitSpec
from .simulator import BattleSimulator


class EnemySpec(UnitSpec):
    """An enemy placed at fixed coordinates."""
    x: int = Field(ge=0)
    y: int = Field(ge=0)
    is_wall: bool = False

    def build_enemy(self) -> Unit:
        return self.build(Side.ENEMY, self.x, self.y, is_wall=self.is_wall)


class LevelObjectSpec(BaseModel):
    """A level object such as a vittle. Symbol defaults by type."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str = VITTLE
    x: int
    y: int
    symbol: Optional[str] = None

    def build_object(self) -> LevelObject:
        return LevelObject(self.type, self.x, self.y, self.symbol)


class LevelConfig(BaseModel):
    """Everything needed to set up one battle."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: int = Field(ge=1)
    title: str
    rows: int = Field(ge=2)
    cols: int = Field(ge=1)
    wall_hp: int = Field(gt=0)
    enemies: List[EnemySpec] = Field(default_factory=list)
    level_objects: List[LevelObjectSpec] = Field(default_factory=list)

    @model_validator(mode="after")
    def _enemies_on_battlefield(self) -> "LevelConfig":
        for enemy in self.enemies:
            if enemy.x >= self.cols or enemy.y >= self.rows:
                raise ValueError(
                    f"{enemy.name} at ({enemy.x},{enemy.y}) is outside "
                    f"a {self.rows}x{self.cols} battlefield"
                )
        return self

    def build_enemies(self) -> List[Unit]:
        return [spec.build_enemy() for spec in self.enemies]

    def build_objects(self) -> List[LevelObject]:
        # Objects that don't fit are dropped later by the battlefield.
        return [spec.build_object() for spec in self.level_objects]


def build_battle(level: LevelConfig, party: Sequence[Unit], **kwargs) -> BattleSimulator:
    """
    Set up a simulator for a level. Extra keyword arguments (log_callback,
    callbacks, clock, settings, rng) pass straight through.
    """
    return BattleSimulator(
        party=party,
        enemies=level.build_enemies(),
        rows=level.rows,
        cols=level.cols,
        wall_hp=level.wall_hp,
        level_objects=level.build_objects(),
        **kwargs,
    )


LEVELS: List[LevelConfig] = [
    LevelConfig(
        level=1,
        title="The First Wall",
        rows=8,
        cols=6,
        wall_hp=10,
        enemies=[
            EnemySpec(name="Goblin", symbol="g", attack=2, range=1, agility=1, hp=6,
                      x=2, y=4, dialogue=["Shiny!", "Back off!"]),
        ],
        level_objects=[LevelObjectSpec(type=VITTLE, x=4, y=2)],
    ),
    LevelConfig(
        level=2,
        title="Rampart",
        rows=9,
        cols=7,
        wall_hp=20,
        enemies=[
            EnemySpec(name="Goblin", symbol="g", attack=2, range=1, agility=2, hp=8,
                      x=1, y=5),
            EnemySpec(name="Ogre", symbol="Ö", attack=4, range=1, agility=1, hp=14,
                      x=4, y=6, dialogue=["Smash!"]),
            EnemySpec(name="Rampart", symbol=WALL_UNIT_GLYPH, attack=1, range=1,
                      agility=0, hp=10, x=3, y=8, is_wall=True),
        ],
        level_objects=[
            LevelObjectSpec(type=VITTLE, x=0, y=3),
            LevelObjectSpec(type=VITTLE, x=6, y=3),
        ],
    ),
]

_LEVELS_BY_NUMBER: Dict[int, LevelConfig] = {config.level: config for config in LEVELS}


def get_level(number: int) -> LevelConfig:
    """Look up a predefined level. Raises KeyError for unknown numbers."""
    try:
        return _LEVELS_BY_NUMBER[number]
    except KeyError:
        raise KeyError(f"Unknown level: {number}") from None
