"""
Roster table - base stats for every hero.
NO UI DEPENDENCIES.

Specs are immutable; build() hands out a fresh Unit each time so a battle
never mutates the table.
"""
from typing import Dict, List, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .models import Unit, Abilities, Side


class UnitSpec(BaseModel):
    """Base stats of a hero or enemy, as found in roster and level tables."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    symbol: str = Field(min_length=1)
    attack: int = Field(ge=0)
    range: int = Field(ge=0)
    agility: int = Field(ge=0)
    hp: int

    # Ability stats, 0 = absent
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

    traits: List[str] = Field(default_factory=list)
    dialogue: List[str] = Field(default_factory=list)
    description: str = ""

    def abilities(self) -> Abilities:
        return Abilities(**{name: getattr(self, name) for name in Abilities.names()})

    def build(self, side: Side = Side.HERO, x: int = 0, y: int = 0,
              is_wall: bool = False) -> Unit:
        """Create a live Unit from this spec."""
        return Unit(
            name=self.name,
            symbol=self.symbol,
            hp=self.hp,
            attack=self.attack,
            range=self.range,
            agility=self.agility,
            side=side,
            x=x,
            y=y,
            abilities=self.abilities(),
            traits=set(self.traits),
            dialogue=list(self.dialogue),
            is_wall=is_wall,
            description=self.description,
        )


HEROES: List[UnitSpec] = [
    UnitSpec(name="Knight", symbol="♞", attack=4, range=1, agility=4, hp=18),
    UnitSpec(name="Archer", symbol="⚔", attack=3, range=5, agility=4, hp=12),
    # chain: bonus damage to adjacent enemies
    UnitSpec(name="Wizard", symbol="✡", attack=2, range=7, agility=2, hp=10, chain=5),
    UnitSpec(name="Berserker", symbol="⚒", attack=6, range=1, agility=3, hp=20),
    UnitSpec(name="Rogue", symbol="☠", attack=4, range=2, agility=6, hp=12),
    UnitSpec(name="Cleric", symbol="✝", attack=2, range=1, agility=3, hp=12, heal=4),
    UnitSpec(name="Jester", symbol="♣", attack=3, range=2, agility=5, hp=10,
             traits=["joke"]),
    UnitSpec(name="Meatwalker", symbol="₻", attack=7, range=1, agility=2, hp=22, heal=1,
             traits=["meat"]),
    UnitSpec(name="Soothscribe", symbol="☄", attack=2, range=6, agility=3, hp=11, fate=1,
             traits=["tarot"]),
    UnitSpec(name="Nonsequiteur", symbol="∄", attack=3, range=3, agility=3, hp=10,
             caprice=1, traits=["nonseq"]),
    UnitSpec(name="Griot", symbol="℣", attack=1, range=1, agility=1, hp=10,
             traits=["reacts_to_history"]),
    UnitSpec(name="Torcher", symbol="⚶", attack=4, range=2, agility=3, hp=14, burn=1,
             traits=["torcher"]),
    UnitSpec(name="Slüjier", symbol="🜜", attack=5, range=1, agility=4, hp=16, sluj=1),
    UnitSpec(name="Shrink", symbol="☊", attack=2, range=1, agility=3, hp=12,
             traits=["shrink"]),
    UnitSpec(name="Sycophant", symbol="♟", attack=0, range=0, agility=2, hp=15),
    # yeet: knockback distance
    UnitSpec(name="Yeetrian", symbol="⛓", attack=3, range=2, agility=4, hp=14, yeet=1),
    UnitSpec(name="Mellitron", symbol="丰", attack=1, range=3, agility=5, hp=18, swarm=2),
    # spicy: meant to boost vittle healing
    UnitSpec(name="Gastronomer", symbol="𑍐", attack=2, range=1, agility=3, hp=15, spicy=1,
             traits=["recipe"]),
    UnitSpec(name="Palisade", symbol="ᱟ", attack=3, range=1, agility=2, hp=20, armor=5,
             description="Palisade stands as a bulwark against all attacks, his armor "
                         "absorbing the brunt of enemy blows."),
    UnitSpec(name="Mycelian", symbol="ৡ", attack=2, range=1, agility=3, hp=15, spore=1),
    UnitSpec(name="Pæg", symbol="ꚤ", attack=1, range=1, agility=1, hp=1,
             heal=1, burn=1, sluj=1, ghis=1, yeet=1, swarm=1, spicy=1, armor=1,
             spore=1, chain=1),
]

_HEROES_BY_NAME: Dict[str, UnitSpec] = {spec.name: spec for spec in HEROES}


def hero_names() -> List[str]:
    return [spec.name for spec in HEROES]


def get_hero_spec(name: str) -> UnitSpec:
    """Look up a hero by name. Raises KeyError for unknown heroes."""
    try:
        return _HEROES_BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown hero: {name}") from None


def build_party(names: Sequence[str]) -> List[Unit]:
    """Fresh hero units for the given roster names, in order."""
    return [get_hero_spec(name).build(Side.HERO) for name in names]
