"""
Tests for core data structures.
"""
import pytest

from wallbreaker.constants import VITTLE_GLYPH, UNKNOWN_OBJECT_GLYPH
from wallbreaker.models import (
    Unit, Abilities, LevelObject, StatusEffects, Burn, Sluj,
    ActionResult, BattleEvent, TurnOutcome, Side,
)


def make_unit(**kwargs):
    defaults = dict(name="Knight", symbol="♞", hp=18, attack=4, range=1, agility=4)
    defaults.update(kwargs)
    return Unit(**defaults)


class TestAbilities:

    def test_absent_by_default(self):
        abilities = Abilities()
        assert not abilities.has("burn")
        assert abilities.as_dict() == {}

    def test_present_when_nonzero(self):
        abilities = Abilities(heal=4, swarm=2)
        assert abilities.has("heal")
        assert abilities.has("swarm")
        assert not abilities.has("yeet")
        assert abilities.as_dict() == {"heal": 4, "swarm": 2}

    def test_unknown_ability_is_absent(self):
        assert not Abilities().has("teleport")


class TestUnit:

    def test_is_alive(self):
        assert make_unit(hp=1).is_alive
        assert not make_unit(hp=0).is_alive
        assert not make_unit(hp=-3).is_alive

    def test_identity_equality(self):
        """Two units with the same stats are still different units."""
        a, b = make_unit(), make_unit()
        assert a != b
        assert a in [a]
        assert b not in [a]

    def test_add_core_stat(self):
        unit = make_unit()
        assert unit.add_stat("attack", 2) == 6
        assert unit.add_stat("hp", -3) == 15
        assert unit.get_stat("attack") == 6

    def test_add_ability_stat(self):
        """Ability stats start at zero and count up."""
        unit = make_unit()
        assert unit.add_stat("yeet", 1) == 1
        assert unit.abilities.yeet == 1
        assert unit.abilities.has("yeet")

    def test_unknown_stat_raises(self):
        unit = make_unit()
        with pytest.raises(ValueError):
            unit.add_stat("charisma", 1)
        with pytest.raises(ValueError):
            unit.get_stat("charisma")

    def test_defaults(self):
        unit = make_unit()
        assert unit.side == Side.HERO
        assert unit.status.is_empty
        assert not unit.is_wall


class TestStatusEffects:

    def test_empty_and_clear(self):
        status = StatusEffects(burn=Burn(damage=1, duration=3), sluj=Sluj(level=1, duration=4))
        assert not status.is_empty
        status.clear()
        assert status.is_empty


class TestLevelObject:

    def test_vittle_default_symbol(self):
        vittle = LevelObject("vittle", 1, 1)
        assert vittle.symbol == VITTLE_GLYPH
        assert vittle.is_vittle

    def test_unknown_type_default_symbol(self):
        crate = LevelObject("crate", 1, 1)
        assert crate.symbol == UNKNOWN_OBJECT_GLYPH
        assert not crate.is_vittle

    def test_custom_symbol(self):
        assert LevelObject("vittle", 0, 0, symbol="V").symbol == "V"


class TestActionResult:

    def test_failure(self):
        result = ActionResult.failure("nope")
        assert not result.success
        assert result.error_message == "nope"
        assert result.events == []

    def test_ok(self):
        events = [BattleEvent("miss", "Knight attacks, but there's nothing in range.")]
        result = ActionResult.ok(events, TurnOutcome.CONTINUE)
        assert result.success
        assert result.outcome == TurnOutcome.CONTINUE
        assert result.messages == ["Knight attacks, but there's nothing in range."]
