"""
Tests for status effect rules.
"""
import pytest

from wallbreaker.constants import BURN_DURATION, SLUJ_DURATION
from wallbreaker.grid import Battlefield
from wallbreaker.models import Unit, Burn, Sluj, Side
from wallbreaker.status import apply_burn, apply_sluj, sluj_damage, tick_units


def make_enemy(name="Goblin", hp=10):
    return Unit(name=name, symbol="g", hp=hp, attack=1, range=1, agility=0, side=Side.ENEMY)


class Recorder:
    """Stands in for the simulator's event emitter."""

    def __init__(self):
        self.events = []

    def __call__(self, event_type, message, **data):
        self.events.append((event_type, message))

    @property
    def messages(self):
        return [message for _, message in self.events]


class TestApply:

    def test_apply_burn(self):
        goblin = make_enemy()
        burn = apply_burn(goblin, 2)
        assert goblin.status.burn is burn
        assert burn.damage == 2
        assert burn.duration == BURN_DURATION

    def test_burn_refreshes(self):
        """A new burn replaces the old one with a full duration."""
        goblin = make_enemy()
        goblin.status.burn = Burn(damage=1, duration=1)
        apply_burn(goblin, 3)
        assert goblin.status.burn.damage == 3
        assert goblin.status.burn.duration == BURN_DURATION

    def test_apply_sluj_fresh(self):
        goblin = make_enemy()
        sluj = apply_sluj(goblin, 1)
        assert (sluj.level, sluj.duration, sluj.counter) == (1, SLUJ_DURATION, 0)

    def test_sluj_stacks(self):
        """Reapplying adds levels and resets duration, keeping the counter."""
        goblin = make_enemy()
        goblin.status.sluj = Sluj(level=2, duration=1, counter=3)
        sluj = apply_sluj(goblin, 1)
        assert sluj.level == 3
        assert sluj.duration == SLUJ_DURATION
        assert sluj.counter == 3


class TestSlujDamage:

    @pytest.mark.parametrize("level,counter,expected", [
        (1, 1, 0), (1, 3, 0), (1, 4, 1), (1, 8, 1),
        (2, 2, 0), (2, 3, 1), (2, 6, 1),
        (3, 1, 0), (3, 2, 1),
        (4, 1, 1), (4, 2, 1),
        (5, 1, 2),
        (6, 1, 3), (9, 7, 3),
        (0, 4, 0),
    ])
    def test_table(self, level, counter, expected):
        assert sluj_damage(level, counter) == expected


class TestTick:

    def test_burn_tick(self):
        grid = Battlefield(rows=3, cols=3)
        goblin = make_enemy(hp=5)
        grid.place_unit(goblin, 1, 1)
        apply_burn(goblin, 2)
        emit = Recorder()

        dead = tick_units([goblin], grid, emit)

        assert dead == []
        assert goblin.hp == 3
        assert goblin.status.burn.duration == BURN_DURATION - 1
        assert emit.messages == ["Goblin is burned and takes 2 damage!"]

    def test_burn_expires(self):
        """Burn is gone once its duration runs out."""
        grid = Battlefield(rows=3, cols=3)
        goblin = make_enemy(hp=50)
        grid.place_unit(goblin, 0, 0)
        apply_burn(goblin, 1)
        emit = Recorder()

        for _ in range(BURN_DURATION + 2):
            tick_units([goblin], grid, emit)

        assert goblin.hp == 50 - BURN_DURATION
        assert goblin.status.burn is None

    def test_burn_kill_clears_grid(self):
        grid = Battlefield(rows=3, cols=3)
        goblin = make_enemy(hp=1)
        grid.place_unit(goblin, 2, 0)
        apply_burn(goblin, 1)
        emit = Recorder()

        dead = tick_units([goblin], grid, emit)

        assert dead == [goblin]
        assert grid.unit_at(2, 0) is None
        assert emit.messages[-1] == "Goblin was defeated by burn damage!"

    def test_sluj_counts_every_tick(self):
        """Level 1 sluj bites on the 4th tick; duration drops every tick."""
        grid = Battlefield(rows=3, cols=3)
        goblin = make_enemy(hp=10)
        grid.place_unit(goblin, 0, 0)
        apply_sluj(goblin, 1)
        emit = Recorder()

        for _ in range(3):
            tick_units([goblin], grid, emit)
        assert goblin.hp == 10
        assert goblin.status.sluj.counter == 3
        assert goblin.status.sluj.duration == 1

        tick_units([goblin], grid, emit)
        assert goblin.hp == 9
        assert emit.messages == ["Goblin takes 1 slüj damage!"]
        assert goblin.status.sluj.duration == 0

        # Expired sluj does nothing
        tick_units([goblin], grid, emit)
        assert goblin.hp == 9
        assert goblin.status.sluj.counter == 4

    def test_high_level_sluj(self):
        grid = Battlefield(rows=3, cols=3)
        goblin = make_enemy(hp=3)
        grid.place_unit(goblin, 0, 0)
        goblin.status.sluj = Sluj(level=6, duration=4)
        emit = Recorder()

        dead = tick_units([goblin], grid, emit)

        assert dead == [goblin]
        assert emit.messages == [
            "Goblin takes 3 slüj damage!",
            "Goblin is defeated by slüj damage!",
        ]

    def test_burn_before_sluj(self):
        """A unit burned to death doesn't take a sluj tick too."""
        grid = Battlefield(rows=3, cols=3)
        goblin = make_enemy(hp=1)
        grid.place_unit(goblin, 0, 0)
        apply_burn(goblin, 1)
        goblin.status.sluj = Sluj(level=4, duration=4)
        emit = Recorder()

        tick_units([goblin], grid, emit)

        assert goblin.status.sluj.counter == 0
        assert "slüj" not in " ".join(emit.messages)

    def test_dead_units_skipped(self):
        grid = Battlefield(rows=3, cols=3)
        goblin = make_enemy(hp=0)
        apply_burn(goblin, 1)
        emit = Recorder()
        assert tick_units([goblin], grid, emit) == []
        assert emit.events == []
