"""
Tests for level definitions.
"""
import pytest
from pydantic import ValidationError

from wallbreaker.levels import LEVELS, LevelConfig, EnemySpec, get_level, build_battle
from wallbreaker.models import Side
from wallbreaker.roster import build_party


class TestLevelConfig:

    def test_levels_numbered_in_order(self):
        assert [config.level for config in LEVELS] == list(range(1, len(LEVELS) + 1))

    def test_get_level(self):
        assert get_level(1).title == "The First Wall"
        with pytest.raises(KeyError):
            get_level(99)

    def test_enemy_outside_battlefield_rejected(self):
        with pytest.raises(ValidationError):
            LevelConfig(level=1, title="Bad", rows=4, cols=4, wall_hp=5, enemies=[
                EnemySpec(name="Goblin", symbol="g", attack=1, range=1, agility=1,
                          hp=3, x=4, y=0),
            ])

    def test_wall_hp_must_be_positive(self):
        with pytest.raises(ValidationError):
            LevelConfig(level=1, title="Bad", rows=4, cols=4, wall_hp=0)

    def test_builds_fresh_enemies(self):
        config = get_level(2)
        first, second = config.build_enemies(), config.build_enemies()
        assert first[0] is not second[0]
        assert all(enemy.side == Side.ENEMY for enemy in first)
        assert [enemy.is_wall for enemy in first] == [False, False, True]


class TestBuildBattle:

    def test_level_one(self, clock, settings, log):
        party = build_party(["Knight", "Archer"])
        sim = build_battle(get_level(1), party, log_callback=log.append,
                           clock=clock, settings=settings)

        assert (sim.rows, sim.cols, sim.wall_hp) == (8, 6, 10)
        assert sim.grid.unit_at(2, 4).name == "Goblin"
        assert sim.grid.object_at(4, 2).is_vittle
        assert party[1].position == (1, 0)

    def test_wall_enemy_in_wall_row(self, clock, settings):
        sim = build_battle(get_level(2), build_party(["Knight"]),
                           clock=clock, settings=settings)
        rampart = sim.grid.unit_at(3, 8)
        assert rampart.is_wall
        assert sim.grid.is_wall(3, 8)
