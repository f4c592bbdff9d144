"""
Tests for the hero roster table.
"""
import pytest
from pydantic import ValidationError

from wallbreaker.models import Side
from wallbreaker.roster import HEROES, UnitSpec, hero_names, get_hero_spec, build_party


class TestRoster:

    def test_names_and_symbols_unique(self):
        assert len(set(hero_names())) == len(HEROES)
        assert len({spec.symbol for spec in HEROES}) == len(HEROES)

    def test_lookup(self):
        knight = get_hero_spec("Knight")
        assert (knight.attack, knight.range, knight.agility, knight.hp) == (4, 1, 4, 18)

    def test_unknown_hero(self):
        with pytest.raises(KeyError):
            get_hero_spec("Nobody")

    def test_abilities_carried(self):
        assert get_hero_spec("Cleric").abilities().heal == 4
        assert get_hero_spec("Mellitron").abilities().swarm == 2
        assert get_hero_spec("Knight").abilities().as_dict() == {}


class TestBuild:

    def test_build_party(self):
        party = build_party(["Knight", "Torcher"])
        assert [hero.name for hero in party] == ["Knight", "Torcher"]
        assert all(hero.side == Side.HERO for hero in party)
        assert party[1].abilities.burn == 1

    def test_fresh_units(self):
        """Battles mutate units, never the table."""
        first, second = build_party(["Knight"]), build_party(["Knight"])
        first[0].hp -= 10
        assert second[0].hp == 18
        assert get_hero_spec("Knight").hp == 18

    def test_traits_and_dialogue_copied(self):
        jester = build_party(["Jester"])[0]
        assert "joke" in jester.traits
        jester.traits.add("sad")
        assert "sad" not in get_hero_spec("Jester").traits


class TestValidation:

    def test_negative_stat_rejected(self):
        with pytest.raises(ValidationError):
            UnitSpec(name="Bad", symbol="b", attack=-1, range=1, agility=1, hp=5)

    def test_empty_symbol_rejected(self):
        with pytest.raises(ValidationError):
            UnitSpec(name="Bad", symbol="", attack=1, range=1, agility=1, hp=5)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            UnitSpec(name="Bad", symbol="b", attack=1, range=1, agility=1, hp=5, mana=3)
