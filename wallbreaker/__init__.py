"""
Wallbreaker - a turn-based tactical battle simulator.

A party of heroes fights its way down a grid toward a wall. Each hero
moves and attacks in turn, then the enemies advance. Break the wall to
finish the level; lose every hero and the game is over.

This package provides pure game logic, separated from UI/rendering.

Example usage:
    import asyncio
    from wallbreaker import build_party, get_level, build_battle, render_text

    party = build_party(["Knight", "Archer", "Cleric"])
    sim = build_battle(get_level(1), party, log_callback=print)

    sim.move(0, 1)
    sim.begin_attack()
    result = asyncio.run(sim.attack(0, 1))
    for event in result.events:
        print(f"{event.event_type}: {event.message}")
    print(render_text(sim))
"""

# Core models
from .models import (
    Side,
    Terrain,
    Abilities,
    Burn,
    Sluj,
    StatusEffects,
    Unit,
    LevelObject,
    TurnState,
    TurnOutcome,
    BattlePhase,
    BattleEvent,
    ActionResult,
)

# Main controller
from .simulator import BattleSimulator

# Grid
from .grid import Battlefield, Cell

# Pacing and settings
from .clock import Clock, AsyncioClock, InstantClock
from .config import Settings, get_settings, configure_logging

# Data tables
from .roster import UnitSpec, HEROES, get_hero_spec, build_party
from .progression import get_mode_up_buff, apply_mode_up
from .levels import LevelConfig, EnemySpec, LevelObjectSpec, LEVELS, get_level, build_battle

# Presentation
from .render import CellView, glyph_at, cell_view, board_view, render_text

__all__ = [
    # Core models
    "Side",
    "Terrain",
    "Abilities",
    "Burn",
    "Sluj",
    "StatusEffects",
    "Unit",
    "LevelObject",
    "TurnState",
    "TurnOutcome",
    "BattlePhase",
    "BattleEvent",
    "ActionResult",
    # Main controller
    "BattleSimulator",
    # Grid
    "Battlefield",
    "Cell",
    # Pacing and settings
    "Clock",
    "AsyncioClock",
    "InstantClock",
    "Settings",
    "get_settings",
    "configure_logging",
    # Data tables
    "UnitSpec",
    "HEROES",
    "get_hero_spec",
    "build_party",
    "get_mode_up_buff",
    "apply_mode_up",
    "LevelConfig",
    "EnemySpec",
    "LevelObjectSpec",
    "LEVELS",
    "get_level",
    "build_battle",
    # Presentation
    "CellView",
    "glyph_at",
    "cell_view",
    "board_view",
    "render_text",
]
