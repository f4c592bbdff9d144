"""
Pytest fixtures for Wallbreaker tests.
"""

import random

import pytest

from wallbreaker.clock import InstantClock
from wallbreaker.config import Settings
from wallbreaker.simulator import BattleSimulator


@pytest.fixture
def clock() -> InstantClock:
    """A clock that never waits."""
    return InstantClock()


@pytest.fixture
def settings() -> Settings:
    return Settings(short_pause_seconds=0.3, collapse_delay_seconds=1.5)


@pytest.fixture
def log() -> list:
    """Collects every line sent to the log sink."""
    return []


@pytest.fixture
def make_sim(clock, settings, log):
    """Build a simulator wired to the instant clock and the log list."""
    def _make(party, enemies=(), rows=6, cols=6, wall_hp=20, **kwargs):
        kwargs.setdefault("log_callback", log.append)
        kwargs.setdefault("rng", random.Random(0))
        kwargs.setdefault("clock", clock)
        kwargs.setdefault("settings", settings)
        return BattleSimulator(party, enemies, rows, cols, wall_hp, **kwargs)
    return _make
