"""
conftest.py
-----------
Shared pytest configuration and fixtures for PCStone tests.

Contains:
- Scripted input source for driving the simulation tick by tick
- Player / projectile / state builders
- Logger silencing and event singleton cleanup
- Pytest markers
"""

import os
import sys

import pytest

# Add src directory to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from pcstone.core.debug.debug_logger import LoggerConfig  # noqa: E402
from pcstone.core.runtime.game_state import Playfield, RoundState, Screen  # noqa: E402
from pcstone.core.services.event_manager import EventManager, reset_events  # noqa: E402
from pcstone.core.runtime.session_stats import reset_session_stats  # noqa: E402
from pcstone.entities.player import Player  # noqa: E402
from pcstone.entities.projectile import Projectile  # noqa: E402


# ===========================================================
# Input Helpers
# ===========================================================

class ScriptedInput:
    """
    InputSource fed directly by the test.

    Usage:
        scripted = ScriptedInput()
        scripted.hold(0, Button.RIGHT)      # held every tick until released
        scripted.tap(1, Button.A)           # held and just pressed
    """

    def __init__(self):
        self._held = set()
        self._just = set()

    def hold(self, device, *buttons):
        for button in buttons:
            self._held.add((device, button))
        return self

    def tap(self, device, *buttons):
        for button in buttons:
            self._held.add((device, button))
            self._just.add((device, button))
        return self

    def release_all(self):
        self._held.clear()
        self._just.clear()
        return self

    def pressed(self, device, button):
        return (device, button) in self._held

    def just_pressed(self, device, button):
        return (device, button) in self._just


# ===========================================================
# Builders
# ===========================================================

def make_player(player_id=0, x=100.0, y=50.0, **overrides):
    """Player with default stats at an explicit position."""
    return Player(id=player_id, x=x, y=y, **overrides)


def make_projectile(x, y, owner=1, damage=1, angle=0.0, ttl=None):
    """Basic-sized projectile at an explicit position."""
    return Projectile(
        x=x, y=y, width=6, height=7, velocity=5.0,
        angle=angle, damage=damage, projectile_owner=owner, ttl=ttl,
    )


def make_state(players=None, projectiles=None, screen=Screen.GAME, tick=1, hit_timer=0):
    return RoundState(
        screen=screen,
        tick=tick,
        hit_timer=hit_timer,
        players=list(players or []),
        projectiles=list(projectiles or []),
    )


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Keep console output out of test runs."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


@pytest.fixture(autouse=True)
def clean_singletons():
    """Drop the global event manager and session stats after every test."""
    yield
    reset_events()
    reset_session_stats()


@pytest.fixture
def playfield():
    return Playfield(256, 144)


@pytest.fixture
def scripted_input():
    return ScriptedInput()


@pytest.fixture
def events():
    """Private event manager so tests can subscribe without global state."""
    return EventManager()


@pytest.fixture
def duel_state():
    """Two players facing each other mid-round."""
    return make_state(players=[
        make_player(0, x=100.0, y=50.0),
        make_player(1, x=150.0, y=50.0, color=0xff0000ff),
    ])


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    config.addinivalue_line("markers", "integration: multi-tick scenarios through the orchestrator")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "policy: hit timer gating policy behaviour")


def pytest_collection_modifyitems(config, items):
    """Mark everything outside integration tests as unit tests."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
