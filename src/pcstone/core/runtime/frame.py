"""
frame.py
--------
One simulation tick, in a fixed order.

Game screen order:
    1. Game over  -> restart or wait
       Otherwise  -> joins, regen, movement, throwing
    2. Projectile-vs-player collisions (positions from the previous tick)
    3. Advance projectiles
    4. Drop expired / out-of-bounds projectiles
    5. Add the cakes thrown in step 1
    6. Decay the shared hit timer
Every screen then bumps the tick counter.

Projectiles thrown in step 1 are neither hit-tested nor moved until the
next tick.
"""

from pcstone.core.debug.debug_logger import DebugLogger
from pcstone.core.runtime.game_state import DEFAULT_PLAYFIELD, Screen
from pcstone.systems.combat import projectile_manager
from pcstone.systems.combat.combat_resolver import CombatResolver, HitTimerPolicy
from pcstone.systems.round.round_manager import RoundManager, is_game_over


class FrameOrchestrator:
    """Owns the per-tick systems and runs them against a RoundState."""

    def __init__(self, playfield=DEFAULT_PLAYFIELD, policy=HitTimerPolicy.SNAPSHOT, events=None):
        self.playfield = playfield
        self.rounds = RoundManager(playfield, events=events)
        self.combat = CombatResolver(policy, events=events)

    def step(self, state, input_source):
        """Advance `state` by one tick in place and return it."""
        if state.screen is Screen.GAME:
            self._update_game(state, input_source)
        else:
            self.rounds.handle_menu(state, input_source)

        state.tick += 1
        return state

    def run_tick(self, store, input_source):
        """Load the state, step it and save it back."""
        state = store.load()
        self.step(state, input_source)
        store.save(state)
        return state

    def _update_game(self, state, input_source):
        thrown = []
        if is_game_over(state):
            self.rounds.handle_game_over(state, input_source)
        else:
            thrown = self.rounds.handle_players(state, input_source)

        self.combat.resolve(state)
        projectile_manager.advance_all(state.projectiles)
        projectile_manager.remove_expired(state.projectiles, self.playfield.width, self.playfield.height)
        state.projectiles.extend(thrown)

        state.hit_timer = max(0, state.hit_timer - 1)

        DebugLogger.trace(
            f"tick={state.tick} timer={state.hit_timer} projectiles={len(state.projectiles)}",
            category="timing"
        )


# ===========================================================
# Functional Entry Points
# ===========================================================

def step(state, input_source, playfield=DEFAULT_PLAYFIELD, policy=HitTimerPolicy.SNAPSHOT):
    """Run one tick on `state` with a throwaway orchestrator."""
    return FrameOrchestrator(playfield, policy).step(state, input_source)


def run_tick(store, input_source, playfield=DEFAULT_PLAYFIELD, policy=HitTimerPolicy.SNAPSHOT):
    return FrameOrchestrator(playfield, policy).run_tick(store, input_source)
