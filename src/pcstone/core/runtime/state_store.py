"""
state_store.py
--------------
In-memory home of the round state between ticks.

The store keeps a serialized snapshot rather than the live object, so a
loaded state never aliases the saved one and a half-finished tick can't
leak into the stored record.
"""

import copy

from pcstone.core.debug.debug_logger import DebugLogger
from pcstone.core.runtime.game_state import DEFAULT_PLAYFIELD, RoundState


class StateStore:
    """Single-slot load/save store for RoundState."""

    def __init__(self, playfield=DEFAULT_PLAYFIELD):
        self.playfield = playfield
        self._snapshot = None

    def load(self) -> RoundState:
        """Return an independent copy of the saved state (fresh state if none)."""
        if self._snapshot is None:
            DebugLogger.state("No saved state, starting fresh", category="game_state")
            self.save(RoundState.new(self.playfield))
        return RoundState.from_dict(copy.deepcopy(self._snapshot))

    def save(self, state: RoundState):
        self._snapshot = state.to_dict()

    def clear(self):
        self._snapshot = None

    @property
    def has_state(self) -> bool:
        return self._snapshot is not None
