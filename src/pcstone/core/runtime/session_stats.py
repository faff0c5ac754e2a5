"""
session_stats.py
----------------
Tracks statistics across the rounds of one process run.
Fed by round events, never read by the simulation itself.
"""

from pcstone.core.services.event_manager import (
    get_events,
    GameStartedEvent,
    PlayerHitEvent,
    RoundRestartEvent,
)


# ===========================================================
# Session Stats
# ===========================================================

class SessionStats:
    """Container for per-session statistics. Lives in memory only."""

    def __init__(self):
        self.rounds_started = 0
        self.rounds_finished = 0
        self.draws = 0
        self.wins = {}  # {player_id: count}
        self.hits_landed = {}  # {player_id: count}

    # ===========================================================
    # Event Wiring
    # ===========================================================

    def subscribe(self, events=None):
        """Attach to the event manager (the global one by default)."""
        events = events if events is not None else get_events()
        events.subscribe(GameStartedEvent, self._on_game_started)
        events.subscribe(PlayerHitEvent, self._on_player_hit)
        events.subscribe(RoundRestartEvent, self._on_round_restart)

    def _on_game_started(self, event: GameStartedEvent):
        self.rounds_started += 1

    def _on_player_hit(self, event: PlayerHitEvent):
        self.hits_landed[event.owner_id] = self.hits_landed.get(event.owner_id, 0) + 1

    def _on_round_restart(self, event: RoundRestartEvent):
        self.rounds_finished += 1
        if event.winner_id < 0:
            self.draws += 1
        else:
            self.wins[event.winner_id] = self.wins.get(event.winner_id, 0) + 1

    # ===========================================================
    # Queries
    # ===========================================================

    def get_wins(self, player_id: int) -> int:
        return self.wins.get(player_id, 0)

    def reset(self):
        """Forget everything recorded so far."""
        self.rounds_started = 0
        self.rounds_finished = 0
        self.draws = 0
        self.wins.clear()
        self.hits_landed.clear()


# ===========================================================
# Singleton Access
# ===========================================================

_SESSION_STATS = None


def get_session_stats() -> SessionStats:
    """Get or create the session stats singleton."""
    global _SESSION_STATS
    if _SESSION_STATS is None:
        _SESSION_STATS = SessionStats()
    return _SESSION_STATS


def reset_session_stats() -> None:
    """Drop the singleton."""
    global _SESSION_STATS
    _SESSION_STATS = None
