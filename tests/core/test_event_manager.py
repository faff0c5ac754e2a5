"""
test_event_manager.py
---------------------
Pub-sub dispatch and the session statistics fed by it.
"""

from unittest.mock import MagicMock

from pcstone.core.runtime.session_stats import SessionStats, get_session_stats
from pcstone.core.services.event_manager import (
    GameStartedEvent,
    PlayerHitEvent,
    PlayerJoinedEvent,
    RoundRestartEvent,
    get_events,
)


class TestEventManager:

    def test_dispatch_reaches_subscribers_of_that_type_only(self, events):
        joined = MagicMock()
        started = MagicMock()
        events.subscribe(PlayerJoinedEvent, joined)
        events.subscribe(GameStartedEvent, started)

        events.dispatch(PlayerJoinedEvent(player_id=1, in_progress=False))

        joined.assert_called_once()
        started.assert_not_called()

    def test_duplicate_subscription_is_ignored(self, events):
        callback = MagicMock()
        events.subscribe(GameStartedEvent, callback)
        events.subscribe(GameStartedEvent, callback)

        assert events.get_subscriber_count(GameStartedEvent) == 1

    def test_failing_callback_does_not_stop_dispatch(self, events):
        broken = MagicMock(side_effect=RuntimeError("boom"))
        healthy = MagicMock()
        events.subscribe(GameStartedEvent, broken)
        events.subscribe(GameStartedEvent, healthy)

        events.dispatch(GameStartedEvent(player_count=2))

        healthy.assert_called_once_with(GameStartedEvent(player_count=2))

    def test_unsubscribe(self, events):
        callback = MagicMock()
        events.subscribe(GameStartedEvent, callback)
        events.unsubscribe(GameStartedEvent, callback)

        events.dispatch(GameStartedEvent(player_count=1))

        callback.assert_not_called()
        assert events.get_subscriber_count() == 0

    def test_singleton(self):
        assert get_events() is get_events()


class TestSessionStats:

    def test_counts_rounds_hits_and_wins(self, events):
        stats = SessionStats()
        stats.subscribe(events)

        events.dispatch(GameStartedEvent(player_count=2))
        events.dispatch(PlayerHitEvent(player_id=1, owner_id=0, damage=1, health=9))
        events.dispatch(PlayerHitEvent(player_id=1, owner_id=0, damage=1, health=8))
        events.dispatch(RoundRestartEvent(winner_id=0))
        events.dispatch(RoundRestartEvent(winner_id=-1))

        assert stats.rounds_started == 1
        assert stats.rounds_finished == 2
        assert stats.hits_landed == {0: 2}
        assert stats.get_wins(0) == 1
        assert stats.get_wins(1) == 0
        assert stats.draws == 1

    def test_reset(self, events):
        stats = SessionStats()
        stats.subscribe(events)
        events.dispatch(RoundRestartEvent(winner_id=1))

        stats.reset()

        assert stats.rounds_finished == 0
        assert stats.wins == {}

    def test_singleton(self):
        assert get_session_stats() is get_session_stats()
