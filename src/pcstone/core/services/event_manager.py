"""
event_manager.py
----------------
Event-driven system for decoupled game component communication.
Lets the simulation announce joins, hits and restarts without knowing
who listens (session stats, renderer, logging).
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type
from pcstone.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class GameStartedEvent(BaseEvent):
    """Dispatched when the lobby switches to the game screen."""
    player_count: int


@dataclass(frozen=True)
class PlayerJoinedEvent(BaseEvent):
    """Dispatched when a new input slot gets a player."""
    player_id: int
    in_progress: bool


@dataclass(frozen=True)
class PlayerHitEvent(BaseEvent):
    """Dispatched when a projectile damages a player."""
    player_id: int
    owner_id: int
    damage: int
    health: int


@dataclass(frozen=True)
class PlayerDiedEvent(BaseEvent):
    """Dispatched when a hit takes a player's health to zero."""
    player_id: int
    killer_id: int


@dataclass(frozen=True)
class RoundRestartEvent(BaseEvent):
    """Dispatched when a finished round is reset."""
    winner_id: int  # -1 on a draw


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}
        DebugLogger.init("EventManager initialized", category="event_manager")

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires
        """
        subscribers = self._subscribers.setdefault(event_type, [])
        if callback in subscribers:
            return

        subscribers.append(callback)
        callback_name = getattr(callback, '__name__', repr(callback))
        DebugLogger.system(
            f"Subscribed '{callback_name}' to '{event_type.__name__}'",
            category="event_manager"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(callback)
            except ValueError:
                pass

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks.

        A failing callback is logged and does not stop the others.
        """
        event_type = type(event)

        if event_type not in self._subscribers:
            return

        for callback in list(self._subscribers[event_type]):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.warn(f"Error in event callback {callback_name}: {e}")

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def clear_all(self) -> None:
        """Remove all subscribers."""
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        """Count subscribers for one event type, or for all of them."""
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())


# ===========================================================
# Singleton Access
# ===========================================================

_EVENTS = None


def get_events() -> EventManager:
    """Get or create the event manager singleton."""
    global _EVENTS
    if _EVENTS is None:
        _EVENTS = EventManager()
    return _EVENTS


def reset_events() -> None:
    """Reset the singleton."""
    global _EVENTS
    _EVENTS = None
