"""
Core services exports.

Provides config loading, the event system and the input interface.
The pygame-backed InputManager is imported from its own module.
"""

from pcstone.core.services.config_manager import load_config
from pcstone.core.services.event_manager import (
    get_events,
    BaseEvent,
    GameStartedEvent,
    PlayerJoinedEvent,
    PlayerHitEvent,
    PlayerDiedEvent,
    RoundRestartEvent,
)
from pcstone.core.services.input_source import Button, InputSource, NullInput

__all__ = [
    # Config
    'load_config',
    # Events
    'get_events',
    'BaseEvent',
    'GameStartedEvent',
    'PlayerJoinedEvent',
    'PlayerHitEvent',
    'PlayerDiedEvent',
    'RoundRestartEvent',
    # Input
    'Button',
    'InputSource',
    'NullInput',
]
