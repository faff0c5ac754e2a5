"""
Runtime configuration exports.

Provides game-wide constants. All exports are lightweight class constants
with no initialization overhead.
"""

from pcstone.core.runtime.game_settings import (
    Display,
    Physics,
    Rules,
    PlayerDefaults,
    Colors,
    Debug,
)

__all__ = [
    'Display',
    'Physics',
    'Rules',
    'PlayerDefaults',
    'Colors',
    'Debug',
]
