"""
pcstone/entities/__init__.py
----------------------------
Entity module exports.

Exports:
    Player          - Controllable character record
    Projectile      - Thrown cake record
    ProjectileType  - Projectile variants
    NO_OWNER        - Owner id for unowned projectiles
"""

from pcstone.entities.entity_types import NO_OWNER, ProjectileType, ProjectileSpec
from pcstone.entities.player import Player
from pcstone.entities.projectile import Projectile

__all__ = [
    'NO_OWNER',
    'ProjectileType',
    'ProjectileSpec',
    'Player',
    'Projectile',
]
