"""
projectile.py
-------------
Projectile record. Motion and lifetime rules live in the projectile manager.
"""

from dataclasses import dataclass
from typing import Optional

from pcstone.entities.entity_types import NO_OWNER, ProjectileType, get_projectile_spec


@dataclass
class Projectile:
    """A thrown cake travelling in a straight line at constant speed."""

    x: float
    y: float
    width: int
    height: int
    velocity: float
    angle: float  # degrees, 0 = right, 180 = left
    damage: int
    projectile_type: ProjectileType = ProjectileType.BASIC
    projectile_owner: int = NO_OWNER
    ttl: Optional[int] = None

    def __post_init__(self):
        self.projectile_type = ProjectileType(self.projectile_type)

    @property
    def spec(self):
        return get_projectile_spec(self.projectile_type)

    @property
    def has_owner(self) -> bool:
        return self.projectile_owner != NO_OWNER

    def is_owned_by(self, player) -> bool:
        return self.projectile_owner == player.id
