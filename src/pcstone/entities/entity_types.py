"""
entity_types.py
---------------
Projectile variants and the capability table describing each of them.

Every system that needs per-variant data (spawning, collision, drawing)
looks it up through PROJECTILE_SPECS instead of branching on the type.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# Owner id for projectiles not fired by any player
NO_OWNER = -1


class ProjectileType(str, Enum):
    """Projectile variants. Values are stable and used in saved state."""
    BASIC = "basic"


@dataclass(frozen=True)
class ProjectileSpec:
    """
    Fixed properties of a projectile variant.

    Attributes:
        width, height: Bounding box in pixels.
        velocity: Pixels travelled per tick.
        ttl: Lifetime in ticks, or None for "until it leaves the playfield".
        pierces: Survives hitting a player instead of being consumed.
        sprite: Renderer key for the variant.
    """
    width: int
    height: int
    velocity: float
    ttl: Optional[int] = None
    pierces: bool = False
    sprite: str = "cake"


PROJECTILE_SPECS = {
    ProjectileType.BASIC: ProjectileSpec(width=6, height=7, velocity=5.0),
}


def get_projectile_spec(projectile_type: ProjectileType) -> ProjectileSpec:
    """Return the capability row for a variant. Every variant has one."""
    return PROJECTILE_SPECS[ProjectileType(projectile_type)]
