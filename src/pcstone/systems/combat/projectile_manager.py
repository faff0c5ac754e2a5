"""
projectile_manager.py
---------------------
Spawning, movement and expiry of projectiles.

Responsibilities
----------------
- Build projectiles from the firing player and the variant's capability row.
- Spend ammo and spawn together, never one without the other.
- Advance projectiles along their heading at constant speed.
- Drop projectiles whose lifetime ran out or that left the playfield,
  keeping the survivors in their original order.
"""

import math
from typing import List, Optional

from pcstone.core.debug.debug_logger import DebugLogger
from pcstone.entities.entity_types import get_projectile_spec
from pcstone.entities.projectile import Projectile


# ===========================================================
# Spawning
# ===========================================================

def spawn(owner, damage=None, projectile_type=None, angle=None) -> Projectile:
    """
    Create a projectile thrown by `owner`.

    The projectile starts centered (give or take the sprite inset) on the
    owner's horizontal middle, level with the owner's top edge.

    Args:
        owner (Player): The firing player.
        damage (int): Damage override (defaults to owner.projectile_damage).
        projectile_type (ProjectileType): Variant override (defaults to the owner's).
        angle (float): Heading in degrees (defaults to the owner's facing).
    """
    projectile_type = projectile_type if projectile_type is not None else owner.projectile_type
    spec = get_projectile_spec(projectile_type)

    return Projectile(
        x=owner.x + (owner.width // 2) - 2.0,
        y=owner.y,
        width=spec.width,
        height=spec.height,
        velocity=spec.velocity,
        angle=angle if angle is not None else owner.facing_angle,
        damage=damage if damage is not None else owner.projectile_damage,
        projectile_type=projectile_type,
        projectile_owner=owner.id,
        ttl=spec.ttl,
    )


def fire(player, projectiles: List[Projectile]) -> Optional[Projectile]:
    """
    Throw a cake if the player has one.

    Returns:
        The new projectile, or None when the player is out of ammo.
    """
    if player.cakes <= 0:
        return None

    projectile = spawn(player)
    player.cakes -= 1
    projectiles.append(projectile)

    DebugLogger.trace(
        f"P{player.id + 1} threw {projectile.projectile_type.value} "
        f"({player.cakes}/{player.max_cakes} left)",
        category="projectile"
    )
    return projectile


# ===========================================================
# Update Cycle
# ===========================================================

def advance(projectile: Projectile):
    """Move one tick along the heading and burn one tick of lifetime."""
    radians = math.radians(projectile.angle)
    projectile.x += projectile.velocity * math.cos(radians)
    projectile.y += projectile.velocity * math.sin(radians)

    if projectile.ttl is not None:
        projectile.ttl = max(0, projectile.ttl - 1)


def advance_all(projectiles: List[Projectile]):
    for projectile in projectiles:
        advance(projectile)


# ===========================================================
# Expiry
# ===========================================================

def is_expired(projectile: Projectile, playfield_w, playfield_h) -> bool:
    """True once the lifetime is spent or the box is fully off the playfield."""
    if projectile.ttl is not None and projectile.ttl <= 0:
        return True

    return (
        projectile.y < -projectile.height
        or projectile.x < -projectile.width
        or projectile.x > playfield_w
        or projectile.y > playfield_h
    )


def remove_expired(projectiles: List[Projectile], playfield_w, playfield_h) -> int:
    """
    Filter expired projectiles out of the list in place.

    Returns:
        int: Number of projectiles removed.
    """
    before = len(projectiles)
    projectiles[:] = [
        p for p in projectiles
        if not is_expired(p, playfield_w, playfield_h)
    ]
    removed = before - len(projectiles)

    if removed > 0:
        DebugLogger.trace(f"Removed {removed} expired projectiles", category="projectile")
    return removed
