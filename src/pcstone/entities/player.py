"""
player.py
---------
Player record: position, health, ammo and the per-player combat stats.
"""

from dataclasses import dataclass, replace

from pcstone.core.runtime.game_settings import Colors, PlayerDefaults, Rules
from pcstone.entities.entity_types import ProjectileType


@dataclass
class Player:
    """One controllable character, bound to the input slot matching its id."""

    id: int
    x: float
    y: float
    width: int = PlayerDefaults.WIDTH
    height: int = PlayerDefaults.HEIGHT
    health: int = PlayerDefaults.HEALTH
    max_health: int = PlayerDefaults.HEALTH
    score: int = 0
    color: int = Colors.PLAYERS[0]
    speed: float = PlayerDefaults.SPEED
    projectile_damage: int = PlayerDefaults.PROJECTILE_DAMAGE
    projectile_type: ProjectileType = ProjectileType.BASIC
    cakes: int = PlayerDefaults.CAKES
    max_cakes: int = PlayerDefaults.CAKES

    def __post_init__(self):
        self.projectile_type = ProjectileType(self.projectile_type)
        self.health = max(0, min(self.health, self.max_health))
        self.cakes = max(0, min(self.cakes, self.max_cakes))

    # ===========================================================
    # Construction
    # ===========================================================

    @classmethod
    def spawn(cls, player_id: int, playfield) -> "Player":
        """Create a default player at its side's spawn point."""
        return cls(
            id=player_id,
            x=spawn_x(player_id, playfield),
            y=float(playfield.height // 2),
            color=slot_color(player_id),
        )

    def clone_for_slot(self, player_id: int, playfield) -> "Player":
        """Copy this player's stats onto another slot (lobby joins)."""
        return replace(
            self,
            id=player_id,
            color=slot_color(player_id),
            x=spawn_x(player_id, playfield),
        )

    # ===========================================================
    # Queries
    # ===========================================================

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    @property
    def facing_angle(self) -> float:
        """Throw direction in degrees: player 0 throws right, the rest left."""
        return 0.0 if self.id == 0 else 180.0

    # ===========================================================
    # Mutation
    # ===========================================================

    def take_damage(self, amount: int) -> int:
        """Apply damage without going below zero. Returns health before the hit."""
        previous = self.health
        self.health = max(0, self.health - amount)
        return previous

    def regen_cake(self):
        self.cakes = min(self.cakes + 1, self.max_cakes)

    def move(self, dx: float, dy: float, playfield):
        """Move by (dx, dy) and clamp the whole box inside the playfield."""
        max_x = float(playfield.width - self.width)
        max_y = float(playfield.height - self.height)
        self.x = max(0.0, min(self.x + dx, max_x))
        self.y = max(0.0, min(self.y + dy, max_y))


# ===========================================================
# Slot Helpers
# ===========================================================

def slot_color(player_id: int) -> int:
    return Colors.PLAYERS[player_id % len(Colors.PLAYERS)]


def spawn_x(player_id: int, playfield) -> float:
    """Player 0 spawns near the left edge, everyone else near the right."""
    if player_id == 0:
        return Rules.SPAWN_INSET
    return float(playfield.width) - Rules.SPAWN_INSET
