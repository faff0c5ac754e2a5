"""
game_settings.py
----------------
Centralized constants for all game systems.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Playfield and window configuration."""
    WIDTH: int = 256
    HEIGHT: int = 144
    FPS: int = 60
    CAPTION: str = "PCStone"
    DEFAULT_SCALE: int = 4


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Simulation timing. One tick is one fixed step."""
    UPDATE_RATE: int = 60
    FIXED_DT: float = 1 / UPDATE_RATE
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Round Rules
# ===========================================================

class Rules:
    """Fixed gameplay rules. Durations are in ticks."""
    MAX_PLAYERS: int = 2
    DEAD_FRAMES: int = 120
    INVULNERABLE_FRAMES: int = 30
    CAKE_REGEN_PERIOD: int = 50

    # Horizontal inset of the spawn points from the playfield edges
    SPAWN_INSET: float = 16.0


# ===========================================================
# Player Defaults
# ===========================================================

class PlayerDefaults:
    """Values every new or restarted player starts with."""
    WIDTH: int = 14
    HEIGHT: int = 16
    HEALTH: int = 10
    SPEED: float = 2.0
    PROJECTILE_DAMAGE: int = 1
    CAKES: int = 5


# ===========================================================
# Colors (0xRRGGBBAA)
# ===========================================================

class Colors:
    """Palette shared by the core (player colors) and the renderer."""
    PLAYERS = (
        0xffffffff,  # p1
        0xff0000ff,  # p2
    )

    BACKGROUND = 0x000333ff
    SKY = 0x87ceebff
    GRASS = 0x3c8d2fff
    BAR_BACK = 0x333333ff
    HP_HIGH = 0x00ff00ff
    HP_MID = 0xff9900ff
    HP_LOW = 0xff0000ff
    CAKE_BAR = 0xfffee0ff
    TEXT = 0xffffffff


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    HITBOX_VISIBLE: bool = False
    SHOW_TICK: bool = False
