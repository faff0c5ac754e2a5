"""
draw_manager.py
---------------
Renders a RoundState snapshot onto a pygame surface.

Responsibilities:
- Menu screen: title, blinking prompt, joined player tags
- Game screen: backdrop, players with health/cake bars, projectiles
- Game over overlay with the winner (or draw) and restart prompt

Everything is drawn from primitive shapes; no image assets are loaded.
"""

import pygame

from pcstone.core.debug.debug_logger import DebugLogger
from pcstone.core.runtime.game_settings import Colors, Debug
from pcstone.core.runtime.game_state import Screen
from pcstone.entities.entity_types import get_projectile_spec
from pcstone.systems.round.round_manager import is_game_over, winner


def to_color(rgba: int) -> pygame.Color:
    """Convert a 0xRRGGBBAA integer into a pygame.Color."""
    return pygame.Color((rgba >> 24) & 0xff, (rgba >> 16) & 0xff, (rgba >> 8) & 0xff, rgba & 0xff)


def hp_color(health: int, max_health: int) -> int:
    """Health bar color: red at a quarter or less, orange at half or less."""
    percent = health / max_health if max_health else 0.0
    if percent <= 0.25:
        return Colors.HP_LOW
    if percent <= 0.5:
        return Colors.HP_MID
    return Colors.HP_HIGH


class DrawManager:
    """Draws menu and game screens from the current round state."""

    BAR_WIDTH = 10
    TILE = 16

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, session_stats=None):
        pygame.font.init()
        self.fonts = {
            "S": pygame.font.Font(None, 10),
            "M": pygame.font.Font(None, 12),
            "L": pygame.font.Font(None, 20),
        }
        self.session_stats = session_stats
        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Entry Point
    # ===========================================================

    def draw(self, state, surface):
        """Render one frame of `state`."""
        if state.screen is Screen.GAME:
            self.draw_game_screen(state, surface)
        else:
            self.draw_menu_screen(state, surface)

    # ===========================================================
    # Menu Screen
    # ===========================================================

    def draw_menu_screen(self, state, surface):
        surface.fill(to_color(Colors.BACKGROUND))
        screen_w, screen_h = surface.get_size()
        center = screen_w // 2

        self._text(surface, "PCStone", (center - 20, 20), "L")
        if state.tick % 60 < 30:
            self._text(surface, "Press Start to Play", (center - 48, 100), "M")

        # Mascot walking across the screen
        moving_x = state.tick % screen_w
        pygame.draw.rect(surface, to_color(Colors.PLAYERS[0]), (moving_x, 72, 14, 16), border_radius=3)

        count = len(state.players)
        left = center - (count * 52) // 2
        for i, player in enumerate(state.players):
            tag_color = Colors.BACKGROUND if player.color == 0xffffffff else player.color
            rect = (left + i * 52, screen_h - 16, 50, 14)
            pygame.draw.rect(surface, to_color(tag_color), rect, border_radius=2)
            pygame.draw.rect(surface, to_color(Colors.TEXT), rect, width=1, border_radius=2)
            self._text(surface, f"P{player.id + 1} joined", (left + 4 + i * 52, screen_h - 12), "M")

        if self.session_stats and self.session_stats.rounds_finished:
            wins = "  ".join(
                f"P{player.id + 1}: {self.session_stats.get_wins(player.id)}"
                for player in state.players
            )
            self._text(surface, f"Wins  {wins}", (4, 4), "S")

    # ===========================================================
    # Game Screen
    # ===========================================================

    def draw_game_screen(self, state, surface):
        surface.fill(to_color(Colors.BACKGROUND))
        screen_w, screen_h = surface.get_size()

        self._draw_backdrop(surface, state.tick, screen_w, screen_h)

        show_number = len(state.players) > 1
        for player in state.players:
            self.draw_player(surface, player, show_number)

        for projectile in state.projectiles:
            self.draw_projectile(surface, projectile)

        if is_game_over(state):
            self.draw_game_over(surface, state, screen_w, screen_h)

        if Debug.SHOW_TICK:
            self._text(surface, f"t={state.tick} hit={state.hit_timer}", (2, 2), "S")

    def _draw_backdrop(self, surface, tick, screen_w, screen_h):
        grass = to_color(Colors.GRASS)
        for i in range(0, screen_w, self.TILE):
            for j in range(0, screen_h, self.TILE):
                pygame.draw.rect(surface, grass, (i, j, self.TILE, self.TILE))
                pygame.draw.rect(surface, grass.lerp((0, 0, 0), 0.15), (i, j, self.TILE, self.TILE), width=1)

        pygame.draw.rect(surface, to_color(Colors.SKY), (0, 0, screen_w, screen_h // 3))

        cloud_x = tick % screen_w
        pygame.draw.ellipse(surface, pygame.Color(255, 255, 255), (cloud_x, 5, 38, 14))

    def draw_player(self, surface, player, show_number: bool):
        x = int(player.x)
        y = int(player.y)
        bar_x = x + player.width // 2 - 3

        # Health bar
        pygame.draw.rect(surface, to_color(Colors.BAR_BACK), (bar_x, y - 6, self.BAR_WIDTH, 2))
        hp_width = int(player.health / player.max_health * self.BAR_WIDTH) if player.max_health else 0
        pygame.draw.rect(surface, to_color(hp_color(player.health, player.max_health)),
                         (bar_x, y - 6, hp_width, 2))

        # Cake bar
        pygame.draw.rect(surface, to_color(Colors.BAR_BACK), (bar_x, y - 3, self.BAR_WIDTH, 2))
        cake_width = int(player.cakes / player.max_cakes * self.BAR_WIDTH) if player.max_cakes else 0
        pygame.draw.rect(surface, to_color(Colors.CAKE_BAR), (bar_x, y - 3, cake_width, 2))

        body = pygame.Rect(x, y, player.width, player.height)
        body_color = to_color(player.color) if player.id == 0 else pygame.Color(20, 20, 20)
        pygame.draw.rect(surface, body_color, body, border_radius=3)
        pygame.draw.rect(surface, to_color(player.color), body, width=1, border_radius=3)

        if show_number:
            self._text(surface, f"{player.id + 1}", (x + 8, y + 24), "S")

        if Debug.HITBOX_VISIBLE:
            pygame.draw.rect(surface, pygame.Color(255, 0, 255), body, width=1)

    def draw_projectile(self, surface, projectile):
        spec = get_projectile_spec(projectile.projectile_type)
        rect = pygame.Rect(int(projectile.x), int(projectile.y), projectile.width, projectile.height)

        if spec.sprite == "cake":
            frosting = pygame.Color(255, 182, 193) if projectile.projectile_owner == 0 else pygame.Color(139, 69, 19)
            pygame.draw.rect(surface, pygame.Color(245, 222, 179), rect, border_radius=1)
            pygame.draw.rect(surface, frosting, (rect.x, rect.y, rect.width, max(1, rect.height // 3)))

        if Debug.HITBOX_VISIBLE:
            pygame.draw.rect(surface, pygame.Color(255, 0, 255), rect, width=1)

    def draw_game_over(self, surface, state, screen_w, screen_h):
        cx = screen_w // 2
        cy = screen_h // 2
        self._text(surface, "GAME OVER", (cx - 32, cy - 4), "L")

        round_winner = winner(state)
        if round_winner is not None:
            self._text(surface, f"Player {round_winner.id + 1} wins!", (cx - 32, cy + 16), "M")
        else:
            self._text(surface, "Draw!", (cx - 32, cy + 16), "M")

        if state.hit_timer == 0 and state.tick // 4 % 8 < 4:
            self._text(surface, "PRESS START", (cx - 24, cy + 28), "M")

    # ===========================================================
    # Helpers
    # ===========================================================

    def _text(self, surface, text, pos, size="M"):
        rendered = self.fonts[size].render(text, False, to_color(Colors.TEXT))
        surface.blit(rendered, pos)
