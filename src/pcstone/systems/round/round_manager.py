"""
round_manager.py
----------------
Round lifecycle: lobby, joins, per-player input, game over and restart.

Responsibilities
----------------
- Lobby: start the game and let extra input slots join.
- Detect game over and hold the round until the death window has passed.
- Rebuild the round on restart, keeping who was playing and their colors.
- While the round runs: late joins, periodic cake regeneration,
  clamped movement and throwing.
"""

from typing import List

from pcstone.core.debug.debug_logger import DebugLogger
from pcstone.core.runtime.game_settings import Rules
from pcstone.core.runtime.game_state import DEFAULT_PLAYFIELD, RoundState, Screen
from pcstone.core.services.event_manager import (
    get_events,
    GameStartedEvent,
    PlayerJoinedEvent,
    RoundRestartEvent,
)
from pcstone.core.services.input_source import (
    Button,
    confirm_pressed,
    fire_pressed,
    join_pressed,
)
from pcstone.entities.player import Player
from pcstone.entities.projectile import Projectile
from pcstone.systems.combat import projectile_manager


# ===========================================================
# Round Queries
# ===========================================================

def is_game_over(state) -> bool:
    """The round is over as soon as any player is out of health."""
    return any(player.health <= 0 for player in state.players)


def winner(state):
    """First surviving player of a finished round, or None (draw or still running)."""
    if not is_game_over(state):
        return None
    for player in state.players:
        if player.health > 0:
            return player
    return None


class RoundManager:
    """Applies lobby and round rules to a RoundState for one tick."""

    def __init__(self, playfield=DEFAULT_PLAYFIELD, events=None):
        self.playfield = playfield
        self._events = events

    @property
    def events(self):
        return self._events if self._events is not None else get_events()

    # ===========================================================
    # Lobby
    # ===========================================================

    def handle_menu(self, state, input_source):
        """Player 0 starts the game, other slots join by cloning player 0."""
        if confirm_pressed(input_source, 0):
            state.screen = Screen.GAME
            state.tick = 0
            DebugLogger.state(f"Game started with {len(state.players)} player(s)", category="round")
            self.events.dispatch(GameStartedEvent(player_count=len(state.players)))

        for slot in range(1, Rules.MAX_PLAYERS):
            if join_pressed(input_source, slot) and not state.has_player(slot):
                state.players.append(state.players[0].clone_for_slot(slot, self.playfield))
                self._announce_join(slot, in_progress=False)

    # ===========================================================
    # Game Over / Restart
    # ===========================================================

    def handle_game_over(self, state, input_source) -> bool:
        """
        Wait out the death window, then restart on player 0's confirm.

        Returns:
            bool: True if the round was restarted this tick.
        """
        if state.hit_timer != 0 or not confirm_pressed(input_source, 0):
            return False

        self.restart(state)
        return True

    def restart(self, state):
        """
        Reset `state` in place to a fresh round with the same players.

        Everything returns to defaults (including the lobby screen and the
        tick counter); each player keeps only its id and slot color.
        """
        round_winner = winner(state)
        fresh = RoundState.new(self.playfield)

        state.screen = fresh.screen
        state.tick = fresh.tick
        state.hit_timer = fresh.hit_timer
        state.projectiles = fresh.projectiles
        state.players = [Player.spawn(player.id, self.playfield) for player in state.players]

        winner_id = round_winner.id if round_winner else -1
        DebugLogger.state(f"Round restarted (winner: {winner_id})", category="round")
        self.events.dispatch(RoundRestartEvent(winner_id=winner_id))

    # ===========================================================
    # Running Round
    # ===========================================================

    def handle_players(self, state, input_source) -> List[Projectile]:
        """
        Late joins, then regen, movement and throwing for every player.

        Thrown cakes are not added to `state.projectiles`; the caller merges
        them once this tick's collisions and movement are done.

        Returns:
            list[Projectile]: Cakes thrown this tick, in player order.
        """
        self._handle_joins(state, input_source)

        regen_tick = state.tick % Rules.CAKE_REGEN_PERIOD == 0
        thrown = []

        for player in state.players:
            if regen_tick:
                player.regen_cake()

            self._handle_movement(player, input_source)

            if fire_pressed(input_source, player.id):
                projectile_manager.fire(player, thrown)

        return thrown

    def _handle_joins(self, state, input_source):
        for slot in range(1, Rules.MAX_PLAYERS):
            if join_pressed(input_source, slot) and not state.has_player(slot):
                state.players.append(Player.spawn(slot, self.playfield))
                self._announce_join(slot, in_progress=True)

    def _handle_movement(self, player, input_source):
        """One `speed` step per held direction, clamped after each step."""
        step = player.speed
        device = player.id

        if input_source.pressed(device, Button.UP):
            player.move(0.0, -step, self.playfield)
        if input_source.pressed(device, Button.DOWN):
            player.move(0.0, step, self.playfield)
        if input_source.pressed(device, Button.LEFT):
            player.move(-step, 0.0, self.playfield)
        if input_source.pressed(device, Button.RIGHT):
            player.move(step, 0.0, self.playfield)

    def _announce_join(self, slot: int, in_progress: bool):
        DebugLogger.action(f"P{slot + 1} joined", category="round")
        self.events.dispatch(PlayerJoinedEvent(player_id=slot, in_progress=in_progress))
