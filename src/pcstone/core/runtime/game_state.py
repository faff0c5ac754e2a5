"""
game_state.py
-------------
The round/session record: everything the simulation carries between ticks.

The record is a plain owned object. The frame orchestrator receives it,
mutates it in place for one tick, and hands it back to the state store.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import List, NamedTuple

from pcstone.core.runtime.game_settings import Display
from pcstone.entities.player import Player
from pcstone.entities.projectile import Projectile


class Screen(str, Enum):
    MENU = "menu"
    GAME = "game"


class Playfield(NamedTuple):
    """Playfield size in pixels, supplied by whoever hosts the simulation."""
    width: int = Display.WIDTH
    height: int = Display.HEIGHT


DEFAULT_PLAYFIELD = Playfield()


@dataclass
class RoundState:
    screen: Screen = Screen.MENU
    tick: int = 0
    hit_timer: int = 0
    players: List[Player] = field(default_factory=list)
    projectiles: List[Projectile] = field(default_factory=list)

    # ===========================================================
    # Construction
    # ===========================================================

    @classmethod
    def new(cls, playfield=DEFAULT_PLAYFIELD) -> "RoundState":
        """Fresh state: lobby screen with player 0 already present."""
        return cls(players=[Player.spawn(0, playfield)])

    # ===========================================================
    # Queries
    # ===========================================================

    def get_player(self, player_id: int):
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def has_player(self, player_id: int) -> bool:
        return self.get_player(player_id) is not None

    # ===========================================================
    # Serialization
    # ===========================================================

    def to_dict(self) -> dict:
        """Plain-data form (str, int, float, None, list, dict only)."""
        data = asdict(self)
        data["screen"] = self.screen.value
        for record in data["players"]:
            record["projectile_type"] = record["projectile_type"].value
        for record in data["projectiles"]:
            record["projectile_type"] = record["projectile_type"].value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "RoundState":
        """
        Rebuild a state from `to_dict()` output.

        Raises:
            KeyError: A top-level field is missing.
            TypeError: A player or projectile record has missing or unknown fields.
            ValueError: A field holds an unknown enum value.
        """
        return cls(
            screen=Screen(data["screen"]),
            tick=int(data["tick"]),
            hit_timer=int(data["hit_timer"]),
            players=[Player(**record) for record in data["players"]],
            projectiles=[Projectile(**record) for record in data["projectiles"]],
        )
