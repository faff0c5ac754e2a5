"""
combat_resolver.py
------------------
Projectile-vs-player hit detection and damage application.

Responsibilities
----------------
- Test every projectile against every player it doesn't belong to.
- Gate damage on the shared hit timer and on the target still being alive.
- Apply saturating damage and pick the next hit timer value.
- Consume projectiles that landed a hit, keep the rest in order.
- Announce hits and deaths through the event manager.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

from pcstone.core.debug.debug_logger import DebugLogger
from pcstone.core.runtime.game_settings import Rules
from pcstone.core.services.event_manager import get_events, PlayerHitEvent, PlayerDiedEvent
from pcstone.systems.collision.collision import entities_overlap


class HitTimerPolicy(Enum):
    """
    How the shared hit timer gates hits within a single tick.

    SNAPSHOT: every player is gated by the timer value from the start of
        the tick, so player order never decides who gets hit. Each player
        takes at most one hit per tick.
    LIVE: the gate reads the timer as it changes during the pass, so the
        first player hit in a tick shields everyone processed after them.
    """
    SNAPSHOT = "snapshot"
    LIVE = "live"


@dataclass(frozen=True)
class Hit:
    """Outcome of one resolved collision."""
    player_id: int
    owner_id: int
    damage: int
    previous_health: int
    health: int

    @property
    def killed(self) -> bool:
        return self.previous_health > 0 and self.health == 0


def next_hit_timer(previous_health: int, health: int, current_timer: int) -> int:
    """
    Timer value after a hit took a player from `previous_health` to `health`.

    A killing blow starts the death window, a survived hit starts the
    invulnerability window, hitting an already dead player changes nothing.
    """
    if previous_health > 0 and health == 0:
        return Rules.DEAD_FRAMES
    if health > 0:
        return Rules.INVULNERABLE_FRAMES
    return current_timer


class CombatResolver:
    """Resolves projectile hits against players once per tick."""

    def __init__(self, policy=HitTimerPolicy.SNAPSHOT, events=None):
        self.policy = HitTimerPolicy(policy)
        self._events = events

    @property
    def events(self):
        return self._events if self._events is not None else get_events()

    # ===========================================================
    # Resolution
    # ===========================================================

    def resolve(self, state) -> List[Hit]:
        """
        Resolve all projectile-vs-player collisions on `state` in place.

        Players are processed in list order. Projectiles removed by a hit
        are no longer considered for players processed later.

        Returns:
            list[Hit]: Hits applied this tick, in resolution order.
        """
        if not state.players or not state.projectiles:
            return []

        if self.policy is HitTimerPolicy.SNAPSHOT:
            hits = self._resolve_snapshot(state)
        else:
            hits = self._resolve_live(state)

        for hit in hits:
            self._announce(hit)
        return hits

    def _resolve_snapshot(self, state) -> List[Hit]:
        gate_open = state.hit_timer == 0
        new_timer = state.hit_timer
        hits = []

        for player in state.players:
            already_hit = False
            kept = []
            for projectile in state.projectiles:
                if (not already_hit and gate_open and player.health > 0
                        and self._can_hit(projectile, player)):
                    hit = self._apply(player, projectile)
                    hits.append(hit)
                    new_timer = max(
                        new_timer,
                        next_hit_timer(hit.previous_health, hit.health, new_timer)
                    )
                    already_hit = True
                    if not projectile.spec.pierces:
                        continue
                kept.append(projectile)
            state.projectiles[:] = kept

        state.hit_timer = new_timer
        return hits

    def _resolve_live(self, state) -> List[Hit]:
        hits = []

        for player in state.players:
            kept = []
            for projectile in state.projectiles:
                if (state.hit_timer == 0 and player.health > 0
                        and self._can_hit(projectile, player)):
                    hit = self._apply(player, projectile)
                    hits.append(hit)
                    state.hit_timer = next_hit_timer(hit.previous_health, hit.health, state.hit_timer)
                    if not projectile.spec.pierces:
                        continue
                kept.append(projectile)
            state.projectiles[:] = kept

        return hits

    # ===========================================================
    # Helpers
    # ===========================================================

    @staticmethod
    def _can_hit(projectile, player) -> bool:
        if projectile.is_owned_by(player):
            return False
        return entities_overlap(projectile, player)

    @staticmethod
    def _apply(player, projectile) -> Hit:
        previous = player.take_damage(projectile.damage)
        return Hit(
            player_id=player.id,
            owner_id=projectile.projectile_owner,
            damage=projectile.damage,
            previous_health=previous,
            health=player.health,
        )

    def _announce(self, hit: Hit):
        DebugLogger.state(
            f"P{hit.player_id + 1} hit by P{hit.owner_id + 1} "
            f"({hit.previous_health} -> {hit.health})",
            category="collision"
        )
        self.events.dispatch(PlayerHitEvent(
            player_id=hit.player_id,
            owner_id=hit.owner_id,
            damage=hit.damage,
            health=hit.health,
        ))
        if hit.killed:
            self.events.dispatch(PlayerDiedEvent(player_id=hit.player_id, killer_id=hit.owner_id))
