"""
game_manager.py
---------------
Owner of the arena: bounds, live entities and the per-frame update/draw pass.

Responsibilities
----------------
- Create entities with explicit references to the shared bounds and registry.
- Hook autonomous entities into the central WanderScheduler.
- Remove entities, detaching them from every system in the same call.
- Run one frame: advance wandering, clear, then update and draw each entity.
"""

import random

from avatar_arena.core.debug.debug_logger import DebugLogger
from avatar_arena.entities.entity_types import MovementModel
from avatar_arena.entities.player.player_core import Player
from avatar_arena.systems.entity_management.entity_registry import EntityRegistry
from avatar_arena.systems.entity_management.placement import claim_position
from avatar_arena.systems.wander_scheduler import WanderScheduler


class GameManager:
    """Arena owner and frame driver."""

    def __init__(self, bounds, draw_manager=None, rng=None,
                 default_movement=MovementModel.FRICTION):
        """
        Args:
            bounds: CanvasBounds shared with every entity.
            draw_manager: DrawManager used by draw(); optional for headless use.
            rng: random.Random-like source shared by placement and wandering.
            default_movement: MovementModel for entities that do not ask for one
                (FRICTION when None).
        """
        self.bounds = bounds
        self.draw_manager = draw_manager
        self.rng = rng or random
        self.default_movement = MovementModel.parse(default_movement or MovementModel.FRICTION)

        self.players = EntityRegistry()
        self.wander = WanderScheduler(rng=self.rng)
        self.frame_count = 0

        DebugLogger.init_entry("GameManager")
        DebugLogger.init_sub(f"Arena {bounds.width:g}x{bounds.height:g}, movement={self.default_movement.value}")

    # ===========================================================
    # Entity Lifecycle
    # ===========================================================
    def add_player(self, name=None, random_walk=False, enemy=False, *,
                   speed=None, movement=None, sprite=None, color=None, position=None) -> Player:
        """
        Spawn an entity at a free position and register it.

        Args:
            name: Identifier and label; generated when omitted.
            random_walk: Drive it with the wander scheduler.
            enemy: Flag it as an adversary.
            speed: Override the default speed.
            movement: MovementModel override.
            sprite: Optional SpriteSheet.
            color: Optional '#rrggbb' colour.
            position: Explicit (x, y) instead of random placement. It is
                clamped into the arena and must keep the safe distance.

        Raises:
            PlacementError: If placement exhausts its attempt budget, or
                the explicit position crowds another entity.
            ValueError: If color is not a valid colour.
        """
        kwargs = {}
        if speed is not None:
            kwargs["speed"] = speed

        player = Player(
            self.bounds, self.players, name,
            movement=movement or self.default_movement,
            sprite=sprite, color=color, position=position,
            rng=self.rng, **kwargs
        )
        if position is not None:
            claim_position(player, self.players.others(player))

        self.players.add(player)

        if enemy:
            player.set_enemy()
        if random_walk:
            self.wander.add(player)

        DebugLogger.system(
            f"Spawned {player.name} at ({player.pos.x:.0f}, {player.pos.y:.0f})"
            f"{' [enemy]' if enemy else ''}{' [wander]' if random_walk else ''}",
            category="entity_spawn"
        )
        return player

    def remove_player(self, player) -> bool:
        """
        Detach an entity from wandering and drop it from the arena.

        Returns:
            bool: True if the entity was in play.
        """
        self.wander.discard(player)
        removed = self.players.discard(player)
        if removed:
            player.mark_removed()
            DebugLogger.state(f"Removed {player.name}", category="entity_cleanup")
        return removed

    # ===========================================================
    # Frame
    # ===========================================================
    def tick(self, surface, dt_ms: float):
        """
        One frame: wander, clear, then update and draw each entity in turn.
        """
        self.wander.update(dt_ms)
        self.draw_manager.clear(surface)
        for player in self.players:
            player.update()
            player.draw(surface, self.draw_manager)
        self.frame_count += 1

    # ===========================================================
    # Queries
    # ===========================================================
    def __len__(self) -> int:
        return len(self.players)
