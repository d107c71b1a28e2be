"""
player_core.py
--------------
The arena avatar: a labelled circle or sprite that moves under keyboard
control or the wander scheduler.
"""

import random

import pygame

from avatar_arena.core.debug.debug_logger import DebugLogger
from avatar_arena.core.runtime.game_settings import PlayerDefaults
from avatar_arena.entities.base_entity import BaseEntity
from avatar_arena.entities.entity_types import Direction, MovementModel
from avatar_arena.graphics.sprite_sheet import update_animation
from avatar_arena.systems.entity_management.placement import find_spawn_position
from .player_movement import apply_friction, clamp_to_bounds, integrate, push, step


def random_color(rng=None) -> str:
    """Random '#rrggbb' colour."""
    rng = rng or random
    return f"#{rng.randrange(0x1000000):06x}"


def parse_color(value) -> pygame.Color:
    """
    Validate a colour from code or config ('#rrggbb', a name, or an RGB tuple).

    Raises:
        ValueError: If pygame cannot interpret the value.
    """
    try:
        if isinstance(value, (list, tuple)):
            return pygame.Color(*value)
        return pygame.Color(value)
    except (ValueError, TypeError):
        raise ValueError(f"Invalid colour: {value!r}") from None


def generate_name(rng=None) -> str:
    """Default identifier, e.g. 'bro-4821'."""
    rng = rng or random
    return f"{PlayerDefaults.NAME_PREFIX}-{rng.randrange(PlayerDefaults.NAME_RANGE)}"


class Player(BaseEntity):
    """Represents one avatar in the arena."""

    def __init__(self, bounds, registry, name=None, *,
                 movement=MovementModel.FRICTION,
                 radius=PlayerDefaults.RADIUS,
                 speed=PlayerDefaults.SPEED,
                 friction=PlayerDefaults.FRICTION,
                 color=None, sprite=None, position=None, rng=None):
        """
        Create an avatar and find it a free spawn position.

        Args:
            bounds: Shared CanvasBounds.
            registry: EntityRegistry queried for placement and step checks.
            name: Identifier and label; generated when omitted.
            movement: MovementModel (or its string value).
            radius: Body radius.
            speed: Push increment (friction) or step length (step).
            friction: Per-frame velocity damping factor.
            color: '#rrggbb' body colour; random when omitted.
            sprite: Optional SpriteSheet; circle rendering when None.
            position: Explicit (x, y); skips random placement.
            rng: random.Random-like source for name, colour and placement.

        Raises:
            PlacementError: If no free position is found.
            ValueError: If color is not a valid colour.
        """
        self.rng = rng or random
        body_color = parse_color(color) if color is not None else None

        if position is None:
            others = registry.others(self) if registry is not None else ()
            position = find_spawn_position(bounds, others, self.rng)

        super().__init__(position[0], position[1], radius, bounds, registry)

        self.name = name or generate_name(self.rng)
        self.display_name = name
        self.movement = MovementModel.parse(movement)

        # Motion
        self.speed = speed
        self.friction = friction
        self.velocity = pygame.Vector2(0, 0)
        self.facing = Direction.DOWN
        self._stepped = False

        # Wandering
        self.wandering = False
        self.heading = None

        # Render
        self.color = color if color is not None else random_color(self.rng)
        self.body_color = body_color if body_color is not None else pygame.Color(self.color)
        self.sprite = sprite
        self.current_frame = 0
        self.frame_timer = 0

        self.is_enemy = False

    # ===================================================================
    # Properties
    # ===================================================================

    @property
    def label(self) -> str:
        """Text drawn under the avatar."""
        return self.display_name or self.name

    @property
    def is_moving(self) -> bool:
        if self.movement is MovementModel.FRICTION:
            return self.velocity.length_squared() > 0
        return self._stepped

    # ===================================================================
    # Commands
    # ===================================================================

    def move(self, direction) -> bool:
        """
        Apply one directional command using this entity's movement model.

        Returns:
            bool: False when the entity was removed, or a step was dropped
            or fully clamped.
        """
        direction = Direction.parse(direction)
        if not self.alive:
            return False

        if self.movement is MovementModel.FRICTION:
            push(self, direction)
            return True

        others = self.registry.others(self) if self.registry is not None else ()
        moved = step(self, direction, others)
        self._stepped = self._stepped or moved
        return moved

    def set_enemy(self, enemy: bool = True):
        self.is_enemy = enemy
        DebugLogger.state(f"{self.name} enemy={enemy}", category="entity_spawn")

    # ===================================================================
    # Frame Update
    # ===================================================================

    def update(self):
        """Friction and integration (friction model) or clamp only (step model), then animate."""
        if self.movement is MovementModel.FRICTION:
            apply_friction(self)
            integrate(self)
        else:
            clamp_to_bounds(self)

        update_animation(self, self.is_moving)
        self._stepped = False

    def draw(self, surface, draw_manager):
        draw_manager.draw_player(surface, self)

    def __repr__(self) -> str:
        return (
            f"<Player {self.name!r} "
            f"pos=({self.pos.x:.1f}, {self.pos.y:.1f}) "
            f"movement={self.movement.value}>"
        )
