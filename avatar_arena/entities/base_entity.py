"""
base_entity.py
--------------
Foundational class for all arena entities.

Coordinate System
-----------------
All entities use center-based coordinates:
- self.pos is the entity's visual and physical center
- self.radius is the extent of its circle or scaled sprite
- The safe rectangle keeps the whole body EDGE_PADDING away from the edges
"""

import pygame

from avatar_arena.core.runtime.game_settings import Arena
from avatar_arena.entities.entity_state import LifecycleState


class BaseEntity:
    """
    Base class for arena entities.

    Holds references to the shared CanvasBounds and EntityRegistry;
    it owns neither.
    """

    __slots__ = (
        'pos', 'radius', 'bounds', 'registry',
        'death_state',
    )

    def __init__(self, x: float, y: float, radius: float, bounds, registry=None):
        """
        Args:
            x: Center X position
            y: Center Y position
            radius: Body radius in pixels
            bounds: Shared CanvasBounds
            registry: EntityRegistry the entity lives in (optional)
        """
        self.pos = pygame.Vector2(x, y)
        self.radius = radius
        self.bounds = bounds
        self.registry = registry

        self.death_state = LifecycleState.ALIVE

    # ===================================================================
    # Core Update Loop
    # ===================================================================

    def update(self):
        """Per-frame update. Override in subclasses."""
        pass

    def draw(self, surface, draw_manager):
        """Render onto surface. Override in subclasses."""
        pass

    # ===================================================================
    # Bounds
    # ===================================================================

    def safe_rect(self) -> tuple:
        """
        Return (min_x, min_y, max_x, max_y) the center may occupy.

        If the surface is too small for the body the range collapses to
        the surface midpoint.
        """
        margin = self.radius + Arena.EDGE_PADDING
        width, height = self.bounds.width, self.bounds.height

        min_x, max_x = margin, width - margin
        min_y, max_y = margin, height - margin
        if min_x > max_x:
            min_x = max_x = width / 2
        if min_y > max_y:
            min_y = max_y = height / 2
        return min_x, min_y, max_x, max_y

    def clamp_point(self, x: float, y: float) -> pygame.Vector2:
        """Clamp a candidate center into the safe rectangle."""
        min_x, min_y, max_x, max_y = self.safe_rect()
        return pygame.Vector2(
            min(max(x, min_x), max_x),
            min(max(y, min_y), max_y),
        )

    def is_within_bounds(self) -> bool:
        min_x, min_y, max_x, max_y = self.safe_rect()
        return min_x <= self.pos.x <= max_x and min_y <= self.pos.y <= max_y

    # ===================================================================
    # Lifecycle
    # ===================================================================

    def mark_removed(self):
        self.death_state = LifecycleState.REMOVED

    @property
    def alive(self) -> bool:
        return self.death_state == LifecycleState.ALIVE

    # ===================================================================
    # Utilities
    # ===================================================================

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} "
            f"pos=({self.pos.x:.1f}, {self.pos.y:.1f}) "
            f"{self.death_state.name.lower()}>"
        )
