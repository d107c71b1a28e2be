"""
display_manager.py
------------------
Window management and the logical-to-window render pipeline.

Responsibilities:
- Create a resizable window
- Keep the shared CanvasBounds equal to window size x pixel ratio
- Scale the arena surface onto the window each frame
"""

import pygame

from avatar_arena.core.debug.debug_logger import DebugLogger
from avatar_arena.core.runtime.canvas_bounds import CanvasBounds
from avatar_arena.core.runtime.game_settings import Display


class DisplayManager:
    """
    Owns the window and the arena surface entities are drawn on.

    The arena surface is the window size multiplied by pixel_ratio, the
    same way a browser canvas backs CSS pixels with device pixels. It is
    scaled down to the window on present.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, width=Display.WIDTH, height=Display.HEIGHT,
                 pixel_ratio=Display.PIXEL_RATIO, bounds=None):
        """
        Args:
            width: Initial window width
            height: Initial window height
            pixel_ratio: Arena pixels per window pixel
            bounds: Existing CanvasBounds to keep updated (created if None)
        """
        DebugLogger.init_entry("DisplayManager")

        self.pixel_ratio = pixel_ratio if pixel_ratio > 0 else 1.0
        self.bounds = bounds or CanvasBounds(0, 0)
        self.window = None
        self.game_surface = None

        self.resize(width, height)
        DebugLogger.init_sub(f"Window {width}x{height} @ {self.pixel_ratio:g}x", level=1)

    # ===========================================================
    # Window Management
    # ===========================================================

    def resize(self, width: int, height: int):
        """
        Recreate the window at the new size and recompute arena bounds.

        Existing entities keep their positions; they are clamped back inside
        on their next update.
        """
        width = max(1, int(width))
        height = max(1, int(height))

        self.window = pygame.display.set_mode((width, height), pygame.RESIZABLE)

        arena_w = int(width * self.pixel_ratio)
        arena_h = int(height * self.pixel_ratio)
        self.bounds.resize(arena_w, arena_h)
        self.game_surface = pygame.Surface((arena_w, arena_h))

        DebugLogger.state(f"Canvas resized to {arena_w}x{arena_h}", category="display")

    def handle_event(self, event) -> bool:
        """Apply window resize events. Returns True if consumed."""
        if event.type == pygame.VIDEORESIZE:
            self.resize(event.w, event.h)
            return True
        return False

    # ===========================================================
    # Rendering Pipeline
    # ===========================================================

    def get_game_surface(self) -> pygame.Surface:
        return self.game_surface

    def render(self):
        """Present the arena surface, scaling when pixel_ratio != 1."""
        if self.game_surface.get_size() == self.window.get_size():
            self.window.blit(self.game_surface, (0, 0))
        else:
            scaled = pygame.transform.scale(self.game_surface, self.window.get_size())
            self.window.blit(scaled, (0, 0))
        pygame.display.flip()
