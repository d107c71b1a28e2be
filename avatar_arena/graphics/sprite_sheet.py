"""
sprite_sheet.py
---------------
Character sheet slicing and frame animation.

Layout: square frames of Sprite.SIZE pixels, one row per facing
(down, right, left, up) and Sprite.FRAME_COUNT columns of walk frames.
"""

import pygame

from avatar_arena.core.runtime.game_settings import Sprite


class SpriteSheet:
    """A loaded sheet plus a cache of frames scaled to on-screen size."""

    def __init__(self, image: pygame.Surface, frame_size: int = Sprite.SIZE,
                 frame_count: int = Sprite.FRAME_COUNT, rows: dict = None):
        self.image = image
        self.frame_size = frame_size
        self.frame_count = frame_count
        self.rows = rows or Sprite.ROWS
        self._scaled = {}

    def frame_rect(self, facing: str, frame: int) -> pygame.Rect:
        """Source rectangle for a facing ("down", "up", ...) and column."""
        row = self.rows.get(facing, 0)
        col = frame % self.frame_count
        return pygame.Rect(
            col * self.frame_size, row * self.frame_size,
            self.frame_size, self.frame_size,
        )

    def get_frame(self, facing: str, frame: int, size: int) -> pygame.Surface:
        """Frame scaled to size x size, cached per (facing, frame, size)."""
        key = (facing, frame % self.frame_count, size)
        surface = self._scaled.get(key)
        if surface is None:
            source = self.image.subsurface(self.frame_rect(facing, frame))
            surface = pygame.transform.scale(source, (size, size))
            self._scaled[key] = surface
        return surface


def update_animation(entity, moving: bool,
                     frame_delay: int = Sprite.FRAME_DELAY,
                     frame_count: int = Sprite.FRAME_COUNT):
    """
    Advance the walk cycle once every frame_delay updates while moving.

    An idle entity rests on frame 0.
    """
    if not moving:
        entity.current_frame = 0
        entity.frame_timer = 0
        return

    entity.frame_timer += 1
    if entity.frame_timer >= frame_delay:
        entity.frame_timer = 0
        entity.current_frame = (entity.current_frame + 1) % frame_count
