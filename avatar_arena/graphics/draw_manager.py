"""
draw_manager.py
---------------
Immediate-mode renderer for arena entities.

Responsibilities:
- Load and cache sprite sheets and fonts
- Clear the frame
- Draw entity bodies (filled circle or sprite frame) and name labels
"""

import os

import pygame

from avatar_arena.core.debug.debug_logger import DebugLogger
from avatar_arena.core.runtime.game_settings import Display, Fonts, Sprite
from avatar_arena.graphics.sprite_sheet import SpriteSheet


class DrawManager:
    """Handles all arena rendering operations."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, background=Display.BACKGROUND_COLOR):
        self.background = background
        self.sheets = {}
        self._fonts = {}

        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Asset Loading
    # ===========================================================

    def load_sprite_sheet(self, path: str = Sprite.DEFAULT_PATH):
        """
        Load and cache a sprite sheet.

        Returns:
            SpriteSheet, or None if the image is missing or unreadable
            (callers fall back to circle rendering).
        """
        if path in self.sheets:
            return self.sheets[path]

        if not os.path.exists(path):
            DebugLogger.warn(f"Missing sprite sheet at {path} - using circles", category="render")
            self.sheets[path] = None
            return None

        try:
            image = pygame.image.load(path)
            if pygame.display.get_surface() is not None:
                image = image.convert_alpha()
        except pygame.error as e:
            DebugLogger.warn(f"Failed loading sprite sheet {path}: {e}", category="render")
            self.sheets[path] = None
            return None

        sheet = SpriteSheet(image)
        self.sheets[path] = sheet
        DebugLogger.action(f"Loaded sprite sheet '{os.path.basename(path)}'", category="render")
        return sheet

    def get_font(self, size: int = Fonts.LABEL_SIZE) -> pygame.font.Font:
        """Return the label font, falling back to the default system font."""
        font = self._fonts.get(size)
        if font is not None:
            return font

        if not pygame.font.get_init():
            pygame.font.init()

        path = os.path.join(Fonts.DIR, Fonts.DEFAULT)
        if os.path.exists(path):
            font = pygame.font.Font(path, size)
        else:
            font = pygame.font.SysFont(Fonts.FALLBACK, size)

        self._fonts[size] = font
        return font

    # ===========================================================
    # Frame Rendering
    # ===========================================================

    def clear(self, surface: pygame.Surface):
        """Wipe the whole surface."""
        surface.fill(self.background)

    def draw_player(self, surface: pygame.Surface, player):
        """Draw body then label for one entity."""
        x, y = player.pos.x, player.pos.y
        r = player.radius

        if player.sprite is not None:
            frame = player.sprite.get_frame(player.facing.key, player.current_frame, int(r * 2))
            surface.blit(frame, (x - r, y - r))
        else:
            pygame.draw.circle(surface, player.body_color, (x, y), r)

        self.draw_label(surface, player.label, (x, y + r + Fonts.LABEL_OFFSET))

    def draw_label(self, surface: pygame.Surface, text: str, center: tuple,
                   color=Fonts.LABEL_COLOR, size: int = Fonts.LABEL_SIZE):
        """Render text horizontally centered on center[0], baseline near center[1]."""
        rendered = self.get_font(size).render(text, True, color)
        rect = rendered.get_rect(midbottom=(int(center[0]), int(center[1])))
        surface.blit(rendered, rect)
