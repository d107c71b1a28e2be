"""
debug_hud.py
------------
Lightweight developer overlay with frame metrics and arena counters.
"""

import pygame

from avatar_arena.core.debug.debug_logger import DebugLogger
from avatar_arena.core.runtime.game_settings import Debug


class DebugHUD:
    """F3 overlay: fps, frame time, entity and wanderer counts."""

    SMOOTHING = 0.1

    def __init__(self, visible: bool = Debug.SHOW_HUD):
        self.visible = visible
        self.smoothed_fps = 0.0
        self.frame_time_ms = 0.0
        self._font = None

        DebugLogger.init_entry("DebugHUD")

    def toggle(self):
        self.visible = not self.visible
        DebugLogger.state(f"Debug HUD {'ON' if self.visible else 'OFF'}", category="debug_hud")

    def record_frame(self, frame_time_ms: float):
        """Track an exponentially smoothed fps (always, even when hidden)."""
        self.frame_time_ms = frame_time_ms
        if frame_time_ms <= 0:
            return
        fps = 1000.0 / frame_time_ms
        if self.smoothed_fps == 0.0:
            self.smoothed_fps = fps
        else:
            self.smoothed_fps += (fps - self.smoothed_fps) * self.SMOOTHING

    def lines(self, manager) -> list:
        """Text rows shown by the overlay."""
        return [
            f"FPS: {self.smoothed_fps:5.1f}",
            f"Frame: {self.frame_time_ms:5.2f} ms",
            f"Entities: {len(manager)}",
            f"Wandering: {len(manager.wander)}",
            f"Canvas: {manager.bounds.width:g}x{manager.bounds.height:g}",
        ]

    def draw(self, surface, manager):
        if not self.visible:
            return

        if self._font is None:
            self._font = pygame.font.SysFont(Debug.HUD_FONT, Debug.HUD_FONT_SIZE)

        rows = self.lines(manager)
        line_h = self._font.get_linesize()
        panel = pygame.Surface((200, line_h * len(rows) + 12), pygame.SRCALPHA)
        panel.fill((20, 20, 20, 180))
        surface.blit(panel, (10, 10))

        for i, text in enumerate(rows):
            rendered = self._font.render(text, True, (230, 230, 230))
            surface.blit(rendered, (16, 16 + i * line_h))
