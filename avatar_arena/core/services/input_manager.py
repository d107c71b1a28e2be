"""
input_manager.py
----------------
Keyboard routing for the arena.

Provides:
- Key-down to Direction mapping for the controlled entity (arrows and WASD)
- System actions (quit, debug overlay)
- Key repeat so a held key keeps issuing commands
"""

import pygame

from avatar_arena.core.debug.debug_logger import DebugLogger
from avatar_arena.entities.entity_types import Direction


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "movement": {
        Direction.UP: [pygame.K_UP, pygame.K_w],
        Direction.DOWN: [pygame.K_DOWN, pygame.K_s],
        Direction.LEFT: [pygame.K_LEFT, pygame.K_a],
        Direction.RIGHT: [pygame.K_RIGHT, pygame.K_d],
    },
    "system": {
        "quit": [pygame.K_ESCAPE],
        "toggle_debug": [pygame.K_F3],
    },
}

# Roughly a browser's keyboard auto-repeat
KEY_REPEAT_DELAY_MS = 250
KEY_REPEAT_INTERVAL_MS = 35


class InputManager:
    """
    Translates pygame key events into arena commands.

    Usage:
        direction = input_manager.direction_for_event(event)
        if direction:
            player.move(direction)

        if input_manager.action_for_event(event) == "quit":
            running = False
    """

    def __init__(self, key_bindings=None, enable_repeat=True):
        """
        Args:
            key_bindings: Custom bindings (uses DEFAULT_KEY_BINDINGS if None)
            enable_repeat: Turn on pygame key repeat for held keys
        """
        DebugLogger.init_entry("InputManager")

        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._init_lookup_tables()
        self._validate_bindings()

        if enable_repeat:
            pygame.key.set_repeat(KEY_REPEAT_DELAY_MS, KEY_REPEAT_INTERVAL_MS)
            DebugLogger.init_sub(f"Key repeat {KEY_REPEAT_DELAY_MS}ms / {KEY_REPEAT_INTERVAL_MS}ms")

    def _init_lookup_tables(self):
        """Build key -> command lookups."""
        self._key_to_direction = {}
        for direction, keys in self.key_bindings.get("movement", {}).items():
            for key in keys:
                self._key_to_direction[key] = Direction.parse(direction)

        self._key_to_action = {}
        for action, keys in self.key_bindings.get("system", {}).items():
            for key in keys:
                self._key_to_action[key] = action

    def _validate_bindings(self):
        """Warn if a key is bound to both a direction and a system action."""
        overlap = set(self._key_to_direction) & set(self._key_to_action)
        if overlap:
            DebugLogger.warn(f"Overlapping system keys: {overlap}", category="input")

    # ===========================================================
    # Queries
    # ===========================================================

    def direction_for_key(self, key):
        """Direction bound to a key, or None."""
        return self._key_to_direction.get(key)

    def direction_for_event(self, event):
        """Direction for a KEYDOWN event, or None for anything else."""
        if event.type != pygame.KEYDOWN:
            return None
        direction = self.direction_for_key(event.key)
        if direction is not None:
            DebugLogger.trace(f"Key {event.key} -> {direction.key}", category="input")
        return direction

    def action_for_event(self, event):
        """System action name for a KEYDOWN event, or None."""
        if event.type != pygame.KEYDOWN:
            return None
        return self._key_to_action.get(event.key)
