"""
Runtime configuration exports.

Provides arena-wide constants as lightweight class namespaces.
"""

from avatar_arena.core.runtime.game_settings import (
    Arena,
    Debug,
    Display,
    Fonts,
    PlayerDefaults,
    Sprite,
    Wander,
)
from avatar_arena.core.runtime.canvas_bounds import CanvasBounds

__all__ = [
    # Display & Rendering
    'Display',
    'Fonts',
    'Sprite',
    # Arena rules
    'Arena',
    'PlayerDefaults',
    'Wander',
    'CanvasBounds',
    # Debug
    'Debug',
]
