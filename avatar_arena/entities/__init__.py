"""
avatar_arena/entities/__init__.py
---------------------------------
Entity module exports.

Exports:
    LifecycleState - Whether an entity is still in the arena
    Direction      - Cardinal movement commands
    MovementModel  - FRICTION or STEP movement rule
"""

from avatar_arena.entities.entity_state import LifecycleState
from avatar_arena.entities.entity_types import Direction, MovementModel

__all__ = [
    'LifecycleState',
    'Direction',
    'MovementModel',
]
