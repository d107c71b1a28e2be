"""
entity_state.py
---------------
Runtime state enumerations for arena entities.
"""

from enum import IntEnum


class LifecycleState(IntEnum):
    """
    Tracks whether an entity still belongs to the arena.

    Entities only leave through explicit removal, so there is no
    intermediate dying state.
    """
    ALIVE = 0
    REMOVED = 1
