"""
entity_registry.py
------------------
Live collection of arena entities.

Responsibilities
----------------
- Hold each active entity exactly once, in insertion order.
- Answer placement queries ("everyone except me") without exposing the
  owning manager to entities.
"""

from avatar_arena.core.debug.debug_logger import DebugLogger


class EntityRegistry:
    """Insertion-ordered set of live entities."""

    def __init__(self):
        self._entities = {}

    # ===========================================================
    # Membership
    # ===========================================================
    def add(self, entity):
        """Register an entity. Adding the same entity twice is a no-op."""
        if entity in self._entities:
            return
        self._entities[entity] = None
        DebugLogger.trace(f"Registered {entity!r}", category="entity_spawn")

    def discard(self, entity) -> bool:
        """Remove an entity if present. Returns True if it was registered."""
        if entity not in self._entities:
            return False
        del self._entities[entity]
        return True

    # ===========================================================
    # Queries
    # ===========================================================
    def others(self, entity) -> list:
        """All registered entities except the given one."""
        return [e for e in self._entities if e is not entity]

    def __contains__(self, entity) -> bool:
        return entity in self._entities

    def __iter__(self):
        # Snapshot so entities may be removed mid-iteration
        return iter(list(self._entities))

    def __len__(self) -> int:
        return len(self._entities)
