from avatar_arena.systems.entity_management.entity_registry import EntityRegistry
from avatar_arena.systems.entity_management.placement import (
    PlacementError,
    claim_position,
    find_spawn_position,
    is_clear_of,
)

__all__ = ['EntityRegistry', 'PlacementError', 'claim_position', 'find_spawn_position', 'is_clear_of']
