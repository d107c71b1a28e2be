"""
scenario.py
-----------
Spawns the arena roster described by a scenario config.

Scenario keys
-------------
movement: default MovementModel for every entry ("friction" or "step")
sprite:   optional sprite sheet path applied to every entry
players:  list of entries with name, controlled, wander, enemy, speed,
          movement, sprite and count
"""

from avatar_arena.core.debug.debug_logger import DebugLogger
from avatar_arena.core.services.config_manager import load_config
from avatar_arena.entities.entity_types import MovementModel
from avatar_arena.systems.entity_management.placement import PlacementError


DEFAULT_SCENARIO = {
    "movement": MovementModel.FRICTION.value,
    "sprite": None,
    "players": [],
}


def load_scenario(filename: str = "scenario.yaml", strict: bool = False) -> dict:
    """Load a scenario file merged over DEFAULT_SCENARIO."""
    return load_config(filename, DEFAULT_SCENARIO, strict=strict)


def spawn_roster(manager, scenario: dict, movement_override=None):
    """
    Create every entity listed in the scenario.

    Args:
        manager: GameManager to spawn into.
        scenario: Loaded scenario dict.
        movement_override: MovementModel forced on every entry (CLI flag).

    Returns:
        The controlled Player, or None if no entry is controlled.

    Raises:
        ValueError: If more than one entry is controlled.
        PlacementError: If the arena is too crowded for an entry.
    """
    default_movement = movement_override or scenario.get("movement")
    default_sprite = scenario.get("sprite")
    controlled = None

    for entry in scenario.get("players") or []:
        count = int(entry.get("count", 1))
        sprite_path = entry.get("sprite", default_sprite)
        sprite = None
        if sprite_path and manager.draw_manager is not None:
            sprite = manager.draw_manager.load_sprite_sheet(sprite_path)

        movement = movement_override or entry.get("movement") or default_movement

        for _ in range(count):
            try:
                player = manager.add_player(
                    entry.get("name"),
                    random_walk=bool(entry.get("wander", False)),
                    enemy=bool(entry.get("enemy", False)),
                    speed=entry.get("speed"),
                    movement=MovementModel.parse(movement) if movement else None,
                    sprite=sprite,
                    color=entry.get("color"),
                )
            except PlacementError as e:
                DebugLogger.fail(f"Roster spawn aborted: {e}", category="entity_spawn")
                raise

            if entry.get("controlled"):
                if controlled is not None:
                    raise ValueError("Scenario lists more than one controlled player")
                controlled = player

    DebugLogger.system(f"Roster ready: {len(manager)} entities", category="entity_spawn")
    return controlled
