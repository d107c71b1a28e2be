"""
player_movement.py
------------------
Movement rules for arena entities.

Two models are kept side by side and selected per entity:

Friction (velocity) model
    push()          adds a fixed increment along one axis
    apply_friction() damps velocity every frame, snapping tiny values to zero
    integrate()     adds velocity to position and clamps to the safe rectangle

Step model
    step()          moves a fixed distance along one axis, clamped, and only
                    commits when the new spot keeps SAFE_DISTANCE from everyone
"""

from avatar_arena.core.debug.debug_logger import DebugLogger
from avatar_arena.core.runtime.game_settings import Arena, PlayerDefaults
from avatar_arena.systems.entity_management.placement import is_clear_of


# ===========================================================
# Friction Model
# ===========================================================

def push(entity, direction):
    """
    Add entity.speed to the velocity along the direction's axis.

    Args:
        entity: Entity with velocity, speed and facing.
        direction (Direction): Movement command.
    """
    entity.velocity.x += direction.dx * entity.speed
    entity.velocity.y += direction.dy * entity.speed
    entity.facing = direction


def apply_friction(entity, epsilon: float = PlayerDefaults.VELOCITY_EPSILON):
    """
    Damp velocity by entity.friction; components below epsilon snap to zero.

    Damping with a factor in [0, 1) only shrinks magnitude, so a component
    never changes sign.
    """
    vx = entity.velocity.x * entity.friction
    vy = entity.velocity.y * entity.friction

    if abs(vx) < epsilon:
        vx = 0.0
    if abs(vy) < epsilon:
        vy = 0.0

    entity.velocity.update(vx, vy)


def integrate(entity):
    """Advance position by velocity and clamp to the safe rectangle."""
    entity.pos += entity.velocity
    clamp_to_bounds(entity)


def clamp_to_bounds(entity):
    """Pull the entity back inside [radius + EDGE_PADDING, dim - radius - EDGE_PADDING]."""
    entity.pos = entity.clamp_point(entity.pos.x, entity.pos.y)


# ===========================================================
# Step Model
# ===========================================================

def step(entity, direction, others, safe_distance: float = Arena.SAFE_DISTANCE) -> bool:
    """
    Move one fixed step, dropping the move if it would crowd another entity.

    Args:
        entity: Entity with pos, speed and clamp_point().
        direction (Direction): Movement command.
        others: Every other live entity.
        safe_distance: Minimum separation the new position must keep.

    Returns:
        bool: True if the position changed.
    """
    entity.facing = direction

    candidate = entity.clamp_point(
        entity.pos.x + direction.dx * entity.speed,
        entity.pos.y + direction.dy * entity.speed,
    )

    if not is_clear_of(candidate.x, candidate.y, others, safe_distance):
        DebugLogger.trace(
            f"{entity.name}: {direction.key} blocked at ({candidate.x:.0f}, {candidate.y:.0f})",
            category="movement"
        )
        return False

    moved = candidate != entity.pos
    entity.pos = candidate
    return moved
