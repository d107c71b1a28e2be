"""
placement.py
------------
Spawn-position search for new entities.

A plain rejection sampler: draw random points inside the padded surface
and keep the first one that is far enough from every live entity.
Cost is O(attempts x live entities); there is no spatial index.
"""

import math
import random

from avatar_arena.core.debug.debug_logger import DebugLogger
from avatar_arena.core.runtime.game_settings import Arena


class PlacementError(RuntimeError):
    """Raised when no free spawn position is found, or a requested one is taken."""

    def __init__(self, attempts: int, occupied: int, message: str = None):
        super().__init__(
            message or
            f"Could not find valid position after {attempts} attempts "
            f"({occupied} entities in play)"
        )
        self.attempts = attempts
        self.occupied = occupied


def is_clear_of(x: float, y: float, others, safe_distance: float = Arena.SAFE_DISTANCE) -> bool:
    """Return True if (x, y) is at least safe_distance from every entity in others."""
    for other in others:
        if math.hypot(x - other.pos.x, y - other.pos.y) < safe_distance:
            return False
    return True


def _axis_sample(rng, extent: float, padding: float) -> float:
    """Uniform sample in [padding, extent - padding], or the midpoint if that range is empty."""
    if extent - 2 * padding <= 0:
        return extent / 2
    return padding + rng.random() * (extent - 2 * padding)


def find_spawn_position(bounds, others, rng=None,
                        padding: float = Arena.SPAWN_PADDING,
                        safe_distance: float = Arena.SAFE_DISTANCE,
                        max_attempts: int = Arena.MAX_SPAWN_ATTEMPTS) -> tuple:
    """
    Pick a random point that keeps safe_distance from every other entity.

    Args:
        bounds: CanvasBounds of the drawing surface.
        others: Entities already in play (the one being placed excluded).
        rng: random.Random-like source; defaults to the random module.
        padding: Distance kept between a candidate and the surface edge.
        safe_distance: Minimum separation to every other entity.
        max_attempts: Candidate budget before giving up.

    Returns:
        (x, y) tuple.

    Raises:
        PlacementError: If every candidate was too close to someone.
    """
    rng = rng or random
    others = list(others)

    for attempt in range(1, max_attempts + 1):
        x = _axis_sample(rng, bounds.width, padding)
        y = _axis_sample(rng, bounds.height, padding)

        if is_clear_of(x, y, others, safe_distance):
            DebugLogger.trace(
                f"Placed at ({x:.0f}, {y:.0f}) after {attempt} attempt(s)",
                category="entity_spawn"
            )
            return x, y

    DebugLogger.fail(
        f"Placement failed after {max_attempts} attempts ({len(others)} entities)",
        category="entity_spawn"
    )
    raise PlacementError(max_attempts, len(others))


def claim_position(entity, others, safe_distance: float = Arena.SAFE_DISTANCE):
    """
    Validate an explicitly chosen spawn point.

    The entity is pulled into its safe rectangle first, then checked
    against everyone else.

    Raises:
        PlacementError: If the clamped point crowds another entity.
    """
    if not entity.is_within_bounds():
        requested = entity.pos.copy()
        entity.pos = entity.clamp_point(entity.pos.x, entity.pos.y)
        DebugLogger.warn(
            f"Spawn point ({requested.x:.0f}, {requested.y:.0f}) outside the arena, "
            f"clamped to ({entity.pos.x:.0f}, {entity.pos.y:.0f})",
            category="entity_spawn"
        )

    others = list(others)
    if not is_clear_of(entity.pos.x, entity.pos.y, others, safe_distance):
        raise PlacementError(
            1, len(others),
            f"Position ({entity.pos.x:.0f}, {entity.pos.y:.0f}) is closer than "
            f"{safe_distance:g} to another entity"
        )
