"""
test_placement.py
-----------------
Unit tests for spawn placement.

Responsibilities
----------------
- Placed points stay inside the padded surface.
- Placed points keep the safe distance from every live entity.
- The sampler gives up with PlacementError after its attempt budget.
"""

import math
import random
from unittest.mock import MagicMock

import pytest

from avatar_arena.core.runtime.canvas_bounds import CanvasBounds
from avatar_arena.entities.player.player_core import Player
from avatar_arena.systems.entity_management.placement import (
    PlacementError,
    find_spawn_position,
    is_clear_of,
)


def test_empty_arena_position_within_padding(bounds):
    rng = random.Random(0)
    for _ in range(200):
        x, y = find_spawn_position(bounds, [], rng)
        assert 40 <= x <= bounds.width - 40
        assert 40 <= y <= bounds.height - 40


def test_position_keeps_safe_distance(bounds, place_player, registry):
    for x in range(100, 800, 150):
        for y in range(100, 600, 150):
            place_player(x, y)

    rng = random.Random(42)
    for _ in range(50):
        x, y = find_spawn_position(bounds, list(registry), rng)
        for other in registry:
            assert math.hypot(x - other.pos.x, y - other.pos.y) >= 60


def test_first_clear_candidate_is_accepted(bounds, place_player):
    blocker = place_player(50, 50)
    rng = MagicMock()
    # First candidate (40, 40) is next to the blocker, second is far away
    rng.random.side_effect = [0.0, 0.0, 0.9, 0.9]

    x, y = find_spawn_position(bounds, [blocker], rng)

    assert x == pytest.approx(40 + 0.9 * 720)
    assert y == pytest.approx(40 + 0.9 * 520)
    assert rng.random.call_count == 4


def test_exhausted_budget_raises():
    tiny = CanvasBounds(100, 100)
    crowd = [MagicMock(pos=MagicMock(x=50, y=50))]
    rng = MagicMock()
    rng.random.return_value = 0.5

    with pytest.raises(PlacementError) as excinfo:
        find_spawn_position(tiny, crowd, rng)

    assert excinfo.value.attempts == 50
    assert excinfo.value.occupied == 1
    assert rng.random.call_count == 100


def test_surface_smaller_than_padding_uses_midpoint():
    x, y = find_spawn_position(CanvasBounds(50, 70), [], random.Random(1))
    assert (x, y) == (25, 35)


def test_is_clear_of_boundary():
    other = MagicMock(pos=MagicMock(x=0, y=0))
    assert is_clear_of(60, 0, [other])
    assert not is_clear_of(59.99, 0, [other])
    assert is_clear_of(10, 0, [])


def test_player_construction_avoids_registered_players(bounds, registry, rng):
    for _ in range(8):
        registry.add(Player(bounds, registry, rng=rng))

    players = list(registry)
    for i, a in enumerate(players):
        for b in players[i + 1:]:
            assert a.pos.distance_to(b.pos) >= 60


def test_player_construction_propagates_placement_error(registry, rng):
    tiny = CanvasBounds(100, 100)
    registry.add(Player(tiny, registry, position=(50, 50), rng=rng))

    with pytest.raises(PlacementError):
        Player(tiny, registry, rng=rng)
