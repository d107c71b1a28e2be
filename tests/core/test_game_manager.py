"""
test_game_manager.py
--------------------
Tests for entity lifecycle and the per-frame pass.
"""

import re
from unittest.mock import MagicMock, call

import pytest

from avatar_arena.core.runtime.game_manager import GameManager
from avatar_arena.entities.entity_state import LifecycleState
from avatar_arena.entities.entity_types import MovementModel
from avatar_arena.systems.entity_management.placement import PlacementError


# ===========================================================
# Lifecycle
# ===========================================================

class TestAddPlayer:

    def test_generated_name_and_label(self, manager):
        player = manager.add_player()

        assert re.fullmatch(r"bro-\d{1,4}", player.name)
        assert player.display_name is None
        assert player.label == player.name

    def test_supplied_name_is_label(self, manager):
        player = manager.add_player("Player")

        assert player.name == "Player"
        assert player.label == "Player"

    def test_enemy_and_wander_flags(self, manager):
        enemy = manager.add_player(random_walk=True, enemy=True, speed=5)

        assert enemy.is_enemy is True
        assert enemy.speed == 5
        assert enemy in manager.wander
        assert enemy.wandering is True

    def test_defaults(self, manager):
        player = manager.add_player()

        assert player.radius == 20
        assert player.speed == 2
        assert player.friction == 0.9
        assert player.movement is MovementModel.FRICTION
        assert re.fullmatch(r"#[0-9a-f]{6}", player.color)
        assert player not in manager.wander

    def test_entities_share_bounds_and_registry(self, manager):
        a = manager.add_player()
        b = manager.add_player()

        assert a.bounds is manager.bounds is b.bounds
        assert a.registry is manager.players

    def test_spawned_entities_keep_safe_distance(self, manager):
        players = [manager.add_player(random_walk=True) for _ in range(9)]

        for i, a in enumerate(players):
            for b in players[i + 1:]:
                assert a.pos.distance_to(b.pos) >= 60

    def test_explicit_position_must_keep_safe_distance(self, manager):
        manager.add_player("a", position=(100, 100))

        with pytest.raises(PlacementError):
            manager.add_player("b", position=(105, 100))
        assert len(manager) == 1

    def test_explicit_position_clamped_into_arena(self, manager):
        player = manager.add_player("c", position=(0, 0))

        assert (player.pos.x, player.pos.y) == (30, 30)
        assert player.is_within_bounds()

    def test_null_default_movement_means_friction(self, bounds, mock_draw_manager, rng):
        manager = GameManager(bounds, mock_draw_manager, rng=rng, default_movement=None)

        assert manager.add_player().movement is MovementModel.FRICTION

    @pytest.mark.parametrize("color, rgb", [
        ("red", (255, 0, 0)),
        ("#00ff00", (0, 255, 0)),
        ((0, 0, 255), (0, 0, 255)),
    ])
    def test_color_accepts_names_hex_and_tuples(self, manager, color, rgb):
        player = manager.add_player(color=color)

        assert player.color == color
        assert tuple(player.body_color)[:3] == rgb

    def test_invalid_color_rejected_at_spawn(self, manager):
        with pytest.raises(ValueError):
            manager.add_player(color="not-a-colour")
        assert len(manager) == 0


class TestRemovePlayer:

    def test_remove_detaches_everywhere(self, manager):
        player = manager.add_player(random_walk=True)

        assert manager.remove_player(player) is True
        assert player not in manager.players
        assert player not in manager.wander
        assert player.death_state == LifecycleState.REMOVED
        assert manager.remove_player(player) is False

    def test_removed_player_ignores_commands(self, manager):
        player = manager.add_player(movement=MovementModel.STEP, speed=5)
        start = player.pos.copy()
        manager.remove_player(player)

        assert player.move("left") is False
        assert player.pos == start

    def test_removed_wanderer_no_longer_moves(self, manager):
        player = manager.add_player(random_walk=True)
        manager.remove_player(player)
        start = player.pos.copy()

        manager.tick(MagicMock(), 1000)

        assert player.pos == start
        assert player.velocity.length() == 0


# ===========================================================
# Frame Pass
# ===========================================================

class TestFrame:

    def test_tick_clears_then_draws_in_insertion_order(self, manager, mock_draw_manager):
        players = [manager.add_player() for _ in range(3)]
        surface = MagicMock()

        manager.tick(surface, 16)

        mock_draw_manager.clear.assert_called_once_with(surface)
        assert mock_draw_manager.draw_player.call_args_list == [
            call(surface, p) for p in players
        ]
        assert manager.frame_count == 1

    def test_tick_updates_before_drawing(self, manager, mock_draw_manager):
        player = manager.add_player(position=(100, 100))
        player.velocity.update(10, 0)
        positions = []
        mock_draw_manager.draw_player.side_effect = lambda s, p: positions.append(p.pos.x)

        manager.tick(MagicMock(), 16)

        assert positions == [pytest.approx(109)]

    def test_wanderers_move_on_interval(self, manager):
        walker = manager.add_player(random_walk=True)
        idle = manager.add_player()

        manager.tick(MagicMock(), 100)

        assert walker.velocity.length() > 0
        assert idle.velocity.length() == 0

    def test_resize_reclamps_existing_entities(self, manager):
        player = manager.add_player(position=(700, 500))

        manager.bounds.resize(400, 300)
        manager.tick(MagicMock(), 0)

        assert player.pos.x == 400 - 30
        assert player.pos.y == 300 - 30

    @pytest.mark.integration
    def test_step_arena_keeps_separation(self, bounds, mock_draw_manager, rng):
        manager = GameManager(bounds, mock_draw_manager, rng=rng, default_movement="step")
        players = [manager.add_player(random_walk=True, speed=6) for _ in range(8)]

        for _ in range(300):
            manager.tick(MagicMock(), 100)

        for i, a in enumerate(players):
            assert a.is_within_bounds()
            for b in players[i + 1:]:
                assert a.pos.distance_to(b.pos) >= 60
