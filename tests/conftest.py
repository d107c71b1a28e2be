"""
conftest.py
-----------
Shared pytest configuration and fixtures for Avatar Arena tests.

Contains:
- Headless SDL setup so pygame runs without a display or audio device
- Common arena fixtures (bounds, registry, seeded RNG, manager)
- Mock draw manager and entity helpers
"""

import os
import random
import sys
from unittest.mock import MagicMock

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

# Allow running tests from a plain checkout
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pygame  # noqa: E402

from avatar_arena.core.debug.debug_logger import LoggerConfig  # noqa: E402
from avatar_arena.core.runtime.canvas_bounds import CanvasBounds  # noqa: E402
from avatar_arena.core.runtime.game_manager import GameManager  # noqa: E402
from avatar_arena.entities.player.player_core import Player  # noqa: E402
from avatar_arena.systems.entity_management.entity_registry import EntityRegistry  # noqa: E402


# ===========================================================
# Session Setup
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Silence console logging during tests."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


@pytest.fixture
def pygame_display():
    """Initialize the dummy video driver for tests that open a window."""
    pygame.display.init()
    pygame.font.init()
    yield
    pygame.display.quit()


# ===========================================================
# Arena Fixtures
# ===========================================================

@pytest.fixture
def bounds():
    return CanvasBounds(800, 600)


@pytest.fixture
def registry():
    return EntityRegistry()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def mock_draw_manager():
    """Mock for DrawManager with the methods the frame pass calls."""
    draw_manager = MagicMock()
    draw_manager.clear = MagicMock()
    draw_manager.draw_player = MagicMock()
    return draw_manager


@pytest.fixture
def manager(bounds, mock_draw_manager, rng):
    return GameManager(bounds, draw_manager=mock_draw_manager, rng=rng)


# ===========================================================
# Test Utilities
# ===========================================================

@pytest.fixture
def place_player(bounds, registry, rng):
    """Factory: create a Player at an exact spot and register it."""
    def _place(x, y, name=None, **kwargs):
        player = Player(bounds, registry, name, position=(x, y), rng=rng, **kwargs)
        registry.add(player)
        return player
    return _place


def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "integration: marks tests that drive several systems")


def pytest_collection_modifyitems(config, items):
    """Mark everything not tagged integration as a unit test."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
