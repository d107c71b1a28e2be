"""
game_loop.py
------------
Defines the GameLoop class that wires pygame to the GameManager.

Responsibilities
----------------
- Initialize pygame and runtime services (display, input, draw manager)
- Spawn the scenario roster
- Maintain the main timing loop (events -> frame -> present)
"""

import random
import time

import pygame

from avatar_arena.core.debug.debug_hud import DebugHUD
from avatar_arena.core.debug.debug_logger import DebugLogger
from avatar_arena.core.runtime.game_manager import GameManager
from avatar_arena.core.runtime.game_settings import Debug, Display
from avatar_arena.core.runtime.scenario import load_scenario, spawn_roster
from avatar_arena.core.services.display_manager import DisplayManager
from avatar_arena.core.services.input_manager import InputManager
from avatar_arena.graphics.draw_manager import DrawManager


class GameLoop:
    """Core runtime controller that owns the window and the frame clock."""

    def __init__(self, scenario="scenario.yaml", size=(Display.WIDTH, Display.HEIGHT),
                 pixel_ratio=Display.PIXEL_RATIO, movement=None, seed=None, fps=Display.FPS):
        """
        Args:
            scenario: Scenario file name or path.
            size: Initial window size.
            pixel_ratio: Arena pixels per window pixel.
            movement: MovementModel forced on every entity (None keeps the scenario's).
            seed: Seed for placement, colours, names and wandering.
            fps: Frame rate cap.
        """
        DebugLogger.section("Initializing GameLoop")

        pygame.init()
        pygame.font.init()
        pygame.display.set_caption(Display.CAPTION)
        DebugLogger.init_entry("Pygame")

        self.fps = fps
        self.rng = random.Random(seed)

        self.display = DisplayManager(size[0], size[1], pixel_ratio)
        self.input_manager = InputManager()
        self.draw_manager = DrawManager()
        self.debug_hud = DebugHUD()

        config = load_scenario(scenario)
        self.manager = GameManager(
            self.display.bounds,
            draw_manager=self.draw_manager,
            rng=self.rng,
            default_movement=movement or config.get("movement"),
        )
        self.controlled = spawn_roster(self.manager, config, movement)

        self.clock = pygame.time.Clock()
        self.running = True
        self._last_perf_warn_time = 0.0

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================
    def run(self):
        """Loop until the window closes or Escape is pressed."""
        DebugLogger.section("Game Loop")

        while self.running:
            dt_ms = self.clock.tick(self.fps)
            self._handle_events()
            self._draw(dt_ms)

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================
    def _handle_events(self):
        """Route quit, resize and keyboard events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break

            if self.display.handle_event(event):
                continue

            action = self.input_manager.action_for_event(event)
            if action == "quit":
                self.running = False
                DebugLogger.action("Quit key pressed")
                break
            if action == "toggle_debug":
                self.debug_hud.toggle()
                continue

            direction = self.input_manager.direction_for_event(event)
            if direction is not None and self.controlled is not None:
                self.controlled.move(direction)

    # ===========================================================
    # Frame
    # ===========================================================
    def _draw(self, dt_ms: float):
        start = time.perf_counter()

        surface = self.display.get_game_surface()
        self.manager.tick(surface, dt_ms)
        self.debug_hud.draw(surface, self.manager)
        self.display.render()

        frame_time_ms = (time.perf_counter() - start) * 1000
        self.debug_hud.record_frame(dt_ms)

        if frame_time_ms > Debug.FRAME_TIME_WARNING:
            now = time.perf_counter()
            if now - self._last_perf_warn_time > 1.0:
                self._last_perf_warn_time = now
                DebugLogger.warn(f"Slow frame: {frame_time_ms:.2f} ms", category="render")
