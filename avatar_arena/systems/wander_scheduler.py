"""
wander_scheduler.py
-------------------
Central random-walk driver for autonomous entities.

Responsibilities
----------------
- Give each wandering entity a random heading when it joins.
- Every INTERVAL_MS, let each one re-pick its heading with TURN_CHANCE,
  then apply one movement command in that heading.
- Forget entities on removal (no per-entity timers to cancel).
"""

import random

from avatar_arena.core.debug.debug_logger import DebugLogger
from avatar_arena.core.runtime.game_settings import Wander
from avatar_arena.entities.entity_types import Direction


class WanderScheduler:
    """Single fixed-interval tick shared by every wandering entity."""

    def __init__(self, interval_ms: float = Wander.INTERVAL_MS,
                 turn_chance: float = Wander.TURN_CHANCE, rng=None):
        """
        Args:
            interval_ms: Time between wander ticks.
            turn_chance: Probability per tick of picking a new heading.
            rng: random.Random-like source; defaults to the random module.
        """
        self.interval_ms = interval_ms
        self.turn_chance = turn_chance
        self.rng = rng or random

        self._walkers = {}
        self._elapsed = 0.0
        self.ticks = 0

    # ===========================================================
    # Membership
    # ===========================================================
    def add(self, entity):
        """Start wandering with a random initial heading."""
        entity.heading = self._pick_heading()
        entity.wandering = True
        self._walkers[entity] = None
        DebugLogger.trace(f"{entity.name} wanders {entity.heading.key}", category="wander")

    def discard(self, entity):
        """Stop driving an entity. Unknown entities are ignored."""
        if entity not in self._walkers:
            return
        del self._walkers[entity]
        entity.wandering = False
        entity.heading = None

    def __contains__(self, entity) -> bool:
        return entity in self._walkers

    def __len__(self) -> int:
        return len(self._walkers)

    # ===========================================================
    # Update
    # ===========================================================
    def update(self, dt_ms: float) -> int:
        """
        Accumulate elapsed time and run every tick that has come due.

        Leftover time carries into the next call.

        Returns:
            int: Number of ticks run.
        """
        self._elapsed += dt_ms
        ran = 0
        while self._elapsed >= self.interval_ms:
            self._elapsed -= self.interval_ms
            self.tick()
            ran += 1
        return ran

    def tick(self):
        """One wander step for every registered entity."""
        self.ticks += 1
        for entity in list(self._walkers):
            if self.rng.random() < self.turn_chance:
                entity.heading = self._pick_heading()
            entity.move(entity.heading)

    def _pick_heading(self) -> Direction:
        return self.rng.choice(list(Direction))
