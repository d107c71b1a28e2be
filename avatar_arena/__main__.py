"""
Command-line launcher: python -m avatar_arena
"""

import argparse
import os
import sys

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

import pygame

from avatar_arena.core.runtime.game_loop import GameLoop
from avatar_arena.core.runtime.game_settings import Display
from avatar_arena.entities.entity_types import MovementModel
from avatar_arena.systems.entity_management.placement import PlacementError


def parse_size(value: str) -> tuple:
    """Parse 'WxH' into (w, h)."""
    try:
        w, h = map(int, value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected WxH, got {value!r}") from None
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError(f"Size must be positive, got {value!r}")
    return w, h


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Avatar Arena")
    parser.add_argument("--scenario", default="scenario.yaml",
                        help="Scenario file name (searched in avatar_arena/config) or path")
    parser.add_argument("--size", type=parse_size, default=(Display.WIDTH, Display.HEIGHT),
                        help="Window size WxH, e.g. 960x640")
    parser.add_argument("--pixel-ratio", type=float, default=Display.PIXEL_RATIO,
                        help="Arena pixels per window pixel")
    parser.add_argument("--movement", choices=[m.value for m in MovementModel],
                        help="Force one movement model on every avatar")
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible arena")
    parser.add_argument("--fps", type=int, default=Display.FPS, help="Frame rate cap")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        loop = GameLoop(
            scenario=args.scenario,
            size=args.size,
            pixel_ratio=args.pixel_ratio,
            movement=MovementModel.parse(args.movement) if args.movement else None,
            seed=args.seed,
            fps=args.fps,
        )
    except (PlacementError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        pygame.quit()
        return 1

    loop.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
