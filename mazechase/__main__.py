"""
Command-line entry point: ``python -m mazechase``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import pygame

from .config import GameConfig
from .frontend import MAX_SCALE, MIN_SCALE, run
from .game import Game


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="mazechase", description="Tile-based arcade maze chase")
    p.add_argument("--lives", type=int, default=3, help="Lives at the start of a game")
    p.add_argument("--level", type=int, default=1, help="Level to start on")
    p.add_argument("--final-level", type=int, default=None,
                   help="Stop with a win after clearing this level (default: play forever)")
    p.add_argument("--scale", type=int, default=None, choices=range(MIN_SCALE, MAX_SCALE + 1),
                   help="Pixel scale (default: fit the display)")
    p.add_argument("--verbose", action="store_true", help="Debug logging of game events")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        config = GameConfig(initial_lives=args.lives, start_level=args.level,
                            final_level=args.final_level)
    except ValueError as e:
        print(f"Invalid settings: {e}")
        return 2

    try:
        run(Game(config), scale=args.scale)
    except pygame.error as e:
        print(f"Display init failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
