"""
mazechase: a tile-based arcade maze-chase simulation.

The engine (maze, actors, ghost AI, collisions, tick orchestration) has no
display dependency; ``mazechase.frontend`` adds the pygame window.
"""

from .config import GameConfig
from .enums import CellType, Direction, GameState, GhostMode, GhostType, InputEvent
from .game import Game
from .maze import Maze
from .snapshot import Snapshot

__all__ = [
    "CellType",
    "Direction",
    "Game",
    "GameConfig",
    "GameState",
    "GhostMode",
    "GhostType",
    "InputEvent",
    "Maze",
    "Snapshot",
]

__version__ = "1.0.0"
