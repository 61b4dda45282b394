"""
Closed sets shared by the whole engine: directions, cell kinds, ghost
types and modes, run states, bonus fruit and player input.
"""

from __future__ import annotations

from enum import Enum, auto


# ---------------------------------------------------------------------------
# DIRECTIONS
# ---------------------------------------------------------------------------

class Direction(Enum):
    NONE = (0, 0)
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> 'Direction':
        return REVERSE[self]


# Reverse direction lookup
REVERSE = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.NONE: Direction.NONE,
}

# Priority order for every ghost decision; the first candidate wins ties
SEARCH_ORDER = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


# ---------------------------------------------------------------------------
# MAZE CELLS
# ---------------------------------------------------------------------------

class CellType(Enum):
    WALL = '#'
    PELLET = '.'
    POWER_PELLET = 'o'
    EMPTY = ' '
    GHOST_DOOR = '-'


# ---------------------------------------------------------------------------
# GHOSTS
# ---------------------------------------------------------------------------

class GhostType(Enum):
    BLINKY = auto()  # aggressive: goes straight for Pac-Man
    PINKY = auto()   # ambusher: aims ahead of Pac-Man
    INKY = auto()    # flanker: mirrors itself through Pac-Man
    CLYDE = auto()   # erratic: backs off when close


class GhostMode(Enum):
    SCATTER = auto()
    CHASE = auto()
    FRIGHTENED = auto()
    EATEN = auto()


# ---------------------------------------------------------------------------
# RUN STATE
# ---------------------------------------------------------------------------

class GameState(Enum):
    START = auto()
    PLAYING = auto()
    GAME_OVER = auto()
    WIN = auto()


class FruitType(Enum):
    CHERRY = auto()
    STRAWBERRY = auto()
    ORANGE = auto()
    APPLE = auto()
    MELON = auto()
    GALAXIAN = auto()
    BELL = auto()
    KEY = auto()


class InputEvent(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    CONFIRM = auto()
    RETRY = auto()
    QUIT = auto()


INPUT_DIRECTIONS = {
    InputEvent.UP: Direction.UP,
    InputEvent.DOWN: Direction.DOWN,
    InputEvent.LEFT: Direction.LEFT,
    InputEvent.RIGHT: Direction.RIGHT,
}
