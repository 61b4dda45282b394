import pytest

from mazechase.actors import Ghost, Pacman
from mazechase.config import GameConfig
from mazechase.enums import CellType, GameState, GhostType
from mazechase.game import Game
from mazechase.maze import Maze


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def maze():
    return Maze()


@pytest.fixture
def pacman(config):
    return Pacman(config)


@pytest.fixture
def make_ghost(config):
    def _make(kind=GhostType.BLINKY, x=14, y=11):
        return Ghost(kind, x, y, config)
    return _make


@pytest.fixture
def game():
    g = Game()
    g.state = GameState.PLAYING
    return g


def clear_all_but(maze, keep):
    """Empty every pellet except the one on ``keep``"""
    for y, row in enumerate(maze.cells):
        for x, cell in enumerate(row):
            if cell in (CellType.PELLET, CellType.POWER_PELLET) and (x, y) != keep:
                row[x] = CellType.EMPTY
    maze.remaining_pellets = 1


@pytest.fixture
def leave_one_pellet():
    return clear_all_but
