"""
Read-only views of one finished tick, handed to renderers and tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .enums import CellType, Direction, FruitType, GameState, GhostMode, GhostType


@dataclass(frozen=True)
class PacmanView:
    x: int
    y: int
    direction: Direction
    anim_frame: int
    power_mode: bool
    power_ticks: int


@dataclass(frozen=True)
class GhostView:
    kind: GhostType
    x: int
    y: int
    direction: Direction
    mode: GhostMode
    anim_frame: int


@dataclass(frozen=True)
class FruitView:
    x: int
    y: int
    kind: FruitType
    points: int
    active: bool


@dataclass(frozen=True)
class Snapshot:
    frame: int
    state: GameState
    score: int
    lives: int
    level: int
    pacman: PacmanView
    ghosts: Tuple[GhostView, ...]
    fruit: Optional[FruitView]
    cells: Tuple[Tuple[CellType, ...], ...]
    remaining_pellets: int
    total_pellets: int

    def cell_at(self, x: int, y: int) -> CellType:
        if 0 <= y < len(self.cells) and 0 <= x < len(self.cells[y]):
            return self.cells[y][x]
        return CellType.WALL
