"""
The compiled 28x31 maze and its pellet bookkeeping.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .enums import CellType

# ---------------------------------------------------------------------------
# ARCADE MAZE LAYOUT
# ---------------------------------------------------------------------------
# '#' wall, '.' pellet, 'o' power pellet, ' ' empty, '-' ghost door.
# Row 14 is the tunnel: walking off either side comes back on the other.

MAZE_LAYOUT = [
    "############################",
    "#............##............#",
    "#.####.#####.##.#####.####.#",
    "#o####.#####.##.#####.####o#",
    "#.####.#####.##.#####.####.#",
    "#..........................#",
    "#.####.##.########.##.####.#",
    "#.####.##.########.##.####.#",
    "#......##....##....##......#",
    "######.##### ## #####.######",
    "######.##### ## #####.######",
    "######.##          ##.######",
    "######.## ###--### ##.######",
    "######.## #      # ##.######",
    "      .   #      #   .      ",
    "######.## #      # ##.######",
    "######.## ######## ##.######",
    "######.##          ##.######",
    "######.## ######## ##.######",
    "######.## ######## ##.######",
    "#............##............#",
    "#.####.#####.##.#####.####.#",
    "#.####.#####.##.#####.####.#",
    "#o..##.......  .......##..o#",
    "###.##.##.########.##.##.###",
    "###.##.##.########.##.##.###",
    "#......##....##....##......#",
    "#.##########.##.##########.#",
    "#.##########.##.##########.#",
    "#..........................#",
    "############################",
]

MAZE_COLS = len(MAZE_LAYOUT[0])
MAZE_ROWS = len(MAZE_LAYOUT)


class Maze:
    """Grid of cell kinds plus the pellet counters.

    Every coordinate query is total: anything outside the grid reads as a
    wall, which keeps actors from leaving the board except through the
    tunnel rule in ``wrap_x``.
    """

    def __init__(self):
        self.width = MAZE_COLS
        self.height = MAZE_ROWS
        self.cells: List[List[CellType]] = []
        self.total_pellets = 0
        self.remaining_pellets = 0
        self.reset()

    def reset(self):
        """Rebuild the grid from the layout, discarding all progress"""
        self.cells = [[CellType(char) for char in row] for row in MAZE_LAYOUT]
        self.total_pellets = sum(
            1 for row in self.cells for cell in row
            if cell in (CellType.PELLET, CellType.POWER_PELLET)
        )
        self.remaining_pellets = self.total_pellets

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def wrap_x(self, x: int) -> int:
        # Tunnel wrap: one step past either edge lands on the opposite edge
        if x < 0:
            return self.width - 1
        if x >= self.width:
            return 0
        return x

    def cell_at(self, x: int, y: int) -> CellType:
        if not self.in_bounds(x, y):
            return CellType.WALL
        return self.cells[y][x]

    def set_cell(self, x: int, y: int, cell: CellType):
        if self.in_bounds(x, y):
            self.cells[y][x] = cell

    def is_walkable(self, x: int, y: int) -> bool:
        return self.cell_at(x, y) not in (CellType.WALL, CellType.GHOST_DOOR)

    def is_walkable_for_ghost(self, x: int, y: int) -> bool:
        # Ghosts may cross the door
        return self.cell_at(x, y) is not CellType.WALL

    def consume_pellet(self, x: int, y: int) -> Optional[CellType]:
        """Eat whatever pellet sits on (x, y).

        Returns the kind eaten (PELLET or POWER_PELLET), or None when the
        cell held no pellet.
        """
        cell = self.cell_at(x, y)
        if cell not in (CellType.PELLET, CellType.POWER_PELLET):
            return None
        self.set_cell(x, y, CellType.EMPTY)
        self.remaining_pellets -= 1
        return cell

    def rows(self) -> Tuple[Tuple[CellType, ...], ...]:
        return tuple(tuple(row) for row in self.cells)
