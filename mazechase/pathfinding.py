"""
Breadth-first search used by eaten ghosts ("eyes") to get back home.

Unlike the greedy turn choice in ``targeting`` this always follows a
globally shortest path, so the eyes can never stall in a dead end.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Deque, List, Tuple

from .enums import SEARCH_ORDER, Direction

if TYPE_CHECKING:
    from .maze import Maze

Tile = Tuple[int, int]


def first_open_direction(maze: 'Maze', pos: Tile) -> Direction:
    x, y = pos
    for direction in SEARCH_ORDER:
        if maze.is_walkable_for_ghost(x + direction.dx, y + direction.dy):
            return direction
    return Direction.NONE


def return_direction(maze: 'Maze', start: Tile, target: Tile, facing: Direction) -> Direction:
    """First move of the shortest ghost-walkable path from start to target.

    Neighbours expand in ``SEARCH_ORDER``, so among equally short paths the
    one whose first step comes first in that order wins. Tunnel wrap is
    honoured. When already on the target, or when the target is unreachable,
    any open neighbour is taken; failing that the current facing is kept.
    """
    if start != target and maze.in_bounds(*start):
        visited: List[List[bool]] = [[False] * maze.width for _ in range(maze.height)]
        visited[start[1]][start[0]] = True

        queue: Deque[Tuple[int, int, Direction]] = deque()
        queue.append((start[0], start[1], Direction.NONE))

        while queue:
            x, y, first = queue.popleft()
            if (x, y) == target:
                return first

            for direction in SEARCH_ORDER:
                nx = maze.wrap_x(x + direction.dx)
                ny = y + direction.dy
                # Walkable implies in bounds, so the visited lookup is safe
                if not maze.is_walkable_for_ghost(nx, ny) or visited[ny][nx]:
                    continue
                visited[ny][nx] = True
                queue.append((nx, ny, direction if first is Direction.NONE else first))

    fallback = first_open_direction(maze, start)
    if fallback is not Direction.NONE:
        return fallback
    return facing
