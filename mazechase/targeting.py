"""
Ghost AI: where each ghost wants to go and which way it turns to get there.

Targets are plain tiles and may lie outside the maze; out-of-bounds tiles
read as walls, so a far-away target simply pulls the ghost toward that edge.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, Tuple

from .config import GameConfig
from .enums import REVERSE, SEARCH_ORDER, Direction, GhostMode, GhostType

if TYPE_CHECKING:
    from .actors import Ghost, Pacman
    from .maze import Maze

Tile = Tuple[int, int]


def manhattan(a: Tile, b: Tile) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


# ---------------------------------------------------------------------------
# CHASE RULES (one per ghost personality)
# ---------------------------------------------------------------------------

def blinky_target(ghost: Tile, pacman: 'Pacman', maze: 'Maze', config: GameConfig) -> Tile:
    # Directly targets Pac-Man
    return pacman.x, pacman.y


def pinky_target(ghost: Tile, pacman: 'Pacman', maze: 'Maze', config: GameConfig) -> Tile:
    # Targets a few tiles ahead of Pac-Man along his facing
    ahead = config.pinky_lookahead
    return pacman.x + pacman.dir.dx * ahead, pacman.y + pacman.dir.dy * ahead


def inky_target(ghost: Tile, pacman: 'Pacman', maze: 'Maze', config: GameConfig) -> Tile:
    # Reflect itself through Pac-Man to come at him from the other side
    return 2 * pacman.x - ghost[0], 2 * pacman.y - ghost[1]


def clyde_target(ghost: Tile, pacman: 'Pacman', maze: 'Maze', config: GameConfig) -> Tile:
    # Chase from afar, retreat to the bottom-left corner when close
    if manhattan(ghost, (pacman.x, pacman.y)) < config.clyde_shy_distance:
        return 0, maze.height - 1
    return pacman.x, pacman.y


CHASE_RULES: Dict[GhostType, Callable[..., Tile]] = {
    GhostType.BLINKY: blinky_target,
    GhostType.PINKY: pinky_target,
    GhostType.INKY: inky_target,
    GhostType.CLYDE: clyde_target,
}


def ghost_target(ghost: 'Ghost', pacman: 'Pacman', maze: 'Maze', config: GameConfig) -> Tile:
    """Target tile for a ghost that is not returning home"""
    if ghost.mode is GhostMode.EATEN:
        return ghost.target

    if ghost.mode is GhostMode.FRIGHTENED:
        # Flee: the point mirrored through the ghost away from Pac-Man
        return 2 * ghost.x - pacman.x, 2 * ghost.y - pacman.y

    rule = CHASE_RULES.get(ghost.kind)
    if rule is None:
        raise ValueError(f"unknown ghost type: {ghost.kind!r}")
    return rule((ghost.x, ghost.y), pacman, maze, config)


# ---------------------------------------------------------------------------
# GREEDY TURN CHOICE
# ---------------------------------------------------------------------------

def choose_direction(maze: 'Maze', pos: Tile, facing: Direction, target: Tile) -> Direction:
    """Pick the neighbour closest to ``target`` by Manhattan distance.

    Reversing is only a fallback: it is taken when no other way is open.
    When nothing at all is open the current facing is kept. Ties go to the
    first direction in ``SEARCH_ORDER``.
    """
    x, y = pos
    reverse = REVERSE[facing]

    best_dir = Direction.NONE
    best_dist = None
    reverse_dir = Direction.NONE
    reverse_dist = None

    for direction in SEARCH_ORDER:
        nx, ny = x + direction.dx, y + direction.dy
        if not maze.is_walkable_for_ghost(nx, ny):
            continue

        dist = manhattan((nx, ny), target)
        if direction is reverse:
            if reverse_dist is None or dist < reverse_dist:
                reverse_dist = dist
                reverse_dir = direction
        elif best_dist is None or dist < best_dist:
            best_dist = dist
            best_dir = direction

    if best_dir is not Direction.NONE:
        return best_dir
    if reverse_dir is not Direction.NONE:
        return reverse_dir
    return facing
