"""
Pac-Man / ghost encounters and ghost de-overlap.

Actors move a whole tile per step, so two of them can swap tiles within a
single tick without ever sharing one. Each check therefore looks at both
the pre-tick and post-tick positions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .actors import Ghost, Pacman
from .config import GameConfig
from .enums import GhostMode, GhostType

Tile = Tuple[int, int]


@dataclass
class CollisionResult:
    score: int = 0
    lives_lost: int = 0
    eaten: List[GhostType] = field(default_factory=list)
    game_over: bool = False


def collided(pacman_before: Tile, pacman_after: Tile, ghost_before: Tile, ghost_after: Tile) -> bool:
    """Same tile after the tick, or the two swapped tiles during it"""
    if pacman_after == ghost_after:
        return True
    return pacman_after == ghost_before and ghost_after == pacman_before


def separate_ghosts(ghosts: Sequence[Ghost], previous: Sequence[Tile]):
    """Stop ghosts from stacking up.

    Pairs are visited in index order; when two ghosts share a tile the
    later one goes back to where it started the tick.
    """
    for i in range(len(ghosts)):
        for j in range(i + 1, len(ghosts)):
            if ghosts[i].pos == ghosts[j].pos:
                ghosts[j].x, ghosts[j].y = previous[j]


def resolve_collisions(pacman: Pacman, ghosts: Sequence[Ghost], pacman_before: Tile,
                       ghosts_before: Sequence[Tile], lives: int,
                       config: GameConfig) -> CollisionResult:
    """Apply every encounter of this tick.

    Frightened ghosts met by a powered Pac-Man become eyes. Scatter and
    Chase ghosts cost a life and send Pac-Man back to his spawn tile;
    Frightened or Eaten ghosts never cost a life. Processing stops once the
    last life is gone.
    """
    result = CollisionResult()
    for ghost, ghost_before in zip(ghosts, ghosts_before):
        if not collided(pacman_before, pacman.pos, ghost_before, ghost.pos):
            continue

        if pacman.power_mode and ghost.mode is GhostMode.FRIGHTENED:
            ghost.capture()
            result.score += config.ghost_score
            result.eaten.append(ghost.kind)
        elif ghost.mode not in (GhostMode.FRIGHTENED, GhostMode.EATEN):
            result.lives_lost += 1
            pacman.die()
            if lives - result.lives_lost <= 0:
                result.game_over = True
                break
    return result
