"""
Pac-Man and the four ghosts.

Actors live on whole tiles. Each one counts ticks and only steps once its
movement interval has elapsed, so speed differences are expressed as
"ticks per tile" rather than fractional positions.
"""

from __future__ import annotations

from typing import Callable, Tuple

from .config import GameConfig
from .enums import Direction, GhostMode, GhostType
from .maze import Maze
from .pathfinding import return_direction
from .targeting import choose_direction, ghost_target

Tile = Tuple[int, int]


# ---------------------------------------------------------------------------
# ACTOR BASE
# ---------------------------------------------------------------------------

class Actor:
    def __init__(self, x: int, y: int, direction: Direction):
        self.x = x
        self.y = y
        self.start_pos = (x, y)
        self.start_dir = direction
        self.dir = direction
        self.move_tick = 0
        self.anim_frame = 0

    @property
    def pos(self) -> Tile:
        return self.x, self.y

    def next_pos(self, maze: Maze, direction: Direction) -> Tile:
        """Tile one step away, with tunnel wrap applied"""
        return maze.wrap_x(self.x + direction.dx), self.y + direction.dy

    def ready_to_move(self, interval: int) -> bool:
        self.move_tick += 1
        if self.move_tick < interval:
            return False
        self.move_tick = 0
        return True

    def step(self, maze: Maze, walkable: Callable[[int, int], bool]) -> bool:
        """Move one tile along ``self.dir`` if the destination allows it.

        A blocked move leaves the position alone but keeps the facing.
        """
        if self.dir is Direction.NONE:
            return False
        nx, ny = self.next_pos(maze, self.dir)
        if not walkable(nx, ny):
            return False
        self.x, self.y = nx, ny
        return True

    def reset(self):
        self.x, self.y = self.start_pos
        self.dir = self.start_dir
        self.move_tick = 0


# ---------------------------------------------------------------------------
# PAC-MAN
# ---------------------------------------------------------------------------

class Pacman(Actor):
    def __init__(self, config: GameConfig):
        super().__init__(*config.player_spawn, Direction.NONE)
        self.config = config
        self.next_dir = Direction.NONE
        self.power_mode = False
        self.power_ticks = 0

    def set_direction(self, direction: Direction):
        """Queue a direction change; the latest request wins"""
        self.next_dir = direction

    @property
    def speed_interval(self) -> int:
        # One tick quicker while powered up
        if self.power_mode:
            return max(1, self.config.player_speed - 1)
        return self.config.player_speed

    def update(self, maze: Maze):
        if self.power_mode:
            self.power_ticks -= 1
            if self.power_ticks <= 0:
                self.power_mode = False

        self.anim_frame += 1

        if not self.ready_to_move(self.speed_interval):
            return

        # Early turn: take the queued direction as soon as it opens up
        if self.next_dir is not Direction.NONE:
            nx, ny = self.next_pos(maze, self.next_dir)
            if maze.is_walkable(nx, ny):
                self.dir = self.next_dir
                self.next_dir = Direction.NONE

        self.step(maze, maze.is_walkable)

    def activate_power_mode(self, level: int):
        self.power_mode = True
        self.power_ticks = self.config.power_duration(level)

    def power_time_left(self) -> int:
        return self.power_ticks if self.power_mode else 0

    def die(self):
        """Back to the spawn tile, standing still"""
        self.x, self.y = self.start_pos
        self.dir = Direction.NONE

    def reset(self):
        super().reset()
        self.next_dir = Direction.NONE
        self.power_mode = False
        self.power_ticks = 0


# ---------------------------------------------------------------------------
# GHOSTS
# ---------------------------------------------------------------------------

class Ghost(Actor):
    def __init__(self, kind: GhostType, x: int, y: int, config: GameConfig):
        super().__init__(x, y, Direction.LEFT)
        self.kind = kind
        self.config = config
        self.mode = GhostMode.SCATTER
        self.target = config.home_entrance
        self.respawn_timer = 0

    def speed_interval(self, level: int) -> int:
        """Ticks per tile: quicker every few levels, slower when frightened"""
        interval = self.config.ghost_speed
        if level > 1:
            interval = max(1, interval - (level - 1) // self.config.level_speedup_every)
        if self.mode is GhostMode.FRIGHTENED:
            interval += self.config.frightened_slowdown
        return interval

    def update(self, maze: Maze, pacman: Pacman, level: int):
        self.anim_frame += 1

        if self.mode is GhostMode.EATEN:
            self._return_home(maze)
            return

        if self.respawn_timer > 0:
            self.respawn_timer -= 1

        # Follow Pac-Man's power state; immunity does not block this
        if pacman.power_mode and self.mode is not GhostMode.FRIGHTENED:
            self.mode = GhostMode.FRIGHTENED
        elif not pacman.power_mode and self.mode is GhostMode.FRIGHTENED:
            self.mode = GhostMode.CHASE

        if not self.ready_to_move(self.speed_interval(level)):
            return

        target = ghost_target(self, pacman, maze, self.config)
        self.dir = choose_direction(maze, self.pos, self.dir, target)
        self.step(maze, maze.is_walkable_for_ghost)

    def _return_home(self, maze: Maze):
        tx, ty = self.target
        radius = self.config.home_radius
        if abs(self.x - tx) <= radius and abs(self.y - ty) <= radius:
            # Close enough: respawn inside the house, skipping this tick's move
            self.x, self.y = self.config.house_interior
            self.mode = GhostMode.SCATTER
            self.respawn_timer = self.config.respawn_immunity
            return

        if not self.ready_to_move(self.config.eaten_ghost_speed):
            return
        self.dir = return_direction(maze, self.pos, self.target, self.dir)
        self.step(maze, maze.is_walkable_for_ghost)

    def capture(self):
        """Eaten by a powered-up Pac-Man: turn into eyes heading home"""
        self.mode = GhostMode.EATEN
        self.target = self.config.home_entrance

    def reset(self):
        super().reset()
        self.mode = GhostMode.SCATTER
        self.target = self.config.home_entrance
        self.respawn_timer = 0
