"""
The tick orchestrator.

``Game`` owns the maze, Pac-Man, the ghosts and the bonus fruit. Input is
queued as it arrives and drained at the start of every tick; the tick then
runs to completion and hands back an immutable ``Snapshot``.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List, Optional

from .actors import Ghost, Pacman
from .collisions import resolve_collisions, separate_ghosts
from .config import GameConfig
from .enums import INPUT_DIRECTIONS, CellType, GameState, InputEvent
from .fruit import Fruit
from .maze import Maze
from .snapshot import FruitView, GhostView, PacmanView, Snapshot

log = logging.getLogger(__name__)


class Game:
    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

        self.maze = Maze()
        self.pacman = Pacman(self.config)
        self.ghosts: List[Ghost] = [
            Ghost(kind, x, y, self.config) for kind, (x, y) in self.config.ghost_spawns
        ]

        self.state = GameState.START
        self.score = 0
        self.lives = self.config.initial_lives
        self.level = self.config.start_level
        self.frame = 0

        self.fruit: Optional[Fruit] = None
        self.fruit_timer = 0

        self.pending_input: Deque[InputEvent] = deque()
        self.quit_requested = False

    # --- INPUT ---

    def queue_input(self, event: InputEvent):
        self.pending_input.append(event)

    def handle_input(self, event: InputEvent) -> bool:
        """Apply one input event; returns True when it asks to quit"""
        if event is InputEvent.QUIT:
            self.quit_requested = True
            return True

        if self.state is GameState.START:
            if event is InputEvent.CONFIRM:
                self.state = GameState.PLAYING
                log.info("game started at level %d", self.level)
        elif self.state is GameState.PLAYING:
            direction = INPUT_DIRECTIONS.get(event)
            if direction is not None:
                self.pacman.set_direction(direction)
        elif self.state is GameState.GAME_OVER:
            if event is InputEvent.RETRY:
                self.reset()
        elif self.state is GameState.WIN:
            if event in (InputEvent.CONFIRM, InputEvent.RETRY):
                self.reset()
        else:
            raise ValueError(f"unknown game state: {self.state!r}")
        return False

    # --- TICK ---

    def tick(self) -> Snapshot:
        """Drain queued input, run one update, report the result.

        A quit request is honoured between ticks: once it arrives no further
        update runs.
        """
        while self.pending_input and not self.quit_requested:
            self.handle_input(self.pending_input.popleft())

        if not self.quit_requested:
            self.update()
            self.frame += 1
        return self.snapshot()

    def update(self):
        if self.state is not GameState.PLAYING:
            return

        self._update_fruit()

        pacman_before = self.pacman.pos
        self.pacman.update(self.maze)
        self._eat_pellet()
        self._eat_fruit()

        ghosts_before = [ghost.pos for ghost in self.ghosts]
        for ghost in self.ghosts:
            ghost.update(self.maze, self.pacman, self.level)
        separate_ghosts(self.ghosts, ghosts_before)

        result = resolve_collisions(self.pacman, self.ghosts, pacman_before,
                                    ghosts_before, self.lives, self.config)
        self.score += result.score
        for kind in result.eaten:
            log.debug("%s eaten, score %d", kind.name, self.score)
        if result.lives_lost:
            self.lives = max(0, self.lives - result.lives_lost)
            log.info("life lost, %d left", self.lives)
        if result.game_over:
            self.state = GameState.GAME_OVER
            log.info("game over with score %d on level %d", self.score, self.level)
            return

        if self.maze.remaining_pellets == 0:
            self.next_level()

    def _update_fruit(self):
        self.fruit_timer += 1
        if self.fruit is None and self.fruit_timer > self.config.fruit_spawn_interval:
            self.fruit = Fruit.for_level(self.level, self.config)
            self.fruit_timer = 0
            log.debug("%s appeared", self.fruit.kind.name)

        if self.fruit is not None and self.fruit.available:
            if self.fruit.tick(self.config.fruit_lifetime):
                log.debug("%s expired", self.fruit.kind.name)
                self.fruit = None
                self.fruit_timer = 0

    def _eat_pellet(self):
        eaten = self.maze.consume_pellet(self.pacman.x, self.pacman.y)
        if eaten is CellType.POWER_PELLET:
            self.score += self.config.power_pellet_score
            self.pacman.activate_power_mode(self.level)
        elif eaten is CellType.PELLET:
            self.score += self.config.pellet_score

    def _eat_fruit(self):
        fruit = self.fruit
        if fruit is None or not fruit.available:
            return
        if self.pacman.pos == (fruit.x, fruit.y):
            self.score += fruit.points
            fruit.eaten = True
            self.fruit = None
            log.debug("%s eaten for %d", fruit.kind.name, fruit.points)

    # --- LEVELS ---

    def next_level(self):
        final = self.config.final_level
        if final is not None and self.level >= final:
            self.state = GameState.WIN
            log.info("final level %d cleared with score %d", self.level, self.score)
            return

        self.level += 1
        self.maze.reset()
        self._reset_actors()
        self.state = GameState.PLAYING
        log.info("advanced to level %d", self.level)

    def reset(self):
        """Start over: fresh score, lives, level and maze"""
        self.score = 0
        self.lives = self.config.initial_lives
        self.level = self.config.start_level
        self.maze.reset()
        self._reset_actors()
        self.state = GameState.PLAYING
        log.info("game reset")

    def _reset_actors(self):
        self.pacman.reset()
        for ghost in self.ghosts:
            ghost.reset()
        self.fruit = None
        self.fruit_timer = 0

    # --- SNAPSHOT ---

    def snapshot(self) -> Snapshot:
        pacman = self.pacman
        fruit = self.fruit
        return Snapshot(
            frame=self.frame,
            state=self.state,
            score=self.score,
            lives=self.lives,
            level=self.level,
            pacman=PacmanView(
                x=pacman.x,
                y=pacman.y,
                direction=pacman.dir,
                anim_frame=pacman.anim_frame,
                power_mode=pacman.power_mode,
                power_ticks=pacman.power_time_left(),
            ),
            ghosts=tuple(
                GhostView(
                    kind=ghost.kind,
                    x=ghost.x,
                    y=ghost.y,
                    direction=ghost.dir,
                    mode=ghost.mode,
                    anim_frame=ghost.anim_frame,
                )
                for ghost in self.ghosts
            ),
            fruit=None if fruit is None else FruitView(
                x=fruit.x,
                y=fruit.y,
                kind=fruit.kind,
                points=fruit.points,
                active=fruit.available,
            ),
            cells=self.maze.rows(),
            remaining_pellets=self.maze.remaining_pellets,
            total_pellets=self.maze.total_pellets,
        )
