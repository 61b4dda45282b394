"""
Gameplay tunables.

The arcade tables are plain module constants; everything the engine reads at
runtime goes through one frozen ``GameConfig`` so tests can override single
values without touching globals.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .enums import FruitType, GhostType

Tile = Tuple[int, int]

# ---------------------------------------------------------------------------
# ARCADE TABLES
# ---------------------------------------------------------------------------

# Power mode length in ticks: (last level the entry applies to, ticks).
# Higher levels give shorter power windows.
POWER_DURATION_TABLE = (
    (1, 48),
    (2, 40),
    (4, 32),
    (8, 24),
)
POWER_DURATION_FLOOR = 16

# Bonus fruit per level, indexed by level - 1 and capped at the last entry
FRUIT_TABLE = (
    (FruitType.CHERRY, 100),
    (FruitType.STRAWBERRY, 300),
    (FruitType.ORANGE, 500),
    (FruitType.APPLE, 700),
    (FruitType.MELON, 1000),
    (FruitType.GALAXIAN, 2000),
    (FruitType.BELL, 3000),
    (FruitType.KEY, 5000),
)

# ---------------------------------------------------------------------------
# FIXED TILES
# ---------------------------------------------------------------------------

PLAYER_SPAWN = (14, 23)

# Level-start layout, all outside the house and spread along row 11
GHOST_SPAWNS = (
    (GhostType.BLINKY, (14, 11)),
    (GhostType.PINKY, (12, 11)),
    (GhostType.INKY, (16, 11)),
    (GhostType.CLYDE, (10, 11)),
)

HOME_ENTRANCE = (14, 11)   # just above the ghost door
HOUSE_INTERIOR = (14, 14)  # where returning eyes respawn
FRUIT_TILE = (14, 17)


@dataclass(frozen=True)
class GameConfig:
    # Scoring
    initial_lives: int = 3
    pellet_score: int = 10
    power_pellet_score: int = 50
    ghost_score: int = 200

    # Movement intervals, in ticks per tile
    player_speed: int = 2
    ghost_speed: int = 2
    eaten_ghost_speed: int = 1
    frightened_slowdown: int = 2
    level_speedup_every: int = 3

    # Ghost behaviour
    respawn_immunity: int = 16
    home_radius: int = 2
    pinky_lookahead: int = 4
    clyde_shy_distance: int = 8

    # Bonus fruit
    fruit_spawn_interval: int = 600
    fruit_lifetime: int = 480

    # Level tables
    power_durations: Tuple[Tuple[int, int], ...] = POWER_DURATION_TABLE
    power_duration_floor: int = POWER_DURATION_FLOOR
    fruit_table: Tuple[Tuple[FruitType, int], ...] = FRUIT_TABLE

    # Layout
    player_spawn: Tile = PLAYER_SPAWN
    ghost_spawns: Tuple[Tuple[GhostType, Tile], ...] = GHOST_SPAWNS
    home_entrance: Tile = HOME_ENTRANCE
    house_interior: Tile = HOUSE_INTERIOR
    fruit_tile: Tile = FRUIT_TILE

    # Run
    ticks_per_second: int = 30
    start_level: int = 1
    final_level: Optional[int] = None

    def __post_init__(self):
        if self.initial_lives < 1:
            raise ValueError(f"initial_lives must be at least 1, got {self.initial_lives}")
        for name in ("player_speed", "ghost_speed", "eaten_ghost_speed",
                     "level_speedup_every", "ticks_per_second", "start_level"):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be at least 1, got {value}")
        if not self.fruit_table:
            raise ValueError("fruit_table must not be empty")
        kinds = [kind for kind, _ in self.ghost_spawns]
        if len(kinds) != len(GhostType) or set(kinds) != set(GhostType):
            raise ValueError("ghost_spawns must name each ghost type exactly once")
        if self.final_level is not None and self.final_level < self.start_level:
            raise ValueError("final_level must not be below start_level")

    def power_duration(self, level: int) -> int:
        """Power mode ticks granted by a power pellet on this level"""
        for last_level, ticks in self.power_durations:
            if level <= last_level:
                return ticks
        return self.power_duration_floor

    def fruit_for_level(self, level: int) -> Tuple[FruitType, int]:
        index = min(max(level - 1, 0), len(self.fruit_table) - 1)
        return self.fruit_table[index]
