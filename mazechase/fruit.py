"""
Bonus fruit: appears on a fixed tile now and then, worth more on later levels.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import GameConfig
from .enums import FruitType


@dataclass
class Fruit:
    x: int
    y: int
    kind: FruitType
    points: int
    active: bool = True
    eaten: bool = False
    age: int = 0

    @classmethod
    def for_level(cls, level: int, config: GameConfig) -> 'Fruit':
        kind, points = config.fruit_for_level(level)
        x, y = config.fruit_tile
        return cls(x, y, kind, points)

    @property
    def available(self) -> bool:
        return self.active and not self.eaten

    def tick(self, lifetime: int) -> bool:
        """Age one tick; returns True once the fruit has outlived ``lifetime``"""
        self.age += 1
        return self.age > lifetime
