"""Obstacles that fall from the top or fly in from the left."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .geometry import Rect


class ObstacleKind(enum.IntEnum):
    """Which picture a falling obstacle is drawn with."""

    TABLE = 0
    CHAIR = 1


@dataclass
class FallingObstacle:
    """An obstacle that drops straight down at a fixed speed."""

    x: int
    y: int
    kind: ObstacleKind = ObstacleKind.TABLE

    SIZE = 30
    DRAW_SIZE = 70
    SPEED = 4

    def move_down(self) -> None:
        self.y += self.SPEED

    def rect(self) -> Rect:
        """The hit box used for collisions."""
        return Rect(self.x, self.y, self.SIZE, self.SIZE)

    def draw_rect(self) -> Rect:
        return Rect(self.x, self.y, self.DRAW_SIZE, self.DRAW_SIZE)


@dataclass
class HorizontalObstacle:
    """An obstacle that crosses the screen from left to right."""

    y: int
    speed: float
    x: int = -30

    SIZE = 25
    DRAW_SIZE = 35
    START_X = -30

    def move_right(self) -> None:
        # Position is kept in whole pixels; fractional movement is truncated.
        self.x = int(self.x + self.speed)

    def rect(self) -> Rect:
        """The hit box used for collisions."""
        return Rect(self.x, self.y, self.SIZE, self.SIZE)

    def draw_rect(self) -> Rect:
        return Rect(self.x, self.y, self.DRAW_SIZE, self.DRAW_SIZE)