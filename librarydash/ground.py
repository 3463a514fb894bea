"""The static floor with randomly placed rectangular bumps."""

from __future__ import annotations

import random

from .geometry import Rect

FLOOR_THICKNESS = 10


class Ground:
    """A flat floor strip along the bottom of the window plus random bumps."""

    def __init__(self, width: int, height: int, rng: random.Random | None = None) -> None:
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.bumps: list[Rect] = []
        self.generate_bumps()

    @property
    def floor_level(self) -> int:
        """The y coordinate of the top of the flat floor."""
        return self.height - FLOOR_THICKNESS

    @property
    def floor_rect(self) -> Rect:
        return Rect(0, self.floor_level, self.width, FLOOR_THICKNESS)

    def generate_bumps(self) -> None:
        """Replace the bumps with a fresh random row of them."""
        self.bumps = []
        x = 0
        while x < self.width:
            bump_width = self.rng.randrange(50, 150)
            bump_height = self.rng.randrange(20, 100)
            if x + bump_width > self.width:
                bump_width = self.width - x
            self.bumps.append(
                Rect(x, self.floor_level - bump_height, bump_width, bump_height)
            )
            x += bump_width + self.rng.randrange(50, 100)

    def height_at(self, x: int) -> int:
        """Return the y coordinate of the walkable surface at column x."""
        for bump in self.bumps:
            if bump.x <= x <= bump.right():
                return bump.y
        return self.floor_level