"""The collectable magic book that appears above the ground."""

from __future__ import annotations

import random

from .geometry import Rect

BLOCK_SIZE = 40


class RewardBlock:
    """A pickup placed at a random spot; it vanishes once touched."""

    def __init__(
        self, window_width: int, window_height: int, rng: random.Random | None = None
    ) -> None:
        self.window_width = window_width
        self.window_height = window_height
        self.rng = rng if rng is not None else random.Random()
        self.active = False
        self.rect = Rect(0, 0, BLOCK_SIZE, BLOCK_SIZE)
        self.reset()

    def reset(self) -> None:
        """Move the block to a new random spot and make it collectable."""
        x = self.rng.randrange(self.window_width - 30)
        y = self.rng.randrange(self.window_height - 300, self.window_height - 150)
        self.rect = Rect(x, y, BLOCK_SIZE, BLOCK_SIZE)
        self.active = True

    def check_collision(self, player_rect: Rect) -> bool:
        """Collect the block if it is active and touches player_rect."""
        if self.active and player_rect.intersects(self.rect):
            self.active = False
            return True
        return False