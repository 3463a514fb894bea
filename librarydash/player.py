"""The player character: movement, jumping, gliding, lives and invincibility."""

from __future__ import annotations

import time
from typing import Callable, Protocol

from .geometry import Rect


class HeightMap(Protocol):
    def height_at(self, x: int) -> int: ...


class Player:
    """The controllable character."""

    WIDTH = 50
    HEIGHT = 50
    HITBOX_SIZE = 4
    HITBOX_OFFSET_X = 23
    HITBOX_OFFSET_Y = 26
    START_X = 580
    START_Y = 700
    GRAVITY = 0.6
    JUMP_VELOCITY = -14.0
    FRICTION = 0.3
    STOP_THRESHOLD = 0.5
    MAX_GLIDE_ENERGY = 300.0
    GLIDE_ENERGY_COST = 1.0
    GLIDE_ENERGY_BONUS = 80.0
    INVINCIBILITY_SECONDS = 4.0

    def __init__(
        self,
        window_width: int,
        lives: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.window_width = window_width
        self.lives = lives
        self.clock = clock
        self.x = self.START_X
        self.y = self.START_Y
        self.velocity_x = 0.0
        self.velocity_y = 0.0
        self.facing_right = True
        self.jumping = False
        self.double_jumping = False
        self.gliding = False
        self.invincible = False
        self.invincible_until = 0.0
        self.glide_energy = self.MAX_GLIDE_ENERGY

    def move(self, dx: float) -> None:
        """Set the horizontal speed in pixels per frame."""
        self.velocity_x = float(int(dx))

    def jump(self) -> None:
        """Jump, or jump again once while in the air."""
        if not self.jumping:
            self.velocity_y = self.JUMP_VELOCITY
            self.jumping = True
        elif not self.double_jumping:
            self.velocity_y = self.JUMP_VELOCITY
            self.double_jumping = True

    def update(self, ground: HeightMap) -> None:
        """Advance the player by one frame against the given ground."""
        new_x = int(self.x + self.velocity_x)
        check_x = self.x + self.WIDTH if self.velocity_x > 0 else self.x
        ground_height = ground.height_at(check_x)
        current_height = ground.height_at(self.x + self.WIDTH // 2)
        height_diff = current_height - ground_height
        blocked = height_diff > self.HEIGHT and self.velocity_x != 0

        if self.jumping:
            if self.y + self.HEIGHT < ground_height:
                self.x = new_x
            elif blocked:
                self.velocity_x = 0.0
        elif blocked:
            self.velocity_x = 0.0
        else:
            self.x = new_x

        self.x = max(self.x, 0)
        if self.x + self.WIDTH > self.window_width:
            self.x = self.window_width - self.WIDTH

        if not self.jumping or self.velocity_x != 0:
            if self.velocity_x > 0:
                self.velocity_x -= self.FRICTION
            elif self.velocity_x < 0:
                self.velocity_x += self.FRICTION
            if abs(self.velocity_x) < self.STOP_THRESHOLD:
                self.velocity_x = 0.0

        self.y = int(self.y + self.velocity_y)
        if self.gliding and self.glide_energy > 0:
            if self.velocity_y > -5:
                self.velocity_y += self.GRAVITY / 5
            elif self.velocity_y < 5:
                self.velocity_y += self.GRAVITY
            self.glide_energy -= self.GLIDE_ENERGY_COST
            if self.glide_energy < 0:
                self.glide_energy = 0.0
                self.stop_glide()
        elif abs(self.velocity_y) <= 5:
            self.velocity_y += self.GRAVITY * 3 / 4
        else:
            self.velocity_y += self.GRAVITY

        if self.y + self.HEIGHT >= current_height:
            self.y = current_height - self.HEIGHT
            self.velocity_y = 0.0
            self.jumping = False
            self.double_jumping = False
            self.gliding = False

    def rect(self) -> Rect:
        """The small hit box used against obstacles."""
        return Rect(
            self.x + self.HITBOX_OFFSET_X,
            self.y + self.HITBOX_OFFSET_Y,
            self.HITBOX_SIZE,
            self.HITBOX_SIZE,
        )

    def pickup_rect(self) -> Rect:
        """The full sprite area, used for collecting rewards."""
        return Rect(self.x, self.y, self.WIDTH, self.HEIGHT)

    def lose_life(self) -> None:
        self.lives -= 1

    def activate_invincibility(self) -> None:
        self.invincible = True
        self.invincible_until = self.clock() + self.INVINCIBILITY_SECONDS

    def is_invincible(self) -> bool:
        return self.invincible and self.clock() < self.invincible_until

    def score_skill(self, score: int) -> int:
        """Spend 100 points for invincibility if more than 100 are held; return the new score."""
        if score > 100:
            score -= 100
            self.activate_invincibility()
        return score

    def update_facing(self) -> None:
        """Turn to face the direction of horizontal motion."""
        if not self.facing_right and self.velocity_x > 0:
            self.facing_right = True
        if self.facing_right and self.velocity_x < 0:
            self.facing_right = False

    def start_glide(self) -> None:
        if self.jumping and self.glide_energy > 0:
            self.gliding = True

    def stop_glide(self) -> None:
        self.gliding = False

    def add_glide_energy(self) -> None:
        self.glide_energy = min(
            self.glide_energy + self.GLIDE_ENERGY_BONUS, self.MAX_GLIDE_ENERGY
        )