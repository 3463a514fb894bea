"""Game state and rules: spawning, collisions, scoring and keyboard input."""

from __future__ import annotations

import enum
import random
import time
from dataclasses import dataclass
from typing import Callable

from .geometry import Rect
from .ground import Ground
from .obstacles import FallingObstacle, HorizontalObstacle, ObstacleKind
from .player import Player
from .reward import RewardBlock

WIDTH = 1200
HEIGHT = 800
STARTING_LIVES = 3
FRAME_MS = 14
SCORE_MS = 1000
LONG_PRESS_MS = 150
FRAME_SECONDS = 0.014
REWARD_FRAME_SECONDS = 0.016
REWARD_INTERVAL = 6.0
SCORE_PER_SECOND = 5
REWARD_SCORE = 50
MOVE_SPEED = 6.0
SPAWN_Y = -30


class Key(enum.Enum):
    """Keys the game reacts to."""

    LEFT = enum.auto()
    RIGHT = enum.auto()
    SPACE = enum.auto()
    Z = enum.auto()


@dataclass(frozen=True)
class Rules:
    """Tunable settings that tell the two game variants apart."""

    initial_obstacles: int = 5
    obstacle_interval: float = 3.0
    obstacle_limit: int = 120
    obstacle_step: int = 1
    random_kinds: bool = True
    horizontal_interval: float = 1.5
    horizontal_limit: int = 5
    initial_horizontal_count: int = 0
    initial_horizontal_speed: float = 1.0
    horizontal_speed_step: float | None = None
    horizontal_speed_cap: float = 8.0
    reward_uses_pickup_rect: bool = True
    reward_grants_energy: bool = True
    long_press_glide: bool = True
    score_skill_enabled: bool = True
    extended_hud: bool = True


def classic_rules() -> Rules:
    """The earlier variant: steadily faster side obstacles, no gliding."""
    return Rules(
        obstacle_interval=4.0,
        obstacle_limit=80,
        obstacle_step=3,
        random_kinds=False,
        horizontal_interval=2.0,
        initial_horizontal_count=2,
        initial_horizontal_speed=4.0,
        horizontal_speed_step=0.5,
        reward_uses_pickup_rect=False,
        reward_grants_energy=False,
        long_press_glide=False,
        score_skill_enabled=False,
        extended_hud=False,
    )


def final_rules() -> Rules:
    """The final variant: random side speeds, gliding and the score skill."""
    return Rules()


class Game:
    """The whole game world, advanced one frame at a time."""

    def __init__(
        self,
        rules: Rules | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.rules = rules if rules is not None else final_rules()
        self.rng = rng if rng is not None else random.Random()
        self.width = WIDTH
        self.height = HEIGHT
        self.elapsed = 0.0
        self.horizontal_timer = 0.0
        self.reward_timer = 0.0
        self.obstacle_count = self.rules.initial_obstacles
        self.horizontal_count = self.rules.initial_horizontal_count
        self.horizontal_speed = self.rules.initial_horizontal_speed
        self.score = 0
        self.books = 0
        self.space_pressed = False
        self.reward = RewardBlock(WIDTH, HEIGHT, self.rng)
        self.player = Player(WIDTH, STARTING_LIVES, clock)
        self.ground = Ground(WIDTH, HEIGHT, self.rng)
        self.obstacles: list[FallingObstacle] = []
        for i in range(self.obstacle_count):
            x = self.rng.randrange(1000)
            self.obstacles.append(FallingObstacle(x, -50 - i * 200, self._next_kind()))
        self.horizontal: list[HorizontalObstacle] = []

    def _next_kind(self) -> ObstacleKind:
        if self.rules.random_kinds:
            return ObstacleKind(self.rng.randrange(2))
        return ObstacleKind.TABLE

    def _hit(self, rect: Rect) -> None:
        if not self.player.is_invincible() and self.player.rect().intersects(rect):
            self.player.lose_life()
            self.player.activate_invincibility()

    def is_over(self) -> bool:
        """True once the player has no lives left."""
        return self.player.lives <= 0

    def tick_score(self) -> None:
        """Award the points earned for surviving another second."""
        if not self.is_over():
            self.score += SCORE_PER_SECOND

    def tick(self) -> None:
        """Advance the world by one frame."""
        if self.is_over():
            return
        rules = self.rules

        self.elapsed += FRAME_SECONDS
        if self.elapsed >= rules.obstacle_interval and self.obstacle_count < rules.obstacle_limit:
            x = self.rng.randrange(self.width)
            self.obstacles.append(FallingObstacle(x, SPAWN_Y, self._next_kind()))
            self.obstacle_count += rules.obstacle_step
            self.elapsed = 0.0

        self.horizontal_timer += FRAME_SECONDS
        if (
            self.horizontal_timer >= rules.horizontal_interval
            and self.horizontal_count < rules.horizontal_limit
        ):
            y = self.rng.randrange(400, 700)
            if rules.horizontal_speed_step is None:
                self.horizontal_speed = float(self.rng.randrange(2, 7))
            self.horizontal.append(HorizontalObstacle(y, self.horizontal_speed))
            self.horizontal_count += 1
            if (
                rules.horizontal_speed_step is not None
                and self.horizontal_speed <= rules.horizontal_speed_cap
            ):
                self.horizontal_speed += rules.horizontal_speed_step
            self.horizontal_timer = 0.0

        self.reward_timer += REWARD_FRAME_SECONDS
        if self.reward_timer >= REWARD_INTERVAL and not self.reward.active:
            self.reward.reset()
            self.reward_timer = 0.0

        self.player.update(self.ground)

        for obstacle in self.obstacles:
            obstacle.move_down()
            if obstacle.y > self.height:
                obstacle.y = SPAWN_Y
                obstacle.x = self.rng.randrange(self.width)
            self._hit(obstacle.rect())

        remaining = []
        for obstacle in self.horizontal:
            obstacle.move_right()
            if obstacle.rect().x > self.width:
                self.horizontal_count -= 1
                continue
            self._hit(obstacle.rect())
            remaining.append(obstacle)
        self.horizontal = remaining

        catcher = (
            self.player.pickup_rect() if rules.reward_uses_pickup_rect else self.player.rect()
        )
        if self.reward.check_collision(catcher):
            self.score += REWARD_SCORE
            self.books += 1
            self.player.activate_invincibility()
            if rules.reward_grants_energy:
                self.player.add_glide_energy()

    def press(self, key: Key) -> None:
        """Handle a key going down."""
        if key is Key.LEFT:
            self.player.move(-MOVE_SPEED)
        elif key is Key.RIGHT:
            self.player.move(MOVE_SPEED)
        elif key is Key.SPACE:
            if not self.rules.long_press_glide:
                self.player.jump()
            elif not self.space_pressed:
                self.space_pressed = True
                self.player.jump()
        elif key is Key.Z and self.rules.score_skill_enabled:
            self.score = self.player.score_skill(self.score)

    def release(self, key: Key) -> None:
        """Handle a key coming up."""
        if key is Key.SPACE and self.rules.long_press_glide:
            self.space_pressed = False
            self.player.stop_glide()

    def check_long_press(self) -> None:
        """Start gliding if space is still held down."""
        if self.space_pressed:
            self.player.start_glide()