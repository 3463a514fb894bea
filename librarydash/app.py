"""The playable window: drawing the game and running the main loop."""

from __future__ import annotations

import argparse

import pygame

from .game import FRAME_MS, HEIGHT, LONG_PRESS_MS, SCORE_MS, WIDTH, Game, Key, Rules, classic_rules, final_rules
from .geometry import Rect
from .obstacles import ObstacleKind

CLASSIC_BACKGROUND = (255, 255, 255)
FINAL_BACKGROUND = (52, 36, 28)
GROUND_COLOR = (139, 94, 60)
PLAYER_COLOR = (40, 80, 200)
GLIDE_COLOR = (120, 60, 180)
FACING_COLOR = (250, 250, 250)
HITBOX_COLOR = (255, 255, 0)
TABLE_COLOR = (160, 110, 50)
CHAIR_COLOR = (110, 70, 30)
MAGIC_BALL_COLOR = (220, 40, 140)
REWARD_COLOR = (0, 255, 0)
CLASSIC_TEXT_COLOR = (0, 0, 0)
FINAL_TEXT_COLOR = (255, 255, 255)
FONT_SIZE = 36

_KEYMAP = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_z: Key.Z,
}


def _to_pygame(rect: Rect) -> pygame.Rect:
    return pygame.Rect(rect.x, rect.y, rect.width, rect.height)


def _hud_lines(game: Game) -> list[tuple[int, int, str]]:
    if game.rules.extended_hud:
        return [
            (100, 50, f"Score: {game.score}"),
            (100, 100, f"Lives: {game.player.lives}"),
            (100, 150, f"Books: {game.books}"),
            (100, 200, f"Glide energy: {int(game.player.glide_energy)}"),
        ]
    return [
        (game.width - 200, 50, f"Score: {game.score}"),
        (game.width - 200, 100, f"life: {game.player.lives}"),
    ]


def _draw_player(surface: pygame.Surface, game: Game) -> None:
    player = game.player
    player.update_facing()
    sprite = pygame.Surface((player.WIDTH, player.HEIGHT), pygame.SRCALPHA)
    alpha = 128 if player.is_invincible() else 255
    body = GLIDE_COLOR if player.gliding else PLAYER_COLOR
    sprite.fill((*body, alpha))
    eye_x = player.WIDTH - 10 if player.facing_right else 3
    sprite.fill((*FACING_COLOR, alpha), pygame.Rect(eye_x, 10, 7, 7))
    surface.blit(sprite, (player.x, player.y))
    surface.fill(HITBOX_COLOR, _to_pygame(player.rect()))


def draw(surface: pygame.Surface, game: Game) -> None:
    """Render the whole game onto the surface."""
    extended = game.rules.extended_hud
    surface.fill(FINAL_BACKGROUND if extended else CLASSIC_BACKGROUND)

    surface.fill(GROUND_COLOR, _to_pygame(game.ground.floor_rect))
    for bump in game.ground.bumps:
        surface.fill(GROUND_COLOR, _to_pygame(bump))

    _draw_player(surface, game)

    for obstacle in game.obstacles:
        color = CHAIR_COLOR if obstacle.kind is ObstacleKind.CHAIR else TABLE_COLOR
        surface.fill(color, _to_pygame(obstacle.draw_rect()))
    for obstacle in game.horizontal:
        surface.fill(MAGIC_BALL_COLOR, _to_pygame(obstacle.draw_rect()))

    if game.reward.active:
        surface.fill(REWARD_COLOR, _to_pygame(game.reward.rect))

    if not pygame.font.get_init():
        pygame.font.init()
    font = pygame.font.Font(None, FONT_SIZE)
    color = FINAL_TEXT_COLOR if extended else CLASSIC_TEXT_COLOR
    for x, baseline, text in _hud_lines(game):
        image = font.render(text, True, color)
        surface.blit(image, (x, baseline - font.get_ascent()))


def run(rules: Rules) -> int:
    """Open the window and play until it is closed; return the final score."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Library Dash")
        pygame.key.set_repeat(250, 30)
        game = Game(rules)
        frame_clock = pygame.time.Clock()
        now = pygame.time.get_ticks()
        next_frame = now + FRAME_MS
        next_score = now + SCORE_MS
        next_long_press: int | None = None
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key in _KEYMAP:
                    game.press(_KEYMAP[event.key])
                elif event.type == pygame.KEYUP and event.key in _KEYMAP:
                    game.release(_KEYMAP[event.key])

            now = pygame.time.get_ticks()
            if not game.space_pressed:
                next_long_press = None
            elif next_long_press is None:
                next_long_press = now + LONG_PRESS_MS

            while now >= next_frame:
                game.tick()
                next_frame += FRAME_MS
            while now >= next_score:
                game.tick_score()
                next_score += SCORE_MS
            while next_long_press is not None and now >= next_long_press:
                game.check_long_press()
                next_long_press += LONG_PRESS_MS

            draw(screen, game)
            pygame.display.flip()
            frame_clock.tick(120)
        return game.score
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="librarydash", description="Dodge the falling furniture.")
    parser.add_argument(
        "--classic",
        action="store_true",
        help="play the earlier variant without gliding or the score skill",
    )
    args = parser.parse_args(argv)
    run(classic_rules() if args.classic else final_rules())
    return 0