import random

import pytest

from librarydash.game import Game, Key, classic_rules, final_rules
from librarydash.geometry import Rect
from librarydash.obstacles import FallingObstacle, HorizontalObstacle
from librarydash.player import Player


def make_game(rules=None, seed=1):
    return Game(rules if rules is not None else final_rules(), random.Random(seed), lambda: 0.0)


def settle(game):
    game.ground.bumps = []
    game.player.y = game.ground.floor_level - Player.HEIGHT
    game.player.velocity_y = 0.0


def obstacle_on_player(game):
    hit = game.player.rect()
    return FallingObstacle(hit.x - 5, hit.y - FallingObstacle.SPEED - 5)


@pytest.mark.parametrize("rules", [classic_rules(), final_rules()])
def test_initial_obstacles_are_stacked_above_screen(rules):
    game = make_game(rules)
    ys = [o.y for o in game.obstacles]
    assert len(ys) == rules.initial_obstacles
    assert ys[0] == -50
    assert all(b - a == -200 for a, b in zip(ys, ys[1:]))
    assert all(0 <= o.x < 1000 for o in game.obstacles)
    assert game.score == 0
    assert game.player.lives == 3


def test_tick_score_adds_points():
    game = make_game()
    game.tick_score()
    game.tick_score()
    assert game.score == 10


@pytest.mark.parametrize("rules", [classic_rules(), final_rules()])
def test_obstacle_spawns_after_interval(rules):
    game = make_game(rules)
    settle(game)
    for _ in range(300):
        game.tick()
    assert len(game.obstacles) == rules.initial_obstacles + 1
    assert game.obstacle_count == rules.initial_obstacles + rules.obstacle_step


def test_obstacle_limit_stops_spawning():
    game = make_game()
    settle(game)
    game.obstacle_count = game.rules.obstacle_limit
    before = len(game.obstacles)
    for _ in range(300):
        game.tick()
    assert len(game.obstacles) == before


def test_classic_horizontal_speed_increases():
    game = make_game(classic_rules())
    settle(game)
    for _ in range(150):
        game.tick()
    assert len(game.horizontal) == 1
    assert game.horizontal[0].speed == 4.0
    assert game.horizontal_speed == 4.5


def test_final_horizontal_speed_is_random_integer():
    game = make_game()
    settle(game)
    for _ in range(110):
        game.tick()
    assert len(game.horizontal) == 1
    speed = game.horizontal[0].speed
    assert speed in {2.0, 3.0, 4.0, 5.0, 6.0}
    assert 400 <= game.horizontal[0].y < 700


@pytest.mark.parametrize("rules", [classic_rules(), final_rules()])
def test_horizontal_count_tracks_list(rules):
    game = make_game(rules, seed=7)
    settle(game)
    for _ in range(1500):
        game.tick()
        assert game.horizontal_count <= rules.horizontal_limit
        assert game.horizontal_count - len(game.horizontal) == rules.initial_horizontal_count


def test_horizontal_obstacle_removed_after_leaving_screen():
    game = make_game()
    settle(game)
    game.horizontal = [HorizontalObstacle(500, 5.0, x=1199)]
    game.horizontal_count = 1
    game.tick()
    assert game.horizontal == []
    assert game.horizontal_count == 0


def test_falling_obstacle_recycles_to_top():
    game = make_game()
    settle(game)
    game.obstacles = [FallingObstacle(10, 800)]
    game.tick()
    assert game.obstacles[0].y == -30
    assert 0 <= game.obstacles[0].x < 1200


def test_collision_costs_one_life_then_invincible():
    game = make_game()
    settle(game)
    game.obstacles = [obstacle_on_player(game)]
    game.tick()
    assert game.player.lives == 2
    assert game.player.is_invincible()
    game.obstacles = [obstacle_on_player(game)]
    game.tick()
    assert game.player.lives == 2


def test_final_reward_uses_full_sprite():
    game = make_game()
    settle(game)
    game.player.glide_energy = 100.0
    game.reward.rect = Rect(game.player.x, game.player.y, 40, 20)
    game.reward.active = True
    game.tick()
    assert game.score == 50
    assert game.books == 1
    assert game.reward.active is False
    assert game.player.glide_energy == 100.0 + Player.GLIDE_ENERGY_BONUS
    assert game.player.is_invincible()


def test_classic_reward_uses_small_hitbox():
    game = make_game(classic_rules())
    settle(game)
    game.reward.rect = Rect(game.player.x, game.player.y, 40, 20)
    game.reward.active = True
    game.tick()
    assert game.score == 0
    assert game.reward.active is True
    game.reward.rect = game.player.rect()
    game.tick()
    assert game.score == 50


def test_reward_respawns_after_interval():
    game = make_game()
    settle(game)
    game.reward.active = False
    for _ in range(400):
        game.tick()
    assert game.reward.active is True
    assert game.reward_timer < 6.0


def test_arrow_keys_set_speed():
    game = make_game()
    game.press(Key.LEFT)
    assert game.player.velocity_x == -6.0
    game.press(Key.RIGHT)
    assert game.player.velocity_x == 6.0


def test_final_space_held_jumps_once():
    game = make_game()
    game.press(Key.SPACE)
    assert game.space_pressed is True
    assert game.player.jumping is True
    game.press(Key.SPACE)
    assert game.player.double_jumping is False
    game.release(Key.SPACE)
    game.press(Key.SPACE)
    assert game.player.double_jumping is True


def test_classic_space_double_jumps():
    game = make_game(classic_rules())
    game.press(Key.SPACE)
    game.press(Key.SPACE)
    assert game.player.double_jumping is True
    assert game.space_pressed is False


def test_long_press_starts_glide_and_release_stops_it():
    game = make_game()
    game.press(Key.SPACE)
    game.check_long_press()
    assert game.player.gliding is True
    game.release(Key.SPACE)
    assert game.player.gliding is False
    game.check_long_press()
    assert game.player.gliding is False


def test_z_spends_score_for_invincibility():
    game = make_game()
    game.score = 150
    game.press(Key.Z)
    assert game.score == 50
    assert game.player.is_invincible()
    game.press(Key.Z)
    assert game.score == 50


def test_classic_ignores_z():
    game = make_game(classic_rules())
    game.score = 150
    game.press(Key.Z)
    assert game.score == 150
    assert game.player.is_invincible() is False


def test_game_over_freezes_world():
    game = make_game()
    settle(game)
    game.player.lives = 1
    game.obstacles = [obstacle_on_player(game)]
    game.tick()
    assert game.is_over() is True
    score = game.score
    game.tick_score()
    assert game.score == score
    y = game.obstacles[0].y
    game.tick()
    assert game.obstacles[0].y == y