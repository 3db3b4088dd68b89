import itertools
import random

import pytest

from marsarcade.display import HEIGHT, N5110
from marsarcade.invaders import GameOver, SpaceInvaders, run_invaders
from marsarcade.joystick import Joystick
from marsarcade.utils import Direction


def make_game(seed=0):
    return SpaceInvaders(random.Random(seed))


def test_initial_state():
    game = make_game()
    assert game.player_lane == 2
    assert game.level == 1
    assert game.score == 0
    assert game.enemy_dead


def test_lane_change_needs_recentring():
    game = make_game()
    game.step(Direction.W, False)
    assert game.player_lane == 1
    game.step(Direction.E, False)
    assert game.player_lane == 1
    game.step(Direction.CENTRE, False)
    game.step(Direction.E, False)
    assert game.player_lane == 2


def test_enemy_spawns_in_player_lane():
    game = make_game()
    game.step(Direction.CENTRE, False)
    assert game.enemy_0_pos == game.player_lane
    assert 1 <= game.enemy_1_pos <= 3
    assert game.enemy_phase == 1
    assert not game.enemy_dead


def test_firing_at_enemy_in_lane_scores():
    game = make_game()
    game.step(Direction.CENTRE, True)
    assert game.score == 1
    assert game.combo == 1
    assert game.enemy_dead
    assert not game.bullet.active


def test_combo_makes_ship_invincible():
    game = make_game()
    for _ in range(3):
        game.step(Direction.CENTRE, True)
    assert game.invincible
    assert 0 < game.invincible_frames < 100


def test_level_up_after_ten_points():
    game = make_game()
    results = [game.step(Direction.CENTRE, True) for _ in range(10)]
    assert results == [False] * 9 + [True]
    assert game.level == 2
    assert game.score == 0
    assert game.game_speed == 1


def test_enemy_reaching_ship_ends_game():
    game = make_game()
    with pytest.raises(GameOver) as info:
        for _ in range(30):
            game.step(Direction.CENTRE, False)
    assert info.value.level == 1
    assert game.enemy_phase > 22


def test_missed_enemy_scores_and_respawns():
    game = make_game()
    game.player_lane = 3
    game.step(Direction.CENTRE, False)
    game.enemy_0_pos = 1
    game.enemy_1_pos = 1
    for _ in range(40):
        game.step(Direction.CENTRE, False)
    assert game.score == 1
    assert game.enemy_dead


def test_frame_delay_follows_speed():
    game = make_game()
    assert game.frame_delay() == 0.08
    game.game_speed = 7
    assert game.frame_delay() == 0.03


def test_draw_shows_hud_and_ship():
    lcd = N5110()
    game = make_game()
    game.step(Direction.CENTRE, False)
    game.draw(lcd)
    assert all(lcd.get_pixel(50, y) for y in range(HEIGHT))
    assert all(lcd.get_pixel(0, y) for y in range(HEIGHT))
    assert any(lcd.get_pixel(x, y) for x in range(18, 33) for y in range(32, 47))
    assert not any(lcd.get_pixel(x, y) for x in range(2, 17) for y in range(32, 47))


def test_run_invaders_returns_on_select():
    presses = iter([False, True, True, False, False, True, False])
    sleeps = []
    lcd = N5110()
    joystick = Joystick(lambda: 0.5, lambda: 0.5)
    game = run_invaders(lcd, joystick, lambda: next(presses), sleeps.append, random.Random(2))
    assert game.enemy_phase == 2
    assert 0.08 in sleeps
    assert any(lcd.frame())