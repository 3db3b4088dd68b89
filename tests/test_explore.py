import random

import pytest

from marsarcade.display import HEIGHT, WIDTH, N5110
from marsarcade.explore import (
    MAP_HEIGHT,
    MAP_WIDTH,
    START_X,
    START_Y,
    VIEWPORT_HEIGHT,
    VIEWPORT_WIDTH,
    ExploreGame,
    Tile,
    build_map,
    is_solid,
    run_explore,
)
from marsarcade.joystick import Joystick
from marsarcade.utils import Direction


@pytest.mark.parametrize(
    "tile, solid",
    [
        (Tile.EMPTY, False),
        (Tile.WALL, True),
        (Tile.HAB, True),
        (Tile.ROVER, True),
        (Tile.CRATER, True),
        (Tile.TERMINAL, True),
        (99, False),
    ],
)
def test_is_solid(tile, solid):
    assert is_solid(tile) is solid


def test_build_map_borders_are_walls():
    tiles = build_map()
    assert len(tiles) == MAP_HEIGHT
    assert all(len(row) == MAP_WIDTH for row in tiles)
    assert all(t == Tile.WALL for t in tiles[0])
    assert all(t == Tile.WALL for t in tiles[-1])
    assert all(row[0] == Tile.WALL and row[-1] == Tile.WALL for row in tiles)


def test_build_map_landmarks():
    tiles = build_map()
    assert tiles[5][8] == Tile.HAB
    assert tiles[6][15] == Tile.ROVER
    assert tiles[6][27] == Tile.CRATER
    assert tiles[5][26] == Tile.CRATER
    assert tiles[6][36] == Tile.TERMINAL
    assert tiles[START_Y][START_X] == Tile.EMPTY


def test_build_map_returns_fresh_copies():
    first = build_map()
    first[3][3] = Tile.WALL
    assert build_map()[3][3] == Tile.EMPTY


def test_standing_still_keeps_position():
    game = ExploreGame()
    for _ in range(10):
        game.step(Direction.CENTRE, False)
    assert (game.player_x, game.player_y) == (START_X, START_Y)
    assert game.on_ground


def test_walking_east_stops_before_solid_tile():
    game = ExploreGame()
    for _ in range(20):
        game.step(Direction.E, False)
    assert not is_solid(game.tiles[game.player_y][game.player_x])
    assert is_solid(game.tiles[game.player_y][game.player_x + 1])
    assert game.player_x > START_X


def test_walking_west_stops_at_border():
    game = ExploreGame()
    for _ in range(10):
        game.step(Direction.W, False)
    assert game.player_x == 1


def test_jump_rises_then_lands():
    game = ExploreGame()
    game.step(Direction.CENTRE, True)
    assert game.player_y < START_Y
    assert game.jumping
    for _ in range(3):
        game.step(Direction.CENTRE, True)
    assert game.player_y < START_Y
    for _ in range(30):
        game.step(Direction.CENTRE, False)
    assert game.player_y == START_Y
    assert not game.jumping


def test_player_never_inside_solid_tile():
    rng = random.Random(1)
    game = ExploreGame()
    directions = [Direction.E, Direction.W, Direction.CENTRE, Direction.N]
    for _ in range(500):
        game.step(rng.choice(directions), rng.random() < 0.4)
        assert 0 <= game.player_x < MAP_WIDTH
        assert 0 <= game.player_y < MAP_HEIGHT
        assert not is_solid(game.tiles[game.player_y][game.player_x])


def test_viewport_clamped_at_left_and_bottom():
    game = ExploreGame()
    game.update_viewport()
    assert game.viewport_x == 0
    assert game.viewport_y == MAP_HEIGHT - VIEWPORT_HEIGHT


def test_viewport_clamped_at_right():
    game = ExploreGame()
    game.player_x = MAP_WIDTH - 2
    game.update_viewport()
    assert game.viewport_x == MAP_WIDTH - VIEWPORT_WIDTH


def test_viewport_follows_player_in_middle():
    game = ExploreGame()
    game.player_x = 30
    game.update_viewport()
    assert game.viewport_x == 30 - VIEWPORT_WIDTH // 2


def test_draw_leaves_top_band_empty_and_draws_left_wall():
    lcd = N5110()
    game = ExploreGame()
    game.update_viewport()
    game.draw(lcd)
    assert not any(lcd.get_pixel(x, y) for x in range(WIDTH) for y in range(8))
    assert all(lcd.get_pixel(0, y) for y in range(8, 40))
    assert not any(lcd.get_pixel(x, y) for x in range(WIDTH) for y in range(41, HEIGHT))


def test_draw_changes_when_player_moves():
    lcd_before = N5110()
    lcd_after = N5110()
    game = ExploreGame()
    game.update_viewport()
    game.draw(lcd_before)
    game.step(Direction.E, False)
    game.draw(lcd_after)
    lcd_before.refresh()
    lcd_after.refresh()
    assert lcd_before.frame() != lcd_after.frame()


def test_run_explore_plays_until_select():
    presses = iter([False, True, True, False, False, True, False])
    sleeps = []
    lcd = N5110()
    joystick = Joystick(lambda: 0.5, lambda: 0.5)
    game = run_explore(lcd, joystick, lambda: next(presses), sleeps.append)
    assert (game.player_x, game.player_y) == (START_X, START_Y)
    assert 0.1 in sleeps
    assert any(lcd.frame())