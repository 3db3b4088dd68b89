"""Mars exploration: a side-scrolling walk with jumps across a tile map."""

from __future__ import annotations

import time
from collections.abc import Callable
from enum import IntEnum
from typing import Any

from marsarcade.bitmap import draw_packed
from marsarcade.display import FillType
from marsarcade.joystick import Joystick
from marsarcade.utils import Direction

MAP_WIDTH = 60
MAP_HEIGHT = 8
TILE_SIZE = 8
VIEWPORT_WIDTH = 10
VIEWPORT_HEIGHT = 4
TOP_MARGIN = 8

START_X = 2
START_Y = 6

MAX_JUMP_FRAMES = 10
COYOTE_FRAMES = 6
GRAVITY = 0.25
JUMP_FORCE = -0.8
MAX_FALL_SPEED = 2.0

FRAME_DELAY = 0.1

HAB_SIZE = 24
HAB_BITMAP = bytes((
    0xf0, 0x6f, 0xff, 0xff, 0x57, 0xff, 0xff, 0x3b, 0xff, 0xff, 0x7d, 0xff, 0xfe, 0xfe, 0xff, 0xfd,
    0xff, 0x7f, 0xfb, 0xff, 0xbf, 0xf7, 0xff, 0xdf, 0xef, 0xff, 0xef, 0xdf, 0xff, 0xf7, 0xbf, 0xff,
    0xfb, 0x00, 0x00, 0x01, 0xdf, 0xff, 0xff, 0xdf, 0xf0, 0x1f, 0xd0, 0x37, 0xdf, 0xd6, 0xb7, 0xdf,
    0xd6, 0xb7, 0xdf, 0xd6, 0xb7, 0xdf, 0xd6, 0xb7, 0xdf, 0xd0, 0x37, 0xdf, 0xdf, 0xf7, 0xdf, 0xdf,
    0xf7, 0xdf, 0xdf, 0xf7, 0xdf, 0xc0, 0x00, 0x07,
))


class Tile(IntEnum):
    """Kinds of map tile."""

    EMPTY = 0
    WALL = 1
    HAB = 2
    ROVER = 3
    CRATER = 4
    TERMINAL = 5


_SOLID = frozenset({Tile.WALL, Tile.HAB, Tile.ROVER, Tile.TERMINAL, Tile.CRATER})


def is_solid(tile: int) -> bool:
    """True for tiles the player cannot walk or fall through."""
    return tile in _SOLID


def build_map() -> list[list[Tile]]:
    """Return a fresh copy of the world map, indexed ``[y][x]``."""
    tiles = [[Tile.EMPTY] * MAP_WIDTH for _ in range(MAP_HEIGHT)]
    tiles[0][:] = [Tile.WALL] * MAP_WIDTH
    tiles[-1][:] = [Tile.WALL] * MAP_WIDTH
    for row in tiles:
        row[0] = Tile.WALL
        row[-1] = Tile.WALL
    for y in (5, 6):
        tiles[y][7:10] = [Tile.HAB] * 3
    tiles[6][15:20] = [Tile.ROVER] * 5
    tiles[5][26:29] = [Tile.CRATER] * 3
    tiles[6][25:30] = [Tile.CRATER] * 5
    tiles[6][35:38] = [Tile.TERMINAL] * 3
    return tiles


def _crater_pixel(dx: int, dy: int) -> bool:
    return (
        (dy == 0 and 2 < dx < 5)
        or (dy == 1 and dx in (2, 5))
        or (dy == 2 and dx in (1, 6))
        or (dy == 3 and 2 <= dx <= 5)
    )


class ExploreGame:
    """The player, the map and the jump physics of the exploration mode."""

    def __init__(self) -> None:
        self.tiles = build_map()
        self.player_x = START_X
        self.player_y = START_Y
        self.player_y_offset = 0
        self.viewport_x = 0
        self.viewport_y = 0
        self.y_velocity = 0.0
        self.jumping = False
        self.jump_timer = 0
        self.on_ground = False
        self.coyote_timer = 0

    def _solid_at(self, x: int, y: int) -> bool:
        return is_solid(self.tiles[y][x])

    def step(self, direction: Direction, jump_pressed: bool) -> None:
        """Advance one frame from the joystick direction and the jump button."""
        new_x = self.player_x
        if direction == Direction.E:
            new_x += 1
        elif direction == Direction.W:
            new_x -= 1

        below = self.player_y + 1
        self.on_ground = below < MAP_HEIGHT and self._solid_at(self.player_x, below)

        if self.on_ground:
            self.coyote_timer = COYOTE_FRAMES
        elif self.coyote_timer > 0:
            self.coyote_timer -= 1

        if not self.jumping and self.coyote_timer > 0 and jump_pressed:
            self.jumping = True
            self.jump_timer = MAX_JUMP_FRAMES
            self.y_velocity = JUMP_FORCE

        if self.jumping:
            if self.jump_timer > 0 and jump_pressed:
                self.y_velocity = JUMP_FORCE
                self.jump_timer -= 1
            else:
                self.jumping = False

        if not jump_pressed:
            self.jumping = False
            self.jump_timer = 0

        if not self.on_ground or self.y_velocity < 0.0:
            self.y_velocity = min(self.y_velocity + GRAVITY, MAX_FALL_SPEED)

        new_y = max(int(self.player_y + self.y_velocity + 0.5), 0)
        if new_y >= MAP_HEIGHT:
            new_y = MAP_HEIGHT - 1
            self.y_velocity = 0.0
            self.jumping = False

        if not self._solid_at(new_x, self.player_y):
            self.player_x = new_x

        if not self._solid_at(self.player_x, new_y):
            self.player_y = new_y
        else:
            self.y_velocity = 0.0
            self.jumping = False

        self.update_viewport()

    def update_viewport(self) -> None:
        """Centre the viewport on the player, kept inside the map."""
        vx = self.player_x - VIEWPORT_WIDTH // 2
        vy = self.player_y - VIEWPORT_HEIGHT // 2
        self.viewport_x = min(max(vx, 0), MAP_WIDTH - VIEWPORT_WIDTH)
        self.viewport_y = min(max(vy, 0), MAP_HEIGHT - VIEWPORT_HEIGHT)

    def draw(self, lcd: Any) -> None:
        """Draw the visible tiles and the player into the screen buffer."""
        for row in range(VIEWPORT_HEIGHT):
            map_y = self.viewport_y + row
            y_pixel = row * TILE_SIZE + TOP_MARGIN
            for col in range(VIEWPORT_WIDTH):
                map_x = self.viewport_x + col
                tile = self.tiles[map_y][map_x]
                x_pixel = col * TILE_SIZE
                if tile == Tile.HAB and map_y == 6 and 5 <= map_x < 10:
                    if map_x == 7:
                        draw_packed(
                            lcd,
                            x_pixel,
                            y_pixel + TILE_SIZE - HAB_SIZE,
                            HAB_BITMAP,
                            HAB_SIZE,
                            HAB_SIZE,
                        )
                elif tile == Tile.WALL:
                    lcd.draw_rect(x_pixel, y_pixel, TILE_SIZE, TILE_SIZE, FillType.BLACK)
                elif tile == Tile.ROVER:
                    lcd.draw_line(x_pixel, y_pixel + 4, x_pixel + 7, y_pixel + 4, 1)
                elif tile == Tile.CRATER:
                    for dx in range(TILE_SIZE):
                        for dy in range(TILE_SIZE):
                            if _crater_pixel(dx, dy):
                                lcd.set_pixel(x_pixel + dx, y_pixel + dy, True)
                elif tile == Tile.TERMINAL:
                    lcd.draw_line(x_pixel + 1, y_pixel + 1, x_pixel + 6, y_pixel + 6, 1)
                    lcd.draw_line(x_pixel + 6, y_pixel + 1, x_pixel + 1, y_pixel + 6, 1)

        px = (self.player_x - self.viewport_x) * TILE_SIZE + 1
        py = (self.player_y - self.viewport_y) * TILE_SIZE + 1 + TOP_MARGIN - self.player_y_offset
        lcd.draw_rect(px, py, TILE_SIZE, TILE_SIZE, FillType.BLACK)


def run_explore(
    lcd: Any,
    joystick: Joystick,
    select_pressed: Callable[[], bool],
    sleep: Callable[[float], Any] = time.sleep,
) -> ExploreGame:
    """Show the intro, then play until the select button is pressed; return the game."""
    lcd.clear()
    lcd.print_string("Explore Mars", 0, 1)
    lcd.print_string("Use joystick", 0, 2)
    lcd.print_string("to move", 0, 3)
    lcd.print_string("Press select", 0, 4)
    lcd.refresh()

    while not select_pressed():
        sleep(0.1)
    while select_pressed():
        sleep(0.05)

    game = ExploreGame()
    while True:
        lcd.clear()
        game.step(joystick.get_direction(), joystick.button_pressed())
        game.draw(lcd)
        lcd.refresh()
        if select_pressed():
            while select_pressed():
                sleep(0.05)
            return game
        sleep(FRAME_DELAY)