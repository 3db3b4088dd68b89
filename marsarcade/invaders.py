"""Space Invaders: dodge or shoot the ships coming down three lanes."""

from __future__ import annotations

import random
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from marsarcade.bitmap import draw_packed
from marsarcade.display import FillType
from marsarcade.joystick import Joystick
from marsarcade.utils import Direction

LANES = 3
LANE_WIDTH = 16
SHIP_SIZE = 15
PLAYER_ROW = 32
SCORE_PER_LEVEL = 10
MAX_SPEED = 5
INVINCIBLE_FRAMES = 100
COMBO_FOR_INVINCIBILITY = 3
CRASH_PHASE = 22
MISS_PHASE = 40

_DELAYS = {0: 0.08, 1: 0.07, 2: 0.06, 3: 0.05, 4: 0.04}
_MIN_DELAY = 0.03

SHIP = bytes((
    0x00, 0x00, 0x01, 0x00, 0x03, 0x80, 0x02, 0x80, 0x02, 0xC0,
    0x07, 0xC0, 0x0D, 0xE0, 0x1F, 0xF0, 0x3F, 0xF8, 0x7F, 0xFC,
    0x7F, 0xFC, 0x7F, 0xFC, 0x1F, 0xF0, 0x07, 0xE0, 0x00, 0x00,
))

# Fourteen rows of data; the fifteenth row of the sprite is blank.
ENEMY = bytes((
    0x05, 0xE0, 0x0B, 0xF0, 0x03, 0xF0, 0x33, 0xF8, 0x7F, 0xFC,
    0xBF, 0xFA, 0x77, 0xDC, 0x7E, 0xFC, 0x3F, 0xFC, 0xEF, 0xEE,
    0xC1, 0x86, 0x81, 0x82, 0x80, 0x82, 0x00, 0x00, 0x00, 0x00,
))


class GameOver(Exception):
    """Raised when an enemy reaches the player's ship."""

    def __init__(self, score: int, level: int) -> None:
        super().__init__(f"game over at level {level} with score {score}")
        self.score = score
        self.level = level


@dataclass
class Projectile:
    x: int = 0
    y: int = 0
    active: bool = False


def _lane_x(lane: int) -> int:
    return (lane - 1) * LANE_WIDTH + 2


def _bullet_lane(x: int) -> int:
    if x < 15:
        return 1
    if x < 31:
        return 2
    return 3


class SpaceInvaders:
    """State and rules of one game; ``step`` advances it by a frame."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.score = 0
        self.level = 1
        self.game_speed = 0
        self.enemy_phase = 0
        self.enemy_0_pos = 2
        self.enemy_1_pos = 2
        self.enemy_dead = True
        self.player_lane = 2
        self.control = True
        self.combo = 0
        self.invincible = False
        self.invincible_frames = 0
        self.bullet = Projectile()
        self._leveled_up = False
        self._bullet_drawn: tuple[int, int] | None = None
        self._ship_visible = True
        self._enemy_row: int | None = None

    def step(self, direction: Direction, fire_pressed: bool) -> bool:
        """Advance one frame; return True when a new level was just reached.

        Raises GameOver when an enemy hits the ship.
        """
        if direction == Direction.W and self.player_lane > 1 and self.control:
            self.player_lane -= 1
            self.control = False
        elif direction == Direction.E and self.player_lane < LANES and self.control:
            self.player_lane += 1
            self.control = False
        elif direction == Direction.CENTRE:
            self.control = True

        bullet = self.bullet
        if fire_pressed and not bullet.active:
            bullet.x = (self.player_lane - 1) * LANE_WIDTH + 9
            bullet.y = PLAYER_ROW
            bullet.active = True

        self._bullet_drawn = None
        if bullet.active:
            bullet.y -= 2
            if bullet.y < 0:
                bullet.active = False
            else:
                self._bullet_drawn = (bullet.x, bullet.y)

        self._ship_visible = not self.invincible or self.invincible_frames % 4 < 2

        if self.enemy_dead:
            self.enemy_0_pos = self.player_lane
            self.enemy_1_pos = self._rng.randint(1, LANES)
            self.enemy_phase = 0
            self.enemy_dead = False

        self._enemy_row = self.enemy_phase
        self.enemy_phase += 1
        enemy_lanes = (self.enemy_0_pos, self.enemy_1_pos)

        if bullet.active and self.enemy_phase <= bullet.y + 4:
            if _bullet_lane(bullet.x) in enemy_lanes:
                self.score += 1
                self.combo += 1
                if self.combo >= COMBO_FOR_INVINCIBILITY:
                    self.invincible = True
                    self.invincible_frames = INVINCIBLE_FRAMES
                self.enemy_dead = True
                bullet.active = False

        if self.invincible:
            self.invincible_frames -= 1
            if self.invincible_frames <= 0:
                self.invincible = False
                self.combo = 0

        if (
            not self.invincible
            and self.enemy_phase > CRASH_PHASE
            and self.player_lane in enemy_lanes
        ):
            raise GameOver(self.score, self.level)

        if self.enemy_phase > MISS_PHASE:
            self.enemy_dead = True
            self.score += 1

        return self._level_control()

    def _level_control(self) -> bool:
        leveled = False
        if self.score >= SCORE_PER_LEVEL and not self._leveled_up:
            self.level += 1
            self.score = 0
            self._leveled_up = True
            leveled = True
        elif self.score < SCORE_PER_LEVEL:
            self._leveled_up = False
        self.game_speed = min(self.level - 1, MAX_SPEED)
        return leveled

    def draw(self, lcd: Any) -> None:
        """Draw the last frame's bullet, ships and the score panel."""
        if self._bullet_drawn is not None:
            x, y = self._bullet_drawn
            lcd.draw_rect(x, y, 2, 4, FillType.BLACK)
        if self._ship_visible:
            draw_packed(lcd, _lane_x(self.player_lane), PLAYER_ROW, SHIP, SHIP_SIZE, SHIP_SIZE)
        if self._enemy_row is not None:
            for lane in (self.enemy_0_pos, self.enemy_1_pos):
                draw_packed(lcd, _lane_x(lane), self._enemy_row, ENEMY, SHIP_SIZE, SHIP_SIZE)
        _draw_hud(lcd, self)

    def frame_delay(self) -> float:
        """Seconds to wait between frames at the current speed."""
        return _DELAYS.get(self.game_speed, _MIN_DELAY)


def _draw_hud(lcd: Any, game: SpaceInvaders) -> None:
    lcd.draw_line(0, 0, 0, 47, 1)
    lcd.draw_line(50, 0, 50, 47, 1)
    lcd.draw_line(0, 47, 50, 47, 1)
    lcd.print_string(f"Lv:{game.level}", 52, 0)
    lcd.print_string(f"Sp:{game.game_speed}", 52, 1)
    lcd.print_string(f"Sc:{game.score}", 52, 2)


def _light_show(lcd: Any, level: int, sleep: Callable[[float], Any]) -> None:
    for i in range(6):
        lcd.clear()
        if i % 2 == 0:
            lcd.draw_rect(0, 0, 84, 48, FillType.BLACK)
        lcd.refresh()
        sleep(0.1)
    lcd.clear()
    lcd.print_string(f"LEVEL {level}", 18, 2)
    lcd.refresh()
    sleep(1.2)


def run_invaders(
    lcd: Any,
    joystick: Joystick,
    select_pressed: Callable[[], bool],
    sleep: Callable[[float], Any] = time.sleep,
    rng: random.Random | None = None,
) -> SpaceInvaders:
    """Play until select is pressed and return the game.

    On a crash the game-over screen is shown and GameOver is raised.
    """
    game = SpaceInvaders(rng)

    lcd.clear()
    lcd.print_string("Space Invaders", 0, 1)
    lcd.print_string("Press select", 0, 2)
    lcd.refresh()

    while not select_pressed():
        sleep(0.1)
    while select_pressed():
        sleep(0.05)

    while True:
        lcd.clear()
        try:
            leveled = game.step(joystick.get_direction(), joystick.button_pressed())
        except GameOver:
            lcd.clear()
            lcd.print_string("GAME OVER", 10, 3)
            lcd.refresh()
            raise
        if leveled:
            _light_show(lcd, game.level, sleep)
            _draw_hud(lcd, game)
        else:
            game.draw(lcd)
        lcd.refresh()
        sleep(game.frame_delay())
        if select_pressed():
            while select_pressed():
                sleep(0.05)
            return game