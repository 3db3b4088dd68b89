"""An in-memory model of the 84x48 Nokia 5110 LCD: screen buffer, drawing and controller state."""

from __future__ import annotations

import random
import warnings
from collections.abc import Iterable, Sequence
from enum import Enum

from marsarcade.font import glyph

WIDTH = 84
HEIGHT = 48
BANKS = 6

SPI_FREQUENCY = 4_000_000

_BASIC_MODE = 0b00100000
_EXTENDED_MODE = 0b00100001


class FillType(Enum):
    """How a 2D shape is filled."""

    TRANSPARENT = 0
    BLACK = 1
    WHITE = 2


class LCDType(Enum):
    """Panel variant; it decides the SPI mode."""

    LPH7366_6 = 0
    LPH7366_1 = 1


def _scaled(a: int, b: int, c: int) -> int:
    """Return a*b/c truncated toward zero; a zero divisor gives zero."""
    if c == 0:
        return 0
    n = a * b
    q = abs(n) // abs(c)
    return q if (n >= 0) == (c > 0) else -q


class N5110:
    """The display: a screen buffer drawn into, and the panel RAM it is sent to.

    The buffer holds one byte per column and bank, bit 0 being the top row of
    the bank. ``refresh`` copies it to the panel; ``frame`` reads the panel back.
    Every command byte sent to the controller is appended to ``commands``.
    """

    def __init__(self, gpio_power: bool = False) -> None:
        self.gpio_power = gpio_power
        self.powered = not gpio_power
        self.commands: list[int] = []
        self.spi_mode: int | None = None
        self.spi_frequency: int | None = None
        self.brightness = 0.0
        self.contrast_level = 0
        self.bias = 0
        self.temp_coefficient = 0
        self.inverted = False
        self._buffer = [bytearray(BANKS) for _ in range(WIDTH)]
        self._ram = bytearray(WIDTH * BANKS)

    # controller

    def _send_command(self, command: int) -> None:
        self.commands.append(command & 0xFF)

    def _turn_on(self) -> None:
        if self.gpio_power:
            self.powered = True

    def _reset(self) -> None:
        self._ram = bytearray(WIDTH * BANKS)

    def _init_spi(self, lcd_type: LCDType) -> None:
        self.spi_mode = 0 if lcd_type is LCDType.LPH7366_1 else 1
        self.spi_frequency = SPI_FREQUENCY

    def _set_temp_coefficient(self, tc: int) -> None:
        tc = min(max(tc, 0), 3)
        self.temp_coefficient = tc
        self._send_command(_EXTENDED_MODE)
        self._send_command(0b00000100 | tc)
        self._send_command(_BASIC_MODE)

    def _set_bias(self, bias: int) -> None:
        bias = min(max(bias, 0), 7)
        self.bias = bias
        self._send_command(_EXTENDED_MODE)
        self._send_command(0b00010000 | bias)
        self._send_command(_BASIC_MODE)

    def _clear_ram(self) -> None:
        self._ram = bytearray(WIDTH * BANKS)

    def _set_xy_address(self, x: int, y: int) -> None:
        if 0 <= x < WIDTH and 0 <= y < HEIGHT:
            self._send_command(_BASIC_MODE)
            self._send_command(0b10000000 | x)
            self._send_command(0b01000000 | y)

    def init(self, lcd_type: LCDType) -> None:
        """Power up, configure the controller and clear the screen."""
        self._turn_on()
        self._reset()
        self._init_spi(lcd_type)
        self.set_contrast(0.55)
        self._set_bias(3)
        self._set_temp_coefficient(0)
        self.normal_mode()
        self._clear_ram()
        self.clear()
        self.set_brightness(0.5)

    def turn_off(self) -> None:
        """Blank the display, darken the backlight and power the controller down."""
        self.clear()
        self.refresh()
        self.set_brightness(0.0)
        self._clear_ram()
        self._send_command(_BASIC_MODE)
        self._send_command(0b00001000)
        self._send_command(_EXTENDED_MODE)
        self._send_command(0b00100100)
        if self.gpio_power:
            self.powered = False

    def normal_mode(self) -> None:
        """Black pixels on a white background."""
        self._send_command(_BASIC_MODE)
        self._send_command(0b00001100)
        self.inverted = False

    def inverse_mode(self) -> None:
        """White pixels on a black background."""
        self._send_command(_BASIC_MODE)
        self._send_command(0b00001101)
        self.inverted = True

    def set_brightness(self, brightness: float) -> None:
        """Set the backlight duty cycle, clamped to 0.0..1.0."""
        self.brightness = min(max(float(brightness), 0.0), 1.0)

    def set_contrast(self, contrast: float) -> None:
        """Set the operating voltage from a contrast in 0.0..1.0 (clamped)."""
        contrast = min(max(float(contrast), 0.0), 1.0)
        level = int(contrast * 127.0)
        self.contrast_level = level
        self._send_command(_EXTENDED_MODE)
        self._send_command(0b10000000 | level)
        self._send_command(_BASIC_MODE)

    # screen buffer

    def clear(self) -> None:
        """Clear the screen buffer."""
        for column in self._buffer:
            column[:] = bytes(BANKS)

    def refresh(self) -> None:
        """Send the screen buffer to the panel."""
        self._set_xy_address(0, 0)
        self._ram = bytearray(
            self._buffer[i][j] for j in range(BANKS) for i in range(WIDTH)
        )

    def frame(self) -> bytes:
        """Return the panel RAM: bank by bank, one byte per column."""
        return bytes(self._ram)

    def randomise_buffer(self, rng: random.Random | None = None) -> None:
        """Fill the screen buffer with random bytes."""
        rng = rng if rng is not None else random.Random()
        for j in range(BANKS):
            for column in self._buffer:
                column[j] = rng.randrange(256)

    def set_pixel(self, x: int, y: int, state: bool = True) -> None:
        """Set (or with ``state`` false, clear) a pixel; out-of-range is ignored."""
        if 0 <= x < WIDTH and 0 <= y < HEIGHT:
            mask = 1 << (y % 8)
            if state:
                self._buffer[x][y // 8] |= mask
            else:
                self._buffer[x][y // 8] &= ~mask & 0xFF

    def clear_pixel(self, x: int, y: int) -> None:
        """Clear a pixel. Deprecated: use ``set_pixel(x, y, False)``."""
        warnings.warn(
            "clear_pixel is deprecated; use set_pixel(x, y, False)",
            DeprecationWarning,
            stacklevel=2,
        )
        self.set_pixel(x, y, False)

    def get_pixel(self, x: int, y: int) -> int:
        """Return 1 if the pixel is set, else 0 (also for out-of-range)."""
        if 0 <= x < WIDTH and 0 <= y < HEIGHT:
            return 1 if self._buffer[x][y // 8] & (1 << (y % 8)) else 0
        return 0

    def _put_glyph(self, columns: bytes, x: int, bank: int) -> None:
        for i, byte in enumerate(columns):
            pixel_x = x + i
            if pixel_x > WIDTH - 1:
                break
            if pixel_x >= 0:
                self._buffer[pixel_x][bank] = byte

    def print_char(self, char: str, x: int, y: int) -> None:
        """Write a 5x7 character at column ``x`` in bank ``y`` (0..5)."""
        columns = glyph(char)
        if 0 <= y < BANKS:
            self._put_glyph(columns, x, y)

    def print_string(self, text: str, x: int, y: int) -> None:
        """Write ``text`` from column ``x`` in bank ``y``, six columns per character."""
        glyphs = [glyph(c) for c in text]
        if 0 <= y < BANKS:
            for n, columns in enumerate(glyphs):
                self._put_glyph(columns, x + n * 6, y)

    def plot_array(self, values: Iterable[float]) -> None:
        """Plot up to 84 values normalised to 0.0..1.0, one per column."""
        for i, value in zip(range(WIDTH), values):
            self.set_pixel(i, 47 - int(value * 47.0), True)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, line_type: int) -> None:
        """Draw a line: type 0 clears, 1 sets, 2 sets every other pixel."""
        y_range = y1 - y0
        x_range = x1 - x0
        step = 2 if line_type == 2 else 1
        state = bool(line_type)
        if abs(x_range) > abs(y_range):
            start, stop = (x0, x1) if x_range > 0 else (x1, x0)
            for x in range(start, stop + 1, step):
                self.set_pixel(x, y0 + _scaled(y_range, x - x0, x_range), state)
        else:
            start, stop = (y0, y1) if y_range > 0 else (y1, y0)
            for y in range(start, stop + 1, step):
                self.set_pixel(x0 + _scaled(x_range, y - y0, y_range), y, state)

    def draw_rect(self, x0: int, y0: int, width: int, height: int, fill: FillType) -> None:
        """Draw a rectangle with its top-left at ``x0``, ``y0``."""
        right = x0 + width - 1
        bottom = y0 + height - 1
        if fill is FillType.TRANSPARENT:
            self.draw_line(x0, y0, right, y0, 1)
            self.draw_line(x0, bottom, right, bottom, 1)
            self.draw_line(x0, y0, x0, bottom, 1)
            self.draw_line(right, y0, right, bottom, 1)
        else:
            line_type = 1 if fill is FillType.BLACK else 0
            for y in range(y0, y0 + height):
                self.draw_line(x0, y, right, y, line_type)

    def draw_circle(self, x0: int, y0: int, radius: int, fill: FillType) -> None:
        """Draw a circle with the midpoint algorithm."""
        x = radius
        y = 0
        error = 1 - x
        while x >= y:
            if fill is FillType.TRANSPARENT:
                for px, py in (
                    (x + x0, y + y0), (-x + x0, y + y0),
                    (y + x0, x + y0), (-y + x0, x + y0),
                    (-y + x0, -x + y0), (y + x0, -x + y0),
                    (x + x0, -y + y0), (-x + x0, -y + y0),
                ):
                    self.set_pixel(px, py, True)
            else:
                line_type = 1 if fill is FillType.BLACK else 0
                self.draw_line(x + x0, y + y0, -x + x0, y + y0, line_type)
                self.draw_line(y + x0, x + y0, -y + x0, x + y0, line_type)
                self.draw_line(y + x0, -x + y0, -y + x0, -x + y0, line_type)
                self.draw_line(x + x0, -y + y0, -x + x0, -y + y0, line_type)
            y += 1
            if error < 0:
                error += 2 * y + 1
            else:
                x -= 1
                error += 2 * (y - x) + 1

    def draw_sprite(self, x0: int, y0: int, sprite: Sequence[Sequence[int]]) -> None:
        """Write a 2D sprite (rows of 0/1) with its top-left at ``x0``, ``y0``."""
        for i, row in enumerate(sprite):
            for j, pixel in enumerate(row):
                self.set_pixel(x0 + j, y0 + i, bool(pixel))