"""Pixel images: a row-major integer bitmap and a packed one-bit-per-pixel drawer."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


class Bitmap:
    """A fixed-size image stored row-major, one integer per pixel."""

    __slots__ = ("_contents", "_height", "_width")

    def __init__(self, contents: Iterable[int], height: int, width: int) -> None:
        pixels = tuple(contents)
        if len(pixels) != height * width:
            raise ValueError(
                f"contents of bitmap has {len(pixels)} pixels, but its dimensions "
                f"were specified as {width} * {height} = {width * height}"
            )
        self._contents = pixels
        self._height = height
        self._width = width

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    def get_pixel(self, row: int, column: int) -> int:
        """Return the pixel value at ``row``, ``column``."""
        if not (0 <= row < self._height and 0 <= column < self._width):
            raise IndexError(
                f"pixel {row},{column} is outside the bitmap dimensions "
                f"{self._width},{self._height}"
            )
        return self._contents[row * self._width + column]

    def _rows(self) -> Iterable[Sequence[int]]:
        for start in range(0, len(self._contents), self._width or 1):
            yield self._contents[start:start + self._width]

    def __str__(self) -> str:
        if not self._contents:
            return ""
        return "\n".join("".join(str(p) for p in row) for row in self._rows())

    def render(self, lcd: Any, x0: int, y0: int) -> None:
        """Write every pixel into the screen buffer with its top-left at ``x0``, ``y0``."""
        if not self._contents:
            return
        for r, row in enumerate(self._rows()):
            for c, pixel in enumerate(row):
                lcd.set_pixel(x0 + c, y0 + r, bool(pixel))


def draw_packed(lcd: Any, x: int, y: int, data: Sequence[int], width: int, height: int) -> None:
    """Set the pixels of a packed bitmap, most significant bit first, rows padded to bytes.

    Clear bits leave the screen untouched.
    """
    bytes_per_row = (width + 7) // 8
    for row in range(height):
        row_bytes = data[row * bytes_per_row:(row + 1) * bytes_per_row]
        for col in range(width):
            if row_bytes[col // 8] & (0x80 >> (col % 8)):
                lcd.set_pixel(x + col, y + row, True)