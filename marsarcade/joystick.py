"""An analogue two-axis joystick with an optional active-low push button."""

from __future__ import annotations

import math
from collections.abc import Callable

from marsarcade.utils import Direction, Polar, Vector2D

TOL = 0.1
RAD2DEG = 57.2957795131

_SECTORS = (
    (22.5, Direction.N),
    (67.5, Direction.NE),
    (112.5, Direction.E),
    (157.5, Direction.SE),
    (202.5, Direction.S),
    (247.5, Direction.SW),
    (292.5, Direction.W),
    (337.5, Direction.NW),
)


def direction_from_angle(angle: float) -> Direction:
    """Map a compass angle (0 is North, clockwise) to one of eight directions.

    A negative angle means the stick is centred.
    """
    if angle < 0.0:
        return Direction.CENTRE
    for limit, direction in _SECTORS:
        if angle < limit:
            return direction
    return Direction.N


class Joystick:
    """Reads two potentiometers (each 0.0..1.0) and an optional button.

    ``vert`` and ``horiz`` are callables returning the current pot readings;
    ``button`` returns the pin level, 0 meaning pressed.
    """

    def __init__(
        self,
        vert: Callable[[], float],
        horiz: Callable[[], float],
        button: Callable[[], int] | None = None,
    ) -> None:
        self._vert = vert
        self._horiz = horiz
        self._button = button
        self._x0 = 0.5
        self._y0 = 0.5

    def init(self) -> None:
        """Record the current readings as the centre; call with the stick at rest."""
        self._x0 = self._horiz()
        self._y0 = self._vert()

    def button_pressed(self) -> bool:
        """True while the button is held; always False without a button."""
        if self._button is None:
            return False
        return self._button() == 0

    def get_coord(self) -> Vector2D:
        """Return the calibrated position in -1..1, positive up and right."""
        x = 2.0 * (self._horiz() - self._x0)
        y = 2.0 * (self._vert() - self._y0)
        return Vector2D(-x, y)

    def get_mapped_coord(self) -> Vector2D:
        """Return the position mapped from the square onto the unit circle."""
        coord = self.get_coord()
        x = coord.x * math.sqrt(max(0.0, 1.0 - coord.y ** 2 / 2.0))
        y = coord.y * math.sqrt(max(0.0, 1.0 - coord.x ** 2 / 2.0))
        return Vector2D(x, y)

    def get_polar(self) -> Polar:
        """Return magnitude and compass angle; a near-centred stick gives (0, -1)."""
        coord = self.get_mapped_coord()
        x = coord.y
        y = coord.x
        mag = math.sqrt(x * x + y * y)
        angle = RAD2DEG * math.atan2(y, x)
        if angle < 0.0:
            angle += 360.0
        if mag < TOL:
            mag = 0.0
            angle = -1.0
        return Polar(mag, angle)

    def get_mag(self) -> float:
        return self.get_polar().mag

    def get_angle(self) -> float:
        return self.get_polar().angle

    def get_direction(self) -> Direction:
        return direction_from_angle(self.get_angle())