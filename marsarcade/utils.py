"""Small value types shared by the games: positions, vectors and directions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


@dataclass
class Position2D:
    """An integer position (or velocity) on the screen."""

    x: int
    y: int


class Direction(IntEnum):
    """Compass direction read from the joystick; CENTRE means at rest."""

    CENTRE = 0
    N = 1
    NE = 2
    E = 3
    SE = 4
    S = 5
    SW = 6
    W = 7
    NW = 8


@dataclass
class UserInput:
    """One frame of user input: a direction and its magnitude."""

    d: Direction
    mag: float


@dataclass
class Vector2D:
    """A floating-point 2D vector."""

    x: float
    y: float


@dataclass
class Polar:
    """A vector in polar form: magnitude and compass angle in degrees."""

    mag: float
    angle: float