"""The ball of the Pong game."""

from __future__ import annotations

from typing import Any

from marsarcade.display import HEIGHT, WIDTH, FillType
from marsarcade.utils import Position2D


class Ball:
    """A square ball moving by a fixed velocity each frame."""

    def __init__(self, size: int = 2, speed: int = 1) -> None:
        self.size = size
        self.x = 0
        self.y = 0
        self.velocity = Position2D(speed, speed)
        self.reset(size, speed)

    def reset(self, size: int, speed: int) -> None:
        """Centre the ball on the screen and set both velocity components to ``speed``."""
        self.size = size
        self.x = WIDTH // 2 - size // 2
        self.y = HEIGHT // 2 - size // 2
        self.velocity = Position2D(speed, speed)

    @property
    def pos(self) -> Position2D:
        return Position2D(self.x, self.y)

    @pos.setter
    def pos(self, p: Position2D) -> None:
        self.x = p.x
        self.y = p.y

    def draw(self, lcd: Any) -> None:
        lcd.draw_rect(self.x, self.y, self.size, self.size, FillType.BLACK)

    def update(self) -> None:
        """Move the ball by its velocity."""
        self.x += self.velocity.x
        self.y += self.velocity.y