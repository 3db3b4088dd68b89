"""The player's paddle in the Pong game."""

from __future__ import annotations

from typing import Any

from marsarcade.display import HEIGHT, FillType
from marsarcade.utils import Direction, Position2D, UserInput


class Paddle:
    """A vertical paddle at a fixed column that moves up and down."""

    def __init__(self, x: int, height: int, width: int) -> None:
        self.x = x
        self.y = HEIGHT // 2 - height // 2
        self.height = height
        self.width = width
        self.speed = 1
        self.score = 0

    @property
    def pos(self) -> Position2D:
        return Position2D(self.x, self.y)

    def draw(self, lcd: Any) -> None:
        lcd.draw_rect(self.x, self.y, self.width, self.height, FillType.BLACK)

    def update(self, user_input: UserInput) -> None:
        """Move up for North, down for South, staying inside the border."""
        self.speed = 2
        if user_input.d == Direction.N:
            self.y -= self.speed
        elif user_input.d == Direction.S:
            self.y += self.speed
        if self.y < 1:
            self.y = 1
        if self.y > HEIGHT - self.height - 1:
            self.y = HEIGHT - self.height - 1

    def add_score(self) -> None:
        self.score += 1