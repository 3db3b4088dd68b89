"""Single-player Pong: one paddle on the left, walls on the other three sides."""

from __future__ import annotations

from typing import Any

from marsarcade.ball import Ball
from marsarcade.display import HEIGHT, WIDTH
from marsarcade.paddle import Paddle
from marsarcade.utils import UserInput


class PongEngine:
    """Runs the ball, the paddle and the player's lives."""

    def __init__(
        self,
        paddle_position: int,
        paddle_height: int,
        paddle_width: int,
        ball_size: int,
        speed: int,
    ) -> None:
        self.lives = 4
        self.ball = Ball(ball_size, speed)
        self.paddle = Paddle(paddle_position, paddle_height, paddle_width)

    def update(self, user_input: UserInput) -> int:
        """Advance one frame and return the lives left."""
        self._check_goal()
        self.ball.update()
        self.paddle.update(user_input)
        self._check_wall_collision()
        self._check_paddle_collision()
        return self.lives

    def draw(self, lcd: Any) -> None:
        lcd.draw_line(0, 0, WIDTH - 1, 0, 1)
        lcd.draw_line(WIDTH - 1, 0, WIDTH - 1, HEIGHT - 1, 1)
        lcd.draw_line(0, HEIGHT - 1, WIDTH - 1, HEIGHT - 1, 1)
        self.ball.draw(lcd)
        self.paddle.draw(lcd)

    def _check_wall_collision(self) -> None:
        ball = self.ball
        size = ball.size
        if ball.y <= 1:
            ball.y = 1
            ball.velocity.y = -ball.velocity.y
        elif ball.y + size >= HEIGHT - 1:
            ball.y = HEIGHT - 1 - size
            ball.velocity.y = -ball.velocity.y
        elif ball.x + size >= WIDTH - 1:
            ball.x = WIDTH - 1 - size
            ball.velocity.x = -ball.velocity.x

    def _check_paddle_collision(self) -> None:
        ball = self.ball
        paddle = self.paddle
        if (
            paddle.y <= ball.y <= paddle.y + paddle.height
            and paddle.x <= ball.x <= paddle.x + paddle.width
        ):
            ball.x = paddle.x + paddle.width
            ball.velocity.x = -ball.velocity.x

    def _check_goal(self) -> None:
        ball = self.ball
        if ball.x + ball.size < 0:
            ball.reset(ball.size, abs(ball.velocity.x))
            self.lives -= 1