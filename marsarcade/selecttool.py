"""A menu cursor that hovers sideways around an anchor point."""

from __future__ import annotations

import math
from typing import Any

from marsarcade.display import FillType
from marsarcade.utils import Position2D


class SelectTool:
    """A filled rectangle whose x oscillates by a sine of its phase."""

    def __init__(
        self,
        base_x: int = 0,
        base_y: int = 0,
        width: int = 0,
        height: int = 0,
        amplitude: float = 0.0,
        phase_delta: float = 0.0,
    ) -> None:
        self.base_x = base_x
        self.base_y = base_y
        self.width = width
        self.height = height
        self.amplitude = amplitude
        self.phase_delta = phase_delta
        self.phase = 0.0
        self.x = base_x

    @property
    def pos(self) -> Position2D:
        """Current position, including the hover offset."""
        return Position2D(self.x, self.base_y)

    def update(self) -> None:
        """Advance the phase and recompute the horizontal offset."""
        self.phase += self.phase_delta
        if self.phase > 2 * math.pi:
            self.phase -= 2 * math.pi
        self.x = self.base_x + int(self.amplitude * math.sin(self.phase))

    def draw(self, lcd: Any) -> None:
        lcd.draw_rect(self.x, self.base_y, self.width, self.height, FillType.BLACK)

    def set_position(self, base_x: int, base_y: int) -> None:
        """Move the anchor; the hover offset is dropped until the next update."""
        self.base_x = base_x
        self.base_y = base_y
        self.x = base_x