"""Life-support indicators that run down over time."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

_FULL = 100
_TICK_MS = 1000


class LifeSupport:
    """Oxygen, food, water and overall health, as percentages 0..100.

    ``clock`` returns the current time in seconds.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self.oxygen = _FULL
        self.food = _FULL
        self.water = _FULL
        self.health = _FULL
        self._clock = clock
        self._started_at: float | None = None

    def start(self) -> None:
        """Refill every indicator and start the timer."""
        self.oxygen = _FULL
        self.food = _FULL
        self.water = _FULL
        self.health = _FULL
        self._started_at = self._clock()

    def _elapsed_ms(self) -> int:
        if self._started_at is None:
            return 0
        return int((self._clock() - self._started_at) * 1000)

    def update(self) -> None:
        """Once a second has passed, consume supplies and reduce health."""
        if self._elapsed_ms() < _TICK_MS:
            return
        self.oxygen -= 1
        self.food -= 1
        self.water -= 1
        if self.oxygen < 50 or self.food < 50 or self.water < 50:
            self.health -= 2
        else:
            self.health -= 1
        self.oxygen = max(self.oxygen, 0)
        self.food = max(self.food, 0)
        self.water = max(self.water, 0)
        self.health = max(self.health, 0)
        self._started_at = self._clock()

    def draw(self, lcd: Any) -> None:
        """Print oxygen and health in the bottom-right corner."""
        lcd.print_string(f"O2:{self.oxygen}%", 50, 4)
        lcd.print_string(f"H:{self.health}%", 50, 5)