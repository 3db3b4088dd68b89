"""The main menu for choosing a game mode."""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from typing import Any

from marsarcade.display import WIDTH, FillType
from marsarcade.joystick import Joystick
from marsarcade.utils import Direction

OPTIONS = ("Mars Explorer", "Space Invader", "Map Editor", "   Exit   ")
START_ROW = 1
ROW_HEIGHT = 8


class Menu:
    """A vertical list of options with a highlighted selection."""

    def __init__(self, options: Sequence[str] = OPTIONS, start_row: int = START_ROW) -> None:
        if not options:
            raise ValueError("a menu needs at least one option")
        self.options = tuple(options)
        self.start_row = start_row
        self.selected = 0

    def navigate(self, direction: Direction) -> bool:
        """Move the selection up for North or down for South, wrapping; True if moved."""
        if direction == Direction.N:
            self.selected = (self.selected - 1) % len(self.options)
            return True
        if direction == Direction.S:
            self.selected = (self.selected + 1) % len(self.options)
            return True
        return False

    def draw(self, lcd: Any) -> None:
        """Print the options and outline the selected one."""
        for i, option in enumerate(self.options):
            lcd.print_string(option, 0, self.start_row + i)
        lcd.draw_rect(
            0, (self.start_row + self.selected) * ROW_HEIGHT, WIDTH, ROW_HEIGHT, FillType.TRANSPARENT
        )


def show_main_menu(
    lcd: Any,
    joystick: Joystick,
    select_pressed: Callable[[], bool],
    sleep: Callable[[float], Any] = time.sleep,
) -> int:
    """Run the menu until select is pressed and return the chosen index."""
    menu = Menu()
    while True:
        lcd.clear()
        if menu.navigate(joystick.get_direction()):
            sleep(0.2)
        menu.draw(lcd)
        lcd.refresh()
        chosen = select_pressed()
        if chosen:
            while select_pressed():
                sleep(0.05)
        sleep(0.1)
        if chosen:
            return menu.selected