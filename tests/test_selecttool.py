import math

from marsarcade.display import N5110
from marsarcade.selecttool import SelectTool
from marsarcade.utils import Position2D


def test_initial_position_is_anchor():
    tool = SelectTool(10, 16, 3, 3, 2.0, 0.3)
    assert tool.pos == Position2D(10, 16)


def test_zero_amplitude_never_moves():
    tool = SelectTool(10, 16, 3, 3, 0.0, 0.5)
    for _ in range(30):
        tool.update()
        assert tool.pos == Position2D(10, 16)


def test_offset_bounded_by_amplitude():
    tool = SelectTool(20, 8, 3, 3, 4.0, 0.4)
    offsets = set()
    for _ in range(100):
        tool.update()
        offset = tool.x - tool.base_x
        assert abs(offset) <= 4
        assert tool.pos.y == 8
        offsets.add(offset)
    assert len(offsets) > 1


def test_phase_wraps():
    tool = SelectTool(0, 0, 1, 1, 1.0, 1.0)
    for _ in range(50):
        tool.update()
        assert 0.0 <= tool.phase <= 2 * math.pi


def test_set_position_resets_offset():
    tool = SelectTool(20, 8, 3, 3, 4.0, 0.4)
    for _ in range(3):
        tool.update()
    tool.set_position(5, 24)
    assert tool.pos == Position2D(5, 24)


def test_draw_fills_at_current_position():
    lcd = N5110()
    tool = SelectTool(30, 10, 3, 2, 0.0, 0.0)
    tool.draw(lcd)
    assert lcd.get_pixel(30, 10) == 1
    assert lcd.get_pixel(32, 11) == 1
    assert lcd.get_pixel(33, 10) == 0
    assert lcd.get_pixel(30, 12) == 0