import pytest

from marsarcade.joystick import Joystick, direction_from_angle
from marsarcade.utils import Direction


def make(vert, horiz, button=None):
    readings = {"v": 0.5, "h": 0.5}
    stick = Joystick(lambda: readings["v"], lambda: readings["h"], button)
    stick.init()
    readings["v"] = vert
    readings["h"] = horiz
    return stick


@pytest.mark.parametrize(
    "angle,expected",
    [
        (-1.0, Direction.CENTRE),
        (0.0, Direction.N),
        (22.5, Direction.NE),
        (67.5, Direction.E),
        (112.5, Direction.SE),
        (157.5, Direction.S),
        (202.5, Direction.SW),
        (247.5, Direction.W),
        (292.5, Direction.NW),
        (337.5, Direction.N),
        (359.9, Direction.N),
    ],
)
def test_direction_from_angle(angle, expected):
    assert direction_from_angle(angle) == expected


def test_centred_stick():
    stick = make(0.5, 0.5)
    assert stick.get_direction() == Direction.CENTRE
    assert stick.get_angle() == -1.0
    assert stick.get_mag() == 0.0


def test_push_up_is_north():
    stick = make(1.0, 0.5)
    assert stick.get_direction() == Direction.N
    assert stick.get_coord().y > 0


def test_horizontal_axis_is_negated():
    stick = make(0.5, 0.0)
    assert stick.get_coord().x > 0
    assert stick.get_direction() == Direction.E
    assert make(0.5, 1.0).get_direction() == Direction.W


def test_push_down_is_south():
    assert make(0.0, 0.5).get_direction() == Direction.S


def test_small_movement_is_centre():
    stick = make(0.52, 0.5)
    assert stick.get_direction() == Direction.CENTRE


@pytest.mark.parametrize("v", [0.0, 0.25, 0.5, 0.75, 1.0])
@pytest.mark.parametrize("h", [0.0, 0.25, 0.5, 0.75, 1.0])
def test_mapped_magnitude_within_unit_circle(v, h):
    stick = make(v, h)
    polar = stick.get_polar()
    assert polar.mag <= 1.0 + 1e-9
    assert polar.angle == -1.0 or 0.0 <= polar.angle < 360.0


def test_calibration_uses_init_readings():
    readings = {"v": 0.3, "h": 0.7}
    stick = Joystick(lambda: readings["v"], lambda: readings["h"])
    stick.init()
    coord = stick.get_coord()
    assert coord.x == pytest.approx(0.0)
    assert coord.y == pytest.approx(0.0)


def test_button_without_pin_is_never_pressed():
    assert make(0.5, 0.5).button_pressed() is False


def test_button_active_low():
    level = {"pin": 1}
    stick = make(0.5, 0.5, lambda: level["pin"])
    assert stick.button_pressed() is False
    level["pin"] = 0
    assert stick.button_pressed() is True