# marsarcade

This package has a few small arcade games. They draw onto an 84×48 monochrome pixel screen
in the style of the Nokia 5110 display. Everything runs in memory. The screen is a frame
buffer, and you can read it pixel by pixel or take the whole picture with `frame()`.

## Modules

- `marsarcade.display`: the `N5110` screen. It has a buffer of pixels and can draw lines,
  rectangles, circles and sprites. `FillType` chooses how shapes are filled. It prints text
  in a 5×7 font with `print_string` and `print_char`, and `refresh()` copies the buffer to
  the panel, which you then read back with `frame()`. The screen also keeps controller
  state, such as contrast, bias, brightness and inverse mode. It records every command byte
  it is sent in `commands`. `init(LCDType.LPH7366_1)` sets the panel up.
- `marsarcade.font`: `glyph(char)` gives the five column bytes of a character. It raises
  `ValueError` for a character that is not in the font.
- `marsarcade.bitmap`: `Bitmap` is a row-major image with one integer per pixel.
  - `get_pixel(row, column)` reads a pixel and raises `IndexError` when the position is
    outside the image.
  - `render(lcd, x0, y0)` draws the image onto a screen.
  - `str()` prints the image as rows of digits.
  - `draw_packed` draws bit-packed sprites, most significant bit first.
- `marsarcade.joystick`: `Joystick` is built from three callables. `vert` and `horiz` return
  the potentiometer readings from 0.0 to 1.0. The optional `button` returns the pin level,
  where 0 means pressed. The joystick gives its position in several forms:
  - calibrated coordinates, from `get_coord`;
  - the same coordinates mapped onto a circle, from `get_mapped_coord`;
  - polar form, from `get_polar`, `get_mag` and `get_angle`;
  - a compass `Direction`, from `get_direction`.

  `direction_from_angle` maps a heading to a direction.
- `marsarcade.utils`: the value types `Position2D`, `Vector2D`, `Polar` and `UserInput`,
  and the `Direction` enumeration.
- `marsarcade.explore`: *Mars Explorer* (`ExploreGame`). This is a side-scrolling tile map
  with a habitat, a rover, craters and terminals. The player has gravity, variable-height
  jumps and coyote time. The module also has `Tile`, `is_solid`, `build_map` and
  `run_explore`.
- `marsarcade.invaders`: *Space Invaders* (`SpaceInvaders`). This is a three-lane shooter
  with combos, temporary invincibility, levels and speed-up. It raises `GameOver` on a
  crash. The module also has `run_invaders`.
- `marsarcade.pong`: `PongEngine`, a single-player Pong game with lives. It is built from
  `marsarcade.ball.Ball` and `marsarcade.paddle.Paddle`.
- `marsarcade.lifesupport`: `LifeSupport` holds oxygen, food, water and health. These values
  run down once a second, measured by the `clock` callable you pass in.
- `marsarcade.selecttool`: `SelectTool`, a rectangle that hovers from side to side for use
  as a menu cursor.
- `marsarcade.menu`: `Menu` is a wrapping list of options with an outlined selection.
  `show_main_menu` runs the menu and returns the index that was chosen.

## Games as state machines

Each game keeps its state apart from its input and its drawing. Move a game forward one frame
with `step`, giving it a `Direction` and the state of a button. Then draw it:

```python
from marsarcade.display import N5110
from marsarcade.explore import ExploreGame
from marsarcade.utils import Direction

lcd = N5110()
game = ExploreGame()

for _ in range(20):
    game.step(Direction.E, False)   # walk east, no jump
    lcd.clear()
    game.draw(lcd)

image = lcd.frame()                 # empty until lcd.refresh() is called
lcd.refresh()
image = lcd.frame()                 # 504 bytes, bank by bank
```

In the space shooter, an enemy always comes down the player's lane. If you never fire, it
reaches the ship after a few dozen frames:

```python
from marsarcade.invaders import GameOver, SpaceInvaders
from marsarcade.utils import Direction

game = SpaceInvaders()
try:
    for _ in range(100):
        game.step(Direction.CENTRE, False)
except GameOver as crash:
    print(crash.level, crash.score)
```

`SpaceInvaders.step` returns `True` on the frame that a new level is reached.
`frame_delay()` gives the pause between frames for the current speed.

## Full game loops

`run_explore`, `run_invaders` and `show_main_menu` each run a whole session. They take these
arguments:

- a display;
- a `Joystick`;
- a callable that reports whether the select button is held;
- a `sleep` callable. `time.sleep` is the default. Pass a function that does nothing to run
  without waiting.

`run_invaders` also accepts a `random.Random`, so that a session can be reproduced. When
the ship is hit, it shows the game-over screen and re-raises `GameOver`.

## Drawing directly

```python
from marsarcade.display import FillType, N5110

lcd = N5110()
lcd.draw_rect(0, 0, 84, 48, FillType.TRANSPARENT)
lcd.draw_circle(42, 24, 10, FillType.BLACK)
lcd.print_string("Hello", 0, 0)
assert lcd.get_pixel(42, 24) == 1
```

## What it does not do

- It opens no window and draws nothing to a terminal. The screen exists only in memory, so
  showing `frame()` anywhere is up to you.
- It installs no command. Nothing ties the menu to the games; your own code has to call
  `show_main_menu` and then the game that was chosen.
- The menu lists a "Map Editor" option, but the package has no map editor behind it.
- `PongEngine`, `LifeSupport` and `SelectTool` are parts only. No game loop uses them.

## Tests

The tests use pytest. Install the package with its `test` extra and run `pytest`.