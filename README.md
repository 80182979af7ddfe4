# brickbreaker

Game pieces and a drawing toolkit for a brick-breaker arcade game. All drawing
goes to in-memory surfaces built on Pillow. The package runs and can be tested
without a display.

## Modules

- `brickbreaker.bricks` holds the brick kinds and what each one does when the
  ball hits it:
  - `NormalBrick` scores 1 and is removed.
  - `BombBrick` scores 5 and removes itself and seven of its eight neighbours.
    The neighbour directly to its right is left standing.
  - `RockBrick` scores 1 and stays, unless the ball is a fire ball. A fire ball
    scores 5 and removes it.
  - `PowerupDownBrick` scores 4, drops a collectible and is removed.
  - `HardBrick` takes three hits, scoring 1 for each. A fire ball removes it at
    once and scores its remaining strength.
  - `DoubleBrick` adds the current score to itself, which doubles it, and is
    removed.

  The module also defines `Point`, `BrickType` and `BallType`. A brick is given
  a game object, which must provide:
  - a `score` attribute;
  - `update_score(amount)`;
  - `add_collectible(point)`;
  - a `grid` with `delete_brick(point)`;
  - a `ball` with a `type` attribute.
- `brickbreaker.config` holds `GameConfig`, a frozen dataclass of the window
  size, the toolbar and status bar heights, the colours and the brick size.
  Its properties `remaining_height`, `grid_height` and `paddle_area_height`
  give the layout. The module also has a default instance, `config`, and the
  `OperationType` enumeration.
- `brickbreaker.colors` defines `Color`, an RGB colour with 8-bit components.
  `Color.from_floats` builds one and `as_floats` reads one back as 0.0 to 1.0
  values. The module also has a palette of named colours such as `RED`,
  `LAVENDER` and `LIGHTSEAGREEN`.
- `brickbreaker.canvas` defines `Canvas`, which draws with a pen (outlines) and
  a brush (fills). It draws pixels, lines, rectangles (optionally rounded),
  triangles, polygons, circles, ellipses, arcs and cubic Bézier curves. Each
  shape takes one of the `DrawStyle` values `FILLED`, `FRAME` or `INVERTED`,
  where the shape supports it. `get_color` reads a pixel back, and `copy_from`
  copies another canvas of the same size.
- `brickbreaker.surface` defines `Surface`, a `Canvas` that also draws text.
  Fonts are set with `set_font` and the `Font`, `FontStyle` and `FontFamily`
  types. Text is drawn with `draw_string`, `draw_integer` and `draw_double`,
  and measured with `string_size`. `draw_image` draws an `Image`, scaled if
  asked, and `store_image` captures a region as an `Image`.
- `brickbreaker.window` defines `Window`, a window model with a screen
  `Surface`. It can double-buffer with `set_buffering` and `update_buffer`;
  `active_surface` is where drawing goes. Input is fed in with
  `post_mouse_button`, `post_mouse_move` and `post_key`, which may be called
  from another thread. It is read back with:
  - `get_mouse_click` and `get_key_press`, which return `None` when the queue
    is empty;
  - `wait_mouse_click` and `wait_key_press`, which raise `TimeoutError` when a
    timeout runs out;
  - `get_button_state` and `mouse_coord`;
  - `flush_mouse_queue` and `flush_key_queue`, which empty the queues.
- `brickbreaker.image` defines `Image`, which loads a JPEG file. It provides
  `width`, `height`, `pixel(x, y)` and `copy()`.
- `brickbreaker.timing` provides `pause(milliseconds)`, `current_time()`,
  `elapsed_time(interval)` and `IntervalTimer`.
- `brickbreaker.jpegcommon` and `brickbreaker.jpegparams` model a JPEG
  compression object's state and its parameter setup:
  - `quality_scaling` converts a quality rating to a scaling factor;
  - `scaled_quant_values` scales a quantisation table;
  - `CompressParams` holds the standard quantisation and Huffman tables, sets
    colour-space defaults with `set_defaults`, `default_colorspace` and
    `set_colorspace`, and builds progressive scan scripts with
    `simple_progression`.

  Misuse raises `JpegError`.

## What it does not do

- The package has no game loop, grid, ball, paddle or collectible classes.
  Bricks act on whatever game object they are given.
- It has no command to start a game.
- `Window` opens nothing on screen. Its contents exist only as in-memory
  surfaces, and input reaches it only through the `post_*` methods.
- The JPEG modules set up compression parameters only. They do not encode or
  decode image data; `Image` reads JPEG files through Pillow.

## Installation

```
pip install .
```

To install with what the tests need:

```
pip install ".[test]"
```

## Example

```python
from brickbreaker.config import GameConfig
from brickbreaker.colors import Color
from brickbreaker.canvas import DrawStyle
from brickbreaker.surface import Surface
from brickbreaker.jpegparams import quality_scaling

config = GameConfig()
print(config.grid_height, config.paddle_area_height)  # 340 170

print(Color.from_floats(1.0, 0.5, 0.0))  # Color(red=255, green=127, blue=0)

surface = Surface(100, 50)
surface.set_brush(Color(255, 0, 0))
surface.draw_rectangle(10, 10, 40, 30, DrawStyle.FILLED)
print(surface.get_color(20, 20))  # Color(red=255, green=0, blue=0)

print(quality_scaling(75))  # 50
```

## Running the tests

```
pytest
```