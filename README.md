# fractol

The model behind an escape-time fractal explorer, together with the small
utility library it is built on. It has no runtime dependencies.

## Fractal modules

- `fractol.options`: `parse_args(argv)` reads the arguments that follow a
  program name. The first must be exactly `mandelbrot`, `julia` or `tricorn`
  (a `FractalType`); the optional second and third give the Julia constant
  (`julia_cx`, `julia_cy`, defaulting to `-0.7` and `0.27015`). The result is
  a frozen `Options` dataclass. Missing or bad arguments raise `UsageError`,
  whose `usage` attribute holds the help text; `usage_text(invalid)` builds
  that text.
- `fractol.view`: the `View` dataclass holds zoom, offset, pointer position,
  base colour, the Julia constant and the window size (500 × 500 by
  default). `zoom_by(factor)` scales the zoom; `zoom_at(factor, x, y)` zooms
  towards or away from a pixel; `pan(dx, dy)` moves the centre by an amount
  scaled down by the zoom; `shift_color(delta)` changes the base colour with
  signed 32-bit wrap-around; `plane_point(px, py)` maps a pixel to a point of
  the complex plane.
- `fractol.controls`: `handle_key(view, keycode)` and
  `handle_mouse(view, button, x, y)` apply input to a `View` and return an
  `Action` (`NONE`, `REDRAW` or `CLOSE`). Arrow keys pan by 0.1, `z`/`e`
  shift the colour by `0x0000FF00` up or down, Escape returns `CLOSE`, and
  the scroll wheel zooms in (×2) or out (×0.5) around the pointer. The
  `Key`, `MouseButton` and `WindowEvent` enumerations hold the codes.
- `fractol.tricorn`: `escape_count(cx, cy, max_iter=60)` iterates the tricorn
  map for one point and returns its escape count (`max_iter` when the orbit
  stays bounded); `render_tricorn(view)` returns the counts for every pixel
  of a view as rows indexed `[y][x]`.

## Helper modules

- `fractol.numparse`: lenient parsing with `atoi`, `atol` and `atof`, and
  validation with `is_double` and `contains_non_digit`. Note that `atof`
  negates the whole sum when the text starts with `-`, so `atof("-0.7")` is
  `-0.7` but `atof("-1.5")` is `0.5`.
- `fractol.chars`: ASCII classes and case mapping (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`), taking a
  one-character string or an integer code.
- `fractol.strings`: `strncmp`, `strchr`, `strrchr`, `strnstr` (searches
  return indices or None), `strlcpy`, `strlcat` (return the text and the
  would-be length), `substr`, `strjoin`, `strtrim`, `split`, `itoa`,
  `strmapi` and `striteri`.
- `fractol.memory`: `memset`, `bzero`, `memcpy`, `memmove` (within one
  buffer, by offsets), `memchr`, `memcmp` and `calloc` on bytes-like
  buffers.
- `fractol.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write to
  a text stream, standard output by default.
- `fractol.linereader`: `LineReader(buffer_size=50).read_line(fd)` and the
  shared `get_next_line(fd)` read a raw file descriptor one line at a time,
  returning `bytes` with the newline kept, or None at end of input.
- `fractol.linkedlist`: a singly linked `LinkedList` of `Node`s with
  `push_front`, `push_back`, `last`, `clear`, `for_each`, `map`,
  `remove_node`, `remove_value` and an insertion-sorted copy via
  `sorted(compare)`.

## Examples

```python
from fractol.numparse import atof, is_double
from fractol.options import FractalType, UsageError, parse_args

atof("-0.7")          # -0.7
is_double("1.")       # False: a point must be followed by digits

options = parse_args(["julia", "-0.7", "0.27015"])
options.fractal is FractalType.JULIA   # True

try:
    parse_args(["sierpinski"])
except UsageError as error:
    print(error.usage)
```

```python
from fractol.controls import Action, Key, handle_key
from fractol.view import View

view = View()
handle_key(view, Key.LEFT)   # Action.REDRAW; view.x_move is now 0.1
handle_key(view, Key.ESC)    # Action.CLOSE
```

```python
from fractol.tricorn import escape_count

escape_count(0.0, 0.0, 60)   # 60: the origin never escapes
escape_count(3.0, 3.0, 60)   # 0: escapes after the first step
```

## What this package does not do

It opens no window, draws no pixels and provides no command to run.
Colouring escape counts into an image is not included, and only the
tricorn has an escape-time routine: `mandelbrot` and `julia` are accepted
by `parse_args`, but there is no function here that renders them.

## Tests

The test suite lives in `tests/` and runs under pytest; install the `test`
extra for pytest and hypothesis.