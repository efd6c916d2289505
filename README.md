# cubcaster

cubcaster holds the building blocks of a grid-based first-person raycaster.
It decodes XPM textures, resolves X11 colour names, has a few small text
helpers, and casts rays through a tile map. It has no dependencies outside
the standard library.

## Installing

```
pip install .
```

## Modules

### `cubcaster.colors`

`lookup_color(name)` returns the `0xRRGGBB` value of an X11 colour name. The
match ignores ASCII case. `"none"` gives `-1`, and an unknown name raises
`KeyError`.

```python
from cubcaster.colors import lookup_color

lookup_color("Forest Green")   # 0x228B22
```

### `cubcaster.textutil`

* `split(text, sep)` splits on a single character and drops empty pieces.
* `trim(text, chars)` strips the given characters from both ends.
* `atoi(text)` parses a leading decimal integer. It skips leading
  whitespace and accepts one sign. If there is more than one sign
  character, or there are no digits, it returns `0`.
* `read_lines(stream)` yields the lines of a text or binary stream. Each
  line keeps its trailing `\n`, and the last line is yielded even without
  one.

### `cubcaster.xpm`

* `load_xpm(path)` decodes an XPM file and returns an `XpmImage`.
* `parse_xpm_text(text)` does the same for the file's whole text.
* `parse_xpm(lines)` does the same for the already-unquoted strings,
  header first.
* `XpmImage` has `width`, `height` and `pixels`, which are 32-bit values
  row by row. `XpmImage.pixel(x, y)` returns one pixel and raises
  `IndexError` outside the image.
* Colours marked `None` decode to `TRANSPARENT` (`0xFF000000`). Pixel keys
  missing from the colour table decode to `0`.
* `text_to_rgb(name, extra=None)` resolves one colour specification. It
  reads `#rrggbb`-style hex and named colours; an unknown name gives `0`.
* `strip_comments(text)` blanks out `/* */` and `//` comments that are
  outside quoted strings. It keeps the text's length.
* Unreadable or malformed data raises `XpmError`, a `ValueError`.

```python
from cubcaster.xpm import parse_xpm

image = parse_xpm(["2 1 2 1", "a c #FF0000", "b c None", "ab"])
image.pixel(0, 0)   # 0xFF0000
image.pixel(1, 0)   # 0xFF000000
```

### `cubcaster.raycast`

The world is measured in tiles of `TILE` (64) units. A grid is a sequence of
strings in which `1` (wall) and `2` (closed door) are solid.

* `cast_ray(grid, width, height, px, py, angle)` casts from `(px, py)` at
  `angle` degrees. It returns the nearer of the horizontal and vertical
  hits as a `RayHit`, with `x`, `y`, `distance` and `vertical`. On a tie
  the vertical hit wins.
* `cast_horizontal` and `cast_vertical` cast across one family of grid
  lines only. Each ray steps at most `DOF` (50) times. A ray that hits
  nothing reports `MAX_DISTANCE`.
* `is_solid(grid, width, height, x, y)` tells whether a world point lies in
  a solid tile.
* `deg2rad(degrees)` converts using pi taken as 3.14, as the rest of the
  geometry does.
* `distance(a, b)` returns the Euclidean distance between two points.
* `in_view(x, y)` tests a point against the 800×800 screen.
* `faces_west(angle)` is true strictly between 90 and 270 degrees.

```python
from cubcaster.raycast import cast_ray

grid = ["11111", "10001", "11111"]
hit = cast_ray(grid, 5, 3, 96.0, 96.0, 0.0)
hit.distance, hit.vertical
```

## What it does not do

cubcaster has no command to run, opens no window, and draws nothing. It does
not read `.cub` scene files: there is no parser for texture lines,
floor/ceiling colours or map validation. It also keeps no player state and
handles no input. It provides the texture, colour and ray-casting pieces
that such a program would be built on.