# cubmap

Reads `.cub` level files, checks that they describe a closed level, loads the
four XPM wall textures they name, and opens a window sized for the level.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using the command

```
cubmap path/to/level.cub
```

Exactly one argument is expected; otherwise `Error: not enough arguments` is
printed. The program prints one of these messages and stops when a step fails:

- `Error: name map file`: the name does not end in `.cub` or has nothing
  before the extension.
- `Error get_map`: the file cannot be opened.
- `Error: Invalid map`: the header is wrong, the grid holds a character that is
  not allowed, no player start is found, or the player is not enclosed by walls.
- `Error: init textures`: one of the four wall textures cannot be read as XPM.

Otherwise a window titled `Cub3D` opens, `(columns - 1) * 50` by `rows * 50`
pixels, where `columns` is the length of the first grid row (newline included)
and `rows` the number of grid rows. Releasing Escape or closing the window
quits. The exit status is always 0.

## The map format

A `.cub` file begins with six header lines, in this order; blank lines may come
between them:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

Each line must start with its key; the rest of the line, with spaces, tabs and
newlines trimmed from both ends, is the value. Texture paths are opened as
given, relative to the current directory.

The grid follows. It may contain only `1`, `0`, `N`, `S`, `E`, `O`, spaces and
newlines. The player starts at the first `N`, `S` or `E` in the grid (a `W` is
rejected as a character that is not allowed, and `O` is accepted but is not a
start). Starting from the player, every reachable cell that is not a `1` must
be surrounded by walls: reaching a space, the end of a row or the edge of the
grid makes the map open.

## Using the library

```python
from cubmap.reader import read_map_file
from cubmap.parser import check_map_name, parse_map, MapError

name = check_map_name("level.cub")
lines = read_map_file(name)
try:
    data = parse_map(lines)
except MapError as exc:
    print(exc)
else:
    print(data.textures.north, data.x, data.y, data.direction)
```

Modules:

- `cubmap.reader`: `iter_lines(stream, buffer_size=42)` yields lines with
  their newlines from a text or binary stream; `read_map_file(path)` returns
  the lines of a file.
- `cubmap.parser`: `check_map_name`, `parse_coordinates`, `check_characters`,
  `find_player`, `map_limits`, `is_closed` and `parse_map`, returning
  `Textures` and `MapData`; invalid input raises `MapError`.
- `cubmap.xpm`: `parse_xpm`, `parse_xpm_text` and `load_xpm` decode XPM images
  into `cubmap.pixels.Image` objects, with helpers `split_words`,
  `find_unquoted`, `strip_comments`, `text_color` and `quoted_lines`. Bad input
  raises `XpmError`. Transparent (`None`) pixels are stored as `0xFF000000`.
- `cubmap.colors`: `lookup_color(name)` (case-insensitive, `KeyError` for
  unknown names, `none` gives `-1`) and `color_names()` for X11 colour names.
- `cubmap.pixels`: the `Image` pixel buffer with `put_pixel`, `get_pixel` and
  `fill`, plus `rgb_shifts` and `visual_color` for converting colours to
  shallower visuals.
- `cubmap.game`: `load_game(path)`, the `Game` class (`load_textures`,
  `window_size`, `handle_key`, `run`), the `Key` codes, `format_map(lines)`
  and `main(argv=None)`, the entry point of the `cubmap` command.

## What it does not do

The window stays black: the level is not drawn, the textures are loaded but not
shown, and the movement keys (W, A, S, D and the arrows) are recognised but do
nothing. The floor and ceiling values (`F`, `C`) are read as text and are
neither checked nor used.