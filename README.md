# cubparse

`cubparse` reads and validates `.cub` scene files. A `.cub` file is the small
text format that describes a grid-based raycaster level. A file holds six
header lines followed by the map itself:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

111111
100101
1000N1
111111
```

## What a valid file looks like

- The file name must end in `.cub`.
- Blank lines before the map are ignored. Leading spaces and tabs on the six
  header lines are removed.
- The first six lines must name each identifier exactly once: the four wall
  textures `NO`, `SO`, `WE`, `EA` and the floor `F` and ceiling `C` colours.
  The line after them must not be another identifier line.
- Each texture line must end in `.xpm`.
- A colour line holds exactly two commas and three channels. Each channel is
  a whole number from 0 to 255 without a sign.
- Map rows use `0` for floor, `1` for wall, spaces or tabs for empty space,
  and one of `N`, `S`, `E`, `W` for the player start. Any other character on a
  non-identifier line is rejected.
- There must be more than six map characters and exactly one player.
- The first and last rows may hold only walls and blanks. Every other floor or
  player cell must have floor, wall or player on all four sides.

A blank line inside the map ends it: the rows read before the blank line are
the map, and nothing after the blank line is read.

## Installation

```
pip install .
```

## Command line

```
cubparse path/to/level.cub
```

On success the command prints the lines of the parsed file, followed by a
`-- VALID MAP --` marker, and exits with status 0. If validation fails, it
writes the reason to standard error and exits with status 1. If it is not
given exactly one argument, it exits with status 1 and prints nothing.

## Library use

```python
from cubparse.parser import parse
from cubparse.errors import MapError

try:
    level = parse("level.cub")
except MapError as exc:
    print(f"invalid map: {exc}")
else:
    print(level.width, level.height, level.player)
    print(hex(level.floor_color), hex(level.ceiling_color))
```

`parse` returns a frozen `CubMap` with these members:

- `lines`: every line kept from the file.
- `grid`: the map rows after the header.
- `textures`: a mapping from `NO`/`SO`/`WE`/`EA` to the text after the identifier.
- `floor_color` and `ceiling_color`: colours packed as `0xRRGGBB`.
- `player`: the player position as `(row, column)`.
- `height` and `width`: the number of rows and the longest row.

Every validation failure raises `cubparse.errors.MapError`. A missing or
malformed colour raises its subclass `ColorError`, whose `kind` is `"F"` or
`"C"`.

The checks can also be used on their own:

- `cubparse.reader.read_map_lines(path)` loads the non-blank lines of a file.
- `cubparse.header`:
  - `check_textures_colors` checks the six identifiers.
  - `check_xpm_textures` checks the texture paths.
  - `parse_rgb(lines, "F")` reads a colour.
  - `parse_channel` reads one colour channel.
- `cubparse.components.find_player(rows)` locates the single player.
- `cubparse.walls.check_map_closed(rows)` checks that the map is enclosed.
- `cubparse.parser`:
  - `strip_header_indent` removes leading blanks from the header lines.
  - `check_components` rejects characters that do not belong in a map.

The package also carries small helpers that the parser builds on:

- `cubparse.linereader.LineReader` reads a stream line by line through a
  fixed-size buffer.
- `cubparse.strings`, `cubparse.chars`, `cubparse.numbers`,
  `cubparse.memory`, `cubparse.lists` and `cubparse.output` provide string,
  character, number, byte-buffer, linked-list and output helpers.

## What it does not do

`cubparse` only validates scene files. It does not open windows, render the
level or load the `.xpm` textures it names. It also does not check that the
texture files exist.

## Running the tests

```
pip install .[test]
pytest
```