# fdfview

A small viewer that reads a height-map file and shows it as a coloured
wireframe in isometric projection.

## Map files

A map is a plain text file. Each line is a row of the grid and each
space-separated number on it is the height of one point:

```
0 0 0 0
0 2 2 0
0 2 2 0
0 0 0 0
```

- The width of the grid is taken from the first line. Extra values on
  later lines are ignored; a line with fewer values is an error
  (`fdfview.heightmap.MapError`).
- Only the leading integer of each value is used, so a suffix such as
  `10,0xFF0000` is read as height `10`.
- Points are coloured from green (lowest) to red (highest) with a fixed
  blue component; a completely flat map is drawn in white.

## Running

Install the package and open a map:

```
pip install .
fdfview path/to/map.fdf
```

The window is 800 by 800 pixels, titled "FDF", and uses pygame. Press
Escape or close the window to quit. Called with anything other than one
file name, the command prints a usage line and exits with status 1; if
the file cannot be read or is malformed, it prints an error and exits
with status 1.

## Using it from Python

```python
from fdfview.heightmap import read_map
from fdfview.raster import Canvas
from fdfview.projection import render

heightmap = read_map("map.fdf")
canvas = Canvas(800, 800)
render(heightmap, canvas, 4, 0.55)
pixels = canvas.to_bytes()
```

- `fdfview.heightmap`: `read_map`, `parse_map` (from an iterable of
  lines), `flat_map`, and the `HeightMap` and `Point` classes.
- `fdfview.projection`: `isometric`, `project` (sets each point's
  screen position and colour) and `render` (projects and draws).
- `fdfview.raster`: `Canvas` (32-bit pixels, `put_pixel`, `get_pixel`,
  `to_bytes`), `bresenham`, `draw_line` and `draw_lines`.
- `fdfview.color`: `get_color(z, z_min, z_max)`.
- `fdfview.app.Viewer` wraps these steps: `Viewer.render()` draws into
  its canvas and `Viewer.run()` opens the window.

`fdfview.libft` holds the small helpers the viewer is built on:
character tests (`chars`), byte-buffer functions (`memory`), string
functions (`strings`), a singly linked list (`linked_list`), a buffered
line reader (`lines`), stream output (`output`) and a small `printf`.

## What it does not do

The view is fixed: there are no keys or mouse controls to zoom, pan,
rotate or change the height scale, and colours given in a map file are
not used. The only key handled is Escape.

## Tests

```
pip install .[test]
pytest
```