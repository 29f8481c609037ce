# fdfview

A small viewer for `.fdf` height maps. A map is drawn as a wireframe grid in
isometric projection in an 800×600 window opened with pygame.

## Installing

```
pip install .
```

## Running

```
fdfview path/to/map.fdf
```

The command takes exactly one argument, and that argument must contain
`.fdf`; otherwise it prints `expected argument: one .fdf file` and exits with
status 1. It also exits with status 1 when the file cannot be opened, when it
is empty, or when its rows differ in length (`map must be rectangle`).

A map is a text file of whitespace-separated heights, one grid row per line.
Each value is read as its leading integer; whatever follows (such as a
`,0xFF0000` colour) is ignored, and a value with no leading integer counts as
0. The window draws every grid point in pink and joins each point to its left
and upper neighbours with green lines.

### Keys

Keys act when they are released.

| Key           | Effect                        |
|---------------|-------------------------------|
| Arrow keys    | Move the map by 3 pixels      |
| Right Shift   | Zoom in (scale up to 1000)    |
| Right Control | Zoom out (scale down to 1)    |
| Escape        | Close the window              |

Closing the window also quits.

## Using it as a library

```python
from fdfview.mapfile import load_map
from fdfview.projection import to_iso
from fdfview.drawing import Canvas, draw_line

height_map = load_map("maps/42.fdf")
points = to_iso(height_map)
canvas = Canvas()
draw_line(canvas, points[0], points[1], 0xA2D8A0)
```

- `fdfview.mapfile`: `parse_map` and `load_map` build a `HeightMap` of
  `Vertex` values scaled by a `Transform` (translation `tx`, `ty`, `scale`);
  bad input raises `MapError`.
- `fdfview.projection`: `rescale`, `project_vertex` and `to_iso` turn the
  map into screen points (`IsoPoint`).
- `fdfview.drawing`: `Canvas` is a 32-bit pixel buffer with `put_pixel`,
  `get_pixel` and `clear`; `draw_line` and `round_half_up` help draw on it.
- `fdfview.viewer`: `Viewer` renders a map onto a canvas (`render`), applies
  an `Action` (`apply`, `handle_key`) and shows the window (`run`).
- `fdfview.colors`: `lookup_color` and `text_to_rgb` resolve X11 colour
  names and `#RRGGBB` text; `visual_color` packs a colour for depths below 24.
- `fdfview.xpm`: `load_xpm`, `xpm_from_data` and `parse_xpm` decode XPM
  images into an `XpmImage` of pixel values with an optional transparency
  mask; malformed data raises `XpmError`.

## What it does not do

The viewer ignores per-point colours written in a map, has no rotation and
no other projection than the isometric one. XPM images can be decoded into
pixel arrays, but the viewer does not display them.

## Tests

```
pip install .[test]
pytest
```