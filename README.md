# cubcaster

A small first-person maze explorer. It reads a `.cub` scene file, checks that
the map is closed, and lets you walk through it in a textured, raycast 3D view
drawn in a 1280×720 pygame window.

## Installing

```
pip install .
```

## Playing

```
cubcaster maps/map.cub
```

The argument must be a single file whose name ends in `.cub` (with at least
one character before the extension). If the arguments are wrong, the scene
cannot be parsed, or the textures cannot be loaded, a message starting with
`Error` is printed and the program exits with status 1.

Controls:

| Key          | Action              |
|--------------|---------------------|
| W / S        | move forward / back |
| A / D        | strafe left / right |
| Left / Right | turn                |
| Esc          | quit                |

Closing the window also quits. Movement stops at wall cells; the player can
slide along a wall on the axis that is free.

## Scene files

A `.cub` file holds configuration lines followed by the map:

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

- `NO`, `SO`, `WE`, `EA` give the XPM texture for each wall face. All four are
  needed to start the game.
- `F` and `C` give the floor and ceiling colours as `R,G,B`, each 0–255. A
  value out of range is an error; a colour that is not given is black.
- Configuration is read up to the first map line. A map line is any line whose
  first character after leading spaces or tabs is `1` or `0`.
- The map uses `1` for walls, `0` for open floor, spaces for void, and exactly
  one of `N`, `S`, `E`, `W` for the starting position and facing. Shorter rows
  are padded with spaces.
- The map must be one unbroken block of lines, and every floor cell must be
  closed off from the void and the map edge by walls.

Textures are XPM images. Colours may be given as `#RRGGBB`, by X11 colour
name (case does not matter), or as `None` for transparent.

## Using it as a library

```python
from cubcaster.validation import load_scene
from cubcaster.mapfile import MapError

try:
    scene = load_scene("maps/map.cub")
except MapError as err:
    print(err)
```

`load_scene` returns a `Scene` with the map (`CubMap`), the `Player` and the
`SceneConfig`. Other pieces:

- `cubcaster.xpm.load_xpm` reads a texture into an `Image`; `parse_xpm_text`
  parses XPM text directly. Both raise `XpmError` on bad data.
- `cubcaster.raycast.cast_ray` casts a single screen column against a map and
  returns a `Ray`; `wall_face` and `texture_column` tell which face and texture
  column it hit.
- `cubcaster.render.Textures.load` loads the four wall textures from a
  `SceneConfig`, and `render_frame` draws a whole view into a `Frame`.
- `cubcaster.app.Game` holds a running game; `key_down`, `key_up` and `step`
  drive it without a window.

## What it does not do

There are no sprites, doors, minimap, mouse look or sound. The window size is
fixed, and textures must be XPM files.

## Running the tests

```
pip install .[test]
pytest
```