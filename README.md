# raycub

raycub is a small first-person raycaster. It reads a `.cub` scene file that
names four wall textures in XPM format and gives a floor colour, a ceiling
colour and a grid map. It then draws the scene in a 1024×768 window with
textured walls, plain floor and ceiling colours, and a frame-rate counter.

## Installing

```
pip install .
```

To run the test suite as well, install with `pip install .[test]` and then run
`pytest`.

## Running

```
raycub path/to/level.cub
```

The file name must end in `.cub`. If the scene or one of its textures cannot
be read or fails a check, raycub prints `Error` and a short reason to standard
error, then exits with status 1.

### Controls

| Key          | Action              |
|--------------|---------------------|
| W / S        | move forward / back |
| A / D        | strafe left / right |
| Left / Right | turn                |
| Esc          | quit                |

Closing the window also quits. Holding a key repeats it. You cannot walk into
wall cells.

## Scene format

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

        1111111111
        1000000001
111111111000N00001
100000000000000001
111111111111111111
```

- Each of `NO`, `SO`, `WE`, `EA`, `F` and `C` must appear exactly once, before
  the map. Leading spaces and tabs in front of an identifier are allowed.
- A colour is written `R,G,B` with digits only, and each part must be in the
  range 0–255.
- The map may use only `0` (floor), `1` (wall), spaces (void), and exactly one
  of `N`, `S`, `E`, `W`, which sets the player's start cell and facing.
- The map must contain at least one `0`.
- The map is padded with void to its widest row. The first row, the first
  column and the last column may hold only walls or void. No floor or player
  cell may be next to void.
- The map must come last. Once it has started, a line that is empty or starts
  with a tab is an error.
- Textures are XPM images. Colours may be `#rrggbb`, a colour name (looked up
  without regard to case), or `None` for transparent.

## Library use

Each step can also be used on its own:

- `raycub.mapcheck.load_scene(path)` reads and checks a file, and returns a
  `Scene` with the padded `grid` and its `SceneParams`. Every problem is raised
  as `raycub.cubfile.CubError`, which is a `ValueError`.
- `raycub.params.parse_color(text)` returns an `(R, G, B)` tuple.
  `raycub.params.check_param(lines, map_index)` reads the header into
  `SceneParams`.
- `raycub.xpm.load_xpm(path)` and `raycub.xpm.parse_xpm(lines)` decode XPM data
  into a `raycub.image.Image`. Bad data raises `raycub.xpm.XpmError`.
- `raycub.image.Image` is a pixel buffer with `put_pixel`, `get_pixel`, `fill`
  and `to_rgb_bytes`.
- `raycub.player.Player.from_map(grid)` places the player. The player moves
  with `forward`, `backward`, `leftward` and `rightward`, and turns with
  `rotate_left` and `rotate_right`.
- `raycub.engine.cast_ray` traces a single screen column.
  `raycub.engine.render_frame` draws a whole view into an `Image`, using the
  `Textures` given by `Textures.load(params)`.
- `raycub.game.Game` ties these parts into the interactive loop.
  `Game.handle_key` and `Game.render` can be driven without a window.

## What it does not do

raycub draws walls only. It has no sprites, doors, minimap, mouse look, sound
or saved state. Rendering is done pixel by pixel in Python, so the frame rate
is modest at the default window size.