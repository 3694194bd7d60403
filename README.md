# raycub

raycub is a small first-person maze explorer. It reads a `.cub` scene file
and draws the maze in a pygame window with grid-based raycasting (DDA). The
floor and ceiling are flat colours, and each wall face gets a texture that
depends on which way it faces.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
raycub path/to/scene.cub
```

The command takes exactly one argument, and the file name must end in `.cub`
with a name in front of it. If the scene or one of its textures is invalid,
raycub prints `Error` and then a line that says what is wrong, and exits with
status 1. When the scene loads, it prints `Game initialized successfully` and
opens a 1280×720 window titled `Cub3D`.

## Controls

| Key          | Action              |
|--------------|---------------------|
| W / S        | move forward / back |
| A / D        | strafe left / right |
| Left / Right | turn                |
| Esc          | quit                |

You can also quit by closing the window. When the window loses focus, every
held movement key is released.

## The `.cub` format

The top of the file holds element lines. Each line is an identifier and one
value, separated by spaces or tabs:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE` and `EA` name the wall texture for each face. Each file must
  exist and be readable. Textures are loaded with Pillow, so any image format
  Pillow can open will work. A texture may be at most 1024×1024 pixels.
- `F` and `C` give the floor and ceiling colours as `R,G,B`. Each component is
  one to three digits with a value from 0 to 255. Leading, trailing and doubled
  commas are rejected.
- Every identifier may appear only once. A line with more than two words, an
  unknown identifier or a missing value is an error. Both colours must be
  given.

The map comes after the elements and ends the file:

```
111111
100001
10N001
111111
```

- `1` is a wall, `0` is open floor, and a space is outside the map.
- One of `N`, `S`, `E` or `W` marks where the player starts and which way the
  player faces. A map with no marker, or with more than one, is rejected.
- The map must be closed by walls. Each row must start and end with a wall,
  the last row must be a wall row, and no open cell may touch a space or the
  end of a row.
- The map must not contain blank lines, including lines made only of spaces.

## Using it as a library

The modules can also be used on their own:

```python
from raycub.cubfile import load_scene, parse_text
from raycub.game import spawn_player
from raycub.raycast import cast_ray_to_wall

scene = load_scene("maps/level.cub")     # raises raycub.model.CubError on bad input
player = spawn_player(scene)
hit = cast_ray_to_wall(player, scene, 1.0, 0.0)
print(hit.x, hit.y, hit.side, hit.map_x, hit.map_y)
```

- `raycub.cubfile.parse_text` checks scene text that is already in memory and
  returns a `raycub.model.Scene`.
- `raycub.game.load_texture` loads one image as a `raycub.model.Texture`.
- `raycub.render.render_frame(frame, player, scene, textures, clock)` advances
  the player by one frame and draws the full view into a `raycub.render.Frame`
  buffer of `0xRRGGBB` pixels, without opening a window.
- `raycub.game.Game` holds a scene, its textures and the player. `Game.step()`
  renders one frame, and `Game.run()` opens the window and loops.
- `raycub.player.FrameClock` is a simulated clock that advances one fixed
  60 fps frame each time it is read, so movement is the same on every machine.

## What it does not do

The player moves freely and can walk through walls, because there is no
collision detection. There are no sprites, doors, sound or minimap. Every frame
is drawn in pure Python, one pixel at a time, so the frame rate is modest.