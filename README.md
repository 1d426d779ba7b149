# raycub

raycub is a small first-person maze viewer. It reads a `.cub` scene file and
draws it with textured walls, one ray per screen column, in a fixed
1800×900 window opened with pygame.

## Installing

```
pip install .
```

## Playing

```
raycub path/to/scene.cub
```

Controls:

| Key            | Action        |
|----------------|---------------|
| W / S          | walk forward / backward |
| A / D          | step left / right |
| ← / →          | turn left / right |
| Esc, or closing the window | quit |

Movement is blocked by any cell that is not open floor; each axis is checked
on its own, so the player slides along walls.

When the command is given the wrong number of arguments, or the scene is
invalid, it writes `Error:` followed by the reason to standard error and
stops. A file name that does not end in `.cub` gives exit status 1; the other
failures exit with status 0.

## Scene files

A scene file must end in `.cub`. It starts with a header that names four wall
textures and two colours, in any order, and ends with the map:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png

F 220,100,0
C 225,30,0

111111
100001
10N001
111111
```

- `NO`, `SO`, `WE`, `EA` name the wall textures. Each may be any image file
  that Pillow can open, and must be exactly 1024×1024 pixels. A texture may
  not be given twice.
- `F` and `C` give the floor and ceiling colours as three numbers from 0 to
  255, separated by exactly two commas.
- Header lines may not contain tabs, and a line of nothing but spaces before
  the map is an error. Any other header entry is rejected.
- In the map, `1` is a wall, `0` is open floor, a space is outside the map,
  and one of `N`, `S`, `E`, `W` marks where the player starts and which way
  they face. There must be exactly one start position, and the open area must
  be closed in by walls.

## Using it as a library

The pieces behind the command can be used on their own:

- `raycub.scenefile.check_extension` checks a file name and
  `raycub.scenefile.read_map_lines` reads a scene file into lines, each
  keeping its newline.
- `raycub.parser.parse_scene` turns those lines into a `Scene` that holds the
  texture paths, colours and map rows.
- `raycub.validation.validate_map` checks the map, replaces the start mark
  with floor and places the `Player` (from `raycub.player`) on the scene.
- `raycub.colors.parse_color` turns an `R,G,B` string into a packed
  `0xRRGGBB` integer.
- `raycub.textures.load_textures` loads the four wall images from a mapping
  with the keys `no`, `ea`, `so` and `we`.
- `raycub.render.Renderer` draws a frame for a `Player` as a flat list of
  1800 × 900 packed pixels.
- `raycub.app.load_game` puts it all together into a `Game`, whose
  `handle_key` takes a pygame key name (`"w"`, `"left"`, `"escape"`, …) and
  whose `frame` renders the current view.

Problems with a scene file, its map or its textures raise
`raycub.scenefile.CubError`. The lower-level helpers
`raycub.colors.strict_atoi` and `raycub.player.spawn_player` raise
`ValueError` on bad input.

## What it does not do

The window size, field of view, walking speed and turning step are fixed;
there are no options to change them. There is no mouse look, no minimap, no
sprites or doors, and no sound.