# raycube

`raycube` is a small first-person raycasting engine. It renders a tile map in
pseudo-3D with textured walls, billboard sprites, flat floor and ceiling
colours and a top-down minimap. It can show the scene in a pygame window or
save a single frame as a 24-bit BMP file.

## Modules

- `raycube.colors`: packing of `0xTTRRGGBB` colours (`create_trgb`) and
  masking out their channels (`get_t`, `get_r`, `get_g`, `get_b`), plus the
  X11 colour-name table (`color_by_name`, `text_to_rgb`).
- `raycube.errors`: `ErrorCode`, the `CubError` exception that carries one,
  and `error_message`, which gives the message for a code.
- `raycube.image`: `Image`, a width × height list of packed colours with
  `blank`, `pixel`, `put` and `fill_rows`.
- `raycube.xpm`: an XPM texture reader (`parse_xpm`, `load_xpm`, raising
  `XpmError`), with the helpers `split_words`, `find_unquoted`,
  `strip_comments` and `quoted_lines`.
- `raycube.bmp`: a BMP writer (`bmp_header`, `encode_bmp`, `write_bmp`).
- `raycube.world`: `Settings`, `GameMap`, `View` and the helpers
  `spawn_rotation`, `normal_rad`, `distance_points` and `calculate_tile_size`.
- `raycube.player`: `Player`, whose `press` and `release` take `Key` codes;
  `Key.ESC` raises `QuitRequested`.
- `raycube.raycast`: the grid raycaster (`cast_ray`, `horizontal_hit`,
  `vertical_hit`, `facing`, `RayHit`, `texture_offset`).
- `raycube.sprites`: `Sprite`, `sprites_from_map` and `update_sprites`, which
  works out visibility, sorts sprites farthest first and places them on
  screen.
- `raycube.render`: `Scene`, which draws a complete frame into an `Image`.
- `raycube.app`: `load_scene`, `save_screenshot`, `translate_key` and `run`.

## Maps

A map is a list of rows made of these characters:

| Character       | Meaning                            |
| --------------- | ---------------------------------- |
| `1`             | wall                               |
| `0`             | empty floor                        |
| `2`             | sprite                             |
| `N` `S` `E` `W` | player start and facing direction  |

`GameMap.from_lines(rows, width, height)` picks the largest whole tile size
that fits the map into a third of a `width` × `height` screen; that is the
size of the minimap. It raises `ValueError` if the map is too large for the
screen. `GameMap.player_spawn()` raises `ValueError` if there is no start
letter, and takes the last one if there are several.

## Examples

Colours:

```python
from raycube.colors import color_by_name, create_trgb, text_to_rgb

assert create_trgb(0, 255, 0, 0) == 0xFF0000
assert color_by_name("snow") == 0xFFFAFA
assert text_to_rgb("#00ff00") == 0x00FF00
```

Reading an XPM texture from its strings:

```python
from raycube.xpm import parse_xpm

texture = parse_xpm(["2 2 2 1", "a c #ff0000", "b c #0000ff", "ab", "ba"])
assert texture.pixel(0, 0) == 0xFF0000
assert texture.pixel(1, 0) == 0x0000FF
```

Casting a ray through a map:

```python
from raycube.world import GameMap
from raycube.raycast import cast_ray

rows = [
    "11111",
    "10001",
    "10N01",
    "10001",
    "11111",
]
game_map = GameMap.from_lines(rows, 640, 480)
x, y, angle = game_map.player_spawn()
hit = cast_ray(game_map, x, y, 0.0)
print(hit.distance, hit.vertical)
```

Writing an image as a BMP file:

```python
from raycube.image import Image
from raycube.bmp import write_bmp

image = Image.blank(320, 200)
image.fill_rows(0, 100, 0x87CEEB)
image.fill_rows(100, 200, 0x556B2F)
write_bmp(image, "frame.bmp")
```

Rendering a scene and playing it:

```python
from raycube.world import Settings
from raycube.app import run, save_screenshot

settings = Settings(
    width=640,
    height=480,
    north="textures/north.xpm",
    south="textures/south.xpm",
    west="textures/west.xpm",
    east="textures/east.xpm",
    sprite="textures/barrel.xpm",
    floor=(80, 60, 40),
    ceiling=(135, 206, 235),
    map_lines=["11111", "10201", "10N01", "10001", "11111"],
)
save_screenshot(settings, "img.bmp")  # the first frame, as a BMP
run(settings)                          # opens a window until it is closed
```

`load_scene` reads the five XPM textures and raises `CubError` with
`BADNO`, `BADSO`, `BADWE`, `BADEA` or `BADSPRITE` when one cannot be read.
In the window, `W`, `A`, `S` and `D` move the player, the left and right
arrows turn, and `Esc` or closing the window quits; `run` returns the number
of frames drawn.

## What it does not do

There is no reader for scene description files and no command-line program:
a `Settings` object has to be built in Python, as above. The `ErrorCode`
values for malformed resolutions, colours and maps exist, but nothing in the
package checks a `Settings` object for them.