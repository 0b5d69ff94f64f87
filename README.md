# isoterra

A small isometric tile engine built on pygame. The package is a library;
it has no command to run.

- `isoterra.noise`: deterministic value noise with cosine interpolation in
  one, two and three dimensions (`rawnoise`, `noise1d`/`noise2d`/`noise3d`,
  `interpolate`, `smooth1d`/`smooth2d`/`smooth3d`, and the octave sums
  `pnoise1d`, `pnoise2d`, `pnoise3d`).
- `isoterra.isomap`: `IsoMap`, a layered tile grid, and `TileSet`, the clip
  rectangles cut from a tile sheet.
- `isoterra.terrain`: `generate_terrain` and `create_map`, which fill layer 0
  of a map with terrain. Heights come from seeded noise. Lone tiles are
  removed, slopes and inner corners are auto-tiled, empty cells become grass
  and the map border is cleared.
- `isoterra.iso_engine`: `IsoEngine`, the camera. It converts between
  isometric and cartesian points, scrolls at the window edges, zooms in
  steps of 0.25 between 1.0 and 3.0, centres on a point or on the tile under
  the mouse, picks the clicked tile and draws the visible part of the map.
  `GameMode` selects overview or object focus.
- `isoterra.texture`: `Texture`, an image with a clip rectangle, an angle
  and a `Flip`, and `RenderWindow`, a resizable window used as a context
  manager.
- `isoterra.texture_pool`: `TexturePool`, which holds textures under the
  base name of the file they were loaded from.
- `isoterra.timer`: `Timer`, a repeating millisecond interval.
- `isoterra.logger`: `Logger`, which writes levelled lines to a log file.
  It starts a new numbered file once a line limit is reached and can echo
  coloured lines to standard output.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Generating a map

```python
from isoterra.terrain import create_map

iso_map = create_map("Testmap", 64, 64, 2, 64, 1232, 20)
print(iso_map.get_tile(10, 10, 0))
```

`create_map(name, width, height, num_layers, tile_size, perlin_seed, terrain_height)`
builds an `IsoMap` and then calls `generate_terrain` on it.

An `IsoMap` handles its arguments as follows:

- Widths, heights and layer counts that are not positive fall back to 10, 10 and 1.
- Names are cut to 49 characters.
- The stored `tile_size` is half the size passed in.
- `get_tile` returns `-1` for any position outside the map.
- `set_tile` ignores positions outside the map.

`load_tile_set(texture, tile_width, tile_height)` cuts the texture into clip
rectangles row by row. It raises `ValueError` if the texture is missing or
smaller than one tile.

## Noise

```python
from isoterra.noise import pnoise2d

height = pnoise2d(3.5, 7.25, 0.5, 4, 42)
```

The same inputs always give the same value.

## Camera

```python
from isoterra.iso_engine import IsoEngine, GameMode

engine = IsoEngine(iso_map)
engine.set_game_mode(GameMode.OBJECT_FOCUS)
engine.center_map((320.0, 320.0), (8.0, 8.0))
engine.zoom_in()
```

The engine does not read the mouse itself. Pass the position in with
`update_mouse_pos(x, y)` and the frame time with
`scroll_map_with_mouse(delta_time)`.

Methods that need a map raise `NoMapError` when the engine has none:

- `get_tile_coordinates`
- `draw_iso_mouse`
- `get_mouse_tile_pos`
- `center_map_to_tile_under_mouse`
- `get_mouse_tile_click`

`set_game_mode` raises `ValueError` for an unknown mode.

## Drawing

```python
from isoterra.texture import RenderWindow
from isoterra.texture_pool import TexturePool

with RenderWindow("Isometric Game") as window:
    pool = TexturePool()
    pool.add("data/textures/isotiles.png")
    iso_map.load_tile_set(pool.get("isotiles.png"), 64, 80)
    drawn = engine.draw_iso_map(window.surface())
```

`Texture.from_file` raises `GraphicsError` when an image cannot be loaded.
`RenderWindow` raises `GraphicsError` when the window cannot be created or
PNG loading is unavailable.

In `TexturePool`:

- `add` loads a path once, and a base name already in the pool keeps its first texture.
- `get` and `remove` raise `KeyError` for unknown names.
- `TexturePool(loader)` accepts any callable that turns a path into a `Texture`.

## Timing

```python
from isoterra.timer import Timer

timer = Timer(500)
if timer.update():
    ...  # 500 ms have passed since the last signal
```

An optional `clock` callable returning milliseconds can replace the default
monotonic clock.

## Logging

```python
from isoterra.logger import Logger, LogLevel

log = Logger("./logs", "runlog", "log", LogLevel.INFO, True, True, 10000)
log.write_separator()
log.info("Loaded %d textures", 3)
```

Records go to `<directory>/<filename>.<extension>`. Once that file holds
`max_lines` lines, they go to `<filename>.1.<extension>`, then
`<filename>.2.<extension>`, and so on.

The directory is not created. If the file cannot be opened, an error is
printed to standard error and the record is dropped.

Records below the logger's level are skipped. `Logger.fatal` writes its line
and then raises `SystemExit(1)`. `default_logger()` returns one shared
logger with the default settings.

## What it does not do

isoterra provides the map, camera, textures and utilities, but not a game
built on them. It has no main loop, no event or keyboard handling, no
entities, scenes, fonts or sound, and no saving or loading of maps.