# dinorun

The game logic of a small side-scrolling dinosaur platformer, kept apart
from any graphics, sound or input library. Everything here is plain Python
with no third-party dependencies: it computes positions, rectangles, paths
and states, and leaves drawing them to whatever front end you attach.

## Modules

- `dinorun.geometry` — frozen `Point` (with `+`, `-` and
  `distance_manhattan`) and `Rect` values, plus `in_range(value, low, high)`
  and `join_path(folder, file)`.
- `dinorun.animation` — `Animation`, a list of sprite-sheet `Rect` frames
  advanced by a fractional `speed`. It can loop, ping-pong or play once;
  `update()` steps it, `current_frame()` gives the rectangle to show and
  `has_finished()` reports the end of a one-shot animation. At most 144
  frames are accepted.
- `dinorun.dynarray` — `DynArray`, a growable array whose `capacity()`
  grows in blocks of 16. Besides `push_back`, `pop`, `insert`,
  `insert_all`, `extend` (also `+=`), `at` and `flip`, it has in-place
  `bubble_sort`, `bubble_sort_optimized` and `comb_sort`, each returning
  the number of comparisons made.
- `dinorun.linkedlist` — `LinkedList`, a doubly linked list of `ListNode`
  handles with `add`, `remove(node)`, `at`, `find`, `insert_after`,
  `extend` and `bubble_sort`.
- `dinorun.sstring` — `SString`, a mutable string with `cut`, `trim`,
  `substitute`, `find` (occurrence count) and `substring`.
- `dinorun.timer` — `Timer` (milliseconds, `read`, `read_sec`, `check`)
  and `PerfTimer` (`read_ticks`, `read_ms`). Both take an optional clock
  function, which makes them easy to drive in tests.
- `dinorun.tilemap` — `parse_map(text)` and `load_map(path)` read Tiled
  `.tmx` XML into a `TileMap` of `TileSet`s, `MapLayer`s (with
  `Properties`) and `CheckPoint`s. A `TileMap` converts with
  `map_to_world` / `world_to_map` (orthogonal and isometric), finds the
  tileset for a tile id (`tileset_for`), gives `movement_cost` from the
  collision layer, builds a `walkability_map()` from the layer marked
  `Nodraw`, lists `collectables()` (coins and extra lives) and
  `activate_checkpoint(position)`.
- `dinorun.mapsearch` — `MapSearch`, an incremental search over a
  `TileMap`'s collision layer towards `tile_destiny`. Each
  `propagate_dijkstra()` or `propagate_astar()` call expands one tile; when
  the destination is taken from the frontier the call returns `False`, the
  path is stored in `path` (goal first) and the search restarts from the
  destination.
- `dinorun.pathfinding` — `PathFinding`, A* over a byte walkability grid
  set with `set_map(width, height, data)`. After `reset_path(origin)`,
  `compute_path_astar(origin, destination)` fills `last_path` from origin
  to destination and returns `True`, or returns `False` when no path is
  found.
- `dinorun.fonts` — `FontBank`, ten slots of bitmap `Font`s. `load`
  registers a texture object with its character table and returns an id;
  `glyph_rects(x, y, font_id, text, grey)` gives the screen position and
  texture section of each glyph.
- `dinorun.fade` — `FadeToBlack`, a frame-counting fade that cleans up one
  module and starts another at full black; `alpha()` gives the overlay
  opacity.
- `dinorun.render` — `Camera` (`destination_rect`, `screen_rect`, and
  `load_state` / `save_state` on an XML element), `circle_points` (one
  point per degree) and `WindowConfig.from_xml`, whose `flags()` returns
  the `WindowFlag`s a window would be created with.
- `dinorun.scenes` — `SceneType`, `LogoFade` (fade in, hold, fade out,
  then `INTRO`), `SceneTransition` (fade-to-black between scenes, with
  `request`, `update` and `overlay_alpha`), and `next_scene_after_win` /
  `next_scene_after_lose`.
- `dinorun.parallax` — `sky_offset(camera_x, camera_y)` for the first
  level's sky and `ParallaxStrip`, three leapfrogging sky copies for the
  second level.

## Install

```
pip install .
```

Run the tests with:

```
pip install .[test]
pytest
```

## Example

```python
from dinorun.geometry import Point
from dinorun.pathfinding import PathFinding
from dinorun.tilemap import load_map

tilemap = load_map("maps/map_1.tmx")
print(tilemap.map_to_world(3, 4))

walkability = tilemap.walkability_map()
if walkability is not None:
    width, height, cells = walkability
    finder = PathFinding()
    finder.set_map(width, height, cells)
    finder.reset_path(Point(1, 1))
    if finder.compute_path_astar(Point(1, 1), Point(5, 1)):
        print(list(finder.last_path))
```

## What it does not do

This package is not a playable game. It opens no window, draws nothing,
plays no sound and reads no keyboard or mouse input; textures are whatever
objects you pass in. There is no player, enemy or entity logic, no game
loop, no menus and no save-game files (only the camera's position can be
read from and written to an XML element). It installs no command.