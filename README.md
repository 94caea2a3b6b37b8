# pacmaze

A small Pac-Man style maze scene. It lays out a fixed labyrinth of 15 rows by
19 columns in 35-pixel cells. Walls are blue and corridors are black. Every
corridor cell holds a white dot. A ghost stands on tile (5, 5) and animates by
cycling through two frames cut from a sprite sheet, one frame every 100 ms.

## Installing

```
pip install .
```

The window uses `tkinter` from the standard library, together with Pillow's
`ImageTk`. Your Python installation therefore needs Tk support.

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
pacmaze path/to/spritesheet.png
```

The one required argument is the sprite sheet image. It is read as a grid of
30-pixel tiles. The ghost's frames are the first two tiles of row 2, counting
from 0, and each is scaled to 32 × 32. No sprite sheet ships with the package.

The command first opens a window with a **Play** button. Pressing it shows the
maze, the dots and the animated ghost. If the image cannot be loaded, the
command prints an error to standard error and exits with status 1.

## What it does not do

This is a scene and a viewer, not a playable game. It has no Pac-Man character
and reads no keyboard input. The ghost stays on its tile and only animates.
Dots cannot be eaten, and there is no score, no lives and no level progression.

## Using it as a library

The scene model does not depend on any window system, so you can build it and
inspect it directly:

```python
from pacmaze.game import build_game

game = build_game("spritesheet.png")
print(len(game.scene), game.scene.scene_rect)
```

`build_game` returns a `Game` dataclass with `scene`, `maze`, `food`, `sheet`
and `ghost`. It works in this order:

1. It starts from a 448 × 496 scene rectangle.
2. It draws the maze and then the food.
3. It loads the sprite sheet and places the ghost.
4. It fits the scene rectangle to all the items.

The layout itself is available as `pacmaze.game.MAP`.

The building blocks can also be used one at a time:

- `pacmaze.scene`
  - `Rect` has `x`, `y`, `width` and `height`. It also provides `left`, `top`,
    `right`, `bottom`, `is_null`, `united(other)` and `center()`.
  - `Scene` holds items in stacking order. Use `add_item(item)` to add one.
    `items_bounding_rect()` returns a rectangle covering all items, or a null
    rectangle when the scene is empty. `fit_to_items()` sets `scene_rect` to
    that rectangle.
- `pacmaze.block`
  - `BlockKind` is `PATH = 0`, `WALL = 1` and `DOT = 2`.
  - `block_color(kind)` gives the fill colour: wall is blue, path is black,
    dot is yellow and any other value is gray.
  - `Block` is one square cell with a `color` and a `bounding_rect()`.
- `pacmaze.maze`
  - `Maze(scene, cell_size).draw(grid)` stores the grid.
  - It adds one `Block` per cell and returns the blocks.
- `pacmaze.food`
  - `Food(scene, block_size).draw(grid)` adds a white `Dot` of radius 5,
    centred in every cell whose value is 0, and returns the dots.
- `pacmaze.sprites`
  - `SpriteSheet(source, tile_size, num_columns)` takes a path or a PIL image.
  - `sprite(row, col)` crops one tile.
  - `row_sprites(row, max_columns)` returns the first tiles of a row, each
    scaled to 32 × 32.
  - An image that cannot be opened raises `SpriteSheetError`. A tile size that
    is not positive raises `ValueError`.
- `pacmaze.ghost`
  - `Ghost(sheet, scene, x, y, tile_size=35)` keeps a tile position.
  - `position` is the pixel centre of its tile.
  - `move(dx, dy)` shifts it by whole cells.
  - `advance_frame()` steps the animation and returns the new frame index.
  - `current_sprite()` returns the frame to draw.
  - `bounding_rect()` gives its extent in the scene.
- `pacmaze.app`
  - `render(canvas, scene)` draws blocks, dots and ghosts onto a PIL image.
  - `GameWindow(root, game)` shows the game in a Tk window. Its `tick()`
    advances the ghost, repaints and schedules the next tick.
  - `main()` is what the `pacmaze` command starts.