"""Assembly of the playing field: maze, food and a ghost."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

from pacmaze.food import Food
from pacmaze.ghost import Ghost
from pacmaze.maze import Maze
from pacmaze.scene import Rect, Scene
from pacmaze.sprites import SpriteSheet

TITLE = "Pac-Man"
CELL_SIZE = 35
INITIAL_SCENE_RECT = Rect(0, 0, 448, 496)
SPRITE_TILE_SIZE = 30
SPRITE_COLUMNS = 12
GHOST_START = (5, 5)

MAP = (
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 1, 1, 1, 1, 0, 1, 1, 1, 0, 1, 0, 1, 1, 1, 1, 0, 1),
    (1, 0, 1, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 1, 0, 1),
    (1, 0, 1, 0, 1, 1, 1, 1, 0, 1, 0, 1, 1, 1, 1, 0, 1, 0, 1),
    (1, 0, 1, 0, 1, 0, 0, 1, 0, 1, 0, 1, 0, 0, 1, 0, 1, 0, 1),
    (1, 0, 1, 0, 1, 0, 1, 1, 0, 1, 0, 1, 1, 0, 1, 0, 1, 0, 1),
    (1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 1),
    (1, 0, 1, 0, 1, 0, 1, 1, 1, 1, 1, 1, 1, 0, 1, 0, 1, 0, 1),
    (1, 0, 1, 0, 1, 0, 0, 1, 0, 0, 0, 1, 0, 0, 1, 0, 1, 0, 1),
    (1, 0, 1, 0, 1, 1, 0, 1, 1, 1, 1, 1, 0, 1, 1, 0, 1, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 1),
    (1, 1, 1, 1, 1, 1, 0, 1, 0, 1, 0, 1, 0, 1, 1, 1, 1, 1, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
)


@dataclass
class Game:
    """Everything on the playing field."""

    scene: Scene
    maze: Maze
    food: Food
    sheet: SpriteSheet
    ghost: Ghost


def build_game(sprite_path: Union[str, "os.PathLike[str]"]) -> Game:
    """Lay out the maze, its food and a red ghost, then fit the scene."""
    scene = Scene(INITIAL_SCENE_RECT)
    maze = Maze(scene, CELL_SIZE)
    maze.draw(MAP)
    food = Food(scene, CELL_SIZE)
    food.draw(MAP)
    sheet = SpriteSheet(sprite_path, SPRITE_TILE_SIZE, SPRITE_COLUMNS)
    ghost = Ghost(sheet, scene, *GHOST_START, tile_size=CELL_SIZE)
    scene.fit_to_items()
    return Game(scene=scene, maze=maze, food=food, sheet=sheet, ghost=ghost)