"""The maze: one block per grid cell."""

from __future__ import annotations

from typing import Iterable, List

from pacmaze.block import Block
from pacmaze.scene import Scene


class Maze:
    """Builds the blocks of a maze grid into a scene."""

    def __init__(self, scene: Scene, cell_size: int) -> None:
        self.scene = scene
        self.cell_size = cell_size
        self.grid: List[List[int]] = []

    def draw(self, grid: Iterable[Iterable[int]]) -> List[Block]:
        """Remember the grid and add a block for each of its cells."""
        self.grid = [list(row) for row in grid]
        blocks = [
            Block(kind, col * self.cell_size, row * self.cell_size, self.cell_size)
            for row, cells in enumerate(self.grid)
            for col, kind in enumerate(cells)
        ]
        for block in blocks:
            self.scene.add_item(block)
        return blocks