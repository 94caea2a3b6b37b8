"""Dots placed on every open cell of the maze."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from pacmaze.scene import Rect, Scene

DOT_RADIUS = 5


@dataclass(frozen=True)
class Dot:
    """A round piece of food centred at a pixel position."""

    center_x: int
    center_y: int
    radius: int = DOT_RADIUS
    color: str = "white"

    def bounding_rect(self) -> Rect:
        return Rect(
            self.center_x - self.radius,
            self.center_y - self.radius,
            2 * self.radius,
            2 * self.radius,
        )


class Food:
    """Places dots into a scene for a grid of cells."""

    def __init__(self, scene: Scene, block_size: int) -> None:
        self.scene = scene
        self.block_size = block_size

    def draw(self, grid: Iterable[Iterable[int]]) -> List[Dot]:
        """Add a dot in the centre of every path cell and return the dots."""
        half = self.block_size // 2
        dots = [
            Dot(col * self.block_size + half, row * self.block_size + half)
            for row, cells in enumerate(grid)
            for col, cell in enumerate(cells)
            if cell == 0
        ]
        for dot in dots:
            self.scene.add_item(dot)
        return dots