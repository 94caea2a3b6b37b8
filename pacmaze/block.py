"""Maze cells drawn as filled squares."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from pacmaze.scene import Rect


class BlockKind(IntEnum):
    """The values a maze grid cell may hold."""

    PATH = 0
    WALL = 1
    DOT = 2


_COLORS = {
    BlockKind.WALL: "blue",
    BlockKind.PATH: "black",
    BlockKind.DOT: "yellow",
}


def block_color(kind: int) -> str:
    """Return the fill colour for a cell kind; unknown kinds are gray."""
    return _COLORS.get(kind, "gray")


@dataclass(frozen=True)
class Block:
    """A square maze cell at a pixel position."""

    kind: int
    x: int
    y: int
    size: int

    @property
    def color(self) -> str:
        return block_color(self.kind)

    def bounding_rect(self) -> Rect:
        return Rect(self.x, self.y, self.size, self.size)