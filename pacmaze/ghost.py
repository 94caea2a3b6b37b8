"""An animated ghost standing on a maze cell."""

from __future__ import annotations

from typing import List, Optional, Tuple

from PIL import Image

from pacmaze.scene import Rect, Scene
from pacmaze.sprites import SpriteSheet

GHOST_ROW = 2
GHOST_FRAMES = 2
FRAME_INTERVAL_MS = 100
DEFAULT_TILE_SIZE = 35
DRAW_OFFSET = -15


class Ghost:
    """A ghost on a grid cell that cycles through its animation frames."""

    def __init__(
        self,
        sheet: SpriteSheet,
        scene: Scene,
        x: int,
        y: int,
        tile_size: int = DEFAULT_TILE_SIZE,
    ) -> None:
        self.x = x
        self.y = y
        self.tile_size = tile_size
        self.frame = 0
        self.sprites: List[Image.Image] = sheet.row_sprites(GHOST_ROW, GHOST_FRAMES)
        if self.sprites:
            scene.add_item(self)

    @property
    def position(self) -> Tuple[int, int]:
        """Pixel centre of the cell the ghost stands on."""
        half = self.tile_size // 2
        return (self.x * self.tile_size + half, self.y * self.tile_size + half)

    @property
    def draw_origin(self) -> Tuple[int, int]:
        """Top-left pixel at which the current sprite is drawn."""
        cx, cy = self.position
        return (cx + DRAW_OFFSET, cy + DRAW_OFFSET)

    def move(self, dx: int, dy: int) -> None:
        """Move by a number of cells."""
        self.x += dx
        self.y += dy

    def advance_frame(self) -> int:
        """Step to the next animation frame and return its index."""
        if self.sprites:
            self.frame = (self.frame + 1) % len(self.sprites)
        return self.frame

    def current_sprite(self) -> Optional[Image.Image]:
        return self.sprites[self.frame] if self.sprites else None

    def bounding_rect(self) -> Rect:
        cx, cy = self.position
        return Rect(cx - 16, cy - 16, 28, 30)