"""Cutting tiles out of a sprite sheet image."""

from __future__ import annotations

import os
from typing import List, Union

from PIL import Image

SPRITE_SIZE = 32


class SpriteSheetError(Exception):
    """Raised when a sprite sheet cannot be loaded."""


class SpriteSheet:
    """A grid of square tiles in one image."""

    def __init__(
        self,
        source: Union[str, "os.PathLike[str]", Image.Image],
        tile_size: int,
        num_columns: int,
    ) -> None:
        if tile_size <= 0:
            raise ValueError(f"tile size must be positive, got {tile_size}")
        self.tile_size = tile_size
        self.num_columns = num_columns
        if isinstance(source, Image.Image):
            self.image = source.convert("RGBA")
        else:
            try:
                with Image.open(source) as img:
                    self.image = img.convert("RGBA")
            except OSError as exc:
                raise SpriteSheetError(f"cannot load sprite sheet: {source}") from exc

    def sprite(self, row: int, col: int) -> Image.Image:
        """Return the tile at the given row and column."""
        left = col * self.tile_size
        top = row * self.tile_size
        return self.image.crop((left, top, left + self.tile_size, top + self.tile_size))

    def row_sprites(self, row: int, max_columns: int) -> List[Image.Image]:
        """Return the first tiles of a row, each scaled to the sprite size."""
        return [
            self.sprite(row, col).resize(
                (SPRITE_SIZE, SPRITE_SIZE), Image.Resampling.NEAREST
            )
            for col in range(max_columns)
        ]