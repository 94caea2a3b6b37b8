import pytest
from PIL import Image

from pacmaze.sprites import SPRITE_SIZE, SpriteSheet, SpriteSheetError

TILE = 30
COLS = 12
ROWS = 6


def _tile_color(row, col):
    return (col * 20, row * 40, 100, 255)


@pytest.fixture
def sheet_image():
    img = Image.new("RGBA", (TILE * COLS, TILE * ROWS))
    for row in range(ROWS):
        for col in range(COLS):
            img.paste(_tile_color(row, col), (col * TILE, row * TILE, (col + 1) * TILE, (row + 1) * TILE))
    return img


def test_sprite_cuts_the_right_tile(sheet_image):
    sheet = SpriteSheet(sheet_image, TILE, COLS)
    tile = sheet.sprite(2, 3)
    assert tile.size == (TILE, TILE)
    assert tile.getpixel((0, 0)) == _tile_color(2, 3)
    assert tile.getpixel((TILE - 1, TILE - 1)) == _tile_color(2, 3)


def test_row_sprites_scaled(sheet_image):
    sheet = SpriteSheet(sheet_image, TILE, COLS)
    sprites = sheet.row_sprites(2, 2)
    assert len(sprites) == 2
    assert all(s.size == (SPRITE_SIZE, SPRITE_SIZE) for s in sprites)
    assert [s.getpixel((16, 16)) for s in sprites] == [_tile_color(2, 0), _tile_color(2, 1)]


def test_load_from_file_round_trip(sheet_image, tmp_path):
    path = tmp_path / "sheet.png"
    sheet_image.save(path)
    sheet = SpriteSheet(path, TILE, COLS)
    assert sheet.image.size == sheet_image.size
    assert sheet.sprite(5, 11).getpixel((1, 1)) == _tile_color(5, 11)


def test_missing_file_raises(tmp_path):
    with pytest.raises(SpriteSheetError):
        SpriteSheet(tmp_path / "missing.png", TILE, COLS)


def test_not_an_image_raises(tmp_path):
    path = tmp_path / "bad.png"
    path.write_text("not an image")
    with pytest.raises(SpriteSheetError):
        SpriteSheet(path, TILE, COLS)


def test_bad_tile_size(sheet_image):
    with pytest.raises(ValueError):
        SpriteSheet(sheet_image, 0, COLS)