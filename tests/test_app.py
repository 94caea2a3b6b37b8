from PIL import Image, ImageColor

from pacmaze.app import main, render
from pacmaze.block import Block
from pacmaze.food import Dot
from pacmaze.ghost import Ghost
from pacmaze.scene import Rect, Scene
from pacmaze.sprites import SpriteSheet


def test_render_block_colors():
    scene = Scene()
    scene.add_item(Block(1, 0, 0, 35))
    scene.add_item(Block(2, 35, 0, 35))
    scene.fit_to_items()
    canvas = render(Image.new("RGB", (70, 35)), scene)
    assert canvas.getpixel((17, 17)) == ImageColor.getrgb("blue")
    assert canvas.getpixel((52, 17)) == ImageColor.getrgb("yellow")


def test_render_uses_scene_offset():
    scene = Scene(Rect(35, 35, 35, 35))
    scene.add_item(Block(1, 35, 35, 35))
    canvas = render(Image.new("RGB", (35, 35)), scene)
    assert canvas.getpixel((5, 5)) == ImageColor.getrgb("blue")


def test_render_dot_on_top_of_block():
    scene = Scene()
    scene.add_item(Block(0, 0, 0, 35))
    scene.add_item(Dot(17, 17))
    scene.fit_to_items()
    canvas = render(Image.new("RGB", (35, 35)), scene)
    assert canvas.getpixel((17, 17)) == ImageColor.getrgb("white")
    assert canvas.getpixel((2, 17)) == ImageColor.getrgb("black")


def test_render_ghost_sprite():
    img = Image.new("RGBA", (360, 180), (0, 0, 0, 0))
    img.paste((255, 0, 0, 255), (0, 60, 60, 90))
    scene = Scene()
    ghost = Ghost(SpriteSheet(img, 30, 12), scene, 0, 0)
    scene.fit_to_items()
    canvas = render(Image.new("RGB", (40, 40)), scene)
    assert canvas.getpixel((10, 10)) == ImageColor.getrgb("red")
    assert ghost.current_sprite().getpixel((0, 0)) == (255, 0, 0, 255)


def test_main_missing_sprites(tmp_path, capsys):
    assert main([str(tmp_path / "missing.png")]) == 1
    assert "missing.png" in capsys.readouterr().err