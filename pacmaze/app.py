"""Rendering of the scene and the window the game runs in."""

from __future__ import annotations

import argparse
import math
import sys
from typing import List, Optional

from PIL import Image, ImageDraw

from pacmaze.block import Block
from pacmaze.food import Dot
from pacmaze.game import TITLE, Game, build_game
from pacmaze.ghost import FRAME_INTERVAL_MS, Ghost
from pacmaze.scene import Scene
from pacmaze.sprites import SpriteSheetError


def render(canvas: Image.Image, scene: Scene) -> Image.Image:
    """Draw every item of the scene onto the canvas, in stacking order."""
    area = scene.scene_rect or scene.items_bounding_rect()
    ox, oy = area.x, area.y
    draw = ImageDraw.Draw(canvas)
    for item in scene.items:
        if isinstance(item, Block):
            left, top = item.x - ox, item.y - oy
            draw.rectangle(
                [left, top, left + item.size - 1, top + item.size - 1],
                fill=item.color,
                outline="black",
            )
        elif isinstance(item, Dot):
            rect = item.bounding_rect()
            left, top = rect.x - ox, rect.y - oy
            draw.ellipse(
                [left, top, left + rect.width - 1, top + rect.height - 1],
                fill=item.color,
            )
        elif isinstance(item, Ghost):
            sprite = item.current_sprite()
            if sprite is not None:
                gx, gy = item.draw_origin
                canvas.paste(sprite, (int(gx - ox), int(gy - oy)), sprite)
    return canvas


class GameWindow:
    """Shows the game scene in a Tk window and animates it."""

    def __init__(self, root, game: Game) -> None:
        import tkinter as tk

        self.root = root
        self.game = game
        area = game.scene.scene_rect or game.scene.items_bounding_rect()
        self._size = (max(1, math.ceil(area.width)), max(1, math.ceil(area.height)))
        self._photo = None
        root.title(TITLE)
        self._label = tk.Label(root, borderwidth=0, highlightthickness=0)
        self._label.pack()
        self._redraw()
        self.root.after(FRAME_INTERVAL_MS, self.tick)

    def _redraw(self) -> None:
        from PIL import ImageTk

        frame = render(Image.new("RGB", self._size, "white"), self.game.scene)
        self._photo = ImageTk.PhotoImage(frame)
        self._label.configure(image=self._photo)

    def tick(self) -> None:
        """Advance the ghost animation, repaint and schedule the next tick."""
        self.game.ghost.advance_frame()
        self._redraw()
        self.root.after(FRAME_INTERVAL_MS, self.tick)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="pacmaze", description="Play the maze game.")
    parser.add_argument("sprites", help="path of the sprite sheet image")
    args = parser.parse_args(argv)

    try:
        game = build_game(args.sprites)
    except SpriteSheetError as exc:
        print(f"pacmaze: {exc}", file=sys.stderr)
        return 1

    import tkinter as tk

    root = tk.Tk()
    root.title("pacmaze")
    menu = tk.Frame(root)

    def play() -> None:
        menu.destroy()
        GameWindow(root, game)

    tk.Button(menu, text="Play", command=play).pack(padx=40, pady=40)
    menu.pack()
    root.mainloop()
    return 0