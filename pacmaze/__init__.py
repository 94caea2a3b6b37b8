"""A Pac-Man style maze scene with walls, dots and an animated ghost, plus a Tk viewer."""

__version__ = "0.1.0"