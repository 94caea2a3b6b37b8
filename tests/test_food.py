from pacmaze.food import DOT_RADIUS, Dot, Food
from pacmaze.scene import Rect, Scene


def test_dot_bounding_rect_is_centred():
    dot = Dot(50, 60)
    rect = dot.bounding_rect()
    assert rect.center() == (50, 60)
    assert rect.width == 2 * DOT_RADIUS == rect.height


def test_dots_only_on_path_cells():
    scene = Scene()
    dots = Food(scene, 20).draw([[1, 0, 2], [0, 1, 0]])
    assert len(dots) == 3
    assert scene.items == dots


def test_dots_centred_in_cells():
    size = 20
    grid = [[1, 0], [0, 1]]
    dots = Food(Scene(), size).draw(grid)
    cells = [(r, c) for r, row in enumerate(grid) for c, v in enumerate(row) if v == 0]
    for dot, (r, c) in zip(dots, cells):
        assert dot.bounding_rect().center() == Rect(c * size, r * size, size, size).center()


def test_no_path_cells_no_dots():
    scene = Scene()
    assert Food(scene, 35).draw([[1, 1], [2, 1]]) == []
    assert len(scene) == 0