"""A minimal retained-mode scene: a list of items with bounding rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Iterator, List, Optional, Protocol, Tuple


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def is_null(self) -> bool:
        """True when the rectangle has neither width nor height."""
        return self.width == 0 and self.height == 0

    def united(self, other: "Rect") -> "Rect":
        """Return the smallest rectangle holding both rectangles."""
        if other.is_null:
            return self
        if self.is_null:
            return other
        left = min(self.left, other.left)
        top = min(self.top, other.top)
        right = max(self.right, other.right)
        bottom = max(self.bottom, other.bottom)
        return Rect(left, top, right - left, bottom - top)

    def center(self) -> Tuple[float, float]:
        """Return the centre point of the rectangle."""
        return (self.x + self.width / 2, self.y + self.height / 2)


NULL_RECT = Rect(0, 0, 0, 0)


class SceneItem(Protocol):
    def bounding_rect(self) -> Rect: ...


class Scene:
    """An ordered collection of drawable items; later items are drawn on top."""

    def __init__(self, scene_rect: Optional[Rect] = None) -> None:
        self.scene_rect = scene_rect
        self.items: List[SceneItem] = []

    def __iter__(self) -> Iterator[SceneItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, item: object) -> bool:
        return any(existing is item for existing in self.items)

    def add_item(self, item: SceneItem) -> SceneItem:
        """Add an item on top of the existing ones and return it."""
        self.items.append(item)
        return item

    def items_bounding_rect(self) -> Rect:
        """Return the rectangle covering every item, or a null rectangle."""
        return reduce(
            lambda acc, item: acc.united(item.bounding_rect()), self.items, NULL_RECT
        )

    def fit_to_items(self) -> Rect:
        """Shrink or grow the scene rectangle to exactly cover the items."""
        self.scene_rect = self.items_bounding_rect()
        return self.scene_rect