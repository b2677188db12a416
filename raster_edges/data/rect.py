"""
Axis-aligned rectangles of non-zero width and height.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class RectPosition:
    """Top-left corner of a rectangle, waiting for a size."""
    left: int
    top: int

    def of_size(self, width: int, height: int) -> "Rect":
        return Rect(self.left, self.top, width, height)


@dataclass(frozen=True)
class Rect:
    """
    A rectangular region of non-zero width and height.

    left/top are the smallest coordinates covered; right/bottom are the
    greatest (inclusive).
    """
    left: int
    top: int
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0:
            raise ValueError(f"width must be strictly positive, got {self.width}")
        if self.height <= 0:
            raise ValueError(f"height must be strictly positive, got {self.height}")

    @staticmethod
    def at(x: int, y: int) -> RectPosition:
        """Rect.at(x, y).of_size(w, h) keeps coordinates and sizes apart."""
        return RectPosition(x, y)

    @classmethod
    def square(cls, center_x: int, center_y: int, side_length: int) -> "Rect":
        """Square of the given side centered on (center_x, center_y)."""
        half = side_length // 2
        return cls(center_x - half, center_y - half, side_length, side_length)

    @property
    def right(self) -> int:
        return self.left + self.width - 1

    @property
    def bottom(self) -> int:
        return self.top + self.height - 1

    def intersect(self, other: "Rect") -> Optional["Rect"]:
        """Intersection of two rects, or None if they are disjoint."""
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)

        if right < left or bottom < top:
            return None

        return Rect(left, top, right - left + 1, bottom - top + 1)

    def contains(self, x: Union[int, float], y: Union[int, float]) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom
