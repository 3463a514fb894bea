"""Integer rectangles with inclusive edges, used for drawing and hit tests."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle whose right and bottom edges are inclusive."""

    x: int
    y: int
    width: int
    height: int

    def right(self) -> int:
        """Return the x coordinate of the last column inside the rectangle."""
        return self.x + self.width - 1

    def bottom(self) -> int:
        """Return the y coordinate of the last row inside the rectangle."""
        return self.y + self.height - 1

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles share at least one pixel."""
        if self.is_empty or other.is_empty:
            return False
        if self.x > other.right() or other.x > self.right():
            return False
        if self.y > other.bottom() or other.y > self.bottom():
            return False
        return True