"""Screen dimensions and axis-aligned rectangles used for hit tests."""

from __future__ import annotations

from dataclasses import dataclass, replace

SCREEN_WIDTH = 640
SCREEN_HEIGHT = SCREEN_WIDTH // 4 * 3


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return min(self.x, self.x + self.width)

    @property
    def right(self) -> float:
        return max(self.x, self.x + self.width)

    @property
    def top(self) -> float:
        return min(self.y, self.y + self.height)

    @property
    def bottom(self) -> float:
        return max(self.y, self.y + self.height)

    def intersects(self, other: Rect) -> bool:
        """True if the two rectangles overlap by a non-zero area."""
        left = max(self.left, other.left)
        right = min(self.right, other.right)
        top = max(self.top, other.top)
        bottom = min(self.bottom, other.bottom)
        return left < right and top < bottom

    def contains(self, x: float, y: float) -> bool:
        """True if the point lies inside; the right and bottom edges are excluded."""
        return self.left <= x < self.right and self.top <= y < self.bottom

    def moved(self, dx: float, dy: float) -> Rect:
        """Return a copy shifted by the given offsets."""
        return replace(self, x=self.x + dx, y=self.y + dy)