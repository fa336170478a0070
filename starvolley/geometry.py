"""Screen geometry: window size, points, rectangles and overlap tests."""

from __future__ import annotations

from dataclasses import dataclass

WIN_WIDTH = 1024
WIN_HEIGHT = 768


@dataclass(frozen=True)
class Point:
    """A position on screen, in pixels."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle anchored at its top-left corner."""

    x: float
    y: float
    width: float
    height: float

    def center(self) -> Point:
        """Return the point in the middle of the rectangle."""
        return Point(self.x + self.width / 2, self.y + self.height / 2)


def intersects(a: Rect, b: Rect) -> bool:
    """Return True when the two rectangles overlap; touching edges do not count."""
    x_overlap = a.x < b.x + b.width and b.x < a.x + a.width
    y_overlap = a.y < b.y + b.height and b.y < a.y + a.height
    return x_overlap and y_overlap