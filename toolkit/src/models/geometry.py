"""Geometry data structures for positions and canvas regions.

Coordinate convention:
- x increases to the right
- y increases upward (item positions report the top-left anchor)
- CanvasRegion stores top/bottom as the negated y of the region origin,
  see services.geometry.canvas_region
"""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """2D position or offset.

    Used for item anchors, canvas corners and translation offsets.
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = point"""
        return iter((self.x, self.y))

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> 'Point':
        return Point(-self.x, -self.y)

    def is_finite(self) -> bool:
        """False for the empty-collection sentinel (inf, -inf)"""
        return math.isfinite(self.x) and math.isfinite(self.y)

    def is_close(self, other: 'Point', tolerance: float = 1e-6) -> bool:
        return abs(self.x - other.x) <= tolerance and abs(self.y - other.y) <= tolerance


@dataclass(frozen=True)
class CanvasRegion:
    """Rectangular canvas bounds as [left, top, right, bottom].

    top is greater than bottom for a region with positive height.
    """
    left: float
    top: float
    right: float
    bottom: float

    def __iter__(self):
        return iter((self.left, self.top, self.right, self.bottom))

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    @property
    def top_left(self) -> Point:
        return Point(self.left, self.top)

    @property
    def bottom_left(self) -> Point:
        return Point(self.left, self.bottom)

    def contains(self, point: Point) -> bool:
        return self.left <= point.x <= self.right and self.bottom <= point.y <= self.top

    def intersects(self, other: 'CanvasRegion') -> bool:
        """Overlap test, touching edges count as intersecting"""
        return not (
            other.right < self.left
            or other.left > self.right
            or other.top < self.bottom
            or other.bottom > self.top
        )
