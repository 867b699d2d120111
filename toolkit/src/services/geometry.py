"""
Artboard Toolkit - Geometry Service

Anchor math for canvases and item collections.

Frame of reference: every object is described by its top-left corner.
x grows to the right and y grows upward, so "top-left of a set" is the
smallest x and the LARGEST y.

Offsets always follow one convention: offset(a, b) = a - b, the
translation that carries b onto a.
"""

import math
from typing import Iterable, Optional, Sequence

import numpy as np

from models.capabilities import Positioned
from models.geometry import Point, CanvasRegion

# Sentinel returned by the top-left queries for an empty input
EMPTY_TOP_LEFT = Point(math.inf, -math.inf)


def offset(p1: Point, p2: Point) -> Point:
    """Return p1 - p2"""
    return Point(p1.x - p2.x, p1.y - p2.y)


def canvas_region(x: float, y: float, width: float, height: float) -> CanvasRegion:
    """Build a canvas region from an origin and a size

    top and bottom are negated relative to y: the region is
    [x, -y, x + width, -(y + height)].

    Raises:
        ValueError: If width or height is negative
    """
    if width < 0 or height < 0:
        raise ValueError(f"Canvas size must be non-negative, got {width} x {height}")
    return CanvasRegion(x, -y, width + x, -(height + y))


def _top_left_of_points(xs: Sequence[float], ys: Sequence[float]) -> Point:
    if len(xs) == 0:
        return EMPTY_TOP_LEFT
    return Point(float(np.min(xs)), float(np.max(ys)))


def top_left_of_canvas(canvas) -> Point:
    """Top-left corner of one canvas"""
    region = canvas.region
    return Point(region.left, region.top)


def top_left_of_canvases(canvases: Iterable) -> Point:
    """Leftmost x and topmost y over all canvases

    Returns EMPTY_TOP_LEFT (inf, -inf) when there are no canvases.
    """
    regions = [canvas.region for canvas in canvases]
    return _top_left_of_points([r.left for r in regions], [r.top for r in regions])


def bottom_left_of_canvases(canvases: Iterable) -> Point:
    """Leftmost x and lowest y over all canvases (inf, inf when empty)"""
    regions = [canvas.region for canvas in canvases]
    if not regions:
        return Point(math.inf, math.inf)
    return Point(float(np.min([r.left for r in regions])), float(np.min([r.bottom for r in regions])))


def top_left_of(collection: Iterable[Positioned]) -> Point:
    """Leftmost x and topmost y over the items' own anchors

    x and y are aggregated independently, so the result need not be the
    anchor of any single member.

    Returns EMPTY_TOP_LEFT (inf, -inf) for an empty collection; use
    find_top_left to get None instead.
    """
    positions = [item.position for item in collection]
    return _top_left_of_points([p.x for p in positions], [p.y for p in positions])


def find_top_left(collection: Iterable[Positioned]) -> Optional[Point]:
    """Same as top_left_of, but None for an empty collection"""
    point = top_left_of(collection)
    return point if point.is_finite() else None
