"""Pure rasterization helpers.

Everything here is free of surface state: functions take integer pixel
coordinates and return (or yield) pixel coordinates or booleans. The drawing
context composes them with pixel writes.

All coordinates are surface-relative integers. Nothing in this module raises
for degenerate input; an empty result is the answer for zero-length lines,
empty point lists and polygons with fewer than three vertices.
"""

from __future__ import annotations

import math
from typing import Iterable, Iterator, List, Optional, Sequence

from .models import Bounds, Point

__all__ = [
    "line_points",
    "is_in_polygon",
    "dedupe_points",
    "polygon_bounds",
    "parabola_y",
    "parabola_points",
]


def line_points(x0: int, y0: int, x1: int, y1: int) -> Iterator[Point]:
    """Yield the pixels of the segment (x0, y0)-(x1, y1) using Bresenham.

    The dominant axis is walked from its lower to its higher coordinate and
    the higher endpoint is excluded, so chained segments do not plot shared
    vertices twice and a zero-length segment yields nothing. Swapping the
    endpoints yields the same pixels.
    """
    steep = abs(y1 - y0) >= abs(x1 - x0)
    if (steep and y0 > y1) or (not steep and x0 > x1):
        x0, x1 = x1, x0
        y0, y1 = y1, y0

    dx = x1 - x0
    dy = y1 - y0
    if steep:
        # Step along y; "x" below is the dominant coordinate
        dx, dy = dy, dx
        x0, y0, x1, y1 = y0, x0, y1, x1

    yi = 1
    if dy < 0:
        yi = -1
        dy = -dy

    d = 2 * dy - dx
    y = y0
    for x in range(x0, x1):
        yield (y, x) if steep else (x, y)
        if d > 0:
            y += yi
            d -= 2 * dx
        d += 2 * dy


def is_in_polygon(x: int, y: int, points: Sequence[Point]) -> bool:
    """Return True when (x, y) lies inside the polygon, even-odd rule.

    Casts a horizontal ray and toggles on every edge it crosses (W. Randolph
    Franklin's pnpoly). Edges with no vertical extent never satisfy the
    straddle test, so the division is always defined. Points exactly on the
    boundary have no stable answer.
    """
    n = len(points)
    if n < 3:
        return False
    fx = float(x)
    fy = float(y)
    inside = False
    j = n - 1
    for i in range(n):
        ix, iy = float(points[i][0]), float(points[i][1])
        jx, jy = float(points[j][0]), float(points[j][1])
        if (iy > fy) != (jy > fy) and fx < (jx - ix) * (fy - iy) / (jy - iy) + ix:
            inside = not inside
        j = i
    return inside


def dedupe_points(points: Iterable[Point]) -> List[Point]:
    """Drop exact-coincident points, keeping first occurrences in order."""
    seen: set[Point] = set()
    out: List[Point] = []
    for px, py in points:
        p = (int(px), int(py))
        if p in seen:
            continue
        seen.add(p)
        out.append(p)
    return out


def polygon_bounds(points: Sequence[Point], clip: Bounds) -> Optional[Bounds]:
    """Bounding box of *points* (max vertex included) intersected with *clip*.

    Returns None when there are no points or the box lies outside *clip*.
    """
    if not points:
        return None
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    box = Bounds(
        max(min(xs), clip.min_x),
        max(min(ys), clip.min_y),
        min(max(xs) + 1, clip.max_x),
        min(max(ys) + 1, clip.max_y),
    )
    if box.is_empty():
        return None
    return box


def parabola_y(a: float, b: float, c: float, x: int) -> Optional[int]:
    """Evaluate a*x^2 + b*x + c rounded half-up, or None if not finite."""
    v = a * x * x + b * x + c
    if not math.isfinite(v):
        return None
    return int(math.floor(v + 0.5))


def parabola_points(
    a: float, b: float, c: float, x_start: int, x_stop: int, clip: Bounds
) -> Iterator[Point]:
    """Yield in-bounds parabola pixels for x in [x_start, x_stop).

    The x range is clamped to *clip* first; points whose y falls outside
    *clip* are skipped.
    """
    x_start = max(x_start, clip.min_x)
    x_stop = min(x_stop, clip.max_x)
    for x in range(x_start, x_stop):
        y = parabola_y(a, b, c, x)
        if y is not None and clip.contains(x, y):
            yield (x, y)
