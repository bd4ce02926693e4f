"""Convex hull by Andrew's monotone chain."""

from __future__ import annotations

from collections.abc import Sequence

Point = tuple[int, int]


def cross(a: Point, b: Point, c: Point) -> int:
    """Orientation of ``a, b, c``: positive ccw, negative cw, zero collinear."""
    return a[0] * (b[1] - c[1]) + b[0] * (c[1] - a[1]) + c[0] * (a[1] - b[1])


def convex_hull(points: Sequence[Point]) -> list[Point]:
    """Hull vertices in counter-clockwise order, collinear points dropped.

    Inputs of three or fewer points are returned unchanged.
    """
    if len(points) <= 3:
        return list(points)
    pts = sorted(points)
    hull: list[Point] = []
    for p in pts:
        while len(hull) >= 2 and cross(hull[-2], hull[-1], p) <= 0:
            hull.pop()
        hull.append(p)
    lower_len = len(hull) + 1
    for p in reversed(pts[:-1]):
        while len(hull) >= lower_len and cross(hull[-2], hull[-1], p) <= 0:
            hull.pop()
        hull.append(p)
    hull.pop()
    if len(hull) > 1 and hull[0] == hull[-1]:
        hull.pop()
    return hull