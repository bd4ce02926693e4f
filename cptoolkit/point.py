"""Two-dimensional points and vectors with tolerant comparisons."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

EPS = 1e-15


def to_rad(deg: float) -> float:
    """Degrees to radians."""
    return deg * math.pi / 180.0


def to_deg(rad: float) -> float:
    """Radians to degrees."""
    return rad * 180.0 / math.pi


def eq(a: float, b: float) -> bool:
    """Whether ``a`` and ``b`` are equal within ``EPS``."""
    return abs(a - b) <= EPS


def lt(a: float, b: float) -> bool:
    """Whether ``a`` is less than ``b`` by more than ``EPS``."""
    return a < b - EPS


def _fmt(v: float) -> str:
    return "0" if abs(v) < EPS else f"{v:g}"


@dataclass(frozen=True, eq=False)
class Point:
    """A point or vector; ordered by ``x`` then ``y`` with tolerance ``EPS``."""

    x: float = 0.0
    y: float = 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return eq(self.x, other.x) and eq(self.y, other.y)

    def __lt__(self, other: Point) -> bool:
        return lt(self.y, other.y) if eq(self.x, other.x) else lt(self.x, other.x)

    def __gt__(self, other: Point) -> bool:
        return lt(other.y, self.y) if eq(self.x, other.x) else lt(other.x, self.x)

    def __le__(self, other: Point) -> bool:
        return not self > other

    def __ge__(self, other: Point) -> bool:
        return not self < other

    def __add__(self, other: Point | float) -> Point:
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y)
        if isinstance(other, Real):
            return Point(self.x + other, self.y + other)
        return NotImplemented

    def __radd__(self, other: float) -> Point:
        return self + other

    def __sub__(self, other: Point | float) -> Point:
        if isinstance(other, Point):
            return Point(self.x - other.x, self.y - other.y)
        if isinstance(other, Real):
            return Point(self.x - other, self.y - other)
        return NotImplemented

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __mul__(self, v: float) -> Point:
        if not isinstance(v, Real):
            return NotImplemented
        return Point(self.x * v, self.y * v)

    def __rmul__(self, v: float) -> Point:
        return self * v

    def __truediv__(self, v: float) -> Point:
        if not isinstance(v, Real):
            return NotImplemented
        return Point(self.x / v, self.y / v)

    def sqmag(self) -> float:
        """Squared distance from the origin."""
        return self.x * self.x + self.y * self.y

    def mag(self) -> float:
        """Distance from the origin."""
        return math.sqrt(self.sqmag())

    def arg(self) -> float:
        """Angle with the positive x axis, in radians."""
        return math.atan2(self.y, self.x)

    def dot(self, p: Point) -> float:
        """Dot product with ``p``."""
        return self.x * p.x + self.y * p.y

    def cross(self, p: Point) -> float:
        """Cross product with ``p``; positive when ``p`` lies counter-clockwise."""
        return self.x * p.y - self.y * p.x

    def proj(self, p: Point) -> float:
        """Length of this vector's component along ``p``."""
        return self.dot(p) / p.mag()

    def unit_vector(self) -> Point:
        """Unit vector in the same direction; the origin for a zero vector."""
        if eq(self.x, 0) and eq(self.y, 0):
            return Point(0.0, 0.0)
        return self / self.mag()

    def rotate_cw(self, t: float, center: Point | None = None) -> Point:
        """Rotate ``t`` radians clockwise about ``center`` (the origin by default)."""
        if center is not None:
            return (self - center).rotate_cw(t) + center
        c, s = math.cos(t), math.sin(t)
        return Point(self.x * c + self.y * s, self.y * c - self.x * s)

    def rotate_ccw(self, t: float, center: Point | None = None) -> Point:
        """Rotate ``t`` radians counter-clockwise about ``center`` (the origin by default)."""
        if center is not None:
            return (self - center).rotate_ccw(t) + center
        c, s = math.cos(t), math.sin(t)
        return Point(self.x * c - self.y * s, self.x * s + self.y * c)

    def reflect(self, p: Point, q: Point | None = None) -> Point:
        """Reflect through point ``p``, or across the line through ``p`` and ``q``."""
        if q is None or p == q:
            return Point(2 * p.x - self.x, 2 * p.y - self.y)
        r, s = self - p, q - p
        r = Point(r.x * s.x + r.y * s.y, r.x * s.y - r.y * s.x) / s.sqmag()
        return Point(r.x * s.x - r.y * s.y, r.x * s.y + r.y * s.x) + p

    def __str__(self) -> str:
        return f"({_fmt(self.x)},{_fmt(self.y)})"