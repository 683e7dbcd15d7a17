"""Plane geometry helpers for drawing crossroads: lines, offsets, curves."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import pairwise
from typing import Iterable, Sequence

_FUZZ = 1e-12
_PI = 3.1415926535


@dataclass(frozen=True)
class Point:
    """A point on the plane; the origin doubles as the "no point" value."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    @property
    def is_null(self) -> bool:
        """True when both coordinates are (fuzzily) zero."""
        return abs(self.x) <= _FUZZ and abs(self.y) <= _FUZZ

    def rounded(self) -> Point:
        """Round both coordinates to the nearest integer, halves upwards."""
        return Point(math.floor(self.x + 0.5), math.floor(self.y + 0.5))


@dataclass(frozen=True)
class Line:
    """The line a*x + b*y + c = 0."""

    a: float
    b: float
    c: float

    def perpendicular(self, pt: Point) -> Line:
        """The line through ``pt`` perpendicular to this one."""
        return Line(-self.b, self.a, -self.a * pt.y + self.b * pt.x)

    def _norm(self) -> float:
        return math.sqrt(self.a * self.a + self.b * self.b)

    def down(self, length: float) -> Line:
        """This line shifted by ``length`` to one side."""
        return Line(self.a, self.b, self.c + length * self._norm())

    def up(self, length: float) -> Line:
        """This line shifted by ``length`` to the other side."""
        return Line(self.a, self.b, self.c - length * self._norm())


def factorial(n: int) -> int:
    """n! (1 for n < 1)."""
    return math.prod(range(1, n + 1))


def polynomial(i: int, n: int, t: float) -> float:
    """The i-th Bernstein basis polynomial of degree n at t."""
    binom = factorial(n) // (factorial(i) * factorial(n - i))
    return binom * t**i * (1 - t) ** (n - i)


def bezier(nodes: Sequence[Point], step: float = 0.05) -> list[Point]:
    """Sample the Bezier curve over ``nodes``; the last node closes the list."""
    if not nodes:
        return []
    if step <= 0:
        raise ValueError("step must be positive")
    degree = len(nodes) - 1
    result: list[Point] = []
    t = 0.0
    while t < 1:
        weights = [polynomial(i, degree, t) for i in range(degree + 1)]
        result.append(
            Point(
                sum(p.x * w for p, w in zip(nodes, weights)),
                sum(p.y * w for p, w in zip(nodes, weights)),
            )
        )
        t += step
    result.append(nodes[-1])
    return result


def line_coefficients(b: Point, e: Point) -> Line:
    """The line through ``b`` and ``e``."""
    return Line(b.y - e.y, e.x - b.x, b.x * e.y - e.x * b.y)


def length(b: Point, e: Point) -> float:
    """Distance between two points."""
    return math.hypot(e.x - b.x, e.y - b.y)


def polyline_length(points: Sequence[Point]) -> float:
    """Total length of a polyline."""
    if not points:
        raise ValueError("polyline has no points")
    return sum(length(a, b) for a, b in pairwise(points))


def point_by_length(b: Point, e: Point, distance: float) -> Point:
    """The point ``distance`` away from ``e`` towards ``b``."""
    return e + (b - e) * (distance / length(b, e))


def angle(center: Point, to: Point) -> int:
    """Whole degrees in [0, 360) of the direction from ``center`` to ``to``."""
    r = to - center
    degrees = int(math.atan2(r.y, r.x) * 180 / _PI)
    return degrees + 360 if degrees < 0 else degrees


def angle_rad(center: Point, to: Point) -> float:
    """Direction from ``center`` to ``to`` in radians."""
    r = to - center
    return math.atan2(r.y, r.x)


def intersect_lines(l1: Line, l2: Line) -> Point:
    """Intersection of two lines; the origin when they are parallel."""
    div = l1.a * l2.b - l2.a * l1.b
    if div == 0.0:
        return Point()
    return Point((l1.b * l2.c - l2.b * l1.c) / div, (l1.c * l2.a - l2.c * l1.a) / div)


def _ratio(num: float, den: float) -> float:
    return num / den if den != 0 else math.nan


def _within(r: float) -> bool:
    return 0 <= r <= 1


def intersect_segments(p00: Point, p01: Point, p10: Point, p11: Point) -> Point:
    """Intersection of segments p00-p01 and p10-p11; the origin if none."""
    l0 = line_coefficients(p00, p01)
    l1 = line_coefficients(p10, p11)
    div = l0.a * l1.b - l1.a * l0.b
    if div == 0.0:
        return Point()
    x = (l0.b * l1.c - l1.b * l0.c) / div
    y = (l0.c * l1.a - l1.c * l0.a) / div
    on_first = _within(_ratio(x - p00.x, p01.x - p00.x)) or _within(
        _ratio(y - p00.y, p01.y - p00.y)
    )
    on_second = _within(_ratio(x - p10.x, p11.x - p10.x)) or _within(
        _ratio(y - p10.y, p11.y - p10.y)
    )
    return Point(x, y) if on_first and on_second else Point()


def _first_hit(a: Point, b: Point, cutter: Sequence[Point]) -> Point | None:
    for c0, c1 in pairwise(cutter):
        hit = intersect_segments(a, b, c0, c1)
        if not hit.is_null:
            return hit
    return None


def split_at_intersection(
    cur: Sequence[Point], cutter: Sequence[Point]
) -> tuple[list[Point], list[Point]]:
    """Split ``cur`` where it first crosses ``cutter``.

    Both parts hold the crossing point; without a crossing the first part
    holds every point but the last and the second part is empty.
    """
    before: list[Point] = []
    after: list[Point] = []
    found = False
    for prev, point in pairwise(cur):
        if found:
            after.append(point)
            continue
        before.append(prev)
        hit = _first_hit(prev, point, cutter)
        if hit is not None:
            found = True
            before.append(hit)
            after.append(hit)
    return before, after


def first_intersection(cur: Sequence[Point], cutter: Sequence[Point]) -> Point:
    """First point where ``cur`` crosses ``cutter``; the origin if none."""
    for prev, point in pairwise(cur):
        hit = _first_hit(prev, point, cutter)
        if hit is not None:
            return hit
    return Point()


def _neighbours(points: Sequence[Point]) -> list[Point]:
    """Predecessor of each point; points equal to the first get none."""
    first = points[0]
    result: list[Point] = []
    mem = Point()
    for p in points:
        result.append(Point() if p == first else mem)
        mem = p
    return result


def _offset_point(before: Point, current: Point, nxt: Point, dist: int, up: bool) -> Point:
    if before.is_null and not nxt.is_null:
        vec = line_coefficients(nxt, current)
        shifted = vec.up(dist) if up else vec.down(dist)
    else:
        vec = line_coefficients(before, current)
        shifted = vec.down(dist) if up else vec.up(dist)
    return intersect_lines(shifted, vec.perpendicular(current))


def parallel_line(points: Sequence[Point], offset: float, up: bool) -> list[Point]:
    """A polyline running alongside ``points`` at a whole-unit ``offset``."""
    if not points:
        return []
    dist = int(offset)
    befores = _neighbours(points)
    nexts = list(reversed(_neighbours(list(reversed(points)))))
    shifted = (
        _offset_point(b, c, n, dist, up) for b, c, n in zip(befores, points, nexts)
    )
    return [p for p in shifted if not p.is_null]


def _corners(pt: Point, base: Line, half_along: int, half_across: int) -> tuple[Point, ...]:
    across = base.perpendicular(pt)
    top, bottom = across.up(half_along), across.down(half_along)
    left, right = base.up(half_across), base.down(half_across)
    return (
        intersect_lines(top, right),
        intersect_lines(bottom, right),
        intersect_lines(bottom, left),
        intersect_lines(top, left),
    )


def rect(pt: Point, base: Line, size: int, crosswalk: bool = False) -> tuple[Point, ...]:
    """Corners (right, bottom-right, bottom-left, left) of a box around ``pt``."""
    return _corners(pt, base, int(size * (0.6 if crosswalk else 0.8)), size)


def rect_lens(pt: Point, base: Line, size: int) -> tuple[Point, ...]:
    """Corners of the smaller box used for a lamp lens."""
    return _corners(pt, base, int(size * 0.7), int(size * 0.6))


def point_at_angle(origin: Point, distance: float, angle: float) -> Point:
    """The point ``distance`` away from ``origin`` in direction ``angle`` (rad)."""
    return Point(origin.x + distance * math.cos(angle), origin.y + distance * math.sin(angle))


def arrow_points(begin: Point, end: Point, arrow_len: int) -> list[Point]:
    """Closed outline of an arrow head pointing at ``end``."""
    mid = point_by_length(begin, end, arrow_len)
    line = line_coefficients(begin, end)
    across = line.perpendicular(mid)
    half = int(arrow_len / 2)
    p0 = intersect_lines(across, line.up(half))
    p1 = intersect_lines(across, line.down(half))
    return [mid, p0, end, p1, mid]


def even_lines(inbound: int, outbound: int) -> bool:
    """True when the total number of lanes is even."""
    return (inbound + outbound) % 2 == 0


def mid_lines(size: int, base_line: Sequence[Point]) -> tuple[list[Point], list[Point]]:
    """The two edges of a median strip of width ``size`` along ``base_line``."""
    half = int(size / 2)
    return parallel_line(base_line, half, False), parallel_line(base_line, half, True)


def lane_line(
    counter: int,
    base_line: Sequence[Point],
    mid_space: int,
    lane_width: int,
    outward: bool,
    extra: int = 0,
) -> list[Point]:
    """Lane ``counter`` beside the median along ``base_line``."""
    offset = int(mid_space / 2) + counter * lane_width + extra
    return parallel_line(base_line, offset, outward)