import math

import pytest

from crosseditor.geom import (
    Line,
    Point,
    angle,
    angle_rad,
    arrow_points,
    bezier,
    even_lines,
    factorial,
    first_intersection,
    intersect_lines,
    intersect_segments,
    lane_line,
    length,
    line_coefficients,
    mid_lines,
    parallel_line,
    point_at_angle,
    point_by_length,
    polyline_length,
    polynomial,
    rect,
    rect_lens,
    split_at_intersection,
)

BASE = [Point(1, 5), Point(10, 5), Point(20, 5)]


def _close(p, q):
    return p.x == pytest.approx(q.x, abs=1e-9) and p.y == pytest.approx(q.y, abs=1e-9)


def test_point_arithmetic_and_rounding():
    p = Point(1, 2) + Point(3, 4) - Point(1, 1)
    assert p == Point(3, 5)
    assert Point(2.6, -2.4).rounded() == Point(3, -2)
    assert Point().is_null
    assert not Point(0, 1).is_null


def test_factorial_recurrence():
    assert factorial(0) == 1
    for n in range(1, 10):
        assert factorial(n) == n * factorial(n - 1)


@pytest.mark.parametrize("t", [0.0, 0.25, 0.5, 0.9])
def test_polynomial_partition_of_unity(t):
    assert sum(polynomial(i, 4, t) for i in range(5)) == pytest.approx(1.0)


def test_bezier_endpoints_and_line():
    nodes = [Point(0, 0), Point(5, 5), Point(10, 0)]
    curve = bezier(nodes)
    assert curve[0] == nodes[0]
    assert curve[-1] == nodes[-1]
    straight = bezier([Point(0, 0), Point(4, 4)], 0.1)
    assert all(p.x == pytest.approx(p.y) for p in straight)
    assert bezier([]) == []
    with pytest.raises(ValueError):
        bezier(nodes, 0)


def test_line_coefficients_contain_points():
    b, e = Point(1, 2), Point(7, -3)
    line = line_coefficients(b, e)
    for p in (b, e):
        assert line.a * p.x + line.b * p.y + line.c == pytest.approx(0)


def test_length_properties():
    a, b, c = Point(1, 1), Point(4, 5), Point(-2, 3)
    assert length(a, a) == 0
    assert length(a, b) == length(b, a)
    assert length(a, c) <= length(a, b) + length(b, c)


def test_polyline_length():
    pts = [Point(0, 0), Point(2, 0), Point(7, 0)]
    assert polyline_length(pts) == pytest.approx(length(pts[0], pts[-1]))
    with pytest.raises(ValueError):
        polyline_length([])


def test_point_by_length_distance():
    b, e = Point(0, 0), Point(10, 10)
    p = point_by_length(b, e, 3)
    assert length(p, e) == pytest.approx(3)
    assert p.x == pytest.approx(p.y)


def test_angles():
    assert angle(Point(0, 0), Point(1, 0)) == 0
    assert angle(Point(0, 0), Point(0, -1)) == 270
    for to in (Point(-1, -1), Point(3, 2), Point(-2, 5)):
        assert 0 <= angle(Point(0, 0), to) < 360
    assert angle_rad(Point(1, 1), Point(2, 3)) == pytest.approx(math.atan2(2, 1))


def test_intersect_lines():
    l1 = line_coefficients(Point(0, 0), Point(4, 2))
    l2 = line_coefficients(Point(0, 3), Point(3, 0))
    ix = intersect_lines(l1, l2)
    for line in (l1, l2):
        assert line.a * ix.x + line.b * ix.y + line.c == pytest.approx(0)
    parallel = line_coefficients(Point(0, 1), Point(4, 3))
    assert intersect_lines(l1, parallel) == Point()


def test_intersect_segments():
    ix = intersect_segments(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
    assert _close(ix, Point(1, 1))
    far = intersect_segments(Point(0, 0), Point(1, 1), Point(5, 0), Point(6, -1))
    assert far == Point()
    vert = intersect_segments(Point(3, 0), Point(3, 4), Point(1, 2), Point(6, 2))
    assert _close(vert, Point(3, 2))


def test_split_at_intersection():
    cur = [Point(0, 1), Point(2, 1), Point(4, 1), Point(6, 1)]
    cutter = [Point(3, 0), Point(3, 2)]
    before, after = split_at_intersection(cur, cutter)
    ix = first_intersection(cur, cutter)
    assert before[:2] == cur[:2]
    assert before[-1] == ix == after[0]
    assert after[1:] == cur[3:]
    assert ix.x == pytest.approx(3)


def test_split_without_intersection():
    cur = [Point(0, 1), Point(2, 1), Point(4, 1)]
    cutter = [Point(10, 0), Point(10, 2)]
    assert split_at_intersection(cur, cutter) == (cur[:-1], [])
    assert first_intersection(cur, cutter) == Point()


def test_parallel_line_offsets():
    up = parallel_line(BASE, 3, True)
    down = parallel_line(BASE, 3, False)
    assert len(up) == len(BASE) == len(down)
    for u, d, b in zip(up, down, BASE):
        assert u.x == pytest.approx(b.x)
        assert abs(u.y - b.y) == pytest.approx(3)
        assert (u.y - b.y) == pytest.approx(-(d.y - b.y))
    assert parallel_line(BASE, 3.9, True) == up
    assert parallel_line([], 3, True) == []


def test_rect_centred_on_point():
    pt = Point(5, 5)
    base = line_coefficients(Point(0, 5), Point(10, 5))
    for corners in (rect(pt, base, 10), rect(pt, base, 10, True), rect_lens(pt, base, 10)):
        assert len(corners) == 4
        cx = sum(c.x for c in corners) / 4
        cy = sum(c.y for c in corners) / 4
        assert _close(Point(cx, cy), pt)
        assert length(corners[0], corners[1]) == pytest.approx(length(corners[3], corners[2]))
    narrow = rect(pt, base, 10, True)
    wide = rect(pt, base, 10)
    assert length(narrow[0], narrow[1]) < length(wide[0], wide[1])


def test_line_shift_keeps_direction():
    line = Line(1, 2, 3)
    assert line.up(2).a == line.a and line.down(2).b == line.b
    perp = line.perpendicular(Point(1, 1))
    assert line.a * perp.a + line.b * perp.b == pytest.approx(0)


def test_point_at_angle():
    origin = Point(2, 3)
    p = point_at_angle(origin, 7, 1.2)
    assert length(origin, p) == pytest.approx(7)
    assert angle_rad(origin, p) == pytest.approx(1.2)


def test_arrow_points():
    begin, end = Point(0, 0), Point(10, 10)
    pts = arrow_points(begin, end, 4)
    assert len(pts) == 5
    assert pts[0] == pts[-1]
    assert pts[2] == end
    assert length(pts[0], end) == pytest.approx(4)
    assert length(pts[1], pts[0]) == pytest.approx(length(pts[3], pts[0]))


def test_even_lines():
    assert even_lines(1, 1)
    assert not even_lines(1, 2)
    assert even_lines(0, 0)


def test_mid_lines_symmetric():
    left, right = mid_lines(6, BASE)
    for l, r, b in zip(left, right, BASE):
        assert (l.y - b.y) == pytest.approx(-(r.y - b.y))


def test_lane_line():
    assert lane_line(0, BASE, 0, 4, True, 3) == parallel_line(BASE, 3, True)
    first = lane_line(0, BASE, 2, 4, False)
    second = lane_line(1, BASE, 2, 4, False)
    for a, b in zip(first, second):
        assert abs(b.y - a.y) == pytest.approx(4)