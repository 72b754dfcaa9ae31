import pytest

from contestlib.convex_hull import Point, area
from contestlib.half_plane import INF, Halfplane, hp_intersect

CORNERS = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]


def _square_planes():
    return [Halfplane(CORNERS[i], CORNERS[(i + 1) % 4]) for i in range(4)]


def _close(p, q):
    return abs(p.x - q.x) < 1e-6 and abs(p.y - q.y) < 1e-6


def test_out_is_right_side():
    h = Halfplane(Point(0, 0), Point(1, 0))
    assert not h.out(Point(0, 1))
    assert h.out(Point(0, -1))
    assert not h.out(Point(3, 0))


def test_intersection_of_lines():
    horizontal = Halfplane(Point(0, 2), Point(1, 2))
    vertical = Halfplane(Point(3, 0), Point(3, 1))
    first = horizontal.intersection(vertical)
    second = vertical.intersection(horizontal)
    assert first.x == pytest.approx(3)
    assert first.y == pytest.approx(2)
    assert second.x == pytest.approx(3)
    assert second.y == pytest.approx(2)


def test_parallel_lines_raise():
    a = Halfplane(Point(0, 0), Point(1, 0))
    b = Halfplane(Point(0, 1), Point(1, 1))
    with pytest.raises(ValueError):
        a.intersection(b)


def test_square_intersection():
    poly = hp_intersect(_square_planes())
    assert len(poly) == len(CORNERS)
    assert area(poly) == pytest.approx(area(CORNERS))
    for c in CORNERS:
        assert any(_close(c, v) for v in poly)


def test_redundant_parallel_plane_is_ignored():
    planes = _square_planes() + [Halfplane(Point(0, -5), Point(1, -5))]
    poly = hp_intersect(planes)
    assert area(poly) == pytest.approx(area(CORNERS))


def test_input_list_not_modified():
    planes = _square_planes()
    hp_intersect(planes)
    assert len(planes) == len(CORNERS)


def test_empty_intersection():
    left_of_zero = Halfplane(Point(0, 0), Point(0, 1))
    right_of_one = Halfplane(Point(1, 1), Point(1, 0))
    assert hp_intersect([left_of_zero, right_of_one]) == []


def test_no_planes_gives_bounding_box():
    poly = hp_intersect([])
    assert len(poly) == 4
    assert area(poly) == pytest.approx((2 * INF) ** 2)