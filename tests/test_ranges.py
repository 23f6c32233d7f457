import pytest

from ecpuzzles.point import Point
from ecpuzzles.ranges import Range, parse_range

LOW = Point(0, 0, 0, -1)
SIZE = Point(10, 15, 60, 3)
SMALL = Range.from_min_and_size(Point(0, 0, -1), Point(2, 3, 2))


def test_from_min_and_size_round_trip():
    r = Range.from_min_and_size(LOW, SIZE)
    assert r.low == LOW
    assert r.size() == SIZE


def test_extent_matches_size():
    r = Range.from_min_and_size(LOW, SIZE)
    assert [r.extent(i) for i in range(4)] == list(SIZE)


def test_length_counts_iterated_points():
    assert SMALL.length() == len(list(SMALL))


def test_iteration_bounds_and_order():
    points = list(SMALL)
    assert points[0] == SMALL.low
    assert points[-1] == SMALL.high
    assert points == sorted(points, key=tuple)
    assert len(set(points)) == len(points)


def test_index_matches_iteration_position():
    for position, p in enumerate(SMALL):
        assert SMALL.index(p) == position
        assert SMALL.try_index(p) == position


def test_contains_corners_only_inside():
    one = Point.one(3)
    assert SMALL.contains(SMALL.low)
    assert SMALL.contains(SMALL.high)
    assert not SMALL.contains(SMALL.high + one)
    assert not SMALL.contains(SMALL.low - one)


def test_try_index_outside_is_none():
    assert SMALL.try_index(SMALL.high + Point.one(3)) is None


def test_contains_wrong_dimensions():
    with pytest.raises(ValueError):
        SMALL.contains(Point(0, 0))


def test_wrap_is_periodic():
    size = SMALL.size()
    for p in SMALL:
        assert SMALL.wrap(p) == p
        assert SMALL.wrap(p + size) == p
        assert SMALL.wrap(p - size) == p
        assert SMALL.wrap(p + size + size) == p


def test_project_drops_trailing_axes():
    r = Range.from_min_and_size(LOW, SIZE)
    projected = r.project(3)
    assert projected.low == LOW.project(3)
    assert projected.size() == SIZE.project(3)


def test_str_parse_round_trip():
    assert parse_range(str(SMALL), 3) == SMALL


def test_parse_range():
    assert parse_range("0,0~1,2", 2) == Range(Point(0, 0), Point(1, 2))


def test_parse_range_without_separator():
    with pytest.raises(ValueError):
        parse_range("0,0,1,2", 2)


def test_mismatched_corners():
    with pytest.raises(ValueError):
        Range(Point(0, 0), Point(1, 1, 1))