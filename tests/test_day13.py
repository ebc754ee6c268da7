import pytest

from advent2021.day13 import Axis, Fold, Point, part1, part2

EXAMPLE = """6,10
0,14
9,10
0,3
10,4
4,11
6,0
6,12
4,1
0,13
10,12
3,4
3,0
8,4
1,10
2,14
8,10
9,0

fold along y=7
fold along x=5"""


def test_fold_points():
    p = Point(1, 10).fold(Fold(Axis.Y, 7))
    assert p.x == 1
    assert p.y == 4


def test_fold_leaves_points_before_line():
    assert Point(3, 2).fold(Fold(Axis.X, 5)) == Point(3, 2)
    assert Point(5, 2).fold(Fold(Axis.X, 5)) == Point(5, 2)


def test_fold_x():
    assert Point(14, 3).fold(Fold(Axis.X, 11)) == Point(8, 3)


def test_example():
    assert part1(EXAMPLE) == 17
    assert part2(EXAMPLE) == 16


def test_parse_fold():
    assert Fold.parse("fold along x=5") == Fold(Axis.X, 5)
    assert Fold.parse("fold along y=7") == Fold(Axis.Y, 7)


def test_parse_fold_unknown_axis():
    with pytest.raises(ValueError):
        Fold.parse("fold along z=3")


def test_parse_point():
    assert Point.parse("10,4") == Point(10, 4)
    with pytest.raises(ValueError):
        Point.parse("10")


def test_fold_past_edge():
    with pytest.raises(ValueError):
        Point(10, 0).fold(Fold(Axis.X, 2))