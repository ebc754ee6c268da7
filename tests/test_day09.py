import pytest

from advent2021.day09 import HeightMap, part1, part2

EXAMPLE = """2199943210
3987894921
9856789892
8767896789
9899965678"""


def test_low_points_and_basin_size():
    space = HeightMap.parse(EXAMPLE)
    low_points = space.find_low_points()
    assert low_points == [(0, 1), (0, 9), (2, 2), (4, 6)]
    assert [space.basin_size(p) for p in low_points] == [3, 9, 14, 9]


def test_part1_example():
    assert part1(EXAMPLE) == 15


def test_part2_example():
    assert part2(EXAMPLE) == 1134


def test_part2_needs_three_basins():
    with pytest.raises(ValueError):
        part2("19\n99")


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        HeightMap.parse("123\n12")


def test_non_digit_rejected():
    with pytest.raises(ValueError):
        HeightMap.parse("12a")