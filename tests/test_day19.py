import pytest

from advent2021.day19 import (
    Point3D,
    Scanner,
    part1,
    part2,
    process_scanners,
    scanners_from_input,
)

OFFSET = Point3D(120, -35, 980)

SHARED = [
    Point3D(3 * i * i - 40 * i + 17, 11 * i - 250 + (i % 4) * 31, -7 * i * i + 90 - i)
    for i in range(12)
]
ONLY_FIRST = [Point3D(500, 600, -700), Point3D(-450, 320, 810), Point3D(123, -654, 321)]
ONLY_SECOND = [
    Point3D(-900, -800, 10),
    Point3D(77, 1500, -300),
    Point3D(1400, -20, 5),
    Point3D(-60, -1300, 990),
]


def _seen_from_second(p):
    d = p - OFFSET
    return Point3D(-d.x, d.y, -d.z)


def _section(index, points):
    lines = [f"--- scanner {index} ---"]
    lines.extend(f"{p.x},{p.y},{p.z}" for p in points)
    return "\n".join(lines)


FIRST_READINGS = SHARED + ONLY_FIRST
SECOND_READINGS = [_seen_from_second(p) for p in SHARED + ONLY_SECOND]
REPORT = _section(0, FIRST_READINGS) + "\n\n" + _section(1, SECOND_READINGS)


def test_matching():
    scanners = scanners_from_input(REPORT)
    matching = scanners[0].matches(scanners[1])
    assert matching is not None
    assert matching.position == OFFSET
    assert set(SHARED + ONLY_SECOND) == set(matching.beacons)


def test_parse_input():
    scanners = scanners_from_input(REPORT)
    assert len(scanners) == 2
    assert len(scanners[0].beacons) == 15
    assert len(scanners[1].beacons) == 16
    assert scanners[0].beacons[0] == SHARED[0]
    assert scanners[1].beacons[-1] == _seen_from_second(ONLY_SECOND[-1])


def test_point_arithmetic():
    a = Point3D(1, -2, 3)
    b = Point3D(4, 5, -6)
    assert a + b == Point3D(5, 3, -3)
    assert a - b == Point3D(-3, -7, 9)
    assert (a + b) - b == a


def test_point_parse():
    assert Point3D.parse("-4,17,0") == Point3D(-4, 17, 0)


def test_point_parse_rejects_bad_input():
    with pytest.raises(ValueError):
        Point3D.parse("1,2")


def test_rotations_are_distinct_and_start_with_identity():
    scanner = Scanner([Point3D(1, 2, 3)])
    rotations = list(scanner.rotations())
    assert len(rotations) == 48
    assert rotations[0].beacons == [Point3D(1, 2, 3)]
    assert len({r.beacons[0] for r in rotations}) == 48
    for r in rotations:
        p = r.beacons[0]
        assert sorted(map(abs, (p.x, p.y, p.z))) == [1, 2, 3]


def test_moved_shifts_beacons():
    scanner = Scanner([Point3D(1, 1, 1), Point3D(0, 0, 0)])
    moved = scanner.moved(Point3D(10, 20, 30))
    assert moved.position == Point3D(10, 20, 30)
    assert moved.beacons == [Point3D(11, 21, 31), Point3D(10, 20, 30)]


def test_process_scanners_places_first_at_origin():
    known = process_scanners(scanners_from_input(REPORT))
    assert known[0].position == Point3D(0, 0, 0)
    assert known[1].position == OFFSET


def test_unmatched_scanner_raises():
    scanners = [Scanner([Point3D(0, 0, 0)]), Scanner([Point3D(1, 1, 1)])]
    with pytest.raises(ValueError):
        process_scanners(scanners)


def test_part1_counts_unique_beacons():
    assert part1(REPORT) == 12 + 3 + 4


def test_part2_largest_distance():
    assert part2(REPORT) == 120 + 35 + 980