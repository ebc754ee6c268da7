"""Beacon scanner alignment in three dimensions."""

from __future__ import annotations

import itertools
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass, field

_MIN_OVERLAP = 12
_SIGNS = [
    (1, 1, 1),
    (1, 1, -1),
    (1, -1, 1),
    (1, -1, -1),
    (-1, -1, -1),
    (-1, -1, 1),
    (-1, 1, -1),
    (-1, 1, 1),
]


@dataclass(frozen=True)
class Point3D:
    x: int
    y: int
    z: int

    @classmethod
    def parse(cls, text: str) -> Point3D:
        """Parse a point written as 'x,y,z'."""
        parts = text.strip().split(",")
        if len(parts) != 3:
            raise ValueError(f"invalid point {text!r}")
        x, y, z = (int(part) for part in parts)
        return cls(x, y, z)

    def __add__(self, other: Point3D) -> Point3D:
        return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point3D) -> Point3D:
        return Point3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def manhattan(self, other: Point3D) -> int:
        diff = self - other
        return abs(diff.x) + abs(diff.y) + abs(diff.z)


@dataclass
class Scanner:
    beacons: list[Point3D] = field(default_factory=list)
    position: Point3D | None = None

    def moved(self, point: Point3D) -> Scanner:
        """This scanner placed at point, with its beacons shifted accordingly."""
        return Scanner([beacon + point for beacon in self.beacons], point)

    def rotations(self) -> Iterator[Scanner]:
        """Yield the 48 axis permutations and sign flips of this scanner."""
        for signs in _SIGNS:
            signed = [
                (signs[0] * p.x, signs[1] * p.y, signs[2] * p.z) for p in self.beacons
            ]
            for order in itertools.permutations(range(3)):
                beacons = [Point3D(*(coords[i] for i in order)) for coords in signed]
                if signs == (1, 1, 1) and order == (0, 1, 2):
                    yield Scanner(beacons, self.position)
                else:
                    yield Scanner(beacons)

    def matches(self, scanner: Scanner) -> Scanner | None:
        """Place scanner relative to this one if at least 12 beacons overlap."""
        for rotated in scanner.rotations():
            offsets: Counter[Point3D] = Counter()
            for own in self.beacons:
                for other in rotated.beacons:
                    key = own - other
                    offsets[key] += 1
                    if offsets[key] >= _MIN_OVERLAP:
                        return rotated.moved(key)
        return None


def scanners_from_input(text: str) -> list[Scanner]:
    """Parse sections of beacons, each headed by a scanner title line."""
    scanners = []
    for section in text.strip().split("\n\n"):
        lines = section.splitlines()[1:]
        scanners.append(Scanner([Point3D.parse(line) for line in lines if line.strip()]))
    return scanners


def process_scanners(scanners: list[Scanner]) -> list[Scanner]:
    """Place every scanner relative to the first one, which sits at the origin."""
    if not scanners:
        raise ValueError("no scanners")
    first, *unknown = scanners
    known = [Scanner(list(first.beacons), Point3D(0, 0, 0))]

    while unknown:
        progress = False
        for reference in known[:]:
            still_unknown = []
            for candidate in reversed(unknown):
                placed = reference.matches(candidate)
                if placed is None:
                    still_unknown.append(candidate)
                else:
                    known.append(placed)
                    progress = True
            unknown = still_unknown[::-1]
        if not progress:
            raise ValueError("some scanners cannot be placed")

    return known


def part1(text: str) -> int:
    known = process_scanners(scanners_from_input(text))
    return len({beacon for scanner in known for beacon in scanner.beacons})


def part2(text: str) -> int:
    known = process_scanners(scanners_from_input(text))
    positions = [s.position for s in known if s.position is not None]
    return max(a.manhattan(b) for a, b in itertools.product(positions, repeat=2))