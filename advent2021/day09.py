"""Smoke basin height map analysis."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass

Position = tuple[int, int]


@dataclass
class HeightMap:
    rows: list[list[int]]

    @classmethod
    def parse(cls, text: str) -> HeightMap:
        rows = [[int(c) for c in line] for line in text.splitlines() if line]
        if not rows:
            raise ValueError("empty height map")
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("height map rows have different lengths")
        return cls(rows)

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0])

    def __getitem__(self, pos: Position) -> int:
        row, col = pos
        return self.rows[row][col]

    def _neighbours(self, row: int, col: int) -> list[Position]:
        """Neighbour positions in the order top, right, bottom, left."""
        candidates = [(row - 1, col), (row, col + 1), (row + 1, col), (row, col - 1)]
        return [
            (r, c)
            for r, c in candidates
            if 0 <= r < self.height and 0 <= c < self.width
        ]

    def find_low_points(self) -> list[Position]:
        """Positions lower than all their orthogonal neighbours, row by row."""
        return [
            (row, col)
            for row, values in enumerate(self.rows)
            for col, value in enumerate(values)
            if all(value < self[n] for n in self._neighbours(row, col))
        ]

    def basin_size(self, pos: Position) -> int:
        visited: set[Position] = set()
        to_visit = [pos]
        while to_visit:
            row, col = to_visit.pop()
            visited.add((row, col))
            if self[row, col] + 1 >= 9:
                continue
            to_visit.extend(
                n
                for n in self._neighbours(row, col)
                if self[n] < 9 and n not in visited
            )
        return len(visited)


def part1(text: str) -> int:
    space = HeightMap.parse(text)
    return sum(space[p] + 1 for p in space.find_low_points())


def part2(text: str) -> int:
    space = HeightMap.parse(text)
    sizes = [space.basin_size(p) for p in space.find_low_points()]
    if len(sizes) < 3:
        raise ValueError("fewer than three basins")
    return math.prod(heapq.nlargest(3, sizes))