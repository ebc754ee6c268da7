"""Sea cucumber herds moving east and south on a wrapping grid."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import count
from typing import Optional


class Cell(Enum):
    RIGHT = ">"
    DOWN = "v"

    @classmethod
    def from_char(cls, c: str) -> Cell:
        try:
            return cls(c)
        except ValueError:
            raise ValueError(f"Invalid cell: {c}") from None


Row = list[Optional[Cell]]


@dataclass
class Grid:
    cells: list[Row]

    def __post_init__(self) -> None:
        if not self.cells or any(len(row) != len(self.cells[0]) for row in self.cells):
            raise ValueError("grid must be a non-empty rectangle")

    @classmethod
    def parse(cls, text: str) -> Grid:
        return cls(
            [
                [None if c == "." else Cell.from_char(c) for c in line]
                for line in text.splitlines()
                if line
            ]
        )

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0])

    def _empty(self) -> list[Row]:
        return [[None] * self.width for _ in range(self.height)]

    def step(self) -> tuple[Grid, bool]:
        """Move the east-facing herd, then the south-facing one.

        Returns the new grid and whether anything moved.
        """
        width, height = self.width, self.height
        changed = False

        intermediate = self._empty()
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                if cell is Cell.RIGHT:
                    target = (x + 1) % width
                    if row[target] is None:
                        intermediate[y][target] = Cell.RIGHT
                        changed = True
                    else:
                        intermediate[y][x] = Cell.RIGHT
                elif cell is Cell.DOWN:
                    intermediate[y][x] = Cell.DOWN

        final = self._empty()
        for y, row in enumerate(intermediate):
            for x, cell in enumerate(row):
                if cell is Cell.DOWN:
                    target = (y + 1) % height
                    if intermediate[target][x] is None:
                        final[target][x] = Cell.DOWN
                        changed = True
                    else:
                        final[y][x] = Cell.DOWN
                elif cell is Cell.RIGHT:
                    final[y][x] = Cell.RIGHT

        return Grid(final), changed

    def __str__(self) -> str:
        return "".join(
            "".join("." if cell is None else cell.value for cell in row) + "\n"
            for row in self.cells
        )


def steps_until_still(grid: Grid) -> int:
    """Number of the first step on which no sea cucumber moves."""
    for steps in count(1):
        grid, changed = grid.step()
        if not changed:
            return steps
    raise AssertionError("unreachable")


def part1(text: str) -> int:
    return steps_until_still(Grid.parse(text))