"""Transparent origami: folding a sheet of dots."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Axis(Enum):
    X = "x"
    Y = "y"


@dataclass(frozen=True)
class Fold:
    axis: Axis
    position: int

    @classmethod
    def parse(cls, text: str) -> Fold:
        """Parse a line such as 'fold along y=7'."""
        _, sep, definition = text.partition("fold along ")
        if not sep:
            raise ValueError(f"not a fold instruction: {text!r}")
        axis, sep, amount = definition.partition("=")
        if not sep:
            raise ValueError(f"not a fold instruction: {text!r}")
        try:
            parsed_axis = Axis(axis)
        except ValueError:
            raise ValueError(f"unknown fold axis {axis!r}") from None
        return cls(parsed_axis, int(amount))


def _fold_coordinate(value: int, line: int) -> int:
    if value <= line:
        return value
    folded = value - (value - line) * 2
    if folded < 0:
        raise ValueError(f"coordinate {value} folds past the edge at {line}")
    return folded


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    @classmethod
    def parse(cls, text: str) -> Point:
        raw_x, sep, raw_y = text.partition(",")
        if not sep:
            raise ValueError(f"invalid point {text!r}")
        return cls(int(raw_x), int(raw_y))

    def fold(self, fold: Fold) -> Point:
        """Return where this point lands after the fold."""
        if fold.axis is Axis.X:
            return Point(_fold_coordinate(self.x, fold.position), self.y)
        return Point(self.x, _fold_coordinate(self.y, fold.position))


def _parse(text: str) -> tuple[list[Point], list[Fold]]:
    raw_points, sep, raw_folds = text.partition("\n\n")
    if not sep:
        raise ValueError("missing blank line between points and folds")
    points = [Point.parse(line) for line in raw_points.splitlines()]
    folds = [Fold.parse(line) for line in raw_folds.splitlines() if line]
    return points, folds


def part1(text: str) -> int:
    points, folds = _parse(text)
    if not folds:
        raise ValueError("no fold instructions")
    return len({p.fold(folds[0]) for p in points})


def part2(text: str) -> int:
    points, folds = _parse(text)
    for fold in folds:
        points = [p.fold(fold) for p in points]
    return len(set(points))