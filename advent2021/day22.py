"""Reactor reboot: counting lit cubes with planar rectangle lists."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Rectangle:
    """Half-open rectangle from p0 (inclusive) to p1 (exclusive)."""

    p0: Point
    p1: Point

    def area(self) -> int:
        return abs(self.p1.x - self.p0.x) * abs(self.p1.y - self.p0.y)


def _rect(x0: int, y0: int, x1: int, y1: int) -> Rectangle:
    return Rectangle(Point(x0, y0), Point(x1, y1))


def touch(r1: Rectangle, r2: Rectangle) -> bool:
    """Whether the two rectangles overlap or share an edge or corner."""
    x1, y1, x2, y2 = r1.p0.x, r1.p0.y, r1.p1.x, r1.p1.y
    x3, y3, x4, y4 = r2.p0.x, r2.p0.y, r2.p1.x, r2.p1.y
    return (
        (x1 <= x3 <= x2 and y1 <= y3 <= y2)
        or (x1 <= x4 <= x2 and y1 <= y3 <= y2)
        or (x1 <= x3 <= x2 and y1 <= y4 <= y2)
        or (x1 <= x4 <= x2 and y1 <= y4 <= y2)
        or (x3 <= x1 <= x4 and y3 <= y1 <= y4)
        or (x3 <= x2 <= x4 and y3 <= y1 <= y4)
        or (x3 <= x1 <= x4 and y3 <= y2 <= y4)
        or (x3 <= x2 <= x4 and y3 <= y2 <= y4)
        or (x1 <= x4 <= x2 and y3 <= y1 and y4 >= y2)
        or (y1 <= y4 <= y2 and x3 <= x1 and x4 >= x2)
    )


def cut(
    rectangles: list[Rectangle], rectangle: Rectangle, point: Point
) -> list[Rectangle]:
    """Split rectangles touching rectangle along the vertical and horizontal lines through point."""
    partial: list[Rectangle] = []
    for r in rectangles:
        if touch(r, rectangle) and r.p0.x < point.x < r.p1.x:
            partial.append(_rect(r.p0.x, r.p0.y, point.x, r.p1.y))
            partial.append(_rect(point.x, r.p0.y, r.p1.x, r.p1.y))
        else:
            partial.append(r)

    result: list[Rectangle] = []
    for r in partial:
        if touch(r, rectangle) and r.p0.y < point.y < r.p1.y:
            result.append(_rect(r.p0.x, r.p0.y, r.p1.x, point.y))
            result.append(_rect(r.p0.x, point.y, r.p1.x, r.p1.y))
        else:
            result.append(r)
    return result


def is_inside(r0: Rectangle, r1: Rectangle) -> bool:
    """Whether r0 lies entirely within r1."""
    return (
        r0.p0.x >= r1.p0.x
        and r0.p0.y >= r1.p0.y
        and r0.p1.x <= r1.p1.x
        and r0.p1.y <= r1.p1.y
    )


def diff(rectangles: list[Rectangle], rectangle: Rectangle) -> list[Rectangle]:
    """The area covered by rectangles minus rectangle, as a list of rectangles."""
    pieces = cut(cut(rectangles, rectangle, rectangle.p0), rectangle, rectangle.p1)
    pieces = [r for r in pieces if not is_inside(r, rectangle)]
    pieces.sort(key=lambda r: (r.p0.x, r.p0.y, r.p1.x, r.p1.y))

    i = 0
    while len(pieces) > 2 and i < len(pieces) - 1:
        r0, r1 = pieces[i], pieces[i + 1]
        stacked = r0.p0.x == r1.p0.x and r0.p1.y == r1.p0.y and r0.p1.x == r1.p1.x
        side_by_side = (
            r0.p1.x == r1.p0.x and r0.p0.y == r1.p1.y and r0.p0.y == r1.p0.y
        )
        if stacked or side_by_side:
            pieces[i : i + 2] = [Rectangle(r0.p0, r1.p1)]
        else:
            i += 1
    return pieces


def _parse_range(raw: str) -> tuple[int, int]:
    start, sep, end = raw[2:].partition("..")
    if not sep:
        raise ValueError(f"invalid range {raw!r}")
    return int(start), int(end)


@dataclass(frozen=True)
class Command:
    on: bool
    x_range: tuple[int, int]
    y_range: tuple[int, int]
    z_range: tuple[int, int]

    @classmethod
    def parse(cls, line: str) -> Command:
        """Parse 'on x=A..B,y=C..D,z=E..F' (or 'off ...')."""
        state, sep, ranges = line.strip().partition(" ")
        if not sep:
            raise ValueError(f"invalid command {line!r}")
        parts = ranges.split(",")
        if len(parts) < 3:
            raise ValueError(f"invalid command {line!r}")
        x_range, y_range, z_range = (_parse_range(part) for part in parts[:3])
        return cls(state == "on", x_range, y_range, z_range)

    def in_cube(self, limit: int) -> bool:
        """Whether every range lies within -limit..limit."""
        return all(
            low >= -limit and high <= limit
            for low, high in (self.x_range, self.y_range, self.z_range)
        )


def solve(commands: list[Command]) -> int:
    """Count lit cubes after applying the commands in order."""
    boundaries = sorted(
        {z for c in commands for z in (c.z_range[0], c.z_range[1] + 1)}
    )
    thickness = {a: b - a for a, b in zip(boundaries, boundaries[1:])}
    planes: dict[int, list[Rectangle]] = {z: [] for z in thickness}

    for command in commands:
        subtract = _rect(
            command.x_range[0],
            command.y_range[0],
            command.x_range[1] + 1,
            command.y_range[1] + 1,
        )
        for z in boundaries:
            if command.z_range[0] <= z <= command.z_range[1]:
                remaining = diff(planes[z], subtract)
                if command.on:
                    remaining.append(subtract)
                planes[z] = remaining

    return sum(
        rectangle.area() * thickness[z]
        for z, rectangles in planes.items()
        for rectangle in rectangles
    )


def _commands(text: str) -> list[Command]:
    return [Command.parse(line) for line in text.splitlines() if line.strip()]


def part1(text: str) -> int:
    return solve([c for c in _commands(text) if c.in_cube(50)])


def part2(text: str) -> int:
    return solve(_commands(text))