"""Amphipod burrow: cheapest way to sort amphipods into their rooms."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

_HALLWAY_LENGTH = 11
_DOORS = frozenset({2, 4, 6, 8})
_HOLE_COLUMNS = (3, 5, 7, 9)
_UNFOLDED_LINES = ["  #D#C#B#A#", "  #D#B#A#C#"]


class Amphipod(Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"

    @classmethod
    def from_char(cls, c: str) -> Amphipod:
        try:
            return cls(c)
        except ValueError:
            raise ValueError(f"Invalid amphipod: {c}") from None

    def desired_home_idx(self) -> int:
        return "ABCD".index(self.value)

    def move_cost(self) -> int:
        return 10 ** self.desired_home_idx()


class Direction(Enum):
    IN = "in"
    OUT = "out"


@dataclass(frozen=True)
class Move:
    """Move between the hole whose door is at home_x and a hallway slot."""

    direction: Direction
    home_x: int
    pos_hallway: int


Hole = tuple[Amphipod, ...]  # bottom first
Hallway = tuple[Optional[Amphipod], ...]


@dataclass(frozen=True)
class Burrow:
    """Layout of the burrow; cost is carried along but not part of equality."""

    hallway: Hallway
    holes: tuple[Hole, ...]
    depth: int
    cost: int = field(default=0, compare=False)

    @classmethod
    def parse(cls, text: str, depth: int) -> Burrow:
        lines = text.splitlines()
        while lines and not lines[-1].strip():
            lines.pop()
        holes: list[list[Amphipod]] = [[] for _ in _HOLE_COLUMNS]
        for line in reversed(lines[:-1]):
            if len(line) <= _HOLE_COLUMNS[-1]:
                raise ValueError(f"burrow line too short: {line!r}")
            cells = [line[col] for col in _HOLE_COLUMNS]
            if "." in cells:
                break
            for hole, c in zip(holes, cells):
                if len(hole) >= depth:
                    raise ValueError(f"more than {depth} amphipods in a hole")
                hole.append(Amphipod.from_char(c))
        return cls((None,) * _HALLWAY_LENGTH, tuple(tuple(h) for h in holes), depth)

    def _between(self, a: int, b: int) -> Hallway:
        return self.hallway[a + 1 : b] if b > a else self.hallway[b:a]

    def _out_moves(self, start: int, positions: range) -> list[Move]:
        moves = []
        for pos in positions:
            if self.hallway[pos] is not None:
                break
            if pos not in _DOORS:
                moves.append(Move(Direction.OUT, start, pos))
        return moves

    def moves(self) -> list[Move]:
        """All legal moves from this state."""
        moves: list[Move] = []
        for idx, hole in enumerate(self.holes):
            if not hole or all(a.desired_home_idx() == idx for a in hole):
                continue
            start = idx * 2 + 2
            moves += self._out_moves(start, range(start, -1, -1))
            moves += self._out_moves(start, range(start, len(self.hallway)))

        for idx, amphipod in enumerate(self.hallway):
            if amphipod is None:
                continue
            home_idx = amphipod.desired_home_idx()
            home_x = home_idx * 2 + 2
            home = self.holes[home_idx]
            if all(a is amphipod for a in home) and all(
                a is None for a in self._between(idx, home_x)
            ):
                moves.append(Move(Direction.IN, home_x, idx))
        return moves

    def apply(self, move: Move) -> Burrow:
        """The state after move, with its cost added."""
        hole_idx = move.home_x // 2 - 1
        horizontal = abs(move.home_x - move.pos_hallway)
        hallway = list(self.hallway)
        holes = list(self.holes)
        hole = holes[hole_idx]

        if move.direction is Direction.IN:
            amphipod = hallway[move.pos_hallway]
            if amphipod is None:
                raise ValueError(f"no amphipod at hallway position {move.pos_hallway}")
            if len(hole) >= self.depth:
                raise ValueError(f"hole at {move.home_x} is full")
            hallway[move.pos_hallway] = None
            step_cost = amphipod.move_cost() * (self.depth - len(hole) + horizontal)
            holes[hole_idx] = hole + (amphipod,)
        else:
            if not hole:
                raise ValueError(f"hole at {move.home_x} is empty")
            amphipod = hole[-1]
            holes[hole_idx] = hole[:-1]
            hallway[move.pos_hallway] = amphipod
            step_cost = amphipod.move_cost() * (
                self.depth - len(holes[hole_idx]) + horizontal
            )

        return Burrow(tuple(hallway), tuple(holes), self.depth, self.cost + step_cost)

    def is_final(self) -> bool:
        return all(
            len(self.holes[a.desired_home_idx()]) == self.depth
            and all(other is a for other in self.holes[a.desired_home_idx()])
            for a in Amphipod
        )


def solve(burrow: Burrow) -> int:
    """Lowest total energy needed to reach the sorted state."""
    order = itertools.count()
    best = {burrow: burrow.cost}
    queue = [(burrow.cost, next(order), burrow)]
    while queue:
        cost, _, state = heapq.heappop(queue)
        if state.is_final():
            return cost
        if cost > best.get(state, cost):
            continue
        for move in state.moves():
            following = state.apply(move)
            known = best.get(following)
            if known is None or following.cost < known:
                best[following] = following.cost
                heapq.heappush(queue, (following.cost, next(order), following))
    raise ValueError("the burrow cannot be sorted")


def part1(text: str) -> int:
    return solve(Burrow.parse(text, 2))


def part2(text: str) -> int:
    lines = text.splitlines()
    if len(lines) < 3:
        raise ValueError("burrow diagram too short")
    lines[3:3] = _UNFOLDED_LINES
    return solve(Burrow.parse("\n".join(lines), 4))