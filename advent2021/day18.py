"""Snailfish number arithmetic on a flattened representation."""

from __future__ import annotations

import itertools
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, replace
from enum import Enum
from typing import TypeVar

T = TypeVar("T")

_EXPLODE_DEPTH = 5
_SPLIT_ABOVE = 9


class Pos(Enum):
    L = "L"
    R = "R"


@dataclass(frozen=True)
class SNum:
    """A regular number together with its path from the root of the tree."""

    value: int
    position: tuple[Pos, ...] = ()


def parse(line: str) -> list[SNum]:
    """Flatten a snailfish number into its regular numbers, left to right."""
    expr: list[SNum] = []
    position: list[Pos] = []
    for c in line.strip():
        if c == "[":
            position.append(Pos.L)
        elif c == ",":
            position.pop()
            position.append(Pos.R)
        elif c == "]":
            position.pop()
        elif c.isdigit():
            expr.append(SNum(int(c), tuple(position)))
        else:
            raise ValueError(f"invalid character {c!r} in snailfish number")
    return expr


def magnitude(expr: Sequence[SNum]) -> int:
    total = 0
    for num in expr:
        weight = 1
        for pos in num.position:
            weight *= 3 if pos is Pos.L else 2
        total += weight * num.value
    return total


def reduce(expr: list[SNum]) -> bool:
    """Apply one explode or split action in place; return whether one applied."""
    index = next(
        (i for i, num in enumerate(expr) if len(num.position) == _EXPLODE_DEPTH), None
    )
    if index is not None:
        left, right = expr[index], expr[index + 1]
        if index > 0:
            neighbour = expr[index - 1]
            expr[index - 1] = replace(neighbour, value=neighbour.value + left.value)
        if index < len(expr) - 2:
            neighbour = expr[index + 2]
            expr[index + 2] = replace(neighbour, value=neighbour.value + right.value)
        expr[index : index + 2] = [SNum(0, left.position[:-1])]
        return True

    index = next((i for i, num in enumerate(expr) if num.value > _SPLIT_ABOVE), None)
    if index is not None:
        current = expr[index]
        left_value = current.value // 2
        expr[index : index + 1] = [
            SNum(left_value, current.position + (Pos.L,)),
            SNum(current.value - left_value, current.position + (Pos.R,)),
        ]
        return True

    return False


def add(expr1: Sequence[SNum], expr2: Sequence[SNum]) -> list[SNum]:
    """Add two snailfish numbers and fully reduce the result."""
    result = [SNum(n.value, (Pos.L,) + n.position) for n in expr1]
    result += [SNum(n.value, (Pos.R,) + n.position) for n in expr2]
    while reduce(result):
        pass
    return result


def permutator(items: Sequence[T]) -> Iterator[tuple[T, T]]:
    """Ordered pairs of distinct positions, the right element varying slowest."""
    for j, right in enumerate(items):
        for i, left in enumerate(items):
            if i != j:
                yield left, right


def pair_permutations(items: Sequence[T]) -> Iterator[tuple[T, T]]:
    """Ordered pairs of distinct positions, the left element varying slowest."""
    for i, left in enumerate(items):
        for j, right in enumerate(items):
            if i != j:
                yield left, right


def _expressions(text: str) -> list[list[SNum]]:
    return [parse(line) for line in text.splitlines() if line.strip()]


def part1(text: str) -> int:
    expressions = _expressions(text)
    if not expressions:
        raise ValueError("no snailfish numbers")
    result = expressions[0]
    for expr in expressions[1:]:
        result = add(result, expr)
    return magnitude(result)


def part2(text: str) -> int:
    expressions = _expressions(text)
    best = 0
    for i, left in enumerate(expressions):
        for j, right in enumerate(expressions):
            if i != j:
                best = max(best, magnitude(add(left, right)))
    return best


def _max_magnitude(pairs: Iterator[tuple[list[SNum], list[SNum]]]) -> int:
    magnitudes = [magnitude(add(left, right)) for left, right in pairs]
    if not magnitudes:
        raise ValueError("need at least two snailfish numbers")
    return max(magnitudes)


def part2_permutator(text: str) -> int:
    return _max_magnitude(permutator(_expressions(text)))


def part2_permutator_gen(text: str) -> int:
    return _max_magnitude(pair_permutations(_expressions(text)))


def part2_itertools(text: str) -> int:
    return _max_magnitude(itertools.permutations(_expressions(text), 2))