"""Crab submarine alignment: cheapest horizontal position."""

from __future__ import annotations

import heapq


def parse_positions(text: str) -> list[int]:
    """Parse a comma separated list of integer positions."""
    return [int(raw) for raw in text.strip().split(",")]


def _linear_cost(positions: list[int], target: int) -> int:
    return sum(abs(x - target) for x in positions)


def part1(text: str) -> int:
    positions = sorted(parse_positions(text))
    # Upper middle element; good enough for even-length inputs.
    median = positions[len(positions) // 2]
    return _linear_cost(positions, median)


def part1_select_nth(text: str) -> int:
    positions = parse_positions(text)
    nth = len(positions) // 2
    median = heapq.nsmallest(nth + 1, positions)[-1]
    return _linear_cost(positions, median)


def _triangular(n: int) -> int:
    return n * (n + 1) // 2


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def part2(text: str) -> int:
    positions = parse_positions(text)
    avg = _truncating_div(sum(positions), len(positions))
    return sum(_triangular(abs(x - avg)) for x in positions)