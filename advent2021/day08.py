"""Seven-segment display decoding."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable

_UNIQUE_LENGTHS = {2, 3, 4, 7}


def part1(text: str) -> int:
    """Count output values whose segment count identifies a unique digit."""
    total = 0
    for line in text.splitlines():
        _, outputs = _split_entry(line)
        total += sum(1 for value in outputs.split() if len(value) in _UNIQUE_LENGTHS)
    return total


def _split_entry(line: str) -> tuple[str, str]:
    readings, sep, outputs = line.partition(" | ")
    if not sep:
        raise ValueError(f"missing ' | ' separator in {line!r}")
    return readings, outputs


def _take(
    candidates: list[frozenset[str]],
    predicate: Callable[[frozenset[str]], bool] = lambda _: True,
) -> frozenset[str]:
    """Remove and return the last candidate satisfying predicate."""
    for index in range(len(candidates) - 1, -1, -1):
        if predicate(candidates[index]):
            return candidates.pop(index)
    raise ValueError("cannot decode the signal patterns")


def _take_first(
    candidates: list[frozenset[str]], predicate: Callable[[frozenset[str]], bool]
) -> frozenset[str]:
    for index, candidate in enumerate(candidates):
        if predicate(candidate):
            return candidates.pop(index)
    raise ValueError("cannot decode the signal patterns")


def parse_line(line: str) -> int:
    """Decode one entry and return its four-digit output value."""
    raw_readings, raw_outputs = _split_entry(line)

    by_size: dict[int, list[frozenset[str]]] = defaultdict(list)
    for reading in raw_readings.split():
        pattern = frozenset(reading)
        by_size[len(pattern)].append(pattern)

    digits: dict[int, frozenset[str]] = {}
    digits[1] = _take(by_size[2])
    digits[7] = _take(by_size[3])
    digits[4] = _take(by_size[4])
    digits[8] = _take(by_size[7])

    digits[9] = _take_first(by_size[6], lambda s: s >= digits[4])
    digits[0] = _take_first(by_size[6], lambda s: s >= digits[7])
    digits[6] = _take(by_size[6])

    digits[3] = _take_first(by_size[5], lambda s: s >= digits[1])
    digits[5] = _take_first(by_size[5], lambda s: s <= digits[6])
    digits[2] = _take(by_size[5])

    lookup = {pattern: digit for digit, pattern in digits.items()}
    value = 0
    for raw in raw_outputs.split():
        try:
            digit = lookup[frozenset(raw)]
        except KeyError:
            raise ValueError(f"unknown output pattern {raw!r}") from None
        value = value * 10 + digit
    return value


def part2(text: str) -> int:
    return sum(parse_line(line) for line in text.splitlines())