"""Chronal calibration: summing frequency changes."""

from __future__ import annotations

import re
from itertools import cycle
from typing import Iterable

_INTEGER = re.compile(r"[+-]?\d+")


def parse_input(text: str) -> list[int]:
    """Return the integers found one per line, skipping lines that are not integers."""
    return [int(line) for line in text.splitlines() if _INTEGER.fullmatch(line)]


def sum_lines(values: Iterable[int]) -> int:
    """Return the resulting frequency after applying every change once."""
    return sum(values)


def first_reached_twice(values: list[int]) -> int:
    """Return the first running total that is reached a second time."""
    if not values:
        raise ValueError("no frequency changes given")
    total = 0
    seen = {total}
    for change in cycle(values):
        total += change
        if total in seen:
            return total
        seen.add(total)
    raise AssertionError("unreachable")


class Solver:
    """Solves both parts of the puzzle for one input."""

    def __init__(self, text: str) -> None:
        self.values = parse_input(text)

    def part1(self) -> str:
        return str(sum_lines(self.values))

    def part2(self) -> str:
        return str(first_reached_twice(self.values))