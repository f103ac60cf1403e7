"""Inventory management: box id checksums and near-identical ids."""

from __future__ import annotations

from collections import Counter
from itertools import combinations
from typing import Sequence


def checksum(ids: Sequence[str]) -> int:
    """Multiply the count of ids with a letter twice by those with a letter thrice."""
    twos = threes = 0
    for box_id in ids:
        counts = set(Counter(box_id).values())
        twos += 2 in counts
        threes += 3 in counts
    return twos * threes


def compare(a: str, b: str) -> str | None:
    """Return the common characters of two ids that differ in exactly one place."""
    common = []
    mismatched = False
    for c1, c2 in zip(a, b):
        if c1 == c2:
            common.append(c1)
        elif mismatched:
            return None
        else:
            mismatched = True
    return "".join(common) if mismatched else None


def common_letters(ids: Sequence[str]) -> str:
    """Return the common letters of the first pair of ids differing by one letter."""
    for first, second in combinations(ids, 2):
        common = compare(first, second)
        if common is not None:
            return common
    return ""


class Solver:
    """Solves both parts of the puzzle for one input."""

    def __init__(self, text: str) -> None:
        self.ids = text.splitlines()

    def part1(self) -> str:
        return str(checksum(self.ids))

    def part2(self) -> str:
        return common_letters(self.ids)