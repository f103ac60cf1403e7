"""Memory maneuver: summing and valuing a serialized tree."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

_NUMBER = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class TreeInfo:
    """Result of parsing one node: numbers consumed, metadata sum and node value."""

    used: int
    sum: int
    value: int


def parse_input(text: str) -> list[int]:
    """Return the space-separated numbers, ignoring anything that is not one."""
    return [int(part.strip()) for part in text.split(" ") if _NUMBER.fullmatch(part.strip())]


def _parse_node(numbers: Sequence[int], start: int) -> TreeInfo:
    if start + 2 > len(numbers):
        raise ValueError("truncated tree: missing node header")
    num_children, num_metadata = numbers[start], numbers[start + 1]
    used = 2
    total = 0
    children = []
    for _ in range(num_children):
        child = _parse_node(numbers, start + used)
        total += child.sum
        used += child.used
        children.append(child)

    metadata = numbers[start + used : start + used + num_metadata]
    used += len(metadata)
    total += sum(metadata)
    if num_children == 0:
        value = sum(metadata)
    else:
        value = sum(
            children[entry - 1].value for entry in metadata if 1 <= entry <= len(children)
        )
    return TreeInfo(used, total, value)


def parse_tree(numbers: Sequence[int]) -> TreeInfo:
    """Parse the tree rooted at the start of the numbers."""
    return _parse_node(numbers, 0)


def metadata_sum(numbers: Sequence[int]) -> int:
    """Sum of all metadata entries in the tree."""
    return parse_tree(numbers).sum


def value(numbers: Sequence[int]) -> int:
    """Value of the root node."""
    return parse_tree(numbers).value


class Solver:
    """Solves both parts of the puzzle for one input."""

    def __init__(self, text: str) -> None:
        self.numbers = parse_input(text)

    def part1(self) -> str:
        return str(metadata_sum(self.numbers))

    def part2(self) -> str:
        return str(value(self.numbers))