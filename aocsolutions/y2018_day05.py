"""Alchemical reduction of polymers."""

from __future__ import annotations

import string


def is_pair(a: str, b: str) -> bool:
    """True if the two units are the same type with opposite polarity."""
    return a != b and a.lower() == b.lower()


def react(polymer: str) -> str:
    """Return the polymer left after all reactions."""
    if polymer.endswith("\n"):
        polymer = polymer[:-1]
    if not polymer:
        raise ValueError("empty polymer")
    stack: list[str] = []
    for unit in polymer:
        if stack and is_pair(unit, stack[-1]):
            stack.pop()
        else:
            stack.append(unit)
    return "".join(stack)


def remove_types(polymer: str, unit: str) -> str:
    """Remove every unit of the given type, in both polarities."""
    upper, lower = unit, unit.lower()
    return "".join(c for c in polymer if c != upper and c != lower)


def shortest_polymer(polymer: str) -> str:
    """Return the shortest reacted polymer after removing one unit type."""
    return min(
        (react(remove_types(polymer, letter)) for letter in string.ascii_uppercase),
        key=len,
    )


class Solver:
    """Solves both parts of the puzzle for one input."""

    def __init__(self, text: str) -> None:
        self.polymer = text

    def part1(self) -> str:
        return str(len(react(self.polymer)))

    def part2(self) -> str:
        return str(len(shortest_polymer(self.polymer)))