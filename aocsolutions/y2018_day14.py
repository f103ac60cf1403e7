"""Chocolate charts: elves building a scoreboard of recipes."""

from __future__ import annotations


def part1(target: int) -> str:
    """The ten recipe scores after the first target recipes."""
    recipes = bytearray([3, 7])
    first, second = 0, 1
    while len(recipes) < target + 10:
        new = recipes[first] + recipes[second]
        if new >= 10:
            recipes.append(new // 10)
        recipes.append(new % 10)
        first = (first + recipes[first] + 1) % len(recipes)
        second = (second + recipes[second] + 1) % len(recipes)
    return "".join(str(score) for score in recipes[target : target + 10])


def part2(pattern: str) -> int:
    """The number of recipes before the score sequence first appears."""
    if not pattern or not (pattern.isascii() and pattern.isdigit()):
        raise ValueError(f"pattern must be digits: {pattern!r}")
    wanted = bytearray(int(c) for c in pattern)
    size = len(wanted)
    recipes = bytearray([3, 7])
    first, second = 0, 1
    while True:
        new = recipes[first] + recipes[second]
        if new >= 10:
            recipes.append(new // 10)
            if recipes[-size:] == wanted:
                return len(recipes) - size
        recipes.append(new % 10)
        if recipes[-size:] == wanted:
            return len(recipes) - size
        first = (first + recipes[first] + 1) % len(recipes)
        second = (second + recipes[second] + 1) % len(recipes)


class Solver:
    """Solves both parts of the puzzle for one input."""

    def __init__(self, text: str) -> None:
        self.target = int(text.strip())

    def part1(self) -> str:
        return part1(self.target)

    def part2(self) -> str:
        return str(part2(str(self.target)))