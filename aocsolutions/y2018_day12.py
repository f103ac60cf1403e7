"""Subterranean sustainability: a one-dimensional plant automaton."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import chain

_PREFIX = "initial state: "


@dataclass
class State:
    """Pots holding plants, where plants[0] is pot number offset."""

    plants: list[bool] = field(default_factory=list)
    offset: int = 0

    def trim(self) -> None:
        """Drop empty pots at both ends."""
        first = next((i for i, plant in enumerate(self.plants) if plant), len(self.plants))
        self.offset += first
        del self.plants[:first]
        while self.plants and not self.plants[-1]:
            self.plants.pop()

    def start(self) -> int:
        """Earliest pot number held."""
        return self.offset

    def end(self) -> int:
        """Last pot number held."""
        return self.offset + len(self.plants) - 1

    def get(self, index: int) -> bool:
        """Whether pot number index holds a plant."""
        if index < self.offset or index > self.end():
            return False
        return self.plants[index - self.offset]

    def sum_pots(self) -> int:
        """Sum of the numbers of all pots holding plants."""
        return sum(i for i, plant in enumerate(self.plants, self.offset) if plant)

    def __str__(self) -> str:
        pots = "".join("#" if plant else "." for plant in self.plants)
        return f"<{self.offset}>[{pots}]"


def parse_input(text: str) -> tuple[int, State]:
    """Return the growth rules as a bitmask, and the trimmed initial state."""
    rules = 0
    state = State()
    for line in text.splitlines():
        if line.startswith(_PREFIX):
            for char in line[len(_PREFIX) :]:
                if char == "#":
                    state.plants.append(True)
                elif char == ".":
                    state.plants.append(False)
                else:
                    break
        elif line.endswith("#"):
            pattern = 0
            for char in line[:5]:
                pattern = (pattern << 1) | (char == "#")
            if pattern == 0:
                raise ValueError(f"rule growing a plant from nothing: {line!r}")
            rules |= 1 << (pattern - 1)
    state.trim()
    return rules, state


def grow(rules: int, state: State) -> State:
    """Return the next generation."""
    window = 0
    plants = []
    for plant in chain(state.plants, [False] * 4):
        window = ((window << 1) & 31) | plant
        plants.append(window > 0 and (rules >> (window - 1)) & 1 == 1)
    grown = State(plants, state.offset - 2)
    grown.trim()
    return grown


def part1(text: str, generations: int) -> int:
    """Sum of planted pot numbers after the given number of generations."""
    rules, state = parse_input(text)
    for _ in range(generations):
        state = grow(rules, state)
    return state.sum_pots()


def part2(text: str, generations: int) -> int:
    """Like part1, extrapolating once the pattern only shifts between generations."""
    rules, state = parse_input(text)
    count = 0
    while True:
        grown = grow(rules, state)
        count += 1
        if grown.plants == state.plants:
            grown.offset += (grown.offset - state.offset) * (generations - count)
            return grown.sum_pots()
        state = grown


class Solver:
    """Solves both parts of the puzzle for one input."""

    def __init__(self, text: str) -> None:
        self.text = text

    def part1(self) -> str:
        return str(part1(self.text, 20))

    def part2(self) -> str:
        return str(part2(self.text, 50000000000))