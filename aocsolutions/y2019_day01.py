"""The tyranny of the rocket equation: fuel for spacecraft modules."""

from __future__ import annotations

from typing import Callable, Iterable


def parse_input(text: str) -> list[int]:
    """Return one module mass per line."""
    return [int(line) for line in text.splitlines()]


def fuel_required(mass: int) -> int:
    """Fuel for a mass: a third of it, rounded toward zero, minus two, never negative."""
    third = abs(mass) // 3
    if mass < 0:
        third = -third
    return max(third - 2, 0)


def real_fuel_required(mass: int) -> int:
    """Fuel for a mass, including the fuel needed to carry that fuel."""
    total = 0
    fuel = fuel_required(mass)
    while fuel > 0:
        total += fuel
        fuel = fuel_required(fuel)
    return total


def sum_fuel(masses: Iterable[int], func: Callable[[int], int]) -> int:
    """Total fuel for all masses using the given fuel function."""
    return sum(func(mass) for mass in masses)


class Solver:
    """Solves both parts of the puzzle for one input."""

    def __init__(self, text: str) -> None:
        self.module_masses = parse_input(text)

    def part1(self) -> str:
        return str(sum_fuel(self.module_masses, fuel_required))

    def part2(self) -> str:
        return str(sum_fuel(self.module_masses, real_fuel_required))