"""Chronal charge: finding the most powerful square of fuel cells."""

from __future__ import annotations

from dataclasses import dataclass

GRID_SIZE = 300


@dataclass(frozen=True)
class Answer:
    """Top-left corner, size and total power of a square."""

    x: int
    y: int
    size: int
    value: int


def power_level(x: int, y: int, grid_serial: int) -> int:
    """Power level of the fuel cell at 1-based coordinates (x, y)."""
    rack_id = x + 10
    power = (rack_id * y + grid_serial) * rack_id
    digit = power // 100 % 10 if power >= 100 else 0
    return digit - 5


def init_grid(grid_serial: int) -> list[list[int]]:
    """Power levels indexed as grid[x][y] with 0-based indices."""
    return [
        [power_level(x + 1, y + 1, grid_serial) for y in range(GRID_SIZE)]
        for x in range(GRID_SIZE)
    ]


def summed_area(grid: list[list[int]]) -> list[list[int]]:
    """Inclusive prefix sums: sums[x][y] totals grid[0..=x][0..=y]."""
    sums: list[list[int]] = []
    for x, column in enumerate(grid):
        running = 0
        previous = sums[x - 1] if x > 0 else None
        row = []
        for y, cell in enumerate(column):
            running += cell
            row.append(running + (previous[y] if previous is not None else 0))
        sums.append(row)
    return sums


def largest_power(grid_serial: int) -> Answer:
    """The 3x3 square with the largest total power."""
    grid = init_grid(grid_serial)
    best = Answer(0, 0, 3, -6 * 9)
    for x in range(GRID_SIZE - 2):
        c0, c1, c2 = grid[x : x + 3]
        for y in range(GRID_SIZE - 2):
            total = sum(c0[y : y + 3]) + sum(c1[y : y + 3]) + sum(c2[y : y + 3])
            if total > best.value:
                best = Answer(x + 1, y + 1, 3, total)
    return best


def max_powers(grid_serial: int) -> Answer:
    """The square of any size with the largest total power."""
    sums = summed_area(init_grid(grid_serial))
    limit = GRID_SIZE - 1
    best_value = GRID_SIZE * GRID_SIZE * -5
    best_key: tuple[int, int, int] | None = None
    for x in range(limit):
        near = sums[x]
        for d in range(1, limit - x):
            far = sums[x + d]
            totals = [
                far_d + near_y - far_y - near_d
                for far_d, near_y, far_y, near_d in zip(
                    far[d:limit], near, far, near[d:limit]
                )
            ]
            if not totals:
                continue
            peak = max(totals)
            key = (x, totals.index(peak), d)
            if peak > best_value or (
                best_key is not None and peak == best_value and key < best_key
            ):
                best_value, best_key = peak, key
    if best_key is None:
        return Answer(0, 0, 0, best_value)
    x, y, d = best_key
    return Answer(x + 2, y + 2, d, best_value)


class Solver:
    """Solves both parts of the puzzle for one input."""

    def __init__(self, text: str) -> None:
        self.grid_serial = int(text.strip())

    def part1(self) -> str:
        answer = largest_power(self.grid_serial)
        return f"{answer.x},{answer.y}"

    def part2(self) -> str:
        answer = max_powers(self.grid_serial)
        return f"{answer.x},{answer.y},{answer.size}"