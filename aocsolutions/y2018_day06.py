"""Chronal coordinates: Manhattan-distance areas."""

from __future__ import annotations

import re
from typing import NamedTuple, Sequence

_INTEGER = re.compile(r"[+-]?\d+")


class Point(NamedTuple):
    x: int
    y: int


def _distance(a: Point, x: int, y: int) -> int:
    return abs(a.x - x) + abs(a.y - y)


def box_size(coords: Sequence[Point]) -> tuple[Point, Point]:
    """Return the top-left and bottom-right corners of the bounding box."""
    if not coords:
        raise ValueError("no coordinates")
    xs = [c.x for c in coords]
    ys = [c.y for c in coords]
    return Point(min(xs), min(ys)), Point(max(xs), max(ys))


def _closest(coords: Sequence[Point], x: int, y: int) -> int | None:
    best: int | None = None
    best_distance = -1
    for index, coord in enumerate(coords):
        distance = _distance(coord, x, y)
        if best_distance < 0 or distance < best_distance:
            best, best_distance = index, distance
        elif distance == best_distance:
            best = None
    return best


def largest_finite_area(coords: Sequence[Point]) -> int:
    """Return the size of the largest area closest to a single coordinate that is finite."""
    low, high = box_size(coords)
    areas: list[int | None] = [0] * len(coords)
    for y in range(low.y, high.y + 1):
        for x in range(low.x, high.x + 1):
            owner = _closest(coords, x, y)
            if owner is None:
                continue
            if y in (low.y, high.y) or x in (low.x, high.x):
                areas[owner] = None
            elif areas[owner] is not None:
                areas[owner] += 1
    finite = [area for area in areas if area is not None]
    if not finite:
        raise ValueError("every area is infinite")
    return max(finite)


def safe_area(coords: Sequence[Point], limit: int) -> int:
    """Count cells whose total distance to all coordinates is below the limit."""
    low, high = box_size(coords)
    return sum(
        1
        for x in range(low.x, high.x + 1)
        for y in range(low.y, high.y + 1)
        if sum(_distance(c, x, y) for c in coords) < limit
    )


def parse_input(text: str) -> list[Point]:
    """Parse one "x, y" coordinate per line."""
    points = []
    for line in text.splitlines():
        numbers = [int(part) for part in line.split(", ") if _INTEGER.fullmatch(part)]
        if len(numbers) < 2:
            raise ValueError(f"invalid coordinate line: {line!r}")
        points.append(Point(numbers[0], numbers[1]))
    return points


class Solver:
    """Solves both parts of the puzzle for one input."""

    def __init__(self, text: str) -> None:
        self.points = parse_input(text)

    def part1(self) -> str:
        return str(largest_finite_area(self.points))

    def part2(self) -> str:
        return str(safe_area(self.points, 10000))