"""The stars align: finding a message in moving points of light."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from PIL import Image

logger = logging.getLogger(__name__)

IMAGE_FILENAME = "tmp/2018day11.png"

_STAR = re.compile(
    r"position=<\s*(-?\d+),\s*(-?\d+)> velocity=<\s*(-?\d+),\s*(-?\d+)>"
)


@dataclass(frozen=True)
class Star:
    """A point of light with its velocity."""

    x: int
    y: int
    dx: int
    dy: int


def parse_input(text: str) -> list[Star]:
    """Parse one star per line; malformed lines are reported and skipped."""
    stars = []
    for line in text.splitlines():
        match = _STAR.fullmatch(line)
        if match is None:
            logger.warning("parse error: %s", line)
            continue
        stars.append(Star(*map(int, match.groups())))
    return stars


def bounding_box(stars: Sequence[Star]) -> tuple[tuple[int, int], tuple[int, int]]:
    """Return the (x, y) of the top-left and bottom-right corners."""
    if not stars:
        raise ValueError("no stars")
    xs = [star.x for star in stars]
    ys = [star.y for star in stars]
    return (min(xs), min(ys)), (max(xs), max(ys))


def area(stars: Sequence[Star]) -> int:
    """Area of the bounding box, counting cells inclusively."""
    (min_x, min_y), (max_x, max_y) = bounding_box(stars)
    return abs(max_x - min_x + 1) * abs(max_y - min_y + 1)


def _advance(stars: Sequence[Star], seconds: int) -> list[Star]:
    return [
        Star(s.x + s.dx * seconds, s.y + s.dy * seconds, s.dx, s.dy) for s in stars
    ]


def find_message(stars: Sequence[Star]) -> tuple[int, list[Star]]:
    """Return the second at which the stars are closest together, and their positions then."""
    last_area = area(stars)
    seconds = 0
    while True:
        moved = _advance(stars, seconds + 1)
        current = area(moved)
        if current > last_area:
            return seconds, _advance(stars, seconds)
        last_area = current
        seconds += 1


def render_image(stars: Sequence[Star], path: str | Path) -> None:
    """Write the stars as white pixels on black, with a one-pixel border."""
    (min_x, min_y), (max_x, max_y) = bounding_box(stars)
    width = max_x - min_x + 3
    height = max_y - min_y + 3
    image = Image.new("L", (width, height), 0)
    for star in stars:
        image.putpixel((star.x - min_x + 1, star.y - min_y + 1), 255)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    image.save(path)


class Solver:
    """Solves both parts of the puzzle for one input."""

    def __init__(self, text: str) -> None:
        self.stars = parse_input(text)
        self.image_path = Path(IMAGE_FILENAME)

    def part1(self) -> str:
        _, aligned = find_message(self.stars)
        render_image(aligned, self.image_path)
        return f"Answer written to {self.image_path}"

    def part2(self) -> str:
        seconds, _ = find_message(self.stars)
        return str(seconds)