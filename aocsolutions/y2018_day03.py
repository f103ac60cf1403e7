"""Overlapping fabric claims."""

from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)

_CLAIM = re.compile(r"#(\d+) @ (\d+),(\d+): (\d+)x(\d+)")


@dataclass(frozen=True)
class Claim:
    """A rectangular claim on the fabric."""

    id: int
    left: int
    top: int
    width: int
    height: int

    def squares(self) -> Iterator[tuple[int, int]]:
        """Yield every square inch covered by the claim."""
        for x in range(self.left, self.left + self.width):
            for y in range(self.top, self.top + self.height):
                yield (x, y)


class Fabric:
    """Tracks how many claims cover each square inch."""

    def __init__(self) -> None:
        self._coverage: Counter[tuple[int, int]] = Counter()

    def add_claims(self, claims: Iterable[Claim]) -> int:
        """Lay the claims on the fabric and return how many squares became overlapped."""
        overlapped = 0
        for claim in claims:
            for square in claim.squares():
                self._coverage[square] += 1
                if self._coverage[square] == 2:
                    overlapped += 1
        return overlapped

    def intact_claim(self, claims: Iterable[Claim]) -> int:
        """Return the id of the first claim overlapping no other, or 0 if none."""
        for claim in claims:
            if all(self._coverage.get(square, 0) < 2 for square in claim.squares()):
                return claim.id
        return 0


def parse_input(text: str) -> list[Claim]:
    """Parse claims, one per line; malformed lines are reported and skipped."""
    claims = []
    for line in text.splitlines():
        match = _CLAIM.fullmatch(line)
        if match is None:
            logger.warning("parse error: %s", line)
            continue
        claims.append(Claim(*map(int, match.groups())))
    return claims


class Solver:
    """Solves both parts of the puzzle for one input."""

    def __init__(self, text: str) -> None:
        self.claims = parse_input(text)

    def part1(self) -> str:
        return str(Fabric().add_claims(self.claims))

    def part2(self) -> str:
        fabric = Fabric()
        fabric.add_claims(self.claims)
        return str(fabric.intact_claim(self.claims))