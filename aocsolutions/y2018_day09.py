"""Marble mania: scoring a circular marble game."""

from __future__ import annotations

from collections import deque


def parse_input(text: str) -> list[int]:
    """Return the whitespace-separated non-negative integers in the text."""
    return [int(word) for word in text.split() if word.isascii() and word.isdigit()]


def simulate_game(players: int, last_marble: int) -> int:
    """Play the game and return the winning score."""
    if players <= 0:
        raise ValueError("the game needs at least one player")
    circle = deque([0])
    scores = [0] * players
    for marble in range(1, last_marble + 1):
        player = (marble - 1) % players
        if marble % 23 == 0:
            circle.rotate(7)
            scores[player] += marble + circle.popleft()
        else:
            circle.rotate(-2)
            circle.appendleft(marble)
    return max(scores)


class Solver:
    """Solves both parts of the puzzle for one input."""

    def __init__(self, text: str) -> None:
        numbers = parse_input(text)
        if len(numbers) < 2:
            raise ValueError("input must give the players and the last marble")
        self.players, self.last_marble = numbers[0], numbers[1]

    def part1(self) -> str:
        return str(simulate_game(self.players, self.last_marble))

    def part2(self) -> str:
        return str(simulate_game(self.players, self.last_marble * 100))