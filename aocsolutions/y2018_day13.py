"""Mine cart madness: carts running on a track until they collide."""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass, field


class Cell(enum.Enum):
    """A piece of track, valued by the character that draws it."""

    EMPTY = " "
    CORNER1 = "/"
    CORNER2 = "\\"
    NS = "|"
    EW = "-"
    INTERSECTION = "+"


class Direction(enum.Enum):
    """Where a cart is facing, valued by the character that draws it."""

    NORTH = "^"
    EAST = ">"
    SOUTH = "v"
    WEST = "<"


class Turn(enum.Enum):
    """The choice a cart makes at its next intersection."""

    LEFT = enum.auto()
    STRAIGHT = enum.auto()
    RIGHT = enum.auto()


_STEP = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}

_TURN_LEFT = {
    Direction.NORTH: Direction.WEST,
    Direction.EAST: Direction.NORTH,
    Direction.SOUTH: Direction.EAST,
    Direction.WEST: Direction.SOUTH,
}

_TURN_RIGHT = {
    Direction.NORTH: Direction.EAST,
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
}

_CORNER1 = {
    Direction.NORTH: Direction.EAST,
    Direction.EAST: Direction.NORTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.SOUTH,
}

_CORNER2 = {
    Direction.NORTH: Direction.WEST,
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.EAST,
    Direction.WEST: Direction.NORTH,
}

_NEXT_TURN = {
    Turn.LEFT: Turn.STRAIGHT,
    Turn.STRAIGHT: Turn.RIGHT,
    Turn.RIGHT: Turn.LEFT,
}

_CELLS = {cell.value: cell for cell in Cell}


@dataclass
class Cart:
    """A cart's position, heading and intersection memory."""

    x: int
    y: int
    facing: Direction
    next_turn: Turn = Turn.LEFT
    destroyed: bool = False

    def intersection_turn(self) -> None:
        """Turn as an intersection demands and advance the turn cycle."""
        if self.next_turn is Turn.LEFT:
            self.facing = _TURN_LEFT[self.facing]
        elif self.next_turn is Turn.RIGHT:
            self.facing = _TURN_RIGHT[self.facing]
        self.next_turn = _NEXT_TURN[self.next_turn]

    def move_turn(self, track: list[list[Cell]]) -> None:
        """Move one step forward and turn according to the track reached."""
        dx, dy = _STEP[self.facing]
        self.x += dx
        self.y += dy
        if not (0 <= self.y < len(track) and 0 <= self.x < len(track[self.y])):
            raise IndexError(f"cart ran off the track at {self.x},{self.y}")
        cell = track[self.y][self.x]
        if cell is Cell.CORNER1:
            self.facing = _CORNER1[self.facing]
        elif cell is Cell.CORNER2:
            self.facing = _CORNER2[self.facing]
        elif cell is Cell.INTERSECTION:
            self.intersection_turn()


@dataclass
class Mine:
    """The track and the carts on it, kept in reading order."""

    track: list[list[Cell]] = field(default_factory=list)
    carts: list[Cart] = field(default_factory=list)

    def _sort_carts(self) -> None:
        self.carts.sort(key=lambda cart: (cart.y, cart.x))

    def _detect_crash(self, index: int) -> bool:
        this = self.carts[index]
        for other_index, other in enumerate(self.carts):
            if other_index == index:
                continue
            if other.x == this.x and other.y == this.y:
                other.destroyed = True
                return True
        return False

    def first_crash(self) -> tuple[int, int]:
        """Run the carts until two collide and return where, as (x, y)."""
        if len(self.carts) < 2:
            raise ValueError("at least two carts are needed for a crash")
        while True:
            for index, cart in enumerate(self.carts):
                cart.move_turn(self.track)
                if self._detect_crash(index):
                    return cart.x, cart.y
            self._sort_carts()

    def last_cart(self) -> tuple[int, int]:
        """Remove carts as they crash and return where the last one is, as (x, y)."""
        while True:
            for index, cart in enumerate(self.carts):
                cart.move_turn(self.track)
                if self._detect_crash(index):
                    cart.destroyed = True
            self.carts = [cart for cart in self.carts if not cart.destroyed]
            if not self.carts:
                raise ValueError("every cart was destroyed")
            if len(self.carts) == 1:
                return self.carts[0].x, self.carts[0].y
            self._sort_carts()

    def __str__(self) -> str:
        carts = iter(self.carts)
        cart = next(carts, None)
        lines = []
        for y, row in enumerate(self.track):
            chars = []
            for x, cell in enumerate(row):
                if cart is not None and cart.y == y and cart.x == x:
                    chars.append(cart.facing.value)
                    cart = next(carts, None)
                else:
                    chars.append(cell.value)
            lines.append("".join(chars) + "\n")
        return "".join(lines)


def parse_input(text: str) -> Mine:
    """Parse the track drawing; carts are placed on straight track beneath them."""
    mine = Mine()
    for y, line in enumerate(text.splitlines()):
        row = []
        for x, char in enumerate(line):
            if char in "^v":
                row.append(Cell.NS)
                mine.carts.append(Cart(x, y, Direction(char)))
            elif char in "<>":
                row.append(Cell.EW)
                mine.carts.append(Cart(x, y, Direction(char)))
            else:
                row.append(_CELLS.get(char, Cell.EMPTY))
        mine.track.append(row)
    return mine


class Solver:
    """Solves both parts of the puzzle for one input."""

    def __init__(self, text: str) -> None:
        self.mine = parse_input(text)

    def part1(self) -> str:
        x, y = copy.deepcopy(self.mine).first_crash()
        return f"{x},{y}"

    def part2(self) -> str:
        x, y = copy.deepcopy(self.mine).last_cart()
        return f"{x},{y}"