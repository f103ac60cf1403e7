"""Beverage bandits: a turn-based battle between elves and goblins."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_HIT_POINTS = 200
_DEFAULT_POWER = 3


class Team(enum.Enum):
    """A side in the battle, valued by the character that draws it."""

    ELVES = "E"
    GOBLINS = "G"

    def other(self) -> Team:
        """The opposing team."""
        return Team.GOBLINS if self is Team.ELVES else Team.ELVES


class Dir(enum.Enum):
    """A step direction; declaration order is reading order."""

    NORTH = (0, -1)
    WEST = (-1, 0)
    EAST = (1, 0)
    SOUTH = (0, 1)


@dataclass(frozen=True, order=True)
class Pos:
    """A map position; ordering is reading order (row first)."""

    y: int
    x: int

    def in_range(self, other: Pos) -> bool:
        """True if the two positions are orthogonally adjacent."""
        return (self.x == other.x and abs(self.y - other.y) == 1) or (
            self.y == other.y and abs(self.x - other.x) == 1
        )

    def step(self, direction: Dir) -> Pos:
        """The neighbouring position in the given direction."""
        dx, dy = direction.value
        return Pos(y=self.y + dy, x=self.x + dx)

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


class Tile(enum.Enum):
    """A cell of the cave map."""

    OPEN = "."
    WALL = "#"


@dataclass
class Unit:
    """A combatant with its hit points, position, team and attack power."""

    hp: int
    pos: Pos
    team: Team
    power: int = _DEFAULT_POWER

    def is_alive(self) -> bool:
        return self.hp > 0


class Game:
    """The cave, the units fighting in it and the progress of the battle."""

    def __init__(self, text: str) -> None:
        self.map: list[list[Tile]] = []
        self.units: list[Unit] = []
        self.rounds = 0
        self.elf_power = _DEFAULT_POWER
        self.winner: Team | None = None
        for y, line in enumerate(text.splitlines()):
            row = []
            for x, char in enumerate(line):
                if char == "#":
                    row.append(Tile.WALL)
                else:
                    row.append(Tile.OPEN)
                    if char in "EG":
                        self.units.append(Unit(_HIT_POINTS, Pos(y=y, x=x), Team(char)))
            self.map.append(row)

    @classmethod
    def help_elves(cls, text: str) -> Game:
        """Find the lowest elf power with which no elf dies and the elves win."""
        elf_power = _DEFAULT_POWER
        while True:
            elf_power += 1
            game = cls(text)
            game.set_elf_power(elf_power)
            game.simulate(Team.ELVES)
            if game.winner is Team.ELVES:
                return game

    def simulate(self, require_total_victory: Team | None = None) -> None:
        """Fight rounds until one team wins, or until a unit of the given team dies."""
        while True:
            logger.debug("After %d round(s)\n%s", self.rounds, self)
            for index in range(len(self.units)):
                team = self.units[index].team
                if self.is_victory(team):
                    self.winner = team
                    logger.debug("Unit %d sees the battlefield is clear.", index)
                    return
                self.move_unit(index)
                self.attack(index)
            if require_total_victory is not None and any(
                unit.team is require_total_victory and not unit.is_alive()
                for unit in self.units
            ):
                return
            self.units = [unit for unit in self.units if unit.is_alive()]
            self.sort_units()
            self.rounds += 1

    def move_unit(self, index: int) -> None:
        """Move the unit one step toward the nearest reachable enemy, if it should."""
        unit = self.units[index]
        if not unit.is_alive() or self.can_attack(index):
            return

        enemy = unit.team.other()
        # Breadth-first layers of (first step, position, next to an enemy).
        paths: list[tuple[Dir, Pos, bool]] = [(Dir.NORTH, unit.pos, False)]
        seen: set[Pos] = set()
        found = False
        depth = 0
        while not found:
            depth += 1
            layer: list[tuple[Dir, Pos, bool]] = []
            for start_dir, old_pos, _ in paths:
                for direction in Dir:
                    pos = old_pos.step(direction)
                    if pos in seen:
                        continue
                    seen.add(pos)
                    if self.is_empty(pos):
                        near_enemy = self.in_range(pos, enemy)
                        found = found or near_enemy
                        first = direction if depth == 1 else start_dir
                        layer.append((first, pos, near_enemy))
            if not layer:
                logger.debug("Unit %d has no path to targets.", index)
                return
            paths = layer

        target = min(pos for _, pos, near_enemy in paths if near_enemy)
        direction = next(first for first, pos, _ in paths if pos == target)
        logger.debug("Unit %d moves %s heading for %s.", index, direction.name, target)
        unit.pos = unit.pos.step(direction)

    def is_victory(self, team: Team) -> bool:
        """True if no living unit of the opposing team remains."""
        enemy = team.other()
        return not any(u.is_alive() and u.team is enemy for u in self.units)

    def attack(self, index: int) -> None:
        """Hit the weakest adjacent enemy, ties broken by reading order."""
        unit = self.units[index]
        if not unit.is_alive():
            return
        enemy = unit.team.other()
        neighbours = {unit.pos.step(direction) for direction in Dir}
        enemies = [
            other
            for other in self.units
            if other.is_alive() and other.team is enemy and other.pos in neighbours
        ]
        if not enemies:
            return
        target = min(enemies, key=lambda other: (other.hp, other.pos))
        target.hp = max(target.hp - unit.power, 0)

    def set_elf_power(self, power: int) -> None:
        """Give every elf the given attack power."""
        self.elf_power = power
        for unit in self.units:
            if unit.team is Team.ELVES:
                unit.power = power

    def total_hp(self) -> int:
        """Sum of the hit points of the living units."""
        return sum(unit.hp for unit in self.units if unit.is_alive())

    def can_attack(self, index: int) -> bool:
        """True if the unit is adjacent to a living enemy."""
        unit = self.units[index]
        return self.in_range(unit.pos, unit.team.other())

    def is_empty(self, pos: Pos) -> bool:
        """True if the position is open cave with no living unit on it."""
        if self.map[pos.y][pos.x] is Tile.WALL:
            return False
        return not any(unit.hp > 0 and unit.pos == pos for unit in self.units)

    def in_range(self, pos: Pos, team: Team) -> bool:
        """True if the position is adjacent to a living unit of the given team."""
        return any(
            unit.is_alive() and unit.team is team and unit.pos.in_range(pos)
            for unit in self.units
        )

    def sort_units(self) -> None:
        """Put the units into reading order."""
        self.units.sort(key=lambda unit: unit.pos)

    def outcome(self) -> int:
        """Completed rounds times the remaining hit points."""
        return self.rounds * self.total_hp()

    def __str__(self) -> str:
        units = iter(enumerate(self.units))
        current = next(units, None)
        lines = []
        for y, row in enumerate(self.map):
            chars = []
            notes = []
            for x, tile in enumerate(row):
                if current is not None and current[1].pos == Pos(y=y, x=x):
                    number, unit = current
                    chars.append(unit.team.value)
                    notes.append(f" {number} {unit.team.value}({unit.hp})")
                    current = next(units, None)
                else:
                    chars.append(tile.value)
            lines.append("".join(chars) + "".join(notes) + "\n")
        return "".join(lines)


class Solver:
    """Solves both parts of the puzzle for one input."""

    def __init__(self, text: str) -> None:
        self.text = text

    def part1(self) -> str:
        game = Game(self.text)
        game.simulate(None)
        return str(game.outcome())

    def part2(self) -> str:
        return str(Game.help_elves(self.text).outcome())