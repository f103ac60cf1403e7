"""1202 program alarm: searching Intcode inputs for a target output."""

from __future__ import annotations

from .y2019_intcode import Vm

_TARGET = 19690720


class Solver:
    """Solves both parts of the puzzle for one input."""

    def __init__(self, text: str) -> None:
        self.vm = Vm.from_text(text)

    def get_result(self, noun: int, verb: int) -> int:
        """Value at address 0 after running with the given noun and verb."""
        vm = self.vm.copy()
        vm.write(1, noun)
        vm.write(2, verb)
        vm.run()
        return vm.read(0)

    def part1(self) -> str:
        return str(self.get_result(12, 2))

    def part2(self) -> str:
        for noun in range(100):
            for verb in range(100):
                if self.get_result(noun, verb) == _TARGET:
                    return str(100 * noun + verb)
        raise ValueError("No solution found")