"""A minimal Intcode machine supporting addition, multiplication and halt."""

from __future__ import annotations

from typing import Sequence

_ADD = 1
_MUL = 2
_HALT = 99


class Vm:
    """Intcode memory and program counter."""

    def __init__(self, intcode: Sequence[int], pc: int = 0) -> None:
        self.intcode = list(intcode)
        self.pc = pc

    @classmethod
    def from_text(cls, text: str) -> Vm:
        """Load the comma-separated program on the first line of the text."""
        lines = text.splitlines()
        if not lines:
            raise ValueError("empty program")
        return cls([int(part) for part in lines[0].split(",")])

    def read(self, pos: int) -> int:
        if pos < 0:
            raise IndexError(f"address out of range: {pos}")
        return self.intcode[pos]

    def write(self, pos: int, value: int) -> None:
        if pos < 0:
            raise IndexError(f"address out of range: {pos}")
        self.intcode[pos] = value

    def _indirect_read(self, pos: int) -> int:
        return self.read(self.read(pos))

    def _indirect_write(self, pos: int, value: int) -> None:
        self.write(self.read(pos), value)

    def step(self) -> None:
        """Execute the instruction at the program counter."""
        opcode = self.read(self.pc)
        if opcode == _ADD:
            result = self._indirect_read(self.pc + 1) + self._indirect_read(self.pc + 2)
        elif opcode == _MUL:
            result = self._indirect_read(self.pc + 1) * self._indirect_read(self.pc + 2)
        elif opcode == _HALT:
            return
        else:
            raise ValueError(f"invalid instruction: {opcode} at {self.pc}")
        self._indirect_write(self.pc + 3, result)
        self.pc += 4

    def run(self) -> None:
        """Execute instructions until the machine halts."""
        while not self.is_halted():
            self.step()

    def is_halted(self) -> bool:
        return self.read(self.pc) == _HALT

    def copy(self) -> Vm:
        return Vm(self.intcode, self.pc)