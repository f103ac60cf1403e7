"""Chronal classification: identifying opcodes of a register machine."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Iterable, Sequence


class Op(enum.Enum):
    """The sixteen operations of the device."""

    ADDR = enum.auto()
    ADDI = enum.auto()
    MULR = enum.auto()
    MULI = enum.auto()
    BANR = enum.auto()
    BANI = enum.auto()
    BORR = enum.auto()
    BORI = enum.auto()
    SETR = enum.auto()
    SETI = enum.auto()
    GTIR = enum.auto()
    GTRI = enum.auto()
    GTRR = enum.auto()
    EQIR = enum.auto()
    EQRI = enum.auto()
    EQRR = enum.auto()


# Each operation receives (a as immediate, register a, b as immediate, register b).
_OPERATIONS: dict[Op, Callable[[int, int, int, int], int]] = {
    Op.ADDR: lambda av, ar, bv, br: ar + br,
    Op.ADDI: lambda av, ar, bv, br: ar + bv,
    Op.MULR: lambda av, ar, bv, br: ar * br,
    Op.MULI: lambda av, ar, bv, br: ar * bv,
    Op.BANR: lambda av, ar, bv, br: ar & br,
    Op.BANI: lambda av, ar, bv, br: ar & bv,
    Op.BORR: lambda av, ar, bv, br: ar | br,
    Op.BORI: lambda av, ar, bv, br: ar | bv,
    Op.SETR: lambda av, ar, bv, br: ar,
    Op.SETI: lambda av, ar, bv, br: av,
    Op.GTIR: lambda av, ar, bv, br: int(av > br),
    Op.GTRI: lambda av, ar, bv, br: int(ar > bv),
    Op.GTRR: lambda av, ar, bv, br: int(ar > br),
    Op.EQIR: lambda av, ar, bv, br: int(av == br),
    Op.EQRI: lambda av, ar, bv, br: int(ar == bv),
    Op.EQRR: lambda av, ar, bv, br: int(ar == br),
}


@dataclass(frozen=True)
class Instruction:
    """An instruction of the program with its numeric opcode."""

    opcode: int
    a: int
    b: int
    c: int


@dataclass
class Device:
    """Four registers that operations act on."""

    reg: list[int] = field(default_factory=lambda: [0, 0, 0, 0])

    def execute(self, op: Op, a: int, b: int, c: int) -> None:
        """Perform one operation, storing the result in register c."""
        ar = self.reg[a]
        br = self.reg[b]
        self.reg[c] = _OPERATIONS[op](a, ar, b, br)

    def run_program(self, mapping: Sequence[Op], program: Iterable[Instruction]) -> None:
        """Run the program, translating numeric opcodes through the mapping."""
        for inst in program:
            self.execute(mapping[inst.opcode], inst.a, inst.b, inst.c)


@dataclass(frozen=True)
class Sample:
    """Registers before and after one observed instruction."""

    before: Device
    instr: tuple[int, int, int, int]
    after: Device

    def probe(self) -> set[Op]:
        """The operations that would produce the observed result."""
        _, a, b, c = self.instr
        matches = set()
        for op in Op:
            device = Device(list(self.before.reg))
            device.execute(op, a, b, c)
            if device == self.after:
                matches.add(op)
        return matches


def parse_numbers(text: str, delim: str) -> list[int]:
    """Split on the delimiter and parse every part as an integer."""
    return [int(part) for part in text.split(delim)]


def _bracketed(line: str) -> str:
    return line[9:].split("]", 1)[0]


def parse_input(text: str) -> tuple[list[Sample], list[Instruction]]:
    """Parse the samples and the test program that follows them."""
    samples: list[Sample] = []
    program: list[Instruction] = []
    before = [0, 0, 0, 0]
    instr = [0, 0, 0, 0]
    in_samples = True
    for line in text.splitlines():
        if line.startswith("Before: ["):
            in_samples = True
            for i, n in enumerate(parse_numbers(_bracketed(line), ", ")):
                before[i] = n
        elif line.startswith("After:  ["):
            after = [0, 0, 0, 0]
            for i, n in enumerate(parse_numbers(_bracketed(line), ", ")):
                after[i] = n
            samples.append(Sample(Device(list(before)), tuple(instr), Device(after)))
            in_samples = False
        elif line:
            numbers = parse_numbers(line, " ")
            if in_samples:
                for i, n in enumerate(numbers):
                    instr[i] = n
            else:
                if len(numbers) < 4:
                    raise ValueError(f"incomplete instruction: {line!r}")
                program.append(Instruction(*numbers[:4]))
    return samples, program


def reverse_engineer(samples: Iterable[Sample]) -> list[Op]:
    """Work out which operation each numeric opcode stands for."""
    maybe: list[set[Op]] = [set() for _ in Op]
    for sample in samples:
        opcode = sample.instr[0]
        candidates = sample.probe()
        if maybe[opcode]:
            maybe[opcode] &= candidates
        else:
            maybe[opcode] = candidates

    eliminated = [False] * len(maybe)
    done = False
    while not done:
        done = True
        for i, candidates in enumerate(maybe):
            if len(candidates) == 1 and not eliminated[i]:
                eliminated[i] = True
                (op,) = candidates
                for j, others in enumerate(maybe):
                    if i != j and op in others:
                        others.discard(op)
                        done = False

    mapping = []
    for opcode, candidates in enumerate(maybe):
        if len(candidates) != 1:
            raise ValueError(f"opcode {opcode} could not be determined")
        mapping.append(next(iter(candidates)))
    return mapping


class Solver:
    """Solves both parts of the puzzle for one input."""

    def __init__(self, text: str) -> None:
        self.samples, self.program = parse_input(text)

    def part1(self) -> str:
        return str(sum(1 for sample in self.samples if len(sample.probe()) >= 3))

    def part2(self) -> str:
        device = Device()
        device.run_program(reverse_engineer(self.samples), self.program)
        return str(device.reg[0])