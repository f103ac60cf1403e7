import pytest

from aocsolutions.y2019_day02 import Solver
from aocsolutions.y2019_intcode import Vm

EXAMPLE = "1,9,10,3,2,3,11,0,99,30,40,50"


def test_example_program():
    vm = Vm.from_text(EXAMPLE)
    vm.run()
    assert vm.read(0) == 3500
    assert vm.read(3) == 70


def test_get_result_keeps_original():
    solver = Solver(EXAMPLE)
    assert solver.get_result(9, 10) == 3500
    assert solver.vm.intcode == [1, 9, 10, 3, 2, 3, 11, 0, 99, 30, 40, 50]


def test_part1_uses_noun_12_verb_2():
    memory = [1, 0, 0, 0, 99] + [0] * 8
    memory[12] = 5
    memory[2] = 0
    solver = Solver(",".join(map(str, memory)))
    # After writes: cell 1 = 12, cell 2 = 2; result is memory[12] + memory[2].
    assert solver.part1() == "7"


def test_part2_finds_noun_and_verb():
    memory = [1, 0, 0, 0, 99] + [0] * 95
    memory[50] = 19690719
    solver = Solver(",".join(map(str, memory)))
    assert solver.part2() == "50"


def test_part2_without_solution():
    memory = [1, 0, 0, 0, 99] + [0] * 95
    solver = Solver(",".join(map(str, memory)))
    with pytest.raises(ValueError, match="No solution found"):
        solver.part2()