import pytest

from aocsolutions.y2018_day14 import Solver, part1, part2


@pytest.mark.parametrize(
    "target, expected",
    [(9, "5158916779"), (5, "0124515891"), (18, "9251071085"), (2018, "5941429882")],
)
def test_part1(target, expected):
    assert part1(target) == expected


@pytest.mark.parametrize(
    "pattern, expected",
    [("51589", 9), ("01245", 5), ("92510", 18), ("59414", 2018)],
)
def test_part2(pattern, expected):
    assert part2(pattern) == expected


def test_part2_rejects_non_digits():
    with pytest.raises(ValueError):
        part2("5a")


def test_solver():
    solver = Solver("2018\n")
    assert solver.part1() == "5941429882"
    assert Solver("51589").part2() == "9"