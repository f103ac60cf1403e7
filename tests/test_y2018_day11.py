import pytest

from aocsolutions.y2018_day11 import (
    Answer,
    Solver,
    init_grid,
    largest_power,
    max_powers,
    power_level,
    summed_area,
)


@pytest.mark.parametrize(
    "x, y, serial, expected",
    [(3, 5, 8, 4), (122, 79, 57, -5), (217, 196, 39, 0), (101, 153, 71, 4)],
)
def test_power_level(x, y, serial, expected):
    assert power_level(x, y, serial) == expected


def test_largest_power():
    assert largest_power(18) == Answer(x=33, y=45, size=3, value=29)
    assert largest_power(42) == Answer(x=21, y=61, size=3, value=30)


def test_max_powers():
    assert max_powers(18) == Answer(x=90, y=269, size=16, value=113)
    assert max_powers(42) == Answer(x=232, y=251, size=12, value=119)


def test_init_grid_matches_power_level():
    grid = init_grid(8)
    assert grid[2][4] == 4
    assert len(grid) == 300 and all(len(column) == 300 for column in grid)


def test_summed_area_corner_is_total():
    grid = init_grid(18)
    sums = summed_area(grid)
    assert sums[299][299] == sum(sum(column) for column in grid)
    assert sums[0][0] == grid[0][0]
    assert sums[1][1] == grid[0][0] + grid[0][1] + grid[1][0] + grid[1][1]


def test_solver_part1():
    assert Solver("18\n").part1() == "33,45"