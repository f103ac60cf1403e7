import pytest

from aocsolutions.y2018_day12 import (
    Solver,
    State,
    grow,
    parse_input,
    part1,
    part2,
)

TEST_INPUT = """initial state: #..#.#..##......###...###

..... => .
...## => #
..#.. => #
.#... => #
.#.#. => #
.#.## => #
.##.. => #
.#### => #
#.#.# => #
#.### => #
##.#. => #
##.## => #
###.. => #
###.# => #
####. => #
"""


def _pots(pattern):
    return [c == "#" for c in pattern]


def test_parse_input():
    rules, state = parse_input(TEST_INPUT)
    assert state.plants == _pots("#..#.#..##......###...###")
    assert state.offset == 0
    assert rules == 1045450380
    assert state.get(0) is True
    assert state.get(1) is False
    assert state.get(2) is False
    assert state.get(3) is True


def test_grow():
    rules, state = parse_input(TEST_INPUT)
    state2 = grow(rules, state)
    assert state2.plants == _pots("#...#....#.....#..#..#..#")
    assert state2.offset == 0
    state3 = grow(rules, state2)
    assert state3.plants == _pots("##..##...##....#..#..#..##")
    assert state3.offset == 0
    state4 = grow(rules, state3)
    assert state4.plants == _pots("#.#...#..#.#....#..#..#...#")
    assert state4.offset == -1


def test_part1():
    assert part1(TEST_INPUT, 20) == 325


def test_solver_part1():
    assert Solver(TEST_INPUT).part1() == "325"


SHIFTING = "initial state: #\n\n.#... => #\n"


def test_part2_extrapolates_shift():
    assert part2(SHIFTING, 50000000000) == 50000000000
    assert part1(SHIFTING, 20) == 20


def test_part2_stationary_pattern():
    assert part2("initial state: ..#\n\n..#.. => #\n", 1000) == 2


def test_trim_and_bounds():
    state = State(_pots("..#.#.."), 5)
    state.trim()
    assert state.plants == _pots("#.#")
    assert (state.start(), state.end()) == (7, 9)
    assert state.get(100) is False
    assert state.sum_pots() == 16
    assert str(state) == "<7>[#.#]"


def test_rule_from_empty_raises():
    with pytest.raises(ValueError):
        parse_input("initial state: #\n\n..... => #\n")