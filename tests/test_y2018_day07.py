from aocsolutions.y2018_day07 import (
    Solver,
    get_order,
    next_step,
    parse_input,
    time_simulation,
)

EXAMPLE = """Step C must be finished before step A can begin.
Step C must be finished before step F can begin.
Step A must be finished before step B can begin.
Step A must be finished before step D can begin.
Step B must be finished before step E can begin.
Step D must be finished before step E can begin.
Step F must be finished before step E can begin."""


def test_get_order():
    assert get_order(parse_input(EXAMPLE)) == "CABDFE"


def test_time_simulation():
    assert time_simulation(parse_input(EXAMPLE), 2, 0) == 15


def test_parse_input():
    graph = parse_input(EXAMPLE)
    assert graph["C"] == set()
    assert graph["E"] == {"B", "D", "F"}
    assert set(graph) == set("ABCDEF")


def test_next_step():
    graph = parse_input(EXAMPLE)
    assert next_step(graph) == "C"
    assert next_step(graph, ["C"]) is None


def test_get_order_leaves_graph_untouched():
    graph = parse_input(EXAMPLE)
    get_order(graph)
    time_simulation(graph, 2, 0)
    assert graph == parse_input(EXAMPLE)


def test_solver_part1():
    assert Solver(EXAMPLE).part1() == "CABDFE"