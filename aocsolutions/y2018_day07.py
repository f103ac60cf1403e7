"""Step ordering with prerequisites, alone and with a team of workers."""

from __future__ import annotations

from typing import Collection

# Maps each step to the set of steps that must finish before it.
Graph = dict[str, set[str]]


def parse_input(text: str) -> Graph:
    """Parse lines of the form "Step C must be finished before step A can begin."."""
    graph: Graph = {}
    for line in text.splitlines():
        before, after = line[5], line[36]
        graph.setdefault(before, set())
        graph.setdefault(after, set()).add(before)
    return graph


def _copy(graph: Graph) -> Graph:
    return {step: set(prereqs) for step, prereqs in graph.items()}


def _remove(graph: Graph, step: str) -> None:
    del graph[step]
    for prereqs in graph.values():
        prereqs.discard(step)


def next_step(graph: Graph, exclude: Collection[str] = ()) -> str | None:
    """Return the alphabetically first available step not in exclude."""
    ready = [
        step for step, prereqs in graph.items() if not prereqs and step not in exclude
    ]
    return min(ready) if ready else None


def get_order(graph: Graph) -> str:
    """Return the order in which a single worker completes the steps."""
    graph = _copy(graph)
    order = []
    while (step := next_step(graph)) is not None:
        order.append(step)
        _remove(graph, step)
    return "".join(order)


def time_simulation(graph: Graph, num_workers: int, base_time: int) -> int:
    """Return the seconds a team of workers needs to complete every step."""
    graph = _copy(graph)
    workers: list[list | None] = [None] * num_workers
    in_progress: list[str] = []
    seconds = 0
    while True:
        running = False
        for index, job in enumerate(workers):
            if job is not None:
                continue
            step = next_step(graph, in_progress)
            if step is not None:
                workers[index] = [step, base_time + ord(step) - ord("A")]
                in_progress.append(step)
                running = True

        for index, job in enumerate(workers):
            if job is None:
                continue
            running = True
            step, remaining = job
            if remaining == 0:
                _remove(graph, step)
                in_progress.remove(step)
                workers[index] = None
            else:
                job[1] = remaining - 1

        if not running:
            return seconds
        seconds += 1


class Solver:
    """Solves both parts of the puzzle for one input."""

    def __init__(self, text: str) -> None:
        self.graph = parse_input(text)

    def part1(self) -> str:
        return get_order(self.graph)

    def part2(self) -> str:
        return str(time_simulation(self.graph, 5, 60))