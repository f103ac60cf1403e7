"""Guard sleep schedules."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Iterable

_MINUTES = 60


class Observation(enum.Enum):
    """What happened in a log entry."""

    BEGINS_SHIFT = enum.auto()
    FALLS_ASLEEP = enum.auto()
    WAKES_UP = enum.auto()


@dataclass(frozen=True)
class Event:
    """A timestamped log entry; guard is set only when a shift begins."""

    time: datetime
    observation: Observation
    guard: int | None = None


@dataclass
class _SleepRecord:
    total: int = 0
    minutes: list[int] = field(default_factory=lambda: [0] * _MINUTES)


Stats = dict[int, _SleepRecord]


def parse_input(text: str) -> list[Event]:
    """Parse the log into events sorted by time."""
    events = []
    for line in text.splitlines():
        time = datetime.strptime(line[1:17], "%Y-%m-%d %H:%M")
        # Entries before midnight are guards starting their shift early.
        if time.hour > 0:
            time = time.replace(hour=0, minute=0) + timedelta(days=1)
        description = line[19:]
        if description.startswith("Guard #"):
            digits = ""
            for char in description[7:]:
                if not char.isascii() or not char.isdigit():
                    break
                digits += char
            events.append(Event(time, Observation.BEGINS_SHIFT, int(digits)))
        elif description == "falls asleep":
            events.append(Event(time, Observation.FALLS_ASLEEP))
        elif description == "wakes up":
            events.append(Event(time, Observation.WAKES_UP))
    events.sort(key=lambda event: event.time)
    return events


def collect_stats(events: Iterable[Event]) -> Stats:
    """Total minutes asleep and per-minute sleep counts for each guard."""
    stats: Stats = {}
    guard = 0
    slept_at = 0
    for event in events:
        if event.observation is Observation.BEGINS_SHIFT:
            guard = event.guard if event.guard is not None else 0
        elif event.observation is Observation.FALLS_ASLEEP:
            slept_at = event.time.minute
        else:
            record = stats.setdefault(guard, _SleepRecord())
            record.total += event.time.minute - slept_at
            for minute in range(slept_at, event.time.minute):
                record.minutes[minute] += 1
    return stats


def _sleepiest_minute(record: _SleepRecord) -> int:
    return max(range(_MINUTES), key=lambda minute: record.minutes[minute])


def strategy1(stats: Stats) -> tuple[int, int]:
    """The guard asleep longest, and the minute they are most often asleep."""
    if not stats:
        raise ValueError("no sleep statistics")
    guard, record = max(stats.items(), key=lambda item: item[1].total)
    return guard, _sleepiest_minute(record)


def strategy2(stats: Stats) -> tuple[int, int]:
    """The guard and minute with the most sleeps at that minute."""
    best = (0, 0)
    most_times = 0
    for guard, record in stats.items():
        for minute, times in enumerate(record.minutes):
            if times > most_times:
                best = (guard, minute)
                most_times = times
    return best


def multiply_pair(pair: tuple[int, int]) -> int:
    return pair[0] * pair[1]


class Solver:
    """Solves both parts of the puzzle for one input."""

    def __init__(self, text: str) -> None:
        self.stats = collect_stats(parse_input(text))

    def part1(self) -> str:
        return str(multiply_pair(strategy1(self.stats)))

    def part2(self) -> str:
        return str(multiply_pair(strategy2(self.stats)))