# aocsolutions

Solvers for daily programming puzzles: days 1 to 16 of the 2018 set, and days 1
and 2 of the 2019 set, including a small Intcode virtual machine.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Usage

Each puzzle day is a module holding a `Solver` class. Build it from the raw
puzzle input text, then ask for either part. Both parts return their answer as
a string.

```python
from pathlib import Path

from aocsolutions.y2018_day01 import Solver

solver = Solver(Path("input.txt").read_text())
print(solver.part1())
print(solver.part2())
```

The modules are:

| Module | Puzzle |
| --- | --- |
| `aocsolutions.y2018_day01` … `aocsolutions.y2018_day16` | 2018, days 1–16 |
| `aocsolutions.y2019_day01` | 2019, day 1 |
| `aocsolutions.y2019_day02` | 2019, day 2 |
| `aocsolutions.y2019_intcode` | the Intcode virtual machine (`Vm`) |

Most modules also expose their building blocks as functions, for example
`aocsolutions.y2018_day05.react` or `aocsolutions.y2019_day01.fuel_required`.

### Notes

- 2018 day 10, part 1, draws the message the stars spell out as white pixels on
  black and saves it with Pillow to `tmp/2018day11.png`, relative to the working
  directory; the `tmp` directory is created if it is missing. The function
  `render_image(stars, path)` in `aocsolutions.y2018_day10` writes to any path.
  Part 2 returns the number of seconds until the message appears.
- 2018 day 13 answers are positions written as `x,y`.
- 2018 days 3 and 10 skip lines they cannot parse and report each one as a
  warning through the standard `logging` module. 2018 day 15 logs the progress
  of a battle at debug level.
- Invalid input, such as an empty polymer or an unknown Intcode instruction,
  raises `ValueError`.
- The Intcode machine can be used on its own:

```python
from aocsolutions.y2019_intcode import Vm

vm = Vm.from_text("1,9,10,3,2,3,11,0,99,30,40,50")
vm.run()
print(vm.read(0))  # 3500
```

## What it does not do

The package is a library only. It installs no command, and it neither fetches
puzzle inputs nor reads them from disk: the caller passes the input text to
each `Solver`.