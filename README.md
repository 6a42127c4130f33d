# adventpuzzles

Solvers for a series of daily programming puzzles. Each day lives in its own
module and exposes small, testable functions, plus a `solve` (or `solve_day`)
entry point that takes the puzzle input as a string and returns both answers.

## Installation

```
pip install .
```

## Using a day

```python
from adventpuzzles import y2022_day01, y2023_day01

text = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000"
most, top_three = y2022_day01.solve(text)   # (24000, 45000)

total_a, total_b = y2023_day01.solve_day("two1nine\n1abc2\n")
```

Most modules also expose their parsing and intermediate steps, for example
`y2022_day05.parse_input` returning the crate stacks and move operations, or
`y2022_day10.Cpu` with `apply_many`, `register_at` and `pixel`.

Some `solve_part_*` functions take already parsed data rather than text, and
some take the puzzle's tunable values as arguments, such as
`y2022_day15.solve_part_1(sensors, row)` or
`y2022_day16.solve_part_1(valves, minutes_remaining)`. Invalid input raises
`ValueError`.

## Modules

First series:

- `y2022_day01` to `y2022_day13`, `y2022_day15` and `y2022_day16`: entry point
  `solve(text)`.
- `y2022_valve`: the `Name` and `Valve` types for the valve network, with
  `parse_valve` and `parse_input`.

Second series:

- `y2023_day01`, `y2023_day02`, `y2023_day03`, `y2023_day04` and
  `y2023_day06`: entry point `solve_day(text)`.

## What is not included

- There is no command-line program. Nothing reads puzzle inputs from files or
  times the solutions; pass each input to the day's function yourself.
- The first series has no solver for day 14.

## Tests

```
pip install .[test]
pytest
```