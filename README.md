# aoc2021

Solutions to the 2021 Advent of Code puzzles for days 1 to 14. Each day has its own
module, from `aoc2021.day01` to `aoc2021.day14`. Every module has a `part1(text)`
function. Every module except `day13` also has a `part2(text)` function. Each of these
takes the whole puzzle input as a string and returns the answer as an integer.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
aoc2021 DAY PART [INPUT]
```

- `DAY` is the puzzle day.
- `PART` is 1 or 2.
- `INPUT` is the file to read the puzzle input from. It defaults to `input.txt` in the current directory.

The command prints the answer to standard output and exits with status 0. It prints a
message to standard error and exits with status 1 in these cases:

- the file cannot be opened;
- there is no solution for the day and part;
- the input is malformed.

```
aoc2021 6 2 input.txt
```

## Library use

```python
from aoc2021 import day01, day14
from aoc2021.cli import solve

with open("input.txt") as handle:
    text = handle.read()

print(day01.part1(text))
print(solve(14, 2, text))
```

`solve(day, part, text)` raises `ValueError` when there is no solution for that day and
part. Malformed puzzle input raises `ValueError` as well.

The modules also expose the building blocks behind each answer. Some examples:

- `day04.BingoBoard`, with `mark`, `unmarked_numbers`, `winning_line`, `has_bingo`
  and `score`
- `day05.VentMap`, with `add_line` and `points_at_least`
- `day06.simulate_lanternfish(timers, days)`
- `day07.cheapest_alignment(crabs, cost)`, with `linear_cost` or `triangular_cost`
- `day09.basin_size(grid, start)`
- `day10.check_line(line)`
- `day11.OctopusGrid`, with `from_text`, `step` and `all_flashed`
- `day12.find_paths(graph, allow_single_revisit)`
- `day13.apply_folds(dots, folds)` and `day13.render(dots)`
- `day14.element_counts(template, rules, steps)`

## What is not included

- There are no solutions for day 15 or any later day.
- Day 13 has only a part 1 answer, the number of dots left after all folds.
  To see the folded sheet, pass the result of `day13.apply_folds` to `day13.render`
  and read the drawing yourself.