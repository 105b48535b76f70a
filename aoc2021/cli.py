"""Command line entry point that solves one puzzle part for an input file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from aoc2021 import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
)

DEFAULT_INPUT = "input.txt"

_SOLVERS: dict[int, tuple[Callable[[str], int], ...]] = {
    1: (day01.part1, day01.part2),
    2: (day02.part1, day02.part2),
    3: (day03.part1, day03.part2),
    4: (day04.part1, day04.part2),
    5: (day05.part1, day05.part2),
    6: (day06.part1, day06.part2),
    7: (day07.part1, day07.part2),
    8: (day08.part1, day08.part2),
    9: (day09.part1, day09.part2),
    10: (day10.part1, day10.part2),
    11: (day11.part1, day11.part2),
    12: (day12.part1, day12.part2),
    13: (day13.part1,),
    14: (day14.part1, day14.part2),
}


def solve(day: int, part: int, text: str) -> int:
    """Solve ``part`` of ``day`` for the puzzle input ``text``."""
    solvers = _SOLVERS.get(day)
    if solvers is None:
        raise ValueError(f"no solution for day {day}")
    if not 1 <= part <= len(solvers):
        raise ValueError(f"no solution for day {day} part {part}")
    return solvers[part - 1](text)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc2021", description="Solve a puzzle part for an input file."
    )
    parser.add_argument("day", type=int, help="puzzle day")
    parser.add_argument("part", type=int, help="puzzle part, 1 or 2")
    parser.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT,
        help=f"puzzle input file (default: {DEFAULT_INPUT})",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Read the input file, print the answer and return the exit status."""
    args = _parser().parse_args(argv)
    try:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print("File cannot be opened", file=sys.stderr)
        return 1
    try:
        result = solve(args.day, args.part, text)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())