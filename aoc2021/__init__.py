"""Solutions to the 2021 Advent of Code puzzles for days 1 to 14, with a command line entry point."""

__version__ = "0.1.0"