"""Sonar sweep: counting how often the measured depth increases."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def parse_depths(text: str) -> list[int]:
    """Parse one depth measurement per line, ignoring blank lines."""
    return [int(line) for line in (raw.strip() for raw in text.splitlines()) if line]


def count_increases(depths: Sequence[int]) -> int:
    """Count measurements that are larger than the one before them."""
    return sum(1 for previous, current in pairwise(depths) if previous < current)


def count_window_increases(depths: Sequence[int]) -> int:
    """Count increases between the sums of consecutive three-measurement windows."""
    windows = [a + b + c for a, b, c in zip(depths, depths[1:], depths[2:])]
    return count_increases(windows)


def part1(text: str) -> int:
    return count_increases(parse_depths(text))


def part2(text: str) -> int:
    return count_window_increases(parse_depths(text))