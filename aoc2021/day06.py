"""Lanternfish: simulating an exponentially growing school of fish."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

TIMER_STATES = 9
RESET_TIMER = 6
PART1_DAYS = 80
PART2_DAYS = 256


def parse_timers(text: str) -> list[int]:
    """Parse the comma separated timers on the first line."""
    lines = text.strip().splitlines()
    if not lines or not lines[0].strip():
        raise ValueError("no initial state given")
    return [int(value) for value in lines[0].split(",")]


def simulate_day(counts: Sequence[int]) -> list[int]:
    """Advance fish counts, indexed by timer value, by one day."""
    if len(counts) != TIMER_STATES:
        raise ValueError(f"expected {TIMER_STATES} timer counts, got {len(counts)}")
    parents = counts[0]
    advanced = list(counts[1:]) + [parents]
    advanced[RESET_TIMER] += parents
    return advanced


def simulate_lanternfish(timers: Iterable[int], days: int) -> int:
    """Return the number of fish after ``days`` days; timers outside 0..8 are ignored."""
    counts = [0] * TIMER_STATES
    for timer in timers:
        if 0 <= timer < TIMER_STATES:
            counts[timer] += 1
    for _ in range(days):
        counts = simulate_day(counts)
    return sum(counts)


def part1(text: str) -> int:
    return simulate_lanternfish(parse_timers(text), PART1_DAYS)


def part2(text: str) -> int:
    return simulate_lanternfish(parse_timers(text), PART2_DAYS)