"""The treachery of whales: aligning crab submarines for the least fuel."""

from __future__ import annotations

from collections.abc import Callable, Sequence


def parse_crabs(text: str) -> list[int]:
    """Parse the comma separated crab positions on the first line."""
    lines = text.strip().splitlines()
    if not lines or not lines[0].strip():
        raise ValueError("no crab positions given")
    return [int(value) for value in lines[0].split(",")]


def _check_distance(distance: int) -> int:
    if distance < 0:
        raise ValueError(f"distance must not be negative, got {distance}")
    return distance


def linear_cost(distance: int) -> int:
    """Fuel cost when every step costs one unit."""
    steps = _check_distance(distance)
    return sum(1 for _ in range(steps))


def triangular_cost(distance: int) -> int:
    """Fuel cost when each further step costs one more unit than the last."""
    steps = _check_distance(distance)
    return steps * (steps + 1) // 2


def cheapest_alignment(
    crabs: Sequence[int], cost: Callable[[int], int]
) -> tuple[int, int]:
    """Return the position from 0 to the furthest crab with the least total fuel, and that fuel."""
    if not crabs:
        raise ValueError("no crabs to align")

    def total(position: int) -> int:
        return sum(cost(abs(position - crab)) for crab in crabs)

    best = min(range(max(crabs) + 1), key=total)
    return best, total(best)


def part1(text: str) -> int:
    """Least fuel to align the crabs when each step costs one unit."""
    return cheapest_alignment(parse_crabs(text), linear_cost)[1]


def part2(text: str) -> int:
    """Least fuel to align the crabs when step costs grow by one each step."""
    return cheapest_alignment(parse_crabs(text), triangular_cost)[1]