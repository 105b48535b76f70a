"""Smoke basin: finding low points and basins in a height map."""

from __future__ import annotations

from collections.abc import Sequence
from math import prod

Grid = Sequence[Sequence[int]]
Point = tuple[int, int]

BASIN_WALL = 9
TOP_BASINS = 3


def parse_heightmap(text: str) -> list[list[int]]:
    """Parse rows of single-digit heights; all rows must have the same width."""
    grid = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        if not line.isdigit():
            raise ValueError(f"not a row of digits: {line!r}")
        grid.append([int(char) for char in line])
    if any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("rows of the height map differ in length")
    return grid


def neighbours(grid: Grid, point: Point) -> list[Point]:
    """Return the orthogonally adjacent points of ``(row, column)`` inside the grid."""
    row, column = point
    candidates = (
        (row - 1, column),
        (row, column - 1),
        (row, column + 1),
        (row + 1, column),
    )
    return [
        (r, c)
        for r, c in candidates
        if 0 <= r < len(grid) and 0 <= c < len(grid[r])
    ]


def low_points(grid: Grid) -> list[Point]:
    """Return the points lower than every neighbour, row by row."""
    return [
        (r, c)
        for r, row in enumerate(grid)
        for c, height in enumerate(row)
        if all(height < grid[nr][nc] for nr, nc in neighbours(grid, (r, c)))
    ]


def risk_level(grid: Grid) -> int:
    """Sum of one plus the height of every low point."""
    return sum(grid[r][c] + 1 for r, c in low_points(grid))


def basin_size(grid: Grid, start: Point) -> int:
    """Count the points reachable from ``start`` without crossing a height of 9."""
    seen = {start}
    pending = [start]
    size = 0
    while pending:
        point = pending.pop()
        r, c = point
        if grid[r][c] == BASIN_WALL:
            continue
        size += 1
        for neighbour in neighbours(grid, point):
            if neighbour not in seen:
                seen.add(neighbour)
                pending.append(neighbour)
    return size


def largest_basins_product(grid: Grid) -> int:
    """Multiply the sizes of the three largest basins; missing basins count as 0."""
    sizes = sorted((basin_size(grid, point) for point in low_points(grid)), reverse=True)
    top = (sizes + [0] * TOP_BASINS)[:TOP_BASINS]
    return prod(top)


def part1(text: str) -> int:
    return risk_level(parse_heightmap(text))


def part2(text: str) -> int:
    return largest_basins_product(parse_heightmap(text))