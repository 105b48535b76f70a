"""Hydrothermal venture: counting where lines of vents overlap."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

_SEGMENT = re.compile(r"^\s*(-?\d+),(-?\d+)\s*->\s*(-?\d+),(-?\d+)\s*$")


@dataclass(frozen=True)
class Point:
    x: int
    y: int


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class VentMap:
    """A grid counting how many vent lines cross each point."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("map dimensions must be positive")
        self.width = width
        self.height = height
        self._counts = [[0] * width for _ in range(height)]

    def _check(self, point: Point, label: str) -> None:
        if not (0 <= point.x < self.width and 0 <= point.y < self.height):
            raise ValueError(f"{label} is out of range!")

    def add_line(self, begin: Point, end: Point, with_diagonal: bool = False) -> None:
        """Mark a horizontal, vertical or (optionally) 45 degree line, endpoints included.

        Lines of zero length and other slopes leave the map unchanged.
        """
        self._check(begin, "Beginpoint")
        self._check(end, "Endpoint")
        dx = end.x - begin.x
        dy = end.y - begin.y
        if dx == 0 and dy == 0:
            return
        if dx and dy and not (with_diagonal and abs(dx) == abs(dy)):
            return
        step_x, step_y = _sign(dx), _sign(dy)
        for i in range(max(abs(dx), abs(dy)) + 1):
            self._counts[begin.y + i * step_y][begin.x + i * step_x] += 1

    def points_at_least(self, value: int) -> list[Point]:
        """Return the points covered by at least ``value`` lines, row by row."""
        return [
            Point(x, y)
            for y, row in enumerate(self._counts)
            for x, count in enumerate(row)
            if count >= value
        ]

    def __str__(self) -> str:
        return "\n".join(
            "".join(str(count) if count else "." for count in row) for row in self._counts
        )


def parse_segments(text: str) -> list[tuple[Point, Point]]:
    """Parse one ``x1,y1 -> x2,y2`` segment per line."""
    segments = []
    for raw in text.splitlines():
        if not raw.strip():
            continue
        match = _SEGMENT.match(raw)
        if match is None:
            raise ValueError(f"malformed line: {raw!r}")
        x1, y1, x2, y2 = (int(group) for group in match.groups())
        segments.append((Point(x1, y1), Point(x2, y2)))
    return segments


def count_overlaps(
    segments: Iterable[tuple[Point, Point]], with_diagonal: bool = False
) -> int:
    """Count the points where at least two segments meet."""
    segments = list(segments)
    max_x = max((max(a.x, b.x) for a, b in segments), default=0)
    max_y = max((max(a.y, b.y) for a, b in segments), default=0)
    vents = VentMap(max(max_x, 0) + 1, max(max_y, 0) + 1)
    for begin, end in segments:
        vents.add_line(begin, end, with_diagonal)
    return len(vents.points_at_least(2))


def part1(text: str) -> int:
    return count_overlaps(parse_segments(text))


def part2(text: str) -> int:
    return count_overlaps(parse_segments(text), with_diagonal=True)