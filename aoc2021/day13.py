"""Transparent origami: folding a sheet of dots."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

Dot = tuple[int, int]

_FOLD = re.compile(r"^fold along ([xy])=(\d+)$")


@dataclass(frozen=True)
class Fold:
    """A fold along the vertical line ``x=position`` or horizontal line ``y=position``."""

    axis: str
    position: int


def parse_manual(text: str) -> tuple[set[Dot], list[Fold]]:
    """Parse ``x,y`` dots, a blank line, then ``fold along x=n`` instructions."""
    dots: set[Dot] = set()
    folds: list[Fold] = []
    lines = iter(text.splitlines())
    for raw in lines:
        line = raw.strip()
        if not line:
            break
        parts = line.split(",")
        if len(parts) != 2:
            raise ValueError(f"malformed dot: {line!r}")
        dots.add((int(parts[0]), int(parts[1])))
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        match = _FOLD.match(line)
        if match is None:
            raise ValueError(f"malformed fold instruction: {line!r}")
        folds.append(Fold(match.group(1), int(match.group(2))))
    return dots, folds


def fold(dots: Iterable[Dot], instruction: Fold) -> set[Dot]:
    """Fold the part beyond the line onto the part before it; dots on the line vanish."""
    index = 0 if instruction.axis == "x" else 1
    line = instruction.position
    folded: set[Dot] = set()
    for dot in dots:
        coordinate = dot[index]
        if coordinate == line:
            continue
        if coordinate > line:
            coordinate = 2 * line - coordinate
            if coordinate < 0:
                raise ValueError(f"dot {dot} folds past the edge of the sheet")
        moved = list(dot)
        moved[index] = coordinate
        folded.add((moved[0], moved[1]))
    return folded


def apply_folds(dots: Iterable[Dot], folds: Iterable[Fold]) -> set[Dot]:
    """Apply every fold in order."""
    result = set(dots)
    for instruction in folds:
        result = fold(result, instruction)
    return result


def render(dots: Iterable[Dot]) -> str:
    """Draw the dots as ``#`` on a ``.`` background, from the origin to the furthest dot."""
    dots = set(dots)
    if not dots:
        return ""
    width = max(x for x, _ in dots) + 1
    height = max(y for _, y in dots) + 1
    return "\n".join(
        "".join("#" if (x, y) in dots else "." for x in range(width))
        for y in range(height)
    )


def part1(text: str) -> int:
    dots, folds = parse_manual(text)
    return len(apply_folds(dots, folds))