"""Dumbo octopus: simulating flashing octopuses on an energy grid."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_ENERGY = 9
PART1_STEPS = 100


@dataclass
class Octopus:
    """One octopus, its energy level and whether it flashed this step."""

    energy: int = 0
    flashed: bool = False

    def add_energy(self) -> bool:
        """Raise the energy by one, flashing at the top level; return whether it flashed now.

        An octopus that already flashed this step ignores further energy.
        """
        if self.flashed:
            return False
        if self.energy < MAX_ENERGY:
            self.energy += 1
            return False
        self.flashed = True
        self.energy = 0
        return True

    def reset_flash(self) -> None:
        """Allow the octopus to flash again."""
        self.flashed = False

    def __str__(self) -> str:
        marker = "*" if self.flashed else " "
        return f"{marker}{self.energy}{marker}"


@dataclass
class OctopusGrid:
    """A rectangular grid of octopuses that flash into their eight neighbours."""

    octopuses: list[list[Octopus]]
    total_flashes: int = field(default=0)

    @classmethod
    def from_text(cls, text: str) -> OctopusGrid:
        """Build a grid from rows of single-digit energy levels."""
        rows = []
        for raw in text.splitlines():
            line = raw.strip()
            if not line:
                continue
            if not line.isdigit():
                raise ValueError(f"not a row of digits: {line!r}")
            rows.append([Octopus(int(char)) for char in line])
        if not rows:
            raise ValueError("no octopuses given")
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("rows of the grid differ in length")
        return cls(rows)

    def _neighbours(self, row: int, column: int) -> list[tuple[int, int]]:
        return [
            (r, c)
            for r in range(row - 1, row + 2)
            for c in range(column - 1, column + 2)
            if (r, c) != (row, column)
            and 0 <= r < len(self.octopuses)
            and 0 <= c < len(self.octopuses[r])
        ]

    def step(self) -> int:
        """Advance one step and return how many octopuses flashed during it."""
        flashes = 0
        for row, line in enumerate(self.octopuses):
            for column in range(len(line)):
                pending = [(row, column)]
                while pending:
                    r, c = pending.pop()
                    if self.octopuses[r][c].add_energy():
                        flashes += 1
                        pending.extend(self._neighbours(r, c))
        for line in self.octopuses:
            for octopus in line:
                octopus.reset_flash()
        self.total_flashes += flashes
        return flashes

    def all_flashed(self) -> bool:
        """Whether every octopus has an energy level of zero."""
        return all(octopus.energy == 0 for line in self.octopuses for octopus in line)

    def __str__(self) -> str:
        return "\n".join("".join(str(octopus) for octopus in line) for line in self.octopuses)


def part1(text: str) -> int:
    grid = OctopusGrid.from_text(text)
    for _ in range(PART1_STEPS):
        grid.step()
    return grid.total_flashes


def part2(text: str) -> int:
    grid = OctopusGrid.from_text(text)
    steps = 0
    while not grid.all_flashed():
        grid.step()
        steps += 1
    return steps