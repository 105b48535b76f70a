"""Binary diagnostic: power consumption and life support ratings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum, auto


class MostCommon(Enum):
    """Which bit value dominates at a position."""

    ONES = auto()
    ZEROS = auto()
    EQUAL = auto()


def _normalise(lines: Iterable[str]) -> list[str]:
    values = [line.strip() for line in lines if line.strip()]
    for value in values:
        if set(value) - {"0", "1"}:
            raise ValueError(f"not a binary number: {value!r}")
    width = max((len(value) for value in values), default=0)
    return [value.zfill(width) for value in values]


def most_common_bit(values: Sequence[str], position: int) -> MostCommon:
    """Report whether ones or zeros are in the majority at ``position`` (0 is leftmost)."""
    ones = sum(1 for value in values if value[position] == "1")
    half = len(values) / 2
    if ones > half:
        return MostCommon.ONES
    if ones < half:
        return MostCommon.ZEROS
    return MostCommon.EQUAL


def power_consumption(lines: Iterable[str]) -> int:
    """Return gamma rate multiplied by epsilon rate."""
    values = _normalise(lines)
    count = len(values)
    width = len(values[0]) if values else 0
    gamma = epsilon = 0
    for position in range(width):
        ones = sum(1 for value in values if value[position] == "1")
        bit = 1 << (width - 1 - position)
        if ones < count // 2:
            epsilon |= bit
        else:
            gamma |= bit
    return gamma * epsilon


def _filter_rating(values: list[str], keep_majority: bool) -> int:
    remaining = list(values)
    width = len(values[0]) if values else 0
    for position in range(width):
        majority = "0" if most_common_bit(remaining, position) is MostCommon.ZEROS else "1"
        wanted = majority if keep_majority else ("1" if majority == "0" else "0")
        remaining = [value for value in remaining if value[position] == wanted]
        if len(remaining) == 1:
            return int(remaining[0], 2)
    return 0


def life_support_rating(lines: Iterable[str]) -> int:
    """Return the oxygen generator rating multiplied by the CO2 scrubber rating."""
    values = _normalise(lines)
    oxygen = _filter_rating(values, keep_majority=True)
    co2 = _filter_rating(values, keep_majority=False)
    return oxygen * co2


def part1(text: str) -> int:
    return power_consumption(text.splitlines())


def part2(text: str) -> int:
    return life_support_rating(text.splitlines())