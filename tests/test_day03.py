import pytest

from aoc2021.day03 import (
    MostCommon,
    life_support_rating,
    most_common_bit,
    part1,
    part2,
    power_consumption,
)

EXAMPLE = """00100
11110
10110
10111
10101
01111
00111
11100
10000
11001
00010
01010
"""


def _invert(line):
    return "".join("1" if ch == "0" else "0" for ch in line)


def test_part1_example():
    assert part1(EXAMPLE) == 198


def test_part2_example():
    assert part2(EXAMPLE) == 230


def test_most_common_ones():
    assert most_common_bit(["1", "1", "0"], 0) is MostCommon.ONES


def test_most_common_zeros():
    assert most_common_bit(["0", "0", "1"], 0) is MostCommon.ZEROS


def test_most_common_equal():
    assert most_common_bit(["10", "01"], 1) is MostCommon.EQUAL


def test_inverting_bits_swaps_gamma_and_epsilon():
    lines = EXAMPLE.split()
    inverted = [_invert(line) for line in lines]
    assert power_consumption(inverted) == power_consumption(lines)


def test_life_support_ignores_order():
    lines = EXAMPLE.split()
    assert life_support_rating(list(reversed(lines))) == life_support_rating(lines)


def test_blank_lines_are_ignored():
    padded = "\n\n" + EXAMPLE + "\n\n"
    assert part1(padded) == part1(EXAMPLE)
    assert part2(padded) == part2(EXAMPLE)


def test_non_binary_input_is_rejected():
    with pytest.raises(ValueError):
        part1("10a01\n")
    with pytest.raises(ValueError):
        part2("10201\n")