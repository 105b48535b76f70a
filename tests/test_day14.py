from collections import Counter

import pytest

from aoc2021.day14 import element_counts, parse_polymer, part1, part2, polymerize

EXAMPLE = """\
NNCB

CH -> B
HH -> N
CB -> H
NH -> C
HB -> C
HC -> B
HN -> C
NN -> C
BH -> H
NC -> B
NB -> B
BN -> B
BB -> N
BC -> B
CC -> N
CN -> C
"""


def test_parse_polymer():
    template, rules = parse_polymer(EXAMPLE)
    assert template == "NNCB"
    assert len(rules) == 16
    assert rules["CH"] == "B"
    assert rules["CN"] == "C"


def test_part1_example():
    assert part1(EXAMPLE) == 1588


def test_part2_example():
    assert part2(EXAMPLE) == 2188189693529


@pytest.mark.parametrize("steps", range(0, 6))
def test_polymer_length_grows_by_pairs(steps):
    template, rules = parse_polymer(EXAMPLE)
    polymer = polymerize(template, rules, steps)
    expected = len(template)
    for _ in range(steps):
        expected = 2 * expected - 1
    assert len(polymer) == expected


@pytest.mark.parametrize("steps", range(0, 11))
def test_counts_agree_with_full_polymer(steps):
    template, rules = parse_polymer(EXAMPLE)
    assert element_counts(template, rules, steps) == Counter(
        polymerize(template, rules, steps)
    )


def test_polymer_keeps_ends_and_template_order():
    template, rules = parse_polymer(EXAMPLE)
    polymer = polymerize(template, rules, 3)
    assert polymer[0] == template[0]
    assert polymer[-1] == template[-1]


def test_pairs_without_rule_stay():
    assert polymerize("AB", {}, 5) == "AB"
    assert element_counts("AB", {}, 5) == Counter("AB")


def test_zero_steps_returns_template():
    template, rules = parse_polymer(EXAMPLE)
    assert polymerize(template, rules, 0) == template


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        parse_polymer("\n\n")


def test_malformed_rule_rejected():
    with pytest.raises(ValueError):
        parse_polymer("NN\n\nNNN -> C\n")


def test_element_counts_rejects_empty_template():
    with pytest.raises(ValueError):
        element_counts("", {}, 1)