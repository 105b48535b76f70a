import pytest

from aoc2021.day02 import (
    Command,
    follow_aimed_course,
    follow_course,
    parse_commands,
    part1,
    part2,
)

EXAMPLE = """forward 5
down 5
forward 8
up 3
down 8
forward 2
"""


def test_parse_commands_keeps_order_and_values():
    commands = parse_commands(EXAMPLE)
    assert commands[0] == Command("forward", 5)
    assert commands[3] == Command("up", 3)
    assert [c.direction for c in commands] == [
        line.split()[0] for line in EXAMPLE.splitlines()
    ]


def test_parse_rejects_line_without_amount():
    with pytest.raises(ValueError):
        parse_commands("forward\n")


def test_parse_rejects_line_with_extra_parts():
    with pytest.raises(ValueError):
        parse_commands("forward 5 6\n")


def test_parse_rejects_non_numeric_amount():
    with pytest.raises(ValueError):
        parse_commands("down lots\n")


def test_part1_example():
    assert part1(EXAMPLE) == 150


def test_part2_example():
    assert part2(EXAMPLE) == 900


def test_unknown_direction_is_ignored():
    plain = parse_commands(EXAMPLE)
    noisy = plain + [Command("sideways", 7)]
    assert follow_course(noisy) == follow_course(plain)
    assert follow_aimed_course(noisy) == follow_aimed_course(plain)


def test_forward_moves_same_distance_in_both_modes():
    commands = parse_commands(EXAMPLE)
    assert follow_course(commands)[0] == follow_aimed_course(commands)[0]


def test_forward_only_course_stays_at_surface():
    commands = [Command("forward", 4), Command("forward", 9)]
    assert follow_aimed_course(commands) == (13, 0)
    assert follow_course(commands) == (13, 0)