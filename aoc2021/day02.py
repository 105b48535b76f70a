"""Dive: steering the submarine with a list of commands."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """One course instruction such as ``forward 5``."""

    direction: str
    amount: int


def parse_commands(text: str) -> list[Command]:
    """Parse one ``<direction> <amount>`` command per line."""
    commands = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        parts = line.split(" ")
        if len(parts) != 2:
            raise ValueError("Input file isnt correct")
        commands.append(Command(parts[0], int(parts[1])))
    return commands


def follow_course(commands: Iterable[Command]) -> tuple[int, int]:
    """Return the horizontal position and depth, where up and down move directly."""
    x = depth = 0
    for command in commands:
        if command.direction == "forward":
            x += command.amount
        elif command.direction == "down":
            depth += command.amount
        elif command.direction == "up":
            depth -= command.amount
    return x, depth


def follow_aimed_course(commands: Iterable[Command]) -> tuple[int, int]:
    """Return the horizontal position and depth, where up and down change the aim."""
    x = depth = aim = 0
    for command in commands:
        if command.direction == "forward":
            x += command.amount
            depth += aim * command.amount
        elif command.direction == "down":
            aim += command.amount
        elif command.direction == "up":
            aim -= command.amount
    return x, depth


def part1(text: str) -> int:
    x, depth = follow_course(parse_commands(text))
    return x * depth


def part2(text: str) -> int:
    x, depth = follow_aimed_course(parse_commands(text))
    return x * depth