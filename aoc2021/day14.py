"""Extended polymerization: growing a polymer by pair insertion."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping

PART1_STEPS = 10
PART2_STEPS = 40


def parse_polymer(text: str) -> tuple[str, dict[str, str]]:
    """Parse the template on the first line and ``AB -> C`` insertion rules after it."""
    lines = [raw.strip() for raw in text.splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        raise ValueError("no polymer template given")
    template = lines[0]
    rules: dict[str, str] = {}
    for line in lines[1:]:
        parts = line.split(" -> ")
        if len(parts) != 2 or len(parts[0]) != 2 or len(parts[1]) < 1:
            raise ValueError(f"malformed insertion rule: {line!r}")
        rules[parts[0]] = parts[1][0]
    return template, rules


def polymerize(template: str, rules: Mapping[str, str], steps: int) -> str:
    """Apply the insertion rules ``steps`` times and return the resulting polymer."""
    polymer = template
    for _ in range(steps):
        if not polymer:
            break
        pieces = [polymer[0]]
        for first, second in zip(polymer, polymer[1:]):
            inserted = rules.get(first + second)
            if inserted is not None:
                pieces.append(inserted)
            pieces.append(second)
        polymer = "".join(pieces)
    return polymer


def element_counts(template: str, rules: Mapping[str, str], steps: int) -> Counter[str]:
    """Count each element after ``steps`` insertions by tracking pair counts only."""
    if not template:
        raise ValueError("the polymer template is empty")
    pairs: Counter[str] = Counter(a + b for a, b in zip(template, template[1:]))
    for _ in range(steps):
        grown: Counter[str] = Counter()
        for pair, count in pairs.items():
            middle = rules.get(pair)
            if middle is None:
                grown[pair] += count
            else:
                grown[pair[0] + middle] += count
                grown[middle + pair[1]] += count
        pairs = grown
    counts: Counter[str] = Counter()
    for pair, count in pairs.items():
        counts[pair[0]] += count
    counts[template[-1]] += 1
    return counts


def _spread(counts: Counter[str]) -> int:
    return max(counts.values()) - min(counts.values())


def part1(text: str) -> int:
    template, rules = parse_polymer(text)
    polymer = polymerize(template, rules, PART1_STEPS)
    if not polymer:
        raise ValueError("the polymer template is empty")
    return _spread(Counter(polymer))


def part2(text: str) -> int:
    template, rules = parse_polymer(text)
    return _spread(element_counts(template, rules, PART2_STEPS))