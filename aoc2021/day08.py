"""Seven segment search: decoding scrambled seven-segment displays."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_EASY_LENGTHS = {2: 1, 3: 7, 4: 4, 7: 8}


def parse_entries(text: str) -> list[tuple[list[str], list[str]]]:
    """Parse lines of ten patterns and four output values separated by `` | ``."""
    entries = []
    for raw in text.splitlines():
        if not raw.strip():
            continue
        parts = raw.split(" | ")
        if len(parts) != 2:
            raise ValueError(f"malformed entry: {raw!r}")
        entries.append((parts[0].split(), parts[1].split()))
    return entries


def count_easy_digits(entries: Iterable[tuple[Sequence[str], Sequence[str]]]) -> int:
    """Count output values that can only be 1, 4, 7 or 8 by their length."""
    return sum(
        1 for _, outputs in entries for output in outputs if len(output) in _EASY_LENGTHS
    )


def _contains(word: str, part: str) -> bool:
    return set(part) <= set(word)


def deduce_digits(patterns: Sequence[str]) -> list[str]:
    """Return the pattern for each digit 0 to 9; undetermined digits are empty."""
    digits = [""] * 10
    for pattern in patterns:
        if len(pattern) in _EASY_LENGTHS:
            digits[_EASY_LENGTHS[len(pattern)]] = pattern
    for pattern in patterns:
        if len(pattern) == 5 and _contains(pattern, digits[7]):
            digits[3] = pattern
    for pattern in patterns:
        if len(pattern) == 6 and _contains(pattern, digits[3]):
            digits[9] = pattern
    for pattern in patterns:
        if len(pattern) == 6 and not _contains(pattern, digits[1]):
            digits[6] = pattern
    for pattern in patterns:
        if len(pattern) == 5 and _contains(digits[6], pattern):
            digits[5] = pattern
    for pattern in patterns:
        if len(pattern) == 5 and pattern not in (digits[3], digits[5]):
            digits[2] = pattern
    for pattern in patterns:
        if len(pattern) == 6 and pattern not in (digits[6], digits[9]):
            digits[0] = pattern
    return digits


def _same_segments(output: str, pattern: str) -> bool:
    return len(output) == len(pattern) and set(output) <= set(pattern)


def decode_output(patterns: Sequence[str], outputs: Iterable[str]) -> int:
    """Decode the output values into the number they display."""
    digits = deduce_digits(patterns)
    text = "".join(
        str(digit)
        for output in outputs
        for digit, pattern in enumerate(digits)
        if _same_segments(output, pattern)
    )
    if not text:
        raise ValueError("no output value could be decoded")
    return int(text)


def part1(text: str) -> int:
    return count_easy_digits(parse_entries(text))


def part2(text: str) -> int:
    return sum(decode_output(patterns, outputs) for patterns, outputs in parse_entries(text))