"""Syntax scoring: finding corrupted and incomplete chunk lines."""

from __future__ import annotations

from dataclasses import dataclass

_PAIRS = {")": "(", "]": "[", "}": "{", ">": "<"}
_OPENERS = frozenset(_PAIRS.values())
_ERROR_POINTS = {")": 3, "]": 57, "}": 1197, ">": 25137}
_COMPLETION_POINTS = {"(": 1, "[": 2, "{": 3, "<": 4}


@dataclass(frozen=True)
class LineCheck:
    """Outcome of reading a line: the first illegal closer, or the chunks left open."""

    illegal: str | None
    unclosed: str

    @property
    def corrupted(self) -> bool:
        return self.illegal is not None


def check_line(line: str) -> LineCheck:
    """Read a line of brackets, stopping at the first closer that does not match."""
    stack: list[str] = []
    for char in line.strip():
        if char in _OPENERS:
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack[-1] != _PAIRS[char]:
                return LineCheck(char, "".join(stack))
            stack.pop()
        else:
            raise ValueError(f"unexpected character {char!r}")
    return LineCheck(None, "".join(stack))


def syntax_error_score(line: str) -> int:
    """Points for the first illegal character, or 0 when the line is not corrupted."""
    check = check_line(line)
    return _ERROR_POINTS[check.illegal] if check.illegal is not None else 0


def completion_score(line: str) -> int | None:
    """Score of the closers needed to finish the line; ``None`` when it is corrupted."""
    check = check_line(line)
    if check.corrupted:
        return None
    score = 0
    for opener in reversed(check.unclosed):
        score = score * 5 + _COMPLETION_POINTS[opener]
    return score


def _lines(text: str) -> list[str]:
    return [line for line in (raw.strip() for raw in text.splitlines()) if line]


def part1(text: str) -> int:
    return sum(syntax_error_score(line) for line in _lines(text))


def part2(text: str) -> int:
    scores = sorted(
        score for score in map(completion_score, _lines(text)) if score is not None
    )
    if not scores:
        raise ValueError("no incomplete lines")
    return scores[len(scores) // 2]