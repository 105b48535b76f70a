"""Giant squid: playing bingo against a set of boards."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass(eq=False)
class BingoBoard:
    """A bingo board together with every number called on it so far."""

    rows: list[list[int]]
    marked: list[int] = field(default_factory=list)

    def mark(self, value: int) -> None:
        """Record a called number."""
        self.marked.append(value)

    def unmarked_numbers(self) -> list[int]:
        """Return the board's numbers that have not been called, in row order."""
        called = set(self.marked)
        return [value for row in self.rows for value in row if value not in called]

    def winning_line(self) -> list[int] | None:
        """Return the first fully marked row, else the first fully marked column."""
        called = set(self.marked)
        for row in self.rows:
            if row and all(value in called for value in row):
                return list(row)
        for column in zip(*self.rows):
            if column and all(value in called for value in column):
                return list(column)
        return None

    def has_bingo(self) -> bool:
        """Whether a row or a column is fully marked."""
        return self.winning_line() is not None

    @property
    def score(self) -> int:
        """Sum of the unmarked numbers times the number called last."""
        if not self.marked:
            raise ValueError("no number has been called on this board")
        return sum(self.unmarked_numbers()) * self.marked[-1]


def _fresh_copy(board: BingoBoard) -> BingoBoard:
    return BingoBoard([list(row) for row in board.rows], list(board.marked))


def parse_bingo(text: str) -> tuple[list[int], list[BingoBoard]]:
    """Parse the called numbers and the boards separated by blank lines."""
    lines = iter(text.strip().splitlines())
    first = next(lines, "").strip()
    if not first:
        raise ValueError("no numbers to call")
    numbers = [int(value) for value in first.split(",")]

    boards: list[BingoBoard] = []
    rows: list[list[int]] = []
    for raw in lines:
        fields = raw.split()
        if not fields:
            if rows:
                boards.append(BingoBoard(rows))
            rows = []
            continue
        rows.append([int(value) for value in fields])
    if rows:
        boards.append(BingoBoard(rows))
    return numbers, boards


def first_winner_score(numbers: Iterable[int], boards: Sequence[BingoBoard]) -> int:
    """Play on copies of the boards and score the first one to win."""
    playing = [_fresh_copy(board) for board in boards]
    for number in numbers:
        for board in playing:
            board.mark(number)
            if board.has_bingo():
                return board.score
    raise ValueError("no board wins")


def last_winner_score(numbers: Iterable[int], boards: Sequence[BingoBoard]) -> int:
    """Play on copies of the boards, dropping winners, and score the last one to win."""
    remaining = [_fresh_copy(board) for board in boards]
    for number in numbers:
        for board in list(remaining):
            board.mark(number)
            if board.has_bingo():
                if len(remaining) == 1:
                    return board.score
                remaining.remove(board)
    raise ValueError("the last board never wins")


def part1(text: str) -> int:
    return first_winner_score(*parse_bingo(text))


def part2(text: str) -> int:
    return last_winner_score(*parse_bingo(text))