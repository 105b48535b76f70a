"""Passage pathing: counting routes through a cave system."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

START = "start"
END = "end"

Path = tuple[str, ...]


class CaveGraph:
    """An undirected graph of caves whose names tell big caves from small ones."""

    def __init__(self) -> None:
        self._adjacent: dict[str, list[str]] = {}

    def add_edge(self, first: str, second: str) -> None:
        """Connect two distinct caves; connecting them again changes nothing."""
        if not first or not second:
            raise ValueError("cave names must not be empty")
        if first == second:
            raise ValueError(f"cave {first!r} cannot connect to itself")
        first_links = self._adjacent.setdefault(first, [])
        second_links = self._adjacent.setdefault(second, [])
        if second not in first_links:
            first_links.append(second)
        if first not in second_links:
            second_links.append(first)

    def neighbours(self, name: str) -> list[str]:
        """Return the caves connected to ``name``, in the order they were connected."""
        try:
            return list(self._adjacent[name])
        except KeyError:
            raise KeyError(f"unknown cave {name!r}") from None

    @staticmethod
    def is_big(name: str) -> bool:
        """Big caves are those whose name does not start with a lower-case letter."""
        return ord(name[0]) < ord("a")

    @property
    def caves(self) -> list[str]:
        """Every cave, in the order it was first seen."""
        return list(self._adjacent)

    def __contains__(self, name: object) -> bool:
        return name in self._adjacent


def parse_graph(text: str) -> CaveGraph:
    """Parse one ``cave-cave`` connection per line."""
    graph = CaveGraph()
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        parts = line.split("-")
        if len(parts) != 2:
            raise ValueError(f"malformed connection: {line!r}")
        graph.add_edge(parts[0], parts[1])
    return graph


def _has_small_twice(path: Sequence[str]) -> bool:
    counts = Counter(
        name for name in path if not CaveGraph.is_big(name) and name != START
    )
    return any(count > 1 for count in counts.values())


def find_paths(graph: CaveGraph, allow_single_revisit: bool = False) -> list[Path]:
    """Return every path from ``start`` to ``end``.

    Small caves are visited at most once; with ``allow_single_revisit`` one small
    cave other than ``start`` may be visited twice on each path.
    """
    if START not in graph or END not in graph:
        raise ValueError("the cave system needs both a start and an end cave")

    paths: list[Path] = []
    path: list[str] = []

    def visit(name: str) -> None:
        if name == END:
            paths.append((*path, name))
            return
        if not graph.is_big(name) and name in path:
            if not allow_single_revisit or _has_small_twice(path):
                return
        path.append(name)
        for neighbour in graph.neighbours(name):
            if allow_single_revisit and neighbour == START:
                continue
            visit(neighbour)
        path.pop()

    visit(START)
    return paths


def part1(text: str) -> int:
    return len(find_paths(parse_graph(text)))


def part2(text: str) -> int:
    return len(find_paths(parse_graph(text), allow_single_revisit=True))