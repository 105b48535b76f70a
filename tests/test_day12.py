from collections import Counter

import pytest

from aoc2021.day12 import CaveGraph, find_paths, parse_graph, part1, part2

EXAMPLE = """\
start-A
start-b
A-c
A-b
b-d
A-end
b-end
"""


def test_part1_example():
    assert part1(EXAMPLE) == 10


def test_part2_example():
    assert part2(EXAMPLE) == 36


def test_direct_connection_gives_single_path():
    graph = parse_graph("start-end\n")
    assert find_paths(graph) == [("start", "end")]


def test_is_big():
    assert CaveGraph.is_big("A") is True
    assert CaveGraph.is_big("HN") is True
    assert CaveGraph.is_big("b") is False
    assert CaveGraph.is_big("start") is False


def test_edges_are_symmetric_and_not_duplicated():
    graph = CaveGraph()
    graph.add_edge("start", "A")
    graph.add_edge("A", "start")
    graph.add_edge("A", "end")
    assert graph.neighbours("start") == ["A"]
    assert graph.neighbours("A") == ["start", "end"]
    assert graph.neighbours("end") == ["A"]


def test_unknown_cave_raises():
    graph = parse_graph("start-end\n")
    with pytest.raises(KeyError):
        graph.neighbours("zz")


def test_self_loop_rejected():
    with pytest.raises(ValueError):
        parse_graph("start-start\n")


def test_malformed_line_rejected():
    with pytest.raises(ValueError):
        parse_graph("start-A-end\n")


def test_missing_end_rejected():
    with pytest.raises(ValueError):
        find_paths(parse_graph("start-A\nA-b\n"))


def test_paths_run_from_start_to_end():
    for allow in (False, True):
        for path in find_paths(parse_graph(EXAMPLE), allow):
            assert path[0] == "start"
            assert path[-1] == "end"
            assert path.count("start") == 1


def test_part1_visits_small_caves_once():
    for path in find_paths(parse_graph(EXAMPLE)):
        small = Counter(name for name in path if not CaveGraph.is_big(name))
        assert max(small.values()) == 1


def test_part2_revisits_at_most_one_small_cave():
    for path in find_paths(parse_graph(EXAMPLE), allow_single_revisit=True):
        small = Counter(name for name in path if not CaveGraph.is_big(name))
        repeated = [name for name, count in small.items() if count > 1]
        assert len(repeated) <= 1
        assert all(small[name] == 2 for name in repeated)


def test_part2_paths_include_part1_paths():
    graph = parse_graph(EXAMPLE)
    single = set(find_paths(graph))
    revisit = set(find_paths(graph, allow_single_revisit=True))
    assert single <= revisit
    assert len(revisit) > len(single)


def test_paths_are_distinct():
    paths = find_paths(parse_graph(EXAMPLE), allow_single_revisit=True)
    assert len(paths) == len(set(paths))