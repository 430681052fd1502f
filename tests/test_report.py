"""Tests for traversal reports."""

import json

import pytest

from adjgraph import Algorithm, IndexOutOfRangeError, TraversalReport, VisitedVertex, build_report, loads_graph

GRAPH = """directed
5 4
a
b
c
d
e
a b 1
a c 1
b d 1
c d 1
"""


@pytest.mark.parametrize(
    ("algorithm", "expected", "trees"),
    [
        (Algorithm.BFS, [0, 2, 1, 3], None),
        (Algorithm.DFS, [0, 2, 3, 1, 4], 2),
        (Algorithm.DFS_ITER, [0, 1, 3, 2], None),
        (Algorithm.TOPOSORT, [0, 1, 2, 3], None),
    ],
)
def test_build_report(algorithm: Algorithm, expected: list[int], trees: int | None) -> None:
    report = build_report(loads_graph(GRAPH), algorithm, 0)
    assert report.algorithm is algorithm
    assert report.start == 0
    assert report.indices == expected
    assert report.trees == trees


def test_report_carries_labels() -> None:
    report = build_report(loads_graph(GRAPH), Algorithm.BFS, 0)
    assert report.order[:2] == [VisitedVertex(index=0, label="a"), VisitedVertex(index=2, label="c")]


def test_report_json_round_trip() -> None:
    report = build_report(loads_graph(GRAPH), Algorithm.DFS, 1)
    data = json.loads(report.model_dump_json())
    assert data["algorithm"] == "dfs"
    assert data["trees"] == 3
    assert TraversalReport.model_validate(data) == report


def test_report_invalid_start() -> None:
    with pytest.raises(IndexOutOfRangeError):
        build_report(loads_graph(GRAPH), Algorithm.TOPOSORT, 7)


def test_algorithm_values() -> None:
    assert [a.value for a in Algorithm] == ["bfs", "dfs", "dfs-iter", "toposort"]
