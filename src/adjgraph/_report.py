"""Serialisable reports of traversal results."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from ._algorithms import bfs, dfs, dfs_iter, toposort

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._graph import Graph


class Algorithm(StrEnum):
    """Vertex-ordering algorithms that can be reported on."""

    BFS = "bfs"
    DFS = "dfs"
    DFS_ITER = "dfs-iter"
    TOPOSORT = "toposort"


class VisitedVertex(BaseModel):
    """A vertex as it appears in a traversal order."""

    model_config = ConfigDict(frozen=True)

    index: int
    label: str | None = None


class TraversalReport(BaseModel):
    """The ordering produced by one algorithm run.

    Attributes:
        algorithm: Which algorithm produced the order.
        start: Index of the start vertex.
        order: Vertices in the order the algorithm produced them.
        trees: Number of DFS trees started; only set for ``Algorithm.DFS``.

    """

    model_config = ConfigDict(frozen=True)

    algorithm: Algorithm
    start: int
    order: list[VisitedVertex]
    trees: int | None = None

    @property
    def indices(self) -> list[int]:
        return [v.index for v in self.order]


def _visited(graph: Graph, indices: Iterable[int]) -> list[VisitedVertex]:
    return [VisitedVertex(index=i, label=graph.label(i)) for i in indices]


def build_report(graph: Graph, algorithm: Algorithm, start: int) -> TraversalReport:
    """Run ``algorithm`` on ``graph`` from ``start`` and describe the result.

    Raises:
        IndexOutOfRangeError: If ``start`` is not a valid index.

    """
    trees: int | None = None
    match algorithm:
        case Algorithm.BFS:
            indices: Iterable[int] = bfs(graph, start)
        case Algorithm.DFS:
            result = dfs(graph, start)
            indices = result.order
            trees = result.trees
        case Algorithm.DFS_ITER:
            indices = dfs_iter(graph, start)
        case Algorithm.TOPOSORT:
            indices = toposort(graph, start)

    return TraversalReport(
        algorithm=algorithm,
        start=start,
        order=_visited(graph, indices),
        trees=trees,
    )
