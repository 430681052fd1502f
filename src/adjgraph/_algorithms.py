"""Traversal and ordering algorithms over a Graph.

Every algorithm here follows the same ground rules:

- the start index is validated before any state is touched;
- each vertex goes from unvisited to visited exactly once, and the start
  vertex is marked before exploration begins;
- outgoing edges are examined in store order (most recently added first);
- a VertexList is the frontier: a queue for BFS, a stack for everything else.

The depth-first algorithms keep their frames on an explicit stack instead of
the Python call stack, so long chains do not hit the recursion limit. The
visiting order is the same as that of the textbook recursive formulation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from ._graph import Graph
from ._vlist import VertexList

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from ._graph import Edge

logger = logging.getLogger(__name__)

VisitCallback: TypeAlias = "Callable[[int], None]"


@dataclass(frozen=True, slots=True)
class DepthFirstResult:
    """Outcome of a full depth-first traversal.

    Attributes:
        order: Vertex indices in the order they were visited.
        trees: Number of DFS trees started (1 for the start vertex, plus one
            per unreached vertex the traversal restarted from).

    """

    order: tuple[int, ...]
    trees: int


def _start_visited(graph: Graph, start: int) -> list[bool]:
    graph.vertex(start)  # raises IndexOutOfRangeError before anything else happens
    visited = [False] * graph.n_vertices
    visited[start] = True
    return visited


def _depth_first(
    graph: Graph,
    root: int,
    visited: list[bool],
    *,
    on_enter: VisitCallback | None = None,
    on_tree_edge: Callable[[int, Edge], None] | None = None,
    on_finish: VisitCallback | None = None,
) -> None:
    """Explore everything reachable from ``root`` in recursive DFS order.

    ``root`` must already be marked visited. ``on_enter`` fires when a vertex
    is first reached, ``on_tree_edge`` when an edge discovers a new vertex
    (before that vertex is entered), and ``on_finish`` once all of a vertex's
    edges have been examined.
    """
    stack = VertexList()
    cursors: dict[int, Iterator[Edge]] = {}

    stack.push(root)
    cursors[root] = graph.edges(root)
    if on_enter is not None:
        on_enter(root)

    while stack:
        u = stack.peek_head()
        for e in cursors[u]:
            if visited[e.target]:
                continue
            visited[e.target] = True
            if on_tree_edge is not None:
                on_tree_edge(u, e)
            if on_enter is not None:
                on_enter(e.target)
            stack.push(e.target)
            cursors[e.target] = graph.edges(e.target)
            break
        else:
            stack.pop()
            del cursors[u]
            if on_finish is not None:
                on_finish(u)


def bfs(graph: Graph, start: int, *, visit: VisitCallback | None = None) -> list[int]:
    """Breadth-first traversal from ``start``.

    Vertices are marked visited when enqueued, so none is queued twice.

    Args:
        graph: The graph to traverse.
        start: Index of the start vertex.
        visit: Optional callback invoked with each vertex as it is dequeued.

    Returns:
        The vertices reachable from ``start``, in visiting order.

    Raises:
        IndexOutOfRangeError: If ``start`` is not a valid index.

    Example:
        >>> g = Graph(4)
        >>> for f, t in [(0, 1), (0, 2), (1, 3), (2, 3)]:
        ...     g.add_edge(f, t, 1.0)
        >>> bfs(g, 0)
        [0, 2, 1, 3]

    """
    visited = _start_visited(graph, start)
    logger.debug(f"BFS from vertex {start}")

    queue = VertexList()
    queue.enqueue(start)
    order: list[int] = []

    while queue:
        u = queue.dequeue()
        order.append(u)
        if visit is not None:
            visit(u)
        for e in graph.edges(u):
            if not visited[e.target]:
                visited[e.target] = True
                queue.enqueue(e.target)

    logger.debug(f"BFS visited {len(order)} of {graph.n_vertices} vertices")
    return order


def dfs(graph: Graph, start: int, *, visit: VisitCallback | None = None) -> DepthFirstResult:
    """Depth-first traversal of the whole graph, starting at ``start``.

    Once everything reachable from ``start`` has been visited, the remaining
    vertices are scanned in index order and each one still unvisited starts a
    new tree. The number of trees therefore counts the components reached
    this way (1 when the whole graph is reachable from ``start``).

    Args:
        graph: The graph to traverse.
        start: Index of the start vertex.
        visit: Optional callback invoked with each vertex as it is reached.

    Returns:
        The visiting order and the number of trees started.

    Raises:
        IndexOutOfRangeError: If ``start`` is not a valid index.

    """
    visited = _start_visited(graph, start)
    logger.debug(f"DFS from vertex {start}")

    order: list[int] = []

    def enter(v: int) -> None:
        order.append(v)
        if visit is not None:
            visit(v)

    _depth_first(graph, start, visited, on_enter=enter)
    trees = 1

    for i in range(graph.n_vertices):
        if not visited[i]:
            trees += 1
            logger.debug(f"DFS restarting at unreached vertex {i}")
            visited[i] = True
            _depth_first(graph, i, visited, on_enter=enter)

    return DepthFirstResult(order=tuple(order), trees=trees)


def dfs_iter(graph: Graph, start: int, *, visit: VisitCallback | None = None) -> list[int]:
    """Stack-driven depth-first traversal of the component reachable from ``start``.

    Each vertex is marked visited when pushed and visited when popped, with
    its unvisited targets pushed in store order. Unlike ``dfs`` it does not
    restart from unreached vertices.

    Raises:
        IndexOutOfRangeError: If ``start`` is not a valid index.

    """
    visited = _start_visited(graph, start)
    logger.debug(f"Iterative DFS from vertex {start}")

    stack = VertexList()
    stack.push(start)
    order: list[int] = []

    while stack:
        u = stack.pop()
        order.append(u)
        if visit is not None:
            visit(u)
        for e in graph.edges(u):
            if not visited[e.target]:
                visited[e.target] = True
                stack.push(e.target)

    return order


def toposort(graph: Graph, start: int) -> VertexList:
    """Topologically order the vertices reachable from ``start``.

    A vertex is inserted at the head of the result once all of its
    descendants are finished. The order is only meaningful when the
    reachable subgraph is acyclic; cycles are not detected. Vertices not
    reachable from ``start`` are left out.

    Returns:
        A new VertexList owned by the caller, ordered head to tail.

    Raises:
        IndexOutOfRangeError: If ``start`` is not a valid index.

    Example:
        >>> g = Graph(4)
        >>> g.add_edge(0, 1, 1.0)
        >>> g.add_edge(2, 3, 1.0)
        >>> list(toposort(g, 0))
        [0, 1]

    """
    visited = _start_visited(graph, start)
    logger.debug(f"Topological sort from vertex {start}")

    result = VertexList()
    _depth_first(graph, start, visited, on_finish=result.insert_head)
    return result


def spanning_tree(graph: Graph, start: int) -> Graph:
    """Extract the DFS predecessor tree rooted at ``start``.

    The tree has the same vertices and labels as ``graph``. Every edge that
    discovers a new vertex during the traversal is copied into it with its
    weight; vertices not reachable from ``start`` stay isolated.

    Raises:
        IndexOutOfRangeError: If ``start`` is not a valid index.

    """
    visited = _start_visited(graph, start)

    tree = Graph(graph.n_vertices)
    for v in graph:
        tree.set_label(v.index, v.label)

    def add_tree_edge(u: int, e: Edge) -> None:
        logger.debug(f"Tree edge {u} -> {e.target}")
        tree.add_edge(u, e.target, e.weight)

    _depth_first(graph, start, visited, on_tree_edge=add_tree_edge)
    logger.debug(f"Spanning tree from vertex {start} has {tree.n_edges} edges")
    return tree
