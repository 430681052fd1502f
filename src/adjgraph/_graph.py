"""Vertex/edge store backed by a fixed-size vertex arena."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ._errors import IndexOutOfRangeError, InvalidArgumentError, NotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterator

MAX_LABEL_LEN = 100


def truncate_label(label: str) -> str:
    """Cut a label down to the maximum stored length."""
    return label[:MAX_LABEL_LEN]


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed, weighted edge stored on its source vertex."""

    target: int
    weight: float


class Vertex:
    """A graph vertex.

    A vertex always carries its own index, so ``Graph.index_of`` never has to
    search for it. Edges are kept in insertion order in ``_edges``; the store
    order exposed by ``edges`` is the reverse of that (newest edge first).

    ``index`` and ``label`` are read-only here; labels are changed through
    ``Graph.set_label`` so that they stay truncated to ``MAX_LABEL_LEN``.
    """

    __slots__ = ("_edges", "_index", "_label")

    def __init__(self, index: int) -> None:
        self._index = index
        self._label: str | None = None
        self._edges: list[Edge] = []

    def __repr__(self) -> str:
        return f"Vertex(index={self._index}, label={self._label!r})"

    @property
    def index(self) -> int:
        """Position of the vertex in its graph."""
        return self._index

    @property
    def label(self) -> str | None:
        """Optional display label, at most ``MAX_LABEL_LEN`` characters."""
        return self._label

    @property
    def edges(self) -> Iterator[Edge]:
        """Outgoing edges in store order (most recently added first)."""
        return reversed(self._edges)

    @property
    def degree(self) -> int:
        """Number of outgoing edges, parallel edges included."""
        return len(self._edges)

    @property
    def display_name(self) -> str:
        """The label, or the index when the vertex is unlabeled."""
        return self.label if self.label is not None else str(self.index)


class Graph:
    """A directed graph with a fixed number of vertices and adjacency lists.

    Vertices are addressed by index (``0..n_vertices-1``) or by label. New
    edges are placed at the front of their source vertex's edge list, so
    ``edges(i)`` yields them in reverse insertion order; every traversal in
    ``adjgraph`` relies on that order.

    Example:
        >>> g = Graph(3)
        >>> g.add_edge(0, 1, 1.0)
        >>> g.add_edge(0, 2, 2.0)
        >>> [e.target for e in g.edges(0)]
        [2, 1]

    """

    __slots__ = ("_vertices",)

    def __init__(self, n_vertices: int) -> None:
        """Create a graph with ``n_vertices`` unlabeled vertices and no edges.

        Raises:
            InvalidArgumentError: If ``n_vertices`` is not a positive integer.

        """
        if isinstance(n_vertices, bool) or not isinstance(n_vertices, int) or n_vertices <= 0:
            msg = f"A graph needs at least one vertex, got {n_vertices!r}"
            raise InvalidArgumentError(msg)
        self._vertices = [Vertex(i) for i in range(n_vertices)]

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __repr__(self) -> str:
        return f"Graph(n_vertices={self.n_vertices}, n_edges={self.n_edges})"

    @property
    def n_vertices(self) -> int:
        """Number of vertices; fixed for the lifetime of the graph."""
        return len(self._vertices)

    @property
    def n_edges(self) -> int:
        """Total number of stored directed edges."""
        return sum(v.degree for v in self._vertices)

    def _check_index(self, i: int) -> None:
        # bool is a subclass of int
        if isinstance(i, bool) or not isinstance(i, int) or not 0 <= i < len(self._vertices):
            raise IndexOutOfRangeError(i, len(self._vertices))

    def clear(self) -> None:
        """Drop every edge and every label. The vertex count is kept."""
        for v in self._vertices:
            v._label = None  # noqa: SLF001
            v._edges.clear()  # noqa: SLF001

    # --- Vertices ---

    def set_label(self, i: int, label: str | None) -> None:
        """Replace the label of vertex ``i``; ``None`` clears it.

        Labels longer than ``MAX_LABEL_LEN`` are silently truncated.

        Raises:
            IndexOutOfRangeError: If ``i`` is not a valid index.

        """
        self._check_index(i)
        self._vertices[i]._label = None if label is None else truncate_label(label)  # noqa: SLF001

    def vertex(self, i: int) -> Vertex:
        """Get vertex ``i``.

        Raises:
            IndexOutOfRangeError: If ``i`` is not a valid index.

        """
        self._check_index(i)
        return self._vertices[i]

    def index_of(self, vertex: Vertex) -> int:
        """Get the index of a vertex belonging to this graph.

        Raises:
            NotFoundError: If the vertex belongs to a different graph.

        """
        i = vertex.index
        if 0 <= i < len(self._vertices) and self._vertices[i] is vertex:
            return i
        msg = f"Vertex {vertex.display_name!r} does not belong to this graph"
        raise NotFoundError(msg)

    def label(self, i: int) -> str | None:
        """Get the label of vertex ``i`` (``None`` if unlabeled)."""
        return self.vertex(i).label

    def display_name(self, i: int) -> str:
        """Get the label of vertex ``i``, falling back to its index."""
        return self.vertex(i).display_name

    def index_of_label(self, label: str | None) -> int:
        """Resolve a label to the index of the first vertex carrying it.

        Only the first ``MAX_LABEL_LEN`` characters take part in the
        comparison, matching what ``set_label`` stores.

        Raises:
            NotFoundError: If ``label`` is ``None`` or no vertex carries it.

        """
        if label is None:
            msg = "Cannot look up a vertex by a missing label"
            raise NotFoundError(msg)
        wanted = truncate_label(label)
        for v in self._vertices:
            if v.label is not None and v.label == wanted:
                return v.index
        msg = f"No vertex labeled {label!r}"
        raise NotFoundError(msg)

    def vertex_by_label(self, label: str | None) -> Vertex:
        """Label-addressed equivalent of ``vertex``."""
        return self._vertices[self.index_of_label(label)]

    # --- Edges ---

    def add_edge(self, from_: int, to: int, weight: float) -> None:
        """Add a directed edge; it becomes the first edge of ``from_``.

        Parallel edges are kept as separate edges.

        Raises:
            IndexOutOfRangeError: If either index is invalid. Nothing is
                modified in that case.

        """
        self._check_index(from_)
        self._check_index(to)
        self._vertices[from_]._edges.append(Edge(to, float(weight)))  # noqa: SLF001

    def add_edge_by_label(self, from_: str | None, to: str | None, weight: float) -> None:
        """Label-addressed equivalent of ``add_edge``.

        Raises:
            NotFoundError: If either label is missing or unknown.

        """
        from_i = self.index_of_label(from_)
        to_i = self.index_of_label(to)
        self.add_edge(from_i, to_i, weight)

    def edges(self, i: int) -> Iterator[Edge]:
        """Iterate the outgoing edges of vertex ``i`` in store order."""
        return self.vertex(i).edges

    def _find_edge(self, from_: int, to: int) -> Edge | None:
        self._check_index(from_)
        self._check_index(to)
        for e in self._vertices[from_].edges:
            if e.target == to:
                return e
        return None

    def is_adjacent(self, from_: int, to: int) -> bool:
        """Check whether there is an edge ``from_ -> to``.

        Raises:
            IndexOutOfRangeError: If either index is invalid.

        """
        return self._find_edge(from_, to) is not None

    def edge_weight(self, from_: int, to: int) -> float | None:
        """Weight of the first edge ``from_ -> to`` in store order.

        With parallel edges this is the most recently added one.

        Returns:
            The weight, or ``None`` when the vertices are not adjacent.

        Raises:
            IndexOutOfRangeError: If either index is invalid.

        """
        e = self._find_edge(from_, to)
        return None if e is None else e.weight

    def count_self_loops(self) -> int:
        """Count the vertices that have at least one edge to themselves."""
        return sum(1 for v in self._vertices if any(e.target == v.index for e in v.edges))

    def format(self) -> str:
        """Render one line per vertex: ``name: -> target -> target``."""
        lines = []
        for v in self._vertices:
            targets = "".join(f" -> {self._vertices[e.target].display_name}" for e in v.edges)
            lines.append(f"{v.display_name}:{targets}")
        return "\n".join(lines)
