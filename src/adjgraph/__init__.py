"""In-memory directed graphs with traversal and ordering algorithms."""

__all__ = [
    "MAX_LABEL_LEN",
    "Algorithm",
    "DepthFirstResult",
    "Edge",
    "EmptyListError",
    "ErrorKind",
    "Graph",
    "GraphError",
    "GraphFileError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "NotFoundError",
    "ParseError",
    "TraversalReport",
    "Vertex",
    "VertexList",
    "VisitedVertex",
    "bfs",
    "build_report",
    "dfs",
    "dfs_iter",
    "dump_graph",
    "dump_graph_file",
    "dumps_graph",
    "load_graph",
    "load_graph_file",
    "loads_graph",
    "spanning_tree",
    "to_dot",
    "toposort",
    "write_dot_file",
]

from ._algorithms import DepthFirstResult, bfs, dfs, dfs_iter, spanning_tree, toposort
from ._errors import (
    EmptyListError,
    ErrorKind,
    GraphError,
    GraphFileError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    NotFoundError,
    ParseError,
)
from ._graph import MAX_LABEL_LEN, Edge, Graph, Vertex
from ._io import (
    dump_graph,
    dump_graph_file,
    dumps_graph,
    load_graph,
    load_graph_file,
    loads_graph,
    to_dot,
    write_dot_file,
)
from ._report import Algorithm, TraversalReport, VisitedVertex, build_report
from ._vlist import VertexList
