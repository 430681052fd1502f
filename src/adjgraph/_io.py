"""Reading and writing graphs as text.

Two formats are handled here:

- the graph description format, read by ``load_graph`` and written by
  ``dump_graph``::

      directed            (or "undirected")
      3 2                 n_vertices n_edges
      A                   one label per line, in index order
      B
      C
      A B 1.5             n_edges lines: label_from label_to weight
      B C 2

- Graphviz ``.dot``, written by ``to_dot``.
"""

from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING

from ._errors import GraphFileError, InvalidArgumentError, NotFoundError, ParseError
from ._graph import Graph

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path
    from typing import TextIO

logger = logging.getLogger(__name__)


# =============================================================================
# Loading
# =============================================================================


class _LineReader:
    """Hands out lines one at a time and remembers the current line number."""

    def __init__(self, stream: TextIO) -> None:
        self._lines: Iterator[str] = iter(stream)
        self.line_number = 0

    def next(self, what: str) -> str:
        """Return the next line without its line terminator.

        Raises:
            ParseError: If the stream is exhausted.
            GraphFileError: If reading from the stream fails.

        """
        try:
            line = next(self._lines)
        except StopIteration:
            msg = f"unexpected end of input, expected {what}"
            raise ParseError(msg, self.line_number + 1) from None
        except (OSError, UnicodeDecodeError) as e:
            msg = f"Cannot read line {self.line_number + 1}: {e}"
            raise GraphFileError(msg) from e
        self.line_number += 1
        return line.rstrip("\r\n")


def _parse_header(line: str, line_number: int) -> bool:
    """Return True for an undirected graph, False for a directed one."""
    if line.startswith("undirected"):
        return True
    if line.startswith("directed"):
        return False
    msg = f"expected 'directed' or 'undirected', got {line!r}"
    raise ParseError(msg, line_number)


def _parse_counts(line: str, line_number: int) -> tuple[int, int]:
    tokens = line.split()
    if len(tokens) != 2:  # noqa: PLR2004
        msg = f"expected '<n_vertices> <n_edges>', got {line!r}"
        raise ParseError(msg, line_number)
    try:
        n_vertices, n_edges = (int(t) for t in tokens)
    except ValueError:
        msg = f"vertex and edge counts must be integers, got {line!r}"
        raise ParseError(msg, line_number) from None
    if n_vertices <= 0:
        msg = "a graph needs at least one vertex"
        raise ParseError(msg, line_number)
    if n_edges < 0:
        msg = f"edge count cannot be negative, got {n_edges}"
        raise ParseError(msg, line_number)
    return n_vertices, n_edges


def _parse_edge(line: str, line_number: int) -> tuple[str, str, float]:
    tokens = line.split()
    if len(tokens) != 3:  # noqa: PLR2004
        msg = f"expected '<label_from> <label_to> <weight>', got {line!r}"
        raise ParseError(msg, line_number)
    from_label, to_label, weight_str = tokens
    try:
        weight = float(weight_str)
    except ValueError:
        msg = f"edge weight must be a number, got {weight_str!r}"
        raise ParseError(msg, line_number) from None
    return from_label, to_label, weight


def load_graph(stream: TextIO) -> Graph:
    """Build a graph from a graph description.

    Parsing stops at the first malformed line. Lines after the declared
    edges are ignored.

    Args:
        stream: Text stream positioned at the header line.

    Returns:
        The populated graph.

    Raises:
        ParseError: If the description is malformed, declares zero vertices,
            has fewer lines than declared, or names an unknown label.
        GraphFileError: If reading from the stream fails.

    """
    reader = _LineReader(stream)

    undirected = _parse_header(reader.next("the graph kind"), reader.line_number)
    n_vertices, n_edges = _parse_counts(reader.next("the vertex and edge counts"), reader.line_number)
    logger.debug(
        f"Loading {'undirected' if undirected else 'directed'} graph "
        f"with {n_vertices} vertices and {n_edges} edges",
    )

    try:
        graph = Graph(n_vertices)
    except InvalidArgumentError as e:
        raise ParseError(str(e), reader.line_number) from e

    for i in range(n_vertices):
        graph.set_label(i, reader.next(f"the label of vertex {i}"))

    for i in range(n_edges):
        from_label, to_label, weight = _parse_edge(reader.next(f"edge {i}"), reader.line_number)
        try:
            graph.add_edge_by_label(from_label, to_label, weight)
            if undirected:
                graph.add_edge_by_label(to_label, from_label, weight)
        except NotFoundError as e:
            raise ParseError(str(e), reader.line_number) from e

    return graph


def loads_graph(text: str) -> Graph:
    """Build a graph from a graph description held in a string."""
    return load_graph(io.StringIO(text))


def load_graph_file(path: Path) -> Graph:
    """Build a graph from a graph description file.

    Raises:
        GraphFileError: If the file cannot be opened or read.
        ParseError: If the description is malformed.

    """
    try:
        f = path.open(encoding="utf-8")
    except OSError as e:
        msg = f"Cannot open graph file {path}: {e}"
        raise GraphFileError(msg) from e
    with f:
        graph = load_graph(f)
    logger.debug(f"Loaded graph from {path}")
    return graph


# =============================================================================
# Dumping
# =============================================================================


def dump_graph(graph: Graph, stream: TextIO) -> None:
    """Write a graph in the description format as a directed graph.

    Edges of each vertex are written oldest first, so loading the output
    rebuilds the same store order. Unlabeled vertices are written by index;
    the output only reloads faithfully when labels are unique and contain no
    whitespace.
    """
    stream.write("directed\n")
    stream.write(f"{graph.n_vertices} {graph.n_edges}\n")
    for v in graph:
        stream.write(f"{v.display_name}\n")
    for v in graph:
        for e in reversed(list(v.edges)):
            stream.write(f"{v.display_name} {graph.display_name(e.target)} {e.weight!r}\n")


def dumps_graph(graph: Graph) -> str:
    """Return the description format of a graph as a string."""
    buffer = io.StringIO()
    dump_graph(graph, buffer)
    return buffer.getvalue()


def dump_graph_file(graph: Graph, path: Path) -> None:
    """Write the description format of a graph to a file.

    Raises:
        GraphFileError: If the file cannot be written.

    """
    try:
        with path.open("w", encoding="utf-8") as f:
            dump_graph(graph, f)
    except OSError as e:
        msg = f"Cannot write graph file {path}: {e}"
        raise GraphFileError(msg) from e
    logger.debug(f"Dumped graph to {path}")


# =============================================================================
# Graphviz export
# =============================================================================


def _dot_quote(text: str) -> str:
    """Escape a string for use inside a double-quoted .dot attribute."""
    return text.replace("\\", "\\\\").replace('"', '\\"')


def to_dot(graph: Graph, *, undirected: bool = False, weights: bool = True) -> str:
    """Render a graph as Graphviz ``.dot`` source.

    One node statement is written per labeled vertex and one edge statement
    per stored edge, in store order. For an undirected rendering the two
    directions of an edge are both emitted and merged by ``concentrate``.

    Example:
        >>> g = Graph(2)
        >>> g.add_edge(0, 1, 2.5)
        >>> print(to_dot(g), end="")
        digraph g {
        0 -> 1 [label="2.50"];
        }

    """
    if undirected:
        lines = ["graph g { concentrate=true"]
        edge_token = "--"
    else:
        lines = ["digraph g {"]
        edge_token = "->"

    lines.extend(f'{v.index} [label="{_dot_quote(v.label)}"];' for v in graph if v.label is not None)

    for v in graph:
        for e in v.edges:
            weight_clause = f' [label="{e.weight:.2f}"]' if weights else ""
            lines.append(f"{v.index} {edge_token} {e.target}{weight_clause};")

    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot_file(graph: Graph, path: Path, *, undirected: bool = False, weights: bool = True) -> None:
    """Write ``to_dot`` output to a file.

    Raises:
        GraphFileError: If the file cannot be written.

    """
    try:
        path.write_text(to_dot(graph, undirected=undirected, weights=weights), encoding="utf-8")
    except OSError as e:
        msg = f"Cannot write dot file {path}: {e}"
        raise GraphFileError(msg) from e
    logger.debug(f"Exported graph to {path}")
