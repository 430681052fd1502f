"""Rich rendering utilities for graph commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

if TYPE_CHECKING:
    from rich.console import Console

    from adjgraph._graph import Graph
    from adjgraph._report import TraversalReport


def render_graph_table(graph: Graph, console: Console) -> None:
    """Render vertices and their outgoing edges as a Rich table.

    Edges are listed in store order (most recently added first).

    Args:
        graph: Graph to render.
        console: Rich Console to output to.

    """
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Index", justify="right", style="dim")
    table.add_column("Label", style="bold")
    table.add_column("Edges")

    for v in graph:
        edges = ", ".join(f"{escape(graph.display_name(e.target))} ({e.weight:g})" for e in v.edges)
        label = escape(v.label) if v.label is not None else "[dim]-[/dim]"
        table.add_row(str(v.index), label, edges or "[dim]none[/dim]")

    console.print(table)
    console.print(
        f"\n[dim]{graph.n_vertices} vertices, {graph.n_edges} edges, "
        f"{graph.count_self_loops()} with self-loops[/dim]",
    )


def render_report(report: TraversalReport, console: Console) -> None:
    """Render a traversal order as a numbered Rich table.

    Args:
        report: TraversalReport to render.
        console: Rich Console to output to.

    """
    table = Table(show_header=True, header_style="bold cyan", box=None)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Index", justify="right")
    table.add_column("Label")

    for position, vertex in enumerate(report.order):
        label = escape(vertex.label) if vertex.label is not None else "[dim]NO LABEL[/dim]"
        table.add_row(str(position), str(vertex.index), label)

    console.print(table)
    if report.trees is not None:
        console.print(f"\n[cyan]Trees:[/cyan] {report.trees}")


def render_spanning_tree(tree: Graph, start: int, console: Console) -> None:
    """Render the part of a spanning tree reachable from ``start`` using Rich Tree.

    Args:
        tree: Spanning tree produced by ``spanning_tree``.
        start: Root of the tree.
        console: Rich Console to output to.

    """
    root = Tree(f"[bold]{escape(tree.display_name(start))}[/bold]")
    # Tree edges are acyclic, so no visited set is needed.
    pending = [(root, start)]
    while pending:
        parent, u = pending.pop()
        # Insertion order matches the order vertices were discovered.
        for e in reversed(list(tree.edges(u))):
            child = parent.add(f"{escape(tree.display_name(e.target))} [dim]({e.weight:g})[/dim]")
            pending.append((child, e.target))
    console.print(root)
