import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adjgraph._algorithms import spanning_tree
from adjgraph._errors import GraphError
from adjgraph._graph import Graph
from adjgraph._io import dump_graph_file, load_graph_file, to_dot, write_dot_file
from adjgraph._report import Algorithm, build_report

from .config import AdjgraphConfig, ConfigError, get_config
from .render import render_graph_table, render_report, render_spanning_tree

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

GraphArgument = Annotated[
    Path | None,
    typer.Argument(help="Path to graph description file (defaults to tool.adjgraph.graph in pyproject.toml)"),
]
StartOption = Annotated[
    int | None,
    typer.Option(
        "-s",
        "--start",
        help="Index of the start vertex (defaults to tool.adjgraph.start in pyproject.toml, then 0)",
    ),
]
LabelOption = Annotated[
    str | None,
    typer.Option("-l", "--label", help="Label of the start vertex (overrides --start)"),
]
JsonOption = Annotated[
    bool,
    typer.Option("--json", help="Print the result as JSON"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """adjgraph CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


@contextmanager
def _exit_on_error() -> Iterator[None]:
    """Report graph and config errors and exit with a non-zero status."""
    try:
        yield
    except (GraphError, ConfigError) as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


def _load_config() -> AdjgraphConfig:
    try:
        return get_config()
    except ConfigError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


def _load_graph(path: Path | None, config: AdjgraphConfig) -> Graph:
    if path is None:
        path = config.graph
    if path is None:
        err_console.print("[red]Error: No graph file given and no \\[tool.adjgraph].graph configured[/red]")
        raise typer.Exit(code=1)

    err_console.print(f"[cyan]Loading graph from:[/cyan] {path}")
    graph = load_graph_file(path)
    logger.debug(f"Loaded {graph!r}")
    return graph


def _resolve_start(graph: Graph, start: int | None, label: str | None, config: AdjgraphConfig) -> int:
    if label is not None:
        return graph.index_of_label(label)
    if start is not None:
        return start
    if config.start is not None:
        return config.start
    return 0


def _traverse(
    algorithm: Algorithm,
    path: Path | None,
    start: int | None,
    label: str | None,
    *,
    as_json: bool,
) -> None:
    config = _load_config()
    with _exit_on_error():
        graph = _load_graph(path, config)
        start_index = _resolve_start(graph, start, label, config)
        report = build_report(graph, algorithm, start_index)

    if as_json:
        out_console.out(report.model_dump_json(indent=2))
        return

    err_console.print(
        f"[cyan]{algorithm.upper()} from vertex:[/cyan] [bold]{graph.display_name(start_index)}[/bold]",
    )
    render_report(report, out_console)


@app.command()
def show(path: GraphArgument = None) -> None:
    """Show the vertices and edges of a graph."""
    config = _load_config()
    with _exit_on_error():
        graph = _load_graph(path, config)
    render_graph_table(graph, out_console)


@app.command()
def bfs(
    path: GraphArgument = None,
    *,
    start: StartOption = None,
    label: LabelOption = None,
    as_json: JsonOption = False,
) -> None:
    """Breadth-first traversal order."""
    _traverse(Algorithm.BFS, path, start, label, as_json=as_json)


@app.command()
def dfs(
    path: GraphArgument = None,
    *,
    start: StartOption = None,
    label: LabelOption = None,
    as_json: JsonOption = False,
) -> None:
    """Depth-first traversal of the whole graph, with the number of trees started."""
    _traverse(Algorithm.DFS, path, start, label, as_json=as_json)


@app.command("dfs-iter")
def dfs_iter(
    path: GraphArgument = None,
    *,
    start: StartOption = None,
    label: LabelOption = None,
    as_json: JsonOption = False,
) -> None:
    """Stack-driven depth-first traversal of the component reachable from the start vertex."""
    _traverse(Algorithm.DFS_ITER, path, start, label, as_json=as_json)


@app.command()
def toposort(
    path: GraphArgument = None,
    *,
    start: StartOption = None,
    label: LabelOption = None,
    as_json: JsonOption = False,
) -> None:
    """Topological order of the vertices reachable from the start vertex (graph must be a DAG)."""
    _traverse(Algorithm.TOPOSORT, path, start, label, as_json=as_json)


@app.command()
def tree(
    path: GraphArgument = None,
    *,
    start: StartOption = None,
    label: LabelOption = None,
    output: Annotated[
        Path | None,
        typer.Option("-o", "--output", help="Write the spanning tree to a .dot file"),
    ] = None,
    no_weights: Annotated[
        bool,
        typer.Option("--no-weights", help="Leave edge weights out of the .dot output"),
    ] = False,
) -> None:
    """Extract the DFS spanning tree rooted at the start vertex."""
    config = _load_config()
    with _exit_on_error():
        graph = _load_graph(path, config)
        start_index = _resolve_start(graph, start, label, config)
        result = spanning_tree(graph, start_index)

        render_spanning_tree(result, start_index, out_console)

        if output is not None:
            err_console.print(f"[cyan]Writing spanning tree to:[/cyan] {output}")
            write_dot_file(result, output, weights=config.weights and not no_weights)


@app.command()
def dot(
    path: GraphArgument = None,
    *,
    output: Annotated[
        Path | None,
        typer.Option("-o", "--output", help="Path to output .dot file (prints to stdout if omitted)"),
    ] = None,
    undirected: Annotated[
        bool,
        typer.Option("--undirected", help="Render as an undirected graph"),
    ] = False,
    no_weights: Annotated[
        bool,
        typer.Option("--no-weights", help="Leave edge weights out"),
    ] = False,
) -> None:
    """Export a graph to Graphviz .dot format."""
    config = _load_config()
    undirected = undirected or config.undirected
    weights = config.weights and not no_weights

    with _exit_on_error():
        graph = _load_graph(path, config)
        if output is None:
            out_console.out(to_dot(graph, undirected=undirected, weights=weights), end="")
            return

        err_console.print(f"[cyan]Writing dot file to:[/cyan] {output}")
        write_dot_file(graph, output, undirected=undirected, weights=weights)

    err_console.print("[green]✓ Export complete[/green]")


@app.command()
def dump(
    path: GraphArgument = None,
    *,
    output: Annotated[
        Path,
        typer.Option("-o", "--output", help="Path to output graph description file"),
    ],
) -> None:
    """Rewrite a graph as a directed graph description file."""
    config = _load_config()
    with _exit_on_error():
        graph = _load_graph(path, config)
        err_console.print(f"[cyan]Writing graph to:[/cyan] {output}")
        output.parent.mkdir(parents=True, exist_ok=True)
        dump_graph_file(graph, output)

    err_console.print("[green]✓ Dump complete[/green]")


def main() -> None:
    app()
