import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from graphstream._errors import GraphError
from graphstream._graph import AdjacencyGraph, DirectedAdjacencyGraph, topological_sort

from .config import ConfigError, GraphstreamConfig, get_config

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

EdgesArgument = Annotated[
    list[str],
    typer.Argument(help="Edges as SOURCE-TARGET (see --separator); a bare name adds an isolated vertex"),
]
UndirectedOption = Annotated[
    bool | None,
    typer.Option("--undirected/--directed", help="Build an undirected graph (default from pyproject.toml)"),
]
SeparatorOption = Annotated[
    str | None,
    typer.Option("--separator", "-s", help="Separator between source and target (default from pyproject.toml)"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Graphstream CLI."""
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


def _load_config() -> GraphstreamConfig:
    try:
        return get_config()
    except ConfigError as e:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e


def _build_graph(
    edges: list[str],
    *,
    undirected: bool | None,
    separator: str | None,
) -> DirectedAdjacencyGraph[str]:
    """Build a graph from command line edge arguments.

    Options given on the command line take precedence over the configuration.

    Raises:
        typer.BadParameter: If an edge argument has an empty endpoint.

    """
    config = _load_config()
    if undirected is None:
        undirected = config.undirected
    if separator is None:
        separator = config.separator

    graph: DirectedAdjacencyGraph[str] = AdjacencyGraph() if undirected else DirectedAdjacencyGraph()
    for token in edges:
        if separator not in token:
            graph.add_vertex(token)
            continue
        source, target = token.split(separator, 1)
        if not source or not target:
            msg = f"Invalid edge '{token}': expected SOURCE{separator}TARGET"
            raise typer.BadParameter(msg)
        graph.add_edge(source, target)

    logger.debug(
        "Built %s graph with %d vertices and %d edges",
        "undirected" if undirected else "directed",
        graph.num_vertices,
        graph.num_edges,
    )
    return graph


@app.command()
def edges(
    edges: EdgesArgument,
    *,
    undirected: UndirectedOption = None,
    separator: SeparatorOption = None,
) -> None:
    """Print the sorted edges of the graph."""
    graph = _build_graph(edges, undirected=undirected, separator=separator)
    out_console.print(escape(str(graph)), soft_wrap=True)


@app.command()
def topsort(
    edges: EdgesArgument,
    *,
    undirected: UndirectedOption = None,
    separator: SeparatorOption = None,
) -> None:
    """Print the vertices in topological order, one per line."""
    graph = _build_graph(edges, undirected=undirected, separator=separator)

    try:
        order = topological_sort(graph)
    except GraphError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    for vertex in order:
        out_console.print(escape(vertex), soft_wrap=True)


@app.command()
def acyclic(
    edges: EdgesArgument,
    *,
    undirected: UndirectedOption = None,
    separator: SeparatorOption = None,
) -> None:
    """Check whether the graph is acyclic (exit code 1 if it is not)."""
    graph = _build_graph(edges, undirected=undirected, separator=separator)

    if graph.is_acyclic():
        out_console.print("acyclic")
        raise typer.Exit(code=0)

    out_console.print("cyclic")
    raise typer.Exit(code=1)


@app.command()
def cycles(
    edges: EdgesArgument,
    *,
    undirected: UndirectedOption = None,
    separator: SeparatorOption = None,
) -> None:
    """Print every minimal cycle of the graph as 'a -> b -> a'.

    The enumeration is brute force: only use it on small graphs.
    """
    graph = _build_graph(edges, undirected=undirected, separator=separator)

    found = graph.cycles()
    if not found:
        err_console.print("[green]✓ No cycles found[/green]")
        return

    for cycle in found:
        # cycles end with the vertex they start from
        path = [cycle[-1], *cycle]
        out_console.print(escape(" -> ".join(path)), soft_wrap=True)


@app.command()
def info(
    edges: EdgesArgument,
    *,
    undirected: UndirectedOption = None,
    separator: SeparatorOption = None,
) -> None:
    """Show a summary table of the graph."""
    graph = _build_graph(edges, undirected=undirected, separator=separator)

    table = Table(title="Graph")
    table.add_column("Property", style="cyan")
    table.add_column("Value")
    table.add_row("Directed", "yes" if graph.directed else "no")
    table.add_row("Vertices", str(graph.num_vertices))
    table.add_row("Edges", str(graph.num_edges))
    if graph.directed:
        table.add_row("Acyclic", "yes" if graph.is_acyclic() else "no")
    else:
        table.add_row("Components", str(len(graph.connected_components())))

    out_console.print(table)


def main() -> None:
    app()
