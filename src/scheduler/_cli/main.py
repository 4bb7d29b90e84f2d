import json
import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from scheduler._demo import build_demo_graph
from scheduler._graph import CycleDetectedError, DirectedGraph, Edge, GraphError, Vertex, topological_sort

from .config import ConfigError, OutputFormat, get_config

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console(soft_wrap=True)


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Scheduler CLI."""
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


def _parse_edge(value: str) -> Edge:
    """Parse an edge written as 'SOURCE:DESTINATION'."""
    src, sep, dest = value.partition(":")
    if not sep:
        msg = f"Invalid edge '{value}'. Expected format: 'SOURCE:DESTINATION'"
        raise typer.BadParameter(msg)
    try:
        return int(src), int(dest)
    except ValueError as e:
        msg = f"Invalid edge '{value}'. Vertices must be integers"
        raise typer.BadParameter(msg) from e


def _print_schedule(schedule: list[Vertex], output_format: OutputFormat) -> None:
    if output_format is OutputFormat.JSON:
        out_console.print(json.dumps(schedule), highlight=False)
    else:
        out_console.print(escape(str(schedule)), highlight=False)


def _sort_and_print(graph: DirectedGraph, output_format: OutputFormat) -> None:
    """Sort a graph and print the schedule, exiting with code 1 on failure."""
    err_console.print(
        f"[cyan]Graph:[/cyan] {graph.num_vertices()} vertices, {graph.num_edges()} edges",
    )

    try:
        schedule = topological_sort(graph)
    except CycleDetectedError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    logger.debug(f"Schedule: {schedule}")
    _print_schedule(schedule, output_format)


@app.command()
def demo(
    *,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option("--format", "-f", help="Output format (defaults to [tool.scheduler].format)"),
    ] = None,
) -> None:
    """Build the sample graph and print a topological order of it."""
    try:
        config = get_config()
    except ConfigError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    if config.project_root is not None:
        logger.debug(f"Using configuration from {config.project_root / 'pyproject.toml'}")

    try:
        graph = build_demo_graph(config.vertices, config.edges)
    except GraphError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    _sort_and_print(graph, output_format or config.format)


@app.command()
def sort(
    *,
    vertices: Annotated[
        list[int],
        typer.Option("--vertex", "-v", min=0, help="Vertex to add (repeatable)"),
    ],
    edges: Annotated[
        list[str] | None,
        typer.Option("--edge", "-e", help="Edge to add as 'SOURCE:DESTINATION' (repeatable)"),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.PLAIN,
) -> None:
    """Build a graph from the given vertices and edges and print a topological order of it."""
    graph = DirectedGraph()
    graph.add_vertices(vertices)

    try:
        graph.add_edges(_parse_edge(edge) for edge in edges or [])
    except GraphError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    _sort_and_print(graph, output_format)


@app.command()
def show(
    *,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option("--format", "-f", help="Output format (defaults to [tool.scheduler].format)"),
    ] = None,
) -> None:
    """Show the adjacency of the sample graph."""
    try:
        config = get_config()
        graph = build_demo_graph(config.vertices, config.edges)
    except (ConfigError, GraphError) as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    if (output_format or config.format) is OutputFormat.JSON:
        adjacency = {str(v): sorted(graph.edges_from(v)) for v in sorted(graph.vertices())}
        out_console.print(json.dumps(adjacency), highlight=False)
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Vertex", justify="right", style="bold")
    table.add_column("Edges to", style="yellow")

    for vertex in sorted(graph.vertices()):
        targets = ", ".join(str(v) for v in sorted(graph.edges_from(vertex)))
        table.add_row(str(vertex), targets or "[dim]-[/dim]")

    out_console.print(
        Panel(
            table,
            title="[bold]Sample graph[/bold]",
            subtitle=f"[dim]{graph.num_vertices()} vertices, {graph.num_edges()} edges[/dim]",
            border_style="cyan",
        ),
    )


def main() -> None:
    app()
