"""pathviz CLI application using Typer.

Prints chart data computed from a scenario snapshot file, and serves the
HTTP API.
"""

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from pathviz.application.queries.charts import (
    ActionMacQuery,
    MetricSummaryQuery,
    SankeyFrameQuery,
)
from pathviz.domain.actions import ActionSortKey
from pathviz.domain.shared.exceptions import DomainException
from pathviz.domain.shared.formatting import beautify_value, format_number
from pathviz.infrastructure.snapshot import SnapshotFactory
from pathviz_config import configure_logging, get_settings

app = typer.Typer(
    name="pathviz",
    help="pathviz - chart data for emission scenarios",
    no_args_is_help=True,
)
console = Console()

SnapshotOption = Annotated[
    Optional[Path],
    typer.Option(
        "--snapshot",
        "-s",
        help="Scenario snapshot JSON file (default: SNAPSHOT_PATH)",
        exists=True,
        dir_okay=False,
    ),
]


def _factory(snapshot: Optional[Path]) -> SnapshotFactory:
    settings = get_settings()
    if snapshot is None and settings.snapshot_path is None:
        console.print("[red]No snapshot given and SNAPSHOT_PATH is not set.[/red]")
        raise typer.Exit(1)
    return SnapshotFactory(snapshot_path=snapshot, settings=settings)


def _run(coro):
    """Run a query, turning domain errors into a red message and exit 1."""
    try:
        return asyncio.run(coro)
    except DomainException as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1) from e


@app.callback()
def main() -> None:
    configure_logging()


@app.command("summary")
def summary_command(
    node_id: Annotated[str, typer.Argument(help="Outcome node id")],
    start_year: Annotated[int, typer.Option("--start", help="First year")],
    end_year: Annotated[int, typer.Option("--end", help="Last year")],
    snapshot: SnapshotOption = None,
) -> None:
    """Show headline values and plot series for an outcome node."""
    digits = get_settings().significant_digits
    query = MetricSummaryQuery.from_factory(_factory(snapshot))
    result = _run(
        query.execute(
            node_id=node_id,
            start_year=start_year,
            end_year=end_year,
            significant_digits=digits,
        ),
    )

    console.print(f"\n[bold]{result.name}[/bold] [dim]({result.unit})[/dim]")
    console.print(f"  {result.start_year}: [cyan]{result.start_label}[/cyan]")
    console.print(f"  {result.end_year}: [cyan]{result.end_label}[/cyan]")
    if result.percent_change is not None:
        console.print(f"  Reduction: [green]{result.percent_change} %[/green]")
    console.print(f"  Cumulative: [cyan]{result.cumulative_label}[/cyan]")
    console.print(
        f"  Axis range: {result.axis_range.minimum:g} .. "
        f"{result.axis_range.maximum:g}\n",
    )

    table = Table(title="Series")
    table.add_column("Segment")
    table.add_column("Year", justify="right")
    table.add_column("Value", justify="right")
    for plot in result.plots:
        for year, value in zip(plot.years, plot.values):
            table.add_row(plot.segment.value, str(year), beautify_value(value, digits))
    console.print(table)


@app.command("mac")
def mac_command(  # NOQA: PLR0913
    start_year: Annotated[int, typer.Option("--start", help="First year")],
    end_year: Annotated[int, typer.Option("--end", help="Last year")],
    overview: Annotated[
        Optional[str],
        typer.Option("--overview", help="Impact overview id (default: first)"),
    ] = None,
    sort_by: Annotated[
        str,
        typer.Option("--sort-by", help="STANDARD, CUM_EFFICIENCY, CUM_COST, ..."),
    ] = ActionSortKey.STANDARD.value,
    descending: Annotated[
        bool,
        typer.Option("--descending", help="Sort descending"),
    ] = False,
    snapshot: SnapshotOption = None,
) -> None:
    """Rank actions by cumulative cost efficiency."""
    try:
        sort_key = ActionSortKey.parse(sort_by)
    except DomainException as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1) from e

    digits = get_settings().significant_digits
    query = ActionMacQuery.from_factory(_factory(snapshot))
    result = _run(
        query.execute(
            start_year=start_year,
            end_year=end_year,
            impact_overview_id=overview,
            sort_by=sort_key,
            ascending=not descending,
        ),
    )
    data = result.data

    table = Table(title=f"{result.label} ({start_year}-{end_year})")
    table.add_column("Action")
    table.add_column("Group", style="dim")
    table.add_column(f"Cost [{result.cost_unit}]", justify="right")
    table.add_column(f"Impact [{result.effect_unit}]", justify="right")
    table.add_column(f"Efficiency [{result.indicator_unit}]", justify="right")
    for i in range(len(data)):
        impact = data.impact[i]
        impact_style = "red" if impact is not None and impact < 0 else "green"
        table.add_row(
            data.actions[i],
            data.groups[i] or "",
            format_number(data.cost[i], significant_digits=digits),
            f"[{impact_style}]{format_number(impact, significant_digits=digits)}"
            f"[/{impact_style}]",
            format_number(data.efficiency[i], significant_digits=digits),
        )
    console.print(table)
    if not len(data):
        console.print("[yellow]No actions with a cost efficiency.[/yellow]")


@app.command("sankey")
def sankey_command(
    flow_id: Annotated[str, typer.Argument(help="Dimensional flow id")],
    end_year: Annotated[int, typer.Option("--end", help="Year to compare")],
    snapshot: SnapshotOption = None,
) -> None:
    """Show the Sankey links comparing the first year with a later one."""
    digits = get_settings().significant_digits
    query = SankeyFrameQuery.from_factory(_factory(snapshot))
    frame = _run(query.execute(flow_id=flow_id, end_year=end_year))

    table = Table(title=f"{flow_id}: {frame.start_year} -> {frame.year}")
    table.add_column("Source")
    table.add_column("Target")
    table.add_column("Kind", style="dim")
    table.add_column("Value", justify="right")
    labels = frame.node.label
    for source, target, value, kind in zip(
        frame.link.source,
        frame.link.target,
        frame.link.value,
        frame.link.kind,
    ):
        table.add_row(
            labels[source],
            labels[target],
            kind.value,
            beautify_value(value, digits),
        )
    console.print(table)


@app.command("serve")
def serve_command(
    host: Annotated[Optional[str], typer.Option(help="Bind host")] = None,
    port: Annotated[Optional[int], typer.Option(help="Bind port")] = None,
) -> None:
    """Serve the HTTP API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "pathviz.presentation.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
