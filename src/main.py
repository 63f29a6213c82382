"""
Contact Network Analytics CLI

Command-line interface for analyzing a contact snapshot.
"""

import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

# Initialize console for rich output
console = Console()


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Configure logging with rich handler."""
    handlers = [RichHandler(console=console, show_path=False)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(message)s",
        handlers=handlers,
    )


def _load_snapshot(input_file: str):
    """Load a snapshot or exit with an error."""
    from src.pipeline.ingest import load_contact_snapshot

    try:
        return load_contact_snapshot(input_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error loading snapshot: {e}[/red]")
        sys.exit(1)


def _path_finder(config):
    from src.models.graph import NetworkGraphBuilder
    from src.models.paths import PathFinder

    return PathFinder(
        max_depth=config.paths.max_depth,
        strength_values=config.paths.strength_values,
        max_visits=config.paths.max_visits,
        graph_builder=NetworkGraphBuilder(hub_multiplier=config.graph.hub_multiplier),
    )


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool) -> None:
    """Contact Network Analytics - Hubs, paths and insights from your contacts."""
    from src.utils.config import load_config

    ctx.ensure_object(dict)
    config = load_config()
    ctx.obj["config"] = config

    if verbose:
        ctx.obj["log_level"] = "DEBUG"
    elif quiet:
        ctx.obj["log_level"] = "WARNING"
    else:
        ctx.obj["log_level"] = config.logging.level

    setup_logging(ctx.obj["log_level"], config.logging.file)


input_option = click.option(
    "--input", "-i",
    "input_file",
    required=True,
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
    help="JSON contact snapshot",
)


@cli.command()
@input_option
@click.option(
    "--output", "-o",
    "output_dir",
    default=None,
    type=click.Path(file_okay=False, dir_okay=True),
    help="Output directory for reports",
)
@click.option(
    "--format", "-f",
    "formats",
    multiple=True,
    type=click.Choice(["markdown", "json"]),
    help="Output formats to generate",
)
@click.option(
    "--no-reports",
    is_flag=True,
    help="Print results without writing report files",
)
@click.pass_context
def insights(
    ctx: click.Context,
    input_file: str,
    output_dir: Optional[str],
    formats: tuple[str, ...],
    no_reports: bool,
) -> None:
    """Compute hubs, isolated contacts, strong ties and suggestions."""
    from src.models.graph import NetworkGraphBuilder
    from src.models.insights import InsightsGenerator
    from src.models.statistics import get_network_statistics
    from src.pipeline.outputs import OutputGenerator

    config = ctx.obj["config"]
    snapshot = _load_snapshot(input_file)

    generator = InsightsGenerator(
        max_hubs=config.insights.max_hubs,
        max_strongest=config.insights.max_strongest,
        max_suggestions=config.insights.max_suggestions,
        max_pairs=config.insights.max_pairs,
        graph_builder=NetworkGraphBuilder(hub_multiplier=config.graph.hub_multiplier),
    )
    network_insights = generator.generate(snapshot.contacts)
    statistics = get_network_statistics(snapshot.contacts)

    console.print("\n[bold blue]Network Insights[/bold blue]")
    console.print("=" * 50)

    table = Table(show_header=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Contacts", str(network_insights.total_contacts))
    table.add_row("Connections", str(network_insights.total_connections))
    table.add_row("Density", f"{network_insights.network_density:.0%}")
    table.add_row("Average degree", f"{network_insights.average_degree:.2f}")
    table.add_row("Isolated contacts", str(len(network_insights.isolated_contacts)))
    console.print(table)

    if network_insights.hubs:
        console.print("\n[bold]Network Hubs:[/bold]")
        table = Table(show_header=True, header_style="bold")
        table.add_column("Name")
        table.add_column("Tier")
        table.add_column("Connections", justify="right")
        for contact in network_insights.hubs:
            table.add_row(contact.name or contact.id, contact.tier.value, str(contact.connection_count))
        console.print(table)

    if network_insights.suggested_connections:
        console.print("\n[bold]Suggested Connections:[/bold]")
        for s in network_insights.suggested_connections:
            console.print(
                f"  • {s.contact1.name or s.contact1.id} + "
                f"{s.contact2.name or s.contact2.id}: [dim]{s.reason}[/dim]"
            )

    if not no_reports:
        output = OutputGenerator(
            output_dir=output_dir or config.output.directory,
            formats=list(formats) or config.output.formats,
            timestamp_filenames=config.output.timestamp_filenames,
            max_items_per_section=config.output.max_items_per_section,
        )
        output_files = output.generate_network_insights(network_insights, statistics)

        console.print("\n[bold]Reports Generated:[/bold]")
        for fmt, path in output_files.items():
            console.print(f"  • {fmt}: [cyan]{path}[/cyan]")

    console.print()


@cli.command()
@input_option
@click.option("--source", "-s", required=True, help="Source contact ID")
@click.option("--target", "-t", required=True, help="Target contact ID")
@click.option("--max-depth", type=int, default=None, help="Maximum hops for alternative paths")
@click.pass_context
def path(
    ctx: click.Context,
    input_file: str,
    source: str,
    target: str,
    max_depth: Optional[int],
) -> None:
    """Find the shortest and alternative paths between two contacts."""
    config = ctx.obj["config"]
    snapshot = _load_snapshot(input_file)
    finder = _path_finder(config)

    shortest = finder.find_shortest_path(snapshot.contacts, source, target)

    if shortest is None:
        console.print(f"\n[yellow]No path found from {source} to {target}[/yellow]\n")
        return

    chain = " -> ".join(c.name or c.id for c in shortest.contacts)
    console.print(f"\n[bold]Shortest path ({shortest.steps} steps):[/bold] {chain}")

    alternatives = finder.find_all_paths(snapshot.contacts, source, target, max_depth=max_depth)
    if alternatives:
        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Path")
        table.add_column("Steps", justify="right")
        table.add_column("Strength", justify="right")
        for i, p in enumerate(alternatives[:10], 1):
            table.add_row(
                str(i),
                " -> ".join(c.name or c.id for c in p.contacts),
                str(p.steps),
                f"{p.total_strength:.0f}",
            )
        console.print(table)

    console.print()


@cli.command()
@input_option
@click.option("--source", "-s", required=True, help="Contact seeking the introduction")
@click.option("--target", "-t", required=True, help="Contact to be introduced to")
@click.option("--limit", default=None, type=int, help="Maximum paths to show")
@click.option(
    "--output", "-o",
    "output_dir",
    default=None,
    type=click.Path(file_okay=False, dir_okay=True),
    help="Write a report to this directory",
)
@click.pass_context
def introductions(
    ctx: click.Context,
    input_file: str,
    source: str,
    target: str,
    limit: Optional[int],
    output_dir: Optional[str],
) -> None:
    """Show introduction chains from one contact to another."""
    from src.models.introductions import generate_introduction_paths
    from src.pipeline.outputs import OutputGenerator

    config = ctx.obj["config"]
    snapshot = _load_snapshot(input_file)

    paths = generate_introduction_paths(
        snapshot.contacts,
        source,
        target,
        max_depth=config.introductions.max_depth,
        path_finder=_path_finder(config),
    )
    if limit is None:
        limit = config.introductions.max_paths

    if not paths:
        console.print(f"\n[yellow]No introduction paths from {source} to {target}[/yellow]\n")
        return

    console.print(f"\n[bold]Found {len(paths)} introduction paths:[/bold]\n")
    for i, intro in enumerate(paths[:limit], 1):
        chain = " -> ".join(c.name or c.id for c in intro.path)
        console.print(f"[bold]{i}.[/bold] {chain} [dim]({intro.total_steps} steps, strength {intro.strength:.0f})[/dim]")
        for note in intro.notes:
            console.print(f"    {note}")

    if output_dir:
        source_contact = snapshot.get_contact(source)
        target_contact = snapshot.get_contact(target)
        output = OutputGenerator(
            output_dir=output_dir,
            formats=config.output.formats,
            timestamp_filenames=config.output.timestamp_filenames,
        )
        output_files = output.generate_introduction_paths(
            paths,
            source,
            target,
            source_name=source_contact.name if source_contact else None,
            target_name=target_contact.name if target_contact else None,
        )
        console.print(f"\n[dim]Report: {output_files.get('markdown', 'N/A')}[/dim]")

    console.print()


@cli.command()
@input_option
@click.pass_context
def stats(ctx: click.Context, input_file: str) -> None:
    """Show connection statistics for a snapshot."""
    from src.models.statistics import get_network_statistics

    snapshot = _load_snapshot(input_file)
    statistics = get_network_statistics(snapshot.contacts)

    console.print("\n[bold blue]Network Statistics[/bold blue]")
    console.print("=" * 50)

    table = Table(show_header=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    most_connected = statistics.most_connected_contact
    table.add_row("Contacts", str(len(snapshot.contacts)))
    table.add_row("Connection records", str(statistics.total_connections))
    table.add_row("Average per contact", f"{statistics.average_connections_per_contact:.2f}")
    table.add_row("Most connected", (most_connected.name or most_connected.id) if most_connected else "N/A")
    for strength, count in statistics.connection_strength_distribution.items():
        table.add_row(f"{strength.capitalize()} connections", str(count))

    console.print(table)
    console.print()


@cli.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    from src import __version__

    console.print(f"Contact Network Analytics v{__version__}")


def main() -> None:
    """Entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
