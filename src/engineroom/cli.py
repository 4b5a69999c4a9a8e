"""Command-line interface for engineroom."""

import logging

import click
from rich.table import Table
from rich.text import Text

from engineroom import __version__
from engineroom.config.init import write_default_config
from engineroom.config.loader import load_config
from engineroom.config.preflight import build_registry, run_all_checks
from engineroom.console import console
from engineroom.engines.state import EngineState
from engineroom.priority import UNRANKED, effective_rank


def version_callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return
    console.print(f"engineroom [bold cyan]{__version__}[/bold cyan]")
    ctx.exit()


@click.group(invoke_without_command=True)
@click.option(
    "--version",
    is_flag=True,
    callback=version_callback,
    expose_value=False,
    is_eager=True,
    help="Show version and exit.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log engine verification details.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Engineroom - transcoding engine registry for DLNA media servers."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if ctx.invoked_subcommand is None:
        console.print("[bold]engineroom[/bold] - pick the right transcoder for every file")
        console.print("\nRun [cyan]engineroom --help[/cyan] for available commands.")


@main.command()
def preflight() -> None:
    """Validate environment (configuration, transcoding engines)."""
    if not run_all_checks():
        raise SystemExit(1)


def _status_text(state: EngineState) -> Text:
    if state.active:
        return Text("active", style="bold green")
    if state.available:
        return Text("disabled", style="yellow")
    return Text("unavailable", style="red")


@main.command("engines")
@click.option("--all", "show_all", is_flag=True, help="Include unusable engines.")
def engines_command(show_all: bool) -> None:
    """List transcoding engines in priority order."""
    registry = build_registry(load_config())
    registry.close()
    states = registry.all_engines() if show_all else registry.engines()

    if not states:
        console.print("[yellow]No usable transcoding engines found.[/yellow]")
        console.print("[dim]Run 'engineroom engines --all' to see why.[/dim]")
        return

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", style="dim", width=3, justify="right")
    table.add_column("Engine", style="cyan", min_width=14)
    table.add_column("Id", style="dim")
    table.add_column("Purpose")
    table.add_column("Status", min_width=8)
    table.add_column("Role", style="dim")
    table.add_column("Details", ratio=1)

    for state in states:
        rank = effective_rank(registry.settings.priority_rank(state.id))
        detail = state.version if state.available else state.reason
        current = state.executables.current
        table.add_row(
            "-" if rank == UNRANKED else str(rank + 1),
            state.name,
            state.id,
            state.engine.purpose,
            _status_text(state),
            current.value if current is not None else "-",
            Text((detail or "").replace("\n", " "), style="dim"),
        )

    console.print(table)


@main.command()
@click.option("--local", "-l", is_flag=True, help="Create ./.engineroom/config.yaml.")
@click.option("--force", is_flag=True, help="Overwrite an existing file.")
def init(local: bool, force: bool) -> None:
    """Write a configuration file with the default engine priority."""
    path = write_default_config(local=local, force=force)
    if path is None:
        console.print("[yellow]Config file already exists.[/yellow] Use --force to overwrite.")
        return
    console.print(f"[green]Configuration saved to {path}[/green]")
