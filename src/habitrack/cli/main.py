"""CLI entry point for habitrack.

Invoked as::

    habitrack [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m habitrack.cli.main

Commands
--------
add         Start tracking a new habit
done        Mark a habit as done for today
stats       Show totals and streaks for every habit
list        List tracked habits
export      Dump the habit data as JSON or YAML
version     Show version information

Every command runs one load → mutate → save cycle against the data file.
Read-only commands never write it.
"""
from __future__ import annotations

import logging
import sys
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from habitrack.errors import HabitrackError
from habitrack.store import DEFAULT_DATA_FILE, HabitStore

if TYPE_CHECKING:
    from habitrack.tracker import Tracker

console = Console()
err_console = Console(stderr=True)

_EMPTY_HINT = "No habits tracked yet. Add one with 'habitrack add <name>'"


def _today() -> date:
    """Return the local calendar date completions are recorded against."""
    return date.today()


def _fail(exc: HabitrackError) -> NoReturn:
    """Print a core error and exit with status 1."""
    err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
    sys.exit(1)


def _load_or_exit(store: HabitStore) -> "Tracker":
    """Load the tracker, exiting on a corrupt or unreadable file."""
    try:
        return store.load()
    except HabitrackError as exc:
        _fail(exc)


def _save_or_exit(store: HabitStore, tracker: "Tracker") -> None:
    """Save the tracker, exiting on a write failure."""
    try:
        store.save(tracker)
    except HabitrackError as exc:
        _fail(exc)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="habitrack")
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_DATA_FILE,
    show_default=True,
    envvar="HABITRACK_DATA_FILE",
    help="JSON file holding the habit data.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, data_file: Path, verbose: bool) -> None:
    """Track daily habits in a local JSON file."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = HabitStore(data_file)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from habitrack import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]habitrack[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# add command
# ---------------------------------------------------------------------------


@cli.command(name="add")
@click.argument("name")
@click.pass_obj
def add_command(store: HabitStore, name: str) -> None:
    """Start tracking a new habit.

    NAME is the habit to add, e.g. "workout" or "reading".
    """
    tracker = _load_or_exit(store)
    try:
        habit = tracker.add_habit(name)
    except HabitrackError as exc:
        _fail(exc)

    _save_or_exit(store, tracker)
    console.print(f"[green]Added[/green] habit '{escape(habit.name)}'")


# ---------------------------------------------------------------------------
# done command
# ---------------------------------------------------------------------------


@cli.command(name="done")
@click.argument("name")
@click.pass_obj
def done_command(store: HabitStore, name: str) -> None:
    """Mark a habit as done for today.

    NAME is a habit previously added with 'habitrack add'.
    """
    today = _today()
    tracker = _load_or_exit(store)
    try:
        habit = tracker.mark_done(name, today)
    except HabitrackError as exc:
        _fail(exc)

    _save_or_exit(store, tracker)
    streak = tracker.current_streak(habit.name, today)
    console.print(
        f"[green]Done[/green] '{escape(habit.name)}' for {today.isoformat()} "
        f"[dim](streak: {streak} day(s))[/dim]"
    )


# ---------------------------------------------------------------------------
# stats command
# ---------------------------------------------------------------------------


@cli.command(name="stats")
@click.pass_obj
def stats_command(store: HabitStore) -> None:
    """Show total completions and streaks for every habit."""
    from habitrack.report import build_stats

    tracker = _load_or_exit(store)
    if not len(tracker):
        console.print(_EMPTY_HINT)
        return

    today = _today()
    table = Table(title="Habit Statistics")
    table.add_column("Habit", style="bold")
    table.add_column("Total Done", justify="right")
    table.add_column("Current Streak", justify="right")
    table.add_column("Longest Streak", justify="right")
    table.add_column("Last Done")

    for row in build_stats(tracker, today):
        streak_color = "green" if row.done_today else "yellow"
        table.add_row(
            escape(row.name),
            str(row.total),
            f"[{streak_color}]{row.current_streak} day(s)[/{streak_color}]",
            f"{row.longest_streak} day(s)",
            row.last_done.isoformat() if row.last_done else "[dim]never[/dim]",
        )

    console.print(table)


# ---------------------------------------------------------------------------
# list command
# ---------------------------------------------------------------------------


@cli.command(name="list")
@click.pass_obj
def list_command(store: HabitStore) -> None:
    """List all tracked habits."""
    tracker = _load_or_exit(store)
    if not len(tracker):
        console.print(_EMPTY_HINT)
        return

    console.print("[bold]Your habits:[/bold]")
    for name in tracker.list_habits():
        console.print(f"  • {escape(name)}")


# ---------------------------------------------------------------------------
# export command
# ---------------------------------------------------------------------------


@cli.command(name="export")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Output format",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
@click.pass_obj
def export_command(store: HabitStore, output_format: str, output: str | None) -> None:
    """Dump the habit data as JSON or YAML."""
    from habitrack.store import TrackerSerializer

    tracker = _load_or_exit(store)
    serializer = TrackerSerializer()

    if output_format.lower() == "json":
        text = serializer.to_json(tracker, indent=2) + "\n"
    else:
        text = serializer.to_yaml(tracker)

    if output:
        try:
            Path(output).write_text(text, encoding="utf-8")
        except OSError as exc:
            err_console.print(f"[red]Error:[/red] Cannot write {escape(output)}: {exc}")
            sys.exit(1)
        console.print(f"[green]Exported to[/green] {escape(output)}")
    else:
        click.echo(text, nl=False)


if __name__ == "__main__":
    cli()
