"""Command-line interface for the edit tracker."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer

from .config import TrackerSettings
from .paths import get_data_dir, get_log_path

app = typer.Typer(help="Aggregate editor activity and report it to a collector command.")


@app.callback(no_args_is_help=True)
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs."),
    log_file: bool = typer.Option(
        False,
        "--log-file/--no-log-file",
        help="Also write logs to the per-user data directory.",
    ),
) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(get_log_path(), encoding="utf-8"))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        handlers=handlers,
    )


@app.command()
def run(
    collector: Optional[str] = typer.Option(
        None,
        "--collector",
        help="Command invoked for each event and heartbeat (defaults to activity-cli).",
    ),
    app_name: Optional[str] = typer.Option(
        None, "--app", help="Application tag attached to every record."
    ),
    flush_seconds: Optional[float] = typer.Option(
        None,
        "--flush-interval",
        min=1.0,
        help="Seconds between sweeps that close every open span (default 60).",
    ),
) -> None:
    """Read JSON observations from stdin until EOF or interrupt."""
    from .service import TrackerService

    settings = TrackerSettings.from_options(
        flush_seconds=flush_seconds,
        app_name=app_name,
        collector_command=collector,
    )
    TrackerService(settings).run_until_eof(sys.stdin)


@app.command()
def paths() -> None:
    """Print where the tracker keeps its files."""
    typer.echo(f"Data directory: {get_data_dir(create=False)}")
    typer.echo(f"Log file:       {get_log_path(create=False)}")
