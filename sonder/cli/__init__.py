#!/usr/bin/env python3
"""
Sonder Journal CLI
------------------

Command-line access to the journal helpers over a snapshot file.

Commands:
    - Views: trips, journal, tags
    - Trip export: itinerary, reorder

Usage:
    # Trips newest first, with masonry columns
    sonder trips journal.yaml --columns

    # Journal sections for one user
    sonder journal journal.yaml --user user-1

    # Tag suggestions
    sonder tags journal.yaml --user user-1 --fallback food --selected coffee

    # Plain-text itinerary
    sonder itinerary journal.yaml trip-1

    # Save a manual stop order
    sonder reorder journal.yaml trip-1 log-3 log-1 log-2
"""
from __future__ import annotations

import click
from pathlib import Path

from sonder.core.paths import LOG_DIR
from sonder.core.cli import setup_logger


@click.group()
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files",
)
@click.option("-v", "--verbose", is_flag=True, help="Show tracebacks on errors")
@click.pass_context
def cli(ctx: click.Context, log_dir: str, verbose: bool) -> None:
    """Sonder Journal Utilities"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "cli")


# Import and register commands from submodules
from .journal import journal, tags, trips
from .export import itinerary, reorder

cli.add_command(trips)
cli.add_command(journal)
cli.add_command(tags)
cli.add_command(itinerary)
cli.add_command(reorder)


if __name__ == "__main__":
    cli(obj={})
