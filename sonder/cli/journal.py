#!/usr/bin/env python3
"""
journal.py
----------
Journal view commands for the sonder CLI.

Commands:
    - trips: Trips newest first, optionally with masonry columns
    - journal: Logs grouped into trip sections
    - tags: Tag suggestions for a user
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional, Tuple

# --- Third-party imports ---
import click

# --- Local imports ---
from sonder.core.logging_manager import handle_cli_error
from sonder.journal import (
    assign_masonry_columns,
    build_trip_groups,
    estimate_trip_card_height,
    prioritized_tag_suggestions,
    recent_tags_by_usage,
    sort_trips_reverse_chronological,
)
from sonder.snapshot import JournalSnapshot

SNAPSHOT_ARGUMENT = click.argument(
    "snapshot", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)


def _format_day(value) -> str:
    return value.strftime("%Y-%m-%d")


@click.command("trips")
@SNAPSHOT_ARGUMENT
@click.option("--columns", is_flag=True, help="Show the masonry column of each trip")
@click.pass_context
def trips(ctx: click.Context, snapshot: Path, columns: bool) -> None:
    """
    List trips newest first.

    Trips are ordered by start date, or creation date when a trip has
    no start date.
    """
    try:
        logger = ctx.obj["logger"]
        data = JournalSnapshot.from_file(snapshot, logger=logger)
        ordered = sort_trips_reverse_chronological(data.trips)

        if not ordered:
            click.echo("No trips")
            return

        if columns:
            layout = assign_masonry_columns(ordered, estimate_trip_card_height)
            for assignment in layout:
                side = "L" if assignment.column == 0 else "R"
                trip = assignment.item
                click.echo(f"[{side}] {_format_day(trip.sort_date)}  {trip.name}")
        else:
            for trip in ordered:
                click.echo(f"{_format_day(trip.sort_date)}  {trip.name}")

    except Exception as e:
        handle_cli_error(ctx, e, "trips", {"snapshot": str(snapshot)})


@click.command("journal")
@SNAPSHOT_ARGUMENT
@click.option("--user", "user_id", help="Only include logs by this user")
@click.pass_context
def journal(ctx: click.Context, snapshot: Path, user_id: Optional[str]) -> None:
    """
    Show logs grouped by trip.

    Trips with the most recent activity come first; logs without a trip
    (or whose trip no longer exists) are listed last.
    """
    try:
        logger = ctx.obj["logger"]
        data = JournalSnapshot.from_file(snapshot, logger=logger)
        logs = data.logs_for_user(user_id) if user_id else data.logs
        places = data.places_by_id

        trip_ids = {trip.id for trip in data.trips}
        orphaned = [
            log.id for log in logs if log.trip_id is not None and log.trip_id not in trip_ids
        ]
        if orphaned:
            logger.log_info(
                "Logs with a missing trip listed under 'Not in a trip'",
                {"logs": orphaned},
            )

        sections = build_trip_groups(logs, data.trips)
        if not sections:
            click.echo("No logs")
            return

        for section in sections:
            title = section.trip.name if section.trip else "Not in a trip"
            click.echo(f"== {title} ({len(section.logs)})")
            for log in section.logs:
                place = places.get(log.place_id)
                name = place.name if place else log.place_id
                click.echo(f"  {_format_day(log.created_at)}  {log.rating.emoji} {name}")

    except Exception as e:
        handle_cli_error(ctx, e, "journal", {"snapshot": str(snapshot)})


@click.command("tags")
@SNAPSHOT_ARGUMENT
@click.option("--user", "user_id", required=True, help="User whose history to rank")
@click.option("--fallback", multiple=True, help="Generic tag used to fill the list")
@click.option("--selected", multiple=True, help="Tag already chosen (excluded)")
@click.option("--limit", type=int, default=10, show_default=True)
@click.pass_context
def tags(
    ctx: click.Context,
    snapshot: Path,
    user_id: str,
    fallback: Tuple[str, ...],
    selected: Tuple[str, ...],
    limit: int,
) -> None:
    """Suggest tags, most recently used first."""
    try:
        logger = ctx.obj["logger"]
        data = JournalSnapshot.from_file(snapshot, logger=logger)
        recent = recent_tags_by_usage(data.logs, user_id)
        for tag in prioritized_tag_suggestions(recent, fallback, selected, limit):
            click.echo(tag)

    except Exception as e:
        handle_cli_error(ctx, e, "tags", {"snapshot": str(snapshot), "user": user_id})
