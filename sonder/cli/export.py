#!/usr/bin/env python3
"""
export.py
---------
Trip export commands for the sonder CLI.

Commands:
    - itinerary: Print a trip as plain text
    - reorder: Save a manual stop order for a trip

Usage:
    sonder itinerary journal.yaml trip-1
    sonder reorder journal.yaml trip-1 log-3 log-1 --output reordered.yaml
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional, Tuple

# --- Third-party imports ---
import click

# --- Local imports ---
from sonder.core.exceptions import ValidationError
from sonder.core.logging_manager import handle_cli_error
from sonder.journal import apply_reorder, build_export_data, build_text
from sonder.models import Trip
from sonder.snapshot import JournalSnapshot

SNAPSHOT_ARGUMENT = click.argument(
    "snapshot", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)


def _require_trip(data: JournalSnapshot, trip_id: str) -> Trip:
    trip = data.trip_by_id(trip_id)
    if trip is None:
        raise ValidationError(f"Trip not found: '{trip_id}'")
    return trip


@click.command("itinerary")
@SNAPSHOT_ARGUMENT
@click.argument("trip_id")
@click.pass_context
def itinerary(ctx: click.Context, snapshot: Path, trip_id: str) -> None:
    """Print a shareable plain-text itinerary for TRIP_ID."""
    try:
        logger = ctx.obj["logger"]
        data = JournalSnapshot.from_file(snapshot, logger=logger)
        trip = _require_trip(data, trip_id)

        export = build_export_data(trip, data.logs, data.places)
        places = data.places_by_id
        skipped = [
            log.id
            for log in data.logs_for_trip(trip_id)
            if log.place_id not in places
        ]
        if skipped:
            logger.log_warning(
                "Stops left out of itinerary: place not in snapshot",
                {"trip": trip_id, "logs": skipped},
            )

        click.echo(build_text(export))

    except Exception as e:
        handle_cli_error(ctx, e, "itinerary", {"snapshot": str(snapshot), "trip": trip_id})


@click.command("reorder")
@SNAPSHOT_ARGUMENT
@click.argument("trip_id")
@click.argument("log_ids", nargs=-1, required=True)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the result here instead of updating SNAPSHOT",
)
@click.pass_context
def reorder(
    ctx: click.Context,
    snapshot: Path,
    trip_id: str,
    log_ids: Tuple[str, ...],
    output: Optional[Path],
) -> None:
    """
    Save a manual stop order for TRIP_ID.

    LOG_IDS lists the trip's logs in their new order. Logs of the trip
    that are not listed are taken out of the trip.
    """
    try:
        logger = ctx.obj["logger"]
        data = JournalSnapshot.from_file(snapshot, logger=logger)
        _require_trip(data, trip_id)

        trip_logs = {log.id: log for log in data.logs_for_trip(trip_id)}
        if len(set(log_ids)) != len(log_ids):
            raise ValidationError("Each log may appear only once in the new order")

        unknown = [log_id for log_id in log_ids if log_id not in trip_logs]
        if unknown:
            raise ValidationError(
                f"Logs not in trip '{trip_id}': {', '.join(unknown)}"
            )

        ordered = [trip_logs[log_id] for log_id in log_ids]
        removed = [log for log_id, log in trip_logs.items() if log_id not in log_ids]
        apply_reorder(ordered, removed, logger=logger)

        target = data.write(output, logger=logger)
        click.echo(
            f"✅ Reordered {len(ordered)} stops"
            + (f", removed {len(removed)}" if removed else "")
            + f" → {target}"
        )

    except Exception as e:
        handle_cli_error(ctx, e, "reorder", {"snapshot": str(snapshot), "trip": trip_id})
