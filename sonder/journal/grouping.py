#!/usr/bin/env python3
"""
grouping.py
-----------
Journal grouping of logs by trip, and ordering of a trip's stops.

A journal view lists a user's logs in sections, one per trip, followed by
a single catch-all section for logs that have no trip. A log whose
trip_id points at a trip that no longer exists ("orphaned") lands in the
catch-all section too; a dangling reference is data, not an error.

Inside a trip, stops are shown chronologically by visit until the user
drags them into a custom order. apply_reorder records that order on the
logs themselves.

Functions:
    build_trip_groups: Trip sections for a journal view
    apply_reorder: Persist a manual stop order on logs
    sort_trip_logs: Stops of one trip in display order
    is_custom_ordered: Whether a trip has been manually reordered
    group_logs_by_day: Stops bucketed by calendar day of visit
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

# --- Local imports ---
from sonder.core.logging_manager import SonderLogger, safe_logger
from sonder.core.validators import DataValidator
from sonder.models import Log, SyncStatus, Trip


@dataclass
class TripSection:
    """
    One section of the journal view.

    Attributes:
        trip: The trip, or None for the catch-all section
        logs: Logs in the section, newest first
    """

    trip: Optional[Trip]
    logs: List[Log] = field(default_factory=list)

    @property
    def is_untripped(self) -> bool:
        """True for the catch-all section."""
        return self.trip is None

    @property
    def latest_created_at(self) -> Optional[datetime]:
        """Creation time of the newest log in the section."""
        return self.logs[0].created_at if self.logs else None


def _newest_first(logs: Iterable[Log]) -> List[Log]:
    return sorted(logs, key=lambda log: log.created_at, reverse=True)


def build_trip_groups(logs: Iterable[Log], trips: Iterable[Trip]) -> List[TripSection]:
    """
    Group logs into journal sections by trip.

    Trip sections come first, ordered by their newest log (not by the
    trip's own dates); the untripped section is always last. Every
    section lists its logs newest first. Empty sections are never
    produced, so no logs yields an empty list.

    Args:
        logs: Logs to group
        trips: Trips that currently exist

    Returns:
        Ordered list of TripSection
    """
    trips_by_id: Dict[str, Trip] = {}
    for trip in trips:
        trips_by_id.setdefault(trip.id, trip)

    tripped: Dict[str, List[Log]] = {}
    untripped: List[Log] = []
    for log in logs:
        if log.trip_id is not None and log.trip_id in trips_by_id:
            tripped.setdefault(log.trip_id, []).append(log)
        else:
            untripped.append(log)

    sections = [
        TripSection(trip=trips_by_id[trip_id], logs=_newest_first(group))
        for trip_id, group in tripped.items()
    ]
    sections.sort(key=lambda section: section.logs[0].created_at, reverse=True)

    if untripped:
        sections.append(TripSection(trip=None, logs=_newest_first(untripped)))

    return sections


def apply_reorder(
    ordered_logs: Sequence[Log],
    removed_logs: Iterable[Log] = (),
    now: Optional[datetime] = None,
    logger: Optional[SonderLogger] = None,
) -> datetime:
    """
    Record a manual stop order on a trip's logs.

    Each log in ``ordered_logs`` gets ``trip_sort_order`` equal to its
    position (0-based, dense), is marked pending sync and stamped with
    ``now``. Logs in ``removed_logs`` are detached from their trip. The
    creation time of a log is never changed, so applying the same order
    twice yields the same sort orders.

    Logs are mutated in place; committing them is the caller's job.

    Args:
        ordered_logs: Logs in the order the user arranged them
        removed_logs: Logs the user took out of the trip
        now: Timestamp to stamp (defaults to the current UTC time; naive
            values are taken as UTC)
        logger: Optional logger

    Returns:
        The timestamp written to updated_at
    """
    stamp = DataValidator.normalize_datetime(now) or datetime.now(timezone.utc)

    for position, log in enumerate(ordered_logs):
        log.trip_sort_order = position
        log.sync_status = SyncStatus.PENDING
        log.updated_at = stamp

    removed_ids = []
    for log in removed_logs:
        log.trip_id = None
        log.trip_sort_order = None
        log.sync_status = SyncStatus.PENDING
        log.updated_at = stamp
        removed_ids.append(log.id)

    safe_logger(logger).log_operation(
        "apply_reorder",
        {
            "order": [log.id for log in ordered_logs],
            "removed": removed_ids,
            "updated_at": stamp,
        },
    )
    return stamp


def is_custom_ordered(logs: Iterable[Log]) -> bool:
    """True when any log carries a manual trip sort order."""
    return any(log.trip_sort_order is not None for log in logs)


def sort_trip_logs(logs: Iterable[Log]) -> List[Log]:
    """
    Order the stops of a trip for display.

    Manually ordered logs come first by their trip_sort_order; logs
    without one follow, earliest visit first. When no log has been
    reordered this is plain chronological order.
    """
    def key(log: Log) -> Tuple[int, int, datetime]:
        if log.trip_sort_order is not None:
            return (0, log.trip_sort_order, log.visited_at)
        return (1, 0, log.visited_at)

    return sorted(logs, key=key)


def group_logs_by_day(logs: Iterable[Log]) -> List[Tuple[date, List[Log]]]:
    """
    Bucket logs by the calendar day (UTC) they were visited.

    Returns:
        (day, logs) pairs with days ascending; logs keep input order
    """
    by_day: Dict[date, List[Log]] = {}
    for log in logs:
        by_day.setdefault(log.visited_at.date(), []).append(log)
    return sorted(by_day.items(), key=lambda item: item[0])
