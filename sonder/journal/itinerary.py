#!/usr/bin/env python3
"""
itinerary.py
------------
Plain-text itinerary export for a trip.

The share screen turns a trip into TripExportData (stops in display order
plus a few stats) and build_text renders that as a shareable plain-text
document:

    🧳 Tokyo 2026  ·  Feb 10, 2026 – Feb 17, 2026  ·  2 stops

    1. 🔥 Tsukiji Outer Market
       📍 4-16-2 Tsukiji, Chuo City
       “Best tuna bowl I've ever had”
       #sushi #seafood
       🗺 https://www.google.com/maps/place/?q=place_id:ChIJabc123

    2. 👍 ...

Every stop is written out; the text is never truncated.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

# --- Local imports ---
from sonder.journal.grouping import sort_trip_logs
from sonder.journal.tags import top_tags
from sonder.models import Log, Place, PlaceCategory, Rating, Trip

GOOGLE_MAPS_PLACE_URL = "https://www.google.com/maps/place/?q=place_id:{place_id}"
HEADER_SEPARATOR = "  ·  "
STOP_INDENT = "   "
UNKNOWN_PLACE = "Unknown"


@dataclass
class ExportStop:
    """
    One stop of an exported trip.

    Attributes:
        place_name: Display name of the place
        address: Formatted address, may be empty
        rating: Rating the user gave
        place_id: Google place id, may be empty
        note: Optional note
        tags: Tags on the log
        latitude: Optional latitude
        longitude: Optional longitude
    """

    place_name: str
    address: str
    rating: Rating
    place_id: str = ""
    note: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    latitude: Optional[float] = None
    longitude: Optional[float] = None


@dataclass
class TripExportData:
    """
    Everything the export renderers need about a trip.

    Attributes:
        trip_name: Trip display name
        stops: Stops in display order
        date_range_text: Optional preformatted date range
        trip_description: Optional description
        day_count: Number of days the trip spans
        rating_counts: Number of stops per rating
        top_tags: Most used tags on the trip
        category_breakdown: (category, stop count) pairs, largest first
        best_quote: Optional (note, place name) to feature
    """

    trip_name: str
    stops: List[ExportStop] = field(default_factory=list)
    date_range_text: Optional[str] = None
    trip_description: Optional[str] = None
    day_count: int = 1
    rating_counts: Dict[Rating, int] = field(default_factory=dict)
    top_tags: List[str] = field(default_factory=list)
    category_breakdown: List[Tuple[PlaceCategory, int]] = field(default_factory=list)
    best_quote: Optional[Tuple[str, str]] = None

    @property
    def place_count(self) -> int:
        return len(self.stops)


def build_text(data: TripExportData) -> str:
    """
    Render a trip as a plain-text itinerary.

    The header names the trip, its date range when known and the stop
    count; an empty date range text is treated the same as None. Each
    stop is numbered from 1; its address, note, tags and map link lines
    appear only when the stop has them.

    Args:
        data: Trip export data

    Returns:
        Newline-delimited itinerary text
    """
    header = f"\U0001F9F3 {data.trip_name}"
    if data.date_range_text:
        header += f"{HEADER_SEPARATOR}{data.date_range_text}"
    header += f"{HEADER_SEPARATOR}{data.place_count} stops"

    lines = [header, ""]

    for number, stop in enumerate(data.stops, start=1):
        lines.append(f"{number}. {stop.rating.emoji} {stop.place_name}")

        if stop.address:
            lines.append(f"{STOP_INDENT}\U0001F4CD {stop.address}")

        if stop.note:
            lines.append(f"{STOP_INDENT}“{stop.note}”")

        if stop.tags:
            lines.append(STOP_INDENT + " ".join(f"#{tag}" for tag in stop.tags))

        if stop.place_id:
            url = GOOGLE_MAPS_PLACE_URL.format(place_id=stop.place_id)
            lines.append(f"{STOP_INDENT}\U0001F5FA {url}")

        lines.append("")

    return "\n".join(lines)


def _format_day(value: datetime) -> str:
    return f"{value:%b} {value.day}, {value.year}"


def format_trip_date_range(
    start: Optional[datetime], end: Optional[datetime]
) -> Optional[str]:
    """
    Describe a trip's dates for the export header.

    Examples:
        "Feb 10, 2026 – Feb 17, 2026", "From Feb 10, 2026",
        "Until Feb 17, 2026", or None when neither is set.
    """
    if start is not None and end is not None:
        return f"{_format_day(start)} – {_format_day(end)}"
    if start is not None:
        return f"From {_format_day(start)}"
    if end is not None:
        return f"Until {_format_day(end)}"
    return None


def count_trip_days(trip: Trip, logs: Iterable[Log]) -> int:
    """
    Number of days a trip covers, at least 1.

    With both start and end dates this is the inclusive span between
    them; otherwise the number of distinct days logs were created on.
    """
    if trip.start_date is not None and trip.end_date is not None:
        days = (trip.end_date.date() - trip.start_date.date()).days
        return max(1, days + 1)
    return max(1, len({log.created_at.date() for log in logs}))


def count_ratings(logs: Iterable[Log]) -> Dict[Rating, int]:
    """Number of logs per rating; every rating is present."""
    counts = {rating: 0 for rating in Rating}
    for log in logs:
        counts[log.rating] += 1
    return counts


def count_categories(
    logs: Iterable[Log], places_by_id: Dict[str, Place]
) -> List[Tuple[PlaceCategory, int]]:
    """
    Break a trip's logs down by place category.

    Each log counts towards at most one category; logs whose place is
    unknown or uncategorized are not counted. Categories with equal
    counts keep their declaration order.

    Returns:
        (category, count) pairs, largest count first
    """
    counts: Dict[PlaceCategory, int] = {}
    for log in logs:
        place = places_by_id.get(log.place_id)
        category = place.category if place else None
        if category is not None:
            counts[category] = counts.get(category, 0) + 1

    ordered = [category for category in PlaceCategory if category in counts]
    ordered.sort(key=lambda category: counts[category], reverse=True)
    return [(category, counts[category]) for category in ordered]


def _clean_note(note: Optional[str]) -> Optional[str]:
    if note is None:
        return None
    text = note.strip()
    return text or None


def pick_best_quote(
    logs: Sequence[Log], places_by_id: Dict[str, Place]
) -> Optional[Tuple[str, str]]:
    """
    Pick a note to feature on the export.

    The first non-blank note on a must-see log wins, else the first
    non-blank note on any log.

    Returns:
        (note, place name) or None when no log has a note
    """
    candidates = [log for log in logs if log.rating == Rating.MUST_SEE]
    for pool in (candidates, logs):
        for log in pool:
            note = _clean_note(log.note)
            if note:
                place = places_by_id.get(log.place_id)
                return note, place.name if place else UNKNOWN_PLACE
    return None


def build_export_data(
    trip: Trip, logs: Iterable[Log], places: Iterable[Place]
) -> TripExportData:
    """
    Assemble export data for one trip.

    Only the trip's own logs are used. Stops follow the trip's display
    order; logs whose place is unknown are left out of the stops but
    still count towards the statistics.

    Args:
        trip: Trip to export
        logs: Logs (any trip); filtered to ``trip``
        places: Known places

    Returns:
        TripExportData for the trip
    """
    places_by_id: Dict[str, Place] = {}
    for place in places:
        places_by_id.setdefault(place.id, place)

    trip_logs = sort_trip_logs(log for log in logs if log.trip_id == trip.id)

    stops = []
    for log in trip_logs:
        place = places_by_id.get(log.place_id)
        if place is None:
            continue
        stops.append(
            ExportStop(
                place_name=place.name,
                address=place.address,
                rating=log.rating,
                place_id=log.place_id,
                note=_clean_note(log.note),
                tags=list(log.tags),
                latitude=place.latitude,
                longitude=place.longitude,
            )
        )

    return TripExportData(
        trip_name=trip.name,
        stops=stops,
        date_range_text=format_trip_date_range(trip.start_date, trip.end_date),
        trip_description=trip.description,
        day_count=count_trip_days(trip, trip_logs),
        rating_counts=count_ratings(trip_logs),
        top_tags=top_tags(trip_logs),
        category_breakdown=count_categories(trip_logs, places_by_id),
        best_quote=pick_best_quote(trip_logs, places_by_id),
    )
