"""
journal package
---------------
Pure helpers behind the journal, trip and log editor views.

- trips: reverse-chronological trip sort and masonry column assignment
- grouping: trip sections for the journal, stop ordering and reorder
- tags: tag suggestion ranking
- itinerary: plain-text trip itinerary export

None of these helpers perform I/O. apply_reorder is the only one that
mutates its inputs.
"""
from sonder.journal.grouping import (
    TripSection,
    apply_reorder,
    build_trip_groups,
    group_logs_by_day,
    is_custom_ordered,
    sort_trip_logs,
)
from sonder.journal.itinerary import (
    ExportStop,
    TripExportData,
    build_export_data,
    build_text,
)
from sonder.journal.tags import (
    normalized_tag_key,
    prioritized_tag_suggestions,
    recent_tags_by_usage,
    top_tags,
)
from sonder.journal.trips import (
    MasonryColumnAssignment,
    assign_masonry_columns,
    estimate_trip_card_height,
    sort_trips_reverse_chronological,
    split_columns,
)

__all__ = [
    "ExportStop",
    "MasonryColumnAssignment",
    "TripExportData",
    "TripSection",
    "apply_reorder",
    "assign_masonry_columns",
    "build_export_data",
    "build_text",
    "build_trip_groups",
    "estimate_trip_card_height",
    "group_logs_by_day",
    "is_custom_ordered",
    "normalized_tag_key",
    "prioritized_tag_suggestions",
    "recent_tags_by_usage",
    "sort_trip_logs",
    "sort_trips_reverse_chronological",
    "split_columns",
    "top_tags",
]
