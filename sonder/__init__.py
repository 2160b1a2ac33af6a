"""
Sonder Journal Utilities
========================

Grouping, ordering, ranking and export helpers behind the sonder journal
and trip views.

Main Components:
    - journal: trip sort, masonry layout, trip grouping, tag ranking,
      itinerary text
    - models: Log, Trip, Place snapshots and their enums
    - snapshot: YAML/JSON journal snapshot loading and writing
    - core: Logging, exceptions, validation, paths
    - cli: `sonder` command-line interface

Example Usage:
    >>> from sonder import JournalSnapshot
    >>> from sonder.journal import build_trip_groups
    >>> snapshot = JournalSnapshot.from_file(Path("journal.yaml"))
    >>> sections = build_trip_groups(snapshot.logs, snapshot.trips)
"""

__version__ = "1.0.0"

from sonder.models import Log, Place, Rating, SyncStatus, Trip
from sonder.snapshot import JournalSnapshot

__all__ = [
    "JournalSnapshot",
    "Log",
    "Place",
    "Rating",
    "SyncStatus",
    "Trip",
]
