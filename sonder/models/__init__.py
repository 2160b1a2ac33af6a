"""
Journal Models Package
-----------------------

Snapshot dataclasses and enumerations for sonder journal records.

- enums: Rating, SyncStatus, PlaceCategory
- entities: Log, Trip, Place

Usage:
    from sonder.models import Log, Trip, Place, Rating
"""
from .enums import PlaceCategory, Rating, SyncStatus
from .entities import Log, Place, Trip

__all__ = [
    "Log",
    "Place",
    "PlaceCategory",
    "Rating",
    "SyncStatus",
    "Trip",
]
