#!/usr/bin/env python3
"""
entities.py
-----------
Dataclasses for the journal records consumed by the sonder helpers.

Models:
    - Log: A user's record of visiting a Place
    - Trip: A named, optionally dated collection of Logs
    - Place: A venue with an address and coordinates

These are snapshots of records owned by an external persistence and sync
layer. The helpers in sonder.journal only read them, with the single
exception of apply_reorder, which updates the ordering and sync fields
of the logs it is given.

Serialization uses the snake_case keys of the sync layer:

    log = Log.from_dict({
        "id": "log-1",
        "user_id": "user-1",
        "place_id": "ChIJ...",
        "rating": "must_see",
        "created_at": "2026-02-10T12:00:00Z",
        "trip_id": "trip-1",
    })
    log.to_dict()["trip_sort_order"]  # None
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

# --- Local imports ---
from sonder.core.exceptions import SnapshotValidationError, ValidationError
from sonder.core.validators import DataValidator
from sonder.models.enums import PlaceCategory, Rating, SyncStatus


def _required(data: Dict[str, Any], fields: List[str], record: str) -> None:
    """Raise SnapshotValidationError when a required field is missing."""
    try:
        DataValidator.validate_required_fields(data, fields)
    except ValidationError as e:
        raise SnapshotValidationError(f"{record}: {e}") from e


def _timestamp(data: Dict[str, Any], key: str, record: str) -> Optional[datetime]:
    try:
        return DataValidator.normalize_datetime(data.get(key))
    except ValidationError as e:
        raise SnapshotValidationError(f"{record} field '{key}': {e}") from e


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _serialize(entity: Any) -> Dict[str, Any]:
    """
    Serialize a record, keeping what it was loaded with.

    Records built from a snapshot start from their original mapping, so
    keys this package does not model and values it would spell
    differently (a legacy rating, a 'Z' timestamp) survive a rewrite.
    Only fields that changed since loading are written back.
    """
    fresh = entity._record()
    if not entity.raw:
        return fresh

    loaded = type(entity).from_dict(entity.raw)._record()
    record = dict(entity.raw)
    for key, value in fresh.items():
        if value != loaded.get(key):
            record[key] = value
    return record


@dataclass
class Place:
    """
    A venue a user can log.

    Attributes:
        id: Google place id
        name: Display name
        address: Formatted address (may be empty)
        latitude: Latitude in degrees
        longitude: Longitude in degrees
        types: Google place types
        photo_reference: Optional photo reference
        raw: Snapshot record the place was loaded from, if any
    """

    id: str
    name: str
    address: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    types: List[str] = field(default_factory=list)
    photo_reference: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def coordinate(self) -> Tuple[float, float]:
        """(latitude, longitude) pair."""
        return (self.latitude, self.longitude)

    @property
    def category(self) -> Optional[PlaceCategory]:
        """Broad category derived from the place types, if any."""
        return PlaceCategory.for_types(self.types)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Place":
        """
        Create a Place from a snapshot record.

        Raises:
            SnapshotValidationError: If required fields are missing or invalid
        """
        _required(data, ["id", "name"], "Place")
        try:
            latitude = DataValidator.normalize_float(data.get("lat"))
            longitude = DataValidator.normalize_float(data.get("lng"))
            types = DataValidator.normalize_string_list(data.get("types"))
        except ValidationError as e:
            raise SnapshotValidationError(f"Place '{data['id']}': {e}") from e

        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            address=str(data.get("address") or ""),
            latitude=latitude or 0.0,
            longitude=longitude or 0.0,
            types=types,
            photo_reference=DataValidator.normalize_string(data.get("photo_reference")),
            raw=dict(data),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a snapshot record."""
        return _serialize(self)

    def _record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "lat": self.latitude,
            "lng": self.longitude,
            "types": list(self.types),
            "photo_reference": self.photo_reference,
        }


@dataclass
class Trip:
    """
    A named collection of logs, shareable among collaborators.

    Attributes:
        id: Trip identifier
        name: Display name
        created_by: Creator user id
        created_at: Creation timestamp
        description: Optional free-text description
        start_date: Optional trip start
        end_date: Optional trip end
        cover_photo_url: Optional cover photo reference
        collaborator_ids: User ids the trip is shared with
        updated_at: Last modification timestamp
        raw: Snapshot record the trip was loaded from, if any
    """

    id: str
    name: str
    created_by: str
    created_at: datetime
    description: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    cover_photo_url: Optional[str] = None
    collaborator_ids: List[str] = field(default_factory=list)
    updated_at: Optional[datetime] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.created_at = DataValidator.normalize_datetime(self.created_at)
        self.start_date = DataValidator.normalize_datetime(self.start_date)
        self.end_date = DataValidator.normalize_datetime(self.end_date)
        self.updated_at = DataValidator.normalize_datetime(self.updated_at) or self.created_at

    @property
    def sort_date(self) -> datetime:
        """Date used for reverse-chronological trip ordering."""
        return self.start_date if self.start_date is not None else self.created_at

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Trip":
        """
        Create a Trip from a snapshot record.

        Raises:
            SnapshotValidationError: If required fields are missing or invalid
        """
        _required(data, ["id", "name", "created_by", "created_at"], "Trip")
        record = f"Trip '{data['id']}'"
        try:
            collaborators = DataValidator.normalize_string_list(data.get("collaborator_ids"))
        except ValidationError as e:
            raise SnapshotValidationError(f"{record}: {e}") from e

        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            created_by=str(data["created_by"]),
            created_at=_timestamp(data, "created_at", record),
            description=DataValidator.normalize_string(data.get("description")),
            start_date=_timestamp(data, "start_date", record),
            end_date=_timestamp(data, "end_date", record),
            cover_photo_url=DataValidator.normalize_string(data.get("cover_photo_url")),
            collaborator_ids=collaborators,
            updated_at=_timestamp(data, "updated_at", record),
            raw=dict(data),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a snapshot record."""
        return _serialize(self)

    def _record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "created_by": self.created_by,
            "created_at": _isoformat(self.created_at),
            "updated_at": _isoformat(self.updated_at),
            "start_date": _isoformat(self.start_date),
            "end_date": _isoformat(self.end_date),
            "cover_photo_url": self.cover_photo_url,
            "collaborator_ids": list(self.collaborator_ids),
        }


@dataclass
class Log:
    """
    A user's record of having visited a place.

    Attributes:
        id: Log identifier
        user_id: Owning user id
        place_id: Place the log refers to
        rating: How the place was rated
        created_at: When the log was written
        visited_at: When the place was visited (defaults to created_at)
        updated_at: Last modification (defaults to created_at)
        trip_id: Owning trip id, None when unassigned; may be dangling
        trip_sort_order: Position in a manually reordered trip, else None
        note: Optional free-text note
        tags: Free-text tags, casing preserved
        photo_url: Optional photo reference
        sync_status: Sync state of local changes
        raw: Snapshot record the log was loaded from, if any
    """

    id: str
    user_id: str
    place_id: str
    rating: Rating
    created_at: datetime
    visited_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    trip_id: Optional[str] = None
    trip_sort_order: Optional[int] = None
    note: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    photo_url: Optional[str] = None
    sync_status: SyncStatus = SyncStatus.SYNCED
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Naive timestamps are taken as UTC so records built in code compare
        # with those loaded from snapshots.
        self.created_at = DataValidator.normalize_datetime(self.created_at)
        self.visited_at = DataValidator.normalize_datetime(self.visited_at) or self.created_at
        self.updated_at = DataValidator.normalize_datetime(self.updated_at) or self.created_at

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Log":
        """
        Create a Log from a snapshot record.

        Notes are kept verbatim (not stripped); the itinerary helpers
        decide what counts as blank.

        Raises:
            SnapshotValidationError: If required fields are missing or invalid
        """
        _required(data, ["id", "user_id", "place_id", "rating", "created_at"], "Log")
        record = f"Log '{data['id']}'"

        try:
            rating = Rating.parse(data["rating"])
        except ValueError as e:
            raise SnapshotValidationError(
                f"{record}: unknown rating '{data['rating']}'"
            ) from e

        try:
            sync_status = SyncStatus(data.get("sync_status") or SyncStatus.SYNCED.value)
        except ValueError as e:
            raise SnapshotValidationError(
                f"{record}: unknown sync status '{data.get('sync_status')}'"
            ) from e

        try:
            sort_order = DataValidator.normalize_int(data.get("trip_sort_order"))
            tags = DataValidator.normalize_string_list(data.get("tags"))
        except ValidationError as e:
            raise SnapshotValidationError(f"{record}: {e}") from e

        note = data.get("note")
        return cls(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            place_id=str(data["place_id"]),
            rating=rating,
            created_at=_timestamp(data, "created_at", record),
            visited_at=_timestamp(data, "visited_at", record),
            updated_at=_timestamp(data, "updated_at", record),
            trip_id=DataValidator.normalize_string(data.get("trip_id")),
            trip_sort_order=sort_order,
            note=str(note) if note is not None else None,
            tags=tags,
            photo_url=DataValidator.normalize_string(data.get("photo_url")),
            sync_status=sync_status,
            raw=dict(data),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a snapshot record."""
        return _serialize(self)

    def _record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "place_id": self.place_id,
            "rating": self.rating.value,
            "note": self.note,
            "tags": list(self.tags),
            "photo_url": self.photo_url,
            "trip_id": self.trip_id,
            "trip_sort_order": self.trip_sort_order,
            "sync_status": self.sync_status.value,
            "visited_at": _isoformat(self.visited_at),
            "created_at": _isoformat(self.created_at),
            "updated_at": _isoformat(self.updated_at),
        }
