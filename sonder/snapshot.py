#!/usr/bin/env python3
"""
snapshot.py
-----------
Journal snapshots: the logs, trips and places a caller has fetched.

The journal helpers take plain in-memory collections. JournalSnapshot is
how the CLI (and tests) obtain them: a YAML document with three lists.
JSON documents load the same way since JSON is valid YAML.

    logs:
      - id: log-1
        user_id: user-1
        place_id: ChIJabc123
        rating: must_see
        trip_id: trip-1
        tags: [sushi, seafood]
        created_at: 2026-02-10T12:00:00Z
    trips:
      - id: trip-1
        name: Tokyo 2026
        created_by: user-1
        created_at: 2026-01-20T09:00:00Z
    places:
      - id: ChIJabc123
        name: Tsukiji Outer Market
        address: 4-16-2 Tsukiji, Chuo City
        lat: 35.665
        lng: 139.770

Usage:
    snapshot = JournalSnapshot.from_file(Path("journal.yaml"), logger=logger)
    sections = build_trip_groups(snapshot.logs, snapshot.trips)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, TypeVar

# --- Third-party imports ---
import yaml

# --- Local imports ---
from sonder.core.exceptions import ExportError, SnapshotParseError
from sonder.core.logging_manager import SonderLogger, safe_logger
from sonder.models import Log, Place, Trip

E = TypeVar("E")
SECTIONS = ("logs", "trips", "places")


def _parse_section(
    data: Dict[str, Any], name: str, parser: Callable[[Dict[str, Any]], E]
) -> List[E]:
    section = data.get(name)
    if section is None:
        return []
    if not isinstance(section, list):
        raise SnapshotParseError(f"Section '{name}' must be a list")

    records = []
    for position, item in enumerate(section):
        if not isinstance(item, dict):
            raise SnapshotParseError(
                f"Section '{name}' item {position} must be a mapping"
            )
        records.append(parser(item))
    return records


@dataclass
class JournalSnapshot:
    """
    In-memory copy of a user's journal records.

    Attributes:
        logs: Log records
        trips: Trip records
        places: Place records
        file_path: File the snapshot was read from, if any
        raw: Document the snapshot was parsed from; sections other than
            logs, trips and places are written back unchanged
    """

    logs: List[Log] = field(default_factory=list)
    trips: List[Trip] = field(default_factory=list)
    places: List[Place] = field(default_factory=list)
    file_path: Optional[Path] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    @classmethod
    def from_file(
        cls, file_path: Path, logger: Optional[SonderLogger] = None
    ) -> "JournalSnapshot":
        """
        Read a snapshot file.

        Args:
            file_path: Path to a YAML or JSON snapshot
            logger: Optional logger

        Returns:
            Parsed JournalSnapshot

        Raises:
            FileNotFoundError: If the file doesn't exist
            SnapshotParseError: If the document is unreadable
            SnapshotValidationError: If a record is invalid
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"Snapshot file not found: {file_path}")

        content = file_path.read_text(encoding="utf-8")
        snapshot = cls.from_yaml_text(content, file_path)

        unmodelled = [key for key in snapshot.raw if key not in SECTIONS]
        if unmodelled:
            safe_logger(logger).log_debug(
                "Sections kept as-is", {"path": file_path, "sections": unmodelled}
            )

        safe_logger(logger).log_operation(
            "load_snapshot",
            {
                "path": file_path,
                "logs": len(snapshot.logs),
                "trips": len(snapshot.trips),
                "places": len(snapshot.places),
            },
        )
        return snapshot

    @classmethod
    def from_yaml_text(
        cls, content: str, file_path: Optional[Path] = None
    ) -> "JournalSnapshot":
        """
        Parse a snapshot from YAML text.

        An empty document is an empty snapshot.

        Raises:
            SnapshotParseError: If YAML is invalid or not a mapping
        """
        try:
            data: Any = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise SnapshotParseError(f"Invalid YAML: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise SnapshotParseError("Snapshot content must be a mapping")

        return cls.from_dict(data, file_path)

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], file_path: Optional[Path] = None
    ) -> "JournalSnapshot":
        """Create a snapshot from a parsed document."""
        return cls(
            logs=_parse_section(data, "logs", Log.from_dict),
            trips=_parse_section(data, "trips", Trip.from_dict),
            places=_parse_section(data, "places", Place.from_dict),
            file_path=file_path,
            raw=dict(data),
        )

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def trip_by_id(self, trip_id: str) -> Optional[Trip]:
        """Trip with the given id, or None."""
        return next((trip for trip in self.trips if trip.id == trip_id), None)

    def log_by_id(self, log_id: str) -> Optional[Log]:
        """Log with the given id, or None."""
        return next((log for log in self.logs if log.id == log_id), None)

    @property
    def places_by_id(self) -> Dict[str, Place]:
        """Places keyed by id; the first record wins on duplicates."""
        lookup: Dict[str, Place] = {}
        for place in self.places:
            lookup.setdefault(place.id, place)
        return lookup

    def logs_for_trip(self, trip_id: str) -> List[Log]:
        """Logs assigned to a trip, in snapshot order."""
        return [log for log in self.logs if log.trip_id == trip_id]

    def logs_for_user(self, user_id: str) -> List[Log]:
        """Logs written by a user, in snapshot order."""
        return [log for log in self.logs if log.user_id == user_id]

    # -------------------------------------------------------------------------
    # Writing
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to a plain document.

        Other top-level sections of the source document keep their place
        and content.
        """
        document = dict(self.raw)
        for name, records in (
            ("logs", self.logs),
            ("trips", self.trips),
            ("places", self.places),
        ):
            if records or name in document or not self.raw:
                document[name] = [record.to_dict() for record in records]
        return document

    def to_yaml(self) -> str:
        """Serialize to YAML text."""
        return yaml.safe_dump(
            self.to_dict(),
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )

    def write(
        self, file_path: Optional[Path] = None, logger: Optional[SonderLogger] = None
    ) -> Path:
        """
        Write the snapshot as YAML.

        Args:
            file_path: Destination (defaults to the file it was read from)
            logger: Optional logger

        Returns:
            Path written

        Raises:
            ExportError: If there is no destination or writing fails
        """
        target = Path(file_path) if file_path is not None else self.file_path
        if target is None:
            raise ExportError("No destination given for snapshot")

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(self.to_yaml(), encoding="utf-8")
        except OSError as e:
            raise ExportError(f"Cannot write snapshot to {target}: {e}") from e

        safe_logger(logger).log_operation("write_snapshot", {"path": target})
        return target
