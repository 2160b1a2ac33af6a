"""
conftest.py
-----------
Shared pytest fixtures for sonder tests.

Provides fixtures for:
- Fixed timestamps
- Log, Trip and Place factories
- Sample snapshot files
"""
import pytest
from datetime import datetime, timedelta, timezone
from pathlib import Path

from sonder.models import Log, Place, Rating, SyncStatus, Trip


BASE_TIME = datetime(2026, 2, 10, 12, 0, tzinfo=timezone.utc)


def at(hours: float = 0, days: float = 0) -> datetime:
    """Timestamp offset from BASE_TIME."""
    return BASE_TIME + timedelta(hours=hours, days=days)


def make_log(
    id: str = "log",
    user_id: str = "user-1",
    place_id: str = "place-1",
    rating: Rating = Rating.GREAT,
    created_at: datetime = BASE_TIME,
    **kwargs,
) -> Log:
    """Build a Log with sensible defaults."""
    kwargs.setdefault("sync_status", SyncStatus.SYNCED)
    return Log(
        id=id,
        user_id=user_id,
        place_id=place_id,
        rating=rating,
        created_at=created_at,
        **kwargs,
    )


def make_trip(
    id: str = "trip",
    name: str = "Trip",
    created_at: datetime = BASE_TIME,
    created_by: str = "user-1",
    **kwargs,
) -> Trip:
    """Build a Trip with sensible defaults."""
    return Trip(id=id, name=name, created_by=created_by, created_at=created_at, **kwargs)


def make_place(id: str = "place-1", name: str = "Place", address: str = "", **kwargs) -> Place:
    """Build a Place with sensible defaults."""
    return Place(id=id, name=name, address=address, **kwargs)


# ----- Path Fixtures -----

@pytest.fixture
def fixtures_dir():
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_snapshot_path(fixtures_dir):
    """Path to the sample journal snapshot."""
    return fixtures_dir / "journal.yaml"


@pytest.fixture
def snapshot_copy(sample_snapshot_path, tmp_path):
    """Writable copy of the sample snapshot."""
    target = tmp_path / "journal.yaml"
    target.write_text(sample_snapshot_path.read_text(encoding="utf-8"), encoding="utf-8")
    return target


@pytest.fixture
def log_dir(tmp_path):
    """Temporary log directory."""
    path = tmp_path / "logs"
    path.mkdir()
    return path
