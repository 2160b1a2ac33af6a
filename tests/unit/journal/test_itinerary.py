"""
test_itinerary.py
-----------------
Unit tests for sonder.journal.itinerary.

Tests the plain-text itinerary builder and the assembly of export data
from a trip's logs and places.
"""
from datetime import datetime, timezone

from conftest import at, make_log, make_place, make_trip
from sonder.journal.itinerary import (
    ExportStop,
    TripExportData,
    build_export_data,
    build_text,
    count_ratings,
    count_categories,
    count_trip_days,
    format_trip_date_range,
    pick_best_quote,
)
from sonder.models import PlaceCategory, Rating


def make_stop(
    name="Test Place",
    address="",
    rating=Rating.GREAT,
    place_id="",
    note=None,
    tags=None,
):
    return ExportStop(
        place_name=name,
        address=address,
        rating=rating,
        place_id=place_id,
        note=note,
        tags=tags or [],
    )


def make_data(trip_name="Tokyo 2026", date_range_text="Feb 10–17", stops=None):
    return TripExportData(
        trip_name=trip_name,
        date_range_text=date_range_text,
        stops=stops or [],
    )


class TestBuildText:
    """Test build_text function."""

    def test_header_includes_name_dates_and_count(self):
        """Test header carries trip name, date range and stop count."""
        text = build_text(make_data(stops=[make_stop(name="A"), make_stop(name="B")]))
        header = text.splitlines()[0]

        assert "Tokyo 2026" in header
        assert "Feb 10–17" in header
        assert "2 stops" in header

    def test_header_omits_missing_dates(self):
        """Test no date text when the range is unknown."""
        text = build_text(make_data(date_range_text=None, stops=[make_stop()]))

        assert "Feb" not in text
        assert "1 stops" in text

    def test_header_treats_empty_dates_as_missing(self):
        text = build_text(make_data(date_range_text="", stops=[make_stop()]))
        assert text.splitlines()[0] == "\U0001F9F3 Tokyo 2026  ·  1 stops"

    def test_empty_stops_header_only(self):
        """Test zero stops yields exactly one non-empty line."""
        text = build_text(make_data(stops=[]))
        lines = [line for line in text.split("\n") if line]

        assert len(lines) == 1
        assert "Tokyo 2026" in lines[0]
        assert "0 stops" in lines[0]

    def test_full_stop_renders_all_fields(self):
        """Test every optional line appears when present."""
        stop = make_stop(
            name="Tsukiji Outer Market",
            address="4-16-2 Tsukiji, Chuo City",
            rating=Rating.MUST_SEE,
            place_id="ChIJabc123",
            note="Best tuna bowl I've ever had",
            tags=["sushi", "seafood"],
        )
        text = build_text(make_data(stops=[stop]))

        assert f"1. {Rating.MUST_SEE.emoji} Tsukiji Outer Market" in text
        assert "4-16-2 Tsukiji, Chuo City" in text
        assert "“Best tuna bowl I've ever had”" in text
        assert "#sushi #seafood" in text
        assert "https://www.google.com/maps/place/?q=place_id:ChIJabc123" in text

    def test_skips_empty_optional_lines(self):
        """Test address, note, tags and link lines are conditional."""
        text = build_text(make_data(stops=[make_stop(name="Place")]))

        assert "\U0001F4CD" not in text
        assert "“" not in text
        assert "#" not in text
        assert "place_id:" not in text

    def test_empty_note_skipped(self):
        """Test an empty-string note adds no quote line."""
        text = build_text(make_data(stops=[make_stop(note="")]))
        assert "“" not in text

    def test_numbering_follows_input_order(self):
        """Test stops are numbered from 1 in order."""
        stops = [make_stop(name="First"), make_stop(name="Second", rating=Rating.SKIP)]
        lines = build_text(make_data(stops=stops)).splitlines()

        assert f"1. {Rating.GREAT.emoji} First" in lines
        assert f"2. {Rating.SKIP.emoji} Second" in lines
        assert lines.index(f"1. {Rating.GREAT.emoji} First") < lines.index(
            f"2. {Rating.SKIP.emoji} Second"
        )

    def test_thirty_stops_not_truncated(self):
        """Test long trips keep every stop."""
        stops = [make_stop(name=f"Place {i}") for i in range(1, 31)]
        text = build_text(make_data(stops=stops))

        assert "30 stops" in text
        assert any(line.startswith("30. ") for line in text.splitlines())
        assert "Place 30" in text
        assert "more" not in text.lower()
        assert "…" not in text


class TestFormatTripDateRange:
    """Test format_trip_date_range function."""

    def test_both_dates(self):
        start = datetime(2026, 2, 10, tzinfo=timezone.utc)
        end = datetime(2026, 2, 17, tzinfo=timezone.utc)
        assert format_trip_date_range(start, end) == "Feb 10, 2026 – Feb 17, 2026"

    def test_start_only(self):
        assert format_trip_date_range(datetime(2026, 3, 1), None) == "From Mar 1, 2026"

    def test_end_only(self):
        assert format_trip_date_range(None, datetime(2026, 3, 9)) == "Until Mar 9, 2026"

    def test_neither(self):
        assert format_trip_date_range(None, None) is None


class TestTripStats:
    """Test day counting, rating counts and quote picking."""

    def test_day_count_from_trip_dates(self):
        """Test inclusive span between start and end."""
        trip = make_trip(start_date=at(), end_date=at(days=6))
        assert count_trip_days(trip, []) == 7

    def test_day_count_from_logs(self):
        """Test distinct creation days without trip dates."""
        logs = [make_log(created_at=at()), make_log(created_at=at(hours=1)), make_log(created_at=at(days=2))]
        assert count_trip_days(make_trip(), logs) == 2

    def test_day_count_minimum_one(self):
        """Test a trip with no logs or dates counts one day."""
        assert count_trip_days(make_trip(), []) == 1

    def test_rating_counts_cover_all_ratings(self):
        """Test every rating is reported, including zeros."""
        counts = count_ratings([make_log(rating=Rating.MUST_SEE), make_log(rating=Rating.MUST_SEE)])
        assert counts == {Rating.MUST_SEE: 2, Rating.GREAT: 0, Rating.OKAY: 0, Rating.SKIP: 0}

    def test_best_quote_prefers_must_see(self):
        """Test must-see notes beat earlier notes on other logs."""
        places = {"p2": make_place(id="p2", name="Senso-ji")}
        logs = [
            make_log(id="1", place_id="p1", rating=Rating.GREAT, note="nice"),
            make_log(id="2", place_id="p2", rating=Rating.MUST_SEE, note="  wow  "),
        ]
        assert pick_best_quote(logs, places) == ("wow", "Senso-ji")

    def test_best_quote_falls_back_and_handles_unknown_place(self):
        """Test any note is used when no must-see has one."""
        logs = [
            make_log(id="1", rating=Rating.MUST_SEE, note="   "),
            make_log(id="2", place_id="missing", rating=Rating.OKAY, note="fine"),
        ]
        assert pick_best_quote(logs, {}) == ("fine", "Unknown")

    def test_best_quote_none(self):
        assert pick_best_quote([make_log()], {}) is None


class TestBuildExportData:
    """Test build_export_data function."""

    def test_assembles_stops_in_trip_order(self):
        """Test stops follow the trip's display order and skip unknown places."""
        trip = make_trip(id="trip-1", name="Tokyo", start_date=at(), end_date=at(days=2))
        places = [
            make_place(id="p1", name="Market", address="Tsukiji"),
            make_place(id="p2", name="Temple"),
        ]
        logs = [
            make_log(id="b", place_id="p2", trip_id="trip-1", visited_at=at(hours=5), note=" ", tags=["temple"]),
            make_log(id="a", place_id="p1", trip_id="trip-1", visited_at=at(hours=1), rating=Rating.MUST_SEE),
            make_log(id="x", place_id="gone", trip_id="trip-1", visited_at=at(hours=3)),
            make_log(id="other", place_id="p1", trip_id="trip-2"),
        ]

        data = build_export_data(trip, logs, places)

        assert data.trip_name == "Tokyo"
        assert [stop.place_name for stop in data.stops] == ["Market", "Temple"]
        assert data.place_count == 2
        assert data.stops[0].address == "Tsukiji"
        assert data.stops[1].note is None
        assert data.date_range_text == "Feb 10, 2026 – Feb 12, 2026"
        assert data.day_count == 3
        assert data.rating_counts[Rating.MUST_SEE] == 1
        assert data.rating_counts[Rating.GREAT] == 2
        assert data.top_tags == ["temple"]

    def test_manual_order_respected(self):
        """Test reordered trips export in their manual order."""
        trip = make_trip(id="trip-1")
        places = [make_place(id="p1", name="One"), make_place(id="p2", name="Two")]
        logs = [
            make_log(id="a", place_id="p1", trip_id="trip-1", trip_sort_order=1),
            make_log(id="b", place_id="p2", trip_id="trip-1", trip_sort_order=0),
        ]

        data = build_export_data(trip, logs, places)

        assert [stop.place_name for stop in data.stops] == ["Two", "One"]
        assert "1. " + Rating.GREAT.emoji + " Two" in build_text(data)

    def test_category_breakdown(self):
        """Test categories are counted per stop from place types."""
        trip = make_trip(id="trip-1")
        places = [
            make_place(id="p1", name="Tsukiji", types=["market", "food"]),
            make_place(id="p2", name="Fuunji", types=["restaurant"]),
            make_place(id="p3", name="Senso-ji", types=["tourist_attraction"]),
        ]
        logs = [
            make_log(id="a", place_id="p1", trip_id="trip-1"),
            make_log(id="b", place_id="p2", trip_id="trip-1"),
            make_log(id="c", place_id="p3", trip_id="trip-1"),
        ]

        data = build_export_data(trip, logs, places)

        assert data.category_breakdown == [
            (PlaceCategory.FOOD, 2),
            (PlaceCategory.ATTRACTIONS, 1),
        ]


class TestCountCategories:
    """Test count_categories function."""

    def test_each_log_counts_once(self):
        """Test a place matching several categories counts for the first."""
        places = {"p1": make_place(id="p1", types=["cafe", "bakery"])}
        logs = [make_log(place_id="p1")]

        assert count_categories(logs, places) == [(PlaceCategory.FOOD, 1)]

    def test_unknown_and_uncategorized_places_skipped(self):
        places = {"p1": make_place(id="p1", types=["point_of_interest"])}
        logs = [make_log(place_id="p1"), make_log(place_id="missing")]

        assert count_categories(logs, places) == []

    def test_ties_keep_category_order(self):
        places = {
            "bar": make_place(id="bar", types=["bar"]),
            "park": make_place(id="park", types=["park"]),
            "cafe": make_place(id="cafe", types=["cafe"]),
        }
        logs = [make_log(place_id=place_id) for place_id in ("park", "bar", "cafe")]

        assert [category for category, _ in count_categories(logs, places)] == [
            PlaceCategory.COFFEE,
            PlaceCategory.NIGHTLIFE,
            PlaceCategory.OUTDOORS,
        ]
