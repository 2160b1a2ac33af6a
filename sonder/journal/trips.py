#!/usr/bin/env python3
"""
trips.py
--------
Trip ordering and two-column masonry layout for the journal trips grid.

Functions:
    sort_trips_reverse_chronological: Newest trips first
    assign_masonry_columns: Greedy two-column balancing
    split_columns: Left/right item lists from an assignment
    estimate_trip_card_height: Height heuristic for a trip card

Usage:
    trips = sort_trips_reverse_chronological(snapshot.trips)
    layout = assign_masonry_columns(trips, estimate_trip_card_height)
    left, right = split_columns(layout)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, Sequence, Tuple, TypeVar

# --- Local imports ---
from sonder.models import Trip

T = TypeVar("T")

LEFT_COLUMN = 0
RIGHT_COLUMN = 1


def sort_trips_reverse_chronological(trips: Iterable[Trip]) -> List[Trip]:
    """
    Sort trips newest first.

    The key is the trip's start date, falling back to its creation time.
    Trips with equal keys keep their relative input order.

    Args:
        trips: Trip snapshots in any order

    Returns:
        New list of the same trips, newest first
    """
    return sorted(trips, key=lambda trip: trip.sort_date, reverse=True)


@dataclass(frozen=True)
class MasonryColumnAssignment(Generic[T]):
    """
    Column placement of one item in the masonry grid.

    Attributes:
        item: The placed item
        index: Position of the item in the input sequence
        column: 0 for the left column, 1 for the right
    """

    item: T
    index: int
    column: int


def assign_masonry_columns(
    items: Sequence[T],
    estimate_height: Callable[[T], float],
    spacing: float = 0.0,
) -> List[MasonryColumnAssignment[T]]:
    """
    Distribute items into two columns, balancing estimated height.

    Items are visited in input order. Each goes to the column with the
    lower running height, the left one on a tie, and that column grows by
    the item's estimated height plus ``spacing``. Items are never reordered:
    reading either column top to bottom follows the input order.

    Args:
        items: Items already in display order
        estimate_height: Estimated rendered height of an item
        spacing: Gap added after every card

    Returns:
        One assignment per item, in input order
    """
    left_height = 0.0
    right_height = 0.0
    assignments: List[MasonryColumnAssignment[T]] = []

    for index, item in enumerate(items):
        height = estimate_height(item)
        if left_height <= right_height:
            assignments.append(MasonryColumnAssignment(item, index, LEFT_COLUMN))
            left_height += height + spacing
        else:
            assignments.append(MasonryColumnAssignment(item, index, RIGHT_COLUMN))
            right_height += height + spacing

    return assignments


def split_columns(
    assignments: Iterable[MasonryColumnAssignment[T]],
) -> Tuple[List[MasonryColumnAssignment[T]], List[MasonryColumnAssignment[T]]]:
    """Split assignments into (left, right), each in index order."""
    left: List[MasonryColumnAssignment[T]] = []
    right: List[MasonryColumnAssignment[T]] = []
    for assignment in sorted(assignments, key=lambda a: a.index):
        (left if assignment.column == LEFT_COLUMN else right).append(assignment)
    return left, right


def estimate_trip_card_height(trip: Trip) -> float:
    """
    Estimate the rendered height of a compact trip card in points.

    Cover photo, padding, title row and stats row are always shown; the
    description and date range lines only when the trip has them.
    """
    height = 80.0  # cover photo
    height += 24.0  # info padding
    height += 22.0  # name + owner badge
    if trip.description:
        height += 30.0  # two description lines
    if trip.start_date is not None:
        height += 18.0  # date range
    height += 18.0  # stats row
    return height
