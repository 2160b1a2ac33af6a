"""
Enumeration Types
------------------

Enum classes for sonder journal records.

Enums:
    - Rating: How much a place was enjoyed (must_see > great > okay > skip)
    - SyncStatus: Whether a record's local changes reached the server
    - PlaceCategory: Broad category of a place (food, coffee, ...)

Values match the wire strings used by the sync layer.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional


class Rating(str, Enum):
    """
    Enumeration of place ratings, best first.

    - MUST_SEE: Go out of your way
    - GREAT: Good, would go again
    - OKAY: Fine, nothing special
    - SKIP: Wouldn't recommend
    """

    MUST_SEE = "must_see"
    GREAT = "great"
    OKAY = "okay"
    SKIP = "skip"

    @classmethod
    def choices(cls) -> List[str]:
        """Get all available rating choices."""
        return [rating.value for rating in cls]

    @classmethod
    def parse(cls, value: str) -> "Rating":
        """
        Resolve a wire value, accepting the legacy 'solid' rating.

        Raises:
            ValueError: If value is not a known rating
        """
        if isinstance(value, Rating):
            return value
        text = str(value).strip().lower()
        if text == "solid":
            return cls.GREAT
        return cls(text)

    @property
    def emoji(self) -> str:
        """Get the emoji shown next to a rated place."""
        emoji_map = {
            Rating.MUST_SEE: "🔥",
            Rating.GREAT: "👍",
            Rating.OKAY: "👌",
            Rating.SKIP: "👎",
        }
        return emoji_map[self]

    @property
    def display_name(self) -> str:
        """Get human-readable display name."""
        display_map = {
            Rating.MUST_SEE: "Must-See",
            Rating.GREAT: "Great",
            Rating.OKAY: "Okay",
            Rating.SKIP: "Skip",
        }
        return display_map.get(self, self.value.title())

    @property
    def rank(self) -> int:
        """Ordering weight; higher is better."""
        return {
            Rating.MUST_SEE: 3,
            Rating.GREAT: 2,
            Rating.OKAY: 1,
            Rating.SKIP: 0,
        }[self]


class SyncStatus(str, Enum):
    """
    Enumeration of record sync states.

    - SYNCED: Local record matches the server
    - PENDING: Local changes waiting to be pushed
    - FAILED: Last push attempt failed
    """

    SYNCED = "synced"
    PENDING = "pending"
    FAILED = "failed"

    @classmethod
    def choices(cls) -> List[str]:
        """Get all available sync status choices."""
        return [status.value for status in cls]


class PlaceCategory(str, Enum):
    """
    Enumeration of broad place categories, derived from Google place types.

    Categories are checked in declaration order; a place belongs to the
    first category sharing a type with it.
    """

    FOOD = "food"
    COFFEE = "coffee"
    NIGHTLIFE = "nightlife"
    OUTDOORS = "outdoors"
    SHOPPING = "shopping"
    ATTRACTIONS = "attractions"

    @classmethod
    def choices(cls) -> List[str]:
        """Get all available category choices."""
        return [category.value for category in cls]

    @classmethod
    def for_types(cls, place_types: Iterable[str]) -> Optional["PlaceCategory"]:
        """First category matching any of the place types, or None."""
        type_set = set(place_types)
        for category in cls:
            if not category.place_types.isdisjoint(type_set):
                return category
        return None

    @property
    def place_types(self) -> FrozenSet[str]:
        """Google place types that map to this category."""
        type_map = {
            PlaceCategory.FOOD: {"restaurant", "food", "meal_delivery", "meal_takeaway", "bakery"},
            PlaceCategory.COFFEE: {"cafe", "coffee_shop"},
            PlaceCategory.NIGHTLIFE: {"bar", "night_club", "liquor_store"},
            PlaceCategory.OUTDOORS: {"park", "campground", "natural_feature", "hiking_area"},
            PlaceCategory.SHOPPING: {
                "shopping_mall", "store", "clothing_store", "shoe_store",
                "jewelry_store", "book_store",
            },
            PlaceCategory.ATTRACTIONS: {
                "museum", "art_gallery", "tourist_attraction", "amusement_park",
                "aquarium", "zoo",
            },
        }
        return frozenset(type_map[self])

    @property
    def emoji(self) -> str:
        """Get the emoji shown in the trip breakdown."""
        emoji_map = {
            PlaceCategory.FOOD: "🍴",
            PlaceCategory.COFFEE: "☕",
            PlaceCategory.NIGHTLIFE: "🌙",
            PlaceCategory.OUTDOORS: "🌿",
            PlaceCategory.SHOPPING: "🛍",
            PlaceCategory.ATTRACTIONS: "🏛",
        }
        return emoji_map[self]

    @property
    def display_name(self) -> str:
        """Get human-readable display name."""
        return self.value.title()
