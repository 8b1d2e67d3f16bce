"""
Filter Engine
Display projections over the merged event set

All functions are pure and order-preserving:
1. merge - user-created events first, then fetched events (no de-duplication)
2. filter_by_category - loose category match ("Live Music" matches "Music")
3. top_picks - Highly Recommended or user-created
4. available_categories - fixed categories followed by the dynamic ones
5. mappable - events that can be placed on a map
"""

from typing import List, Sequence

from ..schemas.event_schemas import Event, RecommendationLevel

ALL_CATEGORIES = "All"
BASE_CATEGORIES = [ALL_CATEGORIES, "Music", "Nightlife", "Food", "Arts"]


def merge(user_events: Sequence[Event], fetched_events: Sequence[Event]) -> List[Event]:
    """
    Combine user-created and fetched events for display.

    User events always come first. Duplicates between the two sources are
    kept as-is.
    """
    return [*user_events, *fetched_events]


def filter_by_category(events: Sequence[Event], category: str) -> List[Event]:
    """
    Keep events whose category equals or contains ``category``.

    Example:
        >>> filter_by_category(events, "Music")   # keeps "Music" and "Live Music"
        >>> filter_by_category(events, "All")     # identity
    """
    if category == ALL_CATEGORIES:
        return list(events)
    return [e for e in events if e.category == category or category in (e.category or "")]


def top_picks(events: Sequence[Event]) -> List[Event]:
    """Highly Recommended events plus every user-created event"""
    return [
        e for e in events
        if e.recommendation_level == RecommendationLevel.HIGHLY_RECOMMENDED or e.is_user_created
    ]


def available_categories(events: Sequence[Event]) -> List[str]:
    categories = list(BASE_CATEGORIES)
    for event in events:
        if event.category and event.category not in categories:
            categories.append(event.category)
    return categories


def mappable(events: Sequence[Event]) -> List[Event]:
    # zero lat/lng counts as missing
    return [e for e in events if e.coordinates and e.coordinates.lat and e.coordinates.lng]
