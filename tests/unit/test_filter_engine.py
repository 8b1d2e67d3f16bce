"""Unit tests for merge, category filtering and top picks."""
from __future__ import annotations

from citysense.algorithms import filter_engine
from citysense.schemas.event_schemas import Coordinates, Event, RecommendationLevel


def _event(id_: str, category: str = "Music", level=None, user: bool = False, coords=None) -> Event:
    return Event(
        id=id_,
        title=f"Event {id_}",
        category=category,
        image_url="https://img",
        link="https://link",
        recommendation_level=level,
        is_user_created=True if user else None,
        coordinates=coords,
    )


def test_merge_puts_user_events_first_without_deduplication() -> None:
    user = [_event("u1", user=True)]
    fetched = [_event("a"), _event("u1")]

    merged = filter_engine.merge(user, fetched)

    assert [e.id for e in merged] == ["u1", "a", "u1"]


def test_filter_all_is_identity() -> None:
    events = [_event("a", "Music"), _event("b", "Food")]

    assert filter_engine.filter_by_category(events, "All") == events


def test_filter_matches_exact_and_substring_categories() -> None:
    events = [_event("a", "Music"), _event("b", "Live Music"), _event("c", "Food"), _event("d", "")]

    result = filter_engine.filter_by_category(events, "Music")

    assert [e.id for e in result] == ["a", "b"]


def test_filter_is_idempotent() -> None:
    events = [_event("a", "Arts"), _event("b", "Street Food"), _event("c", "Food & Drink")]

    once = filter_engine.filter_by_category(events, "Food")

    assert filter_engine.filter_by_category(once, "Food") == once


def test_top_picks_keeps_highly_recommended_and_all_user_events() -> None:
    events = [
        _event("hr", level=RecommendationLevel.HIGHLY_RECOMMENDED),
        _event("c", level=RecommendationLevel.CONSIDER),
        _event("u", level=RecommendationLevel.NOT_RECOMMENDED, user=True),
        _event("n", level=RecommendationLevel.NOT_RECOMMENDED),
        _event("none"),
    ]

    assert [e.id for e in filter_engine.top_picks(events)] == ["hr", "u"]


def test_available_categories_appends_new_categories_once() -> None:
    events = [_event("a", "Music"), _event("b", "Comedy"), _event("c", "Comedy"), _event("d", "")]

    assert filter_engine.available_categories(events) == ["All", "Music", "Nightlife", "Food", "Arts", "Comedy"]


def test_mappable_requires_nonzero_coordinates() -> None:
    events = [
        _event("a", coords=Coordinates(lat=25.7, lng=-80.2)),
        _event("b", coords=Coordinates(lat=0, lng=-80.2)),
        _event("c"),
    ]

    assert [e.id for e in filter_engine.mappable(events)] == ["a"]
