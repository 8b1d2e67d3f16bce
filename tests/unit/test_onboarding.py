"""Unit tests for onboarding, user events and reset."""
from __future__ import annotations

from datetime import datetime

import pytest

from citysense.agents.onboarding import (
    ProfileService, create_user_event, format_event_date, format_price
)
from citysense.cache.recommendation_cache import RecommendationCache
from citysense.errors import StorageError, ValidationError
from citysense.interfaces.kv_store import MemoryKeyValueStore
from citysense.interfaces.profile_store import ProfileStore
from citysense.schemas.event_schemas import (
    Event, MOCK_TOP_ARTISTS, NewEventForm, RecommendationLevel
)

from ..fakes import FIXED_NOW


@pytest.fixture
def service(profile_store, cache) -> ProfileService:
    return ProfileService(profile_store, cache)


@pytest.mark.parametrize(
    "date, time, expected",
    [
        ("2023-10-25", "19:00", "Wed, Oct 25 • 7:00 PM"),
        ("2023-10-25", "", "Wed, Oct 25 • 12:00 AM"),
        ("2026-01-05", "12:30", "Mon, Jan 5 • 12:30 PM"),
    ],
)
def test_format_event_date(date, time, expected) -> None:
    assert format_event_date(date, time) == expected


def test_format_event_date_rejects_garbage() -> None:
    with pytest.raises(ValidationError):
        format_event_date("next tuesday", "7pm")


@pytest.mark.parametrize("price, expected", [("", "Free"), ("0", "Free"), ("25", "$25")])
def test_format_price(price, expected) -> None:
    assert format_price(price) == expected


def test_create_user_event_defaults() -> None:
    form = NewEventForm(title="Rooftop Salsa", date="2026-10-24", time="20:00", category="Nightlife")

    event = create_user_event(form, "Miami, USA", now=FIXED_NOW)

    assert event.id == f"user-{int(FIXED_NOW.timestamp() * 1000)}"
    assert event.location == "Miami, USA"
    assert event.price == "Free"
    assert event.link == "#"
    assert event.image_url == "https://picsum.photos/seed/RooftopSalsa/800/600"
    assert event.recommendation_level == RecommendationLevel.HIGHLY_RECOMMENDED
    assert event.is_user_created is True


@pytest.mark.parametrize("form", [NewEventForm(date="2026-10-24"), NewEventForm(title="Party")])
def test_create_user_event_requires_title_and_date(form) -> None:
    with pytest.raises(ValidationError):
        create_user_event(form, "Miami, USA")


def test_complete_onboarding_persists_profile(service, profile_store) -> None:
    profile = service.complete_onboarding("  ", ["Jazz", " Jazz ", "Food"], spotify_connected=True)

    assert profile.name == "Traveler"
    assert profile.interests == ["Jazz", "Food"]
    assert profile.top_artists == MOCK_TOP_ARTISTS
    assert profile_store.load_profile() == profile


def test_complete_onboarding_requires_an_interest(service, profile_store) -> None:
    with pytest.raises(ValidationError):
        service.complete_onboarding("Ada", ["  "])
    assert profile_store.load_profile() is None


def test_update_city(service) -> None:
    assert service.update_city("Paris, France") is None

    service.complete_onboarding("Ada", ["Jazz"])
    assert service.update_city("Paris, France").current_city == "Paris, France"
    assert service.get_profile().current_city == "Paris, France"


def test_reset_clears_profile_and_cache(service, cache, store) -> None:
    service.complete_onboarding("Ada", ["Jazz"])
    cache.put("CITYSENSE_EVENTS_CACHE_x", [Event(id="a", title="A")])
    store.set("unrelated", "keep")

    service.reset()

    assert service.get_profile() is None
    assert store.keys() == ["unrelated"]


def test_create_event_uses_profile_city_and_persists(service) -> None:
    service.complete_onboarding("Ada", ["Jazz"])
    service.update_city("Lagos, Nigeria")

    first = service.create_event(NewEventForm(title="One", date="2026-10-20"), now=FIXED_NOW)
    second = service.create_event(
        NewEventForm(title="Two", date="2026-10-21"), now=datetime(2026, 10, 19, 10, 0)
    )

    assert first.location == "Lagos, Nigeria"
    assert [e.id for e in service.user_events()] == [second.id, first.id]


def test_create_event_without_city(service) -> None:
    event = service.create_event(NewEventForm(title="One", date="2026-10-20"), now=FIXED_NOW)

    assert event.location == "your city"


def test_toggle_saved_round_trip(service) -> None:
    assert service.toggle_saved("evt-1") is True
    assert service.saved_event_ids() == ["evt-1"]
    assert service.toggle_saved("evt-1") is False
    assert service.saved_event_ids() == []


@pytest.fixture
def full_service() -> ProfileService:
    store = MemoryKeyValueStore(max_bytes=40)
    return ProfileService(ProfileStore(store), RecommendationCache(store))


def test_onboarding_fails_when_store_rejects_write(full_service) -> None:
    with pytest.raises(StorageError):
        full_service.complete_onboarding("Ada", ["Jazz"])
    assert full_service.get_profile() is None


def test_create_event_fails_when_store_rejects_write(full_service) -> None:
    with pytest.raises(StorageError):
        full_service.create_event(NewEventForm(title="Party", date="2026-10-20"), now=FIXED_NOW)
    assert full_service.user_events() == []
