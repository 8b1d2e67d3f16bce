"""Pytest configuration for the project."""
from __future__ import annotations

import pytest

from citysense.cache.recommendation_cache import RecommendationCache
from citysense.errors import GeolocationError
from citysense.interfaces.kv_store import MemoryKeyValueStore
from citysense.interfaces.profile_store import ProfileStore
from citysense.schemas.event_schemas import UserProfile

from .fakes import FixedGeolocation


@pytest.fixture
def store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def cache(store) -> RecommendationCache:
    return RecommendationCache(store)


@pytest.fixture
def profile_store(store) -> ProfileStore:
    return ProfileStore(store)


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile(
        name="Ada",
        has_onboarded=True,
        interests=["Jazz"],
        spotify_connected=False,
        top_artists=[],
        current_city="Miami, USA",
    )


@pytest.fixture
def denied_geolocation() -> FixedGeolocation:
    return FixedGeolocation(error=GeolocationError("denied", reason=GeolocationError.PERMISSION_DENIED))
