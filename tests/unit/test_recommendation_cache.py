"""Unit tests for the daily recommendation cache."""
from __future__ import annotations

import json
from datetime import timedelta

from citysense.cache.cache_keys import make_cache_key
from citysense.cache.recommendation_cache import RecommendationCache
from citysense.errors import StorageError
from citysense.interfaces.kv_store import MemoryKeyValueStore
from citysense.schemas.event_schemas import Event, RecommendationLevel

from ..fakes import FIXED_NOW


def _events(n: int = 3):
    return [
        Event(
            id=f"evt-{i}",
            title=f"Show {i}",
            category="Music",
            image_url=f"https://img/{i}",
            link=f"https://link/{i}",
            recommendation_level=RecommendationLevel.CONSIDER,
        )
        for i in range(n)
    ]


class BrokenStore(MemoryKeyValueStore):
    def get(self, key):
        raise StorageError("backend down")

    def set(self, key, value):
        raise StorageError("quota exceeded")

    def keys(self):
        raise StorageError("backend down")


def test_put_then_get_returns_identical_events(cache) -> None:
    key = make_cache_key("Miami, USA", ["Jazz"], FIXED_NOW)
    events = _events()

    assert cache.put(key, events) is True

    assert cache.get(key) == events


def test_get_unknown_key_is_a_miss(cache) -> None:
    assert cache.get("CITYSENSE_EVENTS_CACHE_nothing") is None


def test_empty_results_are_never_cached(cache, store) -> None:
    key = make_cache_key("Miami, USA", ["Jazz"], FIXED_NOW)

    assert cache.put(key, []) is False
    assert store.get(key) is None


def test_corrupt_payload_is_a_miss_and_is_removed(cache, store) -> None:
    key = make_cache_key("Miami, USA", ["Jazz"], FIXED_NOW)
    store.set(key, "{not json")

    assert cache.get(key) is None
    assert store.get(key) is None


def test_structurally_invalid_payload_is_a_miss(cache, store) -> None:
    key = make_cache_key("Miami, USA", ["Jazz"], FIXED_NOW)
    store.set(key, json.dumps([{"title": "no id"}]))

    assert cache.get(key) is None
    assert key not in store.keys()


def test_evict_stale_removes_other_days_but_keeps_unrelated_keys(cache, store) -> None:
    yesterday = make_cache_key("Miami, USA", ["Jazz"], FIXED_NOW - timedelta(days=1))
    other_city = make_cache_key("Paris, France", ["Jazz"], FIXED_NOW - timedelta(days=1))
    today = make_cache_key("Miami, USA", ["Jazz"], FIXED_NOW)
    cache.put(yesterday, _events())
    cache.put(other_city, _events())
    cache.put(today, _events())
    store.set("citysense_user_profile", "{}")

    removed = cache.evict_stale(today)

    assert removed == 2
    assert cache.get(yesterday) is None
    assert cache.get(today) is not None
    assert store.get("citysense_user_profile") == "{}"


def test_clear_removes_every_cache_entry(cache, store) -> None:
    cache.put(make_cache_key("Miami, USA", ["Jazz"], FIXED_NOW), _events())
    store.set("savedEvents", "[]")

    cache.clear()

    assert store.keys() == ["savedEvents"]


def test_storage_faults_degrade_to_miss() -> None:
    cache = RecommendationCache(BrokenStore())

    assert cache.get("CITYSENSE_EVENTS_CACHE_x") is None
    assert cache.put("CITYSENSE_EVENTS_CACHE_x", _events()) is False
    assert cache.evict_stale("CITYSENSE_EVENTS_CACHE_x") == 0


def test_quota_exceeded_on_put_is_absorbed() -> None:
    cache = RecommendationCache(MemoryKeyValueStore(max_bytes=64))

    assert cache.put(make_cache_key("Miami, USA", ["Jazz"], FIXED_NOW), _events(10)) is False
