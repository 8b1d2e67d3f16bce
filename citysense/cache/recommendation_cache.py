"""
Daily Recommendation Cache
Stores normalized event lists per (day, city, interests) scope in the
injected key-value store.

Rules:
- Only today's entry for a scope lineage survives: evict_stale() removes
  every prefixed key except the current one.
- Empty results are never cached, so a transient upstream failure is retried
  on the next load instead of being remembered as "no events".
- Cache faults never propagate: corrupt payloads and storage errors are
  logged and reported as a miss.

Usage:
    cache = RecommendationCache(store)
    key = make_cache_key(city, profile.interests)

    events = cache.get(key)
    if events is None:
        events = fetch_and_normalize()
        cache.evict_stale(key)
        cache.put(key, events)
"""

import json
from typing import List, Optional

from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from ..errors import StorageError
from ..interfaces.kv_store import PersistentKeyValueStore
from ..schemas.event_schemas import Event
from .cache_keys import CACHE_KEY_PREFIX


class RecommendationCache:
    """Get/put/evict for daily recommendation payloads"""

    def __init__(self, store: PersistentKeyValueStore, prefix: str = CACHE_KEY_PREFIX):
        self.store = store
        self.prefix = prefix

    def get(self, key: str) -> Optional[List[Event]]:
        """
        Return the cached events for ``key`` or None on a miss.

        A payload that is not a non-empty JSON array of valid events is
        treated as corruption: the entry is removed and None is returned.
        """
        try:
            raw = self.store.get(key)
        except StorageError as e:
            logger.error(f"Error reading cache: {e}")
            return None

        if raw is None:
            logger.debug(f"[Cache Miss] {key}")
            return None

        try:
            payload = json.loads(raw)
            if not isinstance(payload, list) or not payload:
                raise ValueError("payload is not a non-empty list")
            events = [Event.model_validate(item) for item in payload]
        except (ValueError, TypeError, PydanticValidationError) as e:
            logger.warning(f"Cache corrupted for {key}, fetching fresh data: {e}")
            self._discard(key)
            return None

        logger.info(f"[Cache Hit] Using {len(events)} cached events for today ({key})")
        return events

    def put(self, key: str, events: List[Event]) -> bool:
        """Store ``events`` under ``key``. Returns False when nothing was written."""
        if not events:
            logger.debug(f"Not caching empty result for {key}")
            return False

        payload = json.dumps([event.to_storage() for event in events])
        try:
            self.store.set(key, payload)
        except StorageError as e:
            logger.error(f"Error setting cache: {e}")
            return False

        logger.debug(f"Cached {len(events)} events with key: {key}")
        return True

    def evict_stale(self, current_key: str) -> int:
        """Remove every prefixed key other than ``current_key``; returns the count removed"""
        try:
            stale = [k for k in self.store.keys() if k.startswith(self.prefix) and k != current_key]
        except StorageError as e:
            logger.error(f"Error listing cache keys: {e}")
            return 0

        removed = 0
        for key in stale:
            if self._discard(key):
                removed += 1

        if removed:
            logger.info(f"[Cache Evict] Removed {removed} stale entries")
        return removed

    def clear(self) -> int:
        """Remove every cache entry (profile reset)"""
        return self.evict_stale(current_key="")

    def _discard(self, key: str) -> bool:
        try:
            self.store.remove(key)
            return True
        except StorageError as e:
            logger.error(f"Error removing cache entry {key}: {e}")
            return False
