# interfaces/profile_store.py
"""
Profile persistence
Long-lived state kept in the key-value store until an explicit reset:
- citysense_user_profile: UserProfile (absent until onboarded)
- citysense_user_events: user-created events, newest first
- savedEvents: saved event ids

Reads tolerate corrupt values (treated as absent); write failures are
logged and reported through the return value.
"""

import json
from typing import List, Optional

from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from ..errors import StorageError
from ..schemas.event_schemas import Event, UserProfile
from .kv_store import PersistentKeyValueStore

PROFILE_KEY = "citysense_user_profile"
USER_EVENTS_KEY = "citysense_user_events"
SAVED_EVENTS_KEY = "savedEvents"


class ProfileStore:
    """Reads and writes the persisted profile, user events and saved ids"""

    def __init__(self, store: PersistentKeyValueStore):
        self.store = store

    def _read_json(self, key: str):
        try:
            raw = self.store.get(key)
        except StorageError as e:
            logger.error(f"Storage read error for {key}: {e}")
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError as e:
            logger.error(f"Failed to parse {key}: {e}")
            return None

    def _write_json(self, key: str, value) -> bool:
        try:
            self.store.set(key, json.dumps(value))
            return True
        except StorageError as e:
            logger.error(f"Failed to persist {key}: {e}")
            return False

    # ============================================
    # Profile
    # ============================================

    def load_profile(self) -> Optional[UserProfile]:
        data = self._read_json(PROFILE_KEY)
        if data is None:
            return None
        try:
            return UserProfile.model_validate(data)
        except PydanticValidationError as e:
            logger.error(f"Failed to load profile: {e}")
            return None

    def save_profile(self, profile: UserProfile) -> bool:
        return self._write_json(PROFILE_KEY, profile.to_storage())

    def clear_profile(self) -> None:
        try:
            self.store.remove(PROFILE_KEY)
        except StorageError as e:
            logger.error(f"Failed to remove profile: {e}")

    # ============================================
    # User-created events
    # ============================================

    def load_user_events(self) -> List[Event]:
        data = self._read_json(USER_EVENTS_KEY)
        if not isinstance(data, list):
            return []
        events = []
        for item in data:
            try:
                events.append(Event.model_validate(item))
            except PydanticValidationError as e:
                logger.warning(f"Skipping unreadable user event: {e}")
        return events

    def add_user_event(self, event: Event) -> bool:
        """Prepend ``event``; returns False when the write was rejected"""
        events = [event] + self.load_user_events()
        return self._write_json(USER_EVENTS_KEY, [e.to_storage() for e in events])

    # ============================================
    # Saved events
    # ============================================

    def saved_event_ids(self) -> List[str]:
        data = self._read_json(SAVED_EVENTS_KEY)
        if not isinstance(data, list):
            return []
        return [item for item in data if isinstance(item, str)]

    def is_saved(self, event_id: str) -> bool:
        return event_id in self.saved_event_ids()

    def toggle_saved(self, event_id: str) -> bool:
        """Save or unsave ``event_id``; returns the new saved flag"""
        saved = self.saved_event_ids()
        if event_id in saved:
            saved = [i for i in saved if i != event_id]
            now_saved = False
        else:
            saved.append(event_id)
            now_saved = True

        if not self._write_json(SAVED_EVENTS_KEY, saved):
            return not now_saved
        return now_saved
