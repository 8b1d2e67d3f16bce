# interfaces/__init__.py
"""
Interfaces Package

Contains stores and external capabilities:
- kv_store: persistent key-value stores (memory, Redis)
- profile_store: profile, user events and saved ids
- geolocation: viewer position lookup
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .kv_store import PersistentKeyValueStore, MemoryKeyValueStore, RedisKeyValueStore, create_store
    from .profile_store import ProfileStore, PROFILE_KEY, USER_EVENTS_KEY, SAVED_EVENTS_KEY
    from .geolocation import GeolocationProvider, IpGeolocationProvider

__all__ = [
    "PersistentKeyValueStore",
    "MemoryKeyValueStore",
    "RedisKeyValueStore",
    "create_store",
    "ProfileStore",
    "PROFILE_KEY",
    "USER_EVENTS_KEY",
    "SAVED_EVENTS_KEY",
    "GeolocationProvider",
    "IpGeolocationProvider"
]
