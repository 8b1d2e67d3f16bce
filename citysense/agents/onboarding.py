# agents/onboarding.py
"""
Profile Service
Onboarding, city updates, profile reset, user-created events and saved ids.
Validation errors are raised before anything is written.
"""

from datetime import datetime
from typing import Iterable, List, Optional

from loguru import logger

from ..cache.recommendation_cache import RecommendationCache
from ..errors import StorageError, ValidationError
from ..interfaces.profile_store import ProfileStore
from ..llm.normalizer import placeholder_image_url
from ..schemas.event_schemas import (
    Event, MOCK_TOP_ARTISTS, NewEventForm, RecommendationLevel, UserProfile
)


def format_event_date(date: str, time_of_day: str = "") -> str:
    """
    '2023-10-25', '19:00' -> 'Wed, Oct 25 • 7:00 PM'

    Raises:
        ValidationError: unparseable date or time
    """
    try:
        dt = datetime.strptime(f"{date.strip()}T{time_of_day.strip() or '00:00'}", "%Y-%m-%dT%H:%M")
    except ValueError as e:
        raise ValidationError(f"Invalid date/time: {e}", field="date") from e

    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{dt.strftime('%a, %b')} {dt.day} • {hour}:{dt.minute:02d} {meridiem}"


def format_price(price: str) -> str:
    price = (price or "").strip()
    if not price or price == "0":
        return "Free"
    return f"${price}"


def create_user_event(form: NewEventForm, current_city: str, now: Optional[datetime] = None) -> Event:
    """
    Build a user-authored Event from the create-event form.

    User events are promoted: level Highly Recommended, isUserCreated set.
    """
    if not form.title.strip():
        raise ValidationError("Title is required", field="title")
    if not form.date.strip():
        raise ValidationError("Date is required", field="date")

    now = now or datetime.now()
    return Event(
        id=f"user-{int(now.timestamp() * 1000)}",
        title=form.title,
        description=form.description,
        date=format_event_date(form.date, form.time),
        location=form.location or current_city,
        category=form.category,
        price=format_price(form.price),
        image_url=form.image_url or placeholder_image_url(form.title),
        link=form.link or "#",
        recommendation_level=RecommendationLevel.HIGHLY_RECOMMENDED,
        is_user_created=True
    )


class ProfileService:
    """Operations on the persisted profile and user-owned data"""

    def __init__(self, profile_store: ProfileStore, cache: RecommendationCache):
        self.profile_store = profile_store
        self.cache = cache

    def get_profile(self) -> Optional[UserProfile]:
        return self.profile_store.load_profile()

    def complete_onboarding(self, name: str, interests: Iterable[str], spotify_connected: bool = False) -> UserProfile:
        """
        Create and persist the profile.

        Raises:
            ValidationError: no interests selected (nothing is persisted)
            StorageError: the store rejected the write
        """
        selected: List[str] = []
        for interest in interests:
            interest = interest.strip()
            if interest and interest not in selected:
                selected.append(interest)

        if not selected:
            raise ValidationError("Select at least one interest", field="interests")

        profile = UserProfile(
            name=name.strip() or "Traveler",
            has_onboarded=True,
            interests=selected,
            spotify_connected=spotify_connected,
            top_artists=list(MOCK_TOP_ARTISTS) if spotify_connected else [],
            current_city=""
        )
        if not self.profile_store.save_profile(profile):
            raise StorageError("Could not save profile")
        logger.info(f"Onboarded {profile.name} with {len(selected)} interests")
        return profile

    def update_city(self, city: str) -> Optional[UserProfile]:
        profile = self.profile_store.load_profile()
        if profile is None:
            return None
        if profile.current_city != city:
            profile.current_city = city
            self.profile_store.save_profile(profile)
        return profile

    def reset(self) -> None:
        """Drop the profile and every daily cache entry"""
        self.profile_store.clear_profile()
        removed = self.cache.clear()
        logger.info(f"Profile reset; cleared {removed} cached recommendation entries")

    def create_event(self, form: NewEventForm, now: Optional[datetime] = None) -> Event:
        """
        Build, persist and return a user event.

        Raises:
            ValidationError: missing title or date
            StorageError: the store rejected the write
        """
        profile = self.profile_store.load_profile()
        current_city = profile.current_city if profile and profile.current_city else "your city"
        event = create_user_event(form, current_city, now)
        if not self.profile_store.add_user_event(event):
            raise StorageError("Could not save event")
        logger.info(f"Created user event {event.id}: {event.title}")
        return event

    def user_events(self) -> List[Event]:
        return self.profile_store.load_user_events()

    def toggle_saved(self, event_id: str) -> bool:
        return self.profile_store.toggle_saved(event_id)

    def saved_event_ids(self) -> List[str]:
        return self.profile_store.saved_event_ids()
