# schemas/event_schemas.py
"""
Pydantic v2 schemas for the CitySense service
Covers events, the user profile, chat messages and API payloads.

Persisted JSON uses the camelCase field names of the browser storage layout
(imageUrl, recommendationLevel, isUserCreated, ...); Python code reads the
snake_case attributes.
"""

from enum import Enum
from typing import Optional, List, Literal

from pydantic import BaseModel, ConfigDict, Field


# ============================================
# Enums
# ============================================

class RecommendationLevel(str, Enum):
    HIGHLY_RECOMMENDED = "Highly Recommended"
    CONSIDER = "Consider"
    NOT_RECOMMENDED = "Not Recommended"


class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


INTEREST_OPTIONS = [
    "Live Music", "Techno & House", "Afrobeats", "R&B", "Jazz", "Opera",
    "Art Galleries", "Museums", "Thrifting", "Vintage Markets",
    "Fine Dining", "Street Food", "Brunch", "Cocktail Bars", "Clubs",
    "Comedy Shows", "Theater", "Sports", "Outdoor Activities", "Tech Meetups"
]

MOCK_TOP_ARTISTS = [
    "Burna Boy", "SZA", "Fred again..", "Kaytranada", "Beyoncé"
]


class CamelModel(BaseModel):
    """Base model accepting both camelCase aliases and field names"""
    model_config = ConfigDict(populate_by_name=True)

    def to_storage(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ============================================
# Events
# ============================================

class Coordinates(BaseModel):
    lat: float
    lng: float


class Event(CamelModel):
    """A discoverable happening (AI-recommended, searched or user-created)"""
    id: str = Field(..., min_length=1)
    title: str
    description: str = ""
    date: str = ""  # display string, e.g. "Mon, Oct 25 • 7:00 PM"
    location: str = ""
    category: str = ""
    price: Optional[str] = None
    image_url: Optional[str] = Field(None, alias="imageUrl")
    link: Optional[str] = None
    recommendation_level: Optional[RecommendationLevel] = Field(None, alias="recommendationLevel")
    justification: Optional[str] = None
    coordinates: Optional[Coordinates] = None
    is_user_created: Optional[bool] = Field(None, alias="isUserCreated")


class NewEventForm(CamelModel):
    """Fields of the create-event form"""
    title: str = ""
    description: str = ""
    date: str = ""  # YYYY-MM-DD
    time: str = ""  # HH:MM, optional
    location: str = ""
    category: str = INTEREST_OPTIONS[0]
    price: str = ""
    image_url: str = Field("", alias="imageUrl")
    link: str = ""


# ============================================
# Profile
# ============================================

class UserProfile(CamelModel):
    """The viewer's durable preference state"""
    name: str = "Traveler"
    has_onboarded: bool = Field(False, alias="hasOnboarded")
    interests: List[str] = Field(default_factory=list)
    spotify_connected: bool = Field(False, alias="spotifyConnected")
    top_artists: List[str] = Field(default_factory=list, alias="topArtists")
    current_city: str = Field("", alias="currentCity")


# ============================================
# Chat
# ============================================

class ChatMessage(CamelModel):
    """Single concierge chat message"""
    id: str
    role: Literal["user", "model"]
    text: str
    is_thinking: Optional[bool] = Field(None, alias="isThinking")
    suggested_events: Optional[List[Event]] = Field(None, alias="suggestedEvents")


# ============================================
# API Requests/Responses
# ============================================

class OnboardingRequest(CamelModel):
    name: str = ""
    interests: List[str] = Field(default_factory=list)
    spotify_connected: bool = Field(False, alias="spotifyConnected")


class SearchRequest(BaseModel):
    query: str = Field(..., max_length=500)


class ChatRequest(BaseModel):
    message: str = Field(..., max_length=2000)
    history: List[ChatMessage] = Field(default_factory=list)


class DashboardView(CamelModel):
    """Display projection of the merged event set"""
    state: LoadState
    error: Optional[str] = None
    city: str = ""
    category: str = "All"
    events: List[Event] = Field(default_factory=list)
    filtered_events: List[Event] = Field(default_factory=list, alias="filteredEvents")
    top_picks: List[Event] = Field(default_factory=list, alias="topPicks")
    categories: List[str] = Field(default_factory=list)
    mappable_events: List[Event] = Field(default_factory=list, alias="mappableEvents")


class SavedToggleResponse(CamelModel):
    event_id: str = Field(..., alias="eventId")
    saved: bool


class HealthResponse(BaseModel):
    status: str
    llm_provider: str
    store_backend: str
