# schemas/__init__.py
"""
Pydantic Schemas Package

Contains all Pydantic v2 models for:
- Events and user profile (persisted state)
- Chat messages
- API requests/responses
"""

from .event_schemas import (
    # Enums & catalogues
    RecommendationLevel, LoadState, INTEREST_OPTIONS, MOCK_TOP_ARTISTS,
    # Events
    Coordinates, Event, NewEventForm,
    # Profile & chat
    UserProfile, ChatMessage,
    # API
    OnboardingRequest, SearchRequest, ChatRequest, DashboardView,
    SavedToggleResponse, HealthResponse
)

__all__ = [
    # Enums & catalogues
    "RecommendationLevel", "LoadState", "INTEREST_OPTIONS", "MOCK_TOP_ARTISTS",
    # Events
    "Coordinates", "Event", "NewEventForm",
    # Profile & chat
    "UserProfile", "ChatMessage",
    # API
    "OnboardingRequest", "SearchRequest", "ChatRequest", "DashboardView",
    "SavedToggleResponse", "HealthResponse"
]
